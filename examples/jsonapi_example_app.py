"""Example FastAPI app encoding SQLAlchemy models as JSON:API documents.

Run with:
    uvicorn examples.jsonapi_example_app:app --reload
"""
from __future__ import annotations

import os
import sys
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, Request
from sqlalchemy import Column, ForeignKey, Integer, String, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, relationship, selectinload, sessionmaker

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from jsonapi_encoder import DocumentLinks, Encoder  # noqa: E402
from jsonapi_encoder.middleware import ErrorHandlerMiddleware  # noqa: E402
from jsonapi_encoder.responses import JSONAPIResponse  # noqa: E402
from jsonapi_encoder.sqlalchemy import SQLAlchemySchemaProvider  # noqa: E402

DATABASE_URL = "sqlite+aiosqlite:///./jsonapi_example.db"
BASE_URL = "http://localhost:8000/api/v1"

engine = create_async_engine(DATABASE_URL, echo=True)
async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author")


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("users.id"))
    author = relationship("User", back_populates="articles")
    comments = relationship("Comment", back_populates="article")


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True)
    body = Column(String, nullable=False)
    article_id = Column(Integer, ForeignKey("articles.id"))
    article = relationship("Article", back_populates="comments")


class UserSchema(SQLAlchemySchemaProvider):
    class Meta:
        type_ = "users"
        model = User
        base_url = BASE_URL
        references = ("articles",)


class ArticleSchema(SQLAlchemySchemaProvider):
    class Meta:
        type_ = "articles"
        model = Article
        base_url = BASE_URL
        included = ("author", "comments")
        related = ("author", "comments")
        include_depth = 2


class CommentSchema(SQLAlchemySchemaProvider):
    class Meta:
        type_ = "comments"
        model = Comment
        base_url = BASE_URL
        fields = ["body"]


encoder = Encoder.instance(
    {
        User: UserSchema,
        Article: ArticleSchema,
        Comment: CommentSchema,
    }
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def seed_example_data(session: AsyncSession) -> None:
    """Insert example users, articles and comments if empty."""
    result = await session.execute(select(User.id).limit(1))
    if result.first() is not None:
        return

    jane = User(name="Jane Doe", email="jane.doe@example.com")
    john = User(name="John Smith", email="john.smith@example.com")
    session.add_all([jane, john])
    await session.flush()

    first = Article(title="JSON:API with FastAPI", body="Encoding object graphs.", author_id=jane.id)
    second = Article(title="Include depth", body="Bounding relationship walks.", author_id=john.id)
    session.add_all([first, second])
    await session.flush()

    session.add_all(
        [
            Comment(body="Great article!", article_id=first.id),
            Comment(body="Helpful examples.", article_id=first.id),
            Comment(body="Thanks for sharing.", article_id=second.id),
        ]
    )
    await session.commit()


app = FastAPI(
    title="JSON:API Encoder Example",
    description="Example API encoding SQLAlchemy models as JSON:API v1.1.",
    version="0.1.0",
)
app.add_middleware(ErrorHandlerMiddleware)


@app.on_event("startup")
async def on_startup() -> None:
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    async with async_session() as session:
        await seed_example_data(session)


def _article_query():
    return select(Article).options(
        selectinload(Article.author),
        selectinload(Article.comments),
    )


@app.get("/api/v1/articles", response_class=JSONAPIResponse)
async def list_articles(request: Request, session: AsyncSession = Depends(get_session)) -> JSONAPIResponse:
    articles = (await session.execute(_article_query())).scalars().all()
    document = encoder.encode_to_document(
        list(articles),
        links=DocumentLinks(self=str(request.url)),
        meta={"total": len(articles)},
    )
    return JSONAPIResponse(document)


@app.get("/api/v1/articles/{article_id}", response_class=JSONAPIResponse)
async def get_article(
    article_id: int, request: Request, session: AsyncSession = Depends(get_session)
) -> JSONAPIResponse:
    article = (
        await session.execute(_article_query().where(Article.id == article_id))
    ).scalar_one_or_none()
    document = encoder.encode_to_document(article, links=DocumentLinks(self=str(request.url)))
    return JSONAPIResponse(document)
