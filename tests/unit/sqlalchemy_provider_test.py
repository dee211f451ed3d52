"""Unit tests for the SQLAlchemy schema provider."""

import pytest
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

from jsonapi_encoder import Encoder
from jsonapi_encoder.sqlalchemy import SQLAlchemySchemaProvider
from tests.factories import decode, included_keys

Base = declarative_base()


class Author(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    author_id = Column(Integer, ForeignKey("authors.id"))
    author = relationship("Author")
    reviews = relationship("Review")


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    body = Column(String, nullable=False)
    book_id = Column(Integer, ForeignKey("books.id"))


class AuthorSchema(SQLAlchemySchemaProvider):
    class Meta:
        type_ = "authors"
        model = Author


class BookSchema(SQLAlchemySchemaProvider):
    class Meta:
        type_ = "books"
        model = Book
        included = ("author", "reviews")
        related = ("author",)


class ReviewSchema(SQLAlchemySchemaProvider):
    class Meta:
        type_ = "reviews"
        model = Review
        fields = ["body", "book_id"]


@pytest.fixture
def encoder() -> Encoder:
    return Encoder.instance({Author: AuthorSchema, Book: BookSchema, Review: ReviewSchema})


class TestSQLAlchemySchemaProvider:
    """Tests for mapper-driven resources."""

    def test_requires_model(self) -> None:
        """Test that Meta.model must be configured."""

        class Broken(SQLAlchemySchemaProvider):
            class Meta:
                type_ = "broken"

        with pytest.raises(ValueError):
            Broken()

    def test_id_from_primary_key(self) -> None:
        """Test ids taken from the mapper's primary key."""
        schema = BookSchema()
        assert schema.get_id(Book(id=7, title="T")) == "7"
        assert schema.get_id(Book(title="Unsaved")) == ""

    def test_attributes_skip_primary_and_foreign_keys(self) -> None:
        """Test column attributes exposed by default."""
        schema = BookSchema()
        assert schema.get_attributes(Book(id=1, title="T", author_id=2)) == {"title": "T"}

    def test_explicit_fields(self) -> None:
        """Test that Meta.fields selects attributes."""
        schema = ReviewSchema()
        assert schema.get_attributes(Review(id=1, body="ok", book_id=3)) == {
            "body": "ok",
            "book_id": 3,
        }

    def test_link_descriptors_follow_mapper_relationships(self) -> None:
        """Test flags derived from Meta lists."""
        links = {link.name: link for link in BookSchema().get_links(Book(id=1, title="T"))}
        assert set(links) == {"author", "reviews"}
        assert links["author"].should_be_included
        assert links["author"].show_self and links["author"].show_related
        assert not links["reviews"].show_related

    def test_unloaded_relationships_are_null_or_empty(self) -> None:
        """Test that relationships never set are not lazy loaded."""
        links = {link.name: link for link in BookSchema().get_links(Book(id=1, title="T"))}
        assert links["author"].linked_data is None
        assert links["reviews"].linked_data == []

    def test_encodes_book_with_relationships(self, encoder: Encoder) -> None:
        """Test a full document from transient mapped objects."""
        book = Book(
            id=1,
            title="Dune",
            author=Author(id=2, name="Frank"),
            reviews=[Review(id=5, body="Classic"), Review(id=6, body="Long")],
        )
        document = decode(encoder, book)

        relationships = document["data"]["relationships"]
        assert relationships["author"] == {
            "data": {"type": "authors", "id": "2"},
            "links": {
                "self": "/books/1/relationships/author",
                "related": "/books/1/author",
            },
        }
        assert relationships["reviews"] == {
            "data": [{"type": "reviews", "id": "5"}, {"type": "reviews", "id": "6"}]
        }
        assert sorted(included_keys(document)) == [
            ("authors", "2"),
            ("reviews", "5"),
            ("reviews", "6"),
        ]

    def test_references(self) -> None:
        """Test that Meta.references renders relationships as related URLs."""

        class ReferencedBookSchema(SQLAlchemySchemaProvider):
            class Meta:
                type_ = "books"
                model = Book
                base_url = "http://example.com"
                references = ("reviews",)

        encoder = Encoder.instance({Book: ReferencedBookSchema, Author: AuthorSchema})
        document = decode(encoder, Book(id=1, title="Dune", reviews=[Review(id=5, body="ok")]))
        assert document["data"]["relationships"]["reviews"] == {
            "links": {"related": "http://example.com/books/1/reviews"}
        }

    def test_relationship_options_default_to_empty_tuples(self) -> None:
        """Test read-only defaults when Meta omits the relationship lists."""
        assert SQLAlchemySchemaProvider.Meta.included == ()
        assert SQLAlchemySchemaProvider.Meta.related == ()
        assert SQLAlchemySchemaProvider.Meta.references == ()

        class PlainBookSchema(SQLAlchemySchemaProvider):
            class Meta:
                type_ = "books"
                model = Book

        links = list(PlainBookSchema().get_links(Book(id=1, title="T")))
        assert [
            (link.should_be_included, link.show_related, link.show_as_reference) for link in links
        ] == [(False, False, False)] * len(links)
