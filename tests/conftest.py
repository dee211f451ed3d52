"""Shared fixtures for tests."""

from typing import Any

import pytest

from jsonapi_encoder import Encoder, LinkDescriptor, SchemaProvider
from tests.factories import Article, Comment, People, article_links, make_schema


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


@pytest.fixture
def people_schema() -> type[SchemaProvider]:
    return make_schema("people", fields=["name"])


@pytest.fixture
def comment_schema() -> type[SchemaProvider]:
    def links(comment: Any) -> list[LinkDescriptor]:
        return [LinkDescriptor(name="author", linked_data=comment.author, should_be_included=True)]

    return make_schema("comment", fields=["body"], links=links, include_depth=2)


@pytest.fixture
def encoder(
    people_schema: type[SchemaProvider], comment_schema: type[SchemaProvider]
) -> Encoder:
    """Encoder whose articles include their author and comments."""
    article_schema = make_schema(
        "article",
        fields=["title"],
        links=article_links(
            author={"should_be_included": True},
            comments={"should_be_included": True},
        ),
        include_depth=2,
    )
    return Encoder.instance(
        {Article: article_schema, People: people_schema, Comment: comment_schema}
    )


@pytest.fixture
def jane() -> People:
    return People(9, "Jane")


@pytest.fixture
def article(jane: People) -> Article:
    return Article(1, "JSON:API paints my bikeshed!", author=jane)
