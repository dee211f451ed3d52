"""Unit tests for the Starlette response and error middleware."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from jsonapi_encoder import DocumentLinks, EncodeOptions, Encoder
from jsonapi_encoder.middleware import ErrorHandlerMiddleware
from jsonapi_encoder.responses import JSONAPI_MEDIA_TYPE, JSONAPIResponse
from jsonapi_encoder.schemas import JSONAPIDocument
from tests.factories import Article, People


@pytest.fixture
def client(encoder: Encoder, article: Article) -> TestClient:
    app = FastAPI()
    app.add_middleware(ErrorHandlerMiddleware)

    @app.get("/articles/1", response_class=JSONAPIResponse)
    async def get_article() -> JSONAPIResponse:
        document = encoder.encode_to_document(
            article, links=DocumentLinks(self="http://testserver/articles/1")
        )
        return JSONAPIResponse(document)

    @app.get("/articles", response_class=JSONAPIResponse)
    async def list_mixed() -> JSONAPIResponse:
        return JSONAPIResponse(encoder.encode_to_document([article, People(9, "Jane")]))

    @app.get("/pretty", response_class=JSONAPIResponse)
    async def pretty() -> JSONAPIResponse:
        return JSONAPIResponse({"data": []}, options=EncodeOptions(indent=2))

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("not an encoder error")

    return TestClient(app)


class TestJSONAPIResponse:
    """Tests for rendering documents in HTTP responses."""

    def test_renders_document(self, client: TestClient) -> None:
        """Test that encoded documents are served with the JSON:API media type."""
        response = client.get("/articles/1")

        assert response.status_code == 200
        assert response.headers["content-type"] == JSONAPI_MEDIA_TYPE
        document = JSONAPIDocument.model_validate(response.json())
        assert document.data["id"] == "1"
        assert document.links == {"self": "http://testserver/articles/1"}
        assert [item.id for item in document.included or []] == ["9"]

    def test_uses_render_options(self, client: TestClient) -> None:
        """Test that response options format the body."""
        assert client.get("/pretty").text == '{\n  "data": []\n}'

    def test_passes_text_through(self) -> None:
        """Test that pre-rendered text is sent unchanged."""
        assert JSONAPIResponse('{"data": null}').body == b'{"data": null}'


class TestErrorHandlerMiddleware:
    """Tests for converting encoder errors."""

    def test_encoder_error_becomes_error_document(self, client: TestClient) -> None:
        """Test that a heterogeneous collection yields a 500 error document."""
        response = client.get("/articles")

        assert response.status_code == 500
        assert response.headers["content-type"] == JSONAPI_MEDIA_TYPE
        assert response.json() == {
            "errors": [
                {
                    "status": "500",
                    "code": "heterogeneous_collection",
                    "title": "Mixed resource types in collection",
                    "detail": "Item 1 is People; all resource objects should be Article.",
                }
            ]
        }

    def test_other_errors_propagate(self, client: TestClient) -> None:
        """Test that unrelated exceptions are not swallowed."""
        with pytest.raises(RuntimeError):
            client.get("/boom")
