"""Integration tests for the text cleaning and health endpoints."""

from httpx import AsyncClient

from src.models.schemas import CleanMode, CleanResponse


class TestCleanEndpoint:
    """Integration tests for POST /clean."""

    async def test_clean_defaults_to_document_mode(self, async_client: AsyncClient) -> None:
        """Text is cleaned in document mode unless asked otherwise."""
        response = await async_client.post("/clean", json={"text": "com-\nputer\n\f12\n"})

        assert response.status_code == 200
        data = CleanResponse.model_validate(response.json())
        assert data.text == "computer"
        assert data.mode is CleanMode.DOCUMENT
        assert data.word_count == 1
        assert data.estimated_minutes == 1

    async def test_document_and_page_modes_differ(
        self, async_client: AsyncClient, book_pages: list[str]
    ) -> None:
        """Only document mode removes the repeated footer."""
        document = "\n\n".join(book_pages)

        document_response = await async_client.post(
            "/clean", json={"text": document, "mode": "document"}
        )
        page_response = await async_client.post("/clean", json={"text": document, "mode": "page"})

        assert "MyBook Inc." not in document_response.json()["text"]
        assert page_response.json()["text"].count("MyBook Inc.") == 5

    async def test_empty_text_cleans_to_empty(self, async_client: AsyncClient) -> None:
        """Empty text is accepted and returns nothing."""
        response = await async_client.post("/clean", json={"text": "", "mode": "page"})

        assert response.status_code == 200
        assert response.json() == {
            "text": "",
            "mode": "page",
            "word_count": 0,
            "estimated_minutes": 0,
        }

    async def test_unknown_mode_returns_422(self, async_client: AsyncClient) -> None:
        """Modes other than document and page are rejected."""
        response = await async_client.post("/clean", json={"text": "x", "mode": "chapter"})
        assert response.status_code == 422

    async def test_missing_text_returns_422(self, async_client: AsyncClient) -> None:
        """The text field is required."""
        response = await async_client.post("/clean", json={"mode": "page"})
        assert response.status_code == 422


class TestHealth:
    """Tests for GET /health."""

    async def test_health_check(self, async_client: AsyncClient) -> None:
        """Health endpoint reports the service as healthy."""
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "pdf-narrator"}
