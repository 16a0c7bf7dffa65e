from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from wikistral.models.reference import SearchResult
from wikistral.tools import brave_search, exa_search, search_provider, tavily_search


def _mock_http_client(payload: dict) -> tuple[MagicMock, MagicMock]:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status = MagicMock()
    http_client = MagicMock()
    http_client.post = AsyncMock(return_value=response)
    http_client.get = AsyncMock(return_value=response)
    client_cls = MagicMock()
    client_cls.return_value.__aenter__.return_value = http_client
    return client_cls, http_client


@pytest.mark.asyncio
async def test_search_provider_dispatches_to_exa():
    with (
        patch("wikistral.tools.search_provider.settings") as mock_settings,
        patch(
            "wikistral.tools.search_provider.exa_search.search",
            new=AsyncMock(return_value=[SearchResult(url="https://a.com")]),
        ) as mock_exa,
    ):
        mock_settings.search_provider = "Exa"
        mock_settings.search_max_results_per_query = 7

        results = await search_provider.search("query")

    assert results == [SearchResult(url="https://a.com")]
    mock_exa.assert_awaited_once_with("query", max_results=7)


@pytest.mark.asyncio
async def test_search_provider_dispatches_to_brave_with_explicit_limit():
    with (
        patch("wikistral.tools.search_provider.settings") as mock_settings,
        patch(
            "wikistral.tools.search_provider.brave_search.search",
            new=AsyncMock(return_value=[]),
        ) as mock_brave,
    ):
        mock_settings.search_provider = "brave"
        mock_settings.search_max_results_per_query = 10

        await search_provider.search("query", max_results=3)

    mock_brave.assert_awaited_once_with("query", max_results=3)


@pytest.mark.asyncio
async def test_search_provider_raises_when_provider_unsupported():
    with patch("wikistral.tools.search_provider.settings") as mock_settings:
        mock_settings.search_provider = "unknown-provider"

        with pytest.raises(ValueError):
            await search_provider.search("query")


@pytest.mark.asyncio
async def test_exa_search_requires_api_key():
    with patch("wikistral.tools.exa_search.settings") as mock_settings:
        mock_settings.exa_api_key = ""

        with pytest.raises(RuntimeError):
            await exa_search.search("query")


@pytest.mark.asyncio
async def test_exa_search_maps_results():
    payload = {
        "results": [
            {
                "title": "Paris - Wikipedia",
                "url": "https://en.wikipedia.org/wiki/Paris",
                "text": "Paris is the capital of France.",
                "publishedDate": "2025-02-01T00:00:00.000Z",
            },
            {"title": "No url"},
            {"url": "https://example.com/x", "title": None, "text": None},
        ]
    }
    client_cls, http_client = _mock_http_client(payload)

    with (
        patch("wikistral.tools.exa_search.settings") as mock_settings,
        patch("wikistral.tools.exa_search.httpx.AsyncClient", client_cls),
    ):
        mock_settings.exa_api_key = "exa-key"
        mock_settings.search_timeout_seconds = 5.0

        results = await exa_search.search("Paris history", max_results=4)

    assert results == [
        SearchResult(
            title="Paris - Wikipedia",
            url="https://en.wikipedia.org/wiki/Paris",
            text="Paris is the capital of France.",
            published_date="2025-02-01T00:00:00.000Z",
        ),
        SearchResult(title="", url="https://example.com/x", text="", published_date=None),
    ]
    kwargs = http_client.post.await_args.kwargs
    assert kwargs["json"]["query"] == "Paris history"
    assert kwargs["json"]["numResults"] == 4
    assert kwargs["json"]["contents"] == {"text": True}
    assert kwargs["headers"]["x-api-key"] == "exa-key"


@pytest.mark.asyncio
async def test_brave_search_maps_snippets_and_page_age():
    payload = {
        "web": {
            "results": [
                {
                    "title": "Lyon",
                    "url": "https://www.lyon.fr/",
                    "description": "",
                    "extra_snippets": ["Lyon is a city", "in France"],
                    "page_age": "2024-09-01T10:00:00",
                }
            ]
        }
    }
    client_cls, http_client = _mock_http_client(payload)

    with (
        patch("wikistral.tools.brave_search.settings") as mock_settings,
        patch("wikistral.tools.brave_search.httpx.AsyncClient", client_cls),
    ):
        mock_settings.brave_api_key = "brave-key"
        mock_settings.search_timeout_seconds = 5.0

        results = await brave_search.search("Lyon", max_results=2)

    assert results == [
        SearchResult(
            title="Lyon",
            url="https://www.lyon.fr/",
            text="Lyon is a city in France",
            published_date="2024-09-01T10:00:00",
        )
    ]
    assert http_client.get.await_args.kwargs["params"]["count"] == 2


@pytest.mark.asyncio
async def test_tavily_search_requires_api_key():
    with patch("wikistral.tools.tavily_search.settings") as mock_settings:
        mock_settings.tavily_api_key = ""

        with pytest.raises(RuntimeError):
            await tavily_search.search("query")


@pytest.mark.asyncio
async def test_tavily_search_maps_results():
    response = {
        "results": [
            {
                "title": "Marseille",
                "url": " https://fr.wikipedia.org/wiki/Marseille ",
                "content": "Marseille est une ville du sud de la France.",
                "published_date": "2025-03-10",
            },
            {"title": "Missing url", "content": "dropped"},
            {"title": "Blank url", "url": "   ", "content": "dropped"},
            {"url": "https://example.com/port", "title": None, "content": None},
        ]
    }
    tavily_client = MagicMock()
    tavily_client.search = AsyncMock(return_value=response)

    with (
        patch("wikistral.tools.tavily_search.settings") as mock_settings,
        patch(
            "wikistral.tools.tavily_search.AsyncTavilyClient",
            return_value=tavily_client,
        ) as client_cls,
    ):
        mock_settings.tavily_api_key = "tvly-key"

        results = await tavily_search.search("Marseille history", max_results=3)

    assert results == [
        SearchResult(
            title="Marseille",
            url="https://fr.wikipedia.org/wiki/Marseille",
            text="Marseille est une ville du sud de la France.",
            published_date="2025-03-10",
        ),
        SearchResult(title="", url="https://example.com/port", text="", published_date=None),
    ]
    client_cls.assert_called_once_with(api_key="tvly-key")
    kwargs = tavily_client.search.await_args.kwargs
    assert kwargs["query"] == "Marseille history"
    assert kwargs["max_results"] == 3
