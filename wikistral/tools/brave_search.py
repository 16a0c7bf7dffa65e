from __future__ import annotations

from typing import Any

import httpx

from wikistral.config import settings
from wikistral.models.reference import SearchResult

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"


def _map_results(payload: dict[str, Any]) -> list[SearchResult]:
    raw_results = payload.get("web", {}).get("results", []) or []
    mapped: list[SearchResult] = []
    for item in raw_results:
        url = item.get("url")
        if not isinstance(url, str) or not url.strip():
            continue
        snippets = item.get("extra_snippets", []) or []
        description = item.get("description", "") or ""
        text = description.strip() or " ".join(snippets).strip()
        mapped.append(
            SearchResult(
                title=item.get("title", "") or "",
                url=url.strip(),
                text=text,
                # page_age is ISO formatted; age is a human string ("2 days ago")
                published_date=item.get("page_age") or None,
            )
        )
    return mapped


async def search(query: str, *, max_results: int = 10) -> list[SearchResult]:
    """Execute a Brave web search and normalize results."""
    if not settings.brave_api_key:
        raise RuntimeError("BRAVE_API_KEY is not configured")

    params: dict[str, Any] = {
        "q": query,
        "count": max_results,
        "extra_snippets": "true",
    }

    async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
        response = await client.get(
            BRAVE_SEARCH_URL,
            params=params,
            headers={
                "Accept": "application/json",
                "X-Subscription-Token": settings.brave_api_key,
            },
        )
        response.raise_for_status()
        payload = response.json()

    return _map_results(payload)
