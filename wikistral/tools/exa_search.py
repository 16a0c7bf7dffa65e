from __future__ import annotations

from typing import Any

import httpx

from wikistral.config import settings
from wikistral.models.reference import SearchResult

EXA_SEARCH_URL = "https://api.exa.ai/search"


def _map_results(payload: dict[str, Any]) -> list[SearchResult]:
    mapped: list[SearchResult] = []
    for item in payload.get("results", []) or []:
        url = item.get("url")
        if not isinstance(url, str) or not url.strip():
            continue
        mapped.append(
            SearchResult(
                title=item.get("title") or "",
                url=url.strip(),
                text=item.get("text") or "",
                published_date=item.get("publishedDate") or None,
            )
        )
    return mapped


async def search(query: str, *, max_results: int = 10) -> list[SearchResult]:
    """Execute an Exa search with page text included.

    API: POST https://api.exa.ai/search
    Headers:
        - x-api-key: <api_key>
    Body:
        {"query": ..., "numResults": N, "contents": {"text": true}}
    """
    if not settings.exa_api_key:
        raise RuntimeError("EXA_API_KEY is not configured")

    body = {
        "query": query,
        "numResults": max_results,
        "type": "auto",
        "contents": {"text": True},
    }

    async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
        response = await client.post(
            EXA_SEARCH_URL,
            json=body,
            headers={
                "Accept": "application/json",
                "x-api-key": settings.exa_api_key,
            },
        )
        response.raise_for_status()
        payload = response.json()

    return _map_results(payload)
