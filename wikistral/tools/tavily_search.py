from __future__ import annotations

from typing import Any

from tavily import AsyncTavilyClient

from wikistral.config import settings
from wikistral.models.reference import SearchResult


async def search(
    query: str,
    *,
    max_results: int = 10,
    search_depth: str = "advanced",
) -> list[SearchResult]:
    """Execute a Tavily web search and return structured results."""
    if not settings.tavily_api_key:
        raise RuntimeError("TAVILY_API_KEY is not configured")

    client = AsyncTavilyClient(api_key=settings.tavily_api_key)

    kwargs: dict[str, Any] = {
        "query": query,
        "search_depth": search_depth,
        "max_results": max_results,
        "topic": "general",
    }
    response = await client.search(**kwargs)

    return [
        SearchResult(
            title=r.get("title", "") or "",
            url=r["url"].strip(),
            text=r.get("content", "") or "",
            published_date=r.get("published_date") or None,
        )
        for r in response.get("results", [])
        if isinstance(r.get("url"), str) and r["url"].strip()
    ]
