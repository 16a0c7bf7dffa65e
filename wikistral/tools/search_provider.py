from __future__ import annotations

from wikistral.config import settings
from wikistral.models.reference import SearchResult
from wikistral.tools import brave_search, exa_search, tavily_search


async def search(query: str, *, max_results: int | None = None) -> list[SearchResult]:
    """Run one query against the configured search provider."""
    provider = settings.search_provider.lower().strip()
    limit = max_results or settings.search_max_results_per_query

    if provider == "exa":
        return await exa_search.search(query, max_results=limit)

    if provider == "brave":
        return await brave_search.search(query, max_results=limit)

    if provider == "tavily":
        return await tavily_search.search(query, max_results=limit)

    raise ValueError(f"Unsupported SEARCH_PROVIDER: {settings.search_provider}")
