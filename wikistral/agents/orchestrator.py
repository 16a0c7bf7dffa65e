from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable

from wikistral.categories import Category
from wikistral.models.reference import ExportedReference, Reference, SearchResult
from wikistral.research_core.dedupe import dedupe_references
from wikistral.research_core.knowledge_base import assemble_knowledge_base
from wikistral.research_core.planner import plan_queries
from wikistral.research_core.ranking import export_references, rank_references
from wikistral.services import logger as log_service
from wikistral.services.fanout import fan_out
from wikistral.tools import search_provider

SearchFn = Callable[[str], Awaitable[list[SearchResult]]]


@dataclass
class ResearchResult:
    """Ranked evidence for one subject."""

    references: list[Reference] = field(default_factory=list)
    knowledge_base: str = ""

    def exported_references(self) -> list[ExportedReference]:
        return export_references(self.references)


class ResearchOrchestrator:
    """Gathers and ranks evidence about a subject.

    Flow:
      1. Plan the category-specific queries
      2. Fan out: run every query concurrently; a failing query contributes nothing
      3. Flatten results in query order
      4. Dedupe, score and rank
      5. Assemble the knowledge base from the top-ranked references
    """

    def __init__(self, search: SearchFn | None = None):
        self.search = search or search_provider.search

    async def _run_query(self, query: str) -> list[Reference]:
        results = await self.search(query)
        references: list[Reference] = []
        for result in results:
            if not isinstance(result.url, str) or not result.url.strip():
                continue
            references.append(Reference.from_search_result(result))
        return references

    async def research(self, subject: str, category: Category) -> ResearchResult:
        queries = plan_queries(subject, category)
        log_service.log_research_step(
            subject, "plan", "completed", {"category": category.value, "queries": queries}
        )

        outcomes = await fan_out(self._run_query(query) for query in queries)

        collected: list[Reference] = []
        for query, outcome in zip(queries, outcomes):
            if not outcome.ok:
                log_service.log_research_step(
                    subject,
                    "search",
                    "failed",
                    {"query": query, "error": f"{type(outcome.error).__name__}: {outcome.error}"},
                )
                continue
            references = outcome.unwrap()
            log_service.log_research_step(
                subject, "search", "completed", {"query": query, "results_count": len(references)}
            )
            collected.extend(references)

        unique = dedupe_references(collected)
        ranked = rank_references(unique)
        knowledge_base = assemble_knowledge_base(ranked)

        log_service.log_research_step(
            subject,
            "rank",
            "completed",
            {
                "raw_count": len(collected),
                "unique_count": len(unique),
                "knowledge_base_chars": len(knowledge_base),
            },
        )
        return ResearchResult(references=ranked, knowledge_base=knowledge_base)
