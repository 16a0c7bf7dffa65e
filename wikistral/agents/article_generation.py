from __future__ import annotations

import time

from wikistral import llm_client
from wikistral.agents.orchestrator import ResearchOrchestrator, ResearchResult
from wikistral.categories import Category, Facts, Language, profile_for
from wikistral.models.article import ArticleContent
from wikistral.services import logger as log_service
from wikistral.services.content_store import ContentStore, slugify
from wikistral.services.fanout import fan_out
from wikistral.services.prompt_store import render_prompt, render_prompt_pair


class ArticleGeneration:
    """Generates and stores one article for a (category, language, subject).

    Research failures degrade to an empty knowledge base; a failure of either
    generation call aborts the run and nothing is written.
    """

    def __init__(
        self,
        *,
        category: Category,
        language: Language,
        subject: str,
        orchestrator: ResearchOrchestrator | None = None,
        store: ContentStore | None = None,
    ):
        self.category = category
        self.language = language
        self.subject = subject
        self.profile = profile_for(category)
        self.orchestrator = orchestrator or ResearchOrchestrator()
        self.store = store or ContentStore()

    def _prompt_values(self, knowledge_base: str) -> dict[str, str]:
        return {
            "subject": self.subject,
            "category_label": self.profile.label,
            "language_name": self.language.display_name,
            "knowledge_base": knowledge_base or render_prompt("no_sources"),
        }

    async def _generate_facts(self, knowledge_base: str) -> Facts:
        prompts = render_prompt_pair("facts", **self._prompt_values(knowledge_base))
        return await llm_client.generate_object(
            prompts.user,
            self.profile.facts_model,
            system=prompts.system,
        )

    async def _generate_content(self, knowledge_base: str) -> str:
        prompts = render_prompt_pair("article", **self._prompt_values(knowledge_base))
        return await llm_client.generate_text(prompts.user, system=prompts.system)

    async def start(self, research: ResearchResult | None = None) -> ArticleContent:
        log_service.log_event(
            "generation_started",
            f"Generating article about {self.subject} in {self.language.value} "
            f"({self.category.value})",
        )
        started = time.monotonic()

        if research is None:
            research = await self.orchestrator.research(self.subject, self.category)

        facts_outcome, content_outcome = await fan_out(
            [
                self._generate_facts(research.knowledge_base),
                self._generate_content(research.knowledge_base),
            ]
        )
        facts = facts_outcome.unwrap()
        content = content_outcome.unwrap()

        article = ArticleContent(
            slug=slugify(self.subject),
            language=self.language.value,
            facts=facts.to_dict(),
            references=research.exported_references(),
            content=content.strip() + "\n" if content.strip() else "",
        )
        self.store.write_article(article)

        log_service.log_event(
            "generation_completed",
            f"Generated {self.language.value}/{article.slug}",
            references=len(article.references),
            runtime_ms=int((time.monotonic() - started) * 1000),
        )
        return article
