from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path

import httpx

from wikistral.config import settings
from wikistral.models.article import ArticleContent
from wikistral.models.reference import ExportedReference
from wikistral.services import logger as log_service

FACTS_FILE = "facts.json"
REFERENCES_FILE = "references.json"
CONTENT_FILE = "content.md"


def slugify(subject: str) -> str:
    """Lowercase and collapse every run of non-alphanumeric characters to '-'."""
    return re.sub(r"[^a-z0-9]+", "-", subject.lower())


class ContentStore:
    """File-backed storage for generated articles.

    Layout: ``{base_dir}/{language}/{slug}/{facts.json,references.json,content.md}``.
    """

    def __init__(self, *, base_dir: str | Path | None = None):
        self.base_dir = Path(base_dir if base_dir is not None else settings.content_dir)

    def article_dir(self, slug: str, language: str) -> Path:
        return self.base_dir / language / slugify(slug)

    def write_article(self, article: ArticleContent) -> Path:
        path = self.article_dir(article.slug, article.language)
        path.mkdir(parents=True, exist_ok=True)
        (path / FACTS_FILE).write_text(
            json.dumps(article.facts, ensure_ascii=False, indent=2), encoding="utf-8"
        )
        (path / REFERENCES_FILE).write_text(
            json.dumps(
                [reference.to_dict() for reference in article.references],
                ensure_ascii=False,
                indent=2,
            ),
            encoding="utf-8",
        )
        (path / CONTENT_FILE).write_text(article.content, encoding="utf-8")
        log_service.log_event(
            "article_written",
            f"Wrote {article.language}/{path.name}",
            path=str(path),
            references=len(article.references),
        )
        return path

    def read_local(self, slug: str, language: str) -> ArticleContent | None:
        path = self.article_dir(slug, language)
        facts_path = path / FACTS_FILE
        if not facts_path.is_file():
            return None

        refs_path = path / REFERENCES_FILE
        content_path = path / CONTENT_FILE
        facts = json.loads(facts_path.read_text(encoding="utf-8"))
        refs = (
            json.loads(refs_path.read_text(encoding="utf-8")) if refs_path.is_file() else []
        )
        content = content_path.read_text(encoding="utf-8") if content_path.is_file() else ""
        return ArticleContent(
            slug=slug,
            language=language,
            facts=facts,
            references=[ExportedReference.from_dict(item) for item in refs],
            content=content,
        )

    async def _fetch_text(self, client: httpx.AsyncClient, url: str) -> str | None:
        try:
            response = await client.get(url)
        except httpx.HTTPError as exc:
            log_service.log_event("content_fetch_failed", url, error=str(exc))
            return None
        if response.status_code != 200:
            return None
        return response.text

    async def read_remote(self, slug: str, language: str) -> ArticleContent | None:
        base = settings.content_repo_url.rstrip("/")
        prefix = f"{base}/{language}/{slugify(slug)}"
        async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
            facts_json, refs_json, content = await asyncio.gather(
                self._fetch_text(client, f"{prefix}/{FACTS_FILE}"),
                self._fetch_text(client, f"{prefix}/{REFERENCES_FILE}"),
                self._fetch_text(client, f"{prefix}/{CONTENT_FILE}"),
            )

        if not facts_json:
            return None
        refs = json.loads(refs_json) if refs_json else []
        return ArticleContent(
            slug=slug,
            language=language,
            facts=json.loads(facts_json),
            references=[ExportedReference.from_dict(item) for item in refs],
            content=content or "",
        )

    async def get_article(self, slug: str, language: str) -> ArticleContent | None:
        """Read an article from disk, or from the published repo in production."""
        article = self.read_local(slug, language)
        if article is not None:
            return article
        if settings.is_production:
            return await self.read_remote(slug, language)
        return None

    def list_articles(self, language: str) -> list[str]:
        path = self.base_dir / language
        if not path.is_dir():
            return []
        return sorted(entry.name for entry in path.iterdir() if entry.is_dir())
