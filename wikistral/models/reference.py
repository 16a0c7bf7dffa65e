from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wikistral.tools import web_utils

UNTITLED = "Untitled"


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Raw search hit as returned by a search provider."""

    url: str
    title: str = ""
    text: str = ""
    published_date: str | None = None


@dataclass(frozen=True, slots=True)
class Reference:
    """A normalized piece of evidence about the subject."""

    title: str
    url: str
    content: str
    domain: str
    published_date: str | None = None

    @classmethod
    def from_search_result(cls, result: SearchResult) -> Reference:
        title = " ".join((result.title or "").split())
        return cls(
            title=title or UNTITLED,
            url=result.url,
            content=(result.text or "").strip(),
            domain=web_utils.extract_domain(result.url),
            published_date=result.published_date or None,
        )

    @property
    def key(self) -> str:
        return web_utils.url_key(self.url)


@dataclass(frozen=True, slots=True)
class ExportedReference:
    """Reference as persisted in ``references.json``; ``id`` follows rank order."""

    id: int
    title: str
    url: str
    domain: str
    published_date: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "domain": self.domain,
        }
        if self.published_date:
            payload["publishedDate"] = self.published_date
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> ExportedReference:
        return cls(
            id=int(payload["id"]),
            title=str(payload.get("title", "")),
            url=str(payload.get("url", "")),
            domain=str(payload.get("domain", web_utils.UNKNOWN_DOMAIN)),
            published_date=payload.get("publishedDate"),
        )
