from __future__ import annotations

from dataclasses import dataclass, field

from wikistral.models.reference import ExportedReference


@dataclass
class ArticleContent:
    """The three persisted artifacts of one (language, subject) article."""

    slug: str
    language: str
    facts: dict[str, str] = field(default_factory=dict)
    references: list[ExportedReference] = field(default_factory=list)
    content: str = ""
