from __future__ import annotations

from datetime import datetime

from wikistral.models.reference import ExportedReference, Reference
from wikistral.research_core.scoring import score_reference


def rank_references(
    references: list[Reference],
    *,
    now: datetime | None = None,
) -> list[Reference]:
    """Sort references by score, highest first. Equal scores keep input order."""
    scores = [score_reference(reference, now=now) for reference in references]
    order = sorted(range(len(references)), key=lambda index: scores[index], reverse=True)
    return [references[index] for index in order]


def export_references(ranked: list[Reference]) -> list[ExportedReference]:
    """Assign sequential ids (starting at 1) in rank order."""
    return [
        ExportedReference(
            id=index,
            title=reference.title,
            url=reference.url,
            domain=reference.domain,
            published_date=reference.published_date,
        )
        for index, reference in enumerate(ranked, start=1)
    ]
