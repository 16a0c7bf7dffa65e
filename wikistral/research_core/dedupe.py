from __future__ import annotations

from wikistral.models.reference import Reference


def dedupe_references(references: list[Reference]) -> list[Reference]:
    """Drop references whose URL key was already seen, keeping first-seen order."""
    seen: set[str] = set()
    deduped: list[Reference] = []
    for reference in references:
        key = reference.key
        if key in seen:
            continue
        seen.add(key)
        deduped.append(reference)
    return deduped
