from __future__ import annotations

from wikistral.models.reference import Reference

MAX_KNOWLEDGE_BASE_SOURCES = 15


def format_source_block(index: int, reference: Reference) -> str:
    return "\n".join(
        [
            f"[Source {index}]",
            f"Title: {reference.title}",
            f"URL: {reference.url}",
            f"Domain: {reference.domain}",
            f"Content: {reference.content}",
        ]
    )


def assemble_knowledge_base(ranked: list[Reference]) -> str:
    """Render the top ranked references as numbered source blocks.

    Returns an empty string when there is no evidence at all.
    """
    top = ranked[:MAX_KNOWLEDGE_BASE_SOURCES]
    return "\n\n".join(
        format_source_block(index, reference) for index, reference in enumerate(top, start=1)
    )
