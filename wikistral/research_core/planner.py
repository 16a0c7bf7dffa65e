from __future__ import annotations

from wikistral.categories import Category, profile_for


def plan_queries(subject: str, category: Category) -> list[str]:
    """Build the fixed set of search queries for a subject in a category."""
    cleaned = " ".join(subject.split()).strip()
    return profile_for(category).queries(cleaned)
