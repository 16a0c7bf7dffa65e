"""Per-reference usefulness score.

The score is a plain sum of independent bonuses and penalties computed from a
single reference; it is never normalized against the rest of the batch.
"""
from __future__ import annotations

from datetime import date, datetime, timezone

from wikistral.models.reference import Reference

# Government/education suffixes and a short list of outlets treated as authoritative.
PREFERRED_DOMAINS: tuple[str, ...] = (
    ".gov",
    ".gouv.fr",
    ".edu",
    ".ac.uk",
    "wikipedia.org",
    "britannica.com",
    "reuters.com",
    "apnews.com",
    "bbc.com",
    "bbc.co.uk",
    "nytimes.com",
    "theguardian.com",
    "lemonde.fr",
    "nature.com",
)

AUTHORITY_BONUS = 10.0
SUBSTANCE_CHARS_PER_POINT = 500
SUBSTANCE_MAX_BONUS = 5.0
SHORT_CONTENT_CHARS = 200
SHORT_CONTENT_PENALTY = 3.0

# (max age in years, bonus); first matching bracket wins
RECENCY_BRACKETS: tuple[tuple[int, float], ...] = (
    (1, 5.0),
    (3, 3.0),
    (5, 1.0),
)


def parse_published_date(value: str | None) -> datetime | None:
    """Parse an ISO-ish date string into an aware UTC datetime, or None."""
    if not value or not isinstance(value, str):
        return None
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(raw[:10]), datetime.min.time())
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def authority_bonus(reference: Reference) -> float:
    domain = reference.domain.lower()
    url = reference.url.lower()
    for preferred in PREFERRED_DOMAINS:
        if preferred in domain or preferred in url:
            return AUTHORITY_BONUS
    return 0.0


def substance_bonus(reference: Reference) -> float:
    return min(len(reference.content) / SUBSTANCE_CHARS_PER_POINT, SUBSTANCE_MAX_BONUS)


def recency_bonus(reference: Reference, *, now: datetime | None = None) -> float:
    published = parse_published_date(reference.published_date)
    if published is None:
        return 0.0
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    age_years = (current - published).total_seconds() / (365 * 24 * 3600)
    for max_years, bonus in RECENCY_BRACKETS:
        if age_years < max_years:
            return bonus
    return 0.0


def brevity_penalty(reference: Reference) -> float:
    if len(reference.content) < SHORT_CONTENT_CHARS:
        return SHORT_CONTENT_PENALTY
    return 0.0


def score_reference(reference: Reference, *, now: datetime | None = None) -> float:
    """Score one reference; higher is more useful. Scores may be negative."""
    return (
        authority_bonus(reference)
        + substance_bonus(reference)
        + recency_bonus(reference, now=now)
        - brevity_penalty(reference)
    )
