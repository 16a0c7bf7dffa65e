"""Article categories and languages.

Every category owns one ``CategoryProfile``: the three search query templates
used to research a subject and the facts model the infobox is extracted into.
Adding a category means adding an enum member and its profile; the module
refuses to import when a member has no profile.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

UNKNOWN = "Unknown"


class Category(str, Enum):
    CITIES = "cities"
    COMPANIES = "companies"
    PEOPLE = "people"


class Language(str, Enum):
    EN = "en"
    FR = "fr"

    @property
    def display_name(self) -> str:
        return LANGUAGE_NAMES[self]


LANGUAGE_NAMES: dict[Language, str] = {
    Language.EN: "English",
    Language.FR: "French",
}


class Facts(BaseModel):
    """Base infobox record. Field names serialize to camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_text(cls, value: Any) -> Any:
        # JSON mode does not enforce the schema: nulls, numbers and lists still arrive
        if value is None:
            return UNKNOWN
        if isinstance(value, (bool, int, float)):
            return str(value)
        if isinstance(value, (list, tuple)):
            parts = [str(item).strip() for item in value if item is not None and str(item).strip()]
            return ", ".join(parts) or UNKNOWN
        if isinstance(value, str) and not value.strip():
            return UNKNOWN
        return value

    def to_dict(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class CityFacts(Facts):
    country: str = UNKNOWN
    region: str = UNKNOWN
    population: str = UNKNOWN
    area: str = UNKNOWN
    timezone: str = UNKNOWN
    mayor: str = UNKNOWN
    founded: str = UNKNOWN


class CompanyFacts(Facts):
    type: str = UNKNOWN
    industry: str = UNKNOWN
    founded: str = UNKNOWN
    founders: str = UNKNOWN
    headquarters: str = UNKNOWN
    key_people: str = UNKNOWN
    employees: str = UNKNOWN
    website: str = UNKNOWN


class PersonFacts(Facts):
    born: str = UNKNOWN
    died: str = UNKNOWN
    nationality: str = UNKNOWN
    occupation: str = UNKNOWN
    years_active: str = UNKNOWN
    known_for: str = UNKNOWN
    notable_works: str = UNKNOWN


@dataclass(frozen=True, slots=True)
class CategoryProfile:
    label: str
    query_templates: tuple[str, str, str]
    facts_model: type[Facts]

    def queries(self, subject: str) -> list[str]:
        return [template.format(subject=subject) for template in self.query_templates]


CATEGORY_PROFILES: dict[Category, CategoryProfile] = {
    Category.CITIES: CategoryProfile(
        label="city",
        query_templates=(
            "{subject} city history",
            "{subject} economy demographics population",
            "{subject} local government mayor administration",
        ),
        facts_model=CityFacts,
    ),
    Category.COMPANIES: CategoryProfile(
        label="company",
        query_templates=(
            "{subject} company history founding",
            "{subject} products and services",
            "{subject} leadership CEO executives",
        ),
        facts_model=CompanyFacts,
    ),
    Category.PEOPLE: CategoryProfile(
        label="person",
        query_templates=(
            "{subject} biography",
            "{subject} achievements career",
            "{subject} awards honors recognition",
        ),
        facts_model=PersonFacts,
    ),
}

_missing = [category.value for category in Category if category not in CATEGORY_PROFILES]
if _missing:
    raise RuntimeError(f"Categories without a profile: {', '.join(_missing)}")


def profile_for(category: Category) -> CategoryProfile:
    return CATEGORY_PROFILES[category]


def parse_category(value: str) -> Category:
    """Parse a user-supplied category name; raises ValueError when unsupported."""
    return Category(value.lower().strip())


def parse_language(value: str) -> Language:
    """Parse a user-supplied language code; raises ValueError when unsupported."""
    return Language(value.lower().strip())
