"""Keyword classifier: Arabic news text -> location, category, needs, severity.

Pure functions over the static tables in ``keyword_tables``. Matching is
plain substring containment; there is no tokenisation or stemming.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from app.classification.keyword_tables import (
    CIVILIAN_KEYWORDS,
    CONTEXT_RULES,
    EXCLUDE_KEYWORDS,
    PLACE_RULES,
    REGION_CENTER,
    REGION_NAMES,
    SEVERITY_RULES,
)
from app.classification.types import (
    ContextGroup,
    ExtractionResult,
    KeywordRule,
    PlaceInfo,
    Severity,
    SeverityLevel,
    Status,
)

T = TypeVar("T")


def _contains_any(content: str, keywords: Sequence[str]) -> bool:
    return any(keyword in content for keyword in keywords)


def first_match(rules: Sequence[KeywordRule[T]], content: str) -> T | None:
    """Return the result of the first rule matching *content*, or None."""
    for rule in rules:
        if rule.matches(content):
            return rule.result
    return None


def all_matches(rules: Sequence[KeywordRule[T]], content: str) -> list[T]:
    """Return results of every matching rule, in table order."""
    return [rule.result for rule in rules if rule.matches(content)]


def has_region_context(content: str) -> bool:
    return _contains_any(content, REGION_NAMES)


def is_civilian(content: str) -> bool:
    return _contains_any(content, CIVILIAN_KEYWORDS)


def is_military(content: str) -> bool:
    return _contains_any(content, EXCLUDE_KEYWORDS)


def should_include(content: str) -> bool:
    """Inclusion filter applied before classification.

    Military/occupation coverage is dropped unless the same text carries a
    civilian or humanitarian signal; the civilian signal always wins.
    """
    if not is_military(content):
        return True
    return is_civilian(content)


def _merge_needs(existing: list[str], extra: Sequence[str]) -> list[str]:
    merged = list(existing)
    for need in extra:
        if need not in merged:
            merged.append(need)
    return merged


def classify(
    content: str,
    *,
    places: Sequence[KeywordRule[PlaceInfo]] = PLACE_RULES,
    contexts: Sequence[KeywordRule[ContextGroup]] = CONTEXT_RULES,
    severities: Sequence[KeywordRule[SeverityLevel]] = SEVERITY_RULES,
) -> ExtractionResult:
    """Classify a news update.

    - Location: first place in *places* whose name occurs in the text. When
      none does, text mentioning the region together with a civilian keyword
      is pinned to the region centre.
    - Needs: place defaults, then the needs of every matching context group
      (order-preserving union). The first matching group sets the category
      when the place lookup did not.
    - Severity/status: first matching severity level, default low/ACTIVE.

    Never raises; a result without a location is simply not mappable.
    """
    location: tuple[float, float] | None = None
    category = None
    needs: list[str] = []
    place_name: str | None = None

    place = first_match(places, content)
    if place is None and has_region_context(content) and is_civilian(content):
        place = REGION_CENTER
    if place is not None:
        location = place.coordinates
        category = place.category
        needs = list(place.default_needs)
        place_name = place.name

    for group in all_matches(contexts, content):
        if category is None:
            category = group.category
        needs = _merge_needs(needs, group.needs)

    severity = Severity.LOW
    status = Status.ACTIVE
    level = first_match(severities, content)
    if level is not None:
        severity = level.severity
        status = level.status

    return ExtractionResult(
        location=location,
        type=category,
        needs=needs,
        status=status,
        severity=severity,
        place_name=place_name,
    )
