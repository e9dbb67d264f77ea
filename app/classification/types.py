"""Classification vocabulary: categories, statuses, severities and rule types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Category(str, Enum):
    """Kind of aid a location provides or needs."""

    MEDICAL = "MEDICAL"
    FOOD = "FOOD"
    SHELTER = "SHELTER"
    WATER = "WATER"
    SUPPLIES = "SUPPLIES"
    OTHER = "OTHER"


class Status(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    NEEDS_SUPPORT = "NEEDS_SUPPORT"
    TEMPORARILY_CLOSED = "TEMPORARILY_CLOSED"


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class KeywordRule(Generic[T]):
    """One ``(predicate, result)`` pair of an ordered keyword table.

    The predicate is satisfied when any keyword is a substring of the text.
    Tables are evaluated in list order; for first-match tables, list order is
    the tie-break between rules that both match.
    """

    keywords: tuple[str, ...]
    result: T

    def matches(self, content: str) -> bool:
        return any(keyword in content for keyword in self.keywords)


@dataclass(frozen=True)
class PlaceInfo:
    """Known place: coordinates, default category and default needs."""

    name: str
    coordinates: tuple[float, float]
    category: Category
    default_needs: tuple[str, ...]


@dataclass(frozen=True)
class ContextGroup:
    category: Category
    needs: tuple[str, ...]


@dataclass(frozen=True)
class SeverityLevel:
    severity: Severity
    status: Status


@dataclass(frozen=True)
class ExtractionResult:
    """What the classifier could derive from one news update."""

    location: tuple[float, float] | None = None
    type: Category | None = None
    needs: list[str] = field(default_factory=list)
    status: Status = Status.ACTIVE
    severity: Severity = Severity.LOW
    place_name: str | None = None

    @property
    def is_mappable(self) -> bool:
        """True when the result has enough data to become an AidPoint."""
        return self.location is not None and self.type is not None
