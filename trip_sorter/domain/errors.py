"""Typed domain errors for the travel card sorter.

Every failure is fatal to the current sorting attempt: no partial
itinerary is ever returned. Errors carry the offending identifiers so
the caller can tell the user what is wrong with the cards.

All errors inherit from TripSorterError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TripSorterError(Exception):
    """Base error for the trip sorter domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidSegmentError(TripSorterError):
    """A raw card could not be turned into a segment.

    Raised at import time; the whole import is rejected.

    Attributes:
        index: Position of the bad record in the raw input
        field_name: Name of the missing or malformed field
    """

    index: Optional[int] = None
    field_name: str = ""


@dataclass
class DuplicateOriginError(TripSorterError):
    """Two cards depart from the same location.

    Attributes:
        location: The shared origin name
    """

    location: str = ""


@dataclass
class NoStartFoundError(TripSorterError):
    """Every origin is also some card's destination (the cards form a cycle)."""


@dataclass
class MultipleStartsError(TripSorterError):
    """More than one card could start the trip.

    Attributes:
        candidates: Origin names of every possible first card, in input order
    """

    candidates: tuple[str, ...] = ()


@dataclass
class SelfLoopError(TripSorterError):
    """A card leads from a location back to itself.

    Attributes:
        location: The location used as both origin and destination
    """

    location: str = ""


@dataclass
class BrokenPathError(TripSorterError):
    """The walk stopped before every card was used.

    Attributes:
        last_location: Last location reached before the path broke
        expected: Number of cards in the input
        reached: Number of cards placed on the itinerary
    """

    last_location: str = ""
    expected: int = 0
    reached: int = 0


@dataclass
class CyclicPathError(BrokenPathError):
    """The walk came back to a location it had already left.

    ``last_location`` is the location visited twice.
    """


@dataclass
class CardSourceError(TripSorterError):
    """Cards could not be read from their source.

    Attributes:
        path: Path to the card file if relevant
    """

    path: Optional[str] = None


@dataclass
class ConfigurationError(TripSorterError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None


@dataclass
class RenderingError(TripSorterError):
    """Itinerary rendering failed.

    Attributes:
        renderer_type: Type of renderer that failed
    """

    renderer_type: str = ""
