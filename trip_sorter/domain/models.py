"""Immutable domain models for the travel card sorter.

All models are frozen dataclasses with slots. These models have no
external dependencies and represent the core concepts of the
application: places, transport, cards and the ordered itinerary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional


@dataclass(frozen=True, slots=True)
class Location:
    """A place, identified by its name within one itinerary."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Transport:
    """How a segment is travelled.

    The sorter never looks inside; renderers do. Values are usually
    strings; nested lists and mappings are kept as tuples.

    Attributes:
        type: Transport kind (e.g. 'plane', 'train', 'airport_bus')
        route: Route, line or flight number
        seat: Seat assignment, None when unassigned
        gate: Boarding gate
        baggage_drop: Ticket counter for baggage drop
        notes: Free-form instructions
        extra: Any other fields from the card, as sorted (key, value) pairs
    """

    type: str = "unknown"
    route: Any = None
    seat: Any = None
    gate: Any = None
    baggage_drop: Any = None
    notes: Any = None
    extra: tuple[tuple[str, Any], ...] = ()

    def get(self, key: str, default: Any = None) -> Any:
        """Look up an extra field by name."""
        for name, value in self.extra:
            if name == key:
                return value
        return default

    @property
    def extras(self) -> dict[str, Any]:
        return dict(self.extra)


@dataclass(frozen=True, slots=True)
class Segment:
    """One travel card: a single leg from origin to destination.

    Attributes:
        origin: Where the leg starts
        destination: Where the leg ends
        transport: Transport metadata passed through unchanged
    """

    origin: Location
    destination: Location
    transport: Transport = Transport()

    @property
    def is_self_loop(self) -> bool:
        """Check if the card leads back to where it starts."""
        return self.origin == self.destination

    def __str__(self) -> str:
        return f"{self.origin} -> {self.destination}"


@dataclass(frozen=True, slots=True)
class Itinerary:
    """Ordered sequence of segments forming one trip.

    Each segment's destination is the next segment's origin.

    Attributes:
        segments: The cards in travel order
    """

    segments: tuple[Segment, ...] = ()

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, position: int) -> Segment:
        return self.segments[position]

    @property
    def is_empty(self) -> bool:
        """Check if the trip has no legs."""
        return len(self.segments) == 0

    @property
    def start(self) -> Optional[Location]:
        """Return the departure location of the whole trip."""
        return self.segments[0].origin if self.segments else None

    @property
    def end(self) -> Optional[Location]:
        """Return the final destination of the whole trip."""
        return self.segments[-1].destination if self.segments else None

    @property
    def locations(self) -> tuple[Location, ...]:
        """Return every visited location in order, start and end included."""
        if not self.segments:
            return ()
        return (self.segments[0].origin,) + tuple(
            segment.destination for segment in self.segments
        )


@dataclass(frozen=True, slots=True)
class TripSession:
    """A segment collection together with the origin index built from it.

    Replacing the cards means opening a new session; nothing is
    updated in place.

    Attributes:
        segments: The unordered cards as imported
        index: Origin name -> segment departing from there
    """

    segments: tuple[Segment, ...]
    index: Mapping[str, Segment]

    @property
    def size(self) -> int:
        return len(self.segments)
