"""Itinerary reconstruction from unordered travel cards.

The cards form a single simple path. The first card is the only one
whose origin is nobody's destination; from there each next card is
found by looking up the current destination in the origin index.

Time complexity: one O(n) pass to find the start and one O(n) walk
with O(1) lookups.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from ..domain.errors import (
    BrokenPathError,
    CyclicPathError,
    MultipleStartsError,
    NoStartFoundError,
    SelfLoopError,
)
from ..domain.models import Itinerary, Segment
from .origin_index import OriginIndex, build_index

logger = logging.getLogger(__name__)


def find_start(segments: Sequence[Segment]) -> Segment:
    """Return the card the trip begins with.

    Parameters
    ----------
    segments:
        The unordered, non-empty cards.

    Raises
    ------
    SelfLoopError
        If a card leads from a location back to itself.
    NoStartFoundError
        If every origin is also a destination.
    MultipleStartsError
        If the cards split into more than one path fragment.
    """
    for segment in segments:
        if segment.is_self_loop:
            raise SelfLoopError(
                f"Card leads from {segment.origin} back to itself",
                location=segment.origin.name,
            )

    destinations = {segment.destination.name for segment in segments}
    candidates = [
        segment for segment in segments if segment.origin.name not in destinations
    ]

    if not candidates:
        raise NoStartFoundError(
            "No card can start the trip: every origin is also a destination"
        )
    if len(candidates) > 1:
        names = tuple(segment.origin.name for segment in candidates)
        raise MultipleStartsError(
            f"Cards form {len(names)} separate trips starting at {', '.join(names)}",
            candidates=names,
        )

    return candidates[0]


def reconstruct_path(segments: Iterable[Segment], index: OriginIndex) -> Itinerary:
    """Order the cards into a single itinerary.

    Parameters
    ----------
    segments:
        The unordered cards.
    index:
        Origin index as produced by ``build_index`` for these cards.

    Returns
    -------
    Itinerary
        Every card exactly once, each destination matching the next
        origin. Empty input gives an empty itinerary.

    Raises
    ------
    SelfLoopError, NoStartFoundError, MultipleStartsError
        See ``find_start``.
    BrokenPathError
        If the walk runs out of cards before using all of them.
    CyclicPathError
        If the walk comes back to a location it already left.
    """
    cards = tuple(segments)
    if not cards:
        return Itinerary()

    start = find_start(cards)
    logger.debug("Start found", extra={"location": start.origin.name})

    trip: List[Segment] = [start]
    visited = {start.origin.name}
    current = start
    while len(trip) < len(cards):
        following = index.get(current.destination.name)
        if following is None:
            break
        if following.origin.name in visited:
            loop = following.origin.name
            logger.warning(
                "Path loops",
                extra={"location": loop, "expected": len(cards), "reached": len(trip)},
            )
            raise CyclicPathError(
                f"Path loops back to {loop}",
                last_location=loop,
                expected=len(cards),
                reached=len(trip),
            )
        visited.add(following.origin.name)
        trip.append(following)
        current = following

    if len(trip) < len(cards):
        last = current.destination.name
        logger.warning(
            "Broken path",
            extra={"location": last, "expected": len(cards), "reached": len(trip)},
        )
        raise BrokenPathError(
            f"Broken path after {last}",
            last_location=last,
            expected=len(cards),
            reached=len(trip),
        )

    logger.debug("Path walked", extra={"segments": len(trip)})
    return Itinerary(segments=tuple(trip))


def sort_segments(segments: Iterable[Segment]) -> Itinerary:
    """Build the origin index and reconstruct the itinerary in one call."""
    cards = tuple(segments)
    return reconstruct_path(cards, build_index(cards))
