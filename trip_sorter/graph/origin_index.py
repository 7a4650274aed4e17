"""Origin index construction.

This module defines the OriginIndex type used throughout the project:
a read-only mapping from a location name to the card departing from
that location. It gives the path walk O(1) access to the next card.

For the Madrid trip the index looks like::

    {
        "Madrid": <Madrid -> Barcelona>,
        "Barcelona": <Barcelona -> Gerona Airport>,
        "Gerona Airport": <Gerona Airport -> Stockholm>,
        "Stockholm": <Stockholm -> New York JFK>,
    }
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping

from ..domain.errors import DuplicateOriginError
from ..domain.models import Segment

logger = logging.getLogger(__name__)

OriginIndex = Mapping[str, Segment]


def build_index(segments: Iterable[Segment]) -> OriginIndex:
    """Map every origin name to the card that departs from it.

    Parameters
    ----------
    segments:
        The unordered cards. Not modified.

    Returns
    -------
    OriginIndex
        A read-only view keyed by origin name.

    Raises
    ------
    DuplicateOriginError
        If two cards depart from the same location.
    """
    index: Dict[str, Segment] = {}

    for segment in segments:
        origin = segment.origin.name
        if origin in index:
            logger.warning(
                "Duplicate origin",
                extra={"location": origin},
            )
            raise DuplicateOriginError(
                f"More than one card departs from {origin}",
                location=origin,
            )
        index[origin] = segment

    logger.debug("Origin index built", extra={"origins": len(index)})
    return MappingProxyType(index)
