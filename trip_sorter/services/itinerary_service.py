"""Itinerary sorting service - Main orchestrator.

Ties card import, index building, path reconstruction and rendering
together, with logging at each stage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from ..domain.errors import ConfigurationError, TripSorterError
from ..domain.models import Itinerary, TripSession
from ..graph import build_index, reconstruct_path
from ..io import import_segments
from ..ports.cards import CardSourcePort
from ..ports.rendering import ItineraryRendererPort


def open_session(raw: Sequence[Mapping[str, Any]]) -> TripSession:
    """Import raw cards and index them.

    Raises:
        InvalidSegmentError: If a card is malformed.
        DuplicateOriginError: If two cards share an origin.
    """
    segments = import_segments(raw)
    return TripSession(segments=segments, index=build_index(segments))


@dataclass
class ItinerarySortingService:
    """Main service for turning travel cards into an itinerary.

    This service orchestrates the full flow:
    1. Card acquisition (optional card source)
    2. Import and validation
    3. Origin index and path reconstruction
    4. Optional rendering

    Attributes:
        renderer: Presents the sorted itinerary
        card_source: Supplies raw cards for load_and_sort()
    """

    renderer: Optional[ItineraryRendererPort] = None
    card_source: Optional[CardSourcePort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def sort(self, raw: Sequence[Mapping[str, Any]]) -> Itinerary:
        """Sort raw travel cards into an itinerary.

        Args:
            raw: The unordered card records.

        Returns:
            The ordered itinerary.

        Raises:
            TripSorterError: Any import, index or path error.
        """
        try:
            session = open_session(raw)
            self._logger.info("Cards imported", extra={"cards": session.size})
            itinerary = reconstruct_path(session.segments, session.index)
        except TripSorterError as e:
            self._logger.warning(
                "Could not build itinerary",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise

        self._logger.info(
            "Itinerary built",
            extra={
                "segments": len(itinerary),
                "start": itinerary.start.name if itinerary.start else None,
                "end": itinerary.end.name if itinerary.end else None,
            },
        )
        return itinerary

    def load_and_sort(self) -> Itinerary:
        """Load cards from the configured source and sort them.

        Raises:
            ConfigurationError: If no card source is configured.
            CardSourceError: If the cards cannot be read.
        """
        if self.card_source is None:
            raise ConfigurationError(
                "No card source configured",
                setting_name="card_source",
            )
        return self.sort(self.card_source.load())

    def describe(self, raw: Sequence[Mapping[str, Any]]) -> str:
        """Sort the cards and render the resulting itinerary.

        Raises:
            ConfigurationError: If no renderer is configured.
            RenderingError: If rendering fails.
        """
        if self.renderer is None:
            raise ConfigurationError(
                "No renderer configured",
                setting_name="renderer",
            )
        return self.renderer.render(self.sort(raw))

    def load_and_describe(self) -> str:
        """Load cards from the configured source, sort and render them."""
        if self.renderer is None:
            raise ConfigurationError(
                "No renderer configured",
                setting_name="renderer",
            )
        return self.renderer.render(self.load_and_sort())
