"""Plain-text itinerary renderer.

Numbers each leg of the trip and closes with an arrival line::

    1. Take train 78A from Madrid to Barcelona. Seat 45B.
    2. Take the airport bus from Barcelona to Gerona Airport. No seat assigned.
    ...
    5. You have arrived at your final destination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Itinerary
from .directions import ARRIVAL_MESSAGE, DEFAULT_TAXI_SERVICE, describe_segment


def render_text(itinerary: Itinerary, taxi_service: str = DEFAULT_TAXI_SERVICE) -> str:
    """Render the itinerary as numbered plain-text directions.

    Raises:
        RenderingError: If the itinerary is empty.
    """
    if itinerary.is_empty:
        raise RenderingError("Cannot render empty itinerary", renderer_type="text")

    lines = [
        f"{position}. {describe_segment(segment, taxi_service)}"
        for position, segment in enumerate(itinerary, start=1)
    ]
    lines.append(f"{len(lines) + 1}. {ARRIVAL_MESSAGE}")
    return "\n".join(lines)


@dataclass
class TextItineraryRenderer:
    """Plain-text renderer.

    This adapter implements ItineraryRendererPort.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, itinerary: Itinerary) -> str:
        self._logger.debug("Rendering itinerary", extra={"segments": len(itinerary)})
        return render_text(itinerary, taxi_service=self.config.taxi_service)
