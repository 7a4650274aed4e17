"""HTML itinerary renderer.

Produces a standalone ``<div>`` fragment, one ``<span>`` per leg. The
caller decides where the markup goes; nothing is attached to a page
here.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass, field

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Itinerary
from .directions import ARRIVAL_MESSAGE, DEFAULT_TAXI_SERVICE, describe_segment


def render_html(
    itinerary: Itinerary,
    taxi_service: str = DEFAULT_TAXI_SERVICE,
    container_id: str = "itinerary",
) -> str:
    """Render the itinerary as an HTML fragment.

    All card text is escaped.

    Raises:
        RenderingError: If the itinerary is empty.
    """
    if itinerary.is_empty:
        raise RenderingError("Cannot render empty itinerary", renderer_type="html")

    spans = [
        f"<span>{html.escape(describe_segment(segment, taxi_service))}</span><br>"
        for segment in itinerary
    ]
    spans.append(f"<span>{html.escape(ARRIVAL_MESSAGE)}</span><br>")
    return f'<div id="{html.escape(container_id, quote=True)}">{"".join(spans)}</div>'


@dataclass
class HTMLItineraryRenderer:
    """HTML fragment renderer.

    This adapter implements ItineraryRendererPort.
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, itinerary: Itinerary) -> str:
        self._logger.debug("Rendering itinerary", extra={"segments": len(itinerary)})
        return render_html(
            itinerary,
            taxi_service=self.config.taxi_service,
            container_id=self.config.html_container_id,
        )
