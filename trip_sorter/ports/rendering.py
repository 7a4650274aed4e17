"""Rendering port - Abstraction for presenting an itinerary.

This protocol defines the contract for itinerary rendering, allowing
different output formats (plain text, HTML) to be swapped in. A
renderer is a pure function of the itinerary: it returns a value and
performs no I/O.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Itinerary


class ItineraryRendererPort(Protocol):
    """Port for itinerary rendering.

    Implementations: adapters/rendering/text_renderer.py,
    adapters/rendering/html_renderer.py
    """

    def render(self, itinerary: Itinerary) -> str:
        """Render the itinerary as travel directions.

        Args:
            itinerary: The ordered trip.

        Returns:
            The rendered directions.
        """
        ...
