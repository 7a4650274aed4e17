"""Adapters layer - Concrete implementations of ports.

Adapters implement the Protocol interfaces defined in the ports layer.

Available adapters:
- sources: JSON card files
- rendering: Plain-text and HTML itinerary renderers
"""

from .rendering import HTMLItineraryRenderer, TextItineraryRenderer
from .sources import JSONCardSource

__all__ = [
    "HTMLItineraryRenderer",
    "JSONCardSource",
    "TextItineraryRenderer",
]
