"""Rendering adapters - Implementations of ItineraryRendererPort.

Available implementations:
- TextItineraryRenderer: Numbered plain-text directions
- HTMLItineraryRenderer: Escaped HTML fragment
"""

from .directions import describe_segment
from .html_renderer import HTMLItineraryRenderer, render_html
from .registry import RENDERERS, make_renderer
from .text_renderer import TextItineraryRenderer, render_text

__all__ = [
    "HTMLItineraryRenderer",
    "RENDERERS",
    "TextItineraryRenderer",
    "describe_segment",
    "make_renderer",
    "render_html",
    "render_text",
]
