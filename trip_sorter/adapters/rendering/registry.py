"""Renderer lookup by name.

Maps the names accepted by the CLI and TSR_RENDER_DEFAULT_RENDERER to
renderer adapters.
"""

from __future__ import annotations

from typing import Callable, Dict

from ...config import RenderingConfig
from ...domain.errors import ConfigurationError
from ...ports.rendering import ItineraryRendererPort
from .html_renderer import HTMLItineraryRenderer
from .text_renderer import TextItineraryRenderer

RendererFactory = Callable[[RenderingConfig], ItineraryRendererPort]

RENDERERS: Dict[str, RendererFactory] = {
    "text": TextItineraryRenderer,
    "html": HTMLItineraryRenderer,
}


def make_renderer(name: str, config: RenderingConfig) -> ItineraryRendererPort:
    """Build the renderer registered under ``name``.

    Raises:
        ConfigurationError: If no renderer has that name.
    """
    factory = RENDERERS.get(name)
    if factory is None:
        raise ConfigurationError(
            f"Unknown renderer: {name!r}",
            setting_name="renderer",
            expected_type="|".join(sorted(RENDERERS)),
        )
    return factory(config)
