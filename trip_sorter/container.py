"""Dependency injection container.

Wires the card source, the renderer and the sorting service from the
application configuration. The CLI resolves its service here; tests
register fakes in place of the adapters.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

from .config import AppConfig, CardsConfig, get_config

Provider = Tuple[Callable[[], Any], bool]


@dataclass
class Container:
    """Registry of factories keyed by the port they provide.

    Usage:
        container = Container.create_default(renderer_name="html")
        service = container.resolve(ItinerarySortingService)

        container.register(CardSourcePort, lambda: FakeSource())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _providers: Dict[type[Any], Provider] = field(default_factory=dict, repr=False)
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding."""
        with self._lock:
            self._providers[port_type] = (factory, singleton)
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an instance for ``port_type``.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            try:
                factory, singleton = self._providers[port_type]
            except KeyError:
                raise KeyError(f"Type not registered: {port_type}") from None

            if not singleton:
                return factory()
            if port_type not in self._instances:
                self._instances[port_type] = factory()
            return self._instances[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._providers

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        *,
        cards_path: Optional[Path] = None,
        renderer_name: Optional[str] = None,
    ) -> Container:
        """Create a container with the production bindings.

        Args:
            config: Optional configuration override.
            cards_path: Card file to read instead of the configured one.
            renderer_name: Renderer to use instead of the configured one.

        Raises:
            ConfigurationError: If the renderer name is unknown.
        """
        from .adapters.rendering import make_renderer
        from .adapters.sources import JSONCardSource
        from .ports.cards import CardSourcePort
        from .ports.rendering import ItineraryRendererPort
        from .services import ItinerarySortingService

        config = config or get_config()
        container = cls(config=config)

        cards_config = config.cards
        if cards_path is not None:
            cards_config = CardsConfig(
                data_dir=cards_path.parent,
                cards_file=cards_path.name,
                encoding=config.cards.encoding,
            )

        # Fail on a bad renderer name now rather than at first resolve
        renderer = make_renderer(
            renderer_name or config.rendering.default_renderer, config.rendering
        )

        container.register(CardSourcePort, lambda: JSONCardSource(cards_config))
        container.register(ItineraryRendererPort, lambda: renderer)
        container.register(
            ItinerarySortingService,
            lambda: ItinerarySortingService(
                renderer=container.resolve(ItineraryRendererPort),
                card_source=container.resolve(CardSourcePort),
            ),
        )
        return container
