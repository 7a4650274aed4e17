"""JSON card source adapter.

Reads raw travel cards from a JSON file. The file holds either a bare
array of cards or an object with a ``cards`` array.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from ...config import CardsConfig, get_config
from ...domain.errors import CardSourceError


@dataclass
class JSONCardSource:
    """Card source that loads from a JSON file.

    This adapter implements CardSourcePort.

    Attributes:
        config: Card file configuration (directory, file name, encoding)
    """

    config: CardsConfig = field(default_factory=lambda: get_config().cards)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Sequence[Mapping[str, Any]]:
        """Load the raw cards from the configured file.

        Returns:
            The card records, unvalidated.

        Raises:
            CardSourceError: If the file cannot be read or is not a card list.
        """
        path = self.config.cards_path
        self._logger.debug("Loading cards", extra={"path": str(path)})

        try:
            with path.open(encoding=self.config.encoding) as f:
                payload = json.load(f)
        except (OSError, ValueError, LookupError) as e:
            # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise CardSourceError(
                f"Failed to read cards from {path}",
                path=str(path),
                cause=e,
            )

        if isinstance(payload, Mapping):
            payload = payload.get("cards")

        if not isinstance(payload, list):
            raise CardSourceError(
                f"Expected a list of cards in {path}",
                path=str(path),
            )

        self._logger.info("Cards loaded", extra={"cards": len(payload)})
        return payload
