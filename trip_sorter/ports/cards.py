"""Card source port - Abstraction for acquiring raw travel cards.

Where the cards come from (a JSON file, an HTTP payload, a fixture)
is outside the sorter; it only needs plain records.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence


class CardSourcePort(Protocol):
    """Port for loading raw cards.

    Implementation: adapters/sources/json_source.py
    """

    def load(self) -> Sequence[Mapping[str, Any]]:
        """Load the raw card records.

        Returns:
            The unordered card records, not yet validated.
        """
        ...
