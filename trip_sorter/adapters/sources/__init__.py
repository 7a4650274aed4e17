"""Card source adapters - Implementations of CardSourcePort.

Available implementations:
- JSONCardSource: Loads raw cards from a JSON file
"""

from .json_source import JSONCardSource

__all__ = ["JSONCardSource"]
