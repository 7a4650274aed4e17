"""Graph-related utilities for ordering travel cards.

This subpackage contains the origin index and the path walk that turns
an unordered set of cards into a single itinerary.
"""

from .origin_index import OriginIndex, build_index
from .reconstruct import find_start, reconstruct_path, sort_segments

__all__ = [
    "OriginIndex",
    "build_index",
    "find_start",
    "reconstruct_path",
    "sort_segments",
]
