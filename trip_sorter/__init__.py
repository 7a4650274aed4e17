"""Top-level package for the travel card sorter.

Takes an unordered pile of boarding cards, each naming an origin, a
destination and a means of transport, and puts them back in travel
order so the trip can be described from start to finish.
"""

from .domain import Itinerary, Location, Segment, Transport, TripSorterError
from .graph import build_index, reconstruct_path, sort_segments
from .io import import_segments

__all__ = [
    "Itinerary",
    "Location",
    "Segment",
    "Transport",
    "TripSorterError",
    "build_index",
    "import_segments",
    "reconstruct_path",
    "sort_segments",
]
