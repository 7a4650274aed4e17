"""Input abstractions for the travel card sorter.

Turns raw card records, wherever they come from, into the immutable
segments the sorter works on.
"""

from .import_cards import SegmentCollection, import_segments

__all__ = ["SegmentCollection", "import_segments"]
