"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    BrokenPathError,
    CardSourceError,
    ConfigurationError,
    CyclicPathError,
    DuplicateOriginError,
    InvalidSegmentError,
    MultipleStartsError,
    NoStartFoundError,
    RenderingError,
    SelfLoopError,
    TripSorterError,
)
from .models import Itinerary, Location, Segment, Transport, TripSession

__all__ = [
    # Models
    "Location",
    "Transport",
    "Segment",
    "Itinerary",
    "TripSession",
    # Errors
    "TripSorterError",
    "InvalidSegmentError",
    "DuplicateOriginError",
    "NoStartFoundError",
    "MultipleStartsError",
    "SelfLoopError",
    "BrokenPathError",
    "CyclicPathError",
    "CardSourceError",
    "ConfigurationError",
    "RenderingError",
]
