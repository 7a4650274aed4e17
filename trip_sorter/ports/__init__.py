"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the sorting core and external
adapters. They enable dependency injection and make the system testable.

This module follows the Hexagonal Architecture pattern:
- Input ports: where raw cards come from
- Output ports: how a sorted itinerary is presented
"""

from .cards import CardSourcePort
from .rendering import ItineraryRendererPort

__all__ = [
    "CardSourcePort",
    "ItineraryRendererPort",
]
