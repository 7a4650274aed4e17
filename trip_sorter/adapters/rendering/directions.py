"""Human-readable directions for a single travel card.

Shared by the text and HTML renderers. Each transport kind has its own
sentence; unknown kinds fall back to a generic "Go from ... to ...".
"""

from __future__ import annotations

from typing import Any

from ...domain.models import Segment, Transport

DEFAULT_TAXI_SERVICE = "Yandex.Taxi"
ARRIVAL_MESSAGE = "You have arrived at your final destination."


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, tuple):
        return ", ".join(_text(item) for item in value)
    return str(value)


def _seat(transport: Transport) -> str:
    if transport.seat:
        return f"Seat {_text(transport.seat)}. "
    return "No seat assigned. "


def _notes(transport: Transport) -> str:
    return _text(transport.notes)


def describe_segment(segment: Segment, taxi_service: str = DEFAULT_TAXI_SERVICE) -> str:
    """Return the travel directions for one card."""
    transport = segment.transport
    origin = segment.origin.name
    destination = segment.destination.name

    if transport.type == "plane":
        baggage = (
            f"Baggage drop at ticket counter {_text(transport.baggage_drop)}. "
            if transport.baggage_drop
            else ""
        )
        text = (
            f"From {origin}, take flight {_text(transport.route)} to {destination}. "
            f"Gate {_text(transport.gate)}. {_seat(transport)}{baggage}{_notes(transport)}"
        )
    elif transport.type == "train":
        text = (
            f"Take train {_text(transport.route)} from {origin} to {destination}. "
            f"{_seat(transport)}{_notes(transport)}"
        )
    elif transport.type == "airport_bus":
        text = (
            f"Take the airport bus from {origin} to {destination}. "
            f"{_seat(transport)}{_notes(transport)}"
        )
    elif transport.type == "taxi":
        text = f"Take a {taxi_service} from {origin} to {destination}. {_notes(transport)}"
    elif transport.type == "walking":
        text = f"Walk from {origin} to {destination}. {_notes(transport)}"
    else:
        text = f"Go from {origin} to {destination}. {_notes(transport)}"

    return text.strip()
