"""Card import: raw records to immutable segments.

Raw cards are plain structured data, as decoded from JSON. Locations
may be given nested (``{"name": "Madrid"}``) or as bare strings. The
records are validated with pydantic and normalized into domain
Segments. One bad record rejects the whole import.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..domain.errors import InvalidSegmentError
from ..domain.models import Location, Segment, Transport

logger = logging.getLogger(__name__)

SegmentCollection = Tuple[Segment, ...]


class RawLocation(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("location name is empty")
        return value


def freeze(value: Any) -> Any:
    """Turn nested lists and mappings into tuples so segments stay hashable."""
    if isinstance(value, Mapping):
        return tuple(sorted((str(key), freeze(item)) for key, item in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(item) for item in value)
    return value


class RawTransport(BaseModel):
    """Transport descriptor.

    Opaque to the sorter: any value is accepted and unknown keys are kept.
    """

    model_config = ConfigDict(extra="allow")

    type: str = "unknown"
    route: Any = None
    seat: Any = None
    gate: Any = None
    baggage_drop: Any = None
    notes: Any = None

    @field_validator("type", mode="before")
    @classmethod
    def _default_type(cls, value: Any) -> Any:
        if value is None or value == "":
            return "unknown"
        return value if isinstance(value, str) else str(value)

    @field_validator("route", "seat", "gate", "baggage_drop", "notes", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> Any:
        # Flight numbers and gates often arrive as JSON numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return freeze(value)


class RawCard(BaseModel):
    origin: RawLocation
    destination: RawLocation
    transport: RawTransport = RawTransport()

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def _wrap_bare_name(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"name": value}
        return value

    @field_validator("transport", mode="before")
    @classmethod
    def _coerce_transport(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, str):
            return {"type": value}
        if isinstance(value, Mapping):
            return dict(value)
        return {"value": value}

    def to_segment(self) -> Segment:
        extra = self.transport.model_extra or {}
        return Segment(
            origin=Location(self.origin.name),
            destination=Location(self.destination.name),
            transport=Transport(
                type=self.transport.type,
                route=self.transport.route,
                seat=self.transport.seat,
                gate=self.transport.gate,
                baggage_drop=self.transport.baggage_drop,
                notes=self.transport.notes,
                extra=tuple(sorted((key, freeze(value)) for key, value in extra.items())),
            ),
        )


def _first_error_field(error: ValidationError) -> str:
    errors = error.errors()
    if not errors or not errors[0].get("loc"):
        return ""
    return ".".join(str(part) for part in errors[0]["loc"])


def import_segments(raw: Sequence[Mapping[str, Any]]) -> SegmentCollection:
    """Validate raw cards and convert them into segments.

    Args:
        raw: Sequence of card records.

    Returns:
        The cards as an immutable tuple of Segments, in input order.

    Raises:
        InvalidSegmentError: If the input is not a sequence, or a record
            is not a mapping or lacks an origin or destination.
    """
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise InvalidSegmentError(
            f"Cards must be a sequence of records, got {type(raw).__name__}"
        )

    segments: List[Segment] = []
    for position, record in enumerate(raw):
        if not isinstance(record, Mapping):
            raise InvalidSegmentError(
                f"Card #{position} is not a record",
                index=position,
            )
        try:
            card = RawCard.model_validate(dict(record))
        except ValidationError as e:
            field_name = _first_error_field(e)
            logger.warning(
                "Invalid card",
                extra={"index": position, "field": field_name},
            )
            raise InvalidSegmentError(
                f"Card #{position} has a missing or invalid {field_name or 'field'}",
                index=position,
                field_name=field_name,
                cause=e,
            ) from e
        segments.append(card.to_segment())

    logger.debug("Cards imported", extra={"cards": len(segments)})
    return tuple(segments)
