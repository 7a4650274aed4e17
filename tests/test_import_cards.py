"""Tests for turning raw card records into segments."""

import pytest

from trip_sorter.domain.errors import InvalidSegmentError
from trip_sorter.domain.models import Location, Segment, Transport
from trip_sorter.io import import_segments


def test_import_nested_card():
    raw = [
        {
            "origin": {"name": "Madrid"},
            "destination": {"name": "Barcelona"},
            "transport": {"type": "train", "route": "78A", "seat": "45B"},
        }
    ]

    segments = import_segments(raw)

    assert segments == (
        Segment(
            Location("Madrid"),
            Location("Barcelona"),
            Transport(type="train", route="78A", seat="45B"),
        ),
    )


def test_import_accepts_bare_location_names():
    segments = import_segments([{"origin": "  Madrid ", "destination": "Barcelona"}])

    assert segments[0].origin == Location("Madrid")
    assert segments[0].destination == Location("Barcelona")


def test_missing_transport_defaults_to_unknown():
    segments = import_segments([{"origin": "A", "destination": "B", "transport": None}])

    assert segments[0].transport == Transport()
    assert segments[0].transport.type == "unknown"


def test_numeric_transport_fields_become_strings():
    segments = import_segments(
        [{"origin": "A", "destination": "B", "transport": {"type": "plane", "gate": 22}}]
    )

    assert segments[0].transport.gate == "22"


def test_unknown_transport_keys_are_kept():
    segments = import_segments(
        [
            {
                "origin": "A",
                "destination": "B",
                "transport": {"type": "ferry", "deck": "upper", "cabin": 12},
            }
        ]
    )

    transport = segments[0].transport
    assert transport.type == "ferry"
    assert transport.extras == {"cabin": 12, "deck": "upper"}
    assert transport.get("deck") == "upper"
    assert transport.get("missing", "n/a") == "n/a"


def test_import_preserves_input_order():
    raw = [
        {"origin": "C", "destination": "D"},
        {"origin": "A", "destination": "B"},
    ]

    segments = import_segments(raw)

    assert [s.origin.name for s in segments] == ["C", "A"]


def test_import_empty_input():
    assert import_segments([]) == ()


@pytest.mark.parametrize(
    "record, field_name",
    [
        ({"destination": "B"}, "origin"),
        ({"origin": "A"}, "destination"),
        ({"origin": {"city": "A"}, "destination": "B"}, "origin.name"),
        ({"origin": "   ", "destination": "B"}, "origin.name"),
        ({"origin": 42, "destination": "B"}, "origin"),
    ],
)
def test_invalid_card_rejects_whole_import(record, field_name):
    raw = [{"origin": "X", "destination": "Y"}, record]

    with pytest.raises(InvalidSegmentError) as exc_info:
        import_segments(raw)

    error = exc_info.value
    assert error.index == 1
    assert error.field_name == field_name
    assert error.cause is not None


def test_non_mapping_record_is_rejected():
    with pytest.raises(InvalidSegmentError) as exc_info:
        import_segments([["Madrid", "Barcelona"]])

    assert exc_info.value.index == 0


@pytest.mark.parametrize("raw", ["Madrid-Barcelona", None, 12])
def test_non_sequence_input_is_rejected(raw):
    with pytest.raises(InvalidSegmentError):
        import_segments(raw)


def test_nested_transport_values_keep_segment_hashable():
    segments = import_segments(
        [
            {
                "origin": "Dover",
                "destination": "Calais",
                "transport": {"type": "ferry", "meta": {"deck": 1, "rows": [3, 4]}},
            }
        ]
    )

    reordered = import_segments(
        [
            {
                "origin": "Dover",
                "destination": "Calais",
                "transport": {"type": "ferry", "meta": {"rows": [3, 4], "deck": 1}},
            }
        ]
    )

    segment = segments[0]
    assert hash(segment) == hash(reordered[0])
    assert segment.transport.get("meta") == (("deck", 1), ("rows", (3, 4)))
    assert set(segments) == {segment}


@pytest.mark.parametrize(
    "transport, check",
    [
        ({"type": "train", "seat": ["1A", "1B"]}, lambda t: t.seat == ("1A", "1B")),
        ({"type": 7}, lambda t: t.type == "7"),
        ("train", lambda t: t.type == "train"),
        (["bus", 12], lambda t: t.type == "unknown" and t.get("value") == ("bus", 12)),
        ({"notes": {"lang": "en"}}, lambda t: t.notes == (("lang", "en"),)),
    ],
)
def test_transport_details_never_reject_a_card(transport, check):
    segments = import_segments([{"origin": "A", "destination": "B", "transport": transport}])

    assert check(segments[0].transport)
    hash(segments[0])
