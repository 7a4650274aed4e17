"""Tests for the text and HTML itinerary renderers."""

import pytest

from trip_sorter.adapters.rendering import (
    HTMLItineraryRenderer,
    TextItineraryRenderer,
    describe_segment,
    render_html,
    render_text,
)
from trip_sorter.config import RenderingConfig
from trip_sorter.domain.errors import RenderingError
from trip_sorter.domain.models import Itinerary, Location, Segment, Transport


def card(origin, destination, **transport):
    return Segment(Location(origin), Location(destination), Transport(**transport))


@pytest.mark.parametrize(
    "segment, expected",
    [
        (
            card("Madrid", "Barcelona", type="train", route="78A", seat="45B"),
            "Take train 78A from Madrid to Barcelona. Seat 45B.",
        ),
        (
            card("Barcelona", "Gerona Airport", type="airport_bus"),
            "Take the airport bus from Barcelona to Gerona Airport. No seat assigned.",
        ),
        (
            card(
                "Gerona Airport",
                "Stockholm",
                type="plane",
                route="SK455",
                gate="45B",
                seat="3A",
                baggage_drop="344",
            ),
            "From Gerona Airport, take flight SK455 to Stockholm. Gate 45B. "
            "Seat 3A. Baggage drop at ticket counter 344.",
        ),
        (
            card(
                "Stockholm",
                "New York JFK",
                type="plane",
                route="SK22",
                gate="22",
                seat="7B",
                notes="Baggage will be automatically transferred from your last leg.",
            ),
            "From Stockholm, take flight SK22 to New York JFK. Gate 22. Seat 7B. "
            "Baggage will be automatically transferred from your last leg.",
        ),
        (
            card("New York JFK", "Manhattan", type="taxi"),
            "Take a Yandex.Taxi from New York JFK to Manhattan.",
        ),
        (
            card("Manhattan", "Central Park", type="walking", notes="Enjoy."),
            "Walk from Manhattan to Central Park. Enjoy.",
        ),
        (
            card("Central Park", "Hotel"),
            "Go from Central Park to Hotel.",
        ),
    ],
)
def test_describe_segment(segment, expected):
    assert describe_segment(segment) == expected


def test_describe_taxi_uses_configured_service():
    segment = card("A", "B", type="taxi")

    assert describe_segment(segment, taxi_service="cab") == "Take a cab from A to B."


def test_render_text_numbers_lines_and_announces_arrival():
    itinerary = Itinerary(
        segments=(
            card("A", "B", type="walking"),
            card("B", "C", type="train", route="1"),
        )
    )

    assert render_text(itinerary) == (
        "1. Walk from A to B.\n"
        "2. Take train 1 from B to C. No seat assigned.\n"
        "3. You have arrived at your final destination."
    )


def test_render_html_escapes_card_text():
    itinerary = Itinerary(segments=(card("<A>", "B & C", type="walking"),))

    markup = render_html(itinerary, container_id="trip")

    assert markup.startswith('<div id="trip">')
    assert "<span>Walk from &lt;A&gt; to B &amp; C.</span><br>" in markup
    assert markup.endswith(
        "<span>You have arrived at your final destination.</span><br></div>"
    )


@pytest.mark.parametrize("render", [render_text, render_html])
def test_empty_itinerary_cannot_be_rendered(render):
    with pytest.raises(RenderingError):
        render(Itinerary())


def test_renderer_adapters_use_config():
    config = RenderingConfig(taxi_service="Uber", html_container_id="route")
    itinerary = Itinerary(segments=(card("A", "B", type="taxi"),))

    assert TextItineraryRenderer(config).render(itinerary).startswith(
        "1. Take a Uber from A to B."
    )
    assert HTMLItineraryRenderer(config).render(itinerary).startswith(
        '<div id="route"><span>Take a Uber from A to B.</span>'
    )


def test_describe_joins_multi_value_seats():
    segment = card("A", "B", type="train", route="9", seat=("1A", "1B"))

    assert describe_segment(segment) == "Take train 9 from A to B. Seat 1A, 1B."
