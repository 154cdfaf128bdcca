"""Tests for decoding response bodies."""

import io
from datetime import datetime, timedelta, timezone

import pytest

from opentransport.adapters.http.log_sinks import ClientLogSinks
from opentransport.adapters.http.response_decoder import ResponseDecoder
from opentransport.domain.errors import EmptyPayloadError, ParseError
from opentransport.domain.models import (
    Coordinate,
    Location,
    LocationResult,
    Prognosis,
    StationboardJourney,
    StationboardResult,
    Stop,
)
from tests.mock_api import read_fixture

CEST = timezone(timedelta(hours=2))


@pytest.fixture
def decoder() -> ResponseDecoder:
    return ResponseDecoder(ClientLogSinks())


def test_empty_body_is_reported_before_parsing(decoder: ResponseDecoder) -> None:
    """Given zero bytes, when decoding, then EmptyPayloadError is raised."""
    with pytest.raises(EmptyPayloadError, match="response buffer is empty"):
        decoder.decode(b"", LocationResult)


def test_invalid_json_is_a_parse_error(decoder: ResponseDecoder) -> None:
    with pytest.raises(ParseError, match="failed to parse response"):
        decoder.decode(b"{Invalid: Json}", LocationResult)


def test_wrong_shape_is_a_parse_error(decoder: ResponseDecoder) -> None:
    """Given valid JSON of the wrong shape, when decoding, then ParseError is raised."""
    with pytest.raises(ParseError):
        decoder.decode(b'{"stations": "not a list"}', LocationResult)


def test_malformed_timestamp_is_a_parse_error(decoder: ResponseDecoder) -> None:
    body = b'{"stationboard": [{"stop": {"departure": "yesterday"}}]}'

    with pytest.raises(ParseError, match="failed to parse response"):
        decoder.decode(body, StationboardResult)


def test_unknown_fields_are_ignored(decoder: ResponseDecoder) -> None:
    result = decoder.decode(b'{"stations": [{"id": "8503000", "extra": 1}]}', LocationResult)

    assert result == LocationResult(stations=(Location(id="8503000"),))


def test_stationboard_fixture_matches_expected_values(decoder: ResponseDecoder) -> None:
    """Given the stationboard fixture, when decoding, then the values match field by field."""
    result = decoder.decode(read_fixture("stationboard_search"), StationboardResult)

    station = Location(id="8591382", name="Zürich, Sternen Oerlikon")
    assert result.station == Location(
        id="8591382",
        name="Zürich, Sternen Oerlikon",
        coordinate=Coordinate(type="WGS84", x=47.410039, y=8.546269),
    )
    assert len(result.journeys) == 4
    assert result.journeys[0] == StationboardJourney(
        stop=Stop(
            station=station,
            departure=datetime(2020, 5, 2, 20, 0, tzinfo=CEST),
            prognosis=Prognosis(),
        ),
        name="011 Tram",
        category="T",
        number="11",
        operator="VBZ",
        to="Zürich, Rehalp",
    )
    assert result.journeys[1].stop.delay == 1
    assert result.journeys[1].stop.prognosis == Prognosis(
        departure=datetime(2020, 5, 2, 20, 4, tzinfo=CEST)
    )
    assert [journey.number for journey in result.journeys] == ["11", "14", "10", "62"]


def test_successful_decode_is_logged() -> None:
    out = io.StringIO()
    sinks = ClientLogSinks()
    sinks.enable(out)

    ResponseDecoder(sinks).decode(read_fixture("location_search"), LocationResult)

    assert "Parsed LocationResult response with" in out.getvalue()
