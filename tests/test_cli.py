"""Tests for the command line tool."""

import json
from pathlib import Path

import pytest

from opentransport.adapters.config import CliSettings
from opentransport.cli import (
    build_client,
    build_parser,
    format_connection,
    format_journey,
    format_location,
    main,
)
from opentransport.domain.models import (
    ConnectionResult,
    Location,
    StationboardResult,
)
from tests.mock_api import json_handler, mock_api, read_fixture, status_handler


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run without a local .env file or inherited settings."""
    monkeypatch.chdir(tmp_path)
    names = ("API_URL", "USER_AGENT", "MAX_RETRY", "RETRY_PAUSE", "LOG_REQUESTS", "TIMEOUT_SECONDS")
    for name in names:
        monkeypatch.delenv(f"OPENTRANSPORT_{name}", raising=False)


def test_format_location() -> None:
    assert format_location(Location(id="8503000", name="Zürich HB")) == "Station: Zürich HB"
    assert (
        format_location(Location(name="Paradeplatz 1, Zürich", distance=120))
        == "Address: Paradeplatz 1, Zürich (120 m)"
    )


def test_format_connection_uses_first_section() -> None:
    result = ConnectionResult.model_validate_json(read_fixture("connection_search"))

    lines = format_connection(result)

    assert lines[0] == "T 11 at 14:32 on platform - (duration 00d00:23:00, 0 transfers)"
    assert len(lines) == 2


def test_format_journey() -> None:
    result = StationboardResult.model_validate_json(read_fixture("stationboard_search"))

    assert format_journey(result.journeys[0]) == "Departure at 20:00 (T)11 to Zürich, Rehalp"
    assert format_journey(result.journeys[0], arrival=True).startswith("Arrival at --:--")


def test_parser_collects_repeated_options() -> None:
    args = build_parser().parse_args(
        ["connections", "Zürich HB", "Bern", "--via", "Aarau", "--via", "Olten",
         "--transportation", "train", "--limit", "3"]
    )

    assert args.command == "connections"
    assert args.via == ["Aarau", "Olten"]
    assert args.transportation == ["train"]
    assert args.limit == 3


def test_build_client_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given OPENTRANSPORT_* variables, when building the client, then they are applied."""
    monkeypatch.setenv("OPENTRANSPORT_API_URL", "http://localhost:8080")
    monkeypatch.setenv("OPENTRANSPORT_MAX_RETRY", "0")
    monkeypatch.setenv("OPENTRANSPORT_USER_AGENT", "Departure Board")

    client = build_client(CliSettings())

    assert client.config.api_base_url == "http://localhost:8080/"
    assert client.config.max_retry_attempts == 0
    assert client.config.user_agent == "Departure Board"


@pytest.mark.asyncio
async def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert await main([]) == 1
    assert "usage:" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_locations(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    async with mock_api({"/locations": json_handler(read_fixture("location_search"))}) as api:
        monkeypatch.setenv("OPENTRANSPORT_API_URL", api.base_url)

        exit_code = await main(["locations", "Zürich", "--type", "station"])

    assert exit_code == 0
    assert api.requests[0].path_qs == "/locations?query=Z%C3%BCrich&type=station"
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Station: Zürich HB"
    assert len(lines) == 10


@pytest.mark.asyncio
async def test_main_stationboard(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    fixture = read_fixture("stationboard_search")
    async with mock_api({"/stationboard": json_handler(fixture)}) as api:
        monkeypatch.setenv("OPENTRANSPORT_API_URL", api.base_url)

        exit_code = await main(
            ["stationboard", "8591382", "--when", "2020-05-02T20:00", "--limit", "4"]
        )

    assert exit_code == 0
    assert api.requests[0].path_qs == (
        "/stationboard?id=8591382&limit=4&type=departure&datetime=2020-05-02%2020:00"
    )
    assert "Departure at 20:00 (T)11 to Zürich, Rehalp" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_connections_as_json(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    fixture = read_fixture("connection_search")
    async with mock_api({"/connections": json_handler(fixture)}) as api:
        monkeypatch.setenv("OPENTRANSPORT_API_URL", api.base_url)

        exit_code = await main(
            ["connections", "Sternen Oerlikon", "Paradeplatz", "--when", "2020-04-25T14:30",
             "--json"]
        )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["connections"]) == 2
    assert payload["connections"][0]["from"]["departure"] == "2020-04-25T14:32:00+0200"
    assert payload["from"]["name"] == "Zürich, Sternen Oerlikon"


@pytest.mark.asyncio
async def test_main_reports_failures(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a failing server and no retries, when querying, then the exit code is 1."""
    async with mock_api({"/stationboard": status_handler(500)}) as api:
        monkeypatch.setenv("OPENTRANSPORT_API_URL", api.base_url)
        monkeypatch.setenv("OPENTRANSPORT_MAX_RETRY", "0")

        exit_code = await main(["stationboard", "Bern"])

    assert exit_code == 1
    assert "Error: failed to perform the http request after 1 attempts" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_main_rejects_invalid_limit(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = await main(["connections", "Zürich HB", "Bern", "--limit", "20"])

    assert exit_code == 1
    assert "limit must be between 0 and 16" in capsys.readouterr().err
