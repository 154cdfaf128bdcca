"""Stationboard domain models."""

from pydantic import BaseModel, ConfigDict, Field

from opentransport.domain.models.connection import Journey, Stop
from opentransport.domain.models.location import Location


class StationboardJourney(Journey):
    """A journey together with its stop at the queried station."""

    stop: Stop


class StationboardResult(BaseModel):
    """Reply of the stationboard endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    station: Location | None = None
    journeys: tuple[StationboardJourney, ...] = Field(default=(), alias="stationboard")
