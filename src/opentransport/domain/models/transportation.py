"""Enumerations used as query filters."""

from enum import StrEnum


class Transportation(StrEnum):
    """Means of transport accepted by connection and stationboard filters."""

    TRAIN = "train"
    BUS = "bus"
    TRAM = "tram"
    SHIP = "ship"
    CABLEWAY = "cableway"


class LocationType(StrEnum):
    """Kind of location a name search should return."""

    ALL = "all"
    STATION = "station"
    POI = "poi"
    ADDRESS = "address"


class Accessibility(StrEnum):
    """Boarding assistance requirements for connection searches."""

    INDEPENDENT_BOARDING = "independent_boarding"
    ASSISTED_BOARDING = "assisted_boarding"
    ADVANCED_NOTICE = "advanced_notice"
