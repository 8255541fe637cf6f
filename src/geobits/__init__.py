"""geobits entrypoint."""

from .bits import deinterleave64, interleave64
from .exceptions import (
    GeoBitsError,
    InvalidCoordinate,
    InvalidGeoCode,
    InvalidPrecision,
)
from .geocode import (
    GeoCode,
    Neighbors,
    decode,
    encode,
    get_neighbor,
    get_neighbors,
)
from .models import AreaRecord, CoordinateRecord, GeoCodeRecord
from .settings import Settings, get_settings
from .types import Area, Coordinate, Direction, range_center, range_length

__all__ = [
    "Area",
    "AreaRecord",
    "Coordinate",
    "CoordinateRecord",
    "Direction",
    "GeoBitsError",
    "GeoCode",
    "GeoCodeRecord",
    "InvalidCoordinate",
    "InvalidGeoCode",
    "InvalidPrecision",
    "Neighbors",
    "Settings",
    "decode",
    "deinterleave64",
    "encode",
    "get_neighbor",
    "get_neighbors",
    "get_settings",
    "interleave64",
    "range_center",
    "range_length",
]
