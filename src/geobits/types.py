from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from .exceptions import InvalidCoordinate

if TYPE_CHECKING:
    from .geocode import GeoCode

log = logging.getLogger(__name__)

LAT_MIN = -90.0
LAT_MAX = 90.0
LNG_MIN = -180.0
LNG_MAX = 180.0

Range = Tuple[float, float]

LAT_RANGE: Range = (LAT_MIN, LAT_MAX)
LNG_RANGE: Range = (LNG_MIN, LNG_MAX)


def range_length(start: float, end: float) -> float:
    return end - start


def range_center(start: float, end: float) -> float:
    return (start + end) / 2


def _in_range(value: float, bounds: Range) -> bool:
    return bounds[0] <= value < bounds[1]


class Direction(enum.Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"
    NORTH_EAST = "north_east"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    NORTH_WEST = "north_west"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not _in_range(self.latitude, LAT_RANGE):
            log.debug("rejected latitude %r", self.latitude)
            raise InvalidCoordinate(
                f"latitude must be in [{LAT_MIN}, {LAT_MAX}), got {self.latitude!r}"
            )
        if not _in_range(self.longitude, LNG_RANGE):
            log.debug("rejected longitude %r", self.longitude)
            raise InvalidCoordinate(
                f"longitude must be in [{LNG_MIN}, {LNG_MAX}), got {self.longitude!r}"
            )

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def from_string(cls, value: str) -> "Coordinate":
        parts = value.split(",", 1)
        if len(parts) != 2:
            raise InvalidCoordinate("Coordinate string must be 'lat,lng'")
        try:
            latitude = float(parts[0].strip())
            longitude = float(parts[1].strip())
        except ValueError as exc:
            raise InvalidCoordinate(f"invalid coordinate string {value!r}") from exc
        return cls(latitude=latitude, longitude=longitude)

    def distance(self, other: "Coordinate") -> float:
        """Euclidean (L2) distance in raw degrees.

        This treats lat/lng as a flat plane; it is not a great-circle distance.
        """
        lat_diff = self.latitude - other.latitude
        lng_diff = self.longitude - other.longitude
        return math.sqrt(lat_diff**2 + lng_diff**2)

    def geocode(self, precision: Optional[int] = None) -> "GeoCode":
        from .geocode import encode

        return encode(self, precision)


@dataclass(frozen=True)
class Area:
    """Half-open ``[start, end)`` latitude and longitude ranges of one cell.

    Areas normally come from ``decode``. Both ranges must be non-empty and lie
    inside the world bounds so ``center`` always yields a valid Coordinate.
    """

    lat_range: Range
    lng_range: Range

    def __post_init__(self) -> None:
        for name, (start, end), (low, high) in (
            ("lat_range", self.lat_range, LAT_RANGE),
            ("lng_range", self.lng_range, LNG_RANGE),
        ):
            if not low <= start < end <= high:
                log.debug("rejected %s %r", name, (start, end))
                raise InvalidCoordinate(
                    f"{name} must satisfy {low} <= start < end <= {high}, "
                    f"got {(start, end)!r}"
                )

    @property
    def lat_width(self) -> float:
        return range_length(*self.lat_range)

    @property
    def lng_width(self) -> float:
        return range_length(*self.lng_range)

    def center(self) -> Coordinate:
        return Coordinate(
            latitude=range_center(*self.lat_range),
            longitude=range_center(*self.lng_range),
        )

    def contains(self, coord: Coordinate) -> bool:
        return _in_range(coord.latitude, self.lat_range) and _in_range(
            coord.longitude, self.lng_range
        )
