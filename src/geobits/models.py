from pydantic import BaseModel, ConfigDict, Field

from .geocode import GeoCode
from .types import Area, Coordinate


class GeoCodeRecord(BaseModel):
    bits: int = Field(ge=0)
    precision: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_geocode(cls, code: GeoCode) -> "GeoCodeRecord":
        return cls(bits=code.bits, precision=code.precision)

    def to_geocode(self) -> GeoCode:
        return GeoCode(bits=self.bits, precision=self.precision)


class AreaRecord(BaseModel):
    lat_min: float
    lat_max: float
    lng_min: float
    lng_max: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_area(cls, area: Area) -> "AreaRecord":
        return cls(
            lat_min=area.lat_range[0],
            lat_max=area.lat_range[1],
            lng_min=area.lng_range[0],
            lng_max=area.lng_range[1],
        )


class CoordinateRecord(BaseModel):
    lat: float
    lng: float

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_coordinate(cls, coord: Coordinate) -> "CoordinateRecord":
        return cls(lat=coord.latitude, lng=coord.longitude)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.lat, longitude=self.lng)
