from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Dict, Iterator, Optional, Tuple

from .bits import deinterleave64, interleave64
from .exceptions import InvalidGeoCode, InvalidPrecision
from .settings import MAX_PRECISION, MIN_PRECISION, get_settings
from .types import (
    LAT_RANGE,
    LNG_RANGE,
    Area,
    Coordinate,
    Direction,
    Range,
    range_length,
)

log = logging.getLogger(__name__)

LAT_BITS = 0x5555555555555555
LNG_BITS = 0xAAAAAAAAAAAAAAAA

# (latitude step, longitude step) for each direction.
_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (-1, 0),
    Direction.WEST: (0, -1),
    Direction.NORTH_EAST: (1, 1),
    Direction.SOUTH_EAST: (-1, 1),
    Direction.SOUTH_WEST: (-1, -1),
    Direction.NORTH_WEST: (1, -1),
}


def _check_precision(precision: int) -> None:
    if (
        isinstance(precision, bool)
        or not isinstance(precision, int)
        or not MIN_PRECISION <= precision <= MAX_PRECISION
    ):
        log.debug("rejected precision %r", precision)
        raise InvalidPrecision(
            f"precision must satisfy {MIN_PRECISION} <= precision <= {MAX_PRECISION}, "
            f"got {precision!r}"
        )


@dataclass(frozen=True)
class GeoCode:
    """Morton-ordered cell address.

    Only the low ``2 * precision`` bits of ``bits`` are meaningful and the
    rest are always zero, so two codes of equal precision compare by ``bits``
    in Z-order.
    """

    bits: int
    precision: int

    def __post_init__(self) -> None:
        _check_precision(self.precision)
        if self.bits < 0 or self.bits >> (2 * self.precision):
            log.debug("rejected bits %#x at precision %d", self.bits, self.precision)
            raise InvalidGeoCode(
                f"bits {self.bits:#x} exceed the {2 * self.precision} active bits "
                f"of precision {self.precision}"
            )

    @classmethod
    def from_coordinate(
        cls, coord: Coordinate, precision: Optional[int] = None
    ) -> "GeoCode":
        return encode(coord, precision)

    def area(self) -> Area:
        return decode(self)

    def neighbor(self, direction: Direction) -> "GeoCode":
        return get_neighbor(self, direction)

    def neighbors(self) -> "Neighbors":
        return get_neighbors(self)

    def _child(self, quadrant: int) -> "GeoCode":
        if self.precision >= MAX_PRECISION:
            raise InvalidPrecision(
                f"cannot subdivide a code already at precision {MAX_PRECISION}"
            )
        return GeoCode(bits=(self.bits << 2) | quadrant, precision=self.precision + 1)

    def left_bottom(self) -> "GeoCode":
        return self._child(0b00)

    def left_top(self) -> "GeoCode":
        return self._child(0b01)

    def right_bottom(self) -> "GeoCode":
        return self._child(0b10)

    def right_top(self) -> "GeoCode":
        return self._child(0b11)

    def children(self) -> Tuple["GeoCode", "GeoCode", "GeoCode", "GeoCode"]:
        return self.left_bottom(), self.left_top(), self.right_bottom(), self.right_top()


@dataclass(frozen=True)
class Neighbors:
    north: GeoCode
    east: GeoCode
    south: GeoCode
    west: GeoCode
    north_east: GeoCode
    south_east: GeoCode
    south_west: GeoCode
    north_west: GeoCode

    def __getitem__(self, direction: Direction) -> GeoCode:
        return getattr(self, direction.value)

    def items(self) -> Iterator[Tuple[Direction, GeoCode]]:
        for field in fields(self):
            yield Direction(field.name), getattr(self, field.name)


def _cell_bound(index: int, bounds: Range, scale: int) -> float:
    return bounds[0] + (index / scale) * range_length(*bounds)


def _cell_index(value: float, bounds: Range, scale: int) -> int:
    # Scale into [0, 1) and truncate toward zero, then settle the index against
    # the bounds decode produces so rounding never lands outside the cell.
    index = int((value - bounds[0]) / range_length(*bounds) * scale)
    index = min(index, scale - 1)
    while index > 0 and _cell_bound(index, bounds, scale) > value:
        index -= 1
    while index < scale - 1 and _cell_bound(index + 1, bounds, scale) <= value:
        index += 1
    return index


def encode(coord: Coordinate, precision: Optional[int] = None) -> GeoCode:
    if precision is None:
        precision = get_settings().default_precision
    _check_precision(precision)

    scale = 1 << precision
    lat_index = _cell_index(coord.latitude, LAT_RANGE, scale)
    lng_index = _cell_index(coord.longitude, LNG_RANGE, scale)

    code = GeoCode(bits=interleave64(lat_index, lng_index), precision=precision)
    log.debug("encoded %s at precision %d -> %#x", coord, precision, code.bits)
    return code


def decode(code: GeoCode) -> Area:
    lng, lat = deinterleave64(code.bits)

    # Per axis the cells are consecutive integers:
    #
    # |---------------|---------------|
    #         0               1
    # |-------|-------|-------|-------|
    #     00      01      10      11
    #
    # so the upper bound of a cell is the lower bound of index + 1.
    scale = 1 << code.precision
    return Area(
        lat_range=(
            _cell_bound(lat, LAT_RANGE, scale),
            _cell_bound(lat + 1, LAT_RANGE, scale),
        ),
        lng_range=(
            _cell_bound(lng, LNG_RANGE, scale),
            _cell_bound(lng + 1, LNG_RANGE, scale),
        ),
    )


def _move(bits: int, precision: int, axis: int, other: int, step: int) -> int:
    # Fill the other axis' active bits with ones so the carry or borrow ripples
    # through them, then mask back. Wraps inside the active bit width.
    num_unused_bits = 64 - precision * 2
    moving = bits & axis
    fixed = bits & other
    filler = other >> num_unused_bits
    if step < 0:
        moving |= filler
        moving -= filler + 1
    else:
        moving += filler + 1
    moving &= axis >> num_unused_bits
    return moving | fixed


def get_neighbor(code: GeoCode, direction: Direction) -> GeoCode:
    lat_step, lng_step = _STEPS[direction]
    bits = code.bits
    if lat_step:
        bits = _move(bits, code.precision, LAT_BITS, LNG_BITS, lat_step)
    if lng_step:
        bits = _move(bits, code.precision, LNG_BITS, LAT_BITS, lng_step)
    return GeoCode(bits=bits, precision=code.precision)


def get_neighbors(code: GeoCode) -> Neighbors:
    return Neighbors(
        **{direction.value: get_neighbor(code, direction) for direction in Direction}
    )
