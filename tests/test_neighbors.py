import pytest

from geobits import Direction, GeoCode, Neighbors, get_neighbor, get_neighbors
from geobits.bits import interleave64

LAT_INDEX = 20936
LNG_INDEX = 27439
PRECISION = 15


def _cell(lat: int, lng: int, precision: int = PRECISION) -> GeoCode:
    return GeoCode(bits=interleave64(lat, lng), precision=precision)


TAIPEI = _cell(LAT_INDEX, LNG_INDEX)


@pytest.mark.parametrize(
    "direction, lat_step, lng_step",
    [
        (Direction.NORTH, 1, 0),
        (Direction.EAST, 0, 1),
        (Direction.SOUTH, -1, 0),
        (Direction.WEST, 0, -1),
        (Direction.NORTH_EAST, 1, 1),
        (Direction.SOUTH_EAST, -1, 1),
        (Direction.SOUTH_WEST, -1, -1),
        (Direction.NORTH_WEST, 1, -1),
    ],
)
def test_neighbor_moves_one_cell(direction: Direction, lat_step: int, lng_step: int) -> None:
    expected = _cell(LAT_INDEX + lat_step, LNG_INDEX + lng_step)
    assert get_neighbor(TAIPEI, direction) == expected
    assert TAIPEI.neighbor(direction) == expected


def test_neighbor_carries_across_axis_bits() -> None:
    # 0b0111 -> 0b1000 needs a carry through the interleaved longitude bits.
    assert get_neighbor(_cell(0b0111, 0b1010, 4), Direction.NORTH) == _cell(0b1000, 0b1010, 4)
    assert get_neighbor(_cell(0b1000, 0b1010, 4), Direction.SOUTH) == _cell(0b0111, 0b1010, 4)
    assert get_neighbor(_cell(0b0101, 0b0011, 4), Direction.EAST) == _cell(0b0101, 0b0100, 4)
    assert get_neighbor(_cell(0b0101, 0b0100, 4), Direction.WEST) == _cell(0b0101, 0b0011, 4)


def test_neighbor_is_locally_invertible() -> None:
    for first, back in [
        (Direction.EAST, Direction.WEST),
        (Direction.WEST, Direction.EAST),
        (Direction.NORTH, Direction.SOUTH),
        (Direction.SOUTH, Direction.NORTH),
        (Direction.NORTH_EAST, Direction.SOUTH_WEST),
        (Direction.NORTH_WEST, Direction.SOUTH_EAST),
    ]:
        assert get_neighbor(get_neighbor(TAIPEI, first), back) == TAIPEI


def test_neighbor_wraps_inside_active_bits() -> None:
    assert get_neighbor(_cell(2, 0, 3), Direction.WEST) == _cell(2, 7, 3)
    assert get_neighbor(_cell(2, 7, 3), Direction.EAST) == _cell(2, 0, 3)
    assert get_neighbor(_cell(7, 5, 3), Direction.NORTH) == _cell(0, 5, 3)
    assert get_neighbor(_cell(0, 5, 3), Direction.SOUTH) == _cell(7, 5, 3)
    assert get_neighbor(_cell(0, 0, 3), Direction.SOUTH_WEST) == _cell(7, 7, 3)


def test_neighbor_wraps_at_full_precision() -> None:
    top = 0xFFFFFFFF
    assert get_neighbor(_cell(top, top, 32), Direction.NORTH_EAST) == _cell(0, 0, 32)
    assert get_neighbor(_cell(0, 0, 32), Direction.SOUTH_WEST) == _cell(top, top, 32)


def test_neighbor_precision_one() -> None:
    assert get_neighbor(_cell(0, 0, 1), Direction.EAST) == _cell(0, 1, 1)
    assert get_neighbor(_cell(0, 0, 1), Direction.WEST) == _cell(0, 1, 1)
    assert get_neighbor(_cell(1, 1, 1), Direction.NORTH) == _cell(0, 1, 1)


def test_get_neighbors_returns_all_directions() -> None:
    neighbors = get_neighbors(TAIPEI)
    assert isinstance(neighbors, Neighbors)
    assert neighbors == TAIPEI.neighbors()
    assert neighbors.north == _cell(LAT_INDEX + 1, LNG_INDEX)
    assert neighbors.south_west == _cell(LAT_INDEX - 1, LNG_INDEX - 1)

    items = dict(neighbors.items())
    assert set(items) == set(Direction)
    for direction, code in items.items():
        assert neighbors[direction] == code == get_neighbor(TAIPEI, direction)
        assert code.precision == PRECISION
    assert TAIPEI not in items.values()


def test_neighbor_areas_touch_the_cell() -> None:
    area = TAIPEI.area()
    assert get_neighbor(TAIPEI, Direction.NORTH).area().lat_range[0] == area.lat_range[1]
    assert get_neighbor(TAIPEI, Direction.EAST).area().lng_range[0] == area.lng_range[1]
    assert get_neighbor(TAIPEI, Direction.SOUTH).area().lat_range[1] == area.lat_range[0]
    assert get_neighbor(TAIPEI, Direction.WEST).area().lng_range[1] == area.lng_range[0]
