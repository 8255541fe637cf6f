from geobits import Coordinate, Direction, encode


def main() -> None:
    taipei = Coordinate(latitude=25.006, longitude=121.46)

    code = encode(taipei, 15)
    print(bin(code.bits), code.precision)

    area = code.area()
    print(area.lat_range, area.lng_range, area.contains(taipei))

    for direction, neighbor in code.neighbors().items():
        print(direction.value, bin(neighbor.bits))

    print(code.neighbor(Direction.WEST).area().center())
    print([bin(child.bits) for child in code.children()])


if __name__ == "__main__":
    main()
