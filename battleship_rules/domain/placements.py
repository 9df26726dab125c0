from typing import Tuple

from .types import Coord, Dimension, Orientation


def _check_orientation(orientation: Orientation) -> None:
    if orientation is not Orientation.HORIZONTAL and orientation is not Orientation.VERTICAL:
        raise ValueError(f"unknown orientation {orientation!r}")


def ship_cells(x: Dimension, y: Dimension, length: Dimension, orientation: Orientation) -> Tuple[Coord, ...]:
    """Cells covered by a ship anchored at (x, y), extending right or down."""
    _check_orientation(orientation)
    if orientation is Orientation.HORIZONTAL:
        return tuple((x + n, y) for n in range(length))
    return tuple((x, y + n) for n in range(length))


def span_in_bounds(
    x: Dimension,
    y: Dimension,
    length: Dimension,
    orientation: Orientation,
    width: Dimension,
    height: Dimension,
) -> bool:
    _check_orientation(orientation)
    if x < 0 or y < 0 or length < 1:
        return False
    if orientation is Orientation.HORIZONTAL:
        max_x, max_y = x + length - 1, y
    else:
        max_x, max_y = x, y + length - 1
    return max_x < width and max_y < height
