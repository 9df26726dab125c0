import copy
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .config import MIN_HEIGHT, MIN_WIDTH
from .errors import GameError, GameErrorReason
from .types import Dimension, ShipTypeId


@dataclass
class Cell:
    ship_type_id: Optional[ShipTypeId] = None
    shot: bool = False

    @property
    def is_shot(self) -> bool:
        return self.shot

    @property
    def occupied(self) -> bool:
        return self.ship_type_id is not None

    def set_ship_type_id(self, ship_type_id: ShipTypeId) -> None:
        if self.ship_type_id is not None:
            raise ValueError(f"cell already holds ship type {self.ship_type_id}")
        self.ship_type_id = ship_type_id

    def shoot(self) -> None:
        if self.shot:
            raise ValueError("cell has already been shot")
        self.shot = True


class Battlefield:
    """One player's grid of cells, addressed as (x, y) = (column, line).

    A passive grid: placement and shooting rules live in PreGame and Game.
    """

    def __init__(self, width: Dimension, height: Dimension):
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            raise GameError(
                GameErrorReason.ILLEGAL_DIMENSIONS,
                f"illegal battlefield dimensions {width}x{height} "
                f"(need width >= {MIN_WIDTH}, height >= {MIN_HEIGHT})",
            )
        self._width = width
        self._height = height
        self._cells: List[List[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]

    @property
    def width(self) -> Dimension:
        return self._width

    @property
    def height(self) -> Dimension:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        if not self.in_bounds(x, y):
            return None
        return self._cells[y][x]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for y, line in enumerate(self._cells):
            for x, cell in enumerate(line):
                yield x, y, cell

    def copy(self) -> "Battlefield":
        return copy.deepcopy(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Battlefield):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Battlefield({self._width}x{self._height})"
