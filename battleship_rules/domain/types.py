from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Dimension = int
ShipTypeId = int
Coord = Tuple[Dimension, Dimension]


class Player(Enum):
    P1 = 1
    P2 = 2

    def next(self) -> "Player":
        return Player.P2 if self is Player.P1 else Player.P1

    @property
    def index(self) -> int:
        # position of this player's battlefield / health vector
        return 0 if self is Player.P1 else 1


class Orientation(Enum):
    HORIZONTAL = "H"
    VERTICAL = "V"


class CellStatus(Enum):
    """The (display) states a cell on a battlefield can have."""

    EMPTY = "."
    MISS = "o"
    SHIP = "s"
    HIT = "x"


class ShootOutcome(Enum):
    HIT = "hit"
    MISS = "miss"
    DESTROYED = "destroyed"
    WINNING_SHOT = "winning_shot"


@dataclass(frozen=True)
class ShipType:
    id: ShipTypeId
    name: str
    length: Dimension


@dataclass(frozen=True)
class Placement:
    player: Player
    ship_type_id: ShipTypeId
    cells: Tuple[Coord, ...]
