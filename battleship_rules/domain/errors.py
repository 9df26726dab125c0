"""Exceptions raised by the rules engine.

Every failure carries a ``reason`` member from one of the enums below so
callers can branch on it (or translate it into their own transport format)
without parsing messages. All checks run before any state is touched, so a
failed call leaves the PreGame or Game exactly as it was.
"""

from enum import Enum
from typing import Any, List, Optional


class GameErrorReason(Enum):
    ILLEGAL_DIMENSIONS = "IllegalDimensions"


class ShipTypeErrorReason(Enum):
    ILLEGAL_SHIP_LENGTH = "IllegalShipLength"
    SHIP_TOO_LONG_FOR_BATTLEFIELD = "ShipTooLongForBattlefield"


class PlaceErrorReason(Enum):
    UNKNOWN_SHIP_TYPE = "UnknownShipType"
    ALREADY_PLACED = "AlreadyPlaced"
    OUT_OF_BOUNDS = "OutOfBounds"
    CELL_OCCUPIED = "CellOccupied"


class GameStartErrorReason(Enum):
    NO_SHIPS_PLACED = "NoShipsPlaced"
    NOT_ALL_SHIPS_PLACED = "NotAllShipsPlaced"
    ALREADY_STARTED = "AlreadyStarted"


class ShootErrorReason(Enum):
    NOT_THIS_PLAYERS_TURN = "NotThisPlayersTurn"
    GAME_OVER = "GameOver"
    OUT_OF_BOUNDS = "OutOfBounds"
    ALREADY_SHOT = "AlreadyShot"


class BattleshipError(Exception):
    def __init__(self, reason: Enum, message: str = ""):
        self.reason = reason
        super().__init__(message or reason.value)


class GameError(BattleshipError):
    """Illegal battlefield configuration."""


class ShipTypeError(BattleshipError):
    """A ship type could not be added to the catalog."""


class PlaceError(BattleshipError):
    """A ship could not be placed."""


class GameStartError(BattleshipError):
    """The setup phase is not complete (or already over).

    ``pregame`` is the untouched PreGame so setup can continue.
    """

    def __init__(self, reason: GameStartErrorReason, pregame: Optional[Any] = None, message: str = ""):
        super().__init__(reason, message)
        self.pregame = pregame


class ShootError(BattleshipError):
    """A shot was rejected."""


class FleetErrorReason(Enum):
    INVALID_FLEET = "InvalidFleet"


class FleetError(BattleshipError):
    """A fleet preset failed validation; ``problems`` lists every issue found."""

    def __init__(self, problems: List[str]):
        super().__init__(FleetErrorReason.INVALID_FLEET, "; ".join(problems))
        self.problems = list(problems)
