"""Everything needed to set up a game of battleship.

A ``PreGame`` collects ship types and both players' placements. ``start()``
hands its battlefields over to a new ``Game``; the PreGame is consumed at
that point and rejects further use.
"""

from typing import Dict, List, Tuple

from battleship_rules.utils.debug import debug_event

from .board import Battlefield
from .config import NUM_PLAYERS
from .errors import (
    GameStartError,
    GameStartErrorReason,
    PlaceError,
    PlaceErrorReason,
    ShipTypeError,
    ShipTypeErrorReason,
)
from .game import Game
from .placements import ship_cells, span_in_bounds
from .types import CellStatus, Coord, Dimension, Orientation, Placement, Player, ShipType, ShipTypeId


class PreGame:
    def __init__(self, width: Dimension, height: Dimension):
        first = Battlefield(width, height)
        self._width = width
        self._height = height
        self._ship_types: List[ShipType] = []
        self._placements: Dict[Tuple[Player, ShipTypeId], Placement] = {}
        self._battlefields: List[Battlefield] = [first, first.copy()]
        self._started = False

    @property
    def width(self) -> Dimension:
        return self._width

    @property
    def height(self) -> Dimension:
        return self._height

    @property
    def ship_types(self) -> Tuple[ShipType, ...]:
        return tuple(self._ship_types)

    @property
    def placed_count(self) -> int:
        return len(self._placements)

    @property
    def started(self) -> bool:
        return self._started

    def _assert_not_started(self) -> None:
        if self._started:
            raise GameStartError(
                GameStartErrorReason.ALREADY_STARTED,
                self,
                "this setup has already been turned into a game",
            )

    def add_ship_type(self, name: str, length: Dimension) -> ShipType:
        """Register a ship type and return its handle.

        Raises ShipTypeError if ``length`` is below 1 or longer than both
        the width and the height of the battlefield.
        """
        self._assert_not_started()
        if length < 1:
            raise ShipTypeError(
                ShipTypeErrorReason.ILLEGAL_SHIP_LENGTH,
                f"ship type {name!r} must have length >= 1, got {length}",
            )
        if length > max(self._width, self._height):
            raise ShipTypeError(
                ShipTypeErrorReason.SHIP_TOO_LONG_FOR_BATTLEFIELD,
                f"ship type {name!r} of length {length} does not fit a {self._width}x{self._height} battlefield",
            )
        ship_type = ShipType(len(self._ship_types), name, length)
        self._ship_types.append(ship_type)
        debug_event("Setup", f"ship type #{ship_type.id} {name} (length {length}) added")
        return ship_type

    def place_ship(
        self,
        player: Player,
        ship_type: ShipType,
        x: Dimension,
        y: Dimension,
        orientation: Orientation,
    ) -> None:
        """Place ``player``'s ship of ``ship_type`` anchored at (x, y).

        Checks run in order and stop at the first failure: unknown ship type,
        already placed, out of bounds, cell occupied. Nothing is written to
        the battlefield unless every check passes.
        """
        self._assert_not_started()
        if ship_type not in self._ship_types:
            raise PlaceError(PlaceErrorReason.UNKNOWN_SHIP_TYPE, f"unknown ship type {ship_type!r}")
        if (player, ship_type.id) in self._placements:
            raise PlaceError(
                PlaceErrorReason.ALREADY_PLACED,
                f"{player.name} has already placed a {ship_type.name}",
            )
        if not span_in_bounds(x, y, ship_type.length, orientation, self._width, self._height):
            raise PlaceError(
                PlaceErrorReason.OUT_OF_BOUNDS,
                f"{ship_type.name} at ({x}, {y}) {orientation.name.lower()} leaves the battlefield",
            )
        cells = ship_cells(x, y, ship_type.length, orientation)
        self._assert_cells_free(player, cells)

        bf = self._battlefields[player.index]
        for cx, cy in cells:
            bf.get_cell(cx, cy).set_ship_type_id(ship_type.id)
        self._placements[(player, ship_type.id)] = Placement(player, ship_type.id, cells)
        debug_event(
            "Setup",
            f"{player.name} placed {ship_type.name} at ({x}, {y}) {orientation.name.lower()}",
            level="debug",
        )

    def _assert_cells_free(self, player: Player, cells: Tuple[Coord, ...]) -> None:
        bf = self._battlefields[player.index]
        for x, y in cells:
            if bf.get_cell(x, y).occupied:
                raise PlaceError(PlaceErrorReason.CELL_OCCUPIED, f"cell ({x}, {y}) is already occupied")

    def is_placed(self, player: Player, ship_type: ShipType) -> bool:
        return (player, ship_type.id) in self._placements and ship_type in self._ship_types

    def placements(self, player: Player) -> List[Placement]:
        return [self._placements[(player, st.id)] for st in self._ship_types if (player, st.id) in self._placements]

    def get_cell(self, player: Player, x: Dimension, y: Dimension) -> CellStatus:
        """Setup view of ``player``'s own battlefield: SHIP or EMPTY."""
        self._assert_not_started()
        cell = self._battlefields[player.index].get_cell(x, y)
        if cell is None:
            raise PlaceError(PlaceErrorReason.OUT_OF_BOUNDS, f"({x}, {y}) is outside the battlefield")
        return CellStatus.SHIP if cell.occupied else CellStatus.EMPTY

    def start(self) -> Game:
        """Consume this PreGame and return the Game built from it.

        Requires both players to have placed every ship type. On failure the
        GameStartError carries this PreGame, unchanged, as ``pregame``.
        """
        self._assert_not_started()
        if not self._placements:
            raise GameStartError(GameStartErrorReason.NO_SHIPS_PLACED, self, "no ships have been placed")
        if len(self._placements) != NUM_PLAYERS * len(self._ship_types):
            raise GameStartError(
                GameStartErrorReason.NOT_ALL_SHIPS_PLACED,
                self,
                f"{len(self._placements)} of {NUM_PLAYERS * len(self._ship_types)} ships placed",
            )
        game = Game(self._ship_types, self._battlefields)
        self._started = True
        self._battlefields = []
        debug_event(
            "Setup",
            f"game started on {self._width}x{self._height} with {len(self._ship_types)} ship types",
        )
        return game

    def __repr__(self) -> str:
        return (
            f"PreGame({self._width}x{self._height}, ship_types={len(self._ship_types)}, "
            f"placed={len(self._placements)})"
        )
