"""A started game of battleship."""

from typing import Optional, Sequence, Tuple

from battleship_rules.utils.debug import debug_event

from .board import Battlefield, Cell
from .config import NUM_PLAYERS
from .errors import ShootError, ShootErrorReason
from .ship_status import ShipStatus
from .types import CellStatus, Dimension, Player, ShipType, ShootOutcome


class Game:
    """Turn state machine for a running game.

    Prefer ``PreGame.start()`` over building a Game directly. ``battlefields``
    holds exactly two boards: P1 owns index 0, P2 owns index 1.
    """

    def __init__(self, ship_types: Sequence[ShipType], battlefields: Sequence[Battlefield]):
        if len(battlefields) != NUM_PLAYERS:
            raise ValueError(f"expected {NUM_PLAYERS} battlefields, got {len(battlefields)}")
        self._ship_types: Tuple[ShipType, ...] = tuple(ship_types)
        for i, st in enumerate(self._ship_types):
            if st.id != i:
                raise ValueError(f"ship type ids must run 0..n-1 in catalog order, got {st.id} at position {i}")
        for bf in battlefields:
            for x, y, cell in bf.cells():
                if cell.occupied and not 0 <= cell.ship_type_id < len(self._ship_types):
                    raise ValueError(f"cell ({x}, {y}) holds unknown ship type id {cell.ship_type_id}")
        self._battlefields = list(battlefields)
        self._ship_status = ShipStatus(self._ship_types)
        self._current_player = Player.P1
        self._winner: Optional[Player] = None

    @property
    def width(self) -> Dimension:
        return self._battlefields[0].width

    @property
    def height(self) -> Dimension:
        return self._battlefields[0].height

    @property
    def ship_types(self) -> Tuple[ShipType, ...]:
        return self._ship_types

    @property
    def current_player(self) -> Player:
        return self._current_player

    @property
    def is_over(self) -> bool:
        return self._winner is not None

    def get_winner(self) -> Optional[Player]:
        return self._winner

    def shoot(self, target_player: Player, x: Dimension, y: Dimension) -> ShootOutcome:
        """Fire at (x, y) on ``target_player``'s battlefield.

        The shooter is the current player, so ``target_player`` must be the
        opponent. The turn passes only on a miss.
        """
        # every shot after a win is GameOver, own board included, hence before the turn check
        if self._winner is not None:
            raise ShootError(ShootErrorReason.GAME_OVER, f"game is over, {self._winner.name} won")
        if target_player is self._current_player:
            raise ShootError(
                ShootErrorReason.NOT_THIS_PLAYERS_TURN,
                f"{target_player.name} cannot fire at their own battlefield",
            )
        cell = self._battlefields[target_player.index].get_cell(x, y)
        if cell is None:
            raise ShootError(ShootErrorReason.OUT_OF_BOUNDS, f"({x}, {y}) is outside the battlefield")
        if cell.is_shot:
            raise ShootError(ShootErrorReason.ALREADY_SHOT, f"({x}, {y}) has already been shot")

        shooter = self._current_player
        if cell.ship_type_id is None:
            cell.shoot()
            self._current_player = shooter.next()
            outcome = ShootOutcome.MISS
        else:
            new_health = self._ship_status.hit(target_player, cell.ship_type_id)
            cell.shoot()
            if self._ship_status.get_sum_health(target_player) == 0:
                self._winner = shooter
                outcome = ShootOutcome.WINNING_SHOT
            elif new_health == 0:
                outcome = ShootOutcome.DESTROYED
            else:
                outcome = ShootOutcome.HIT

        debug_event("Shot", f"{shooter.name} -> {target_player.name} ({x}, {y}): {outcome.value}", level="debug")
        if outcome is ShootOutcome.WINNING_SHOT:
            debug_event("Game over", f"{shooter.name} wins")
        return outcome

    def _cell(self, player: Player, x: Dimension, y: Dimension) -> Cell:
        cell = self._battlefields[player.index].get_cell(x, y)
        if cell is None:
            raise ShootError(ShootErrorReason.OUT_OF_BOUNDS, f"({x}, {y}) is outside the battlefield")
        return cell

    def get_cell(self, player: Player, x: Dimension, y: Dimension) -> CellStatus:
        """Owner's view of their own battlefield; misses are not shown."""
        cell = self._cell(player, x, y)
        if not cell.occupied:
            return CellStatus.EMPTY
        return CellStatus.HIT if cell.is_shot else CellStatus.SHIP

    def get_opponent_cell(self, player: Player, x: Dimension, y: Dimension) -> CellStatus:
        """Attacker's view of ``player``'s battlefield; unshot ships stay hidden."""
        cell = self._cell(player, x, y)
        if not cell.is_shot:
            return CellStatus.EMPTY
        return CellStatus.HIT if cell.occupied else CellStatus.MISS

    def get_health(self, player: Player, ship_type: ShipType) -> int:
        if ship_type not in self._ship_types:
            raise ValueError(f"unknown ship type {ship_type!r}")
        return self._ship_status.get_health(player, ship_type.id)

    def get_sum_health(self, player: Player) -> int:
        return self._ship_status.get_sum_health(player)

    def __repr__(self) -> str:
        state = f"winner={self._winner.name}" if self._winner else f"current={self._current_player.name}"
        return f"Game({self.width}x{self.height}, {state})"
