from typing import List, Sequence

from .types import Player, ShipType, ShipTypeId


class ShipStatus:
    """Remaining health per player and ship type, indexed by ShipTypeId."""

    def __init__(self, ship_types: Sequence[ShipType]):
        lengths = [st.length for st in ship_types]
        self._status: List[List[int]] = [list(lengths), list(lengths)]

    def _entry(self, player: Player, ship_type_id: ShipTypeId) -> List[int]:
        health = self._status[player.index]
        if not 0 <= ship_type_id < len(health):
            raise ValueError(f"unknown ship type id {ship_type_id}")
        return health

    def get_health(self, player: Player, ship_type_id: ShipTypeId) -> int:
        return self._entry(player, ship_type_id)[ship_type_id]

    def hit(self, player: Player, ship_type_id: ShipTypeId) -> int:
        health = self._entry(player, ship_type_id)
        # entries never drop below 0
        health[ship_type_id] = max(0, health[ship_type_id] - 1)
        return health[ship_type_id]

    def get_sum_health(self, player: Player) -> int:
        return max(0, sum(self._status[player.index]))
