import hashlib
import json
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ShipSpec:
    name: str
    length: int

    def normalized(self) -> dict:
        return {
            "name": self.name.strip(),
            "length": int(self.length),
        }


@dataclass(frozen=True)
class FleetDefinition:
    """Board size plus the ship types each player has to place.

    Ship order is significant: it is the order ships are registered in, and
    so the order of their ShipTypeIds.
    """

    fleet_id: str
    name: str
    width: int
    height: int
    ships: Tuple[ShipSpec, ...]

    def normalized(self) -> dict:
        return {
            "fleet_id": self.fleet_id,
            "name": self.name,
            "width": int(self.width),
            "height": int(self.height),
            "ships": [s.normalized() for s in self.ships],
        }

    @property
    def fleet_hash(self) -> str:
        payload = json.dumps(self.normalized(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]

    def ship_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.ships)

    @property
    def total_cells(self) -> int:
        return sum(s.length for s in self.ships)
