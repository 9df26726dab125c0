from typing import Tuple

from battleship_rules.domain.config import CLASSIC_BOARD_SIZE

from .definition import FleetDefinition, ShipSpec


def classic_fleet() -> FleetDefinition:
    ships = (
        ShipSpec("Carrier", 5),
        ShipSpec("Battleship", 4),
        ShipSpec("Cruiser", 3),
        ShipSpec("Submarine", 3),
        ShipSpec("Destroyer", 2),
    )
    return FleetDefinition(
        fleet_id="classic",
        name="Classic Battleship (10x10)",
        width=CLASSIC_BOARD_SIZE,
        height=CLASSIC_BOARD_SIZE,
        ships=ships,
    )


def patrol_fleet() -> FleetDefinition:
    ships = (
        ShipSpec("Corvette", 2),
        ShipSpec("Submarine", 1),
    )
    return FleetDefinition(
        fleet_id="patrol",
        name="Patrol (3x3)",
        width=3,
        height=3,
        ships=ships,
    )


def builtin_fleets() -> Tuple[FleetDefinition, ...]:
    return (classic_fleet(), patrol_fleet())
