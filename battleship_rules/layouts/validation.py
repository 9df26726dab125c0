from typing import List, Set

from battleship_rules.domain.config import MIN_HEIGHT, MIN_WIDTH

from .definition import FleetDefinition, ShipSpec


def validate_fleet(fleet: FleetDefinition) -> List[str]:
    errors: List[str] = []

    if fleet.width < MIN_WIDTH:
        errors.append(f"width must be at least {MIN_WIDTH}")
    if fleet.height < MIN_HEIGHT:
        errors.append(f"height must be at least {MIN_HEIGHT}")

    if not fleet.ships:
        errors.append("fleet must define at least one ship")

    names: Set[str] = set()
    for ship in fleet.ships:
        _validate_ship(ship, fleet, names, errors)

    if fleet.ships and fleet.total_cells > fleet.width * fleet.height:
        errors.append(f"fleet needs {fleet.total_cells} cells but the board only has {fleet.width * fleet.height}")

    return errors


def _validate_ship(ship: ShipSpec, fleet: FleetDefinition, names: Set[str], errors: List[str]) -> None:
    name = ship.name.strip()
    if not name:
        errors.append("ship name must be non-empty")
    elif name in names:
        errors.append(f"duplicate ship name: {name}")
    else:
        names.add(name)

    if ship.length <= 0:
        errors.append(f"ship {name or '?'} must have length > 0")
    elif ship.length > max(fleet.width, fleet.height):
        errors.append(f"ship {name or '?'} of length {ship.length} does not fit a {fleet.width}x{fleet.height} board")
