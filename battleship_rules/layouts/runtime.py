from typing import Dict, Tuple

from battleship_rules.domain.errors import FleetError
from battleship_rules.domain.pregame import PreGame
from battleship_rules.domain.types import ShipType

from .definition import FleetDefinition
from .validation import validate_fleet


def new_pregame(fleet: FleetDefinition) -> Tuple[PreGame, Dict[str, ShipType]]:
    """Build a PreGame for ``fleet`` with every ship type registered.

    Returns the PreGame and the ship type handles keyed by ship name.
    """
    problems = validate_fleet(fleet)
    if problems:
        raise FleetError(problems)

    pregame = PreGame(fleet.width, fleet.height)
    handles: Dict[str, ShipType] = {}
    for spec in fleet.ships:
        handles[spec.name.strip()] = pregame.add_ship_type(spec.name.strip(), spec.length)
    return pregame, handles
