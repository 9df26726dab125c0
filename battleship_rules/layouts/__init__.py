from .builtins import builtin_fleets, classic_fleet, patrol_fleet
from .definition import FleetDefinition, ShipSpec
from .runtime import new_pregame
from .validation import validate_fleet

__all__ = [
    "FleetDefinition",
    "ShipSpec",
    "classic_fleet",
    "patrol_fleet",
    "builtin_fleets",
    "new_pregame",
    "validate_fleet",
]
