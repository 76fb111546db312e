from .errors import ConfigError, EnigmaError, RangeError
from .alphabet import Alphabet, expand_ranges
from .permutation import Permutation
from .rotor import Rotor, RotorKind
from .inventory import RotorInventory
from .machine import Machine

__all__ = [
    "Alphabet",
    "ConfigError",
    "EnigmaError",
    "Machine",
    "Permutation",
    "RangeError",
    "Rotor",
    "RotorInventory",
    "RotorKind",
    "expand_ranges",
]
