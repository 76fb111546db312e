from __future__ import annotations

import copy
from typing import Iterable, Iterator

from .errors import ConfigError
from .rotor import Rotor


def _key(name: str) -> str:
    return (name or "").upper().strip()


class RotorInventory:
    """
    The set of rotors available to a machine, keyed by name.

    The inventory owns the Rotor objects; machines refer to them by name.
    Rotor settings are mutable, so two machines that must run independently
    should each get their own inventory (see copy()).
    """

    def __init__(self, rotors: Iterable[Rotor] = ()) -> None:
        self._rotors: dict[str, Rotor] = {}
        for r in rotors:
            self.register(r)

    def register(self, rotor: Rotor) -> None:
        key = _key(rotor.name)
        if not key:
            raise ConfigError("Rotor must have a non-empty name.")
        if key in self._rotors:
            raise ConfigError(f"rotor name '{key}' is defined more than once")
        self._rotors[key] = rotor

    def names(self) -> list[str]:
        return list(self._rotors.keys())

    def get(self, name: str) -> Rotor:
        key = _key(name)
        if key not in self._rotors:
            raise ConfigError(f"rotor '{name}' not in inventory. Available: {', '.join(self.names())}")
        return self._rotors[key]

    def __getitem__(self, name: str) -> Rotor:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._rotors

    def __iter__(self) -> Iterator[Rotor]:
        return iter(self._rotors.values())

    def __len__(self) -> int:
        return len(self._rotors)

    def copy(self) -> "RotorInventory":
        """An independent inventory: same wirings, fresh rotor state."""
        fresh = RotorInventory()
        for r in self._rotors.values():
            clone = copy.copy(r)
            clone.reset()
            fresh.register(clone)
        return fresh
