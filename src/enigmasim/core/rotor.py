from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from .alphabet import Alphabet
from .errors import ConfigError
from .permutation import Permutation, wrap

Position = Union[int, str]


class RotorKind(str, Enum):
    # values are the type letters used in configuration files
    MOVING = "M"
    FIXED = "N"
    REFLECTOR = "R"


@dataclass
class Rotor:
    """
    One rotor: a wiring permutation plus a mutable rotational setting.

    The kind decides how it behaves when driven:
      - MOVING rotors advance one position per drive and report at_notch()
        when the symbol at their current setting is one of their notches
      - FIXED rotors never advance and only accept setting 0
      - REFLECTORs are fixed rotors that sit in slot 0 and send the signal back

    `ring` is the ring setting (Ringstellung). It shifts the wiring relative
    to the setting but never affects notch detection.
    """

    name: str
    kind: RotorKind
    permutation: Permutation
    notches: str = ""
    setting: int = field(default=0, compare=False)
    ring: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        self.kind = RotorKind(self.kind)
        if self.kind is RotorKind.MOVING:
            if not self.notches:
                raise ConfigError(f"moving rotor '{self.name}' needs at least one notch")
            for ch in self.notches:
                if ch not in self.alphabet:
                    raise ConfigError(f"notch {ch!r} of rotor '{self.name}' is not in the alphabet")
        elif self.notches:
            raise ConfigError(f"rotor '{self.name}' does not move and cannot have notches")

    @classmethod
    def moving(cls, name: str, perm: Permutation, notches: str) -> "Rotor":
        return cls(name, RotorKind.MOVING, perm, notches)

    @classmethod
    def fixed(cls, name: str, perm: Permutation) -> "Rotor":
        return cls(name, RotorKind.FIXED, perm)

    @classmethod
    def reflector(cls, name: str, perm: Permutation) -> "Rotor":
        return cls(name, RotorKind.REFLECTOR, perm)

    @property
    def alphabet(self) -> Alphabet:
        return self.permutation.alphabet

    def size(self) -> int:
        return self.permutation.size()

    def rotates(self) -> bool:
        return self.kind is RotorKind.MOVING

    def reflecting(self) -> bool:
        return self.kind is RotorKind.REFLECTOR

    def type_token(self) -> str:
        """The configuration-file type token, e.g. 'MQ', 'N', 'R'."""
        return self.kind.value + self.notches

    def _position(self, posn: Position) -> int:
        if isinstance(posn, str):
            return self.alphabet.to_int(posn)
        self.alphabet.to_char(posn)  # range check
        return posn

    def check_setting(self, posn: Position) -> int:
        """The index POSN would set this rotor to, without changing it."""
        p = self._position(posn)
        if p != 0 and not self.rotates():
            raise ConfigError(
                f"rotor '{self.name}' has only one position; cannot set it to "
                f"{self.alphabet.to_char(p)!r}"
            )
        return p

    def check_ring(self, posn: Position) -> int:
        p = self._position(posn)
        if p != 0 and self.reflecting():
            raise ConfigError(f"reflector '{self.name}' has no ring setting")
        return p

    def set(self, posn: Position) -> None:
        self.setting = self.check_setting(posn)

    def set_ring(self, posn: Position) -> None:
        self.ring = self.check_ring(posn)

    def reset(self) -> None:
        self.setting = 0
        self.ring = 0

    def at_notch(self) -> bool:
        if not self.rotates():
            return False
        return self.alphabet.to_char(self.setting) in self.notches

    def advance(self) -> None:
        if self.rotates():
            self.setting = wrap(self.setting + 1, self.size())

    def convert_forward(self, p: int) -> int:
        """Signal entering from the right at contact P, leaving on the left."""
        shift = self.setting - self.ring
        n = self.size()
        return wrap(self.permutation.permute(wrap(p + shift, n)) - shift, n)

    def convert_backward(self, e: int) -> int:
        """Signal entering from the left at contact E, leaving on the right."""
        shift = self.setting - self.ring
        n = self.size()
        return wrap(self.permutation.invert(wrap(e + shift, n)) - shift, n)

    def __repr__(self) -> str:
        return (
            f"Rotor({self.name!r}, {self.type_token()!r}, "
            f"setting={self.alphabet.to_char(self.setting)!r})"
        )
