from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from .alphabet import Alphabet
from .errors import ConfigError
from .inventory import RotorInventory
from .permutation import Permutation
from .rotor import Rotor

logger = logging.getLogger(__name__)


class Machine:
    """
    A complete Enigma-style machine.

    Slot 0 holds the reflector, the rightmost `num_pawls` slots hold moving
    rotors and anything in between must be fixed. Rotors are picked by name
    from the inventory with insert_rotors(); the machine only keeps the
    names of the active rotors.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        num_pawls: int,
        rotors: Union[RotorInventory, Iterable[Rotor]],
    ) -> None:
        if num_rotors <= 1:
            raise ConfigError(f"a machine needs more than one rotor slot (got {num_rotors})")
        if not 0 <= num_pawls < num_rotors:
            raise ConfigError(f"number of pawls must be in 0..{num_rotors - 1} (got {num_pawls})")

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._num_pawls = num_pawls
        self._inventory = rotors if isinstance(rotors, RotorInventory) else RotorInventory(rotors)
        self._slots: list[str] = []
        self._plugboard = Permutation("", alphabet)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        """Number of pawls, and thus of rotating rotors."""
        return self._num_pawls

    @property
    def plugboard(self) -> Permutation:
        return self._plugboard

    def active_rotors(self) -> list[Rotor]:
        if not self._slots:
            raise ConfigError("no rotors inserted")
        return [self._inventory[name] for name in self._slots]

    def insert_rotors(self, names: Sequence[str]) -> None:
        """
        Put the rotors named NAMES into the slots, NAMES[0] being the
        reflector. Every inserted rotor starts at setting 0 and ring 0.
        """
        self._install(self._pick(names))

    def _pick(self, names: Sequence[str]) -> list[Rotor]:
        if len(names) != self._num_rotors:
            raise ConfigError(f"expected {self._num_rotors} rotor names, got {len(names)}")

        picked: list[Rotor] = []
        seen: set[str] = set()
        for name in names:
            rotor = self._inventory[name]
            key = rotor.name.upper()
            if key in seen:
                raise ConfigError(f"rotor '{rotor.name}' named more than once")
            seen.add(key)
            picked.append(rotor)

        self._validate(picked)
        return picked

    def _install(self, rotors: list[Rotor]) -> None:
        for rotor in rotors:
            rotor.reset()
        self._slots = [r.name for r in rotors]
        logger.debug("inserted rotors %s", " ".join(self._slots))

    def _validate(self, rotors: list[Rotor]) -> None:
        if not rotors[0].reflecting():
            raise ConfigError(f"first rotor '{rotors[0].name}' is not a reflector")

        first_moving = self._num_rotors - self._num_pawls
        for i in range(1, first_moving):
            r = rotors[i]
            if r.reflecting():
                raise ConfigError(f"reflector '{r.name}' found in slot {i}; it must be in slot 0")
            if r.rotates():
                raise ConfigError(f"moving rotor '{r.name}' in slot {i}, which has no pawl")
        for i in range(first_moving, self._num_rotors):
            r = rotors[i]
            if not r.rotates():
                raise ConfigError(f"rotor '{r.name}' in pawl slot {i} does not rotate")

    def set_rotors(self, setting: str) -> None:
        """
        Set slots 1..num_rotors-1 from SETTING, one symbol per slot,
        leftmost first. The reflector is never set here. Nothing changes
        unless the whole setting is valid.
        """
        rotors = self.active_rotors()
        positions = self._resolve(rotors, setting, ring=False)
        for rotor, p in zip(rotors[1:], positions):
            rotor.setting = p
        logger.debug("rotor setting %s", setting)

    def set_rings(self, rings: str) -> None:
        """Same layout as set_rotors(), for the ring settings."""
        rotors = self.active_rotors()
        positions = self._resolve(rotors, rings, ring=True)
        for rotor, p in zip(rotors[1:], positions):
            rotor.ring = p
        logger.debug("ring setting %s", rings)

    def _resolve(self, rotors: list[Rotor], setting: str, ring: bool) -> list[int]:
        what = "ring setting" if ring else "setting"
        if len(setting) != self._num_rotors - 1:
            raise ConfigError(
                f"{what} '{setting}' has {len(setting)} characters; expected {self._num_rotors - 1}"
            )
        if ring:
            return [r.check_ring(ch) for r, ch in zip(rotors[1:], setting)]
        return [r.check_setting(ch) for r, ch in zip(rotors[1:], setting)]

    def set_plugboard(self, plugboard: Optional[Permutation]) -> None:
        self._plugboard = self._check_plugboard(plugboard)

    def _check_plugboard(self, plugboard: Optional[Permutation]) -> Permutation:
        if plugboard is None:
            return Permutation("", self._alphabet)
        if plugboard.alphabet != self._alphabet:
            raise ConfigError(
                f"plugboard alphabet {plugboard.alphabet.symbols!r} differs from "
                f"machine alphabet {self._alphabet.symbols!r}"
            )
        return plugboard

    def configure(
        self,
        names: Sequence[str],
        setting: str,
        rings: Optional[str] = None,
        plugboard: Optional[Permutation] = None,
    ) -> None:
        """
        insert_rotors(), set_rotors(), set_rings() and set_plugboard() in one
        step. Everything is checked first; on error the machine is unchanged.
        """
        rotors = self._pick(names)
        positions = self._resolve(rotors, setting, ring=False)
        ring_positions = self._resolve(rotors, rings, ring=True) if rings is not None else None
        board = self._check_plugboard(plugboard)

        self._install(rotors)
        for rotor, p in zip(rotors[1:], positions):
            rotor.setting = p
        if ring_positions is not None:
            for rotor, p in zip(rotors[1:], ring_positions):
                rotor.ring = p
        self._plugboard = board

    def positions(self) -> str:
        """Window letters of slots 1..num_rotors-1."""
        return "".join(self._alphabet.to_char(r.setting) for r in self.active_rotors()[1:])

    def _step(self, rotors: list[Rotor]) -> None:
        if self._num_pawls == 0:
            return

        n = self._num_rotors
        # decide from the notch state before anything moves
        pulled = [False] * n
        pulled[n - 1] = True
        for i in range(n - self._num_pawls, n - 1):
            if rotors[i + 1].at_notch():
                pulled[i] = True
                pulled[i + 1] = True

        for rotor, pull in zip(rotors, pulled):
            if pull:
                rotor.advance()

    def _convert_index(self, c: int, rotors: list[Rotor]) -> int:
        self._step(rotors)

        p = self._plugboard.permute(c)
        for rotor in reversed(rotors):
            p = rotor.convert_forward(p)
        for rotor in rotors[1:]:
            p = rotor.convert_backward(p)
        p = self._plugboard.invert(p)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s -> %s at %s",
                self._alphabet.to_char(c),
                self._alphabet.to_char(p),
                self.positions(),
            )
        return p

    def convert(self, value):
        """
        Convert one symbol index (int) after advancing the rotors, or a
        whole message (str). Spaces in a message are dropped and do not
        step the machine.
        """
        rotors = self.active_rotors()
        if isinstance(value, str):
            # translate first so a bad symbol fails before any rotor moves
            indices = [self._alphabet.to_int(ch) for ch in value if ch != " "]
            return "".join(self._alphabet.to_char(self._convert_index(i, rotors)) for i in indices)
        self._alphabet.to_char(value)  # range check
        return self._convert_index(value, rotors)
