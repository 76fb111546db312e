from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Union

from enigmasim.core.alphabet import Alphabet
from enigmasim.core.errors import ConfigError
from enigmasim.core.inventory import RotorInventory
from enigmasim.core.machine import Machine
from enigmasim.core.permutation import Permutation
from enigmasim.core.rotor import Rotor, RotorKind

from .common import check_cycles, is_cycle_token

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "default.conf"


@dataclass
class MachineConfig:
    alphabet: Alphabet
    num_rotors: int
    num_pawls: int
    rotors: RotorInventory = field(default_factory=RotorInventory)

    # Output case, taken from the first character of the alphabet spec
    upper_case: bool = True

    def build_machine(self) -> Machine:
        return Machine(self.alphabet, self.num_rotors, self.num_pawls, self.rotors)


def _read_int(tokens: list[str], pos: int, what: str) -> int:
    if pos >= len(tokens):
        raise ConfigError(f"configuration file truncated: missing {what}")
    try:
        return int(tokens[pos])
    except ValueError:
        raise ConfigError(f"configuration file format error: {what} must be an integer, got '{tokens[pos]}'") from None


def _read_rotor(tokens: list[str], pos: int, alphabet: Alphabet) -> tuple[Rotor, int]:
    """Parse one NAME TYPE CYCLES... description starting at POS."""
    name = tokens[pos].upper()
    if is_cycle_token(name):
        raise ConfigError(f"rotor description starts with cycles '{name}'; missing name")
    if pos + 1 >= len(tokens):
        raise ConfigError(f"bad rotor description: rotor '{name}' has no type")

    type_token = tokens[pos + 1].upper()
    pos += 2
    cycle_tokens = []
    while pos < len(tokens) and is_cycle_token(tokens[pos]):
        cycle_tokens.append(tokens[pos].upper())
        pos += 1

    perm = Permutation(check_cycles(cycle_tokens), alphabet)
    try:
        kind = RotorKind(type_token[0])
    except ValueError:
        raise ConfigError(f"bad rotor type '{type_token}' for rotor '{name}' (expected M..., N or R)") from None

    rotor = Rotor(name, kind, perm, type_token[1:])
    if rotor.reflecting() and not perm.derangement():
        logger.warning("reflector '%s' maps some characters to themselves", name)
    return rotor, pos


def read_config(text: str) -> MachineConfig:
    """
    Parse a configuration file:

        <alphabet> <num_rotors> <num_pawls>
        <name> <type> <cycles...>
        ...

    where type is M<notches>, N or R and cycles may continue on later lines.
    """
    tokens = text.split()
    if not tokens:
        raise ConfigError("configuration file truncated: empty")

    spec = tokens[0]
    upper_case = not spec[0].islower()
    alphabet = Alphabet(spec.upper())

    num_rotors = _read_int(tokens, 1, "number of rotors")
    num_pawls = _read_int(tokens, 2, "number of pawls")

    inventory = RotorInventory()
    pos = 3
    while pos < len(tokens):
        rotor, pos = _read_rotor(tokens, pos, alphabet)
        inventory.register(rotor)

    logger.debug(
        "configured %d-symbol alphabet, %d slots, %d pawls, rotors: %s",
        alphabet.size(), num_rotors, num_pawls, " ".join(inventory.names()),
    )
    return MachineConfig(
        alphabet=alphabet,
        num_rotors=num_rotors,
        num_pawls=num_pawls,
        rotors=inventory,
        upper_case=upper_case,
    )


def load_config(path: Union[str, Path]) -> MachineConfig:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"could not open {path}: {e.strerror}") from e
    return read_config(text)


def load_default_config() -> MachineConfig:
    """The bundled naval configuration (rotors I-VIII, Beta, Gamma, thin B and C)."""
    text = resources.files("enigmasim.data").joinpath(DEFAULT_CONFIG).read_text(encoding="utf-8")
    return read_config(text)
