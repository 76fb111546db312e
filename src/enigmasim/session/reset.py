from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from enigmasim.core.errors import ConfigError
from enigmasim.core.machine import Machine
from enigmasim.core.permutation import Permutation

from .common import check_cycles, is_cycle_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResetDirective:
    # Slot 0 (the reflector) first
    rotors: tuple[str, ...]
    setting: str
    ring_setting: Optional[str] = None

    # Cycle notation; empty means an unwired plugboard
    plugboard: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "rotors": list(self.rotors),
            "setting": self.setting,
            "ring_setting": self.ring_setting,
            "plugboard": self.plugboard,
        }


def is_reset_line(line: str) -> bool:
    return line.lstrip().startswith("*")


def parse_reset(line: str, num_rotors: int) -> ResetDirective:
    """
    Parse "* <rotors...> <setting> [<rings>] [<plugboard cycles...>]".
    """
    body = line.strip()
    if not body.startswith("*"):
        raise ConfigError(f"reset line must start with '*': '{line.strip()}'")
    tokens = body[1:].upper().split()

    if len(tokens) < num_rotors + 1:
        raise ConfigError(
            f"reset line needs {num_rotors} rotor names and a setting, got '{' '.join(tokens)}'"
        )

    rotors = tuple(tokens[:num_rotors])
    setting = tokens[num_rotors]
    if is_cycle_token(setting):
        raise ConfigError(f"missing rotor setting before plugboard '{setting}'")

    rest = tokens[num_rotors + 1:]
    rings = None
    if rest and not is_cycle_token(rest[0]):
        rings, rest = rest[0], rest[1:]

    return ResetDirective(
        rotors=rotors,
        setting=setting,
        ring_setting=rings,
        plugboard=check_cycles(rest),
    )


def apply_reset(machine: Machine, directive: ResetDirective) -> None:
    """Reconfigure MACHINE; if any part of DIRECTIVE is bad the machine is left as it was."""
    plugboard = Permutation(directive.plugboard, machine.alphabet)
    machine.configure(directive.rotors, directive.setting, directive.ring_setting, plugboard)
    logger.debug("reset: %s", directive.to_dict())
