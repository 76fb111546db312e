from __future__ import annotations

from typing import Iterable, Iterator

from enigmasim.core.errors import ConfigError
from enigmasim.core.machine import Machine

from .common import group_symbols, normalize_line
from .config import MachineConfig
from .reset import apply_reset, is_reset_line, parse_reset


def format_output(msg: str, upper_case: bool = True) -> str:
    """Groups of five, lower-cased when the configuration asked for it."""
    out = group_symbols(msg)
    return out if upper_case else out.lower()


def process_messages(config: MachineConfig, machine: Machine, lines: Iterable[str]) -> Iterator[str]:
    """
    Run every input line through MACHINE, yielding one output line per
    message line. Reset lines ('* ...') reconfigure the machine and produce
    no output. Blank lines come out blank.
    """
    configured = False
    for lineno, raw in enumerate(lines, start=1):
        line = normalize_line(raw)

        if is_reset_line(line):
            apply_reset(machine, parse_reset(line, config.num_rotors))
            configured = True
            continue

        if not line:
            yield ""
            continue

        if not configured:
            raise ConfigError(f"line {lineno}: message before any '*' setting line")

        yield format_output(machine.convert(line), config.upper_case)
