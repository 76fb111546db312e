from __future__ import annotations

import re
from typing import Iterable

from enigmasim.core.errors import ConfigError

# one or more parenthesized groups glued together: "(AE)" or "(AE)(BN)"
CYCLE_TOKEN_RE = re.compile(r"^(\([^()\s]+\))+$")


def is_cycle_token(token: str) -> bool:
    return token.startswith("(")


def check_cycles(tokens: list[str]) -> str:
    """
    Validate cycle-notation tokens and join them into one cycle string.
    Raises ConfigError on the first malformed token.
    """
    for tok in tokens:
        if not CYCLE_TOKEN_RE.match(tok):
            raise ConfigError(f"bad cycles format: '{tok}'")
    return " ".join(tokens)


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf


def group_symbols(msg: str, size: int = 5) -> str:
    """'ABCDEFG' -> 'ABCDE FG'."""
    return " ".join("".join(block) for block in chunked(msg, size))


def normalize_line(line: str) -> str:
    """Uppercase and collapse every run of whitespace to a single space."""
    return " ".join(line.split()).upper()
