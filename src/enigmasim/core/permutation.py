from __future__ import annotations

import re

from .alphabet import Alphabet
from .errors import ConfigError, RangeError

_CYCLE_SPLIT_RE = re.compile(r"[()\s]+")


def wrap(p: int, size: int) -> int:
    """Return P modulo SIZE, always in 0..size-1."""
    return p % size


class Permutation:
    """
    A permutation of an alphabet's index space, given in cycle notation
    like "(AELTPHQXRU) (BKNW) (CMOY)". Symbols not mentioned in any cycle
    map to themselves.

    permute()/invert() accept either an index (returning an index) or a
    symbol (returning a symbol).
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        n = alphabet.size()
        self._forward = list(range(n))
        self._backward = list(range(n))

        seen: set[str] = set()
        for cycle in _CYCLE_SPLIT_RE.split(cycles or ""):
            if cycle:
                self._add_cycle(cycle, seen)

    def _add_cycle(self, cycle: str, seen: set[str]) -> None:
        for ch in cycle:
            if ch not in self._alphabet:
                raise ConfigError(f"cycle '({cycle})' uses {ch!r}, which is not in the alphabet")
            if ch in seen:
                raise ConfigError(f"character {ch!r} appears in more than one place in the cycles")
            seen.add(ch)

        m = len(cycle)
        for i, ch in enumerate(cycle):
            src = self._alphabet.to_int(ch)
            dst = self._alphabet.to_int(cycle[(i + 1) % m])
            self._forward[src] = dst
            self._backward[dst] = src

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def size(self) -> int:
        return self._alphabet.size()

    def _check_index(self, p: int) -> int:
        if not 0 <= p < len(self._forward):
            raise RangeError(f"index {p} out of range 0..{len(self._forward) - 1}")
        return p

    def permute(self, p):
        if isinstance(p, str):
            return self._alphabet.to_char(self._forward[self._alphabet.to_int(p)])
        return self._forward[self._check_index(p)]

    def invert(self, c):
        if isinstance(c, str):
            return self._alphabet.to_char(self._backward[self._alphabet.to_int(c)])
        return self._backward[self._check_index(c)]

    def derangement(self) -> bool:
        """True iff no index maps to itself."""
        return all(dst != src for src, dst in enumerate(self._forward))

    def cycles(self) -> str:
        """Canonical cycle notation, omitting fixed points."""
        done = [False] * len(self._forward)
        groups = []
        for start in range(len(self._forward)):
            if done[start] or self._forward[start] == start:
                continue
            chars = []
            p = start
            while not done[p]:
                done[p] = True
                chars.append(self._alphabet.to_char(p))
                p = self._forward[p]
            groups.append("(" + "".join(chars) + ")")
        return " ".join(groups)

    def __repr__(self) -> str:
        return f"Permutation({self.cycles()!r})"
