from __future__ import annotations

from .errors import ConfigError, RangeError

_FORBIDDEN = set("()")


def expand_ranges(spec: str) -> str:
    """
    Expand every X-Y run (X, Y alphabetic) into the inclusive run of
    characters between them, e.g. "A-D" -> "ABCD", "A-C0-9" -> "ABC0-9".
    Everything else is kept literally.
    """
    out = spec
    i = 1
    while i < len(out) - 1:
        left, mid, right = out[i - 1], out[i], out[i + 1]
        if mid == "-" and left.isalpha() and right.isalpha():
            if ord(right) < ord(left):
                raise ConfigError(f"descending range '{left}-{right}' in alphabet")
            run = "".join(chr(o) for o in range(ord(left), ord(right) + 1))
            out = out[: i - 1] + run + out[i + 2:]
            # continue right after the expanded run
            i = i - 1 + len(run)
        else:
            i += 1
    return out


class Alphabet:
    """An ordered bijection between symbols and the indices 0..size-1."""

    def __init__(self, spec: str = "A-Z") -> None:
        chars = expand_ranges(spec)
        if not chars:
            raise ConfigError("empty alphabet")

        self._chars = chars
        self._index: dict[str, int] = {}
        for i, ch in enumerate(chars):
            if ch.isspace() or ch in _FORBIDDEN:
                raise ConfigError(f"alphabet may not contain {ch!r}")
            if ch in self._index:
                raise ConfigError(f"duplicate character {ch!r} in alphabet")
            self._index[ch] = i

    @property
    def symbols(self) -> str:
        return self._chars

    def size(self) -> int:
        return len(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self._index

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and ch in self._index

    def to_char(self, index: int) -> str:
        if not 0 <= index < len(self._chars):
            raise RangeError(f"character index {index} out of range 0..{len(self._chars) - 1}")
        return self._chars[index]

    def to_int(self, ch: str) -> int:
        try:
            return self._index[ch]
        except KeyError:
            raise RangeError(f"character {ch!r} not in alphabet") from None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Alphabet) and other._chars == self._chars

    def __repr__(self) -> str:
        return f"Alphabet({self._chars!r})"
