from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every failure raised by the machine and its readers."""


class ConfigError(EnigmaError):
    """Structurally invalid machine setup (alphabet, rotors, settings, plugboard)."""


class RangeError(EnigmaError):
    """A symbol or index outside the alphabet's domain."""
