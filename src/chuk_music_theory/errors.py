"""
Exception types.

Construction errors use the builtin ValueError / IndexError / TypeError.
The two kinds below are distinct so callers can tell them apart.
"""


class FormatError(ValueError):
    """A textual accidental, pitch class, pitch or interval is malformed."""


class InversionNotSupportedError(TypeError):
    """The chord type declares itself non-invertible."""
