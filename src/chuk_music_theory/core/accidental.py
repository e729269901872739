"""
Accidental - the offset of a note from its natural pitch.

Sharps and flats are the common cases, but any number of semitones is
allowed (triple sharps, quadruple flats...).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.errors import FormatError

_FLATS = re.compile(r"b+")
_SHARPS = re.compile(r"#+")

_NAMES: dict[int, str] = {
    -2: "double flat",
    -1: "flat",
    0: "natural",
    1: "sharp",
    2: "double sharp",
}

_ASCII_SYMBOLS: dict[int, str] = {
    -2: "bb",
    -1: "b",
    0: "",
    1: "#",
    2: "x",
}


@dataclass(frozen=True, order=True)
class Accidental:
    """
    Number of semitones above the natural pitch.

    Ordered by sharpness: a "greater" accidental raises the note more.
    Immutable and hashable.

    Examples:
        Accidental.SHARP.steps == 1
        Accidental.of_steps(-2) is Accidental.DOUBLE_FLAT
    """

    steps: int

    DOUBLE_FLAT: ClassVar[Accidental]
    FLAT: ClassVar[Accidental]
    NATURAL: ClassVar[Accidental]
    SHARP: ClassVar[Accidental]
    DOUBLE_SHARP: ClassVar[Accidental]

    @classmethod
    def of_steps(cls, steps: int) -> Accidental:
        """
        Get the accidental for a number of steps above natural.

        The five common accidentals are cached; other values create
        a new (equal-by-value) instance.
        """
        cached = _COMMON.get(steps)
        if cached is not None:
            return cached
        return cls(steps)

    @property
    def steps_above_natural(self) -> int:
        """Semitones above the natural pitch (sharp = +1)."""
        return self.steps

    @property
    def is_natural(self) -> bool:
        return self.steps == 0

    @property
    def symbol_ascii(self) -> str:
        """ASCII symbol: 'bb', 'b', '', '#', 'x', or repeated b/#."""
        if self.steps in _ASCII_SYMBOLS:
            return _ASCII_SYMBOLS[self.steps]
        symbol = "b" if self.steps < 0 else "#"
        return symbol * abs(self.steps)

    def __str__(self) -> str:
        return _NAMES.get(self.steps, f"{self.steps} steps")

    def __repr__(self) -> str:
        for name in ("DOUBLE_FLAT", "FLAT", "NATURAL", "SHARP", "DOUBLE_SHARP"):
            if getattr(Accidental, name).steps == self.steps:
                return f"Accidental.{name}"
        return f"Accidental({self.steps})"

    @classmethod
    def parse(cls, text: str) -> Accidental:
        """
        Parse an accidental from its symbol or name.

        Accepts 'bb', 'b', '', '#', 'x', any run of 'b' or '#',
        and the long names ('flat', 'double sharp', ...).

        Raises:
            FormatError: If the text is not a recognized accidental
        """
        if text == "x":
            return cls.DOUBLE_SHARP
        if text == "":
            return cls.NATURAL
        for steps, name in _NAMES.items():
            if text == name:
                return cls.of_steps(steps)
        if _SHARPS.fullmatch(text):
            return cls.of_steps(len(text))
        if _FLATS.fullmatch(text):
            return cls.of_steps(-len(text))
        raise FormatError(ErrorMessages.INVALID_ACCIDENTAL.format(text=text))


Accidental.DOUBLE_FLAT = Accidental(-2)
Accidental.FLAT = Accidental(-1)
Accidental.NATURAL = Accidental(0)
Accidental.SHARP = Accidental(1)
Accidental.DOUBLE_SHARP = Accidental(2)

# Read-only after import
_COMMON: dict[int, Accidental] = {
    -2: Accidental.DOUBLE_FLAT,
    -1: Accidental.FLAT,
    0: Accidental.NATURAL,
    1: Accidental.SHARP,
    2: Accidental.DOUBLE_SHARP,
}
