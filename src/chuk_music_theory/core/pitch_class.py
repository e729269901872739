"""
Pitch classes - spelled, octave-independent notes.

BasePitchClass is one of the seven natural letters C..B.
PitchClass pairs a letter with an Accidental, so C# and Db are distinct
values that happen to sound the same (they are enharmonic).

Transposition is spelling-aware: transposing by a third always lands on
a letter two steps away, whatever accidental that requires.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

from chuk_music_theory.constants import (
    DEGREES_PER_OCTAVE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_music_theory.core.accidental import Accidental
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.errors import FormatError

# Semitones of each natural letter above C
_NATURAL_STEPS: list[int] = [0, 2, 4, 5, 7, 9, 11]

_PITCH_CLASS_PATTERN = re.compile(r"([A-G])(.*)")


class BasePitchClass(IntEnum):
    """
    The seven natural letters.

    The value is the position in the letter cycle (C=0 .. B=6).
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @property
    def steps_above_reference(self) -> int:
        """Semitones above C."""
        return _NATURAL_STEPS[self.value]

    def advance(self, n: int) -> BasePitchClass:
        """
        Move n letters around the 7-cycle.

        Negative n moves down: C.advance(-1) is B.
        """
        return BasePitchClass((self.value + n) % DEGREES_PER_OCTAVE)


def _nearest_accidental(delta: int) -> int:
    """Reduce a semitone offset into (-6, 6]."""
    steps = delta % SEMITONES_PER_OCTAVE
    if steps > SEMITONES_PER_OCTAVE // 2:
        steps -= SEMITONES_PER_OCTAVE
    return steps


@total_ordering
@dataclass(frozen=True, eq=True)
class PitchClass:
    """
    A letter with an accidental.

    Equality is spelling-sensitive: PitchClass.C_SHARP != PitchClass.D_FLAT.
    Use is_enharmonic_with() to compare by sound.

    Ordering is by steps above C, then by letter, so it never
    disagrees with equality.

    Examples:
        PitchClass.C.transpose_up(SimpleInterval.AUGMENTED_SECOND)  # D#
        PitchClass.parse("Bb").steps_above_reference  # 10
    """

    base: BasePitchClass
    accidental: Accidental

    # Named constants for the 35 common spellings
    C_DBL_FLAT: ClassVar[PitchClass]
    C_FLAT: ClassVar[PitchClass]
    C: ClassVar[PitchClass]
    C_SHARP: ClassVar[PitchClass]
    C_DBL_SHARP: ClassVar[PitchClass]
    D_DBL_FLAT: ClassVar[PitchClass]
    D_FLAT: ClassVar[PitchClass]
    D: ClassVar[PitchClass]
    D_SHARP: ClassVar[PitchClass]
    D_DBL_SHARP: ClassVar[PitchClass]
    E_DBL_FLAT: ClassVar[PitchClass]
    E_FLAT: ClassVar[PitchClass]
    E: ClassVar[PitchClass]
    E_SHARP: ClassVar[PitchClass]
    E_DBL_SHARP: ClassVar[PitchClass]
    F_DBL_FLAT: ClassVar[PitchClass]
    F_FLAT: ClassVar[PitchClass]
    F: ClassVar[PitchClass]
    F_SHARP: ClassVar[PitchClass]
    F_DBL_SHARP: ClassVar[PitchClass]
    G_DBL_FLAT: ClassVar[PitchClass]
    G_FLAT: ClassVar[PitchClass]
    G: ClassVar[PitchClass]
    G_SHARP: ClassVar[PitchClass]
    G_DBL_SHARP: ClassVar[PitchClass]
    A_DBL_FLAT: ClassVar[PitchClass]
    A_FLAT: ClassVar[PitchClass]
    A: ClassVar[PitchClass]
    A_SHARP: ClassVar[PitchClass]
    A_DBL_SHARP: ClassVar[PitchClass]
    B_DBL_FLAT: ClassVar[PitchClass]
    B_FLAT: ClassVar[PitchClass]
    B: ClassVar[PitchClass]
    B_SHARP: ClassVar[PitchClass]
    B_DBL_SHARP: ClassVar[PitchClass]

    def __post_init__(self) -> None:
        if not isinstance(self.base, BasePitchClass):
            raise TypeError(ErrorMessages.MISSING_VALUE.format(what="base pitch class"))
        if not isinstance(self.accidental, Accidental):
            raise TypeError(ErrorMessages.MISSING_VALUE.format(what="accidental"))

    @classmethod
    def of(cls, base: BasePitchClass, accidental: Accidental) -> PitchClass:
        """Get the pitch class, reusing the cached instance where one exists."""
        cached = _COMMON.get((base, accidental.steps))
        if cached is not None:
            return cached
        return cls(base, accidental)

    @property
    def steps_above_reference(self) -> int:
        """Semitones above C natural. May be negative (Cb) or above 11 (B#)."""
        return self.base.steps_above_reference + self.accidental.steps

    @property
    def relative_octave(self) -> int:
        """Octave offset of the sounding pitch: -1 for Cb, 1 for B#, else 0."""
        return self.steps_above_reference // SEMITONES_PER_OCTAVE

    @property
    def is_natural(self) -> bool:
        return self.accidental.is_natural

    def natural(self) -> PitchClass:
        """The same letter without accidental."""
        return PitchClass.of(self.base, Accidental.NATURAL)

    def is_enharmonic_with(self, other: PitchClass) -> bool:
        """True if both sound the same, regardless of spelling."""
        diff = self.steps_above_reference - other.steps_above_reference
        return diff % SEMITONES_PER_OCTAVE == 0

    def transpose_up(self, interval: Interval) -> PitchClass:
        """
        Transpose up by an interval, keeping the interval's letter distance.

        The letter moves by interval.degrees; the accidental is whatever
        makes the semitone distance right, reduced to the nearest one.

        C + augmented second = D#, never Eb.
        """
        new_base = self.base.advance(interval.degrees)
        delta = self.steps_above_reference + interval.semitones - new_base.steps_above_reference
        return PitchClass.of(new_base, Accidental.of_steps(_nearest_accidental(delta)))

    def transpose_down(self, interval: Interval) -> PitchClass:
        """Transpose down by an interval. Inverse of transpose_up()."""
        new_base = self.base.advance(-interval.degrees)
        delta = self.steps_above_reference - interval.semitones - new_base.steps_above_reference
        return PitchClass.of(new_base, Accidental.of_steps(_nearest_accidental(delta)))

    def interval_to(self, other: PitchClass) -> Interval:
        """
        Get the ascending spelled interval from this pitch class to another.

        C -> E is a major third, C -> Fb a diminished fourth.

        Raises:
            ValueError: If the letters force a negative width (C# -> C)
        """
        degrees = (other.base - self.base) % DEGREES_PER_OCTAVE
        semitones = other.steps_above_reference - self.steps_above_reference
        if other.base < self.base:
            semitones += SEMITONES_PER_OCTAVE
        if semitones < 0:
            raise ValueError(ErrorMessages.DESCENDING_SPELLING.format(source=self, target=other))
        return Interval.of(degrees, semitones)

    @staticmethod
    def strict_key(pitch_class: PitchClass) -> tuple[int, int]:
        """Sort key matching the natural order."""
        return (pitch_class.steps_above_reference, pitch_class.base.value)

    @staticmethod
    def enharmonic_key(pitch_class: PitchClass) -> int:
        """Sort key that ties enharmonic spellings."""
        return pitch_class.steps_above_reference

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PitchClass):
            return NotImplemented
        return PitchClass.strict_key(self) < PitchClass.strict_key(other)

    def __str__(self) -> str:
        return f"{self.base.name}{self.accidental.symbol_ascii}"

    def __repr__(self) -> str:
        return f"PitchClass({self})"

    @classmethod
    def parse(cls, text: str) -> PitchClass:
        """
        Parse a pitch class like 'C', 'F#', 'Bb', 'Ebb' or 'Gx'.

        Raises:
            FormatError: If the text is not a valid pitch class
        """
        match = _PITCH_CLASS_PATTERN.fullmatch(text.strip())
        if match is None:
            raise FormatError(ErrorMessages.INVALID_PITCH_CLASS.format(text=text))
        letter, accidental_text = match.groups()
        try:
            accidental = Accidental.parse(accidental_text)
        except FormatError as e:
            raise FormatError(ErrorMessages.INVALID_PITCH_CLASS.format(text=text)) from e
        return cls.of(BasePitchClass[letter], accidental)

    @staticmethod
    def common_pitch_classes() -> tuple[PitchClass, ...]:
        """All 35 cached spellings, double flat to double sharp on each letter."""
        return tuple(_COMMON.values())


_SUFFIXES: dict[int, str] = {
    -2: "_DBL_FLAT",
    -1: "_FLAT",
    0: "",
    1: "_SHARP",
    2: "_DBL_SHARP",
}

# Read-only after import
_COMMON: dict[tuple[BasePitchClass, int], PitchClass] = {}
for _base in BasePitchClass:
    for _steps, _suffix in _SUFFIXES.items():
        _pc = PitchClass(_base, Accidental.of_steps(_steps))
        _COMMON[(_base, _steps)] = _pc
        setattr(PitchClass, f"{_base.name}{_suffix}", _pc)
del _base, _steps, _suffix, _pc
