"""
Intervals - spelled distances between notes.

An interval has two widths: diatonic degrees (letters spanned, excluding
the start) and semitones. A major third is (2, 4); a diminished fourth
(3, 4) sounds the same but is a different interval.

SimpleInterval holds the named intervals from unison to augmented octave.
CompoundInterval is a simple interval plus whole octaves.
Any other (degrees, semitones) pair is a plain Interval.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from functools import total_ordering
from typing import ClassVar

from chuk_music_theory.constants import (
    DEGREES_PER_OCTAVE,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_music_theory.errors import FormatError

_INTERVAL_PATTERN = re.compile(r"([PMmdA])(\d+)")


class Quality(str, Enum):
    """Interval quality, valued by its symbol."""

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    DIMINISHED = "d"
    AUGMENTED = "A"

    @property
    def label(self) -> str:
        """Lowercase name, e.g. 'perfect'."""
        return self.name.lower()


@total_ordering
class Interval:
    """
    A (degrees, semitones) pair.

    Equality needs both fields to match, whatever the concrete class:
    Interval.of(2, 4) == SimpleInterval.MAJOR_THIRD.
    Ordering is by semitones, then degrees.

    Immutable and hashable.
    """

    __slots__ = ("_degrees", "_semitones")
    _degrees: int
    _semitones: int

    def __init__(self, degrees: int, semitones: int) -> None:
        """Create an interval. Both widths must be non-negative."""
        if degrees < 0 or semitones < 0:
            raise ValueError(
                ErrorMessages.NEGATIVE_INTERVAL.format(degrees=degrees, semitones=semitones)
            )
        object.__setattr__(self, "_degrees", degrees)
        object.__setattr__(self, "_semitones", semitones)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def of(cls, degrees: int, semitones: int) -> Interval:
        """
        Get the most specific interval for a (degrees, semitones) pair.

        Returns the SimpleInterval constant if one matches, a
        CompoundInterval if the pair is a simple interval plus octaves,
        otherwise a plain Interval.
        """
        simple = SimpleInterval.value_of(degrees, semitones)
        if simple is not None:
            return simple
        octaves = 1
        while degrees - octaves * DEGREES_PER_OCTAVE >= 0:
            simple = SimpleInterval.value_of(
                degrees - octaves * DEGREES_PER_OCTAVE,
                semitones - octaves * SEMITONES_PER_OCTAVE,
            )
            if simple is not None:
                return CompoundInterval(simple, octaves)
            octaves += 1
        return Interval(degrees, semitones)

    @property
    def degrees(self) -> int:
        """Diatonic steps spanned, not counting the start note."""
        return self._degrees

    @property
    def semitones(self) -> int:
        """Width in semitones."""
        return self._semitones

    @property
    def interval_number(self) -> int:
        """Conventional interval number: 1 for unison, 3 for a third."""
        return self._degrees + 1

    def is_enharmonic_with(self, other: Interval) -> bool:
        """True if both intervals are equally wide in semitones."""
        return self._semitones == other.semitones

    def octave_complement(self) -> Interval:
        """
        The interval that completes this one to a perfect octave.

        M3 -> m6, P5 -> P4, P1 -> P8.

        Raises:
            ValueError: If the interval is wider than an octave
        """
        if self._degrees > DEGREES_PER_OCTAVE or self._semitones > SEMITONES_PER_OCTAVE:
            raise ValueError(ErrorMessages.INTERVAL_WIDER_THAN_OCTAVE.format(interval=self))
        return Interval.of(
            DEGREES_PER_OCTAVE - self._degrees,
            SEMITONES_PER_OCTAVE - self._semitones,
        )

    @staticmethod
    def strict_key(interval: Interval) -> tuple[int, int]:
        """Sort key matching the natural order."""
        return (interval.semitones, interval.degrees)

    @staticmethod
    def enharmonic_key(interval: Interval) -> int:
        """Sort key that ties enharmonic intervals (A4 and d5)."""
        return interval.semitones

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals: M3 + m3 = P5."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.of(self._degrees + other._degrees, self._semitones + other._semitones)

    def __radd__(self, other: object) -> Interval:
        """Right add, so that sum() works with its default start of 0."""
        if other == 0:
            return self
        return NotImplemented

    def __mul__(self, n: int) -> Interval:
        """Repeat an interval (e.g., two octaves)."""
        if not isinstance(n, int):
            return NotImplemented
        return Interval.of(self._degrees * n, self._semitones * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._degrees == other._degrees and self._semitones == other._semitones

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval.strict_key(self) < Interval.strict_key(other)

    def __hash__(self) -> int:
        return hash((self._degrees, self._semitones))

    def __repr__(self) -> str:
        return f"Interval({self._degrees}, {self._semitones})"

    def __str__(self) -> str:
        return f"{self._degrees} degrees, {self._semitones} semitones"

    @classmethod
    def parse(cls, text: str) -> Interval:
        """
        Parse an interval symbol like 'P5', 'm3', 'A4' or 'M10'.

        Numbers above 8 are compound: 'M10' is a major third plus an octave.

        Raises:
            FormatError: If the symbol names no interval
        """
        match = _INTERVAL_PATTERN.fullmatch(text.strip())
        if match is None:
            raise FormatError(ErrorMessages.INVALID_INTERVAL.format(text=text))
        quality = Quality(match.group(1))
        number = int(match.group(2))
        if number < 1:
            raise FormatError(ErrorMessages.INVALID_INTERVAL.format(text=text))

        degrees = number - 1
        octaves = max(0, (degrees - 1) // DEGREES_PER_OCTAVE)
        simple_degrees = degrees - octaves * DEGREES_PER_OCTAVE
        for simple in SimpleInterval.values():
            if simple.quality is quality and simple.degrees == simple_degrees:
                return Interval.of(
                    simple.degrees + octaves * DEGREES_PER_OCTAVE,
                    simple.semitones + octaves * SEMITONES_PER_OCTAVE,
                )
        raise FormatError(ErrorMessages.INVALID_INTERVAL.format(text=text))


def sum_intervals(intervals: Iterable[Interval]) -> Interval:
    """
    Sum intervals: degrees add up, semitones add up.

    An empty iterable sums to a unison.

    Raises:
        TypeError: If an item is not an Interval
    """
    degrees = 0
    semitones = 0
    for interval in intervals:
        if not isinstance(interval, Interval):
            raise TypeError(ErrorMessages.NOT_AN_INTERVAL.format(value=interval))
        degrees += interval.degrees
        semitones += interval.semitones
    return Interval.of(degrees, semitones)


class SimpleInterval(Interval):
    """
    A named interval between unison and augmented octave.

    There is a fixed set of instances; get them as class constants
    (SimpleInterval.MAJOR_THIRD, or the short alias SimpleInterval.M3),
    from values(), or with value_of().
    """

    __slots__ = ("_long_name", "_quality")
    _long_name: str
    _quality: Quality

    # Diatonic intervals
    UNISON: ClassVar[SimpleInterval]
    MINOR_SECOND: ClassVar[SimpleInterval]
    MAJOR_SECOND: ClassVar[SimpleInterval]
    MINOR_THIRD: ClassVar[SimpleInterval]
    MAJOR_THIRD: ClassVar[SimpleInterval]
    PERFECT_FOURTH: ClassVar[SimpleInterval]
    PERFECT_FIFTH: ClassVar[SimpleInterval]
    MINOR_SIXTH: ClassVar[SimpleInterval]
    MAJOR_SIXTH: ClassVar[SimpleInterval]
    MINOR_SEVENTH: ClassVar[SimpleInterval]
    MAJOR_SEVENTH: ClassVar[SimpleInterval]
    PERFECT_OCTAVE: ClassVar[SimpleInterval]

    # Augmented and diminished intervals
    AUGMENTED_UNISON: ClassVar[SimpleInterval]
    DIMINISHED_SECOND: ClassVar[SimpleInterval]
    AUGMENTED_SECOND: ClassVar[SimpleInterval]
    DIMINISHED_THIRD: ClassVar[SimpleInterval]
    AUGMENTED_THIRD: ClassVar[SimpleInterval]
    DIMINISHED_FOURTH: ClassVar[SimpleInterval]
    AUGMENTED_FOURTH: ClassVar[SimpleInterval]
    DIMINISHED_FIFTH: ClassVar[SimpleInterval]
    AUGMENTED_FIFTH: ClassVar[SimpleInterval]
    DIMINISHED_SIXTH: ClassVar[SimpleInterval]
    AUGMENTED_SIXTH: ClassVar[SimpleInterval]
    DIMINISHED_SEVENTH: ClassVar[SimpleInterval]
    AUGMENTED_SEVENTH: ClassVar[SimpleInterval]
    DIMINISHED_OCTAVE: ClassVar[SimpleInterval]
    AUGMENTED_OCTAVE: ClassVar[SimpleInterval]

    # Short aliases
    P1: ClassVar[SimpleInterval]
    A1: ClassVar[SimpleInterval]
    d2: ClassVar[SimpleInterval]
    m2: ClassVar[SimpleInterval]
    M2: ClassVar[SimpleInterval]
    A2: ClassVar[SimpleInterval]
    d3: ClassVar[SimpleInterval]
    m3: ClassVar[SimpleInterval]
    M3: ClassVar[SimpleInterval]
    A3: ClassVar[SimpleInterval]
    d4: ClassVar[SimpleInterval]
    P4: ClassVar[SimpleInterval]
    A4: ClassVar[SimpleInterval]
    d5: ClassVar[SimpleInterval]
    P5: ClassVar[SimpleInterval]
    A5: ClassVar[SimpleInterval]
    d6: ClassVar[SimpleInterval]
    m6: ClassVar[SimpleInterval]
    M6: ClassVar[SimpleInterval]
    A6: ClassVar[SimpleInterval]
    d7: ClassVar[SimpleInterval]
    m7: ClassVar[SimpleInterval]
    M7: ClassVar[SimpleInterval]
    A7: ClassVar[SimpleInterval]
    d8: ClassVar[SimpleInterval]
    P8: ClassVar[SimpleInterval]
    A8: ClassVar[SimpleInterval]

    def __init__(self, degrees: int, semitones: int, long_name: str, quality: Quality) -> None:
        super().__init__(degrees, semitones)
        object.__setattr__(self, "_long_name", long_name)
        object.__setattr__(self, "_quality", quality)

    @classmethod
    def value_of(cls, degrees: int, semitones: int) -> SimpleInterval | None:
        """Get the named interval with these widths, or None."""
        return _SIMPLE_BY_WIDTH.get((degrees, semitones))

    @staticmethod
    def values() -> tuple[SimpleInterval, ...]:
        """All named intervals, diatonic ones first."""
        return _SIMPLE_VALUES

    @property
    def long_name(self) -> str:
        """Full name, e.g. 'major third'."""
        return self._long_name

    @property
    def quality(self) -> Quality:
        return self._quality

    @property
    def symbol(self) -> str:
        """Short symbol, e.g. 'M3'."""
        return f"{self._quality.value}{self.interval_number}"

    def __repr__(self) -> str:
        return f"SimpleInterval.{self._long_name.upper().replace(' ', '_')}"

    def __str__(self) -> str:
        return self.symbol


class CompoundInterval(Interval):
    """
    A simple interval plus one or more perfect octaves.

    A major tenth is a major third plus one octave.
    """

    __slots__ = ("_simple", "_octaves")
    _simple: SimpleInterval
    _octaves: int

    def __init__(self, simple: SimpleInterval, octaves: int) -> None:
        if octaves < 1:
            raise ValueError(f"Compound interval needs at least one octave, got {octaves}")
        super().__init__(
            simple.degrees + octaves * DEGREES_PER_OCTAVE,
            simple.semitones + octaves * SEMITONES_PER_OCTAVE,
        )
        object.__setattr__(self, "_simple", simple)
        object.__setattr__(self, "_octaves", octaves)

    @property
    def simple(self) -> SimpleInterval:
        return self._simple

    @property
    def octaves(self) -> int:
        return self._octaves

    @property
    def quality(self) -> Quality:
        return self._simple.quality

    @property
    def long_name(self) -> str:
        octaves = "octave" if self._octaves == 1 else "octaves"
        return f"{self._simple.long_name} plus {self._octaves} {octaves}"

    @property
    def symbol(self) -> str:
        """Symbol with the compound number, e.g. 'M10'."""
        return f"{self._simple.quality.value}{self.interval_number}"

    def __repr__(self) -> str:
        return f"CompoundInterval({self._simple!r}, {self._octaves})"

    def __str__(self) -> str:
        return self.symbol


# (constant name, degrees, semitones, long name, quality)
_SIMPLE_TABLE: list[tuple[str, int, int, str, Quality]] = [
    ("UNISON", 0, 0, "unison", Quality.PERFECT),
    ("MINOR_SECOND", 1, 1, "minor second", Quality.MINOR),
    ("MAJOR_SECOND", 1, 2, "major second", Quality.MAJOR),
    ("MINOR_THIRD", 2, 3, "minor third", Quality.MINOR),
    ("MAJOR_THIRD", 2, 4, "major third", Quality.MAJOR),
    ("PERFECT_FOURTH", 3, 5, "perfect fourth", Quality.PERFECT),
    ("PERFECT_FIFTH", 4, 7, "perfect fifth", Quality.PERFECT),
    ("MINOR_SIXTH", 5, 8, "minor sixth", Quality.MINOR),
    ("MAJOR_SIXTH", 5, 9, "major sixth", Quality.MAJOR),
    ("MINOR_SEVENTH", 6, 10, "minor seventh", Quality.MINOR),
    ("MAJOR_SEVENTH", 6, 11, "major seventh", Quality.MAJOR),
    ("PERFECT_OCTAVE", 7, 12, "perfect octave", Quality.PERFECT),
    ("AUGMENTED_UNISON", 0, 1, "augmented unison", Quality.AUGMENTED),
    ("DIMINISHED_SECOND", 1, 0, "diminished second", Quality.DIMINISHED),
    ("AUGMENTED_SECOND", 1, 3, "augmented second", Quality.AUGMENTED),
    ("DIMINISHED_THIRD", 2, 2, "diminished third", Quality.DIMINISHED),
    ("AUGMENTED_THIRD", 2, 5, "augmented third", Quality.AUGMENTED),
    ("DIMINISHED_FOURTH", 3, 4, "diminished fourth", Quality.DIMINISHED),
    ("AUGMENTED_FOURTH", 3, 6, "augmented fourth", Quality.AUGMENTED),
    ("DIMINISHED_FIFTH", 4, 6, "diminished fifth", Quality.DIMINISHED),
    ("AUGMENTED_FIFTH", 4, 8, "augmented fifth", Quality.AUGMENTED),
    ("DIMINISHED_SIXTH", 5, 7, "diminished sixth", Quality.DIMINISHED),
    ("AUGMENTED_SIXTH", 5, 10, "augmented sixth", Quality.AUGMENTED),
    ("DIMINISHED_SEVENTH", 6, 9, "diminished seventh", Quality.DIMINISHED),
    ("AUGMENTED_SEVENTH", 6, 12, "augmented seventh", Quality.AUGMENTED),
    ("DIMINISHED_OCTAVE", 7, 11, "diminished octave", Quality.DIMINISHED),
    ("AUGMENTED_OCTAVE", 7, 13, "augmented octave", Quality.AUGMENTED),
]

# Initialize class constants after class is defined
_SIMPLE_BY_WIDTH: dict[tuple[int, int], SimpleInterval] = {}
for _name, _degrees, _semitones, _long_name, _quality in _SIMPLE_TABLE:
    _interval = SimpleInterval(_degrees, _semitones, _long_name, _quality)
    _SIMPLE_BY_WIDTH[(_degrees, _semitones)] = _interval
    setattr(SimpleInterval, _name, _interval)
    # Short alias, e.g. SimpleInterval.M3
    setattr(SimpleInterval, _interval.symbol, _interval)
del _name, _degrees, _semitones, _long_name, _quality, _interval

_SIMPLE_VALUES: tuple[SimpleInterval, ...] = tuple(_SIMPLE_BY_WIDTH.values())
