"""
Pitch - a spelled pitch class in a specific octave.

Octaves follow scientific pitch notation: C4 is middle C, and the octave
number changes between B and C. The octave belongs to the letter, so
B#3 sounds the same as C4 and Cb4 the same as B3.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering

from chuk_music_theory.constants import (
    DEGREES_PER_OCTAVE,
    MIDI_OFFSET,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.pitch_class import PitchClass
from chuk_music_theory.errors import FormatError

_PITCH_PATTERN = re.compile(r"([A-G][^\d+-]*)([+-]?\d+)")


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """
    A pitch class at an octave.

    Equality is spelling-sensitive: C#4 != Db4, use is_enharmonic_with()
    to compare by sound. Ordering is by absolute pitch, then by letter
    position, so enharmonic spellings still have a definite order.

    Examples:
        Pitch(PitchClass.C, 4).midi_number  # 60
        Pitch.parse("B3").transpose_up(SimpleInterval.MINOR_SECOND)  # C4
    """

    pitch_class: PitchClass
    octave: int

    def __post_init__(self) -> None:
        if not isinstance(self.pitch_class, PitchClass):
            raise TypeError(ErrorMessages.MISSING_VALUE.format(what="pitch class"))

    @classmethod
    def of_absolute_pitch(cls, pitch_class: PitchClass, absolute_pitch: int) -> Pitch:
        """
        Get the pitch of a given class sounding at an absolute pitch.

        Raises:
            ValueError: If the class never sounds at that absolute pitch
        """
        offset = absolute_pitch - pitch_class.steps_above_reference
        octave, remainder = divmod(offset, SEMITONES_PER_OCTAVE)
        if remainder != 0:
            raise ValueError(
                ErrorMessages.INCONSISTENT_PITCH.format(
                    pitch_class=pitch_class, absolute=absolute_pitch
                )
            )
        return cls(pitch_class, octave)

    @property
    def absolute_pitch(self) -> int:
        """Semitones above C0."""
        return self.octave * SEMITONES_PER_OCTAVE + self.pitch_class.steps_above_reference

    @property
    def midi_number(self) -> int:
        """MIDI note number. C4 = 60."""
        return self.absolute_pitch + MIDI_OFFSET

    @property
    def diatonic_position(self) -> int:
        """Letters above C0, ignoring accidentals."""
        return self.octave * DEGREES_PER_OCTAVE + self.pitch_class.base.value

    def is_enharmonic_with(self, other: Pitch) -> bool:
        """True if both sound at the same absolute pitch."""
        return self.absolute_pitch == other.absolute_pitch

    def transpose_up(self, interval: Interval) -> Pitch:
        """Transpose up, spelling the result by the interval's degrees."""
        return Pitch.of_absolute_pitch(
            self.pitch_class.transpose_up(interval),
            self.absolute_pitch + interval.semitones,
        )

    def transpose_down(self, interval: Interval) -> Pitch:
        """Transpose down, spelling the result by the interval's degrees."""
        return Pitch.of_absolute_pitch(
            self.pitch_class.transpose_down(interval),
            self.absolute_pitch - interval.semitones,
        )

    # Nearest-pitch queries

    @staticmethod
    def nearest_above(pitch_class: PitchClass, bound: Pitch) -> Pitch:
        """
        The lowest pitch of a class that sounds strictly higher than bound.

        nearest_above(C, G4) is C5; nearest_above(G, G4) is G5.
        """
        distance = _steps_between(bound.pitch_class, pitch_class) or SEMITONES_PER_OCTAVE
        return Pitch.of_absolute_pitch(pitch_class, bound.absolute_pitch + distance)

    @staticmethod
    def nearest_above_or_equal(pitch_class: PitchClass, bound: Pitch) -> Pitch:
        """
        Like nearest_above(), but returns bound itself if it has the class.

        A different spelling at the same height (bound G#4, class Ab)
        does not count and gives the next octave up.
        """
        if bound.pitch_class == pitch_class:
            return bound
        return Pitch.nearest_above(pitch_class, bound)

    @staticmethod
    def nearest_above_or_enharmonic(pitch_class: PitchClass, bound: Pitch) -> Pitch:
        """The lowest pitch of a class that sounds at or above bound."""
        distance = _steps_between(bound.pitch_class, pitch_class)
        return Pitch.of_absolute_pitch(pitch_class, bound.absolute_pitch + distance)

    @staticmethod
    def nearest_below(pitch_class: PitchClass, bound: Pitch) -> Pitch:
        """The highest pitch of a class that sounds strictly lower than bound."""
        distance = _steps_between(pitch_class, bound.pitch_class) or SEMITONES_PER_OCTAVE
        return Pitch.of_absolute_pitch(pitch_class, bound.absolute_pitch - distance)

    @staticmethod
    def nearest_below_or_equal(pitch_class: PitchClass, bound: Pitch) -> Pitch:
        """Like nearest_below(), but returns bound itself if it has the class."""
        if bound.pitch_class == pitch_class:
            return bound
        return Pitch.nearest_below(pitch_class, bound)

    @staticmethod
    def nearest_below_or_enharmonic(pitch_class: PitchClass, bound: Pitch) -> Pitch:
        """The highest pitch of a class that sounds at or below bound."""
        distance = _steps_between(pitch_class, bound.pitch_class)
        return Pitch.of_absolute_pitch(pitch_class, bound.absolute_pitch - distance)

    # Ordering

    @staticmethod
    def strict_key(pitch: Pitch) -> tuple[int, int]:
        """Sort key matching the natural order."""
        return (pitch.absolute_pitch, pitch.diatonic_position)

    @staticmethod
    def enharmonic_key(pitch: Pitch) -> int:
        """Sort key that ties enharmonic pitches."""
        return pitch.absolute_pitch

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return Pitch.strict_key(self) < Pitch.strict_key(other)

    def __str__(self) -> str:
        return f"{self.pitch_class}{self.octave}"

    def __repr__(self) -> str:
        return f"Pitch({self})"

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a pitch in scientific notation, like 'C4', 'F#3' or 'Bb-1'.

        Raises:
            FormatError: If the text is not a valid pitch
        """
        match = _PITCH_PATTERN.fullmatch(text.strip())
        if match is None:
            raise FormatError(ErrorMessages.INVALID_PITCH.format(text=text))
        try:
            pitch_class = PitchClass.parse(match.group(1))
        except FormatError as e:
            raise FormatError(ErrorMessages.INVALID_PITCH.format(text=text)) from e
        return cls(pitch_class, int(match.group(2)))


def _steps_between(lower: PitchClass, upper: PitchClass) -> int:
    """Semitones from lower up to upper, reduced into [0, 12)."""
    return (upper.steps_above_reference - lower.steps_above_reference) % SEMITONES_PER_OCTAVE
