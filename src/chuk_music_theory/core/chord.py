"""
Chords - chord types bound to actual notes.

Chord spells a chord type over pitch classes (C major triad: C E G).
ChordVoicing does the same over pitches (C4 E4 G4), so it also fixes
the octave of every note.

Both are built by the same two helpers, notes_from_bass() and
notes_from_root(), which work on anything with transpose_up/down.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeVar

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.core.chord_type import ChordType
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.pitch_class import PitchClass

N = TypeVar("N", PitchClass, Pitch)


def _check(note: object, chord_type: object, what: str) -> None:
    if note is None:
        raise TypeError(ErrorMessages.MISSING_VALUE.format(what=what))
    if not isinstance(chord_type, ChordType):
        raise TypeError(ErrorMessages.MISSING_VALUE.format(what="chord type"))


def notes_from_bass(bass: N, chord_type: ChordType) -> tuple[N, ...]:
    """Stack the chord type's structure on top of the bass."""
    notes = [bass]
    for interval in chord_type.structure:
        notes.append(notes[-1].transpose_up(interval))
    return tuple(notes)


def notes_from_root(root: N, chord_type: ChordType) -> tuple[N, ...]:
    """Find the bass below the root, then stack the structure on it."""
    bass = root.transpose_down(chord_type.height_above_bass(chord_type.root_index))
    return notes_from_bass(bass, chord_type)


@dataclass(frozen=True)
class Chord:
    """
    A chord type spelled over pitch classes.

    notes[0] is the bass and notes[chord_type.root_index] is the root.

    Examples:
        Chord.of_root(PitchClass.C, ChordType.MAJOR_TRIAD).notes  # C, E, G
        Chord.of_bass(PitchClass.E, ChordType.MAJOR_TRIAD_6).root  # C
    """

    root: PitchClass
    notes: tuple[PitchClass, ...]
    chord_type: ChordType

    @classmethod
    def of_bass(cls, bass: PitchClass, chord_type: ChordType) -> Chord:
        _check(bass, chord_type, "chord bass")
        notes = notes_from_bass(bass, chord_type)
        return cls(notes[chord_type.root_index], notes, chord_type)

    @classmethod
    def of_root(cls, root: PitchClass, chord_type: ChordType) -> Chord:
        _check(root, chord_type, "chord root")
        return cls(root, notes_from_root(root, chord_type), chord_type)

    @property
    def type(self) -> ChordType:
        return self.chord_type

    @property
    def bass(self) -> PitchClass:
        return self.notes[0]

    @property
    def size(self) -> int:
        return self.chord_type.size

    @property
    def structure(self) -> tuple[Interval, ...]:
        return self.chord_type.structure

    @property
    def span(self) -> Interval:
        return self.chord_type.span

    @property
    def inversion(self) -> int:
        return self.chord_type.inversion

    @property
    def invertible(self) -> bool:
        return self.chord_type.invertible

    def invert(self, n: int) -> Chord:
        """
        The same chord with a different note in the bass.

        Raises:
            InversionNotSupportedError: If the chord type has no inversions
            IndexError: If n is out of range
        """
        if self.chord_type.invertible and self.chord_type.inversion == n:
            return self
        return Chord.of_root(self.root, self.chord_type.invert(n))

    def root_position(self) -> Chord:
        if self.chord_type.inversion == 0:
            return self
        return self.invert(0)

    def __iter__(self) -> Iterator[PitchClass]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        result = f"{self.root}{self.chord_type.symbol}"
        if self.bass != self.root:
            result += f"/{self.bass}"
        return result


@dataclass(frozen=True)
class ChordVoicing:
    """
    A chord type spelled over pitches.

    Inverting a voicing keeps the root where it sounds and moves the
    notes around it: C4 E4 G4 inverted once is E4 G4 C5.
    """

    root: Pitch
    notes: tuple[Pitch, ...]
    chord_type: ChordType

    @classmethod
    def of_bass(cls, bass: Pitch, chord_type: ChordType) -> ChordVoicing:
        _check(bass, chord_type, "chord bass")
        notes = notes_from_bass(bass, chord_type)
        return cls(notes[chord_type.root_index], notes, chord_type)

    @classmethod
    def of_root(cls, root: Pitch, chord_type: ChordType) -> ChordVoicing:
        _check(root, chord_type, "chord root")
        return cls(root, notes_from_root(root, chord_type), chord_type)

    @property
    def type(self) -> ChordType:
        return self.chord_type

    @property
    def bass(self) -> Pitch:
        return self.notes[0]

    @property
    def size(self) -> int:
        return self.chord_type.size

    @property
    def structure(self) -> tuple[Interval, ...]:
        return self.chord_type.structure

    @property
    def span(self) -> Interval:
        return self.chord_type.span

    @property
    def inversion(self) -> int:
        return self.chord_type.inversion

    @property
    def invertible(self) -> bool:
        return self.chord_type.invertible

    def pitch_classes(self) -> Chord:
        """Drop the octaves, keeping the spelling."""
        return Chord(
            self.root.pitch_class,
            tuple(note.pitch_class for note in self.notes),
            self.chord_type,
        )

    def invert(self, n: int) -> ChordVoicing:
        """
        The same chord with a different note in the bass.

        The bass stays in the octave of the root-position bass, so the
        root moves up an octave when leaving root position.

        Raises:
            InversionNotSupportedError: If the chord type has no inversions
            IndexError: If n is out of range
        """
        if self.chord_type.invertible and self.chord_type.inversion == n:
            return self
        inverted = self.chord_type.invert(n)
        shift = inverted.root_octave - self.chord_type.root_octave
        root = Pitch(self.root.pitch_class, self.root.octave + shift)
        return ChordVoicing.of_root(root, inverted)

    def root_position(self) -> ChordVoicing:
        if self.chord_type.inversion == 0:
            return self
        return self.invert(0)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return " ".join(str(note) for note in self.notes)
