"""
Core music primitives.

Immutable value types with spelling-aware arithmetic:
- Accidental: Semitones above the natural pitch
- BasePitchClass: The seven letters C..B
- PitchClass: Letter + accidental (C# and Db are distinct)
- Interval: Degrees + semitones (A2 and m3 are distinct)
- Pitch: Pitch class in an octave (C4 = middle C)
- all_between: Every pitch of a set of classes in a range
- ChordType: Interval structure with a root, and its inversions
- Chord / ChordVoicing: Chord type over pitch classes / pitches
- ScaleDegree, KeyType, Key: Scales and their degrees
"""

from chuk_music_theory.core.accidental import Accidental
from chuk_music_theory.core.chord import Chord, ChordVoicing, notes_from_bass, notes_from_root
from chuk_music_theory.core.chord_type import ChordType, NonInvertibleChordType, SmallChordType
from chuk_music_theory.core.interval import (
    CompoundInterval,
    Interval,
    Quality,
    SimpleInterval,
    sum_intervals,
)
from chuk_music_theory.core.key import (
    CHROMATIC_DEGREES_ASC,
    CHROMATIC_DEGREES_DESC,
    DIATONIC_DEGREES,
    LOWERED_DEGREES,
    RAISED_DEGREES,
    Key,
    KeyType,
    ScaleDegree,
)
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.pitch_class import BasePitchClass, PitchClass
from chuk_music_theory.core.pitches import all_between

__all__ = [
    # Pitch
    "Accidental",
    "BasePitchClass",
    "PitchClass",
    "Pitch",
    "all_between",
    # Interval
    "Quality",
    "Interval",
    "SimpleInterval",
    "CompoundInterval",
    "sum_intervals",
    # Chord
    "ChordType",
    "SmallChordType",
    "NonInvertibleChordType",
    "Chord",
    "ChordVoicing",
    "notes_from_bass",
    "notes_from_root",
    # Key
    "ScaleDegree",
    "KeyType",
    "Key",
    "DIATONIC_DEGREES",
    "LOWERED_DEGREES",
    "RAISED_DEGREES",
    "CHROMATIC_DEGREES_ASC",
    "CHROMATIC_DEGREES_DESC",
]
