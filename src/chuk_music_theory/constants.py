"""
Constants for the music theory core.

No magic numbers - the octave geometry and standard messages live here.
"""

from pathlib import Path

# Twelve-tone equal temperament
SEMITONES_PER_OCTAVE = 12

# Diatonic letters C D E F G A B
DEGREES_PER_OCTAVE = 7

# Scientific pitch notation: C4 (middle C) is MIDI note 60
MIDI_OFFSET = 12

# Built-in preset catalog shipped with the package
CATALOG_LIBRARY_PATH = Path(__file__).parent / "catalog" / "library"

# Environment variable naming a project catalog directory
CATALOG_PATH_ENV = "CHUK_MUSIC_THEORY_CATALOG"


class ErrorMessages:
    """Standardized error messages."""

    NEGATIVE_INTERVAL = "Interval must not be negative: {degrees} degrees, {semitones} semitones."
    INTERVAL_WIDER_THAN_OCTAVE = "Interval is wider than a perfect octave: {interval}."
    EMPTY_STRUCTURE = "The interval structure is empty."
    NOT_AN_INTERVAL = "Structure must contain intervals, got {value!r}."
    CHORD_TOO_WIDE = "The sum of intervals must be less than one octave: sum of {structure} is {span}."
    INVALID_INVERSION = "The inversion number is not valid: {n} (chord has {size} notes)."
    INVALID_NOTE_INDEX = "The note index is not valid: {note} (chord has {size} notes)."
    NOT_INVERTIBLE = "Chord type '{name}' has no inversions."
    USE_INVERSIONS_OF = "Build SmallChordType with SmallChordType.inversions_of(structure)."
    MISSING_VALUE = "The {what} is missing."
    INCONSISTENT_PITCH = "Pitch class {pitch_class} does not occur at absolute pitch {absolute}."
    INVALID_DEGREE = "Degree must be 1-7, got {degree}."
    DEGREE_OUT_OF_RANGE = "Key '{key}' has no degree {degree}."
    INVALID_ACCIDENTAL = "Illegal accidental format: '{text}'."
    INVALID_PITCH_CLASS = "Illegal pitch class format: '{text}'."
    INVALID_PITCH = "Illegal pitch format: '{text}'."
    INVALID_INTERVAL = "Illegal interval format: '{text}'."
    INVALID_KEY = "Invalid key: '{key}'. Expected format like 'C_major' or 'D_minor'."
    UNKNOWN_KEY_TYPE = "Unknown key type: '{name}'."
    DESCENDING_SPELLING = "No ascending interval spells {source} up to {target}."
