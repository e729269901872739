"""
Tests for scale degrees, key types and keys.

Tests cover:
- ScaleDegree constants and formatting
- KeyType validation and degrees
- Key spelling, degree resolution and scales
- Parsing key names
"""

import pytest

from chuk_music_theory.core import (
    CHROMATIC_DEGREES_ASC,
    CHROMATIC_DEGREES_DESC,
    DIATONIC_DEGREES,
    LOWERED_DEGREES,
    RAISED_DEGREES,
    Key,
    KeyType,
    Pitch,
    PitchClass,
    ScaleDegree,
    SimpleInterval,
)
from chuk_music_theory.errors import FormatError

pc = PitchClass


def pitches(text: str) -> list[Pitch]:
    return [Pitch.parse(token) for token in text.split()]


def pitch_classes(text: str) -> tuple[PitchClass, ...]:
    return tuple(PitchClass.parse(token) for token in text.split())


class TestScaleDegree:
    """Tests for ScaleDegree."""

    def test_constants(self) -> None:
        assert ScaleDegree.V == ScaleDegree(5)
        assert ScaleDegree.VII_LOWERED == ScaleDegree(7, -1)
        assert ScaleDegree.IV_RAISED == ScaleDegree(4, 1)

    def test_degree_range(self) -> None:
        with pytest.raises(ValueError):
            ScaleDegree(0)
        with pytest.raises(ValueError):
            ScaleDegree(8)

    def test_str(self) -> None:
        assert str(ScaleDegree.I) == "I"
        assert str(ScaleDegree.IV_RAISED) == "IV+"
        assert str(ScaleDegree.VII_LOWERED) == "VII-"
        assert str(ScaleDegree(5, 2)) == "V+2"

    def test_degree_lists(self) -> None:
        assert len(DIATONIC_DEGREES) == 7
        assert all(d.alteration == -1 for d in LOWERED_DEGREES)
        assert all(d.alteration == 1 for d in RAISED_DEGREES)
        assert len(CHROMATIC_DEGREES_ASC) == 12
        assert len(CHROMATIC_DEGREES_DESC) == 12


class TestKeyType:
    """Tests for KeyType."""

    def test_major(self) -> None:
        assert KeyType.MAJOR.size == 7
        assert KeyType.MAJOR.degree(1) is SimpleInterval.UNISON
        assert KeyType.MAJOR.degree(3) is SimpleInterval.MAJOR_THIRD
        assert KeyType.MINOR.degree(7) is SimpleInterval.MINOR_SEVENTH
        assert str(KeyType.MAJOR) == "major"

    def test_intervals_are_sorted(self) -> None:
        key_type = KeyType((SimpleInterval.P5, SimpleInterval.M3), "triad")
        assert key_type.intervals == (SimpleInterval.M3, SimpleInterval.P5)

    def test_octave_rejected(self) -> None:
        with pytest.raises(ValueError):
            KeyType((SimpleInterval.M2, SimpleInterval.P8))

    def test_non_interval_rejected(self) -> None:
        with pytest.raises(TypeError):
            KeyType((SimpleInterval.M2, "M3"))

    def test_degree_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            KeyType.MAJOR.degree(8)
        with pytest.raises(IndexError):
            KeyType.MAJOR.degree(0)

    def test_on(self) -> None:
        assert KeyType.MINOR.on(pc.A) == Key.minor(pc.A)


class TestKey:
    """Tests for Key."""

    def test_e_major_degrees(self) -> None:
        assert Key.major(pc.E).degrees == pitch_classes("E F# G# A B C# D#")

    def test_flat_keys(self) -> None:
        assert Key.major(pc.C_FLAT).degrees == pitch_classes("Cb Db Eb Fb Gb Ab Bb")
        assert Key.minor(pc.E_FLAT).degrees == pitch_classes("Eb F Gb Ab Bb Cb Db")

    def test_pitch_classes(self) -> None:
        assert Key.major(pc.G).pitch_classes() == frozenset(pitch_classes("G A B C D E F#"))

    def test_degree_by_number(self) -> None:
        key = Key.major(pc.A)
        assert key.degree(1) is pc.A
        assert key.degree(5) is pc.E
        with pytest.raises(IndexError):
            key.degree(8)

    def test_altered_degrees_keep_letter(self) -> None:
        """In C major the lowered seventh is Bb, not A#."""
        assert Key.major(pc.C).degree(ScaleDegree.VII_LOWERED) is pc.B_FLAT
        assert Key.minor(pc.D).degree(ScaleDegree.VII_RAISED) is pc.C_SHARP
        assert Key.major(pc.F).degree(ScaleDegree.IV_RAISED) is pc.B
        assert Key.major(pc.C).degree(ScaleDegree(4, 2)) is pc.F_DBL_SHARP

    def test_chromatic_degrees(self) -> None:
        key = Key.major(pc.C)
        ascending = tuple(key.degree(d) for d in CHROMATIC_DEGREES_ASC)
        assert ascending == pitch_classes("C C# D D# E F F# G G# A A# B")
        descending = tuple(key.degree(d) for d in CHROMATIC_DEGREES_DESC)
        assert descending == pitch_classes("B Bb A Ab G Gb F E Eb D Db C")

    def test_pitch_to_degree(self) -> None:
        """Spelling matters."""
        key = Key.major(pc.E)
        assert key.pitch_to_degree(pc.G_SHARP) == ScaleDegree.III
        assert key.pitch_to_degree(pc.A_FLAT) is None

    def test_degree_past_seventh(self) -> None:
        """Eight-note keys have a degree number but no ScaleDegree for the eighth note."""
        bebop = KeyType(
            (
                SimpleInterval.M2,
                SimpleInterval.M3,
                SimpleInterval.P4,
                SimpleInterval.P5,
                SimpleInterval.M6,
                SimpleInterval.m7,
                SimpleInterval.M7,
            ),
            "bebop dominant",
        )
        key = Key(pc.C, bebop)
        assert key.degree_of(pc.B_FLAT) == 7
        assert key.degree_of(pc.B) == 8
        assert key.degree_of(pc.C_SHARP) is None
        assert key.pitch_to_degree(pc.B_FLAT) == ScaleDegree.VII
        assert key.pitch_to_degree(pc.B) is None
        assert key.pitch_to_degree(pc.C) == ScaleDegree.I

    def test_contains(self) -> None:
        assert pc.F_SHARP in Key.major(pc.D)
        assert pc.G_FLAT not in Key.major(pc.D)

    def test_scale(self) -> None:
        scale = Key.major(pc.D).scale(Pitch.parse("A3"), Pitch.parse("G5"))
        assert scale == pitches("A3 B3 C#4 D4 E4 F#4 G4 A4 B4 C#5 D5 E5 F#5 G5")

    def test_scale_one_octave(self) -> None:
        """End defaults to an octave above start."""
        scale = Key.major(pc.C).scale(Pitch.parse("C4"))
        assert scale == pitches("C4 D4 E4 F4 G4 A4 B4 C5")

    def test_scale_descending(self) -> None:
        scale = Key.major(pc.C).scale(Pitch.parse("G5"), Pitch.parse("D4"))
        assert scale == pitches("G5 F5 E5 D5 C5 B4 A4 G4 F4 E4 D4")

    def test_equality(self) -> None:
        assert Key.major(pc.C) == Key(pc.C, KeyType.MAJOR)
        assert hash(Key.major(pc.C)) == hash(Key(pc.C, KeyType.MAJOR))
        assert Key.major(pc.C) != Key.minor(pc.C)

    def test_requires_tonic_and_type(self) -> None:
        with pytest.raises(TypeError):
            Key(None, KeyType.MAJOR)
        with pytest.raises(TypeError):
            Key(pc.C, "major")

    def test_str(self) -> None:
        assert str(Key.major(pc.A)) == "A major"
        assert str(Key.minor(pc.F_SHARP)) == "F# minor"


class TestKeyParse:
    """Tests for Key.parse."""

    def test_valid(self) -> None:
        assert Key.parse("F#_major") == Key.major(pc.F_SHARP)
        assert Key.parse("D_minor") == Key.minor(pc.D)
        assert Key.parse("Bb_natural_minor") == Key.minor(pc.B_FLAT)
        assert Key.parse("Eb_Major") == Key.major(pc.E_FLAT)

    def test_missing_separator(self) -> None:
        with pytest.raises(FormatError):
            Key.parse("Cmajor")

    def test_bad_tonic(self) -> None:
        with pytest.raises(FormatError):
            Key.parse("H_major")

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError):
            Key.parse("C_lydian")
