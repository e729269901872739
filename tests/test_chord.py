"""
Tests for Chord and ChordVoicing.

Tests cover:
- Building chords from a root or a bass
- Inverting chords over pitch classes and over pitches
- Chord symbols
"""

import pytest

from chuk_music_theory.core import (
    Chord,
    ChordType,
    ChordVoicing,
    Pitch,
    PitchClass,
    notes_from_bass,
    notes_from_root,
)
from chuk_music_theory.errors import InversionNotSupportedError

pc = PitchClass


def pitches(text: str) -> tuple[Pitch, ...]:
    return tuple(Pitch.parse(token) for token in text.split())


class TestNoteHelpers:
    """Tests for notes_from_bass and notes_from_root."""

    def test_from_bass(self) -> None:
        assert notes_from_bass(pc.E, ChordType.MAJOR_TRIAD_6) == (pc.E, pc.G, pc.C)

    def test_from_root(self) -> None:
        """The bass is found below the root."""
        assert notes_from_root(pc.C, ChordType.MAJOR_TRIAD_64) == (pc.G, pc.C, pc.E)

    def test_works_on_pitches(self) -> None:
        assert notes_from_root(Pitch.parse("C5"), ChordType.MAJOR_TRIAD_6) == pitches("E4 G4 C5")


class TestChord:
    """Tests for chords over pitch classes."""

    def test_of_root(self) -> None:
        chord = Chord.of_root(pc.C, ChordType.MAJOR_TRIAD)
        assert chord.notes == (pc.C, pc.E, pc.G)
        assert chord.root is pc.C
        assert chord.bass is pc.C
        assert chord.size == 3
        assert chord.type is ChordType.MAJOR_TRIAD

    def test_of_bass(self) -> None:
        chord = Chord.of_bass(pc.E, ChordType.MAJOR_TRIAD_6)
        assert chord.root is pc.C
        assert chord.notes == (pc.E, pc.G, pc.C)
        assert chord == Chord.of_root(pc.C, ChordType.MAJOR_TRIAD_6)

    def test_spelling(self) -> None:
        """Notes are spelled by the chord's intervals."""
        f_sharp_minor_7 = Chord.of_root(pc.F_SHARP, ChordType.MINOR_7)
        assert f_sharp_minor_7.notes == (pc.F_SHARP, pc.A, pc.C_SHARP, pc.E)
        assert Chord.of_root(pc.D_FLAT, ChordType.MAJOR_TRIAD).notes == (pc.D_FLAT, pc.F, pc.A_FLAT)
        assert Chord.of_root(pc.B, ChordType.HALF_DIMINISHED_7).notes == (pc.B, pc.D, pc.F, pc.A)
        assert Chord.of_root(pc.G_SHARP, ChordType.DIMINISHED_7).notes == (
            pc.G_SHARP,
            pc.B,
            pc.D,
            pc.F,
        )

    def test_invert(self) -> None:
        """C major inverted once has E in the bass, twice has G."""
        chord = Chord.of_root(pc.C, ChordType.MAJOR_TRIAD)

        first = chord.invert(1)
        assert first.bass is pc.E
        assert first.notes == (pc.E, pc.G, pc.C)
        assert first.inversion == 1
        assert first.root is pc.C

        second = first.invert(2)
        assert second.bass is pc.G
        assert second.notes == (pc.G, pc.C, pc.E)
        assert second.inversion == 2

        assert second.root_position() == chord

    def test_invert_same_is_self(self) -> None:
        chord = Chord.of_root(pc.C, ChordType.MAJOR_TRIAD_6)
        assert chord.invert(1) is chord
        assert Chord.of_root(pc.C, ChordType.MAJOR_TRIAD).root_position().inversion == 0

    def test_invert_non_invertible(self) -> None:
        chord = Chord.of_root(pc.C, ChordType.AUGMENTED_TRIAD)
        assert not chord.invertible
        with pytest.raises(InversionNotSupportedError):
            chord.invert(1)
        with pytest.raises(InversionNotSupportedError):
            chord.invert(0)
        assert chord.root_position() is chord

    def test_voicing_invert_non_invertible(self) -> None:
        voicing = ChordVoicing.of_root(Pitch.parse("C4"), ChordType.DIMINISHED_7)
        with pytest.raises(InversionNotSupportedError):
            voicing.invert(0)
        assert voicing.root_position() is voicing

    def test_missing_arguments(self) -> None:
        with pytest.raises(TypeError):
            Chord.of_root(None, ChordType.MAJOR_TRIAD)
        with pytest.raises(TypeError):
            Chord.of_bass(pc.C, None)

    def test_iteration(self) -> None:
        chord = Chord.of_root(pc.A, ChordType.MINOR_TRIAD)
        assert list(chord) == [pc.A, pc.C, pc.E]
        assert len(chord) == 3

    def test_structure_passthrough(self) -> None:
        chord = Chord.of_root(pc.G, ChordType.DOMINANT_7)
        assert chord.structure == ChordType.DOMINANT_7.structure
        assert chord.span == ChordType.DOMINANT_7.span

    def test_str(self) -> None:
        assert str(Chord.of_root(pc.C, ChordType.MAJOR_TRIAD)) == "C"
        assert str(Chord.of_root(pc.A, ChordType.MINOR_7)) == "Am7"
        assert str(Chord.of_root(pc.C, ChordType.MAJOR_TRIAD_6)) == "C/E"


class TestChordVoicing:
    """Tests for chords over pitches."""

    def test_dominant_seventh_on_d4(self) -> None:
        voicing = ChordVoicing.of_root(Pitch.parse("D4"), ChordType.DOMINANT_7)
        assert voicing.notes == pitches("D4 F#4 A4 C5")

    def test_of_bass(self) -> None:
        voicing = ChordVoicing.of_bass(Pitch.parse("E4"), ChordType.MAJOR_TRIAD_6)
        assert voicing.notes == pitches("E4 G4 C5")
        assert voicing.root == Pitch.parse("C5")

    def test_invert_moves_root_up(self) -> None:
        """C4 E4 G4 inverted once is E4 G4 C5."""
        voicing = ChordVoicing.of_root(Pitch.parse("C4"), ChordType.MAJOR_TRIAD)

        first = voicing.invert(1)
        assert first.notes == pitches("E4 G4 C5")
        assert first.inversion == 1

        second = first.invert(2)
        assert second.notes == pitches("G4 C5 E5")

        assert second.invert(0) == voicing
        assert second.root_position() == voicing

    def test_pitch_classes(self) -> None:
        voicing = ChordVoicing.of_root(Pitch.parse("C4"), ChordType.MAJOR_TRIAD)
        assert voicing.pitch_classes() == Chord.of_root(pc.C, ChordType.MAJOR_TRIAD)

    def test_missing_arguments(self) -> None:
        with pytest.raises(TypeError):
            ChordVoicing.of_root(None, ChordType.MAJOR_TRIAD)
        with pytest.raises(TypeError):
            ChordVoicing.of_root(Pitch.parse("C4"), "major triad")

    def test_str(self) -> None:
        voicing = ChordVoicing.of_root(Pitch.parse("A3"), ChordType.MINOR_TRIAD)
        assert str(voicing) == "A3 C4 E4"
        assert len(voicing) == 3
