"""
Tests for BasePitchClass and PitchClass.

Tests cover:
- Letter cycle arithmetic
- Spelling-sensitive equality and enharmonic comparison
- Spelled transposition
- Ordering and parsing
"""

import pytest

from chuk_music_theory.core import (
    Accidental,
    BasePitchClass,
    Interval,
    PitchClass,
    SimpleInterval,
)
from chuk_music_theory.errors import FormatError


class TestBasePitchClass:
    """Tests for the seven natural letters."""

    def test_steps_above_reference(self) -> None:
        """Natural letters sit on the white keys."""
        steps = [base.steps_above_reference for base in BasePitchClass]
        assert steps == [0, 2, 4, 5, 7, 9, 11]

    def test_advance(self) -> None:
        """Advance wraps around the seven letters."""
        assert BasePitchClass.C.advance(2) == BasePitchClass.E
        assert BasePitchClass.A.advance(3) == BasePitchClass.D
        assert BasePitchClass.B.advance(7) == BasePitchClass.B

    def test_advance_negative(self) -> None:
        """Negative advance moves down."""
        assert BasePitchClass.C.advance(-1) == BasePitchClass.B
        assert BasePitchClass.D.advance(-10) == BasePitchClass.A


class TestPitchClass:
    """Tests for PitchClass values."""

    def test_common_constants_are_cached(self) -> None:
        """of() returns the named constants."""
        assert PitchClass.of(BasePitchClass.C, Accidental.SHARP) is PitchClass.C_SHARP
        assert PitchClass.of(BasePitchClass.B, Accidental.DOUBLE_FLAT) is PitchClass.B_DBL_FLAT
        assert len(PitchClass.common_pitch_classes()) == 35

    def test_uncommon_spelling(self) -> None:
        """Triple sharps still work."""
        pc = PitchClass.of(BasePitchClass.F, Accidental.of_steps(3))
        assert pc.steps_above_reference == 8
        assert str(pc) == "F###"

    def test_steps_above_reference(self) -> None:
        """Steps can leave the 0-11 range."""
        assert PitchClass.C_FLAT.steps_above_reference == -1
        assert PitchClass.B_SHARP.steps_above_reference == 12
        assert PitchClass.C_DBL_FLAT.steps_above_reference == -2

    def test_relative_octave(self) -> None:
        assert PitchClass.C_FLAT.relative_octave == -1
        assert PitchClass.B_SHARP.relative_octave == 1
        assert PitchClass.E.relative_octave == 0

    def test_natural(self) -> None:
        assert PitchClass.F_SHARP.natural() is PitchClass.F
        assert PitchClass.F.is_natural
        assert not PitchClass.F_SHARP.is_natural

    def test_equality_is_spelling_sensitive(self) -> None:
        """C# and Db sound the same but are different values."""
        assert PitchClass.C_SHARP != PitchClass.D_FLAT
        assert PitchClass.C_SHARP.is_enharmonic_with(PitchClass.D_FLAT)
        assert PitchClass.B_SHARP.is_enharmonic_with(PitchClass.C)
        assert not PitchClass.C.is_enharmonic_with(PitchClass.C_SHARP)

    def test_enharmonic_consistency(self) -> None:
        """Enharmonic iff steps differ by a multiple of 12; equality implies it."""
        common = PitchClass.common_pitch_classes()
        for a in common:
            for b in common:
                expected = (a.steps_above_reference - b.steps_above_reference) % 12 == 0
                assert a.is_enharmonic_with(b) == expected
                if a == b:
                    assert a.is_enharmonic_with(b)

    def test_requires_base_and_accidental(self) -> None:
        """Missing parts are rejected."""
        with pytest.raises(TypeError):
            PitchClass(None, Accidental.NATURAL)
        with pytest.raises(TypeError):
            PitchClass(BasePitchClass.C, None)


class TestPitchClassTransposition:
    """Tests for spelled transposition."""

    def test_fifth(self) -> None:
        assert PitchClass.C.transpose_up(SimpleInterval.PERFECT_FIFTH) is PitchClass.G
        assert PitchClass.B.transpose_up(SimpleInterval.PERFECT_FIFTH) is PitchClass.F_SHARP

    def test_augmented_second_keeps_letter_distance(self) -> None:
        """C + A2 is D#, never Eb."""
        assert PitchClass.C.transpose_up(SimpleInterval.AUGMENTED_SECOND) is PitchClass.D_SHARP
        assert PitchClass.C.transpose_up(SimpleInterval.MINOR_THIRD) is PitchClass.E_FLAT

    def test_letter_wraps(self) -> None:
        """B + m2 is C."""
        assert PitchClass.B.transpose_up(SimpleInterval.MINOR_SECOND) is PitchClass.C

    def test_unison_is_identity(self) -> None:
        for pc in PitchClass.common_pitch_classes():
            assert pc.transpose_up(SimpleInterval.UNISON) is pc
            assert pc.transpose_down(SimpleInterval.UNISON) is pc

    def test_transpose_down(self) -> None:
        assert PitchClass.C.transpose_down(SimpleInterval.MAJOR_THIRD) is PitchClass.A_FLAT
        assert PitchClass.E.transpose_down(SimpleInterval.AUGMENTED_FOURTH) is PitchClass.B_FLAT
        assert PitchClass.C.transpose_down(SimpleInterval.MINOR_SECOND) is PitchClass.B

    def test_double_flat_round_trip(self) -> None:
        """Negative steps survive the letter cycle."""
        up = PitchClass.C_DBL_FLAT.transpose_up(SimpleInterval.MINOR_SIXTH)
        assert up == PitchClass.of(BasePitchClass.A, Accidental.of_steps(-3))
        assert up.transpose_down(SimpleInterval.MINOR_SIXTH) is PitchClass.C_DBL_FLAT

    def test_round_trip(self) -> None:
        """Transposing up then down returns the same spelling."""
        intervals = [i for i in SimpleInterval.values() if i.semitones < 12]
        for pc in PitchClass.common_pitch_classes():
            for interval in intervals:
                assert pc.transpose_up(interval).transpose_down(interval) == pc

    def test_tritone_offset_keeps_sharp_side(self) -> None:
        """An accidental offset of exactly six semitones is written as six sharps."""
        tritone_unison = Interval.of(0, 6)
        assert PitchClass.C.transpose_up(tritone_unison).accidental.steps == 6
        assert PitchClass.C.transpose_down(tritone_unison).accidental.steps == 6

    def test_interval_to(self) -> None:
        """Ascending spelled intervals between classes."""
        assert PitchClass.C.interval_to(PitchClass.E) == SimpleInterval.MAJOR_THIRD
        assert PitchClass.C.interval_to(PitchClass.F_FLAT) == SimpleInterval.DIMINISHED_FOURTH
        assert PitchClass.B.interval_to(PitchClass.C) == SimpleInterval.MINOR_SECOND
        assert PitchClass.G.interval_to(PitchClass.G) == SimpleInterval.UNISON

    def test_interval_to_rejects_descending_spelling(self) -> None:
        """C# up to C would be a negative unison."""
        with pytest.raises(ValueError):
            PitchClass.C_SHARP.interval_to(PitchClass.C)


class TestPitchClassOrdering:
    """Tests for PitchClass ordering."""

    def test_by_steps_then_letter(self) -> None:
        """Enharmonic spellings are ordered by letter."""
        assert PitchClass.C < PitchClass.C_SHARP < PitchClass.D
        assert PitchClass.C_SHARP < PitchClass.D_FLAT
        assert PitchClass.E_SHARP > PitchClass.F_FLAT

    def test_consistent_with_equality(self) -> None:
        """No two different spellings compare as equal."""
        common = PitchClass.common_pitch_classes()
        for a in common:
            for b in common:
                assert (a < b or b < a) == (a != b)

    def test_enharmonic_key(self) -> None:
        """The enharmonic key ties C# and Db."""
        assert PitchClass.enharmonic_key(PitchClass.C_SHARP) == PitchClass.enharmonic_key(
            PitchClass.D_FLAT
        )
        assert PitchClass.strict_key(PitchClass.C_SHARP) != PitchClass.strict_key(
            PitchClass.D_FLAT
        )


class TestPitchClassParse:
    """Tests for PitchClass.parse."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("C", PitchClass.C),
            ("F#", PitchClass.F_SHARP),
            ("Bb", PitchClass.B_FLAT),
            ("Ebb", PitchClass.E_DBL_FLAT),
            ("Gx", PitchClass.G_DBL_SHARP),
        ],
    )
    def test_valid(self, text: str, expected: PitchClass) -> None:
        assert PitchClass.parse(text) is expected

    def test_str_parses_back(self) -> None:
        for pc in PitchClass.common_pitch_classes():
            assert PitchClass.parse(str(pc)) is pc

    @pytest.mark.parametrize("text", ["", "H", "c", "C$", "#C", "Cb#"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(FormatError):
            PitchClass.parse(text)
