"""
Text formats for pitch classes and pitches.

Pitch class formats choose the note names (English, German, Italian)
and the accidental symbols (ASCII or Unicode). Pitch formats add the
octave, either as a number (scientific notation, C4) or as Helmholtz
marks (c').

Examples:
    PitchFormats.SCIENTIFIC.format(Pitch.parse("F#4"))  # "F♯4"
    PitchFormats.HELMHOLTZ_H_ASCII.format(Pitch.parse("B3"))  # "h"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from chuk_music_theory.core.accidental import Accidental
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.pitch_class import PitchClass

# Note names by letter, C to B
ENGLISH_NOTES: tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")
GERMAN_NOTES: tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "H")
ITALIAN_NOTES_SI: tuple[str, ...] = ("Do", "Re", "Mi", "Fa", "Sol", "La", "Si")
ITALIAN_NOTES_TI: tuple[str, ...] = ("Do", "Re", "Mi", "Fa", "Sol", "La", "Ti")


@dataclass(frozen=True)
class AccidentalSymbols:
    """Symbols for the five common accidentals."""

    double_flat: str
    flat: str
    natural: str
    sharp: str
    double_sharp: str

    ASCII: ClassVar[AccidentalSymbols]
    UNICODE: ClassVar[AccidentalSymbols]

    def symbol(self, accidental: Accidental) -> str:
        """Symbol for any accidental; beyond double, flats or sharps repeat."""
        steps = accidental.steps_above_natural
        if steps == 0:
            return self.natural
        elif steps == -1:
            return self.flat
        elif steps == 1:
            return self.sharp
        elif steps == -2:
            return self.double_flat
        elif steps == 2:
            return self.double_sharp
        elif steps < 0:
            return self.flat * -steps
        return self.sharp * steps


AccidentalSymbols.ASCII = AccidentalSymbols("bb", "b", "", "#", "x")
AccidentalSymbols.UNICODE = AccidentalSymbols("\U0001d12b", "\u266d", "", "\u266f", "\U0001d12a")


@dataclass(frozen=True)
class SymbolicPitchClassFormat:
    """
    Note name followed by accidental symbol.

    b_flat overrides the spelling of B flat, for the German
    convention where H is B natural and B is B flat.
    """

    note_names: tuple[str, ...]
    symbols: AccidentalSymbols
    b_flat: str | None = None

    @classmethod
    def german(cls, symbols: AccidentalSymbols) -> SymbolicPitchClassFormat:
        return cls(GERMAN_NOTES, symbols, b_flat="B" + symbols.flat)

    def format(self, pitch_class: PitchClass) -> str:
        if self.b_flat is not None and pitch_class == PitchClass.B_FLAT:
            return self.b_flat
        name = self.note_names[pitch_class.base.value]
        return name + self.symbols.symbol(pitch_class.accidental)


@dataclass(frozen=True)
class NumberingPitchFormat:
    """Pitch class followed by the octave number, e.g. C4 or C-1."""

    pitch_class_format: SymbolicPitchClassFormat
    separator: str = ""
    octave_offset: int = 0

    def format(self, pitch: Pitch) -> str:
        pitch_class = self.pitch_class_format.format(pitch.pitch_class)
        return f"{pitch_class}{self.separator}{pitch.octave + self.octave_offset}"


@dataclass(frozen=True)
class HelmholtzPitchFormat:
    """
    Helmholtz notation: case and prime marks carry the octave.

    Octave 2 is written with a capital letter (C), octave 3 in lowercase
    (c). Each octave above 3 adds a high mark (c', c''), each octave
    below 2 adds a low mark in front (,C).

    combined_marks maps a mark count to a single character that stands
    for that many high marks (the Unicode double and triple primes).
    """

    pitch_class_format: SymbolicPitchClassFormat
    low_mark: str
    high_mark: str
    combined_marks: dict[int, str] = field(default_factory=dict, compare=False)

    def format(self, pitch: Pitch) -> str:
        name = self.pitch_class_format.format(pitch.pitch_class)
        if not name:
            raise ValueError(f"Pitch class {pitch.pitch_class} formats to an empty string")
        octave = pitch.octave
        if octave < 3:
            name = name[0].upper() + name[1:]
        else:
            name = name[0].lower() + name[1:]

        if octave < 2:
            return self.low_mark * (2 - octave) + name
        if octave > 3:
            return name + self._high_marks(octave - 3)
        return name

    def _high_marks(self, count: int) -> str:
        if count in self.combined_marks:
            return self.combined_marks[count]
        return self.high_mark * count


class PitchClassFormats:
    """Preset pitch class formats."""

    ENGLISH_ASCII = SymbolicPitchClassFormat(ENGLISH_NOTES, AccidentalSymbols.ASCII)
    ENGLISH_UNICODE = SymbolicPitchClassFormat(ENGLISH_NOTES, AccidentalSymbols.UNICODE)
    GERMAN_ASCII = SymbolicPitchClassFormat.german(AccidentalSymbols.ASCII)
    GERMAN_UNICODE = SymbolicPitchClassFormat.german(AccidentalSymbols.UNICODE)
    ITALIAN_SI_ASCII = SymbolicPitchClassFormat(ITALIAN_NOTES_SI, AccidentalSymbols.ASCII)
    ITALIAN_SI_UNICODE = SymbolicPitchClassFormat(ITALIAN_NOTES_SI, AccidentalSymbols.UNICODE)
    ITALIAN_TI_ASCII = SymbolicPitchClassFormat(ITALIAN_NOTES_TI, AccidentalSymbols.ASCII)
    ITALIAN_TI_UNICODE = SymbolicPitchClassFormat(ITALIAN_NOTES_TI, AccidentalSymbols.UNICODE)


# Unicode Helmholtz marks: GREEK LOWER NUMERAL SIGN below, primes above
_UNICODE_LOW_MARK = "\u0375"
_UNICODE_HIGH_MARK = "\u2032"
_UNICODE_COMBINED_MARKS: dict[int, str] = {2: "\u2033", 3: "\u2034", 4: "\u2057"}


class PitchFormats:
    """Preset pitch formats."""

    SCIENTIFIC = NumberingPitchFormat(PitchClassFormats.ENGLISH_UNICODE, "", 0)
    HELMHOLTZ_B_ASCII = HelmholtzPitchFormat(PitchClassFormats.ENGLISH_ASCII, ",", "'")
    HELMHOLTZ_B_UNICODE = HelmholtzPitchFormat(
        PitchClassFormats.ENGLISH_UNICODE,
        _UNICODE_LOW_MARK,
        _UNICODE_HIGH_MARK,
        _UNICODE_COMBINED_MARKS,
    )
    HELMHOLTZ_H_ASCII = HelmholtzPitchFormat(PitchClassFormats.GERMAN_ASCII, ",", "'")
    HELMHOLTZ_H_UNICODE = HelmholtzPitchFormat(
        PitchClassFormats.GERMAN_UNICODE,
        _UNICODE_LOW_MARK,
        _UNICODE_HIGH_MARK,
        _UNICODE_COMBINED_MARKS,
    )
