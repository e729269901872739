"""
Text formats - pitch classes and pitches as strings.

Parsing lives with the value types (PitchClass.parse, Pitch.parse);
this package covers the richer output notations.
"""

from chuk_music_theory.text.formats import (
    AccidentalSymbols,
    HelmholtzPitchFormat,
    NumberingPitchFormat,
    PitchClassFormats,
    PitchFormats,
    SymbolicPitchClassFormat,
)

__all__ = [
    "AccidentalSymbols",
    "HelmholtzPitchFormat",
    "NumberingPitchFormat",
    "PitchClassFormats",
    "PitchFormats",
    "SymbolicPitchClassFormat",
]
