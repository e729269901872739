"""
Catalog models - YAML definitions of named chord types and key types.

A catalog file holds two optional lists:

    chord_types:
      - name: suspended 4th
        symbol: sus4
        structure: [P4, M2]
    key_types:
      - name: dorian
        degrees: [M2, m3, P4, P5, M6, m7]

Intervals are written as symbols and checked when the file is loaded.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_music_theory.core.chord_type import ChordType, NonInvertibleChordType, SmallChordType
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.key import KeyType


def _check_symbols(symbols: list[str]) -> list[str]:
    for symbol in symbols:
        Interval.parse(symbol)
    return symbols


class ChordTypeDefinition(BaseModel):
    """A named chord type, in root position."""

    name: str = Field(..., min_length=1, description="Chord type name (e.g., 'major triad')")
    symbol: str = Field("", description="Chord symbol suffix (e.g., 'm7')")
    structure: list[str] = Field(
        ..., min_length=1, description="Intervals between adjacent notes, from the bass up"
    )
    invertible: bool = Field(True, description="Whether the type has inversions")
    description: str = Field("", description="Human-readable description")

    model_config = {"frozen": True}

    @field_validator("structure")
    @classmethod
    def validate_structure(cls, v: list[str]) -> list[str]:
        """Ensure every interval symbol parses."""
        return _check_symbols(v)

    def intervals(self) -> list[Interval]:
        return [Interval.parse(symbol) for symbol in self.structure]

    def build(self) -> ChordType:
        """
        Build the chord type in root position.

        Raises:
            ValueError: If the structure spans an octave or more
        """
        if self.invertible:
            return SmallChordType.inversions_of(self.intervals(), self.name, self.symbol)[0]
        return NonInvertibleChordType(self.intervals(), self.name, self.symbol)


class KeyTypeDefinition(BaseModel):
    """A named key type: intervals above the tonic."""

    name: str = Field(..., min_length=1, description="Key type name (e.g., 'dorian')")
    degrees: list[str] = Field(..., description="Intervals above the tonic, tonic excluded")
    description: str = Field("", description="Human-readable description")

    model_config = {"frozen": True}

    @field_validator("degrees")
    @classmethod
    def validate_degrees(cls, v: list[str]) -> list[str]:
        """Ensure every interval symbol parses."""
        return _check_symbols(v)

    def build(self) -> KeyType:
        """
        Build the key type.

        Raises:
            ValueError: If an interval reaches an octave
        """
        return KeyType(tuple(Interval.parse(symbol) for symbol in self.degrees), self.name)


class CatalogFile(BaseModel):
    """Contents of one catalog YAML file."""

    chord_types: list[ChordTypeDefinition] = Field(default_factory=list)
    key_types: list[KeyTypeDefinition] = Field(default_factory=list)

    model_config = {"frozen": True}
