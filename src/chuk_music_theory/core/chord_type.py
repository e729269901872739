"""
Chord types - interval structures with a root.

A chord type is the list of intervals between adjacent notes, from the
bass up, plus the index of the root note. A major triad in root position
is [M3, m3] with the root at index 0; its first inversion is [m3, P4]
with the root at index 2.

Invertible types are built as a closed group of all their inversions,
computed once. Each member shares the same sibling tuple, so invert(n)
is an index lookup.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import ClassVar

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.core.interval import Interval, SimpleInterval, sum_intervals
from chuk_music_theory.errors import InversionNotSupportedError


def _validate_structure(structure: Sequence[Interval]) -> tuple[Interval, ...]:
    if structure is None:
        raise TypeError(ErrorMessages.MISSING_VALUE.format(what="interval structure"))
    intervals = tuple(structure)
    if not intervals:
        raise ValueError(ErrorMessages.EMPTY_STRUCTURE)
    for interval in intervals:
        if not isinstance(interval, Interval):
            raise TypeError(ErrorMessages.NOT_AN_INTERVAL.format(value=interval))
    return intervals


# Only inversions_of() may construct SmallChordType
_INVERSIONS_TOKEN = object()


class ChordType:
    """
    An interval structure with a root index.

    Concrete types are SmallChordType (invertible) and
    NonInvertibleChordType. Check `invertible` before calling invert().

    Equality is by structure, root index and invertibility. Names and
    symbols are labels only.
    """

    __slots__ = ("_structure", "_root_index", "_inversion", "_name", "_symbol", "_span")
    _structure: tuple[Interval, ...]
    _root_index: int
    _inversion: int
    _name: str
    _symbol: str
    _span: Interval

    invertible: ClassVar[bool] = False

    # Preset chord types (defined after subclasses)
    MAJOR_TRIAD: ClassVar[ChordType]
    MAJOR_TRIAD_6: ClassVar[ChordType]
    MAJOR_TRIAD_64: ClassVar[ChordType]
    MINOR_TRIAD: ClassVar[ChordType]
    MINOR_TRIAD_6: ClassVar[ChordType]
    MINOR_TRIAD_64: ClassVar[ChordType]
    DIMINISHED_TRIAD: ClassVar[ChordType]
    DIMINISHED_TRIAD_6: ClassVar[ChordType]
    DIMINISHED_TRIAD_64: ClassVar[ChordType]
    AUGMENTED_TRIAD: ClassVar[ChordType]
    MAJOR_7: ClassVar[ChordType]
    DOMINANT_7: ClassVar[ChordType]
    MINOR_7: ClassVar[ChordType]
    MINOR_MAJOR_7: ClassVar[ChordType]
    HALF_DIMINISHED_7: ClassVar[ChordType]
    AUGMENTED_MAJOR_7: ClassVar[ChordType]
    DIMINISHED_7: ClassVar[ChordType]

    def __init__(
        self,
        structure: Sequence[Interval],
        root_index: int,
        inversion: int,
        name: str | None,
        symbol: str | None,
    ) -> None:
        intervals = _validate_structure(structure)
        size = len(intervals) + 1
        if not 0 <= root_index < size:
            raise IndexError(ErrorMessages.INVALID_NOTE_INDEX.format(note=root_index, size=size))
        if not 0 <= inversion < size:
            raise IndexError(ErrorMessages.INVALID_INVERSION.format(n=inversion, size=size))
        object.__setattr__(self, "_structure", intervals)
        object.__setattr__(self, "_root_index", root_index)
        object.__setattr__(self, "_inversion", inversion)
        object.__setattr__(self, "_name", name or "")
        object.__setattr__(self, "_symbol", symbol or "")
        object.__setattr__(self, "_span", sum_intervals(intervals))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def structure(self) -> tuple[Interval, ...]:
        """Intervals between adjacent notes, from the bass up."""
        return self._structure

    @property
    def root_index(self) -> int:
        """Index of the root note, counted from the bass."""
        return self._root_index

    @property
    def size(self) -> int:
        """Number of notes."""
        return len(self._structure) + 1

    @property
    def span(self) -> Interval:
        """Interval between the lowest and highest note."""
        return self._span

    @property
    def inversion(self) -> int:
        """0 for root position, 1 for first inversion, and so on."""
        return self._inversion

    @property
    def name(self) -> str:
        return self._name

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def root_octave(self) -> int:
        """Octaves the root sits above the root-position bass."""
        return 0 if self._inversion == 0 else 1

    def height_above_bass(self, note: int) -> Interval:
        """
        Interval from the bass up to a note of the chord.

        Raises:
            IndexError: If the note index is out of range
        """
        if not 0 <= note < self.size:
            raise IndexError(ErrorMessages.INVALID_NOTE_INDEX.format(note=note, size=self.size))
        return sum_intervals(self._structure[:note])

    def invert(self, n: int) -> ChordType:
        """
        Get the n-th inversion of this chord type.

        Raises:
            InversionNotSupportedError: If the type has no inversions
        """
        raise InversionNotSupportedError(ErrorMessages.NOT_INVERTIBLE.format(name=self._name))

    def root_position(self) -> ChordType:
        return self

    def print_structure(self) -> str:
        """
        Render the structure with the root marked, e.g. 'O-M3-o-m3-o'.

        Each note is 'o', the root is 'O', and intervals sit between them.
        """
        parts = []
        for index, interval in enumerate(self._structure):
            parts.append("O" if index == self._root_index else "o")
            parts.append(f"-{interval}-")
        parts.append("O" if len(self._structure) == self._root_index else "o")
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChordType):
            return NotImplemented
        return (
            self._structure == other._structure
            and self._root_index == other._root_index
            and self.invertible == other.invertible
        )

    def __hash__(self) -> int:
        return hash((self._structure, self._root_index, self.invertible))

    def __str__(self) -> str:
        return self._name or self.print_structure()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.print_structure()}, {self._name!r})"


class SmallChordType(ChordType):
    """
    An invertible chord type spanning less than an octave.

    Build one with inversions_of(), which returns every inversion at once.
    """

    __slots__ = ("_siblings",)
    _siblings: tuple[SmallChordType, ...]

    invertible: ClassVar[bool] = True

    def __init__(
        self,
        structure: Sequence[Interval],
        root_index: int,
        inversion: int,
        name: str | None,
        symbol: str | None,
        *,
        _token: object = None,
    ) -> None:
        if _token is not _INVERSIONS_TOKEN:
            raise TypeError(ErrorMessages.USE_INVERSIONS_OF)
        super().__init__(structure, root_index, inversion, name, symbol)

    @classmethod
    def inversions_of(
        cls,
        structure: Sequence[Interval],
        name: str = "",
        symbol: str = "",
    ) -> tuple[SmallChordType, ...]:
        """
        Build all inversions of a root-position structure.

        The structure is closed into a full octave with its complement,
        then rotated once per note. Inversion i has its root at index
        (-i) mod size and is named "<name> (inv. i)".

        Args:
            structure: Root-position intervals between adjacent notes
            name: Chord type name, e.g. "major triad"
            symbol: Chord symbol suffix, e.g. "m7"

        Returns:
            Tuple of inversions, root position first

        Raises:
            ValueError: If the structure is empty or spans an octave or more
            TypeError: If the structure holds something other than intervals
        """
        intervals = _validate_structure(structure)
        span = sum_intervals(intervals)
        if span >= SimpleInterval.PERFECT_OCTAVE:
            raise ValueError(
                ErrorMessages.CHORD_TOO_WIDE.format(
                    structure=", ".join(str(i) for i in intervals), span=span
                )
            )
        cycle = [*intervals, span.octave_complement()]
        size = len(cycle)

        inversions = []
        for i in range(size):
            rotated = cycle[i:] + cycle[:i]
            inversion_name = name if i == 0 else f"{name} (inv. {i})"
            inversions.append(
                cls(rotated[:-1], (-i) % size, i, inversion_name, symbol, _token=_INVERSIONS_TOKEN)
            )

        siblings = tuple(inversions)
        for chord_type in siblings:
            object.__setattr__(chord_type, "_siblings", siblings)
        return siblings

    def invert(self, n: int) -> SmallChordType:
        """
        Get the n-th inversion; 0 is root position.

        Raises:
            IndexError: If n is not between 0 and size - 1
        """
        if not 0 <= n < len(self._siblings):
            raise IndexError(ErrorMessages.INVALID_INVERSION.format(n=n, size=self.size))
        return self._siblings[n]

    def root_position(self) -> SmallChordType:
        return self._siblings[0]

    def inversions(self) -> tuple[SmallChordType, ...]:
        """All inversions of this type, root position first."""
        return self._siblings


class NonInvertibleChordType(ChordType):
    """
    A chord type without inversions, always in root position.

    Symmetric chords (augmented triad, diminished seventh) use this:
    every inversion would respell the same sound with a different root.
    """

    __slots__ = ()

    def __init__(
        self,
        structure: Sequence[Interval],
        name: str | None = None,
        symbol: str | None = None,
    ) -> None:
        super().__init__(structure, 0, 0, name, symbol)


def _presets(structure: list[SimpleInterval], name: str, symbol: str) -> tuple[SmallChordType, ...]:
    return SmallChordType.inversions_of(structure, name, symbol)


_M3 = SimpleInterval.MAJOR_THIRD
_m3 = SimpleInterval.MINOR_THIRD

# Triads with their inversions
(
    ChordType.MAJOR_TRIAD,
    ChordType.MAJOR_TRIAD_6,
    ChordType.MAJOR_TRIAD_64,
) = _presets([_M3, _m3], "major triad", "")
(
    ChordType.MINOR_TRIAD,
    ChordType.MINOR_TRIAD_6,
    ChordType.MINOR_TRIAD_64,
) = _presets([_m3, _M3], "minor triad", "m")
(
    ChordType.DIMINISHED_TRIAD,
    ChordType.DIMINISHED_TRIAD_6,
    ChordType.DIMINISHED_TRIAD_64,
) = _presets([_m3, _m3], "diminished triad", "m5-")

# Seventh chords in root position
ChordType.MAJOR_7 = _presets([_M3, _m3, _M3], "major 7th", "maj7")[0]
ChordType.DOMINANT_7 = _presets([_M3, _m3, _m3], "dominant 7th", "7")[0]
ChordType.MINOR_7 = _presets([_m3, _M3, _m3], "minor 7th", "m7")[0]
ChordType.MINOR_MAJOR_7 = _presets([_m3, _M3, _M3], "minor major 7th", "m maj7")[0]
ChordType.HALF_DIMINISHED_7 = _presets([_m3, _m3, _M3], "half-diminished 7th", "7/5-")[0]
ChordType.AUGMENTED_MAJOR_7 = _presets([_M3, _M3, _m3], "augmented major 7th", "7/5+")[0]

# Symmetric chords
ChordType.AUGMENTED_TRIAD = NonInvertibleChordType([_M3, _M3], "augmented triad", "5+")
ChordType.DIMINISHED_7 = NonInvertibleChordType([_m3, _m3, _m3], "diminished 7th", "dim7")
