"""
Key primitives - ScaleDegree, KeyType, Key.

A key type is the set of intervals above the tonic (major: M2 M3 P4 P5
M6 M7). A key is a key type on a tonic pitch class, with every scale
degree spelled out.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.core.interval import Interval, SimpleInterval
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.pitch_class import PitchClass
from chuk_music_theory.core.pitches import all_between
from chuk_music_theory.errors import FormatError

_ROMAN_NUMERALS: list[str] = ["I", "II", "III", "IV", "V", "VI", "VII"]


@dataclass(frozen=True)
class ScaleDegree:
    """
    A scale degree with optional alteration.

    Degree is 1-7 (tonic to leading tone).
    Alteration is semitones: -1 = lowered, +1 = raised, 0 = diatonic.

    Examples:
        ScaleDegree.V = dominant
        ScaleDegree.VII_LOWERED = flat 7 (minor seventh in a major key)
        ScaleDegree.IV_RAISED = raised 4 (lydian)
    """

    degree: int  # 1-7
    alteration: int = 0

    I: ClassVar[ScaleDegree]  # noqa: E741
    I_LOWERED: ClassVar[ScaleDegree]
    I_RAISED: ClassVar[ScaleDegree]
    II: ClassVar[ScaleDegree]
    II_LOWERED: ClassVar[ScaleDegree]
    II_RAISED: ClassVar[ScaleDegree]
    III: ClassVar[ScaleDegree]
    III_LOWERED: ClassVar[ScaleDegree]
    III_RAISED: ClassVar[ScaleDegree]
    IV: ClassVar[ScaleDegree]
    IV_LOWERED: ClassVar[ScaleDegree]
    IV_RAISED: ClassVar[ScaleDegree]
    V: ClassVar[ScaleDegree]
    V_LOWERED: ClassVar[ScaleDegree]
    V_RAISED: ClassVar[ScaleDegree]
    VI: ClassVar[ScaleDegree]
    VI_LOWERED: ClassVar[ScaleDegree]
    VI_RAISED: ClassVar[ScaleDegree]
    VII: ClassVar[ScaleDegree]
    VII_LOWERED: ClassVar[ScaleDegree]
    VII_RAISED: ClassVar[ScaleDegree]

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= 7:
            raise ValueError(ErrorMessages.INVALID_DEGREE.format(degree=self.degree))

    def __str__(self) -> str:
        numeral = _ROMAN_NUMERALS[self.degree - 1]
        if self.alteration == 0:
            return numeral
        elif self.alteration == 1:
            return f"{numeral}+"
        elif self.alteration == -1:
            return f"{numeral}-"
        sign = "+" if self.alteration > 0 else "-"
        return f"{numeral}{sign}{abs(self.alteration)}"

    def __repr__(self) -> str:
        if self.alteration == 0:
            return f"ScaleDegree({self.degree})"
        return f"ScaleDegree({self.degree}, {self.alteration})"


for _index, _numeral in enumerate(_ROMAN_NUMERALS, start=1):
    setattr(ScaleDegree, _numeral, ScaleDegree(_index))
    setattr(ScaleDegree, f"{_numeral}_LOWERED", ScaleDegree(_index, -1))
    setattr(ScaleDegree, f"{_numeral}_RAISED", ScaleDegree(_index, 1))
del _index, _numeral

DIATONIC_DEGREES: tuple[ScaleDegree, ...] = tuple(ScaleDegree(d) for d in range(1, 8))
LOWERED_DEGREES: tuple[ScaleDegree, ...] = tuple(ScaleDegree(d, -1) for d in range(1, 8))
RAISED_DEGREES: tuple[ScaleDegree, ...] = tuple(ScaleDegree(d, 1) for d in range(1, 8))

CHROMATIC_DEGREES_ASC: tuple[ScaleDegree, ...] = (
    ScaleDegree.I,
    ScaleDegree.I_RAISED,
    ScaleDegree.II,
    ScaleDegree.II_RAISED,
    ScaleDegree.III,
    ScaleDegree.IV,
    ScaleDegree.IV_RAISED,
    ScaleDegree.V,
    ScaleDegree.V_RAISED,
    ScaleDegree.VI,
    ScaleDegree.VI_RAISED,
    ScaleDegree.VII,
)
CHROMATIC_DEGREES_DESC: tuple[ScaleDegree, ...] = (
    ScaleDegree.VII,
    ScaleDegree.VII_LOWERED,
    ScaleDegree.VI,
    ScaleDegree.VI_LOWERED,
    ScaleDegree.V,
    ScaleDegree.V_LOWERED,
    ScaleDegree.IV,
    ScaleDegree.III,
    ScaleDegree.III_LOWERED,
    ScaleDegree.II,
    ScaleDegree.II_LOWERED,
    ScaleDegree.I,
)


@dataclass(frozen=True)
class KeyType:
    """
    A scale defined by its intervals above the tonic.

    The tonic itself is implied. Intervals are kept sorted ascending
    and must all be narrower than a perfect octave.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""

    # Common key types (defined after class)
    MAJOR: ClassVar[KeyType]
    MINOR: ClassVar[KeyType]

    def __post_init__(self) -> None:
        for interval in self.intervals:
            if not isinstance(interval, Interval):
                raise TypeError(ErrorMessages.NOT_AN_INTERVAL.format(value=interval))
            if interval >= SimpleInterval.PERFECT_OCTAVE:
                raise ValueError(
                    ErrorMessages.INTERVAL_WIDER_THAN_OCTAVE.format(interval=interval)
                )
        object.__setattr__(self, "intervals", tuple(sorted(self.intervals)))

    @property
    def size(self) -> int:
        """Number of scale degrees, tonic included."""
        return len(self.intervals) + 1

    def degree(self, n: int) -> Interval:
        """
        Interval from the tonic to the n-th degree (1-based).

        degree(1) is always the unison.
        """
        if not 1 <= n <= self.size:
            raise IndexError(ErrorMessages.DEGREE_OUT_OF_RANGE.format(key=self, degree=n))
        if n == 1:
            return SimpleInterval.UNISON
        return self.intervals[n - 2]

    def on(self, tonic: PitchClass) -> Key:
        """Build the key of this type on a tonic."""
        return Key(tonic, self)

    def __str__(self) -> str:
        return self.name or " ".join(str(i) for i in self.intervals)

    def __repr__(self) -> str:
        if self.name:
            return f"KeyType.{self.name.upper().replace(' ', '_')}"
        return f"KeyType({self.intervals!r})"


_I = SimpleInterval
KeyType.MAJOR = KeyType((_I.M2, _I.M3, _I.P4, _I.P5, _I.M6, _I.M7), "major")
KeyType.MINOR = KeyType((_I.M2, _I.m3, _I.P4, _I.P5, _I.m6, _I.m7), "minor")

_KEY_TYPES: dict[str, KeyType] = {
    "major": KeyType.MAJOR,
    "minor": KeyType.MINOR,
    "natural_minor": KeyType.MINOR,
}


@dataclass(frozen=True)
class Key:
    """
    A key type on a tonic.

    Scale degrees are spelled when the key is built, by transposing
    the tonic up by each interval of the key type.

    Examples:
        Key.major(PitchClass.E).degrees  # E F# G# A B C# D#
        Key.parse("D_minor").degree(ScaleDegree.VII_RAISED)  # C#
    """

    tonic: PitchClass
    key_type: KeyType
    degrees: tuple[PitchClass, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.tonic, PitchClass):
            raise TypeError(ErrorMessages.MISSING_VALUE.format(what="tonic"))
        if not isinstance(self.key_type, KeyType):
            raise TypeError(ErrorMessages.MISSING_VALUE.format(what="key type"))
        degrees = (self.tonic,) + tuple(
            self.tonic.transpose_up(interval) for interval in self.key_type.intervals
        )
        object.__setattr__(self, "degrees", degrees)

    @classmethod
    def major(cls, tonic: PitchClass) -> Key:
        return cls(tonic, KeyType.MAJOR)

    @classmethod
    def minor(cls, tonic: PitchClass) -> Key:
        return cls(tonic, KeyType.MINOR)

    def pitch_classes(self) -> frozenset[PitchClass]:
        """The set of pitch classes in this key."""
        return frozenset(self.degrees)

    def degree(self, degree: int | ScaleDegree) -> PitchClass:
        """
        Resolve a scale degree to a pitch class.

        Altered degrees keep their letter: in C major, VII_LOWERED is Bb.

        Args:
            degree: 1-based degree number, or a ScaleDegree

        Returns:
            The resolved pitch class
        """
        if isinstance(degree, ScaleDegree):
            pitch_class = self.degree(degree.degree)
            if degree.alteration > 0:
                return pitch_class.transpose_up(Interval.of(0, degree.alteration))
            if degree.alteration < 0:
                return pitch_class.transpose_down(Interval.of(0, -degree.alteration))
            return pitch_class
        if not 1 <= degree <= len(self.degrees):
            raise IndexError(ErrorMessages.DEGREE_OUT_OF_RANGE.format(key=self, degree=degree))
        return self.degrees[degree - 1]

    def degree_of(self, pitch_class: PitchClass) -> int | None:
        """1-based degree number of a pitch class, or None if it's not in the key."""
        for index, degree in enumerate(self.degrees):
            if degree == pitch_class:
                return index + 1
        return None

    def pitch_to_degree(self, pitch_class: PitchClass) -> ScaleDegree | None:
        """
        Get the scale degree of a pitch class, if it's in the key.

        Spelling matters: in E major, G# is III but Ab is None. Keys with
        more than seven degrees have no ScaleDegree past VII; use
        degree_of() for those.
        """
        number = self.degree_of(pitch_class)
        if number is None or number > len(_ROMAN_NUMERALS):
            return None
        return ScaleDegree(number)

    def scale(self, start: Pitch, end: Pitch | None = None) -> list[Pitch]:
        """
        List the pitches of this key from start to end, inclusive.

        End defaults to one octave above start. If start is above end
        the scale descends.
        """
        if end is None:
            end = start.transpose_up(SimpleInterval.PERFECT_OCTAVE)
        return all_between(start, end, self.pitch_classes())

    def __contains__(self, pitch_class: object) -> bool:
        return pitch_class in self.degrees

    def __str__(self) -> str:
        return f"{self.tonic} {self.key_type}"

    def __repr__(self) -> str:
        return f"Key({self.tonic!r}, {self.key_type!r})"

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'D_minor', 'F#_major'.

        Args:
            name: Key name with underscore separator

        Returns:
            Parsed Key object

        Raises:
            FormatError: If the name is malformed
            ValueError: If the key type is unknown
        """
        parts = name.split("_")
        if len(parts) < 2:
            raise FormatError(ErrorMessages.INVALID_KEY.format(key=name))

        tonic = PitchClass.parse(parts[0])
        type_name = "_".join(parts[1:]).lower()

        if type_name not in _KEY_TYPES:
            raise ValueError(ErrorMessages.UNKNOWN_KEY_TYPE.format(name=type_name))

        return cls(tonic, _KEY_TYPES[type_name])
