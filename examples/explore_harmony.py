#!/usr/bin/env python3
"""
Example: Spelled keys, chords and scales.

This walks through the core value types: transposing with correct
spelling, building chords and their inversions, generating scales,
and loading modes from the preset catalog.

Usage:
    python examples/explore_harmony.py
"""

from chuk_music_theory.catalog import CatalogLoader
from chuk_music_theory.core import (
    Chord,
    ChordType,
    ChordVoicing,
    Key,
    Pitch,
    PitchClass,
    ScaleDegree,
    SimpleInterval,
)
from chuk_music_theory.text import PitchFormats


def main() -> None:
    """Demonstrate the music theory core."""
    print("CHUK Music Theory Demo")
    print("=" * 40)
    print()

    # Spelling follows the interval, not the nearest key on a keyboard
    c4 = Pitch.parse("C4")
    print("Transposing C4:")
    for interval in (SimpleInterval.AUGMENTED_SECOND, SimpleInterval.MINOR_THIRD):
        print(f"  + {interval.long_name}: {c4.transpose_up(interval)}")
    print()

    # Diatonic triads of a key
    key = Key.major(PitchClass.E_FLAT)
    print(f"Triads in {key}:")
    triad_types = [
        ChordType.MAJOR_TRIAD,
        ChordType.MINOR_TRIAD,
        ChordType.MINOR_TRIAD,
        ChordType.MAJOR_TRIAD,
        ChordType.MAJOR_TRIAD,
        ChordType.MINOR_TRIAD,
        ChordType.DIMINISHED_TRIAD,
    ]
    for degree, chord_type in enumerate(triad_types, start=1):
        chord = Chord.of_root(key.degree(degree), chord_type)
        notes = " ".join(str(note) for note in chord)
        print(f"  {ScaleDegree(degree)!s:>4}: {chord!s:<6} {notes}")
    print()

    # Inversions of a voiced chord
    voicing = ChordVoicing.of_root(Pitch.parse("G3"), ChordType.DOMINANT_7)
    print(f"Inversions of {voicing.root.pitch_class}{voicing.type.symbol}:")
    for n in range(voicing.size):
        inverted = voicing.invert(n)
        print(f"  {n}: {inverted}  ({inverted.type.print_structure()})")
    print()

    # Scales in Helmholtz notation
    print(f"{key} from Bb3 to G5:")
    scale = key.scale(Pitch.parse("Bb3"), Pitch.parse("G5"))
    print("  " + " ".join(PitchFormats.HELMHOLTZ_B_UNICODE.format(p) for p in scale))
    print()

    # Modes from the catalog
    loader = CatalogLoader.from_env()
    print("Modes on D:")
    for name in ("dorian", "phrygian", "lydian", "mixolydian"):
        mode = loader.get_key(f"D_{name}")
        if mode is None:
            print(f"  {name}: not in catalog")
            continue
        print(f"  {name:<10} " + " ".join(str(pc) for pc in mode.degrees))


if __name__ == "__main__":
    main()
