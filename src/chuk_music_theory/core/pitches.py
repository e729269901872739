"""
Range walking - every pitch of a set of pitch classes between two pitches.

This is how scales are generated: Key.scale() passes its pitch classes
here along with the two endpoints.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from chuk_music_theory.constants import DEGREES_PER_OCTAVE, SEMITONES_PER_OCTAVE
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.pitch_class import PitchClass

logger = logging.getLogger(__name__)


def _cyclic_key(pitch_class: PitchClass) -> tuple[int, int]:
    """
    Position of a class within the octave it sounds in.

    B# and Bx sort at the bottom of the octave next to C and C#, and Cb
    sorts at the top next to B. Ties go to the lower letter, as in Pitch
    order.
    """
    letter = pitch_class.base.value - DEGREES_PER_OCTAVE * pitch_class.relative_octave
    return (pitch_class.steps_above_reference % SEMITONES_PER_OCTAVE, letter)


def all_between(start: Pitch, end: Pitch, pitch_classes: Iterable[PitchClass]) -> list[Pitch]:
    """
    List all pitches of the given classes from start to end, inclusive.

    If start is above end, the list is descending. Endpoints are included
    only when their class is in the set; they are never rounded to a
    neighbouring pitch. The set is spelling-sensitive: F# does not let
    Gb through.

    Descending output is exactly the reverse of the ascending output for
    the swapped endpoints.

    Args:
        start: First pitch of the range
        end: Last pitch of the range
        pitch_classes: Allowed pitch classes

    Returns:
        Pitches in walking order
    """
    pattern = sorted(set(pitch_classes), key=_cyclic_key)
    if not pattern:
        logger.debug("Empty pitch class set for range %s-%s", start, end)
        return []

    if start == end:
        return [start] if start.pitch_class in pattern else []
    if start > end:
        return list(reversed(_ascending(end, start, pattern)))
    return _ascending(start, end, pattern)


def _ascending(start: Pitch, end: Pitch, pattern: list[PitchClass]) -> list[Pitch]:
    """Walk the sorted pattern cyclically upward from start to end."""
    if start.pitch_class in pattern:
        index = pattern.index(start.pitch_class)
    else:
        start_key = _cyclic_key(start.pitch_class)
        # First class above start's class, wrapping to the lowest
        index = next((i for i, pc in enumerate(pattern) if _cyclic_key(pc) > start_key), 0)

    result: list[Pitch] = []
    current = start
    while True:
        pitch_class = pattern[index]
        candidate = Pitch.nearest_above_or_enharmonic(pitch_class, current)
        # Every step after the first must move strictly up
        if candidate < current or (result and candidate == current):
            candidate = Pitch.nearest_above(pitch_class, current)
        if candidate > end:
            break
        result.append(candidate)
        current = candidate
        index = (index + 1) % len(pattern)
    return result
