"""Conversion between explicit (name, high, low) ranges and Structures."""

from __future__ import annotations

from typing import Sequence

from .layout import BitterError, Structure, boolean, integer, reserved


class RangeConversionError(BitterError):
    """Raised when field ranges cannot be turned into a structure."""
    pass


def structure_from_ranges(name: str, ranges: Sequence[tuple[str, int, int]],
                          size: int | None = None) -> Structure:
    """Build a Structure from (name, high, low) field ranges.

    Gaps between the ranges, and between the top range and 'size' if
    given, become reserved fields. Single-bit ranges become boolean
    fields, wider ones integer fields.
    """
    for fname, high, low in ranges:
        if low < 0 or high < low:
            raise RangeConversionError(f"Structure '{name}': invalid range for '{fname}' ({high}:{low})")

    field_ranges = sorted(ranges, key=lambda r: r[2], reverse=True)

    for (curr_name, curr_high, curr_low), (next_name, next_high, next_low) in zip(field_ranges, field_ranges[1:]):
        if next_high >= curr_low:
            raise RangeConversionError(
                f"Structure '{name}': overlapping fields '{curr_name}' ({curr_high}:{curr_low}) "
                f"and '{next_name}' ({next_high}:{next_low})"
            )

    if size is not None and size < 0:
        raise RangeConversionError(f"Structure '{name}': invalid size {size}")

    top = field_ranges[0][1] + 1 if field_ranges else 0
    if size is None:
        size = top
    elif size < top:
        raise RangeConversionError(
            f"Structure '{name}': field '{field_ranges[0][0]}' exceeds structure size ({size} bits)")

    structure = Structure(name)
    pos = size

    for fname, high, low in field_ranges:
        if high + 1 < pos:
            structure.append(reserved(pos - high - 1))

        width = high - low + 1
        structure.append(boolean(fname) if width == 1 else integer(fname, width))
        pos = low

    if pos > 0:
        structure.append(reserved(pos))

    return structure


def structure_to_ranges(structure: Structure) -> list[tuple[str, int, int]]:
    """Get (name, high, low) for each named field, most significant first."""
    return [(f.get_name(), high, low) for f, high, low in structure.ranges() if f.get_name() is not None]
