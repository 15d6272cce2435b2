"""Leaf-level data types and formatting helpers for bitter-tui."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from bitter.helpers import get_field_value
from bitter.layout import Field
from bitter.value import Value


@dataclass
class FieldNodeData:
    index: int
    field: Field
    high: int
    low: int


class ValueFormat(enum.Enum):
    HEX = 'hex'
    DEC = 'dec'
    BIN = 'bin'


def format_value(value: int, fmt: ValueFormat, width_bits: int) -> str:
    if fmt == ValueFormat.HEX:
        nchars = (width_bits + 3) // 4
        return f'0x{value:0{nchars}X}'
    elif fmt == ValueFormat.DEC:
        return str(value)
    elif fmt == ValueFormat.BIN:
        return f'0b{value:0{width_bits}b}'
    return hex(value)


def field_value(value: Value, high: int, low: int) -> int:
    """Extract a field by its range, so duplicated names show their own bits."""
    return get_field_value(value.data, high, low)


def field_display_name(field: Field) -> str:
    return field.get_name() or '(reserved)'


# Field colors for bit diagram
FIELD_COLORS = [
    'cyan',
    'magenta',
    'green',
    'yellow',
    'blue',
    'red',
    'bright_cyan',
    'bright_magenta',
]
