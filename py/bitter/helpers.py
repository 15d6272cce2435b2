from __future__ import annotations

def mask(width: int) -> int:
    return (1 << width) - 1

def get_field_value(data: int, high: int, low: int) -> int:
    return (data >> low) & mask(high - low + 1)
