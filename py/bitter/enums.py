from __future__ import annotations

from enum import Enum

__all__ = [ 'FieldKind', ]


class FieldKind(Enum):
    Reserved = 0
    Boolean = 1
    Integer = 2
    Enum = 3
