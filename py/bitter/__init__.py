"""Reading bitfields whose layout is defined at run time."""

from .enums import FieldKind
from .layout import (
    BitterError,
    Field,
    Structure,
    StructureValidationError,
    boolean,
    enumeration,
    integer,
    reserved,
)
from .value import Composite, Value

__all__ = [
    'BitterError', 'Composite', 'Field', 'FieldKind', 'Structure',
    'StructureValidationError', 'Value',
    'boolean', 'enumeration', 'integer', 'reserved',
]
