from __future__ import annotations

import logging
from dataclasses import dataclass, field as dc_field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from .enums import FieldKind

__all__ = [
    'BitterError', 'StructureValidationError', 'Field', 'Structure',
    'reserved', 'boolean', 'integer', 'enumeration',
]

logger = logging.getLogger(__name__)


class BitterError(ValueError):
    """Base class for bitter errors."""
    pass


class StructureValidationError(BitterError):
    """Raised when a structure definition is invalid."""
    pass


@dataclass(frozen=True)
class Field:
    """Description of one bit range in a structure.

    Fields are immutable. Use the module level constructors (reserved(),
    boolean(), integer(), enumeration()) instead of instantiating directly.
    """
    kind: FieldKind
    name: str | None
    width: int
    mapping: Mapping[int, str] | None = dc_field(default=None, hash=False)

    def size(self) -> int:
        """Get the size in bits."""
        if self.kind == FieldKind.Boolean:
            return 1
        return self.width

    def get_name(self) -> str | None:
        """Get the field name, or None for reserved fields."""
        if self.kind == FieldKind.Reserved:
            return None
        return self.name

    def label(self, raw: int) -> str | None:
        """Get the enumeration label for a raw value, or None if unmapped."""
        if self.kind != FieldKind.Enum or self.mapping is None:
            return None
        return self.mapping.get(raw)

    def __repr__(self) -> str:
        if self.kind == FieldKind.Reserved:
            return f'reserved({self.width})'
        if self.kind == FieldKind.Boolean:
            return f'boolean({self.name!r})'
        if self.kind == FieldKind.Integer:
            return f'integer({self.name!r}, {self.width})'
        return f'enumeration({self.name!r}, {self.width}, {dict(self.mapping or {})!r})'


def reserved(width: int) -> Field:
    return Field(FieldKind.Reserved, None, width)


def boolean(name: str) -> Field:
    return Field(FieldKind.Boolean, name, 1)


def integer(name: str, width: int) -> Field:
    return Field(FieldKind.Integer, name, width)


def enumeration(name: str, width: int, mapping: Mapping[int, str]) -> Field:
    return Field(FieldKind.Enum, name, width, MappingProxyType(dict(mapping)))


class Structure:
    """An ordered collection of fields describing one register layout.

    The first field is the most significant one, the last field sits at
    bit offset 0. Structures are shared by reference between values and
    must not be appended to while values depend on them.
    """

    def __init__(self, name: str, fields: Iterable[Field] = (), strict: bool = False) -> None:
        self.name = name
        self.fields: list[Field] = list(fields)
        self.strict = strict

        if strict:
            self.validate()

    def append(self, field: Field) -> None:
        """Add a field as the new least significant element."""
        self.fields.append(field)
        logger.debug('%s: appended %r, size now %d', self.name, field, self.size())

        if self.strict:
            self.validate()

    def size(self) -> int:
        """Get the size of all the fields combined.

        This is distinct from the width of any integer sample the structure
        is later used with.
        """
        return sum(f.size() for f in self.fields)

    def get_field(self, name: str) -> Field | None:
        for f in self.fields:
            if f.get_name() is not None and f.get_name() == name:
                return f
        return None

    def ranges(self) -> list[tuple[Field, int, int]]:
        """Get (field, high, low) for every field, in declared order."""
        result = []
        low = 0
        for f in reversed(self.fields):
            result.append((f, low + f.size() - 1, low))
            low += f.size()
        result.reverse()
        return result

    def get_range(self, name: str) -> tuple[int, int] | None:
        """Get the inclusive (high, low) bit range of the named field.

        Bit 0 is the least significant bit of the whole structure. If
        several fields share the name, the first declared one is used.
        """
        for f, high, low in self.ranges():
            if f.get_name() is not None and f.get_name() == name:
                return high, low
        return None

    def validate(self) -> None:
        """Check the field list and raise StructureValidationError on problems."""
        seen: set[str] = set()

        for f in self.fields:
            name = f.get_name()

            if not isinstance(f.width, int) or f.width < 0:
                raise StructureValidationError(
                    f"Structure '{self.name}': field {f!r} has invalid width {f.width!r}")

            if f.kind == FieldKind.Boolean and f.width != 1:
                raise StructureValidationError(
                    f"Structure '{self.name}': boolean field '{name}' must be 1 bit wide, got {f.width}")

            if f.kind == FieldKind.Enum:
                for raw in (f.mapping or {}):
                    if raw < 0 or raw >> f.width:
                        raise StructureValidationError(
                            f"Structure '{self.name}': enumeration '{name}' value {raw} "
                            f"does not fit in {f.width} bits")

            if name is None:
                continue

            if name in seen:
                raise StructureValidationError(f"Structure '{self.name}': duplicate field name '{name}'")
            seen.add(name)

        logger.debug('%s: validated %d fields', self.name, len(self.fields))

    def __iter__(self) -> Iterator[str]:
        """Iterate over the names of the named fields, most significant first."""
        for f in self.fields:
            name = f.get_name()
            if name is not None:
                yield name

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get_field(name) is not None

    def __repr__(self) -> str:
        return f'Structure({self.name!r}, {self.fields!r})'
