from __future__ import annotations

from .helpers import get_field_value
from .layout import Structure

__all__ = [ 'Value', 'Composite' ]


class Value:
    """An integer sample interpreted through a Structure.

    The structure is shared, not copied. Bits of the sample outside the
    structure's span are never addressed, and the sample width is not
    checked against structure.size().
    """

    __slots__ = ('_data', '_structure')

    def __init__(self, data: int, structure: Structure) -> None:
        object.__setattr__(self, '_data', data)
        object.__setattr__(self, '_structure', structure)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @property
    def data(self) -> int:
        return self._data

    @property
    def structure(self) -> Structure:
        return self._structure

    def get_integer(self, name: str) -> int | None:
        """Extract the named field as an unsigned integer, or None if unknown."""
        rng = self._structure.get_range(name)
        if rng is None:
            return None

        high, low = rng
        return get_field_value(self._data, high, low)

    def get_bool(self, name: str) -> bool | None:
        """Extract the named field as a boolean.

        Only an extracted value of exactly 1 is True. A multi-bit field
        holding e.g. 3 reads as False.
        """
        v = self.get_integer(name)
        if v is None:
            return None
        return v == 1

    def get_label(self, name: str) -> str | None:
        """Get the enumeration label of the named field's current value."""
        f = self._structure.get_field(name)
        if f is None:
            return None
        return f.label(self.get_integer(name))

    def as_dict(self) -> dict[str, int]:
        fields = {}
        for name in self._structure:
            if name not in fields:
                fields[name] = self.get_integer(name)
        return fields

    def __int__(self) -> int:
        return self._data

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self._data == other._data and self._structure is other._structure

    def __hash__(self):
        return hash((self._data, id(self._structure)))

    def __str__(self) -> str:
        return '{:#x}'.format(self._data)

    def __repr__(self) -> str:
        return f'Value({self._data:#x}, {self._structure.name!r})'


Composite = Value
