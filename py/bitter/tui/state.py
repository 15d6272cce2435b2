"""Runtime state for bitter-tui."""

from __future__ import annotations

from bitter.layout import Structure
from bitter.value import Value

from .types import ValueFormat


class AppState:
    """Application-level state."""

    def __init__(self, structure: Structure, data: int | None = None) -> None:
        self.structure = structure
        self.value: Value | None = None
        self.value_format: ValueFormat = ValueFormat.HEX

        if data is not None:
            self.set_sample(data)

    def set_sample(self, data: int) -> None:
        self.value = Value(data, self.structure)
