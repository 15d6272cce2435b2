"""Modal dialogs for bitter-tui."""

from .sample import SampleDialog

__all__ = [
    'SampleDialog',
]
