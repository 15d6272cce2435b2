"""SampleDialog for bitter-tui."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from ._helpers import parse_int


class SampleDialog(ModalScreen[int | None]):
    """Dialog to enter a new integer sample for the structure.

    Returns the sample or None if cancelled.
    """

    CSS = """
    SampleDialog {
        align: center middle;
    }
    #sample-container {
        width: 60;
        max-height: 80%;
        background: $surface;
        border: thick $accent;
        padding: 1 2;
    }
    #sample-container Label {
        margin-top: 1;
    }
    #sample-container .buttons {
        margin-top: 1;
        height: auto;
    }
    #sample-error {
        color: $error;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ('escape', 'cancel', 'Cancel'),
    ]

    def __init__(self, structure_name: str, current_value: int | None, width_bits: int) -> None:
        super().__init__()
        self._structure_name = structure_name
        self._current_value = current_value
        self._width_bits = width_bits

    def compose(self) -> ComposeResult:
        current_hex = ''
        if self._current_value is not None:
            nchars = (self._width_bits + 3) // 4
            current_hex = f'0x{self._current_value:0{nchars}X}'

        with Vertical(id='sample-container'):
            yield Label(f'[bold]Sample for {self._structure_name}[/bold]')
            if self._current_value is not None:
                yield Label(f'Current sample: {current_hex}')
            else:
                yield Label('[dim]No sample entered yet[/dim]')
            yield Label('New sample (0x.., 0b.., 0o.. or decimal)')
            yield Input(placeholder='0x0', id='sample-value', value=current_hex)
            yield Static('', id='sample-error')
            with Horizontal(classes='buttons'):
                yield Button('OK', variant='primary', id='ok')
                yield Button('Cancel', id='cancel')

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == 'cancel':
            self.dismiss(None)
        elif event.button.id == 'ok':
            self._submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _submit(self) -> None:
        error_widget = self.query_one('#sample-error', Static)
        try:
            value = parse_int(self.query_one('#sample-value', Input).value)
            if value < 0:
                raise ValueError('Sample must be non-negative')
            self.dismiss(value)
        except ValueError as e:
            error_widget.update(f'[red]{e}[/red]')
