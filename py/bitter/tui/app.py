"""bitter-tui: Interactive bitfield inspector."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header

from bitter.layout import Structure

from .detail import DetailPanel
from .dialogs import SampleDialog
from .state import AppState
from .tree import FieldTree
from .types import FieldNodeData, ValueFormat


class BitterTuiApp(App):
    """Interactive bitfield inspector."""

    CSS = """
    #main-container {
        height: 1fr;
    }
    #field-tree {
        width: 1fr;
        min-width: 30;
        max-width: 50%;
        border-right: solid $accent;
    }
    #detail-panel {
        width: 2fr;
    }
    #bit-diagram {
        padding: 1;
    }
    #field-table {
        padding: 1;
    }
    #field-detail {
        padding: 1;
    }
    """

    BINDINGS = [
        Binding('e', 'edit_sample', 'Sample', show=True),
        Binding('f', 'format', 'Format', show=True),
        Binding('q', 'quit', 'Quit', show=True),
    ]

    TITLE = 'bitter-tui'

    def __init__(self, structure: Structure, data: int | None = None) -> None:
        super().__init__()
        self.state = AppState(structure, data)
        self._selected: FieldNodeData | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id='main-container'):
            yield FieldTree()
            yield DetailPanel(id='detail-panel')
        yield Footer()

    def on_mount(self) -> None:
        self._update_subtitle()
        self.query_one(FieldTree).rebuild(self.state)
        self._refresh_detail()

    def _update_subtitle(self) -> None:
        structure = self.state.structure
        self.sub_title = f'{structure.name}  |  {len(structure.fields)} fields, {structure.size()} bits'

    def _refresh_detail(self) -> None:
        panel = self.query_one(DetailPanel)
        if self._selected is not None:
            panel.set_field(self.state, self._selected)
        else:
            panel.set_structure(self.state)

    # --- Event handlers ---

    def on_field_tree_field_selected(self, event: FieldTree.FieldSelected) -> None:
        self._selected = event.data
        self._refresh_detail()

    def on_field_tree_structure_selected(self, event: FieldTree.StructureSelected) -> None:
        self._selected = None
        self._refresh_detail()

    # --- Actions ---

    def action_edit_sample(self) -> None:
        current = self.state.value.data if self.state.value is not None else None
        self.push_screen(
            SampleDialog(self.state.structure.name, current, self.state.structure.size()),
            callback=self._on_sample_result,
        )

    def _on_sample_result(self, result: int | None) -> None:
        if result is None:
            return

        self.state.set_sample(result)
        self.query_one(FieldTree).update_values(self.state)
        self._refresh_detail()

    def action_format(self) -> None:
        if self.state.value_format == ValueFormat.HEX:
            self.state.value_format = ValueFormat.DEC
        elif self.state.value_format == ValueFormat.DEC:
            self.state.value_format = ValueFormat.BIN
        else:
            self.state.value_format = ValueFormat.HEX
        self.notify(f'Format: {self.state.value_format.value}')
        self.query_one(FieldTree).update_values(self.state)
        self._refresh_detail()
