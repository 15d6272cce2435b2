"""Left-pane field tree widget for bitter-tui."""

from __future__ import annotations

from textual.message import Message
from textual.widgets import Tree
from textual.widgets._tree import TreeNode

from .state import AppState
from .types import FieldNodeData, field_display_name, field_value, format_value


class FieldTree(Tree):
    """Left pane: structure root with one leaf per field, most significant first."""

    class FieldSelected(Message):
        def __init__(self, data: FieldNodeData) -> None:
            super().__init__()
            self.data = data

    class StructureSelected(Message):
        pass

    def __init__(self) -> None:
        super().__init__('Structure', id='field-tree')
        self._field_nodes: list[TreeNode] = []

    def _make_field_label(self, data: FieldNodeData, state: AppState) -> str:
        field = data.field
        label = f'{field_display_name(field)} [{data.high}:{data.low}]'
        if field.get_name() is None:
            label = f'[dim]{label}[/dim]'

        if state.value is not None:
            fv = field_value(state.value, data.high, data.low)
            label += f' = {format_value(fv, state.value_format, field.size())}'
            text = field.label(fv)
            if text is not None:
                label += f' ({text})'
        return label

    def _make_root_label(self, state: AppState) -> str:
        structure = state.structure
        label = f'{structure.name} ({structure.size()} bits)'
        if state.value is not None:
            label += f' = {format_value(state.value.data, state.value_format, structure.size())}'
        return label

    def rebuild(self, state: AppState) -> None:
        self.clear()
        self._field_nodes.clear()

        self.root.set_label(self._make_root_label(state))

        if not state.structure.fields:
            self.root.add_leaf('No fields defined')
            self.root.expand()
            return

        for idx, (field, high, low) in enumerate(state.structure.ranges()):
            data = FieldNodeData(idx, field, high, low)
            node = self.root.add_leaf(self._make_field_label(data, state), data=data)
            self._field_nodes.append(node)

        self.root.expand()

    def update_values(self, state: AppState) -> None:
        """Update root and field labels in-place for a new sample or format."""
        self.root.set_label(self._make_root_label(state))
        for node in self._field_nodes:
            node.set_label(self._make_field_label(node.data, state))

    def on_tree_node_highlighted(self, event: Tree.NodeHighlighted) -> None:
        data = event.node.data
        if isinstance(data, FieldNodeData):
            self.post_message(self.FieldSelected(data))
        else:
            self.post_message(self.StructureSelected())
