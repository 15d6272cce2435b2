"""Right-pane detail/display widgets for bitter-tui."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from bitter.layout import Structure

from .state import AppState
from .types import FIELD_COLORS, FieldNodeData, ValueFormat, field_display_name, field_value, format_value


def render_bit_diagram(structure: Structure, data: int | None, highlight: int | None = None) -> list[str]:
    """Render the structure bits, 16 per row, MSB first.

    'highlight' is the index of a field in structure.fields; all other
    fields are dimmed when it is given. Reserved fields are always dim.
    """
    total_bits = structure.size()

    # bit_index -> field index
    field_map: dict[int, int] = {}
    for idx, (_field, high, low) in enumerate(structure.ranges()):
        for bit in range(low, high + 1):
            field_map[bit] = idx

    def style(idx: int) -> str:
        field = structure.fields[idx]
        if field.get_name() is None or (highlight is not None and idx != highlight):
            return 'dim'
        return FIELD_COLORS[idx % len(FIELD_COLORS)]

    lines = []
    bits_per_row = 16
    for row_start_bit in range(total_bits - 1, -1, -bits_per_row):
        row_end_bit = max(row_start_bit - bits_per_row + 1, 0)

        hdr = ''
        for bit in range(row_start_bit, row_end_bit - 1, -1):
            hdr += f'{bit:>4}'
        lines.append(f'[dim]{hdr}[/dim]')

        vals = ''
        for bit in range(row_start_bit, row_end_bit - 1, -1):
            bv = (data >> bit) & 1 if data is not None else '-'
            s = style(field_map[bit])
            vals += f'[{s}]{bv:>4}[/{s}]'
        lines.append(vals)

        labels = ''
        bit = row_start_bit
        while bit >= row_end_bit:
            idx = field_map[bit]
            span_low = bit
            while span_low - 1 >= row_end_bit and field_map[span_low - 1] == idx:
                span_low -= 1
            char_width = (bit - span_low + 1) * 4
            name = structure.fields[idx].get_name() or '-'
            if len(name) > char_width:
                name = name[: char_width - 1] + '~'
            s = style(idx)
            labels += f'[{s}]{name:^{char_width}}[/{s}]'
            bit = span_low - 1
        lines.append(labels)
        lines.append('')

    return lines


class BitDiagram(Static):
    """Renders a bit diagram for the whole structure."""

    def __init__(self, **kwargs) -> None:
        super().__init__('', **kwargs)

    def set_structure(self, state: AppState) -> None:
        structure = state.structure
        value = state.value

        lines = [f'[bold]{structure.name}[/bold]  ({structure.size()} bits)']
        if value is None:
            lines.append('[dim]No sample entered yet[/dim]')
        else:
            lines.append(f'Sample: {format_value(value.data, ValueFormat.HEX, structure.size())}')
        lines.append('')

        lines += render_bit_diagram(structure, value.data if value is not None else None)

        self.update('\n'.join(lines))


class FieldTable(Static):
    """Renders the field table for the structure."""

    def __init__(self) -> None:
        super().__init__('', id='field-table')

    def set_structure(self, state: AppState) -> None:
        structure = state.structure

        if not structure.fields:
            self.update('[dim]No fields defined[/dim]')
            return

        ranges = structure.ranges()

        name_w = max(len('Name'), *(len(field_display_name(f)) for f, _, _ in ranges))
        bits_w = max(len('Bits'), *(len(f'{h}:{l}') for _, h, l in ranges))

        hdr = f'{"Name":<{name_w}}  {"Bits":>{bits_w}}  Value'
        lines = [f'[bold]{hdr}[/bold]', '─' * len(hdr)]

        for idx, (field, high, low) in enumerate(ranges):
            bits_str = f'{high}:{low}'
            if state.value is not None:
                fv = field_value(state.value, high, low)
                val_str = format_value(fv, state.value_format, field.size())
                text = field.label(fv)
                if text is not None:
                    val_str += f' ({text})'
            else:
                val_str = '-'
            name = field_display_name(field)
            color = 'dim' if field.get_name() is None else FIELD_COLORS[idx % len(FIELD_COLORS)]
            lines.append(
                f'[{color}]{name:<{name_w}}[/{color}]  {bits_str:>{bits_w}}  {val_str}'
            )

        self.update('\n'.join(lines))


class FieldDetailWidget(Static):
    """Detail view for a selected field: highlighted bit diagram + multi-format value."""

    def __init__(self) -> None:
        super().__init__('', id='field-detail')

    def set_field(self, state: AppState, data: FieldNodeData) -> None:
        structure = state.structure
        value = state.value
        field, high, low = data.field, data.high, data.low

        lines = [
            f'[bold]{field_display_name(field)}[/bold] [{high}:{low}]  in {structure.name}',
            f'Kind: {field.kind.name}, {field.size()} bit{"s" if field.size() != 1 else ""}',
        ]
        if value is None:
            lines.append('[dim]No sample entered yet[/dim]')
        lines.append('')

        lines += render_bit_diagram(structure, value.data if value is not None else None, data.index)

        lines.append('─' * 40)
        if value is not None:
            fv = field_value(value, high, low)
            lines.append(f'Hex: {format_value(fv, ValueFormat.HEX, field.size())}')
            lines.append(f'Dec: {format_value(fv, ValueFormat.DEC, field.size())}')
            lines.append(f'Bin: {format_value(fv, ValueFormat.BIN, field.size())}')
            text = field.label(fv)
            if text is not None:
                lines.append(f'Label: {text}')
        else:
            lines.append('[dim]No sample entered yet[/dim]')

        if field.mapping:
            lines.append('')
            lines.append('[bold]Labels[/bold]')
            for raw, text in sorted(field.mapping.items()):
                lines.append(f'  {raw:>4}  {text}')

        self.update('\n'.join(lines))


class DetailPanel(VerticalScroll):
    """Right pane: switches between structure and field detail views."""

    def compose(self) -> ComposeResult:
        yield BitDiagram(id='bit-diagram')
        yield FieldTable()
        yield FieldDetailWidget()

    def on_mount(self) -> None:
        self.query_one(FieldDetailWidget).display = False

    def set_structure(self, state: AppState) -> None:
        self.query_one(BitDiagram).display = True
        self.query_one(FieldTable).display = True
        self.query_one(FieldDetailWidget).display = False
        self.query_one(BitDiagram).set_structure(state)
        self.query_one(FieldTable).set_structure(state)

    def set_field(self, state: AppState, data: FieldNodeData) -> None:
        self.query_one(BitDiagram).display = False
        self.query_one(FieldTable).display = False
        self.query_one(FieldDetailWidget).display = True
        self.query_one(FieldDetailWidget).set_field(state, data)
