"""Command-line interface for bitter-tui."""

from __future__ import annotations

import argparse
import logging
import sys

from bitter.layout import Structure
from bitter.log import setup_logging
from bitter.parse import load_csv, parse_layout
from bitter.value import Value

from .dialogs._helpers import parse_int
from .types import ValueFormat, field_display_name, field_value, format_value

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='bitter-tui',
        description='Interactive bitfield inspector',
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('-l', '--layout', metavar='LAYOUT',
                        help='Layout string, most significant field first (e.g. "mode:2,_:1,ready:bool")')
    source.add_argument('-c', '--csv', metavar='FILE', help='Layout CSV file')

    parser.add_argument('-n', '--name', default='layout', help='Structure name for --layout (default: layout)')
    parser.add_argument('--strict', action='store_true',
                        help='Reject duplicate names and enumeration values wider than their field')
    parser.add_argument('-f', '--format', choices=[f.value for f in ValueFormat], default='hex',
                        help='Value format for --dump (default: hex)')
    parser.add_argument('--dump', action='store_true', help='Print the decoded fields and exit')
    parser.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    parser.add_argument('value', nargs='?', help='Integer sample (0x.., 0b.., 0o.. or decimal)')

    return parser.parse_args(argv)


def load_structure(args: argparse.Namespace) -> Structure:
    if args.csv:
        return load_csv(args.csv, strict=args.strict)
    return parse_layout(args.layout, name=args.name, strict=args.strict)


def format_fields(value: Value, fmt: ValueFormat = ValueFormat.HEX) -> list[str]:
    """Plain text lines describing every field of a decoded value."""
    structure = value.structure
    ranges = structure.ranges()

    lines = [f'{structure.name} = {format_value(value.data, fmt, structure.size())}']

    if not ranges:
        return lines

    name_w = max(len(field_display_name(f)) for f, _, _ in ranges)
    bits_w = max(len(f'{h}:{l}') for _, h, l in ranges)

    for field, high, low in ranges:
        fv = field_value(value, high, low)
        line = f'  {field_display_name(field):<{name_w}}  {f"{high}:{low}":>{bits_w}}  {format_value(fv, fmt, field.size())}'
        text = field.label(fv)
        if text is not None:
            line += f' ({text})'
        lines.append(line)

    return lines


def main(argv: list[str] | None = None):
    args = parse_args(argv)

    setup_logging(args.log_level)

    try:
        structure = load_structure(args)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    data = None
    if args.value is not None:
        try:
            data = parse_int(args.value)
        except ValueError as e:
            print(f'Error: invalid value: {e}', file=sys.stderr)
            sys.exit(1)
        if data < 0:
            print(f'Error: value must be non-negative: {args.value!r}', file=sys.stderr)
            sys.exit(1)

    logger.debug('structure %s: %d bits', structure.name, structure.size())

    if args.dump:
        if data is None:
            print('Error: --dump needs a value', file=sys.stderr)
            sys.exit(1)
        for line in format_fields(Value(data, structure), ValueFormat(args.format)):
            print(line)
        return

    from .app import BitterTuiApp

    app = BitterTuiApp(structure, data)
    app.run()
