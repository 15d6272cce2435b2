"""Parsing of textual layout descriptions into Structures.

Two formats are supported. A layout string lists fields most significant
first, separated by commas:

    mode:2{0=idle|1=run|2=halt},_:3,count:10,ready:bool

A layout CSV file holds the structure name on its first row, followed by
one row per field:

    STATUS
    mode,2,0=idle,1=run,2=halt
    ,3
    count,10
    ready,bool
"""

from __future__ import annotations

import csv
import logging
import re
from typing import Sequence

from .layout import BitterError, Field, Structure, boolean, enumeration, integer, reserved

__all__ = [ 'LayoutParseError', 'parse_field', 'parse_layout', 'load_csv' ]

logger = logging.getLogger(__name__)

RESERVED_NAMES = ('', '_')

_ITEM_RE = re.compile(r'^\s*(?P<name>[^:{}\s]*)\s*:\s*(?P<width>\w+)\s*(?:\{(?P<labels>[^}]*)\})?\s*$')


class LayoutParseError(BitterError):
    """Raised when a layout description cannot be parsed."""
    pass


def _parse_labels(items: Sequence[str], where: str) -> dict[int, str]:
    mapping = {}
    for item in items:
        item = item.strip()
        if not item:
            continue
        raw, sep, label = item.partition('=')
        if not sep:
            raise LayoutParseError(f'{where}: enumeration entry {item!r} is not of the form value=label')
        try:
            mapping[int(raw.strip(), 0)] = label.strip()
        except ValueError:
            raise LayoutParseError(f'{where}: invalid enumeration value {raw.strip()!r}') from None
    return mapping


def parse_field(name: str, width: str, labels: Sequence[str] = (), where: str = 'layout') -> Field:
    """Build a Field from its textual parts.

    An empty name or '_' makes a reserved field, width 'bool' a boolean
    field, and any labels an enumeration.
    """
    name = name.strip()
    width = width.strip()

    if width.lower() == 'bool':
        if name in RESERVED_NAMES:
            raise LayoutParseError(f'{where}: reserved field cannot be boolean')
        if labels:
            raise LayoutParseError(f"{where}: boolean field '{name}' cannot have labels")
        return boolean(name)

    try:
        nbits = int(width, 0)
    except ValueError:
        raise LayoutParseError(f'{where}: invalid width {width!r}') from None

    if nbits < 0:
        raise LayoutParseError(f'{where}: width must be non-negative, got {nbits}')

    if name in RESERVED_NAMES:
        if labels:
            raise LayoutParseError(f'{where}: reserved field cannot have labels')
        return reserved(nbits)

    if labels:
        return enumeration(name, nbits, _parse_labels(labels, where))

    return integer(name, nbits)


def parse_layout(text: str, name: str = 'layout', strict: bool = False) -> Structure:
    structure = Structure(name, strict=strict)

    for idx, item in enumerate(text.split(',')):
        if not item.strip():
            continue

        m = _ITEM_RE.match(item)
        if not m:
            raise LayoutParseError(f'{name}: item {idx}: cannot parse {item.strip()!r}')

        labels = m.group('labels')
        structure.append(parse_field(m.group('name'), m.group('width'),
                                     labels.split('|') if labels is not None else (),
                                     where=f'{name}: item {idx}'))

    logger.debug('parsed layout %s: %d fields, %d bits', name, len(structure.fields), structure.size())

    return structure


def load_csv(path: str, strict: bool = False) -> Structure:
    structure = None

    with open(path, newline='', encoding='utf-8') as csvfile:
        reader = csv.reader(csvfile, delimiter=',')
        for row in reader:
            if not row or not ''.join(row).strip() or row[0].lstrip().startswith('#'):
                continue

            if structure is None:
                structure = Structure(row[0].strip(), strict=strict)
                continue

            where = f'{path}:{reader.line_num}'
            if len(row) < 2:
                raise LayoutParseError(f'{where}: expected name,width[,value=label...]')

            labels = [item for item in row[2:] if item.strip()]
            structure.append(parse_field(row[0], row[1], labels, where=where))

    if structure is None:
        raise LayoutParseError(f'{path}: no structure name found')

    logger.debug('loaded %s from %s: %d fields', structure.name, path, len(structure.fields))

    return structure
