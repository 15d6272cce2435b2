#!/usr/bin/env python3

import os
import tempfile
import unittest

import bitter as bt
from bitter.parse import LayoutParseError, load_csv, parse_field, parse_layout

STATUS_LAYOUT = 'mode:2{0=idle|1=run|2=halt},_:3,count:10,ready:bool'

STATUS_FIELDS = [
    bt.enumeration('mode', 2, {0: 'idle', 1: 'run', 2: 'halt'}),
    bt.reserved(3),
    bt.integer('count', 10),
    bt.boolean('ready'),
]


class ParseFieldTests(unittest.TestCase):
    def test_kinds(self):
        self.assertEqual(parse_field('a', '4'), bt.integer('a', 4))
        self.assertEqual(parse_field('a', '0x10'), bt.integer('a', 16))
        self.assertEqual(parse_field('a', 'bool'), bt.boolean('a'))
        self.assertEqual(parse_field('', '3'), bt.reserved(3))
        self.assertEqual(parse_field('_', '3'), bt.reserved(3))
        self.assertEqual(parse_field('m', '2', ['1=on', '0x0=off']), bt.enumeration('m', 2, {0: 'off', 1: 'on'}))

    def test_errors(self):
        with self.assertRaises(LayoutParseError):
            parse_field('a', 'x')
        with self.assertRaises(LayoutParseError):
            parse_field('a', '-1')
        with self.assertRaises(LayoutParseError):
            parse_field('_', 'bool')
        with self.assertRaises(LayoutParseError):
            parse_field('_', '2', ['1=on'])
        with self.assertRaises(LayoutParseError):
            parse_field('a', 'bool', ['1=on'])
        with self.assertRaises(LayoutParseError):
            parse_field('m', '2', ['on'])
        with self.assertRaises(LayoutParseError):
            parse_field('m', '2', ['x=on'])


class ParseLayoutTests(unittest.TestCase):
    def test_status(self):
        s = parse_layout(STATUS_LAYOUT, name='STATUS')
        self.assertEqual(s.name, 'STATUS')
        self.assertEqual(s.fields, STATUS_FIELDS)
        self.assertEqual(s.size(), 16)
        self.assertEqual(s.get_range('mode'), (15, 14))
        self.assertEqual(s.get_range('count'), (10, 1))
        self.assertEqual(s.get_range('ready'), (0, 0))

    def test_decode(self):
        s = parse_layout(STATUS_LAYOUT)
        v = bt.Value(0x400B, s)
        self.assertEqual(v.get_integer('mode'), 1)
        self.assertEqual(v.get_label('mode'), 'run')
        self.assertEqual(v.get_integer('count'), 5)
        self.assertIs(v.get_bool('ready'), True)

    def test_whitespace_and_empty_items(self):
        s = parse_layout(' a : 4 , , b:bool ,')
        self.assertEqual(s.fields, [bt.integer('a', 4), bt.boolean('b')])

    def test_empty(self):
        self.assertEqual(parse_layout('').size(), 0)

    def test_bad_item(self):
        with self.assertRaises(LayoutParseError):
            parse_layout('a:4,b')
        with self.assertRaises(LayoutParseError):
            parse_layout('a:4{0=x')

    def test_strict(self):
        parse_layout('a:4,a:2')
        with self.assertRaises(bt.StructureValidationError):
            parse_layout('a:4,a:2', strict=True)


class LoadCsvTests(unittest.TestCase):
    def _write(self, text):
        fd, path = tempfile.mkstemp(suffix='.csv')
        with os.fdopen(fd, 'w') as f:
            f.write(text)
        self.addCleanup(os.unlink, path)
        return path

    def test_load(self):
        path = self._write(
            '# status register\n'
            'STATUS\n'
            'mode,2,0=idle,1=run,2=halt\n'
            ',3\n'
            '\n'
            'count,10,\n'
            'ready,bool\n'
        )
        s = load_csv(path)
        self.assertEqual(s.name, 'STATUS')
        self.assertEqual(s.fields, STATUS_FIELDS)

    def test_no_name(self):
        path = self._write('# nothing here\n\n')
        with self.assertRaises(LayoutParseError):
            load_csv(path)

    def test_short_row(self):
        path = self._write('STATUS\ncount\n')
        with self.assertRaises(LayoutParseError) as cm:
            load_csv(path)
        self.assertIn(':2', str(cm.exception))

    def test_strict(self):
        path = self._write('STATUS\na,4\na,2\n')
        self.assertEqual(load_csv(path).size(), 6)
        with self.assertRaises(bt.StructureValidationError):
            load_csv(path, strict=True)


if __name__ == '__main__':
    unittest.main()
