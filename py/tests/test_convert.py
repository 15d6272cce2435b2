#!/usr/bin/env python3

import unittest

import bitter as bt
from bitter.convert import RangeConversionError, structure_from_ranges, structure_to_ranges


class StructureFromRangesTests(unittest.TestCase):
    def test_gaps_become_reserved(self):
        s = structure_from_ranges('CTRL', [
            ('ENABLE', 0, 0),
            ('MODE', 3, 1),
            ('ERROR', 19, 16),
        ], size=32)

        self.assertEqual(s.name, 'CTRL')
        self.assertEqual(s.fields, [
            bt.reserved(12),
            bt.integer('ERROR', 4),
            bt.reserved(12),
            bt.integer('MODE', 3),
            bt.boolean('ENABLE'),
        ])
        self.assertEqual(s.size(), 32)
        self.assertEqual(s.get_range('MODE'), (3, 1))
        self.assertEqual(s.get_range('ERROR'), (19, 16))

        v = bt.Value(0x000A_0005, s)
        self.assertEqual(v.get_integer('ERROR'), 0xA)
        self.assertEqual(v.get_integer('MODE'), 2)
        self.assertIs(v.get_bool('ENABLE'), True)

    def test_size_defaults_to_top_field(self):
        s = structure_from_ranges('R', [('A', 7, 4)])
        self.assertEqual(s.fields, [bt.integer('A', 4), bt.reserved(4)])

    def test_empty(self):
        self.assertEqual(structure_from_ranges('R', []).size(), 0)
        self.assertEqual(structure_from_ranges('R', [], size=8).fields, [bt.reserved(8)])

    def test_overlap(self):
        with self.assertRaises(RangeConversionError):
            structure_from_ranges('R', [('A', 7, 4), ('B', 5, 0)])

    def test_invalid_range(self):
        with self.assertRaises(RangeConversionError):
            structure_from_ranges('R', [('A', 2, 3)])
        with self.assertRaises(RangeConversionError):
            structure_from_ranges('R', [('A', 2, -1)])

    def test_exceeds_size(self):
        with self.assertRaises(RangeConversionError):
            structure_from_ranges('R', [('A', 7, 4)], size=4)

    def test_negative_size(self):
        with self.assertRaises(RangeConversionError):
            structure_from_ranges('R', [], size=-1)
        with self.assertRaises(RangeConversionError):
            structure_from_ranges('R', [('A', 0, 0)], size=-1)


class StructureToRangesTests(unittest.TestCase):
    def test_to_ranges(self):
        s = bt.Structure('reg', [bt.integer('lifetime', 4), bt.reserved(2), bt.boolean('active')])
        self.assertEqual(structure_to_ranges(s), [('lifetime', 6, 3), ('active', 0, 0)])

    def test_back_and_forth(self):
        ranges = [('ERROR', 19, 16), ('MODE', 3, 1), ('ENABLE', 0, 0)]
        self.assertEqual(structure_to_ranges(structure_from_ranges('CTRL', ranges, size=32)), ranges)


if __name__ == '__main__':
    unittest.main()
