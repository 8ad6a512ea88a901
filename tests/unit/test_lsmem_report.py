#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-2.0

import json
import unittest

import yaml

import _test_lsmem_common

_test_lsmem_common.add_lsmem_dir_to_syspath()

from lsmem import _lsmem_columns
from lsmem import _lsmem_report
from lsmem import _memblock
from lsmem import _memblock_merge

block_size = 0x8000000

ranges = [
        _memblock.MemoryBlock(0, _memblock.state_online, False, 0, count=4),
        _memblock.MemoryBlock(4, _memblock.state_offline, True, 1),
        ]

def default_rows(options):
    selection, err = _lsmem_columns.resolve([])
    return selection, list(_lsmem_report.report_rows(ranges, selection,
        options))

class TestLsmemReport(unittest.TestCase):
    def test_range_to_row(self):
        selection, err = _lsmem_columns.resolve(['RANGE', 'SIZE', 'STATE',
            'REMOVABLE', 'BLOCK', 'NODE'])
        options = _lsmem_report.ReportOptions(block_size)
        self.assertEqual(
                _lsmem_report.range_to_row(ranges[0], selection, options),
                ['0x0000000000000000-0x000000001fffffff', '512M', 'online',
                    'no', '0-3', None])
        self.assertEqual(
                _lsmem_report.range_to_row(ranges[1], selection, options),
                ['0x0000000020000000-0x0000000027ffffff', '128M', 'offline',
                    None, '4', None])

        options = _lsmem_report.ReportOptions(block_size, bytes_=True,
                have_nodes=True)
        self.assertEqual(
                _lsmem_report.range_to_row(ranges[0], selection, options),
                ['0x0000000000000000-0x000000001fffffff', '536870912',
                    'online', 'no', '0-3', '0'])

    def test_state_labels(self):
        selection, err = _lsmem_columns.resolve(['STATE', 'REMOVABLE'])
        options = _lsmem_report.ReportOptions(block_size)
        for state, row in [
                [_memblock.state_online, ['online', 'yes']],
                [_memblock.state_offline, ['offline', None]],
                [_memblock.state_going_offline, ['on->off', None]],
                [_memblock.state_unknown, ['?', None]]]:
            self.assertEqual(_lsmem_report.range_to_row(
                _memblock.MemoryBlock(0, state, True), selection, options),
                row)

    def test_summary_lines(self):
        self.assertEqual(_lsmem_report.summary_lines(
            _memblock_merge.MemoryTotals(block_size, 4 * block_size, 0)),
            ['Memory block size   :     128M',
                'Total online memory :     512M',
                'Total offline memory:       0B'])

    def test_format_table(self):
        selection, rows = default_rows(
                _lsmem_report.ReportOptions(block_size))
        text, err = _lsmem_report.format_rows(_lsmem_report.fmt_table,
                selection, rows)
        self.assertEqual(err, None)
        fmt = '%-37s %4s %-7s %9s %5s'
        self.assertEqual(text, '\n'.join([
            (fmt % ('RANGE', 'SIZE', 'STATE', 'REMOVABLE', 'BLOCK')),
            (fmt % ('0x0000000000000000-0x000000001fffffff', '512M',
                'online', 'no', '0-3')),
            (fmt % ('0x0000000020000000-0x0000000027ffffff', '128M',
                'offline', '', '4')),
            ]))

        text, err = _lsmem_report.format_rows(_lsmem_report.fmt_table,
                selection, rows, noheadings=True)
        self.assertEqual(len(text.split('\n')), 2)

        text, err = _lsmem_report.format_rows(_lsmem_report.fmt_table,
                selection, [])
        self.assertEqual(text, 'RANGE SIZE STATE REMOVABLE BLOCK')

    def test_format_raw(self):
        selection, rows = default_rows(
                _lsmem_report.ReportOptions(block_size))
        text, err = _lsmem_report.format_rows(_lsmem_report.fmt_raw,
                selection, rows)
        self.assertEqual(err, None)
        self.assertEqual(text, '\n'.join([
            'RANGE SIZE STATE REMOVABLE BLOCK',
            '0x0000000000000000-0x000000001fffffff 512M online no 0-3',
            '0x0000000020000000-0x0000000027ffffff 128M offline  4']))

        text, err = _lsmem_report.format_rows(_lsmem_report.fmt_raw,
                selection, rows, noheadings=True)
        self.assertEqual(text.split('\n')[0],
            '0x0000000000000000-0x000000001fffffff 512M online no 0-3')

    def test_format_pairs(self):
        selection, rows = default_rows(
                _lsmem_report.ReportOptions(block_size))
        text, err = _lsmem_report.format_rows(_lsmem_report.fmt_pairs,
                selection, rows)
        self.assertEqual(err, None)
        self.assertEqual(text, '\n'.join([
            'RANGE="0x0000000000000000-0x000000001fffffff" SIZE="512M" '
            'STATE="online" REMOVABLE="no" BLOCK="0-3"',
            'RANGE="0x0000000020000000-0x0000000027ffffff" SIZE="128M" '
            'STATE="offline" REMOVABLE="" BLOCK="4"']))

    def test_format_json_yaml(self):
        selection, rows = default_rows(
                _lsmem_report.ReportOptions(block_size))
        expected = {'memory': [
            {'range': '0x0000000000000000-0x000000001fffffff',
                'size': '512M', 'state': 'online', 'removable': 'no',
                'block': '0-3'},
            {'range': '0x0000000020000000-0x0000000027ffffff',
                'size': '128M', 'state': 'offline', 'removable': None,
                'block': '4'}]}

        text, err = _lsmem_report.format_rows(_lsmem_report.fmt_json,
                selection, rows)
        self.assertEqual(err, None)
        self.assertEqual(json.loads(text), expected)
        # keeps the columns order
        self.assertTrue(text.index('"range"') < text.index('"block"'))

        text, err = _lsmem_report.format_rows(_lsmem_report.fmt_yaml,
                selection, rows)
        self.assertEqual(err, None)
        self.assertEqual(yaml.safe_load(text), expected)
        # keeps the columns order
        self.assertTrue(text.index('range:') < text.index('block:'))

    def test_format_unsupported(self):
        selection, rows = default_rows(
                _lsmem_report.ReportOptions(block_size))
        text, err = _lsmem_report.format_rows('xml', selection, rows)
        self.assertEqual(text, None)
        self.assertNotEqual(err, None)

if __name__ == '__main__':
    unittest.main()
