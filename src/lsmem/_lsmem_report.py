# SPDX-License-Identifier: GPL-2.0

"""
Format merged memory ranges into report rows, and print the rows in table,
raw, key="value" pairs, json or yaml format.
"""

import json

import yaml

from lsmem import _lsmem_columns
from lsmem import _lsmem_fmt_str
from lsmem import _memblock

fmt_table = 'table'
fmt_raw = 'raw'
fmt_pairs = 'pairs'
fmt_json = 'json'
fmt_yaml = 'yaml'

state_labels = {
        _memblock.state_online: 'online',
        _memblock.state_offline: 'offline',
        _memblock.state_going_offline: 'on->off',
        _memblock.state_unknown: '?',
        }

class ReportOptions:
    block_size = None
    # print sizes in bytes
    bytes_ = None
    have_nodes = None

    def __init__(self, block_size, bytes_=False, have_nodes=False):
        self.block_size = block_size
        self.bytes_ = bytes_
        self.have_nodes = have_nodes

def column_cell(column, mem_range, options):
    '''Returns the string to show for the column, or None for empty cell'''
    block_size = options.block_size
    if column == _lsmem_columns.col_range:
        start = mem_range.start(block_size)
        return _lsmem_fmt_str.format_addr_range(start,
                start + mem_range.size(block_size) - 1)
    if column == _lsmem_columns.col_size:
        return _lsmem_fmt_str.format_sz(mem_range.size(block_size),
                options.bytes_)
    if column == _lsmem_columns.col_state:
        return state_labels[mem_range.state]
    if column == _lsmem_columns.col_removable:
        if mem_range.state != _memblock.state_online:
            return None
        return 'yes' if mem_range.removable else 'no'
    if column == _lsmem_columns.col_block:
        return _lsmem_fmt_str.format_idx_range(mem_range.index,
                mem_range.last_index())
    if column == _lsmem_columns.col_node:
        if not options.have_nodes:
            return None
        return '%d' % mem_range.node
    return None

def range_to_row(mem_range, selection, options):
    return [column_cell(c, mem_range, options) for c in selection.columns]

def report_rows(ranges, selection, options):
    for mem_range in ranges:
        yield range_to_row(mem_range, selection, options)

def summary_lines(totals):
    return [
            'Memory block size   : %8s' % _lsmem_fmt_str.format_sz(
                totals.block_size, False),
            'Total online memory : %8s' % _lsmem_fmt_str.format_sz(
                totals.bytes_online, False),
            'Total offline memory: %8s' % _lsmem_fmt_str.format_sz(
                totals.bytes_offline, False),
            ]

def cell_str(cell):
    return '' if cell is None else cell

def table_lines(selection, rows, noheadings):
    descs = selection.descs()
    lines = [] if noheadings else [[d.name for d in descs]]
    lines += [[cell_str(c) for c in row] for row in rows]
    if len(lines) == 0:
        return []

    widths = [max([len(line[i]) for line in lines])
            for i in range(len(descs))]
    formatted = []
    for line in lines:
        fields = []
        for i, cell in enumerate(line):
            if descs[i].right_aligned:
                fields.append(cell.rjust(widths[i]))
            else:
                fields.append(cell.ljust(widths[i]))
        formatted.append(' '.join(fields).rstrip())
    return formatted

def raw_lines(selection, rows, noheadings):
    lines = [] if noheadings else [
            ' '.join([d.name for d in selection.descs()])]
    for row in rows:
        lines.append(' '.join([cell_str(c) for c in row]))
    return lines

def pairs_lines(selection, rows):
    lines = []
    for row in rows:
        lines.append(' '.join(['%s="%s"' % (c, cell_str(cell).replace(
            '"', '\\"')) for c, cell in zip(selection.columns, row)]))
    return lines

def rows_to_kvpairs(selection, rows):
    return {'memory': [
        {c.lower(): cell for c, cell in zip(selection.columns, row)}
        for row in rows]}

def dump_yaml(kvpairs):
    'Returns yaml text keeping the columns order, and an error'
    try:
        return yaml.safe_dump(kvpairs, default_flow_style=False,
                sort_keys=False), None
    except yaml.YAMLError as e:
        return None, 'yaml dump failed (%s)' % e

def format_rows(fmt, selection, rows, noheadings=False):
    'Returns the report text and an error'
    if fmt == fmt_table:
        return '\n'.join(table_lines(selection, rows, noheadings)), None
    if fmt == fmt_raw:
        return '\n'.join(raw_lines(selection, rows, noheadings)), None
    if fmt == fmt_pairs:
        return '\n'.join(pairs_lines(selection, rows)), None
    if fmt == fmt_json:
        return json.dumps(rows_to_kvpairs(selection, rows), indent=3), None
    if fmt == fmt_yaml:
        text, err = dump_yaml(rows_to_kvpairs(selection, rows))
        if err is not None:
            return None, err
        return text.rstrip('\n'), None
    return None, 'unsupported format (%s)' % fmt
