# SPDX-License-Identifier: GPL-2.0

"List the ranges of available memory with their online status"

import argparse
import os

from lsmem import _lsmem_columns
from lsmem import _lsmem_fs
from lsmem import _lsmem_report
from lsmem import _memblock
from lsmem import _memblock_merge
from lsmem import lsmem_version

class MemoryReport:
    ranges = None
    totals = None
    have_nodes = None

    def __init__(self, ranges, totals, have_nodes):
        self.ranges = ranges
        self.totals = totals
        self.have_nodes = have_nodes

def read_memory_report(store, selection, list_all):
    '''
    Read all memory blocks in the store and merge those into ranges as the
    column selection and list_all ask.  Returns MemoryReport and an error.
    '''
    names, err = _memblock.list_blocks(store)
    if err is not None:
        return None, err
    block_size, err = _memblock.read_block_size(store)
    if err is not None:
        return None, err
    have_nodes, err = _memblock.system_has_nodes(store, names)
    if err is not None:
        return None, err

    policy = _memblock_merge.MergePolicy.from_columns(selection, list_all,
            have_nodes)
    blocks, err = _memblock.read_blocks(store, names,
            read_node=have_nodes and selection.want_node)
    if err is not None:
        return None, err
    ranges, totals = _memblock_merge.merge_blocks(blocks, policy, block_size)
    return MemoryReport(ranges, totals, have_nodes), None

def memory_dir(sysroot):
    if sysroot is None:
        return _memblock.sysfs_memory_dir
    return os.path.join(sysroot, _memblock.sysfs_memory_dir.lstrip('/'))

def output_format(args):
    if args.json:
        return _lsmem_report.fmt_json
    if args.pairs:
        return _lsmem_report.fmt_pairs
    if args.raw:
        return _lsmem_report.fmt_raw
    if args.yaml:
        return _lsmem_report.fmt_yaml
    return _lsmem_report.fmt_table

def pr_report(args, selection, report):
    fmt = output_format(args)
    print_table = args.summary != 'only'
    print_summary = args.summary != 'never'

    if print_table:
        options = _lsmem_report.ReportOptions(report.totals.block_size,
                args.bytes, report.have_nodes)
        text, err = _lsmem_report.format_rows(fmt, selection,
                _lsmem_report.report_rows(report.ranges, selection, options),
                args.noheadings)
        if err is not None:
            return err
        if text != '':
            print(text)
    if print_summary:
        if print_table:
            print()
        print('\n'.join(_lsmem_report.summary_lines(report.totals)))
    return None

def columns_help():
    lines = ['Available output columns:']
    for desc in _lsmem_columns.column_descs:
        lines.append(' %10s  %s' % (desc.name, desc.help))
    return '\n'.join(lines)

def set_argparser(parser):
    parser.description = ('List the ranges of available memory with their '
            'online status.')
    parser.formatter_class = argparse.RawDescriptionHelpFormatter
    parser.epilog = columns_help()

    fmt_group = parser.add_mutually_exclusive_group()
    fmt_group.add_argument('-J', '--json', action='store_true',
            help='use JSON output format')
    fmt_group.add_argument('-P', '--pairs', action='store_true',
            help='use key="value" output format')
    fmt_group.add_argument('-r', '--raw', action='store_true',
            help='use raw output format')
    fmt_group.add_argument('-y', '--yaml', action='store_true',
            help='use YAML output format')

    parser.add_argument('-a', '--all', action='store_true',
            help='list each individual memory block')
    parser.add_argument('-b', '--bytes', action='store_true',
            help='print SIZE in bytes rather than in human readable format')
    parser.add_argument('-n', '--noheadings', action='store_true',
            help='don\'t print headings')
    parser.add_argument('-o', '--output', metavar='<list>',
            help='output columns (prefix with \'+\' to extend the default)')
    parser.add_argument('-s', '--sysroot', metavar='<dir>',
            help='use the specified directory as system root')
    parser.add_argument('--summary', choices=['never', 'always', 'only'],
            help='print summary information')
    parser.add_argument('--debug_fs', action='store_true',
            help='print memory block attributes reading operations')
    parser.add_argument('-V', '--version', action='version',
            version='%(prog)s ' + lsmem_version.__version__)

def main(args=None):
    if not args:
        parser = argparse.ArgumentParser()
        set_argparser(parser)
        args = parser.parse_args()

    requested_columns = []
    if args.output is not None:
        requested_columns = _lsmem_columns.text_to_columns(args.output)
    selection, err = _lsmem_columns.resolve(requested_columns)
    if err is not None:
        print(err)
        exit(1)

    _lsmem_fs.debug_print_ops(args.debug_fs)
    store = _lsmem_fs.FsAttributeStore(memory_dir(args.sysroot))
    report, err = read_memory_report(store, selection, args.all)
    if err is not None:
        print(err)
        exit(1)

    try:
        err = pr_report(args, selection, report)
    except BrokenPipeError as e:
        # maybe user piped to 'less' like pager, and quit from it
        return
    if err is not None:
        print(err)
        exit(1)

if __name__ == '__main__':
    main()
