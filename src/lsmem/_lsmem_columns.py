# SPDX-License-Identifier: GPL-2.0

"""
Output columns of the memory blocks report.

Wanting a column changes not only what is shown but also how blocks are
merged: blocks having different values for a wanted STATE, REMOVABLE or NODE
column are not merged into one range.
"""

class ColumnDesc:
    name = None
    help = None
    right_aligned = None

    def __init__(self, name, help, right_aligned):
        self.name = name
        self.help = help
        self.right_aligned = right_aligned

col_range = 'RANGE'
col_size = 'SIZE'
col_state = 'STATE'
col_removable = 'REMOVABLE'
col_block = 'BLOCK'
col_node = 'NODE'

column_descs = [
        ColumnDesc(col_range, 'address range', False),
        ColumnDesc(col_size, 'size of memory', True),
        ColumnDesc(col_state, 'state of memory', False),
        ColumnDesc(col_removable, 'memory is removable', True),
        ColumnDesc(col_block, 'memory block', True),
        ColumnDesc(col_node, 'node information', True),
        ]

default_columns = [col_range, col_size, col_state, col_removable, col_block]

# each column can be specified twice
max_nr_columns = len(column_descs) * 2

def column_desc(name):
    for desc in column_descs:
        if desc.name == name:
            return desc
    return None

class ColumnSelection:
    columns = None
    want_state = None
    want_removable = None
    want_node = None

    def __init__(self, columns):
        self.columns = columns
        self.want_state = col_state in columns
        self.want_removable = col_removable in columns
        self.want_node = col_node in columns

    def __eq__(self, other):
        return type(self) == type(other) and self.columns == other.columns

    def descs(self):
        return [column_desc(c) for c in self.columns]

def resolve(requested_columns, defaults=default_columns):
    'Returns ColumnSelection for the requested column names, and an error'
    if not requested_columns:
        requested_columns = defaults

    columns = []
    for name in requested_columns:
        desc = column_desc(name.strip().upper())
        if desc is None:
            return None, 'unknown column: %s' % name
        columns.append(desc.name)
    if len(columns) > max_nr_columns:
        return None, ('too many columns specified, the limit is %d columns' %
                max_nr_columns)
    return ColumnSelection(columns), None

def text_to_columns(txt, defaults=default_columns):
    '''
    Split comma-separated column names list.  A list starting with '+' is
    appended to the defaults, e.g., '+NODE'.
    '''
    prefix = []
    if txt.startswith('+'):
        prefix = list(defaults)
        txt = txt[1:]
    return prefix + [c for c in txt.split(',') if c != '']
