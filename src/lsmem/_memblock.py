# SPDX-License-Identifier: GPL-2.0

"""
Memory blocks of the memory device interface and functions for reading them.
"""

import os

from lsmem import _lsmem_fmt_str

sysfs_memory_dir = '/sys/devices/system/memory'
block_size_file = 'block_size_bytes'

state_online = 'online'
state_offline = 'offline'
state_going_offline = 'going-offline'
state_unknown = 'unknown'

# state file contents that are known, others become state_unknown
known_states = [state_online, state_offline, state_going_offline]

no_node = -1

class MemoryBlock:
    # the block covers [index * block_size, (index + count) * block_size)
    index = None
    count = None
    state = None
    # meaningful only for online blocks
    removable = None
    node = None

    def __init__(self, index, state, removable, node=no_node, count=1):
        self.index = index
        self.count = count
        self.state = state
        self.removable = removable
        self.node = node

    def last_index(self):
        return self.index + self.count - 1

    def start(self, block_size):
        return self.index * block_size

    def size(self, block_size):
        return self.count * block_size

    def __str__(self):
        return '%s (%s%s, node %d)' % (
                _lsmem_fmt_str.format_idx_range(self.index, self.last_index()),
                self.state, ', removable' if self.removable else '',
                self.node)

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other):
        return (type(self) == type(other) and self.index == other.index and
                self.count == other.count and self.state == other.state and
                self.removable == other.removable and
                self.node == other.node)

def block_name_to_index(name):
    '''Returns the index of 'memory<index>' named block, or None'''
    if not name.startswith('memory'):
        return None
    suffix = name[len('memory'):]
    if suffix == '' or not suffix.isdecimal():
        return None
    return int(suffix)

def list_blocks(store):
    '''
    Returns names of the memory block directories sorted in their index
    order, and an error.
    '''
    if not store.exists(block_size_file):
        return None, 'This system does not support memory blocks'

    names, err = store.list('')
    if err is not None:
        return None, err
    names = [n for n in names if block_name_to_index(n) is not None]
    if len(names) == 0:
        return None, 'Failed to read memory blocks (no memory block)'
    return sorted(names, key=block_name_to_index), None

def read_block_size(store):
    content, err = store.read(block_size_file)
    if err is not None:
        return None, err
    block_size, err = _lsmem_fmt_str.text_to_nr(content, 16)
    if err is not None:
        return None, 'parsing %s content \'%s\' failed (%s)' % (
                block_size_file, content.strip(), err)
    return block_size, None

def text_to_state(txt):
    txt = txt.strip()
    if txt in known_states:
        return txt
    return state_unknown

def read_block_node(store, name):
    '''
    Returns the node of the block, or no_node if the block directory has no
    'node<id>' entry, and an error.
    '''
    entries, err = store.list(name)
    if err is not None:
        return None, err
    node = no_node
    for entry in entries:
        if not entry.startswith('node'):
            continue
        suffix = entry[len('node'):]
        if suffix == '' or not suffix.isdecimal():
            continue
        node = int(suffix)
    return node, None

def read_block(store, name, read_node):
    'Returns a MemoryBlock of the given name and an error'
    index = block_name_to_index(name)
    if index is None:
        return None, 'wrong memory block name (%s)' % name

    path = os.path.join(name, 'removable')
    content, err = store.read(path)
    if err is not None:
        return None, err
    removable, err = _lsmem_fmt_str.text_to_bool(content)
    if err is not None:
        return None, 'parsing %s content \'%s\' failed (%s)' % (
                path, content.strip(), err)

    state = state_unknown
    path = os.path.join(name, 'state')
    if store.exists(path):
        content, err = store.read(path)
        if err is not None:
            return None, err
        state = text_to_state(content)

    node = no_node
    if read_node:
        node, err = read_block_node(store, name)
        if err is not None:
            return None, err
    return MemoryBlock(index, state, removable, node), None

def system_has_nodes(store, names):
    '''
    Returns whether the system exposes the node of blocks, and an error.
    Only the first block is checked.
    '''
    if len(names) == 0:
        return False, None
    node, err = read_block_node(store, names[0])
    if err is not None:
        return None, err
    return node != no_node, None

def read_blocks(store, names, read_node):
    'Returns list of MemoryBlock objects in the order of names, and an error'
    blocks = []
    for name in names:
        block, err = read_block(store, name, read_node)
        if err is not None:
            return None, err
        blocks.append(block)
    return blocks, None
