# SPDX-License-Identifier: GPL-2.0

"""
Coalesce adjacent memory blocks into ranges.

Blocks are merged only if they are physically contiguous and equal in every
attribute the merge policy cares about.  A merged range keeps the attributes
of its first block.
"""

from lsmem import _memblock

class MergePolicy:
    # list each block as is
    merge_disabled = False
    want_state = False
    want_removable = False
    want_node = False

    def __init__(self, merge_disabled=False, want_state=False,
            want_removable=False, want_node=False):
        self.merge_disabled = merge_disabled
        self.want_state = want_state
        self.want_removable = want_removable
        self.want_node = want_node

    @classmethod
    def from_columns(cls, selection, merge_disabled, have_nodes):
        return MergePolicy(merge_disabled=merge_disabled,
                want_state=selection.want_state,
                want_removable=selection.want_removable,
                want_node=selection.want_node and have_nodes)

    def mergeable(self, current, block):
        if self.merge_disabled:
            return False
        if current.index + current.count != block.index:
            return False
        if self.want_state and current.state != block.state:
            return False
        if self.want_removable and current.removable != block.removable:
            return False
        if self.want_node and current.node != block.node:
            return False
        return True

class MemoryTotals:
    block_size = None
    bytes_online = None
    bytes_offline = None

    def __init__(self, block_size, bytes_online=0, bytes_offline=0):
        self.block_size = block_size
        self.bytes_online = bytes_online
        self.bytes_offline = bytes_offline

    def __eq__(self, other):
        return (type(self) == type(other) and
                self.block_size == other.block_size and
                self.bytes_online == other.bytes_online and
                self.bytes_offline == other.bytes_offline)

    def __str__(self):
        return 'block size %d, online %d, offline %d' % (self.block_size,
                self.bytes_online, self.bytes_offline)

    def __repr__(self):
        return self.__str__()

    def account(self, block):
        # going-offline and unknown blocks are accounted as offline
        if block.state == _memblock.state_online:
            self.bytes_online += block.size(self.block_size)
        else:
            self.bytes_offline += block.size(self.block_size)

def merge_step(ranges, block, policy):
    '''
    Merge a block into the last of the ranges if possible, or append a copy
    of the block as a new range.
    '''
    if len(ranges) > 0 and policy.mergeable(ranges[-1], block):
        ranges[-1].count += block.count
        return ranges
    ranges.append(_memblock.MemoryBlock(block.index, block.state,
        block.removable, block.node, block.count))
    return ranges

def merge_blocks(blocks, policy, block_size):
    '''
    Returns list of merged ranges and MemoryTotals of the blocks.  The blocks
    should be sorted in their index order.

    Totals are accounted per block before merging, since a merged range
    shows only its first block's state when the state is not wanted.
    '''
    ranges = []
    totals = MemoryTotals(block_size)
    for block in blocks:
        totals.account(block)
        merge_step(ranges, block, policy)
    return ranges, totals
