#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-2.0

import os
import sys

def test_input_expects(testcase, function, input_expects):
    for input_ in input_expects:
        testcase.assertEqual(function(input_), input_expects[input_])

def add_lsmem_dir_to_syspath():
    bindir = os.path.dirname(os.path.realpath(__file__))
    lsmem_dir = os.path.join(bindir, '..', '..', 'src')
    sys.path.append(lsmem_dir)

def memory_dir_dict(block_size, blocks, first_index=0):
    '''
    Returns a nested dict of memory device directory having the blocks.  Each
    block is given as [state, removable, node], node being None for no node.
    '''
    tree = {'block_size_bytes': '%x\n' % block_size,
            'auto_online_blocks': 'offline\n', 'probe': '', 'power': {}}
    for idx, block in enumerate(blocks):
        state, removable, node = block
        block_dir = {'state': '%s\n' % state,
                'removable': '%d\n' % removable,
                'phys_index': '%08x\n' % (first_index + idx),
                'valid_zones': 'Normal\n'}
        if node is not None:
            block_dir['node%d' % node] = {}
        tree['memory%d' % (first_index + idx)] = block_dir
    return tree
