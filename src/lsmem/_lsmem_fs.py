# SPDX-License-Identifier: GPL-2.0

"""
Read-only access to the memory block device attributes.

Two stores having the same interface are provided.  FsAttributeStore reads
real files under a root directory, while DictAttributeStore serves the
content of a nested dict having directories as dicts and files as strings,
e.g.,

    {'block_size_bytes': '8000000\\n',
     'memory0': {'state': 'online\\n', 'removable': '0\\n', 'node0': {}}}

Paths given to the stores are relative to their roots.
"""

import os

debug_do_print = False

def debug_print_ops(do_print):
    global debug_do_print
    debug_do_print = do_print

class FsAttributeStore:
    root = None

    def __init__(self, root):
        self.root = root

    def abspath(self, path):
        return os.path.join(self.root, path)

    def exists(self, path):
        return os.path.exists(self.abspath(path))

    def read(self, path):
        'Returns content and error'
        filepath = self.abspath(path)
        try:
            with open(filepath, 'r') as f:
                content = f.read()
        except Exception as e:
            return None, 'reading %s failed (%s)' % (filepath, e)
        if debug_do_print:
            print('read \'%s\': \'%s\'' % (filepath, content.strip()))
        return content, None

    def list(self, path):
        'Returns names of entries in the directory and error'
        dirpath = self.abspath(path)
        try:
            return os.listdir(dirpath), None
        except Exception as e:
            return None, 'Failed to read %s (%s)' % (dirpath, e)

class DictAttributeStore:
    tree = None
    logs = None

    def __init__(self, tree):
        self.tree = tree
        self.logs = []

    def lookup(self, path):
        node = self.tree
        for name in [x for x in path.split('/') if x != '']:
            if not isinstance(node, dict) or not name in node:
                return None
            node = node[name]
        return node

    def exists(self, path):
        return self.lookup(path) is not None

    def read(self, path):
        content = self.lookup(path)
        if content is None or isinstance(content, dict):
            return None, 'reading %s failed (no such file)' % path
        self.logs.append('read \'%s\': \'%s\'' % (path, content.strip()))
        if debug_do_print:
            print(self.logs[-1])
        return content, None

    def list(self, path):
        content = self.lookup(path)
        if not isinstance(content, dict):
            return None, 'Failed to read %s (not a directory)' % path
        return list(content.keys()), None
