# SPDX-License-Identifier: GPL-2.0

sz_suffixes = 'BKMGTPE'

def sz_exponent(sz_bytes):
    'Returns the power of two of the biggest unit not bigger than sz_bytes'
    for shift in range(10, 70, 10):
        if sz_bytes < 1 << shift:
            return shift - 10
    return 60

def format_sz(sz_bytes, machine_friendly):
    '''
    Format the size with one letter suffix and at most one decimal digit,
    e.g., '0B', '512B', '128M', '1.5G'.
    '''
    if machine_friendly:
        return '%d' % sz_bytes

    exponent = sz_exponent(sz_bytes)
    suffix = sz_suffixes[exponent // 10]
    if exponent == 0:
        return '%d%s' % (sz_bytes, suffix)

    integer = sz_bytes >> exponent
    remainder = sz_bytes & ((1 << exponent) - 1)
    if remainder:
        # round to the tenth of the unit
        remainder = ((remainder >> (exponent - 10)) + 50) // 100
        if remainder == 10:
            integer += 1
            remainder = 0
    if remainder:
        return '%d.%d%s' % (integer, remainder, suffix)
    return '%d%s' % (integer, suffix)

def format_addr(addr):
    return '0x%016x' % addr

def format_addr_range(start, end):
    '''Format [start, end] inclusive range in fixed width hexadecimal'''
    return '%s-%s' % (format_addr(start), format_addr(end))

def format_idx_range(first, last):
    if first == last:
        return '%d' % first
    return '%d-%d' % (first, last)

def text_to_nr(txt, base=10):
    '''
    Returns the number and an error.  Tolerates the trailing newline and an
    optional '0x' prefix of sysfs files.
    '''
    txt = txt.strip()
    if base == 16 and txt[:2].lower() == '0x':
        txt = txt[2:]
    try:
        return int(txt, base), None
    except ValueError as e:
        return None, '%s' % e

def text_to_bool(txt):
    'Returns the bool and an error, for "0"/"1" flag files'
    nr, err = text_to_nr(txt)
    if err is not None:
        return None, err
    return nr != 0, None
