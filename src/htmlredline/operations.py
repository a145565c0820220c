# -*- coding: utf-8 -*-
"""
Conversion of a match list into edit operations.
"""
from collections import namedtuple

from .config import EQUAL, INSERT, DELETE, REPLACE


Operation = namedtuple('Operation', 'action start_in_old end_in_old start_in_new end_in_new')


def _gap_operation(cur_old, old_pos, cur_new, new_pos):
    old_gap = cur_old < old_pos
    new_gap = cur_new < new_pos
    if old_gap and new_gap:
        return Operation(REPLACE, cur_old, old_pos, cur_new, new_pos)
    if old_gap:
        return Operation(DELETE, cur_old, old_pos, cur_new, cur_new)
    if new_gap:
        return Operation(INSERT, cur_old, cur_old, cur_new, new_pos)
    return None


def build_operations(matches, old_len, new_len):
    """
    Turn sorted matches into operations covering both arrays exactly once.

    >>> from htmlredline.matcher import Match
    >>> for op in build_operations([Match(0, 0, 2)], 3, 4):
    ...     print(op.action, op[1:])
    equal (0, 2, 0, 2)
    replace (2, 3, 2, 4)
    """
    operations = []
    cur_old = 0
    cur_new = 0
    for match in matches:
        gap = _gap_operation(cur_old, match.start_in_old, cur_new, match.start_in_new)
        if gap is not None:
            operations.append(gap)
        operations.append(Operation(EQUAL, match.start_in_old, match.end_in_old,
                                    match.start_in_new, match.end_in_new))
        cur_old = match.end_in_old
        cur_new = match.end_in_new
    tail = _gap_operation(cur_old, old_len, cur_new, new_len)
    if tail is not None:
        operations.append(tail)
    return operations
