# -*- coding: utf-8 -*-
"""
Longest-common-run matching between two token arrays.

`find_match` finds the single longest run of tokens shared by two ranges,
using a key -> positions index so only candidate pairs are visited.
`find_matches` applies it recursively on both sides of each match, giving an
ordered, non-overlapping list of matches. The result is not guaranteed to be
a minimal diff.
"""
from bisect import bisect_left
from collections import namedtuple


class Match(namedtuple('Match', 'start_in_old start_in_new size')):
    """A run of `size` tokens equal (by key) in both arrays."""

    __slots__ = ()

    @property
    def end_in_old(self):
        return self.start_in_old + self.size

    @property
    def end_in_new(self):
        return self.start_in_new + self.size


def build_index(tokens):
    """Map each comparison key to the ascending positions where it occurs."""
    index = {}
    for pos, token in enumerate(tokens):
        index.setdefault(token.key, []).append(pos)
    return index


def _positions_in_range(positions, start, end):
    lo = bisect_left(positions, start)
    hi = bisect_left(positions, end, lo)
    return positions[lo:hi]


def find_match(old_tokens, new_tokens, old_start, old_end, new_start, new_end, old_index=None):
    """
    Longest run shared by ``old_tokens[old_start:old_end]`` and
    ``new_tokens[new_start:new_end]``, or None.

    New-side positions are scanned in order; for each one, every old-side
    position with the same key extends the run ending one step earlier on
    both sides. Only a strictly longer run replaces the best one, so ties go
    to the earliest new position, then the earliest old position.
    """
    if old_index is None:
        old_index = build_index(old_tokens)

    best_old = old_start
    best_new = new_start
    best_size = 0
    # old position -> length of the run ending there and at the previous j
    run_lengths = {}

    for j in range(new_start, new_end):
        next_lengths = {}
        positions = old_index.get(new_tokens[j].key)
        if positions:
            for i in _positions_in_range(positions, old_start, old_end):
                size = run_lengths.get(i - 1, 0) + 1
                next_lengths[i] = size
                if size > best_size:
                    best_old = i - size + 1
                    best_new = j - size + 1
                    best_size = size
        run_lengths = next_lengths

    if best_size == 0:
        return None
    return Match(best_old, best_new, best_size)


def find_matches(old_tokens, new_tokens, old_start=0, old_end=None, new_start=0, new_end=None):
    """
    Ordered list of matches between the two ranges.

    The best match of a range splits it into the part before and the part
    after, which are matched in turn; the result is
    ``matches(before) + [match] + matches(after)``. A work stack stands in
    for recursion so very long documents don't hit the recursion limit.
    """
    if old_end is None:
        old_end = len(old_tokens)
    if new_end is None:
        new_end = len(new_tokens)
    old_index = build_index(old_tokens)

    matches = []
    stack = [(old_start, old_end, new_start, new_end)]
    while stack:
        item = stack.pop()
        if isinstance(item, Match):
            matches.append(item)
            continue
        o1, o2, n1, n2 = item
        if o1 >= o2 or n1 >= n2:
            continue
        match = find_match(old_tokens, new_tokens, o1, o2, n1, n2, old_index)
        if match is None:
            continue
        # Pushed in reverse so they pop as: before, match, after.
        stack.append((match.end_in_old, o2, match.end_in_new, n2))
        stack.append(match)
        stack.append((o1, match.start_in_old, n1, match.start_in_new))
    return matches
