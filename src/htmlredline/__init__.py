# -*- coding: utf-8 -*-
"""
    htmlredline
    ~~~~~~~~~~~

    Redlines HTML fragments: shows word by word what was added, removed or
    replaced between two revisions of a rich-text document, without ever
    wrapping a change marker around a structural tag.  Examples:

    >>> from htmlredline import redline

    >>> print(redline('<p>The cat sat</p>', '<p>The dog sat</p>'))
    <p>The <del class="diffmod">cat</del><ins class="diffmod">dog</ins> sat</p>

    >>> print(redline('Foo bar baz', 'Foo baz'))
    Foo <del class="diffdel">bar </del>baz

    >>> print(redline('Foo baz', 'Foo blah baz'))
    Foo <ins class="diffins">blah </ins>baz

    >>> print(redline('<p>one</p>', '<p>one</p><p>two</p>'))
    <p>one</p><p><ins class="diffins">two</ins></p>

    >>> print(redline('<p>one</p><p>two</p>', '<p>one</p>'))
    <p>one</p><del class="diffdel">two</del>
"""
from .differ import RedlineDiffer, redline, diff_operations
from .config import DiffConfig
from .parser import ParseError
from .operations import Operation
from .matcher import Match
from .atomization import Token

__all__ = [
    'redline',
    'diff_operations',
    'RedlineDiffer',
    'DiffConfig',
    'ParseError',
    'Operation',
    'Match',
    'Token',
]
