# -*- coding: utf-8 -*-
"""
Tokenization of canonical HTML into comparable atoms.

A canonical string is split, losslessly, into four kinds of tokens:

- ``word``: a maximal run of letters, digits, ``_``, ``#`` and ``@``,
  or one character reference such as ``&lt;``
- ``whitespace``: a maximal run of whitespace
- ``tag``: one complete ``<...>`` element, never split (quoted attribute
  values may contain ``>``)
- ``punctuation``: any other single character

The kind is decided once here and carried through matching and rendering.
"""
import re
from collections import namedtuple

from .config import _token_pattern, _never_re, WORD, WHITESPACE, TAG
from .utils import split_tag, is_self_closing


class Token(namedtuple('Token', 'kind text key')):
    """One atom: its kind, its literal text and its comparison key."""

    __slots__ = ()

    @property
    def is_tag(self):
        return self.kind == TAG


def comparison_key(kind, text, config=None):
    """
    Key used for token equality.

    Tags compare by element name only, so attribute edits are invisible:

    >>> comparison_key('tag', '<div class="a">') == comparison_key('tag', '<div class="b">')
    True
    >>> comparison_key('tag', '<br/>')
    '<br/>'
    """
    if kind == TAG:
        parts = split_tag(text[1:-1])
        if parts is None:
            return text
        slash, name, rest = parts
        return u'<%s%s%s>' % (slash, name, u'/' if is_self_closing(rest) else u'')
    if kind == WHITESPACE and getattr(config, 'ignore_whitespace_differences', False):
        return u' '
    return text


def compile_tokenizer(config=None):
    """Build the token regex, with any configured block expressions first."""
    blocks = tuple(getattr(config, 'block_expressions', ()) or ())
    block = u'|'.join(u'(?:%s)' % b for b in blocks) if blocks else _never_re
    return re.compile(_token_pattern % block, re.S | re.U)


def tokenize(text, config=None):
    """
    Split `text` into a tuple of tokens.

    A single scan with three running states (word, tag, whitespace): a ``<``
    opens a tag that runs to the next ``>``, a whitespace or word character
    continues the current run of its class, and anything else is a
    one-character punctuation token.

    >>> [t.text for t in tokenize('<p>Hi, you</p>')]
    ['<p>', 'Hi', ',', ' ', 'you', '</p>']
    """
    rx = compile_tokenizer(config)
    tokens = []
    for m in rx.finditer(text or u''):
        kind = m.lastgroup
        if kind in ('block', 'entity'):
            kind = WORD
        piece = m.group()
        if not piece:
            # An empty block-expression match would never advance the scan.
            raise ValueError('block expression matched the empty string at %d' % m.start())
        tokens.append(Token(kind, piece, comparison_key(kind, piece, config)))
    return tuple(tokens)
