# -*- coding: utf-8 -*-
"""
Clases principales para renderizar un redline como stream de Genshi.
"""
import logging

from genshi.core import Stream, QName, Attrs, Markup, START, END, TEXT

from .config import DiffConfig, EQUAL, INSERT, DELETE, REPLACE
from .normalization import preprocess
from .atomization import tokenize
from .matcher import find_matches
from .operations import build_operations
from .utils import concat_tokens, take_while

logger = logging.getLogger(__name__)

_POS = (None, -1, -1)


def redline(old_text, new_text, config=None):
    """Renders the redline between two HTML fragments."""
    return RedlineDiffer(old_text, new_text, config=config).render()


def diff_operations(old_text, new_text, config=None):
    """The edit operations between two HTML fragments, without rendering."""
    return RedlineDiffer(old_text, new_text, config=config).get_operations()


class RedlineDiffer(object):
    """Diffs two HTML fragments token by token and injects ``<ins>`` and
``<del>`` markers. Tag tokens are never put inside a marker: on insertion
they pass through unwrapped, on deletion they are dropped, so the markers
can't break the nesting of the surrounding document.
"""

    def __init__(self, old_text, new_text, config=None):
        self.config = config or DiffConfig()
        self.old_tokens = tokenize(preprocess(old_text, self.config), self.config)
        self.new_tokens = tokenize(preprocess(new_text, self.config), self.config)
        self._matches = None
        self._operations = None
        self._result = None

    def get_matches(self):
        if self._matches is None:
            self._matches = find_matches(self.old_tokens, self.new_tokens)
        return self._matches

    def get_operations(self):
        if self._operations is None:
            self._operations = build_operations(self.get_matches(),
                                                len(self.old_tokens),
                                                len(self.new_tokens))
        return self._operations

    def append(self, type, data, pos=_POS):
        self._result.append((type, data, pos))

    def append_markup(self, text):
        # Tokens are already canonical HTML; Markup keeps the serializer from
        # escaping them a second time.
        self.append(TEXT, Markup(text))

    def mark_text(self, text, tag, css_class):
        """Wrap `text` in one change-marker element."""
        tag = QName(tag)
        self.append(START, (tag, Attrs([(QName('class'), css_class)])))
        self.append_markup(text)
        self.append(END, tag)

    def mark_tokens(self, tokens, tag, css_class, keep_tags):
        """
        Emit `tokens` as alternating runs: text runs are wrapped in one
        marker each, tag runs are emitted bare (`keep_tags`) or dropped.
        """
        i = 0
        n = len(tokens)
        while i < n:
            end = take_while(tokens, i, lambda t: not t.is_tag)
            if end > i:
                self.mark_text(concat_tokens(tokens[i:end]), tag, css_class)
            i = end
            end = take_while(tokens, i, lambda t: t.is_tag)
            if keep_tags:
                for token in tokens[i:end]:
                    self.append_markup(token.text)
            i = end

    def unchanged(self, start, end):
        self.append_markup(concat_tokens(self.new_tokens[start:end]))

    def insert(self, start, end, css_class=None):
        self.mark_tokens(self.new_tokens[start:end],
                         getattr(self.config, 'insert_tag', 'ins'),
                         css_class or getattr(self.config, 'insert_class', 'diffins'),
                         keep_tags=True)

    def delete(self, start, end, css_class=None):
        self.mark_tokens(self.old_tokens[start:end],
                         getattr(self.config, 'delete_tag', 'del'),
                         css_class or getattr(self.config, 'delete_class', 'diffdel'),
                         keep_tags=False)

    def replace(self, old_start, old_end, new_start, new_end):
        css_class = None
        if getattr(self.config, 'mark_replace_as_modified', True):
            css_class = getattr(self.config, 'modified_class', 'diffmod')
        self.delete(old_start, old_end, css_class)
        self.insert(new_start, new_end, css_class)

    def process(self):
        self._result = []
        operations = self.get_operations()
        logger.debug("redline: %d old tokens, %d new tokens, %d matches, %d operations",
                     len(self.old_tokens), len(self.new_tokens),
                     len(self.get_matches()), len(operations))
        for op in operations:
            if op.action == EQUAL:
                self.unchanged(op.start_in_new, op.end_in_new)
            elif op.action == INSERT:
                self.insert(op.start_in_new, op.end_in_new)
            elif op.action == DELETE:
                self.delete(op.start_in_old, op.end_in_old)
            elif op.action == REPLACE:
                self.replace(op.start_in_old, op.end_in_old,
                             op.start_in_new, op.end_in_new)
            else:
                raise AssertionError('unknown action %r' % (op.action,))

    def get_diff_stream(self):
        if self._result is None:
            self.process()
        return Stream(self._result)

    def render(self):
        return self.get_diff_stream().render('html', encoding=None, strip_whitespace=False)
