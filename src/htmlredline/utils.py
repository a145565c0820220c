# -*- coding: utf-8 -*-
"""
Funciones utilitarias para htmlredline.
"""
from .config import _tag_body_re, _self_closing_re


def split_tag(body):
    """
    Split the inside of a ``<...>`` chunk into ``(slash, name, rest)``.

    `name` is lower-cased. Returns None when the chunk does not start with an
    element name (comments, doctypes, ``< 3``, stray text).
    """
    m = _tag_body_re.match(body)
    if m is None:
        return None
    slash, name, rest = m.groups()
    return slash, name.lower(), rest or u''


def is_self_closing(rest):
    """Verifica si el resto de un tag termina en ``/``."""
    return bool(_self_closing_re.search(rest))


def escape_chunk(body):
    """Render a bracketed chunk as literal text."""
    return u'&lt;' + body + u'&gt;'


def concat_tokens(tokens):
    """Concatena el texto de una secuencia de tokens."""
    return u''.join(t.text for t in tokens)


def take_while(tokens, start, predicate):
    """Return the end index of the run starting at `start` where `predicate` holds."""
    end = start
    n = len(tokens)
    while end < n and predicate(tokens[end]):
        end += 1
    return end
