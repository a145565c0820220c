# -*- coding: utf-8 -*-
"""
Canonicalization of raw inputs before tokenizing.

Both sides go through the same four steps so that cosmetic differences
(``<b>`` vs ``<strong>``, ``&nbsp;`` vs a space, empty wrappers left behind by
an editor) never show up as changes.
"""
from .config import _tag_chunk_re, _nbsp_re, DiffConfig, TAG_ALIASES, ALLOWED_TAGS, PRESERVE_EMPTY_TAGS
from .parser import parse_fragment, serialize_fragment, remove_element
from .utils import split_tag, escape_chunk


def standardize_tags(text, config=None):
    """
    Rewrite recognized tags to their canonical spelling and escape the rest.

    >>> standardize_tags('<B>bold</B> <blink>no</blink>')
    '<strong>bold</strong> &lt;blink&gt;no&lt;/blink&gt;'
    """
    aliases = getattr(config, 'tag_aliases', TAG_ALIASES)
    allowed = getattr(config, 'allowed_tags', ALLOWED_TAGS)

    def _rewrite(match):
        body = match.group(1)
        parts = split_tag(body)
        if parts is None:
            return escape_chunk(body)
        slash, name, rest = parts
        name = aliases.get(name, name)
        if name not in allowed:
            return escape_chunk(body)
        return u'<%s%s%s>' % (slash, name, rest)

    return _tag_chunk_re.sub(_rewrite, text)


def escape_unclosed_brackets(text):
    """
    Escape every ``<`` that is not closed by a ``>`` before the next ``<``.

    >>> escape_unclosed_brackets('a < b <p>c</p> d <')
    'a &lt; b <p>c</p> d &lt;'
    """
    out = []
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]
        if ch != u'<':
            out.append(ch)
            i += 1
            continue
        close = text.find(u'>', i + 1)
        reopen = text.find(u'<', i + 1)
        if close == -1 or (reopen != -1 and reopen < close):
            out.append(u'&lt;')
        else:
            out.append(ch)
        i += 1
    return u''.join(out)


def _is_removable(element, preserve):
    tag = element.tag
    if not isinstance(tag, str):
        # comments / processing instructions
        return False
    if tag.lower() in preserve:
        return False
    return not element.attrib and not element.text and len(element) == 0


def _prune(element, preserve):
    # Children first, so a parent emptied by the pass is seen as empty too.
    for child in list(element):
        _prune(child, preserve)
        if _is_removable(child, preserve):
            remove_element(element, child)


def remove_empty_tags(html, config=None):
    """
    Drop elements with no attributes, no text and no children.

    >>> remove_empty_tags('<p><span></span></p>x<br><p class="k"></p>')
    'x<br><p class="k"></p>'
    """
    if not html:
        return u''
    preserve = getattr(config, 'preserve_empty_tags', PRESERVE_EMPTY_TAGS)
    fragment = parse_fragment(html)
    _prune(fragment, preserve)
    return serialize_fragment(fragment)


def normalize_whitespace(text):
    """Turn every non-breaking space form into an ordinary space."""
    return _nbsp_re.sub(u' ', text)


def preprocess(text, config=None):
    """Run the four canonicalization steps on one input."""
    config = config or DiffConfig()
    text = text or u''
    text = standardize_tags(text, config)
    text = escape_unclosed_brackets(text)
    if getattr(config, 'remove_empty_tags', True):
        text = remove_empty_tags(text, config)
    return normalize_whitespace(text)
