# -*- coding: utf-8 -*-
"""
Configuración y constantes para htmlredline.
"""
import re

# Expresiones regulares (exportadas para uso en otros módulos)
# Quoted attribute values may hold ">"; neither a chunk nor a quoted value may span a "<".
_tag_inner = r"""[^<>"']*(?:(?:"[^"<]*"|'[^'<]*')[^<>"']*)*"""
_tag_chunk_re = re.compile(r"<(%s)>" % _tag_inner)
# A tag starts only when a letter (or "/" and a letter) follows "<" directly.
_tag_body_re = re.compile(r"^(/?)([A-Za-z][A-Za-z0-9]*)((?:\s|/).*)?$", re.S)
_self_closing_re = re.compile(r'/\s*$')
_nbsp_re = re.compile(r'&nbsp;|&#0*160;|&#x0*a0;|\u00a0', re.I)

# One alternative per token kind, tried in order. `block` is filled in with the
# configured block expressions (or a never-matching pattern).
_token_pattern = (
    r"(?P<block>%s)"
    r"|(?P<tag><" + _tag_inner + r">)"
    r"|(?P<entity>&#?[A-Za-z0-9]+;)"
    r"|(?P<word>[\w#@]+)"
    r"|(?P<whitespace>\s+)"
    r"|(?P<punctuation>.)"
)
_never_re = r'(?!x)x'

# Cosmetically equivalent spellings collapse to one canonical element name.
TAG_ALIASES = {
    'b': 'strong',
    'i': 'em',
    'strike': 's',
}

ALLOWED_TAGS = frozenset([
    'a', 'abbr', 'blockquote', 'br', 'caption', 'cite', 'code', 'col',
    'colgroup', 'dd', 'div', 'dl', 'dt', 'em', 'h1', 'h2', 'h3', 'h4', 'h5',
    'h6', 'hr', 'img', 'li', 'ol', 'p', 'pre', 'q', 's', 'small', 'span',
    'strong', 'sub', 'sup', 'table', 'tbody', 'td', 'tfoot', 'th', 'thead',
    'tr', 'u', 'ul', 'wbr',
])

# Elements kept by the empty-tag pass even with no attributes and no content.
PRESERVE_EMPTY_TAGS = frozenset(['br', 'hr', 'img', 'td', 'th', 'col', 'wbr'])

# Token kinds
WORD = 'word'
WHITESPACE = 'whitespace'
TAG = 'tag'

# Operation actions
EQUAL = 'equal'
INSERT = 'insert'
DELETE = 'delete'
REPLACE = 'replace'


class DiffConfig(object):
    """
    Runtime configuration for redline rendering.

    Values are read with ``getattr(config, name, default)``, so any object
    carrying a subset of these attributes can be passed instead.
    """

    # Change-marker vocabulary (fixed for downstream CSS)
    insert_tag = 'ins'
    delete_tag = 'del'
    insert_class = 'diffins'
    delete_class = 'diffdel'
    modified_class = 'diffmod'
    # Replace pairs use `modified_class` on both halves. When False they use
    # the plain insert/delete classes.
    mark_replace_as_modified = True

    # Preprocessing tables
    tag_aliases = TAG_ALIASES
    allowed_tags = ALLOWED_TAGS
    preserve_empty_tags = PRESERVE_EMPTY_TAGS
    remove_empty_tags = True

    # Matching
    # All whitespace runs compare equal (the new side's whitespace is rendered).
    ignore_whitespace_differences = False
    # Regexes whose matches stay a single word token, e.g. r'\d{4}-\d{2}-\d{2}'.
    block_expressions = ()
