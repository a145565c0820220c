# -*- coding: utf-8 -*-
"""
Funciones de parsing HTML para htmlredline.

html5lib is the HTML-tree collaborator: it parses (possibly malformed)
fragments into an ElementTree, and its tree walker + serializer write the
tree back as markup.
"""
import logging

import html5lib
from html5lib.serializer import HTMLSerializer

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """The HTML-tree parser failed on an input fragment."""


def parse_fragment(html):
    """Parse an HTML fragment into an etree ``DOCUMENT_FRAGMENT`` element."""
    builder = html5lib.getTreeBuilder('etree')
    parser = html5lib.HTMLParser(tree=builder, namespaceHTMLElements=False)
    try:
        return parser.parseFragment(html)
    except Exception as exc:
        logger.debug("html5lib failed on a %d character fragment: %s", len(html), exc)
        raise ParseError('could not parse HTML fragment: %s' % exc) from exc


def serialize_fragment(fragment):
    """Serialize a fragment produced by `parse_fragment` back to HTML."""
    walker = html5lib.getTreeWalker('etree')
    serializer = HTMLSerializer(
        quote_attr_values='always',
        omit_optional_tags=False,
        minimize_boolean_attributes=False,
        escape_lt_in_attrs=True,
        use_trailing_solidus=False,
    )
    try:
        return serializer.render(walker(fragment))
    except Exception as exc:
        logger.debug("html5lib could not serialize fragment: %s", exc)
        raise ParseError('could not serialize HTML fragment: %s' % exc) from exc


def remove_element(parent, child):
    """Remove `child` from `parent`, keeping the text that followed it."""
    tail = child.tail
    if tail:
        index = list(parent).index(child)
        if index:
            previous = parent[index - 1]
            previous.tail = (previous.tail or u'') + tail
        else:
            parent.text = (parent.text or u'') + tail
    parent.remove(child)
