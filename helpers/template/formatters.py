"""
Formatting functions for sortable table headers.

Tag builders return markupsafe.Markup so Jinja templates render them
without double escaping; every caption and attribute value is escaped.
"""

import re
from typing import Any, Mapping, Optional

from markupsafe import Markup, escape

_ACRONYM_BOUNDARY = re.compile(r'([A-Z]+)([A-Z][a-z])')
_CAMEL_BOUNDARY = re.compile(r'([a-z\d])([A-Z])')
_WORD_START = re.compile(r"\b(?<!\w['’`()])[a-z]")


def titleize(value: Any) -> str:
    """
    Turn a column attribute name into a human readable caption.

    Examples:
        >>> titleize('last_name')
        'Last Name'
        >>> titleize('author_id')
        'Author'
        >>> titleize('createdAt')
        'Created At'
    """
    text = str(value)
    text = _ACRONYM_BOUNDARY.sub(r'\1_\2', text)
    text = _CAMEL_BOUNDARY.sub(r'\1_\2', text)
    text = text.replace('-', '_').lower()
    if text.endswith('_id'):
        text = text[:-3]
    text = ' '.join(text.replace('_', ' ').split())
    return _WORD_START.sub(lambda m: m.group(0).upper(), text)


def nbsp(n: int) -> Markup:
    """Return n non-breaking spaces."""
    return Markup('&nbsp;' * max(n, 0))


def format_attributes(attributes: Optional[Mapping[str, Any]]) -> Markup:
    """
    Render tag attributes, each with a leading space.

    None and False values are skipped, True renders a bare attribute name.
    """
    if not attributes:
        return Markup('')

    parts = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f' {escape(name)}')
        else:
            parts.append(f' {escape(name)}="{escape(value)}"')
    return Markup(''.join(parts))


def content_tag(tag: str, content: Any = '', attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """Render <tag attrs>content</tag>. Plain strings in content are escaped, Markup is kept."""
    return Markup(f'<{tag}{format_attributes(attributes)}>{escape(content)}</{tag}>')


def link_to(caption: Any, url: str, attributes: Optional[Mapping[str, Any]] = None) -> Markup:
    """Render an anchor with href first, then the given attributes."""
    link_attributes = {'href': url}
    if attributes:
        link_attributes.update(attributes)
    return content_tag('a', caption, link_attributes)
