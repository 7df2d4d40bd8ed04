"""
Template helpers for sortable table headers.

Re-exports the tag builders used by views and Jinja templates.
"""

from .formatters import (
    titleize,
    nbsp,
    format_attributes,
    content_tag,
    link_to
)

from .sort_links import (
    SortHeaderOptions,
    sort_link_class,
    sort_url,
    sort_link,
    sort_header_tag
)

__all__ = [
    # Formatters
    'titleize',
    'nbsp',
    'format_attributes',
    'content_tag',
    'link_to',
    # Sort links
    'SortHeaderOptions',
    'sort_link_class',
    'sort_url',
    'sort_link',
    'sort_header_tag',
]
