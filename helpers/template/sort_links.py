"""
Sort link and sortable table header rendering.

Both helpers take a sort context exposing `state` (the current SortState),
`params` (request parameters) and `url_builder` (query dict -> URL); see
helpers.sort_context.SortContext.

View example:

    <thead>
      <tr>
        {{ sort_header_tag('id', title='Sort by contact ID') }}
        {{ sort_header_tag('last_name', caption='Name') }}
        {{ sort_header_tag('phone') }}
        {{ sort_header_tag('address', width=200) }}
      </tr>
    </thead>
"""

from typing import Any, Dict, Mapping, Optional, Union

from markupsafe import Markup

from constants import SORT_ASC, SORT_KEY_PARAM, SORT_LINK_CLASS, SORT_ORDER_PARAM
from helpers.sort_helpers import SortState, next_sort_order
from helpers.url_helpers import get_passthrough_params
from .formatters import content_tag, link_to, titleize


class SortHeaderOptions:
    """
    Options for sort_header_tag().

    Args:
        caption: Link text (defaults to the titleized column name)
        title: The cell's title attribute (defaults to 'Sort by <caption>')
        initial_order: Order requested when the column is not the active one
        attributes: Extra attributes rendered on the <th> cell
    """

    def __init__(self, caption: Optional[str] = None, title: Optional[str] = None,
                 initial_order: str = SORT_ASC, attributes: Optional[Dict[str, Any]] = None):
        self.caption = caption
        self.title = title
        self.initial_order = initial_order or SORT_ASC
        self.attributes = dict(attributes) if attributes else {}

    @classmethod
    def from_dict(cls, options: Optional[Mapping[str, Any]]) -> 'SortHeaderOptions':
        """Split a free-form options mapping into the known options and extra cell attributes."""
        extra = dict(options or {})
        return cls(
            caption=extra.pop('caption', None),
            title=extra.pop('title', None),
            initial_order=extra.pop('initial_order', None),
            attributes=extra
        )


def sort_link_class(state: SortState, column: str, order: str) -> str:
    """'sort_link', plus the next order when column is the active sort column."""
    if state.key == str(column):
        return f"{SORT_LINK_CLASS} {order}"
    return SORT_LINK_CLASS


def sort_url(context, column: str, order: str) -> str:
    """URL requesting `column` sorted by `order`, keeping the current filter and search."""
    query = {SORT_KEY_PARAM: column, SORT_ORDER_PARAM: order}
    query.update(get_passthrough_params(context.params))
    return context.url_builder(query)


def sort_link(context, column: str, caption: Optional[str] = None,
              initial_order: str = SORT_ASC) -> Markup:
    """
    Return a link which sorts by the named column.

    Args:
        context: Sort context for the current request
        column: Name of an attribute in the sorted record collection
        caption: Displayed link text (defaults to the titleized column name)
        initial_order: Order requested when column is not the active one

    Returns:
        <a href="...?sort_key=column&sort_order=..." class="sort_link[ order]">Caption</a>
    """
    state = context.state
    order = next_sort_order(state, column, initial_order)
    if caption is None:
        caption = titleize(column)

    return link_to(caption, sort_url(context, column, order),
                   {'class': sort_link_class(state, column, order)})


def sort_header_tag(context, column: str,
                    options: Union[SortHeaderOptions, Mapping[str, Any], None] = None) -> Markup:
    """
    Return a table header <th> tag with a sort link for the named column.

    Options (a SortHeaderOptions or a plain mapping):
        caption: The displayed link name (defaults to titleized column name)
        title: The tag's title attribute (defaults to 'Sort by <caption>')
        initial_order: Order requested when column is not the active one

    Other mapping entries become additional <th> attributes. A 'class' entry is
    appended to the computed sort_link class.

    Example:
        sort_header_tag(ctx, 'id', {'title': 'Sort by contact ID', 'width': 40})

    Renders:
        <th class="sort_link" title="Sort by contact ID" width="40">
          <a href="/contacts/?sort_key=id&amp;sort_order=asc" class="sort_link">Id</a>
        </th>
    """
    if not isinstance(options, SortHeaderOptions):
        options = SortHeaderOptions.from_dict(options)

    state = context.state
    order = next_sort_order(state, column, options.initial_order)
    caption = options.caption if options.caption is not None else titleize(column)

    attributes = dict(options.attributes)
    css_class = sort_link_class(state, column, order)
    extra_class = attributes.pop('class', None)
    if extra_class:
        css_class = f"{css_class} {extra_class}"

    cell_attributes = {
        'class': css_class,
        'title': options.title if options.title is not None else f"Sort by {caption}",
    }
    cell_attributes.update(attributes)

    return content_tag('th', sort_link(context, column, caption, options.initial_order), cell_attributes)
