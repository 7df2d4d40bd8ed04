"""
URL helper utilities for sort links.

Builds the query strings carried by sortable column headers so that
clicking a header keeps the current filter/search state.
"""
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

from constants import FILTER_PARAM, SEARCH_PARAM


def get_passthrough_params(request_args: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Collect request parameters that sort links forward unchanged.

    'filter' is always forwarded (None when absent, which URL builders drop);
    'q' is only forwarded when the request carries it.

    Args:
        request_args: Current request parameters (e.g. flask.request.args)

    Returns:
        Dictionary of parameters to merge into a sort link URL

    Examples:
        >>> get_passthrough_params({'filter': 'work', 'page': '3'})
        {'filter': 'work'}

        >>> get_passthrough_params({'filter': 'work', 'q': 'smith'})
        {'filter': 'work', 'q': 'smith'}
    """
    params = {FILTER_PARAM: request_args.get(FILTER_PARAM)}
    if request_args.get(SEARCH_PARAM) is not None:
        params[SEARCH_PARAM] = request_args.get(SEARCH_PARAM)
    return params


def build_query_url(base_path: str, params: Optional[Dict[str, Any]] = None) -> str:
    """
    Build a URL with query parameters, skipping parameters whose value is None.

    Args:
        base_path: Base URL path (e.g., '/contacts/')
        params: Query parameters in the order they should appear

    Returns:
        Complete URL with query parameters (the bare path if none are left)

    Examples:
        >>> build_query_url('/contacts/', {'sort_key': 'id', 'sort_order': 'desc'})
        '/contacts/?sort_key=id&sort_order=desc'

        >>> build_query_url('/contacts/', {'sort_key': 'id', 'filter': None})
        '/contacts/?sort_key=id'

        >>> build_query_url('/contacts/')
        '/contacts/'
    """
    query = {}
    if params:
        for key, value in params.items():
            if value is not None:
                query[key] = str(value)

    if not query:
        return base_path
    return f"{base_path}?{urlencode(query)}"
