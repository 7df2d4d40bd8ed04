"""
Helper utilities for sortable table headers.
Centralizes sort state, link rendering and request plumbing.
"""

# Export all helpers for easy importing
from .sort_helpers import (
    SortState,
    SortConfig,
    sort_init,
    sort_update,
    current_sort,
    sort_clause,
    next_sort_order,
    sort_icon
)
from .sort_context import (
    SortContext,
    use_sort,
    get_sort_context,
    init_sort_helpers
)
from .url_helpers import build_query_url, get_passthrough_params
from .response_helpers import error_response, sorted_collection_response, success_response
from .validation_helpers import is_known_sort_order, normalize_sort_order

__all__ = [
    # Sort state
    'SortState',
    'SortConfig',
    'sort_init',
    'sort_update',
    'current_sort',
    'sort_clause',
    'next_sort_order',
    'sort_icon',
    # Request binding
    'SortContext',
    'use_sort',
    'get_sort_context',
    'init_sort_helpers',
    # URL helpers
    'build_query_url',
    'get_passthrough_params',
    # Response helpers
    'error_response',
    'success_response',
    'sorted_collection_response',
    # Validation helpers
    'is_known_sort_order',
    'normalize_sort_order',
]
