"""
Parameter validation helper utilities for sort parameters.
"""
from typing import Optional

from constants import VALID_SORT_ORDERS
from error_handler import ValidationError


def is_known_sort_order(order: Optional[str]) -> bool:
    """
    Check whether an order token is 'asc' or 'desc' (case-insensitive).

    Examples:
        >>> is_known_sort_order('DESC')
        True
        >>> is_known_sort_order('sideways')
        False
        >>> is_known_sort_order(None)
        False
    """
    if not isinstance(order, str):
        return False
    return order.lower() in VALID_SORT_ORDERS


def normalize_sort_order(order: Optional[str], param_name: str = 'sort_order') -> str:
    """
    Validate a sort order and return it lower-cased.

    Used when strict order validation is enabled; the lenient path stores
    whatever the client sent.

    Args:
        order: Raw order value from the request
        param_name: Parameter name used in the error message

    Returns:
        'asc' or 'desc'

    Raises:
        ValidationError: If the value is not asc/desc in any letter case

    Examples:
        >>> normalize_sort_order('ASC')
        'asc'

        >>> normalize_sort_order('random')
        Traceback (most recent call last):
            ...
        error_handler.ValidationError: Invalid sort_order parameter: 'random' (expected asc or desc)
    """
    if not is_known_sort_order(order):
        raise ValidationError(
            f"Invalid {param_name} parameter: {order!r} (expected asc or desc)"
        )
    return order.lower()
