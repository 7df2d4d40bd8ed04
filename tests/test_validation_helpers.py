"""
Unit tests for sort parameter validation.
"""
import pytest
from error_handler import ValidationError
from helpers.validation_helpers import is_known_sort_order, normalize_sort_order


@pytest.mark.parametrize('order', ['asc', 'desc', 'ASC', 'Desc'])
def test_known_sort_orders(order):
    assert is_known_sort_order(order)


@pytest.mark.parametrize('order', ['', 'sideways', 'ascending', None, 1])
def test_unknown_sort_orders(order):
    assert not is_known_sort_order(order)


def test_normalize_sort_order_lowercases():
    assert normalize_sort_order('DESC') == 'desc'
    assert normalize_sort_order('asc') == 'asc'


def test_normalize_sort_order_error_names_parameter():
    with pytest.raises(ValidationError, match='sort_order'):
        normalize_sort_order('up')
