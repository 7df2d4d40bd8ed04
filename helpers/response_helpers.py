"""
JSON response helpers for the API routes.

Every payload carries a 'success' flag; sorted listings also report the sort
state that produced them so clients can render their own headers.
"""
from typing import Any, Sequence, Tuple
from flask import jsonify, Response


def error_response(message: str, status_code: int = 400) -> Tuple[Response, int]:
    """{'success': False, 'error': message} with the given status."""
    return jsonify({'success': False, 'error': message}), status_code


def success_response(status_code: int = 200, **fields: Any) -> Tuple[Response, int]:
    """{'success': True, **fields}."""
    return jsonify({'success': True, **fields}), status_code


def sorted_collection_response(sort, name: str, rows: Sequence[Any]) -> Tuple[Response, int]:
    """
    Listing response for a sorted collection.

    Args:
        sort: SortContext used to query the rows
        name: Key the rows are returned under
        rows: The sorted rows

    Returns:
        {'success': True, 'sort': {'key': ..., 'order': ...}, 'clause': 'key order', name: rows}
    """
    return success_response(sort=sort.state.to_dict(), clause=sort.clause(), **{name: list(rows)})
