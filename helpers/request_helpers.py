"""
Request helpers for reading routing context from the current Flask request.
"""
from typing import Any, Dict, Optional, Tuple

from flask import request, url_for


def get_real_ip() -> str:
    """
    Get real client IP address, accounting for reverse proxies.

    When behind a reverse proxy, request.remote_addr returns the proxy's IP,
    not the client's real IP. This function checks X-Forwarded-For first.

    Returns:
        Real client IP address as string

    Security Notes:
        - X-Forwarded-For can be spoofed by malicious clients
        - Only use the value for logging, never for access decisions
    """
    # X-Forwarded-For format: "client, proxy1, proxy2"
    forwarded_for = request.headers.get('X-Forwarded-For')

    if forwarded_for:
        return forwarded_for.split(',')[0].strip()

    return request.remote_addr


def get_controller_and_action() -> Tuple[Optional[str], Optional[str]]:
    """
    Split the current endpoint into (controller, action).

    The controller is the blueprint name ('' for app-level routes) and the
    action is the view name, e.g. endpoint 'contacts.index' gives
    ('contacts', 'index'). Returns (None, None) when the request did not
    match a route.
    """
    endpoint = request.endpoint
    if not endpoint:
        return None, None

    action = endpoint.rsplit('.', 1)[-1]
    return request.blueprint or '', action


def current_endpoint_url(query: Dict[str, Any]) -> str:
    """
    Build a URL to the current endpoint with the given query parameters.

    View arguments of the current route are kept; None values are skipped.
    """
    values = dict(request.view_args or {})
    values.update({key: value for key, value in query.items() if value is not None})
    return url_for(request.endpoint, **values)
