"""
Per-request sort context and Flask integration.

SortContext binds a SortConfig to a session store, the request parameters
and a URL builder so views and templates do not have to thread them through
every call. Inside Flask, use_sort() builds one for the current request and
init_sort_helpers() exposes it to Jinja:

    @bp.route('/')
    def index():
        sort = use_sort('last_name')
        rows = db.list_contacts(order_by=sort.clause())
        return render_template('contacts.html', contacts=rows)
"""
from functools import partial
from typing import Any, Callable, Dict, Mapping, Optional

from flask import Flask, current_app, g, request, session
from markupsafe import Markup

from constants import SORT_ASC, SORT_KEY_PARAM
from error_handler import ConfigurationError
from helpers.request_helpers import current_endpoint_url, get_controller_and_action, get_real_ip
from helpers.sort_helpers import (
    SortConfig,
    SortState,
    current_sort,
    next_sort_order,
    sort_clause,
    sort_icon,
    sort_init,
    sort_update,
)
from helpers.template.formatters import nbsp
from helpers.template.sort_links import SortHeaderOptions, sort_header_tag, sort_link, sort_url
from helpers.url_helpers import build_query_url
from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)

UrlBuilder = Callable[[Dict[str, Any]], str]


class SortContext:
    """
    Sort helpers bound to one request.

    Args:
        config: SortConfig from sort_init()
        session: Session store supporting get() and item assignment
        params: Request parameters
        url_builder: Callable turning a query dict into a link URL; defaults to a
            query-only relative URL ('?sort_key=...') for the current page
    """

    def __init__(self, config: SortConfig, session, params: Optional[Mapping[str, Any]] = None,
                 url_builder: Optional[UrlBuilder] = None):
        self.config = config
        self.session = session
        self.params = params if params is not None else {}
        self.url_builder = url_builder or partial(build_query_url, '')

    def update(self) -> SortState:
        return sort_update(self.config, self.session, self.params)

    @property
    def state(self) -> SortState:
        return current_sort(self.config, self.session)

    def clause(self) -> str:
        return sort_clause(self.config, self.session)

    def next_order(self, column: str, initial_order: str = SORT_ASC) -> str:
        return next_sort_order(self.state, column, initial_order)

    def icon(self, column: str) -> Optional[str]:
        return sort_icon(self.state, column)

    def url_for_column(self, column: str, initial_order: str = SORT_ASC) -> str:
        return sort_url(self, column, self.next_order(column, initial_order))

    def link(self, column: str, caption: Optional[str] = None, initial_order: str = SORT_ASC) -> Markup:
        return sort_link(self, column, caption, initial_order)

    def header_tag(self, column: str, options=None, **extra) -> Markup:
        if extra:
            if isinstance(options, SortHeaderOptions):
                options = SortHeaderOptions(options.caption, options.title, options.initial_order,
                                            {**options.attributes, **extra})
            else:
                options = {**(options or {}), **extra}
        return sort_header_tag(self, column, options)


# ============================================================================
# FLASK INTEGRATION
# ============================================================================

def use_sort(default_key: str, default_order: str = SORT_ASC, name: Optional[str] = None) -> SortContext:
    """
    Initialize and update the sort state for the current Flask request.

    The session entry defaults to '<blueprint><view>_sort'. The context is
    stored on g.sort_context for the template helpers.

    Raises:
        ConfigurationError: If no name is given and the request has no endpoint
        ValidationError: If SORT_STRICT_ORDER is enabled and sort_order is invalid
    """
    controller, action = (None, None) if name else get_controller_and_action()
    config = sort_init(
        default_key,
        default_order,
        name=name,
        controller=controller,
        action=action,
        strict_order=current_app.config.get('SORT_STRICT_ORDER', False)
    )

    context = SortContext(config, session, request.args, current_endpoint_url)
    state = context.update()

    if request.args.get(SORT_KEY_PARAM):
        LoggingHelper.log_user_action(f"Sorted {config.name} by {state.key} {state.order}", get_real_ip())

    g.sort_context = context
    return context


def get_sort_context() -> SortContext:
    """Return the context created by use_sort() for this request."""
    context = g.get('sort_context')
    if context is None:
        raise ConfigurationError("No sort context for this request; call use_sort() in the view first")
    return context


def _template_sort_link(column: str, caption: Optional[str] = None, initial_order: str = SORT_ASC) -> Markup:
    return get_sort_context().link(column, caption, initial_order)


def _template_sort_header_tag(column: str, options: Optional[Mapping[str, Any]] = None, **extra) -> Markup:
    return get_sort_context().header_tag(column, options, **extra)


def _template_sort_icon(column: str) -> Optional[str]:
    return get_sort_context().icon(column)


def _template_sort_clause() -> str:
    return get_sort_context().clause()


def init_sort_helpers(app: Flask) -> None:
    """Register sort_link, sort_header_tag, sort_icon, sort_clause and nbsp as Jinja globals."""
    app.jinja_env.globals.update(
        sort_link=_template_sort_link,
        sort_header_tag=_template_sort_header_tag,
        sort_icon=_template_sort_icon,
        sort_clause=_template_sort_clause,
        nbsp=nbsp
    )
    logger.debug("Registered sort template helpers")
