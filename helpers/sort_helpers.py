"""
Sort state helpers for tables with clickable column headers.

- Consecutive clicks on the same column toggle its sort order.
- Sort state is kept in a session entry so it survives across requests.
- The active column is flagged for an icon ('sortasc' / 'sortdesc').

Typical flow inside one request:

    config = sort_init('last_name')
    sort_update(config, session, request.args)
    rows = db.list_contacts(order_by=sort_clause(config, session))

Nothing here touches Flask globals; the session store and request
parameters are passed in explicitly (see helpers.sort_context for the
Flask binding).
"""
from typing import Any, Dict, Mapping, Optional

from constants import (
    SESSION_NAME_SUFFIX,
    SORT_ASC,
    SORT_DESC,
    SORT_ICON_PREFIX,
    SORT_KEY_PARAM,
    SORT_ORDER_PARAM,
)
from error_handler import ConfigurationError
from helpers.validation_helpers import is_known_sort_order, normalize_sort_order
from logging_helper import LoggingHelper, LogType

logger = LoggingHelper.get_logger(LogType.MAIN)


class SortState:
    """
    The active sort column and direction.

    Args:
        key: Column / attribute name the table is sorted by
        order: Sort direction, normally 'asc' or 'desc'
    """

    def __init__(self, key: str, order: str = SORT_ASC):
        self.key = key
        self.order = order

    def to_dict(self) -> Dict[str, str]:
        return {'key': self.key, 'order': self.order}

    @classmethod
    def from_dict(cls, data: Any) -> Optional['SortState']:
        """Rebuild a state from its session form; None if the entry is missing or incomplete."""
        if not isinstance(data, Mapping):
            return None
        key = data.get('key')
        order = data.get('order')
        if not key or not order:
            return None
        return cls(str(key), str(order))

    def __eq__(self, other):
        if not isinstance(other, SortState):
            return NotImplemented
        return self.key == other.key and self.order == other.order

    def __repr__(self):
        return f"SortState(key={self.key!r}, order={self.order!r})"


class SortConfig:
    """
    Per-view sort configuration returned by sort_init().

    Args:
        name: Session entry holding the sort state
        default: State used until the user picks a column
        strict_order: Reject sort orders other than asc/desc instead of storing them verbatim
    """

    def __init__(self, name: str, default: SortState, strict_order: bool = False):
        self.name = name
        self.default = default
        self.strict_order = strict_order

    def __repr__(self):
        return f"SortConfig(name={self.name!r}, default={self.default!r}, strict_order={self.strict_order})"


def sort_init(
    default_key: str,
    default_order: str = SORT_ASC,
    name: Optional[str] = None,
    controller: Optional[str] = None,
    action: Optional[str] = None,
    strict_order: bool = False
) -> SortConfig:
    """
    Initialize the default sort column and order for a view.

    Args:
        default_key: Column attribute name sorted by until the user clicks a header
        default_order: 'asc' or 'desc'
        name: Session entry name; defaults to controller + action + '_sort'
        controller: Controller (blueprint) name used to derive the session entry name
        action: Action (view) name used to derive the session entry name
        strict_order: Validate incoming sort orders (see sort_update)

    Returns:
        SortConfig to pass to the other sort helpers

    Raises:
        ConfigurationError: If no name is given and controller/action are unknown
    """
    if name is None:
        if controller is None or not action:
            raise ConfigurationError(
                "Cannot derive a sort session name without controller and action; "
                "pass name= explicitly"
            )
        name = f"{controller}{action}{SESSION_NAME_SUFFIX}"

    return SortConfig(name, SortState(default_key, default_order), strict_order=strict_order)


def sort_update(config: SortConfig, session, params: Mapping[str, Any]) -> SortState:
    """
    Update the persisted sort state from the request. Call before sort_clause().

    Precedence:
      1. sort_key request parameter (with sort_order, falling back to the default order)
      2. the state already stored in the session
      3. the configured default

    The result is always written back to session[config.name].

    Args:
        config: SortConfig from sort_init()
        session: Session store supporting get() and item assignment
        params: Request parameters (e.g. flask.request.args)

    Returns:
        The state now stored in the session

    Raises:
        ValidationError: If strict_order is set and sort_order is not asc/desc
    """
    requested_key = params.get(SORT_KEY_PARAM)

    if requested_key:
        order = params.get(SORT_ORDER_PARAM) or config.default.order
        if config.strict_order:
            order = normalize_sort_order(order, SORT_ORDER_PARAM)
        elif not is_known_sort_order(order):
            logger.warning(f"Storing unrecognised sort order {order!r} for {config.name}")
        state = SortState(str(requested_key), order)
    else:
        stored = session.get(config.name)
        state = SortState.from_dict(stored)
        if state is None:
            if stored is not None:
                logger.warning(f"Discarding incomplete sort state in session entry {config.name}: {stored!r}")
            state = SortState(config.default.key, config.default.order)

    session[config.name] = state.to_dict()
    return state


def current_sort(config: SortConfig, session) -> SortState:
    """
    Read the sort state stored by sort_update().

    Raises:
        ConfigurationError: If sort_update() has not run for this config
    """
    state = SortState.from_dict(session.get(config.name))
    if state is None:
        raise ConfigurationError(f"No sort state in session entry {config.name}; call sort_update() first")
    return state


def sort_clause(config: SortConfig, session) -> str:
    """
    Return the sort clause for the current state, e.g. 'last_name asc'.

    SECURITY: the key and order come straight from request parameters and are
    neither escaped nor checked against a column list. Map or whitelist the key
    before putting the clause into SQL.
    """
    state = current_sort(config, session)
    return f"{state.key} {state.order}"


def next_sort_order(state: SortState, column: str, initial_order: str = SORT_ASC) -> str:
    """
    Order a click on `column` should request.

    The active column flips direction; any other column starts at initial_order.

    Examples:
        >>> next_sort_order(SortState('id', 'asc'), 'id')
        'desc'
        >>> next_sort_order(SortState('id', 'DESC'), 'id')
        'asc'
        >>> next_sort_order(SortState('id', 'asc'), 'name', 'desc')
        'desc'
    """
    if state.key == str(column):
        return SORT_DESC if state.order.lower() == SORT_ASC else SORT_ASC
    return initial_order


def sort_icon(state: SortState, column: str) -> Optional[str]:
    """Icon token for the active column ('sortasc' / 'sortdesc'), None for other columns."""
    if state.key == str(column):
        return f"{SORT_ICON_PREFIX}{state.order.lower()}"
    return None
