"""
Contact list routes with sortable column headers.
"""
from flask import Blueprint, render_template, request
from logging_helper import LoggingHelper, LogType

# Get logger instance
logger = LoggingHelper.get_logger(LogType.MAIN)
from constants import FILTER_PARAM, SEARCH_PARAM
from helpers.response_helpers import sorted_collection_response
from helpers.sort_context import SortContext, use_sort

bp = Blueprint('contacts', __name__, template_folder='templates')

# Global database reference (set by init function)
_db = None

DEFAULT_SORT_KEY = 'last_name'
# Shared by the HTML page and the JSON API so both see the same sort
CONTACTS_SORT_NAME = 'contacts_sort'

CONTACT_GROUPS = ('work', 'personal')


def init_contacts_routes(database):
    """Initialize contacts routes with dependencies."""
    global _db
    _db = database


def _load_contacts(sort: SortContext) -> list:
    """Query contacts with the current sort, falling back to the default order for unknown columns."""
    group = request.args.get(FILTER_PARAM) or None
    search = request.args.get(SEARCH_PARAM) or None

    try:
        return _db.list_contacts(order_by=sort.clause(), group=group, search=search)
    except ValueError as e:
        logger.warning(f"Ignoring unsupported contact sort ({e}), using default order")
        return _db.list_contacts(order_by=f"{DEFAULT_SORT_KEY} asc", group=group, search=search)


@bp.route('/contacts/')
def index():
    """Sortable contact table."""
    sort = use_sort(DEFAULT_SORT_KEY, name=CONTACTS_SORT_NAME)
    contacts = _load_contacts(sort)
    return render_template(
        'contacts.html',
        contacts=contacts,
        groups=CONTACT_GROUPS,
        current_filter=request.args.get(FILTER_PARAM, ''),
        current_search=request.args.get(SEARCH_PARAM, '')
    )


@bp.route('/api/contacts')
def api_contacts():
    """Contacts as JSON, sorted by the same session-persisted state as the table."""
    sort = use_sort(DEFAULT_SORT_KEY, name=CONTACTS_SORT_NAME)
    contacts = _load_contacts(sort)
    return sorted_collection_response(sort, 'contacts', contacts)
