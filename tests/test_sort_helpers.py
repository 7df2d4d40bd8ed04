"""
Unit tests for sort state helpers.
"""
import pytest
from error_handler import ConfigurationError, ValidationError
from helpers.sort_helpers import (
    SortState,
    current_sort,
    next_sort_order,
    sort_clause,
    sort_icon,
    sort_init,
    sort_update,
)


@pytest.fixture
def config():
    return sort_init('id', name='contacts_sort')


def test_sort_init_uses_explicit_name():
    """Test that an explicit session name is used verbatim."""
    config = sort_init('last_name', 'desc', name='people')
    assert config.name == 'people'
    assert config.default == SortState('last_name', 'desc')
    assert config.strict_order is False


def test_sort_init_derives_name_from_controller_and_action():
    """Test the '<controller><action>_sort' session name."""
    config = sort_init('last_name', controller='contact', action='list')
    assert config.name == 'contactlist_sort'
    assert config.default == SortState('last_name', 'asc')


def test_sort_init_allows_empty_controller():
    """App-level views have no blueprint; the action alone names the entry."""
    config = sort_init('id', controller='', action='index')
    assert config.name == 'index_sort'


def test_sort_init_without_context_raises():
    """Test that a missing controller/action is a configuration error."""
    with pytest.raises(ConfigurationError):
        sort_init('id')
    with pytest.raises(ConfigurationError):
        sort_init('id', controller='contacts', action=None)


def test_sort_init_does_not_touch_session():
    """sort_init only builds configuration."""
    session = {}
    sort_init('id', name='contacts_sort')
    assert session == {}


def test_update_uses_default_without_session_or_params(config):
    """Test that the default applies on a first visit."""
    session = {}
    state = sort_update(config, session, {})
    assert state == SortState('id', 'asc')
    assert session['contacts_sort'] == {'key': 'id', 'order': 'asc'}


def test_update_keeps_previous_session_state(config):
    """Test that a stored state survives a request without sort params."""
    session = {'contacts_sort': {'key': 'name', 'order': 'desc'}}
    state = sort_update(config, session, {'page': '2'})
    assert state == SortState('name', 'desc')
    assert session['contacts_sort'] == {'key': 'name', 'order': 'desc'}


def test_update_request_params_override_session(config):
    """Test that sort_key/sort_order params win over the session."""
    session = {'contacts_sort': {'key': 'name', 'order': 'desc'}}
    state = sort_update(config, session, {'sort_key': 'price', 'sort_order': 'asc'})
    assert state == SortState('price', 'asc')
    assert session['contacts_sort'] == {'key': 'price', 'order': 'asc'}


def test_update_missing_order_falls_back_to_default_order():
    """A sort_key without sort_order uses the configured default order."""
    config = sort_init('id', 'desc', name='contacts_sort')
    session = {}
    state = sort_update(config, session, {'sort_key': 'phone'})
    assert state == SortState('phone', 'desc')


def test_update_empty_sort_key_is_ignored(config):
    """An empty sort_key does not replace the stored state."""
    session = {'contacts_sort': {'key': 'name', 'order': 'desc'}}
    state = sort_update(config, session, {'sort_key': '', 'sort_order': 'asc'})
    assert state == SortState('name', 'desc')


def test_update_stores_unknown_order_verbatim(config):
    """Without strict mode the order is passed through untouched."""
    session = {}
    state = sort_update(config, session, {'sort_key': 'id', 'sort_order': 'DESC'})
    assert state.order == 'DESC'
    assert sort_clause(config, session) == 'id DESC'

    sort_update(config, session, {'sort_key': 'id', 'sort_order': 'sideways'})
    assert sort_clause(config, session) == 'id sideways'


def test_update_strict_order_normalizes_case():
    """Strict mode lower-cases valid orders."""
    config = sort_init('id', name='contacts_sort', strict_order=True)
    session = {}
    state = sort_update(config, session, {'sort_key': 'id', 'sort_order': 'DESC'})
    assert state == SortState('id', 'desc')


def test_update_strict_order_rejects_unknown_order():
    """Strict mode raises and leaves the session unchanged."""
    config = sort_init('id', name='contacts_sort', strict_order=True)
    session = {'contacts_sort': {'key': 'name', 'order': 'asc'}}
    with pytest.raises(ValidationError):
        sort_update(config, session, {'sort_key': 'id', 'sort_order': 'sideways'})
    assert session['contacts_sort'] == {'key': 'name', 'order': 'asc'}


def test_update_replaces_incomplete_session_state(config):
    """A partially populated session entry is replaced by the default."""
    session = {'contacts_sort': {'key': 'name'}}
    state = sort_update(config, session, {})
    assert state == SortState('id', 'asc')
    assert session['contacts_sort'] == {'key': 'id', 'order': 'asc'}


def test_update_default_is_not_shared_with_session(config):
    """Mutating the stored dict must not change the configured default."""
    session = {}
    sort_update(config, session, {})
    session['contacts_sort']['order'] = 'desc'
    assert config.default == SortState('id', 'asc')


def test_sort_clause_format():
    """Test the '<key> <order>' clause."""
    config = sort_init('last_name', name='people')
    session = {}
    sort_update(config, session, {})
    assert sort_clause(config, session) == 'last_name asc'


def test_current_sort_before_update_raises(config):
    """Reading the state before sort_update() is a configuration error."""
    with pytest.raises(ConfigurationError):
        current_sort(config, {})
    with pytest.raises(ConfigurationError):
        sort_clause(config, {})


def test_next_order_respects_initial_order_for_other_columns():
    """Inactive columns get the initial order verbatim."""
    state = SortState('id', 'asc')
    assert next_sort_order(state, 'name') == 'asc'
    assert next_sort_order(state, 'name', 'asc') == 'asc'
    assert next_sort_order(state, 'name', 'desc') == 'desc'


def test_next_order_toggles_active_column():
    """The active column flips direction, ignoring the initial order."""
    assert next_sort_order(SortState('id', 'asc'), 'id') == 'desc'
    assert next_sort_order(SortState('id', 'desc'), 'id') == 'asc'
    assert next_sort_order(SortState('id', 'ASC'), 'id', 'asc') == 'desc'
    assert next_sort_order(SortState('id', 'asc'), 'id', 'desc') == 'desc'


def test_two_clicks_on_same_column_return_to_ascending(config):
    """Starting from id asc, clicking id twice goes desc then asc."""
    session = {}
    sort_update(config, session, {})

    first = next_sort_order(current_sort(config, session), 'id')
    assert first == 'desc'
    sort_update(config, session, {'sort_key': 'id', 'sort_order': first})

    second = next_sort_order(current_sort(config, session), 'id')
    assert second == 'asc'


def test_sort_icon():
    """Test icon tokens for the active column only."""
    assert sort_icon(SortState('id', 'asc'), 'id') == 'sortasc'
    assert sort_icon(SortState('id', 'DESC'), 'id') == 'sortdesc'
    assert sort_icon(SortState('id', 'asc'), 'name') is None


def test_sort_state_from_dict_rejects_bad_data():
    """Test that malformed session data does not produce a state."""
    assert SortState.from_dict(None) is None
    assert SortState.from_dict('id asc') is None
    assert SortState.from_dict({'key': 'id'}) is None
    assert SortState.from_dict({'order': 'asc'}) is None
    assert SortState.from_dict({'key': 'id', 'order': 'asc'}) == SortState('id', 'asc')
