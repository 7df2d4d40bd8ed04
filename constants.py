"""
Common constants used across the table sort helpers.
"""

# Values that are considered "false" for boolean environment variables
# Include empty string to handle unset or blank environment variables
FALSE_VALUES = {'false', '0', 'no', 'off', ''}

# Request parameters read and written by sort links
SORT_KEY_PARAM = 'sort_key'
SORT_ORDER_PARAM = 'sort_order'
FILTER_PARAM = 'filter'
SEARCH_PARAM = 'q'

# Sort directions
SORT_ASC = 'asc'
SORT_DESC = 'desc'
VALID_SORT_ORDERS = frozenset({SORT_ASC, SORT_DESC})

# Session entry name is '<controller><action>' + this suffix unless given explicitly
SESSION_NAME_SUFFIX = '_sort'

# CSS class on every sort link / header cell; the next order is appended on the active column
SORT_LINK_CLASS = 'sort_link'

# sort_icon() returns this prefix + the lower-cased current order ('sortasc', 'sortdesc')
SORT_ICON_PREFIX = 'sort'
