GROUPS_FILE = 'groups.json'
TEMPLATE_FILE = 'index.html'
GROUPS_PLACEHOLDER = '{{groups}}'

DEFAULT_FRONTEND_HOST = '0.0.0.0'
DEFAULT_FRONTEND_PORT = 5000
DEFAULT_API_HOST = '0.0.0.0'
DEFAULT_API_PORT = 8000
DEFAULT_API_URL = 'http://localhost:8000'

# Цвета для !N...! по цифре N. Цифра 0 и прочие дают пустой цвет.
MARKUP_COLORS = {
    '1': 'red',
    '2': 'lime',
    '3': 'dodgerblue',
    '4': 'goldenrod',
    '5': 'lightblue',
    '6': 'magenta',
    '7': 'pink',
    '8': 'brown',
    '9': 'black',
}

TAG_PREFIX = 'tag:'
JOIN_LINK_TEXT = 'Join Group'
NO_RESULTS_TEXT = 'No results found'
TABLE_COLUMNS = 4
