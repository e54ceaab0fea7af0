import os

APP_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_DIR = os.environ.get('TAGGEDFS_CONFIG_DIR') or os.path.join(APP_DIR, 'config')
CONFIG_FILE = os.path.join(CONFIG_DIR, 'settings.yaml')
DB_FILE = os.path.join(CONFIG_DIR, 'tagged-fs.sqlite3')

BUILD_VERSION = '20261019_0900'

# Tag colors are stored as #RRGGBB, uppercased
HEX_COLOR_PATTERN = r'#[0-9A-Fa-f]{6}'

DEFAULT_SETTINGS = {
    "database": {
        "path": DB_FILE,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 8080,
    },
    "cors": {
        "allowed_hosts": ["localhost", "127.0.0.1"],
    },
}
