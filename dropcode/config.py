"""
Config for the dropcode CLI.

User preferences live in ~/.config/dropcode/config.json (all optional):

  ansi      true to colorize output            (default: false)
  timeout   seconds for each HTTP request      (default: 30)
  browser   false to never open a browser      (default: true)

The domain allow-list is fixed and cannot be changed from config.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / '.config' / 'dropcode'
CONFIG_FILE = CONFIG_DIR / 'config.json'

SUPPORTED_DOMAINS = (
    'dropcode.tonary.app',
    'dc.tonary.app',
    'dropcode.lolkek.lol',
    'dc.lolkek.lol',
)

API_PATH = '/api/files/{snippet_id}'
FALLBACK_PREFIX = 'dropcode-'

DEFAULT_TIMEOUT = 30


def load(path=None):
    """Load config from disk. Returns empty dict if missing or unreadable."""
    p = Path(path) if path else CONFIG_FILE
    if not p.exists():
        return {}
    try:
        cfg = json.loads(p.read_text())
    except (OSError, ValueError) as e:
        logger.warning('Ignoring unreadable config %s: %s', p, e)
        return {}
    if not isinstance(cfg, dict):
        logger.warning('Ignoring config %s: expected a JSON object', p)
        return {}
    return cfg


def timeout(cfg):
    """HTTP timeout in seconds from config, falling back to DEFAULT_TIMEOUT."""
    value = cfg.get('timeout', DEFAULT_TIMEOUT)
    try:
        value = float(value)
    except (TypeError, ValueError):
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT
