"""
Local filename helpers: deriving a name from a download URL, picking an
auto-numbered alternative, and existence checks against a directory.
"""

import os
from pathlib import Path
from urllib.parse import unquote, urlsplit

from dropcode.config import FALLBACK_PREFIX


def _separators():
    seps = {'/', os.sep}
    if os.altsep:
        seps.add(os.altsep)
    return seps


def fallback_filename(snippet_id: str) -> str:
    """dropcode-<snippet_id>, with path separators in the id turned into '-'."""
    flat = snippet_id
    for sep in _separators():
        flat = flat.replace(sep, '-')
    return f'{FALLBACK_PREFIX}{flat}'


def is_plain_filename(name: str) -> bool:
    """True if name is a single path component that stays inside its directory."""
    if not name or name in ('.', '..'):
        return False
    return not any(s in name for s in _separators())


def filename_from_url(url: str, snippet_id: str) -> str:
    """
    Last path segment of url, or dropcode-<snippet_id> when there isn't a
    usable one. Never raises.
    """
    try:
        path = urlsplit(url).path
    except (ValueError, TypeError, AttributeError):
        return fallback_filename(snippet_id)

    name = unquote(path.rsplit('/', 1)[-1])
    if not is_plain_filename(name):
        return fallback_filename(snippet_id)
    return name


def file_exists(name: str, directory='.') -> bool:
    return (Path(directory) / name).exists()


def numbered_filename(name: str, directory='.') -> str:
    """
    App.tsx → 'App (2).tsx', or 'App (3).tsx' if that one is taken too.

    The directory is checked fresh for every candidate.
    """
    stem, ext = os.path.splitext(name)
    counter = 2
    while True:
        candidate = f'{stem} ({counter}){ext}'
        if not file_exists(candidate, directory):
            return candidate
        counter += 1
