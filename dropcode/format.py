"""
Minimal ANSI color for dropcode output.

Color is gated on the 'ansi' key in config and on os.isatty() of the
stream's file descriptor, so nothing leaks into pipes or logs.

NO_COLOR always disables color. FORCE_COLOR skips the TTY check for
terminals that don't report isatty() correctly (tmux, screen, some SSH).
"""

import os
import sys


def _ansi_on(stream=None) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    from dropcode import config
    if not config.load().get('ansi', False):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    target = stream if stream is not None else sys.stdout
    try:
        return os.isatty(target.fileno())
    except (AttributeError, OSError, ValueError):
        return getattr(target, 'isatty', lambda: False)()


def _c(code: str, text: str, stream=None) -> str:
    if _ansi_on(stream):
        return f'\033[{code}m{text}\033[0m'
    return text


def green(text, stream=None):  return _c('1;32', text, stream)
def red(text, stream=None):    return _c('1;31', text, stream)
def cyan(text, stream=None):   return _c('1;36', text, stream)
def dim(text, stream=None):    return _c('2',    text, stream)
