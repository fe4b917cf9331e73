"""
Message helpers shared by the CLI and API modules.
"""

import sys


def err(msg):
    """Print a formatted error to stderr."""
    from dropcode.format import red
    print(f'  {red("✗", stream=sys.stderr)} {msg}', file=sys.stderr)


def ok(msg):
    """Print a formatted success message."""
    from dropcode.format import green
    print(f'  {green("✓")} {msg}')


def info(label, value):
    """Print a dimmed label followed by a value."""
    from dropcode.format import dim
    print(f'  {dim(label)} {value}')
