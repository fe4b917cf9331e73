"""
Manual-recovery path when the file-info request fails (e.g. the service is
behind a browser challenge): open the API URL in the default browser so the
user can fetch the file by hand, or print it if no browser can be opened.
"""

import logging
import webbrowser

from dropcode.api.helpers import err, info

logger = logging.getLogger(__name__)


def open_fallback(url, open_browser=True):
    """
    Point the user at url. Returns True if a browser was launched.

    Never raises; the caller exits non-zero either way.
    """
    if not open_browser:
        err(f'Please visit: {url}')
        return False

    info('Opening API URL in browser:', url)
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.debug('Browser launch failed: %s', e)
        opened = False

    if opened:
        print('  Please check the browser and download the file manually if needed.')
        return True

    err(f'Failed to open browser. Please visit: {url}')
    return False
