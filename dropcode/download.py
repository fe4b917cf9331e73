"""
Stream a file from its download URL into a local path.

New files are created exclusively: if something appeared at the target
since the conflict check, the download fails instead of clobbering it.
Replacing goes through a hidden .part file in the same directory that is
swapped into place only once the body is complete.

Partial output is removed on any failure.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

import requests

from dropcode.config import DEFAULT_TIMEOUT
from dropcode.errors import DownloadError
from dropcode.progress import ProgressBar

logger = logging.getLogger(__name__)

CHUNK = 64 * 1024


def download_file(url, target, overwrite=False, session=None,
                  timeout=DEFAULT_TIMEOUT, show_progress=True):
    """
    Download url to target. Returns the number of bytes written.

    Raises DownloadError on any HTTP, transport or filesystem failure.
    """
    target = Path(target)
    http = session or requests
    logger.debug('GET %s → %s (overwrite=%s)', url, target, overwrite)

    try:
        res = http.get(url, stream=True, timeout=timeout)
    except requests.RequestException as e:
        raise DownloadError(f'Download failed: {e}') from e

    with res:
        if not res.ok:
            raise DownloadError(f'Download failed (HTTP {res.status_code})')

        total = _content_length(res)
        bar = ProgressBar(total, label=target.name) if show_progress else None

        if overwrite:
            written = _write_replacing(res, target, bar)
        else:
            written = _write_new(res, target, bar)

    if bar is not None:
        bar.done()
    logger.debug('Wrote %d bytes to %s', written, target)
    return written


def _write_new(res, target, bar):
    try:
        f = open(target, 'xb')
    except FileExistsError as e:
        raise DownloadError(f'{target.name} appeared while downloading; not overwriting it') from e
    except OSError as e:
        raise DownloadError(f'Could not create {target}: {e}') from e

    try:
        with f:
            return _copy(res, f, bar)
    except BaseException:
        _discard(target, bar)
        raise


def _write_replacing(res, target, bar):
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f'.{target.name}.', suffix='.part', dir=target.parent,
        )
    except OSError as e:
        raise DownloadError(f'Could not create a temporary file next to {target}: {e}') from e

    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, 'wb') as f:
            written = _copy(res, f, bar)
        os.chmod(tmp, _target_mode(target))
        os.replace(tmp, target)
    except OSError as e:
        _discard(tmp, bar)
        raise DownloadError(f'Could not write {target}: {e}') from e
    except BaseException:
        _discard(tmp, bar)
        raise
    return written


def _copy(res, f, bar):
    written = 0
    try:
        for chunk in res.iter_content(chunk_size=CHUNK):
            if not chunk:
                continue
            f.write(chunk)
            written += len(chunk)
            if bar is not None:
                bar.update(len(chunk))
    except requests.RequestException as e:
        raise DownloadError(f'Download interrupted: {e}') from e
    except OSError as e:
        raise DownloadError(f'Could not write file: {e}') from e
    return written


def _discard(path, bar):
    if bar is not None:
        bar.abort()
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning('Could not remove partial file %s: %s', path, e)


def _content_length(res):
    """Declared body size, or 0 when missing or malformed."""
    try:
        return max(int(res.headers.get('content-length') or 0), 0)
    except (TypeError, ValueError):
        return 0


def _target_mode(target):
    """Permission bits the replaced file should keep (umask default if new)."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
