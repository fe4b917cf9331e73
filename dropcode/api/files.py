"""
File metadata API call.

  GET {base_url}/api/files/{snippet_id}
      → {"file": {"downloadUrl": "https://…/App.tsx", ...}}

One attempt only. Any failure is raised to the caller, which decides
whether to fall back to the browser.
"""

import logging
from dataclasses import dataclass, field

import requests

from dropcode.config import DEFAULT_TIMEOUT
from dropcode.errors import EmptyResponseError, MetadataFetchError

logger = logging.getLogger(__name__)


@dataclass
class FileMetadata:
    download_url: str
    extra: dict = field(default_factory=dict)


def fetch_file_info(snippet, session=None, timeout=DEFAULT_TIMEOUT):
    """
    Fetch the file record for a resolved snippet.

    Raises MetadataFetchError with .status set to the HTTP code, or None
    when no response was received. Raises EmptyResponseError when the body
    carries no download URL.
    """
    http = session or requests
    url = snippet.api_url
    logger.debug('GET %s', url)

    try:
        res = http.get(url, headers={'Accept': 'application/json'}, timeout=timeout)
    except requests.RequestException as e:
        logger.debug('No response from %s: %s', url, e)
        raise MetadataFetchError(f'Request to {url} failed: {e}') from e

    logger.debug('HTTP %s from %s', res.status_code, url)
    if not res.ok:
        raise MetadataFetchError(
            f'Server returned {res.status_code}', status=res.status_code,
        )

    return _parse_file_info(res)


def _parse_file_info(res):
    try:
        data = res.json()
    except ValueError:
        data = None

    file_info = data.get('file') if isinstance(data, dict) else None
    if not isinstance(file_info, dict):
        raise EmptyResponseError('File information not found in API response',
                                 status=res.status_code)

    download_url = file_info.get('downloadUrl')
    if not download_url or not isinstance(download_url, str):
        raise EmptyResponseError('File information not found in API response',
                                 status=res.status_code)

    extra = {k: v for k, v in file_info.items() if k != 'downloadUrl'}
    return FileMetadata(download_url=download_url, extra=extra)
