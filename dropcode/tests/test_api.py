"""
dropcode/tests/test_api.py

Tests for dropcode/api/files.py — the single file-info request.

No network. The requests session is always a MagicMock.
"""

from unittest.mock import MagicMock

import pytest
import requests

from dropcode.api import FileMetadata, fetch_file_info
from dropcode.errors import EmptyResponseError, MetadataFetchError
from dropcode.resolver import ResolvedSnippet


SNIPPET = ResolvedSnippet('abc123', 'https://dropcode.tonary.app')


def _session(status=200, json_data=None, json_error=None):
    res = MagicMock()
    res.status_code = status
    res.ok = 200 <= status < 400
    if json_error is not None:
        res.json.side_effect = json_error
    else:
        res.json.return_value = json_data
    session = MagicMock()
    session.get.return_value = res
    return session


class TestFetchFileInfo:
    def test_returns_download_url_and_extra_fields(self):
        session = _session(json_data={'file': {
            'downloadUrl': 'https://cdn.example.com/App.tsx',
            'size': 12,
            'name': 'App.tsx',
        }})
        meta = fetch_file_info(SNIPPET, session=session)
        assert meta == FileMetadata('https://cdn.example.com/App.tsx',
                                    {'size': 12, 'name': 'App.tsx'})

    def test_requests_api_url_once(self):
        session = _session(json_data={'file': {'downloadUrl': 'https://x/y'}})
        fetch_file_info(SNIPPET, session=session, timeout=5)
        session.get.assert_called_once()
        args, kwargs = session.get.call_args
        assert args[0] == 'https://dropcode.tonary.app/api/files/abc123'
        assert kwargs['timeout'] == 5
        assert kwargs['headers']['Accept'] == 'application/json'

    @pytest.mark.parametrize('status', [403, 404, 500])
    def test_http_error_carries_status(self, status):
        session = _session(status=status)
        with pytest.raises(MetadataFetchError) as exc_info:
            fetch_file_info(SNIPPET, session=session)
        assert exc_info.value.status == status
        assert exc_info.value.status_label == str(status)
        assert not isinstance(exc_info.value, EmptyResponseError)

    def test_http_error_no_retry(self):
        session = _session(status=503)
        with pytest.raises(MetadataFetchError):
            fetch_file_info(SNIPPET, session=session)
        assert session.get.call_count == 1

    def test_network_error_has_no_status(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError('refused')
        with pytest.raises(MetadataFetchError) as exc_info:
            fetch_file_info(SNIPPET, session=session)
        assert exc_info.value.status is None
        assert exc_info.value.status_label == 'Network Error'

    def test_timeout_is_network_error(self):
        session = MagicMock()
        session.get.side_effect = requests.Timeout('slow')
        with pytest.raises(MetadataFetchError) as exc_info:
            fetch_file_info(SNIPPET, session=session)
        assert exc_info.value.status is None

    @pytest.mark.parametrize('body', [
        {},
        {'file': None},
        {'file': 'App.tsx'},
        {'file': {}},
        {'file': {'downloadUrl': ''}},
        {'file': {'downloadUrl': None}},
        {'file': {'downloadUrl': 42}},
        [],
        None,
    ])
    def test_missing_download_url_is_empty_response(self, body):
        with pytest.raises(EmptyResponseError):
            fetch_file_info(SNIPPET, session=_session(json_data=body))

    def test_non_json_body_is_empty_response(self):
        session = _session(json_error=ValueError('not json'))
        with pytest.raises(EmptyResponseError):
            fetch_file_info(SNIPPET, session=session)

    def test_empty_response_is_a_fetch_error(self):
        assert issubclass(EmptyResponseError, MetadataFetchError)

    def test_without_session_uses_requests(self, monkeypatch):
        res = MagicMock(status_code=200, ok=True)
        res.json.return_value = {'file': {'downloadUrl': 'https://x/y.txt'}}
        get = MagicMock(return_value=res)
        monkeypatch.setattr(requests, 'get', get)
        assert fetch_file_info(SNIPPET).download_url == 'https://x/y.txt'
        get.assert_called_once()
