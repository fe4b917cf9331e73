"""
Turn the user's argument into a snippet id and the service it lives on.

  abc123                              → abc123 on the default domain
  https://dc.tonary.app/abc123        → abc123 on dc.tonary.app
  https://example.com/abc123          → InvalidInputError (not allow-listed)
"""

from dataclasses import dataclass
from urllib.parse import urlsplit

from dropcode import config
from dropcode.errors import InvalidInputError


@dataclass(frozen=True)
class ResolvedSnippet:
    snippet_id: str
    base_url: str

    @property
    def api_url(self) -> str:
        return self.base_url + config.API_PATH.format(snippet_id=self.snippet_id)


def default_base_url() -> str:
    return f'https://{config.SUPPORTED_DOMAINS[0]}'


def resolve(raw: str) -> ResolvedSnippet:
    """
    Parse a bare snippet id or a snippet URL.

    Raises InvalidInputError when the URL can't be parsed, its host is not
    one of config.SUPPORTED_DOMAINS, or it has no snippet path.
    """
    value = (raw or '').strip()
    if not value:
        raise InvalidInputError('No snippet id or URL given.')

    if '://' not in value and '/' not in value:
        return ResolvedSnippet(snippet_id=value, base_url=default_base_url())

    try:
        parts = urlsplit(value)
        hostname = parts.hostname
    except ValueError as e:
        raise InvalidInputError(f'Could not parse URL: {value}') from e

    if hostname not in config.SUPPORTED_DOMAINS:
        raise InvalidInputError(f'Unsupported domain: {hostname or value}')

    path = parts.path
    snippet_id = path[1:] if path.startswith('/') else path
    if not snippet_id:
        raise InvalidInputError(f'No snippet id in URL: {value}')

    return ResolvedSnippet(snippet_id=snippet_id, base_url=f'https://{hostname}')
