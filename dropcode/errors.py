"""
Exception hierarchy for dropcode.

Every failure the CLI reports is a DropcodeError; dropcode.cli maps each
subclass to a message and an exit code.
"""


class DropcodeError(Exception):
    """Base class for all handled dropcode failures."""


class InvalidInputError(DropcodeError):
    """The argument is not a snippet id or a URL on a supported domain."""


class MetadataFetchError(DropcodeError):
    """The file-info request failed (non-2xx or no response at all)."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status

    @property
    def status_label(self):
        return str(self.status) if self.status is not None else 'Network Error'


class EmptyResponseError(MetadataFetchError):
    """The API answered but the body has no usable download URL."""


class DownloadError(DropcodeError):
    """Streaming the file body to disk failed."""


class PromptIOError(DropcodeError):
    """Interactive input could not be read (closed stdin, I/O error)."""
