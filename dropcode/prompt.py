"""
Line-based interactive prompt, scoped to one conflict session.

Usage:
    with PromptSession() as prompt:
        prompt.say('File "a.txt" already exists.')
        answer = prompt.ask('Enter your choice (1-4): ')

The session borrows stdin/stdout (or the streams it is given) and lets go
of them on exit, whatever the exit path. Streams it was handed are never
closed; they belong to the caller.
"""

import sys

from dropcode.errors import PromptIOError


class PromptSession:

    def __init__(self, stdin=None, stdout=None):
        self._stdin = stdin
        self._stdout = stdout
        self._in = None
        self._out = None

    # ── Context manager ───────────────────────────────────────────────────────

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *_):
        self.close()

    def open(self):
        self._in = self._stdin if self._stdin is not None else sys.stdin
        self._out = self._stdout if self._stdout is not None else sys.stdout

    def close(self):
        if self._out is not None:
            try:
                self._out.flush()
            except (OSError, ValueError):
                pass
        self._in = None
        self._out = None

    @property
    def active(self) -> bool:
        return self._in is not None

    # ── I/O ───────────────────────────────────────────────────────────────────

    def say(self, text=''):
        self._require_active()
        print(text, file=self._out)

    def ask(self, question: str) -> str:
        """Show question and return the next line without its newline."""
        self._require_active()
        try:
            self._out.write(question)
            self._out.flush()
            line = self._in.readline()
        except (OSError, ValueError) as e:
            raise PromptIOError(f'Could not read input: {e}') from e
        if line == '':
            raise PromptIOError('Input closed before a choice was made.')
        return line.rstrip('\r\n')

    def _require_active(self):
        if not self.active:
            raise PromptIOError('Prompt session is not open.')
