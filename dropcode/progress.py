"""
Download progress bar on stderr.

    bar = ProgressBar(total_bytes, label='App.tsx')
    bar.update(len(chunk))
    bar.done()

total may be 0 when the server sends no Content-Length; the bar then shows
bytes received without a percentage. Nothing is drawn unless stderr is a
TTY, but done() always prints its one-line summary.
"""

import sys
import time

_WIDTH = 30
_CLEAR = '\r\033[K'


class ProgressBar:

    def __init__(self, total: int, label: str = '', stream=None):
        self.total    = max(total or 0, 0)
        self.label    = label
        self.received = 0
        self._stream  = stream if stream is not None else sys.stderr
        self._tty     = _isatty(self._stream)
        self._start   = time.monotonic()

    def update(self, n: int):
        self.received += n
        self._render()

    def done(self):
        from dropcode.format import green
        elapsed = time.monotonic() - self._start
        speed = self.received / elapsed if elapsed > 0 else 0
        tick = green('✓', stream=self._stream)
        prefix = _CLEAR if self._tty else ''
        self._stream.write(
            f'{prefix}  {tick} {self.label}  {_fmt(self.received)}  '
            f'({_fmt(speed)}/s  {elapsed:.1f}s)\n'
        )
        self._stream.flush()

    def abort(self):
        """Clear the partial bar line after a failed transfer."""
        if self._tty:
            self._stream.write(_CLEAR)
            self._stream.flush()

    def _render(self):
        if not self._tty:
            return
        from dropcode.format import cyan, dim

        if self.total:
            pct = min(self.received / self.total, 1.0)
            filled = int(pct * _WIDTH)
            arrow = '>' if filled < _WIDTH else ''
            fill = '=' * filled + arrow
            bar = dim('[') + cyan(fill, stream=self._stream) + ' ' * (_WIDTH - len(fill)) + dim(']')
            amount = f'{int(pct * 100):>3}%  {_fmt(self.received)}/{_fmt(self.total)}'
        else:
            bar = dim('[') + ' ' * _WIDTH + dim(']')
            amount = _fmt(self.received)

        self._stream.write(f'\r  {self.label:<12} {bar} {amount}')
        self._stream.flush()


def _isatty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def _fmt(n: float) -> str:
    """Bytes as a short human string: 512B, 1.5K, 3.2M."""
    for unit in ('B', 'K', 'M', 'G', 'T'):
        if n < 1024:
            return f'{int(n)}B' if unit == 'B' else f'{n:.1f}{unit}'
        n /= 1024
    return f'{n:.1f}P'
