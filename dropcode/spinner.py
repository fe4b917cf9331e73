"""
Terminal spinner shown while waiting on the file-info request.

    with Spinner('fetching abc123'):
        meta = fetch_file_info(snippet)

Runs on a daemon thread and erases itself on exit. Does nothing when
stderr is not a TTY.
"""

import sys
import threading

_FRAMES = ['⣾', '⣽', '⣻', '⢿', '⡿', '⣟', '⣯', '⣷']
_INTERVAL = 0.08
_CLEAR = '\r\033[K'


class Spinner:

    def __init__(self, label: str = '', stream=None):
        self._label  = label
        self._stream = stream if stream is not None else sys.stderr
        self._thread = None
        self._stop   = threading.Event()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *_):
        self.stop()

    def start(self):
        if not self._stream.isatty():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()

    def stop(self):
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        self._stream.write(_CLEAR)
        self._stream.flush()

    def _spin(self):
        from dropcode.format import dim
        i = 0
        while not self._stop.wait(timeout=_INTERVAL):
            frame = dim(_FRAMES[i % len(_FRAMES)], stream=self._stream)
            self._stream.write(f'\r  {frame}  {self._label}')
            self._stream.flush()
            i += 1
