from __future__ import annotations

import sys
import threading
from typing import TextIO

from odorant_assistant.messages import SessionStatus


class StatusSpinner:
    """Animates a waiting line while the chat session awaits a reply.

    Wired as the session's status observer: AWAITING_RESPONSE starts the
    animation, IDLE stops it and blanks the line before the reply is printed.
    """

    def __init__(
        self,
        *,
        prefix: str,
        label: str,
        frames: str,
        interval_seconds: float = 0.08,
        stream: TextIO | None = None,
    ) -> None:
        if not frames:
            raise ValueError("Spinner needs at least one frame")
        self._prefix = prefix
        self._label = label
        self._frames = frames
        self._interval_seconds = interval_seconds
        self._stream = stream
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None

    def on_status(self, status: SessionStatus) -> None:
        if status is SessionStatus.AWAITING_RESPONSE:
            self._start()
        else:
            self._stop()

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _start(self) -> None:
        if self._thread is not None:
            return
        self._stopped.clear()
        thread = threading.Thread(target=self._animate, daemon=True)
        thread.start()
        self._thread = thread

    def _stop(self) -> None:
        if self._thread is None:
            return
        self._stopped.set()
        self._thread.join()
        self._thread = None
        width = len(self._prefix) + 2 + len(self._label)
        self._write("\r" + " " * width + "\r")

    def _animate(self) -> None:
        i = 0
        try:
            while not self._stopped.is_set():
                frame = self._frames[i % len(self._frames)]
                self._write(f"\r{self._prefix}{frame} {self._label}")
                self._stopped.wait(self._interval_seconds)
                i += 1
        except (UnicodeEncodeError, OSError):
            pass  # terminal can't render the frames

    def _write(self, text: str) -> None:
        out = self._out()
        out.write(text)
        out.flush()
