"""Line reader for the interactive prompt.

Reads the raw stdin file descriptor on a daemon thread and hands each line
to the event loop through ``loop.call_soon_threadsafe``. Nothing runs in the
loop's default executor, so ``asyncio.run`` never waits on a thread that is
blocked reading the terminal: Ctrl+C at the prompt ends the session at once.

``os.read`` is used instead of ``sys.stdin.readline`` so the blocked thread
never holds the buffered reader's lock while the interpreter shuts down.
"""

import asyncio
import logging
import os
import sys
import threading

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 4096


class StdinReader:
    """Async line source backed by a daemon reader thread.

    ``readline()`` returns one line without its line ending, or ``None``
    once the input is exhausted (EOF).
    """

    def __init__(self, fd: int | None = None, encoding: str | None = None):
        if fd is None:
            fd = sys.stdin.fileno()
        if encoding is None:
            encoding = getattr(sys.stdin, "encoding", None) or "utf-8"

        self._fd = fd
        self._encoding = encoding
        self._loop: asyncio.AbstractEventLoop | None = None
        self._queue: asyncio.Queue[str | None] | None = None
        self._thread: threading.Thread | None = None

    @property
    def thread(self) -> threading.Thread | None:
        return self._thread

    def start(self) -> None:
        """Start the reader thread. Must be called from a running event loop."""
        if self._thread is not None:
            return
        self._loop = asyncio.get_running_loop()
        self._queue = asyncio.Queue()
        self._thread = threading.Thread(
            target=self._pump, name="stdin-reader", daemon=True
        )
        self._thread.start()

    async def readline(self, prompt: str = "") -> str | None:
        """Print ``prompt`` and wait for the next line of input."""
        if self._queue is None:
            self.start()
        if prompt:
            sys.stdout.write(prompt)
            sys.stdout.flush()
        return await self._queue.get()

    def _pump(self) -> None:
        pending = b""
        while True:
            try:
                chunk = os.read(self._fd, _CHUNK_SIZE)
            except OSError as exc:
                logger.debug("stdin read failed: %s", exc)
                chunk = b""
            if not chunk:
                break
            pending += chunk
            *lines, pending = pending.split(b"\n")
            for line in lines:
                if not self._deliver(self._decode(line)):
                    return
        if pending:
            if not self._deliver(self._decode(pending)):
                return
        self._deliver(None)

    def _decode(self, raw: bytes) -> str:
        return raw.decode(self._encoding, errors="replace").rstrip("\r")

    def _deliver(self, line: str | None) -> bool:
        """Queue a line on the loop. Returns False once the loop is gone."""
        try:
            self._loop.call_soon_threadsafe(self._queue.put_nowait, line)
        except RuntimeError:
            # loop closed
            logger.debug("Event loop closed; stdin reader stopping")
            return False
        return True
