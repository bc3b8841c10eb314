"""Threaded producer/consumer handoff for the item stream.

``Scanner.tokenize()`` is the default, pull-based way to read items. An
ItemChannel runs the scanner on a producer thread instead and hands items
to the consumer through a single-slot queue, for callers that want
scanning to overlap with consumption.

Ordering is strict FIFO and at most one item waits in the queue. The
producer stops after EOF or ERROR. Closing the channel (explicitly, via
``with``, or by reading a terminal item) sets a cancellation event so a
producer blocked on a full queue exits instead of hanging.

Usage:
    >>> with ItemChannel(b"---\\na: 1\\n---\\nBody") as channel:
    ...     kinds = [item.type.name for item in channel]
    >>> kinds
    ['FRONTMATTER_YAML', 'CONTENT', 'EOF']

"""

from __future__ import annotations

import queue
import threading
from types import TracebackType

from splitmatter.config import ScanConfig
from splitmatter.errors import SplitmatterError
from splitmatter.items import Item
from splitmatter.lexer.core import Scanner
from splitmatter.utils.logger import get_logger

logger = get_logger(__name__)

# Seconds between cancellation checks while blocked on the queue
_POLL_INTERVAL = 0.05


class ItemChannel:
    """Iterate a Scanner's items produced on a background thread.

    The scanner is constructed in the caller's thread, so it picks up the
    caller's ScanConfig context.

    Thread Safety:
        One consumer per channel. The scanner is touched only by the
        producer thread.

    """

    def __init__(
        self,
        source: bytes | str,
        source_file: str | None = None,
        config: ScanConfig | None = None,
    ) -> None:
        self._scanner = Scanner(source, source_file, config)
        self._queue: queue.Queue[Item] = queue.Queue(maxsize=1)
        self._closed = threading.Event()
        self._finished = False
        self._failure: BaseException | None = None
        self._thread = threading.Thread(
            target=self._produce,
            name=f"splitmatter-scan-{source_file or 'input'}",
            daemon=True,
        )
        self._thread.start()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def _produce(self) -> None:
        try:
            for item in self._scanner.tokenize():
                if not self._put(item):
                    logger.debug("channel closed; producer stopping early")
                    return
        except Exception as exc:
            logger.exception("scanner producer failed")
            self._failure = exc

    def _put(self, item: Item) -> bool:
        """Block until the consumer takes room for item or the channel closes."""
        while not self._closed.is_set():
            try:
                self._queue.put(item, timeout=_POLL_INTERVAL)
            except queue.Full:
                continue
            return True
        return False

    def _get(self) -> Item | None:
        """Block for the next item; None once nothing more can arrive."""
        while not self._closed.is_set():
            try:
                return self._queue.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                if not self._thread.is_alive() and self._queue.empty():
                    if self._failure is not None:
                        raise SplitmatterError(
                            "scanner producer failed"
                        ) from self._failure
                    return None
        return None

    def __iter__(self) -> ItemChannel:
        return self

    def __next__(self) -> Item:
        if self._finished:
            raise StopIteration
        item = self._get()
        if item is None:
            self._finished = True
            raise StopIteration
        if item.is_terminal:
            self._finished = True
            self.close()
        return item

    def close(self) -> None:
        """Cancel the producer and wait for its thread to exit."""
        if not self._closed.is_set():
            self._closed.set()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> ItemChannel:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
