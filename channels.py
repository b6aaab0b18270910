"""
Plumbing between pipeline stages.

A Channel is a bounded FIFO with an explicit close(); iterating a channel
blocks until an item arrives and stops once the channel has been closed and
drained. Completion of a group of producers is tracked separately by a
WaitGroup, so a channel shared by many producers is closed exactly once,
after the last of them has finished.
"""

from __future__ import annotations
import queue
import threading
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_CLOSED = object()


class PipelineError(Exception):
    """A pipeline stage thread died with an exception."""


class Channel(Generic[T]):
    def __init__(self, maxsize: int = 1000):
        if maxsize < 1:
            raise ValueError(f"Channel size must be positive, got {maxsize}")
        self._queue: queue.Queue = queue.Queue(maxsize)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, item: T) -> None:
        if self._closed:
            raise ValueError("put on closed channel")
        self._queue.put(item)

    def send_all(self, items: Iterable[T]) -> None:
        for item in items:
            self.put(item)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                raise ValueError("close of closed channel")
            self._closed = True
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                # Hand the marker on so every other consumer also stops
                self._queue.put(_CLOSED)
                return
            yield item


class WaitGroup:
    """Countdown of running producers; wait() returns once it reaches zero."""

    def __init__(self):
        self._count = 0
        self._cond = threading.Condition()

    def add(self, n: int = 1) -> None:
        with self._cond:
            self._count += n
            if self._count < 0:
                raise ValueError("negative WaitGroup counter")
            if self._count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        self.add(-1)

    def wait(self, timeout: Optional[float] = None) -> bool:
        with self._cond:
            return self._cond.wait_for(lambda: self._count == 0, timeout)


class StageFailures:
    """Remembers the first exception raised by any stage thread."""

    def __init__(self):
        self._lock = threading.Lock()
        self.stage: Optional[str] = None
        self.error: Optional[BaseException] = None

    def record(self, stage: str, error: BaseException) -> None:
        with self._lock:
            if self.error is None:
                self.stage = stage
                self.error = error

    def raise_if_failed(self) -> None:
        if self.error is not None:
            raise PipelineError(f"Stage {self.stage!r} failed: {self.error!r}") from self.error


def spawn(
    name: str,
    target: Callable[..., None],
    *args,
    on_exit: Optional[Callable[[], None]] = None,
    failures: Optional[StageFailures] = None,
) -> threading.Thread:
    """
    Run target(*args) in a daemon thread.

    on_exit runs however the target finishes, which is where a stage closes
    its output channel or marks itself done. Exceptions go to failures when
    given, otherwise they propagate in the thread as usual.
    """
    def run():
        try:
            target(*args)
        except Exception as e:
            if failures is None:
                raise
            failures.record(name, e)
        finally:
            if on_exit is not None:
                on_exit()

    thread = threading.Thread(target=run, name=name, daemon=True)
    thread.start()
    return thread


def close_when_done(group: WaitGroup, channel: Channel) -> None:
    group.wait()
    channel.close()
