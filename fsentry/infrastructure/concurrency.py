import threading
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from fsentry.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ReadWriteLock:
    """In-process lock allowing many readers or one writer

    Waiting writers block new readers so a stream of reads cannot
    starve a mutation. There is no timeout: callers wait indefinitely.
    """

    def __init__(self, name: str = "store"):
        self.name = name
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

        self._metrics = {
            "read_acquisitions": 0,
            "write_acquisitions": 0,
            "contentions": 0,
        }

    def acquire_read(self) -> None:
        with self._cond:
            if self._writer or self._waiting_writers:
                self._metrics["contentions"] += 1
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1
            self._metrics["read_acquisitions"] += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a held read lock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            if self._writer or self._readers:
                self._metrics["contentions"] += 1
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True
            self._metrics["write_acquisitions"] += 1

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without a held write lock")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """Hold the lock in shared mode"""
        start_time = time.monotonic()
        self.acquire_read()
        logger.debug(
            "lock_acquired",
            lock=self.name,
            exclusive=False,
            wait=time.monotonic() - start_time,
        )
        try:
            yield
        finally:
            self.release_read()
            logger.debug("lock_released", lock=self.name, exclusive=False)

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """Hold the lock in exclusive mode"""
        start_time = time.monotonic()
        self.acquire_write()
        logger.debug(
            "lock_acquired",
            lock=self.name,
            exclusive=True,
            wait=time.monotonic() - start_time,
        )
        try:
            yield
        finally:
            self.release_write()
            logger.debug("lock_released", lock=self.name, exclusive=True)

    @property
    def readers(self) -> int:
        with self._cond:
            return self._readers

    @property
    def has_writer(self) -> bool:
        with self._cond:
            return self._writer

    def get_metrics(self) -> Dict[str, Any]:
        with self._cond:
            return {
                **self._metrics,
                "active_readers": self._readers,
                "writer_active": self._writer,
                "waiting_writers": self._waiting_writers,
            }
