"""Reader/writer lock shared by buffers and codec registries."""

import threading
from contextlib import contextmanager
from typing import Iterator


class RWLock:
    """
    Reader/writer lock for threads.

    Any number of readers may hold the lock at once; a writer holds it
    alone. Neither side is reentrant: a thread holding the lock must not
    acquire it again.
    """

    def __init__(self) -> None:
        self._readers = 0
        self._readers_lock = threading.Lock()
        self._writer_lock = threading.Lock()

    @contextmanager
    def read(self) -> Iterator[None]:
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Iterator[None]:
        self._writer_lock.acquire()
        try:
            yield
        finally:
            self._writer_lock.release()

    def _acquire_read(self) -> None:
        with self._readers_lock:
            self._readers += 1
            if self._readers == 1:
                # first reader blocks writers
                self._writer_lock.acquire()

    def _release_read(self) -> None:
        with self._readers_lock:
            self._readers -= 1
            if self._readers == 0:
                # last reader releases writer lock
                self._writer_lock.release()
