"""Tests for the reader/writer lock."""

from __future__ import annotations

import threading

from byteslice.lock import RWLock


def test_readers_share_the_lock() -> None:
    """Two readers can hold the lock at the same time."""
    lock = RWLock()
    inside = threading.Barrier(2, timeout=5)

    def reader() -> None:
        with lock.read():
            inside.wait()

    other = threading.Thread(target=reader)
    other.start()
    reader()
    other.join(timeout=5)

    assert not other.is_alive()


def test_writer_waits_for_readers() -> None:
    """A writer is blocked until the last reader leaves."""
    lock = RWLock()
    events = []
    writer_started = threading.Event()

    def writer() -> None:
        writer_started.set()
        with lock.write():
            events.append("write")

    with lock.read():
        thread = threading.Thread(target=writer)
        thread.start()
        writer_started.wait(timeout=5)
        thread.join(timeout=0.1)
        events.append("read done")

    thread.join(timeout=5)

    assert events == ["read done", "write"]


def test_writer_excludes_readers() -> None:
    """A reader is blocked while a writer holds the lock."""
    lock = RWLock()
    events = []
    reader_started = threading.Event()

    def reader() -> None:
        reader_started.set()
        with lock.read():
            events.append("read")

    with lock.write():
        thread = threading.Thread(target=reader)
        thread.start()
        reader_started.wait(timeout=5)
        thread.join(timeout=0.1)
        events.append("write done")

    thread.join(timeout=5)

    assert events == ["write done", "read"]
