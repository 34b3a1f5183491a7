from __future__ import annotations

import threading
import time

import pytest

from musiclister_api.app.core.locks import ReadWriteLock


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    barrier = threading.Barrier(3, timeout=5)
    errors: list[BaseException] = []

    def reader():
        try:
            with lock.read_locked():
                # All three readers must be inside at once to pass.
                barrier.wait()
        except BaseException as exc:  # pragma: no cover - surfaced below
            errors.append(exc)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert not errors
    assert lock.readers == 0


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    lock.acquire_write()
    t = threading.Thread(target=reader)
    t.start()
    assert not entered.wait(timeout=0.2)
    lock.release_write()
    assert entered.wait(timeout=5)
    t.join(timeout=5)
    assert not lock.write_held


def test_writer_waits_for_readers():
    lock = ReadWriteLock()
    acquired = threading.Event()

    def writer():
        with lock.write_locked():
            acquired.set()

    lock.acquire_read()
    t = threading.Thread(target=writer)
    t.start()
    assert not acquired.wait(timeout=0.2)
    lock.release_read()
    assert acquired.wait(timeout=5)
    t.join(timeout=5)


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order: list[str] = []
    writer_done = threading.Event()
    reader_done = threading.Event()

    def writer():
        with lock.write_locked():
            order.append("writer")
        writer_done.set()

    def late_reader():
        with lock.read_locked():
            order.append("reader")
        reader_done.set()

    lock.acquire_read()
    w = threading.Thread(target=writer)
    w.start()
    # Give the writer time to register as waiting.
    deadline = time.monotonic() + 5
    while time.monotonic() < deadline:
        with lock._cond:
            if lock._waiting_writers:
                break
        time.sleep(0.001)
    r = threading.Thread(target=late_reader)
    r.start()
    assert not reader_done.wait(timeout=0.2)

    lock.release_read()
    assert writer_done.wait(timeout=5)
    assert reader_done.wait(timeout=5)
    w.join(timeout=5)
    r.join(timeout=5)
    assert order == ["writer", "reader"]


def test_unbalanced_release_is_rejected():
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


class _InterruptingCondition(threading.Condition):
    """Condition whose first ``wait`` raises, recording ``notify_all`` calls."""

    def __init__(self):
        super().__init__(threading.Lock())
        self.notified = 0
        self._raised = False

    def wait(self, timeout=None):
        if not self._raised:
            self._raised = True
            raise RuntimeError("interrupted")
        return super().wait(timeout)

    def notify_all(self):
        self.notified += 1
        super().notify_all()


def test_interrupted_writer_wakes_queued_readers():
    lock = ReadWriteLock()
    lock._cond = _InterruptingCondition()

    lock.acquire_read()
    with pytest.raises(RuntimeError, match="interrupted"):
        lock.acquire_write()

    assert lock._cond.notified == 1
    assert lock._waiting_writers == 0
    assert not lock.write_held

    # A new reader is not held back by the abandoned writer.
    entered = threading.Event()

    def reader():
        with lock.read_locked():
            entered.set()

    t = threading.Thread(target=reader)
    t.start()
    assert entered.wait(timeout=5)
    t.join(timeout=5)
    lock.release_read()
    assert lock.readers == 0
