"""Tests for the keyed in-process guard."""

from __future__ import annotations

import threading
import time

import pytest

from shared.application.locks import KeyedLock, guard_key


def test_same_key_is_exclusive() -> None:
    guard = KeyedLock()
    order = []
    guard.acquire("unit:1")

    def contender():
        guard.acquire("unit:1")
        order.append("contender")
        guard.release("unit:1")

    thread = threading.Thread(target=contender)
    thread.start()
    time.sleep(0.05)
    order.append("holder")
    guard.release("unit:1")
    thread.join(timeout=5)

    assert order == ["holder", "contender"]


def test_different_keys_do_not_block() -> None:
    guard = KeyedLock()
    guard.acquire("unit:1")

    assert guard.acquire("unit:2", timeout=0.1) is True
    guard.release("unit:2")
    guard.release("unit:1")


def test_timeout_returns_false_and_forgets_waiter() -> None:
    guard = KeyedLock()
    guard.acquire("booking:7")

    acquired = []
    thread = threading.Thread(target=lambda: acquired.append(guard.acquire("booking:7", timeout=0.05)))
    thread.start()
    thread.join(timeout=5)

    assert acquired == [False]
    guard.release("booking:7")
    assert len(guard) == 0


def test_entries_are_dropped_after_release() -> None:
    guard = KeyedLock()
    for unit_id in range(50):
        key = guard_key("unit", unit_id)
        guard.acquire(key)
        guard.release(key)

    assert len(guard) == 0


def test_releasing_unknown_key_raises() -> None:
    with pytest.raises(RuntimeError):
        KeyedLock().release("unit:1")
