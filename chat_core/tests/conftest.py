"""Pytest configuration and shared fixtures."""

import os
import tempfile
import threading
import time

import pytest

# settings/logger are built at import time; keep test logs out of the working tree
os.environ.setdefault("CHAT_CORE_LOG_DIR", tempfile.mkdtemp(prefix="chat-core-logs-"))

from chat_core.infrastructure.storage.memory_store import MessageStore  # noqa: E402


class SyncDispatcher:
    """Writes straight into the store so CLI tests can read results immediately."""

    def __init__(self, store: MessageStore):
        self.store = store
        self.sent = []

    def send(self, user_id: str, text: str) -> None:
        self.sent.append((user_id, text))
        self.store.add(user_id, text)


def _wait_for(predicate, timeout: float = 2.0, step: float = 0.01) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(step)
    return predicate()


@pytest.fixture
def store() -> MessageStore:
    return MessageStore()


@pytest.fixture
def sync_dispatcher(store: MessageStore) -> SyncDispatcher:
    return SyncDispatcher(store)


@pytest.fixture
def wait_for():
    return _wait_for


@pytest.fixture
def stop_event():
    ev = threading.Event()
    yield ev
    ev.set()
