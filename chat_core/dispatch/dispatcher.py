"""Single-consumer relay between message producers and the store."""

from __future__ import annotations

import queue
import sys
import threading
from typing import Literal, Optional, TextIO

from chat_core.config.settings import settings
from chat_core.domain.exceptions import DispatcherClosedError, DispatcherStateError, ValidationError
from chat_core.domain.models import Message, MessageInput
from chat_core.infrastructure.logging.logger import logger
from chat_core.infrastructure.storage.memory_store import MessageStore


DispatcherState = Literal["created", "running", "stopped"]


class Dispatcher:
    """Serializes every write into the store and broadcasts each stored message.

    Producers call :meth:`send`, which enqueues onto a bounded FIFO queue and
    blocks while it is full. One background thread drains the queue in
    arrival order, performing ``store.add`` followed by :meth:`broadcast`.

    Lifecycle is ``created -> running -> stopped``; there is no restart.
    :meth:`stop` does not drain: inputs still queued at that moment are
    discarded, and any later (or still blocked) :meth:`send` raises
    :class:`DispatcherClosedError`.
    """

    def __init__(
        self,
        store: MessageStore,
        *,
        capacity: Optional[int] = None,
        poll_interval: Optional[float] = None,
        out: Optional[TextIO] = None,
        timestamp_format: Optional[str] = None,
    ) -> None:
        self._store = store
        self._capacity = settings.queue_capacity if capacity is None else capacity
        if self._capacity < 1:
            raise ValidationError("queue capacity must be at least 1", capacity=self._capacity)
        self._poll = settings.poll_interval if poll_interval is None else poll_interval
        self._out = out
        self._timestamp_format = timestamp_format or settings.timestamp_format
        self._incoming: "queue.Queue[MessageInput]" = queue.Queue(maxsize=self._capacity)
        self._quit = threading.Event()
        self._state_lock = threading.Lock()
        self._state: DispatcherState = "created"
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> DispatcherState:
        return self._state

    @property
    def capacity(self) -> int:
        return self._capacity

    def pending(self) -> int:
        """Approximate number of inputs waiting in the queue."""
        return self._incoming.qsize()

    def start(self) -> None:
        with self._state_lock:
            if self._state != "created":
                raise DispatcherStateError(f"cannot start dispatcher in state '{self._state}'", state=self._state)
            self._state = "running"
            self._thread = threading.Thread(target=self._run, name="dispatcher", daemon=True)
            self._thread.start()
        logger.info("dispatcher started", extra={"extra": {"capacity": self._capacity}})

    def stop(self) -> None:
        with self._state_lock:
            if self._quit.is_set():
                return
            self._quit.set()
            self._state = "stopped"
        discarded = self._discard_pending()
        logger.info("dispatcher stopped", extra={"extra": {"discarded": discarded}})

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the consumer thread to exit. Returns True if it has."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def send(self, user_id: str, text: str) -> None:
        item = MessageInput(user_id=user_id, text=text)
        while True:
            # state check and enqueue are atomic with respect to stop()
            with self._state_lock:
                if self._quit.is_set():
                    logger.warning("send rejected, dispatcher stopped", extra={"extra": {"user_id": user_id}})
                    raise DispatcherClosedError(user_id=user_id)
                try:
                    self._incoming.put_nowait(item)
                    return
                except queue.Full:
                    pass
            self._quit.wait(self._poll)

    def broadcast(self, msg: Message) -> None:
        out = self._out or sys.stdout
        print(f"[{msg.format_timestamp(self._timestamp_format)}] {msg.user_id}: {msg.text}", file=out, flush=True)

    def _run(self) -> None:
        while not self._quit.is_set():
            try:
                item = self._incoming.get(timeout=self._poll)
            except queue.Empty:
                continue
            if self._quit.is_set():
                break
            msg = self._store.add(item.user_id, item.text)
            self.broadcast(msg)
        logger.debug("dispatcher consumer exited")

    def _discard_pending(self) -> int:
        count = 0
        while True:
            try:
                self._incoming.get_nowait()
            except queue.Empty:
                return count
            count += 1
