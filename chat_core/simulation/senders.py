"""Timer-driven simulated chat participants."""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional, Sequence

from chat_core.dispatch.dispatcher import Dispatcher
from chat_core.domain.exceptions import DispatcherClosedError, ValidationError
from chat_core.domain.models import SimulatedUser
from chat_core.infrastructure.logging.logger import logger


DEFAULT_ROSTER = {
    "Alice": SimulatedUser(
        name="Alice",
        messages=("Hello!", "Anyone up for coffee?", "I am debugging Python code."),
        interval=3.0,
    ),
    "Bob": SimulatedUser(
        name="Bob",
        messages=("Hey all", "I pushed a change to the repo", "Will test now"),
        interval=5.0,
    ),
    "Eve": SimulatedUser(
        name="Eve",
        messages=("Good morning :)", "Reminder: meeting at 3pm", "Nice work team!"),
        interval=4.0,
    ),
}

# Eve stays in the roster but is only driven by manual/demo sends.
ACTIVE_SIMULATED_USERS = ("Alice", "Bob")


class SimulatedSender:
    """Sends ``messages`` round-robin through ``dispatcher`` every ``interval`` seconds.

    The first message goes out one interval after :meth:`start`. The loop
    ends when ``stop_event`` is set, or when the dispatcher rejects a send
    because it has been stopped.
    """

    def __init__(
        self,
        name: str,
        dispatcher: Dispatcher,
        messages: Sequence[str],
        interval: float,
        stop_event: threading.Event,
    ) -> None:
        if not messages:
            raise ValidationError("simulated user needs at least one message", name=name)
        if interval <= 0:
            raise ValidationError("simulated user interval must be positive", name=name, interval=interval)
        self.name = name
        self._dispatcher = dispatcher
        self._messages = tuple(messages)
        self._interval = interval
        self._stop = stop_event
        self._sent = 0
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def from_user(cls, user: SimulatedUser, dispatcher: Dispatcher, stop_event: threading.Event) -> "SimulatedSender":
        return cls(user.name, dispatcher, user.messages, user.interval, stop_event)

    @property
    def sent(self) -> int:
        return self._sent

    def start(self) -> None:
        self._thread = threading.Thread(target=self._run, name=f"sim-{self.name}", daemon=True)
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> bool:
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _run(self) -> None:
        logger.info("simulated sender started", extra={"extra": {"user_id": self.name, "interval": self._interval}})
        idx = 0
        while not self._stop.wait(self._interval):
            try:
                self._dispatcher.send(self.name, self._messages[idx % len(self._messages)])
            except DispatcherClosedError:
                logger.info("simulated sender exiting, dispatcher closed", extra={"extra": {"user_id": self.name}})
                return
            idx += 1
            self._sent += 1
        logger.info("simulated sender stopped", extra={"extra": {"user_id": self.name, "sent": self._sent}})


def start_simulated_users(
    dispatcher: Dispatcher,
    users: Iterable[SimulatedUser],
    stop_event: threading.Event,
) -> List[SimulatedSender]:
    """Start one sender per user; setting ``stop_event`` stops all of them."""
    senders = [SimulatedSender.from_user(u, dispatcher, stop_event) for u in users]
    for sender in senders:
        sender.start()
    return senders


def default_simulated_users() -> List[SimulatedUser]:
    return [DEFAULT_ROSTER[name] for name in ACTIVE_SIMULATED_USERS]
