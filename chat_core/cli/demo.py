"""Scripted demo used when stdin is not a terminal."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO

from chat_core.config.settings import settings
from chat_core.dispatch.dispatcher import Dispatcher
from chat_core.infrastructure.logging.logger import logger
from chat_core.infrastructure.storage.memory_store import MessageStore

from .formatting import print_messages

# (delay before, user, text); a None user means "just wait"
DEMO_SCRIPT = (
    (1.2, "Eve", "I'll join the meeting in 10 mins."),
    (0.8, "Tester", "This is a demo from Tester."),
    (3.2, None, None),
)
DEMO_FILTER_USER = "Alice"
DEMO_KEYWORD = "meeting"


def run_demo(
    store: MessageStore,
    dispatcher: Dispatcher,
    *,
    out: Optional[TextIO] = None,
    delay_scale: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    out = out or sys.stdout
    scale = settings.demo_delay_scale if delay_scale is None else delay_scale
    fmt = settings.timestamp_format
    logger.info("demo started", extra={"extra": {"delay_scale": scale}})

    out.write("\n[demo mode] Non-interactive environment detected. Running automated demo...\n\n")
    out.flush()
    for delay, user_id, text in DEMO_SCRIPT:
        sleep(delay * scale)
        if user_id is not None:
            dispatcher.send(user_id, text)

    out.write("\n--- Full history ---\n")
    print_messages(store.all(), out, fmt)

    out.write(f"\n--- Messages by user: {DEMO_FILTER_USER} ---\n")
    print_messages(store.filter_by_user(DEMO_FILTER_USER), out, fmt)

    out.write(f"\n--- Search keyword: {DEMO_KEYWORD} ---\n")
    print_messages(store.search_by_keyword(DEMO_KEYWORD), out, fmt)

    out.write("\n[demo mode] Demo complete. Exiting.\n")
    out.flush()
    logger.info("demo finished", extra={"extra": {"messages": len(store)}})
