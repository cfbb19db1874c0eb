"""Application entry point: wires store, dispatcher and simulated users."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import List, Optional, Sequence, TextIO

from chat_core.config.settings import settings
from chat_core.dispatch.dispatcher import Dispatcher
from chat_core.infrastructure.logging.logger import logger
from chat_core.infrastructure.storage.memory_store import MessageStore
from chat_core.simulation.senders import SimulatedSender, default_simulated_users, start_simulated_users

from .demo import run_demo
from .shell import ChatShell

BANNER = "=== Simple Text-Based Chat ===\nType 'help' for commands (in interactive terminals)."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chat-core", description="In-process chat simulator")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--demo", action="store_true", help="Run the scripted demo even on a terminal")
    mode.add_argument("--interactive", action="store_true", help="Run the command shell even without a terminal")
    parser.add_argument("--no-simulation", action="store_true", help="Do not start simulated users")
    return parser


def _is_interactive(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    print(BANNER, flush=True)

    store = MessageStore()
    dispatcher = Dispatcher(store)
    sim_stop = threading.Event()
    senders: List[SimulatedSender] = []
    dispatcher.start()
    try:
        dispatcher.send("System", settings.welcome_message)
        if settings.simulation_enabled and not args.no_simulation:
            senders = start_simulated_users(dispatcher, default_simulated_users(), sim_stop)

        if args.demo:
            interactive = False
        elif args.interactive:
            interactive = True
        else:
            interactive = _is_interactive(sys.stdin)
        logger.info("chat started", extra={"extra": {"interactive": interactive, "simulated": [s.name for s in senders]}})

        if interactive:
            ChatShell(store, dispatcher).run()
        else:
            run_demo(store, dispatcher)
    finally:
        sim_stop.set()
        dispatcher.stop()
        logger.info("chat finished", extra={"extra": {"messages": len(store)}})
    return 0
