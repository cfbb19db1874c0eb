"""Minimal demonstration of the store, dispatcher and one simulated user."""

import threading

from chat_core import Dispatcher, MessageStore
from chat_core.cli.demo import run_demo
from chat_core.simulation import DEFAULT_ROSTER, start_simulated_users

if __name__ == "__main__":
    store = MessageStore()
    dispatcher = Dispatcher(store)
    stop = threading.Event()
    dispatcher.start()
    start_simulated_users(dispatcher, [DEFAULT_ROSTER["Eve"]], stop)
    try:
        run_demo(store, dispatcher)
    finally:
        stop.set()
        dispatcher.stop()
