"""Message dispatch (bounded queue + single consumer)."""

from .dispatcher import Dispatcher, DispatcherState

__all__ = ["Dispatcher", "DispatcherState"]
