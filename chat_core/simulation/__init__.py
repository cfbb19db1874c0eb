"""Simulated chat participants driven by background timers."""

from .senders import (
    ACTIVE_SIMULATED_USERS,
    DEFAULT_ROSTER,
    SimulatedSender,
    default_simulated_users,
    start_simulated_users,
)

__all__ = [
    "ACTIVE_SIMULATED_USERS",
    "DEFAULT_ROSTER",
    "SimulatedSender",
    "default_simulated_users",
    "start_simulated_users",
]
