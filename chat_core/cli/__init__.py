"""Command-line front end: interactive shell, scripted demo and entry point."""

from .app import main
from .shell import ChatShell
from .demo import run_demo

__all__ = ["main", "ChatShell", "run_demo"]
