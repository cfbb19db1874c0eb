"""History listing helpers shared by the shell and the demo."""

from __future__ import annotations

from typing import Iterable, List, TextIO

from chat_core.domain.models import TIMESTAMP_FORMAT, Message

NO_MESSAGES = "No messages found."


def format_message(msg: Message, fmt: str = TIMESTAMP_FORMAT) -> str:
    return f"#{msg.id} [{msg.format_timestamp(fmt)}] {msg.user_id}: {msg.text}"


def render_messages(msgs: Iterable[Message], fmt: str = TIMESTAMP_FORMAT) -> List[str]:
    lines = [format_message(m, fmt) for m in msgs]
    return lines or [NO_MESSAGES]


def print_messages(msgs: Iterable[Message], out: TextIO, fmt: str = TIMESTAMP_FORMAT) -> None:
    for line in render_messages(msgs, fmt):
        out.write(line + "\n")
    out.flush()
