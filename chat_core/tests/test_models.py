from datetime import datetime

from chat_core.cli.formatting import NO_MESSAGES, format_message, render_messages
from chat_core.domain.exceptions import BusinessError, DispatcherClosedError, ValidationError
from chat_core.domain.models import Message, MessageInput


def test_models_exist():
    ts = datetime(2026, 10, 17, 9, 5, 3)
    m = Message(id=1, user_id="Alice", text="hi", timestamp=ts)
    assert m.format_timestamp() == "2026-10-17 09:05:03"
    assert MessageInput(user_id="Bob", text="yo").user_id == "Bob"


def test_format_message_line():
    m = Message(id=7, user_id="Bob", text="yo there", timestamp=datetime(2026, 1, 2, 3, 4, 5))
    assert format_message(m) == "#7 [2026-01-02 03:04:05] Bob: yo there"
    assert render_messages([]) == [NO_MESSAGES]


def test_error_codes():
    err = DispatcherClosedError(user_id="Alice")
    assert isinstance(err, BusinessError)
    assert err.code == "DISPATCHER_CLOSED"
    assert err.extra == {"user_id": "Alice"}
    assert ValidationError("bad").code == "VALIDATION_ERROR"
