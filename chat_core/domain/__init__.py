"""领域层模型与异常。

包含：
- models: Message / MessageInput / SimulatedUser 值对象。
- exceptions: 业务异常类型定义。
"""

from .exceptions import (
    BusinessError,
    DispatcherClosedError,
    DispatcherStateError,
    ValidationError,
)
from .models import TIMESTAMP_FORMAT, Message, MessageInput, SimulatedUser

__all__ = [
    "BusinessError",
    "DispatcherClosedError",
    "DispatcherStateError",
    "ValidationError",
    "TIMESTAMP_FORMAT",
    "Message",
    "MessageInput",
    "SimulatedUser",
]
