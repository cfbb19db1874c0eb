"""Chat Core 顶层包。

该包提供一个单进程聊天模拟器的核心实现，
包括配置加载、领域模型、线程安全的消息存储、
单消费者 Dispatcher、定时模拟用户以及命令行交互。
"""

from chat_core.dispatch import Dispatcher
from chat_core.infrastructure.storage.memory_store import MessageStore

__all__ = ["Dispatcher", "MessageStore"]
