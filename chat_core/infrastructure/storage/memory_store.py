"""线程安全的内存消息存储。

写操作（add）持有独占写锁，读操作（all / filter_by_user / search_by_keyword / users）
持有共享读锁：读者之间互不阻塞，写者排斥所有人。
所有读操作都是线性扫描，不建索引。
"""

import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List

from chat_core.domain.models import Message


class ReadWriteLock:
    """多读单写锁。等待中的写者会阻止新读者进入，避免写者饥饿。"""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class MessageStore:
    """只追加的聊天历史。

    id 从 1 开始严格递增，追加顺序即到达存储的顺序。
    返回给调用方的总是新的 list，Message 本身不可变。
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._messages: List[Message] = []
        self._next_id = 1

    def add(self, user_id: str, text: str) -> Message:
        with self._lock.write_locked():
            msg = Message(id=self._next_id, user_id=user_id, text=text, timestamp=datetime.now())
            self._messages.append(msg)
            self._next_id += 1
            return msg

    def all(self) -> List[Message]:
        with self._lock.read_locked():
            return list(self._messages)

    def filter_by_user(self, user_id: str) -> List[Message]:
        """按发送者过滤，大小写不敏感。"""
        wanted = user_id.casefold()
        with self._lock.read_locked():
            return [m for m in self._messages if m.user_id.casefold() == wanted]

    def search_by_keyword(self, keyword: str) -> List[Message]:
        """按正文子串搜索，大小写不敏感；空关键字匹配全部。"""
        needle = keyword.casefold()
        with self._lock.read_locked():
            return [m for m in self._messages if needle in m.text.casefold()]

    def users(self) -> List[str]:
        """按首次出现顺序返回去重后的发送者。"""
        seen: dict[str, None] = {}
        with self._lock.read_locked():
            for m in self._messages:
                seen.setdefault(m.user_id, None)
        return list(seen)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._messages)
