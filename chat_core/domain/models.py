"""聊天领域的数据模型。

- Message: 存储中的一条聊天记录，创建后不可变。
- MessageInput: 提交给 Dispatcher 的待处理输入，由存储转换为 Message。
- SimulatedUser: 模拟用户的定义（名字、固定台词、发送间隔）。

所有模型都是 frozen dataclass，调用方拿到的对象无法修改存储内部状态。
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

# 广播行与历史列表共用的时间格式
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Message:
    """一条已入库的聊天消息。

    - id: 从 1 开始单调递增的编号，由 MessageStore 分配。
    - user_id: 发送者标识，匹配时大小写不敏感。
    - text: 消息正文。
    - timestamp: 入库时的本地时间。
    """

    id: int
    user_id: str
    text: str
    timestamp: datetime

    def format_timestamp(self, fmt: str = TIMESTAMP_FORMAT) -> str:
        return self.timestamp.strftime(fmt)


@dataclass(frozen=True)
class MessageInput:
    """排队等待 Dispatcher 消费的发送请求。"""

    user_id: str
    text: str


@dataclass(frozen=True)
class SimulatedUser:
    """模拟聊天参与者：按固定间隔循环发送 messages 中的台词。"""

    name: str
    messages: Tuple[str, ...]
    interval: float
