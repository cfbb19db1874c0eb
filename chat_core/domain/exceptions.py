"""统一业务异常模型。

所有跨模块抛出的业务级错误都应该继承自 BusinessError，
便于在 CLI 层做统一捕获与用户提示。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "DISPATCHER_CLOSED"）。
        message: 用户可读错误信息。
        extra: 其他补充字段（例如 user_id、state 等）。
    """

    def __init__(self, code: str, message: str, **extra):
        self.code = code
        self.message = message
        self.extra = extra
        super().__init__(message)


class ValidationError(BusinessError):
    """参数或配置校验失败。"""

    def __init__(self, message: str, **extra):
        super().__init__("VALIDATION_ERROR", message, **extra)


class DispatcherClosedError(BusinessError):
    """Dispatcher 已停止后仍然调用 send 时抛出。"""

    def __init__(self, message: str = "dispatcher is stopped; message rejected", **extra):
        super().__init__("DISPATCHER_CLOSED", message, **extra)


class DispatcherStateError(BusinessError):
    """非法的生命周期切换，例如重复 start 或 stop 之后再 start。"""

    def __init__(self, message: str, **extra):
        super().__init__("DISPATCHER_STATE_ERROR", message, **extra)
