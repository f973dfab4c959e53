"""求值错误类型"""


class EvalError(Exception):
    """求值失败的基类，kind 用于区分错误种类"""
    kind = "eval_error"


class UnknownVariable(EvalError):
    kind = "unknown_variable"

    def __init__(self, name):
        super().__init__(f"Unknown variable: {name}")
        self.name = name


class UnknownFunction(EvalError):
    kind = "unknown_function"

    def __init__(self, name):
        super().__init__(f"Unknown function: {name}")
        self.name = name


class InvalidExpression(EvalError):
    kind = "invalid_expression"

    def __init__(self, reason="Invalid expression"):
        super().__init__(reason)
        self.reason = reason


class EvalResult:
    """求值结果：成功时有 value，失败时有 error"""

    __slots__ = ('value', 'error')

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @property
    def ok(self):
        return self.error is None

    @property
    def kind(self):
        return None if self.error is None else self.error.kind

    def __repr__(self):
        if self.ok:
            return f"EvalResult(value={self.value!r})"
        return f"EvalResult(error={self.error!r})"
