"""编译后的表达式 - 只做一次词法和解析，反复求值"""

from core.errors import EvalError, EvalResult
from core.rpn_evaluator import RPNEvaluator


class CompiledExpression:
    """
    持有不可变的 RPN 序列和共享的 EngineConfig 句柄。
    每次调用实时读取 config.angle_mode，不做快照；
    也可以在调用时显式传入另一份 config。
    """

    def __init__(self, expression, rpn, config):
        self.expression = expression
        self.rpn = tuple(rpn)
        self.config = config

    def __call__(self, scope=None, config=None):
        """求值，失败时抛出 EvalError"""
        return RPNEvaluator.evaluate(self.rpn, scope, config or self.config)

    def try_evaluate(self, scope=None, config=None):
        """求值，返回 EvalResult 而不是抛异常"""
        try:
            return EvalResult(value=self(scope, config))
        except EvalError as e:
            return EvalResult(error=e)

    def __repr__(self):
        return f"CompiledExpression({self.expression!r})"
