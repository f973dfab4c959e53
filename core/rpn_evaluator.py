"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import UnknownVariable, UnknownFunction, InvalidExpression
from core.engine_config import EngineConfig
from core.operators import Operators, BINARY_KERNELS
from core.token_system import TokenType, OPERATOR_DEFINITIONS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _pop(stack, token):
        if not stack:
            raise InvalidExpression(f"Insufficient operands for {token.value.value}")
        return stack.pop()

    @staticmethod
    def evaluate(rpn, scope=None, config=None):
        """
        Args:
            rpn: 后缀顺序的 Token 序列
            scope: 变量名 -> 数值
            config: EngineConfig，只读取 angle_mode
        Returns:
            float
        Raises:
            UnknownVariable / UnknownFunction / InvalidExpression
        """
        scope = scope or {}
        degrees = (config or EngineConfig()).degrees
        stack = []

        for token in rpn:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.VARIABLE:
                if token.value not in scope:
                    raise UnknownVariable(token.value)
                stack.append(float(scope[token.value]))

            elif token.type == TokenType.OPERATOR:
                # ================== 一元负号 ==================
                if OPERATOR_DEFINITIONS[token.value].arity == 1:
                    a = RPNEvaluator._pop(stack, token)
                    stack.append(Operators.neg(a))
                # ================== 二元操作符 ==================
                else:
                    b = RPNEvaluator._pop(stack, token)
                    a = RPNEvaluator._pop(stack, token)
                    stack.append(BINARY_KERNELS[token.value.value](a, b))

            elif token.type == TokenType.FUNCTION:
                op_method = getattr(Operators, token.value.value, None)
                if op_method is None:
                    raise UnknownFunction(token.value.value)
                arg = RPNEvaluator._pop(stack, token)
                stack.append(op_method(arg, degrees=degrees))

            else:
                # 未匹配的括号或逗号
                raise InvalidExpression(f"Unexpected token in RPN: {token.value!r}")

        if len(stack) != 1:
            logger.debug(f"RPN left {len(stack)} value(s) on the stack: {stack}")
            raise InvalidExpression(f"Stack has {len(stack)} elements after evaluation, expected 1")
        return stack[0]
