"""计算器引擎 - 词法 -> Shunting-Yard -> RPN求值，附带历史记录和存储器"""
import logging
from collections import namedtuple

import numpy as np
import pandas as pd

from config.config import ENGINE_CONFIG
from core.compiled import CompiledExpression
from core.engine_config import EngineConfig, AngleMode
from core.errors import EvalError, EvalResult
from core.lexer import Lexer
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import ShuntingYard

logger = logging.getLogger(__name__)

# evaluate 失败时返回的标记，只能被识别为"不是数字"
ERROR = float('nan')


def is_error(value):
    return isinstance(value, float) and np.isnan(value)


# 一条历史记录：(表达式, 结果)
HistoryEntry = namedtuple('HistoryEntry', ['expression', 'result'])


class Calculator:
    """
    对外的引擎门面。

    evaluate() 沿用单一错误标记的约定；需要区分错误种类时用 evaluate_result()。
    只有 scope 为空的成功求值才写入历史（绘图采样传入 {x: ...}，不会写入）。
    """

    def __init__(self, config=None, history_limit=None):
        if config is None:
            config = EngineConfig.from_dict(ENGINE_CONFIG)
        self.config = config
        if history_limit is None:
            history_limit = ENGINE_CONFIG.get('history_limit')
        self.history_limit = history_limit
        self.history = []
        self.memory = 0.0

    # ---- 配置 ----
    @property
    def angle_mode(self):
        return self.config.angle_mode

    @angle_mode.setter
    def angle_mode(self, mode):
        self.config.angle_mode = mode

    def set_angle_mode(self, mode):
        self.config.angle_mode = AngleMode(mode)
        logger.debug(f"Angle mode set to {self.config.angle_mode.value}")

    @property
    def constants(self):
        return self.config.constants

    # ---- 管线 ----
    def tokenize(self, expression, diagnostics=None):
        return Lexer.tokenize(expression, self.config.constants, diagnostics)

    @staticmethod
    def to_rpn(tokens):
        return ShuntingYard.to_rpn(tokens)

    def evaluate_result(self, expression, scope=None):
        """
        Args:
            expression: 中缀表达式
            scope: 变量绑定，为空时成功结果写入历史
        Returns:
            EvalResult，失败时带具体的 EvalError
        """
        try:
            rpn = self.to_rpn(self.tokenize(expression))
            result = RPNEvaluator.evaluate(rpn, scope, self.config)
        except EvalError as e:
            logger.error(f"Error evaluating '{expression}': {e}")
            return EvalResult(error=e)

        if not scope:
            self._record(expression, result)
        return EvalResult(value=result)

    def evaluate(self, expression, scope=None):
        """成功返回 float，失败返回 ERROR（nan）"""
        outcome = self.evaluate_result(expression, scope)
        return outcome.value if outcome.ok else ERROR

    def compile(self, expression):
        """一次词法+解析，返回可重复调用的 CompiledExpression；失败返回 None"""
        try:
            rpn = self.to_rpn(self.tokenize(expression))
        except Exception as e:
            logger.error(f"Failed to compile '{expression}': {e}")
            return None
        return CompiledExpression(expression, rpn, self.config)

    # ---- 历史记录 ----
    def _record(self, expression, result):
        self.history.append(HistoryEntry(expression, result))
        if self.history_limit is not None and len(self.history) > self.history_limit:
            del self.history[:len(self.history) - self.history_limit]

    def clear_history(self):
        self.history = []

    def history_frame(self):
        """历史记录转为 DataFrame（expression, result）"""
        return pd.DataFrame(
            [tuple(entry) for entry in self.history],
            columns=['expression', 'result']
        )

    # ---- 存储器 ----
    def memory_store(self, value):
        self.memory = float(value)

    def memory_add(self, value):
        self.memory += float(value)

    def memory_subtract(self, value):
        self.memory -= float(value)

    def memory_recall(self):
        return self.memory

    def memory_clear(self):
        self.memory = 0.0
