"""核心模块 - 词法分析、Shunting-Yard解析、RPN求值器和计算器门面"""
from .token_system import (
    TokenType, OpKind, FnKind, Associativity, Token,
    OPERATOR_DEFINITIONS, FUNCTION_NAMES
)
from .errors import EvalError, UnknownVariable, UnknownFunction, InvalidExpression, EvalResult
from .engine_config import AngleMode, EngineConfig
from .lexer import Lexer, LexDiagnostic
from .shunting_yard import ShuntingYard
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .compiled import CompiledExpression
from .engine import Calculator, HistoryEntry, ERROR, is_error

__all__ = [
    'TokenType', 'OpKind', 'FnKind', 'Associativity', 'Token',
    'OPERATOR_DEFINITIONS', 'FUNCTION_NAMES',
    'EvalError', 'UnknownVariable', 'UnknownFunction', 'InvalidExpression', 'EvalResult',
    'AngleMode', 'EngineConfig', 'Lexer', 'LexDiagnostic', 'ShuntingYard',
    'RPNEvaluator', 'Operators', 'CompiledExpression',
    'Calculator', 'HistoryEntry', 'ERROR', 'is_error'
]
