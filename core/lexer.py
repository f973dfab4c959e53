"""词法分析器 - 表达式字符串 -> Token序列"""
import logging
import re
import string
from collections import namedtuple

from core.token_system import (
    Token, TokenType, OpKind, SYMBOL_TO_OPERATOR, FUNCTION_NAMES
)

logger = logging.getLogger(__name__)

# 被跳过的字符（不会中断词法分析）
LexDiagnostic = namedtuple('LexDiagnostic', ['position', 'char'])

_NUMBER_CHARS = set(string.digits + '.')
_LETTERS = set(string.ascii_letters)
_DECIMAL_PREFIX = re.compile(r'\d*(?:\.\d*)?')


def parse_decimal(literal):
    """取最长的合法十进制前缀转换为 float，"1.2.3" -> 1.2，"." -> nan"""
    prefix = _DECIMAL_PREFIX.match(literal).group(0)
    if not prefix.strip('.'):
        return float('nan')
    return float(prefix)


class Lexer:
    """从左到右逐字符扫描，不回溯；未识别字符静默跳过"""

    @staticmethod
    def _should_insert_mult(tokens, allow_after_number=True):
        """上一个 Token 是否要求插入隐式乘号"""
        if not tokens:
            return False
        last = tokens[-1]
        if last.type == TokenType.VARIABLE or last.is_close_paren():
            return True
        # 数字前面只在 Variable 或 ')' 之后插入
        return allow_after_number and last.type == TokenType.NUMBER

    @staticmethod
    def _classify_identifier(identifier, constants):
        upper = identifier.upper()
        # 常量优先于函数和变量
        if upper in constants:
            return Token.number(constants[upper])
        fn = FUNCTION_NAMES.get(identifier.lower())
        if fn is not None:
            return Token.function(fn)
        return Token.variable(identifier)

    @staticmethod
    def tokenize(expression, constants=None, diagnostics=None):
        """
        Args:
            expression: 表达式字符串
            constants: 大写键的常量表
            diagnostics: 可选列表，收集被跳过字符的 LexDiagnostic
        Returns:
            Token 列表（中缀顺序）
        """
        constants = constants or {}
        tokens = []
        n = len(expression)
        i = 0

        while i < n:
            char = expression[i]

            if char.isspace():
                i += 1
                continue

            if char in _NUMBER_CHARS:
                if Lexer._should_insert_mult(tokens, allow_after_number=False):
                    tokens.append(Token.operator(OpKind.MUL))
                start = i
                while i < n and expression[i] in _NUMBER_CHARS:
                    i += 1
                tokens.append(Token.number(parse_decimal(expression[start:i])))
                continue

            if char in _LETTERS:
                if Lexer._should_insert_mult(tokens):
                    tokens.append(Token.operator(OpKind.MUL))
                start = i
                while i < n and expression[i] in _LETTERS:
                    i += 1
                tokens.append(Lexer._classify_identifier(expression[start:i], constants))
                continue

            if char in SYMBOL_TO_OPERATOR:
                if char == '-' and (not tokens
                                    or tokens[-1].type == TokenType.OPERATOR
                                    or tokens[-1].is_open_paren()):
                    tokens.append(Token.operator(OpKind.UNARY_MINUS))
                else:
                    tokens.append(Token.operator(SYMBOL_TO_OPERATOR[char]))
            elif char == '(':
                if Lexer._should_insert_mult(tokens):
                    tokens.append(Token.operator(OpKind.MUL))
                tokens.append(Token.paren(char))
            elif char == ')':
                tokens.append(Token.paren(char))
            elif char == ',':
                tokens.append(Token.comma())
            else:
                logger.debug(f"Skipping unrecognized character {char!r} at position {i}")
                if diagnostics is not None:
                    diagnostics.append(LexDiagnostic(i, char))
            i += 1

        return tokens
