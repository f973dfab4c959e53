"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"      # 数值字面量（常量在词法阶段已替换为数值）
    OPERATOR = "operator"  # + - * / % ^ 以及一元负号
    FUNCTION = "function"  # 白名单内的一元函数
    PAREN = "paren"        # ( 或 )
    COMMA = "comma"        # 词法层识别，解析器不消费
    VARIABLE = "variable"  # 求值时从 scope 查找


class Associativity(Enum):
    LEFT = "Left"
    RIGHT = "Right"


class OpKind(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"
    UNARY_MINUS = "u-"


class FnKind(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    LOG = "log"
    LN = "ln"
    SQRT = "sqrt"
    ABS = "abs"


class OperatorDef:
    def __init__(self, kind, precedence, associativity, arity=2):
        self.kind = kind
        self.precedence = precedence
        self.associativity = associativity
        self.arity = arity


# 操作符定义：一元负号比 + - * / % 结合更紧，比 ^ 更松，右结合
OPERATOR_DEFINITIONS = {
    OpKind.ADD: OperatorDef(OpKind.ADD, 1, Associativity.LEFT),
    OpKind.SUB: OperatorDef(OpKind.SUB, 1, Associativity.LEFT),
    OpKind.MUL: OperatorDef(OpKind.MUL, 2, Associativity.LEFT),
    OpKind.DIV: OperatorDef(OpKind.DIV, 2, Associativity.LEFT),
    OpKind.MOD: OperatorDef(OpKind.MOD, 2, Associativity.LEFT),
    OpKind.UNARY_MINUS: OperatorDef(OpKind.UNARY_MINUS, 3, Associativity.RIGHT, arity=1),
    OpKind.POW: OperatorDef(OpKind.POW, 4, Associativity.RIGHT),
}

# 字符 -> 二元操作符
SYMBOL_TO_OPERATOR = {
    '+': OpKind.ADD,
    '-': OpKind.SUB,
    '*': OpKind.MUL,
    '/': OpKind.DIV,
    '%': OpKind.MOD,
    '^': OpKind.POW,
}

FUNCTION_NAMES = {fn.value: fn for fn in FnKind}


class Token:
    """不可变的词法单元"""

    __slots__ = ('type', 'value')

    def __init__(self, token_type, value):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"

    # 便捷构造
    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, kind):
        return cls(TokenType.OPERATOR, kind)

    @classmethod
    def function(cls, kind):
        return cls(TokenType.FUNCTION, kind)

    @classmethod
    def paren(cls, char):
        return cls(TokenType.PAREN, char)

    @classmethod
    def comma(cls):
        return cls(TokenType.COMMA, ',')

    @classmethod
    def variable(cls, name):
        return cls(TokenType.VARIABLE, name)

    def is_open_paren(self):
        return self.type == TokenType.PAREN and self.value == '('

    def is_close_paren(self):
        return self.type == TokenType.PAREN and self.value == ')'

    @property
    def precedence(self):
        return OPERATOR_DEFINITIONS[self.value].precedence

    @property
    def associativity(self):
        return OPERATOR_DEFINITIONS[self.value].associativity


def format_tokens(tokens):
    """把 Token 序列格式化为可读字符串（日志用）"""
    parts = []
    for tk in tokens:
        if tk.type == TokenType.NUMBER:
            parts.append(repr(tk.value))
        elif tk.type in (TokenType.OPERATOR, TokenType.FUNCTION):
            parts.append(tk.value.value)
        else:
            parts.append(str(tk.value))
    return ' '.join(parts)
