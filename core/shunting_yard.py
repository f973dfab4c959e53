"""Shunting-Yard 解析器 - 中缀Token序列 -> RPN序列"""
import logging

from core.token_system import TokenType, Associativity, format_tokens

logger = logging.getLogger(__name__)


class ShuntingYard:

    @staticmethod
    def _should_pop(incoming, top):
        if top.type != TokenType.OPERATOR:
            return False
        if incoming.associativity == Associativity.LEFT:
            return incoming.precedence <= top.precedence
        return incoming.precedence < top.precedence

    @staticmethod
    def to_rpn(tokens):
        """
        不做括号匹配检查：多余的 ')' 会弹空栈，多余的 '(' 在结尾被刷到输出，
        由求值器报告为 InvalidExpression。逗号被忽略。
        """
        output = []
        stack = []

        for token in tokens:
            if token.type in (TokenType.NUMBER, TokenType.VARIABLE):
                output.append(token)
            elif token.type == TokenType.FUNCTION:
                stack.append(token)
            elif token.type == TokenType.OPERATOR:
                while stack and ShuntingYard._should_pop(token, stack[-1]):
                    output.append(stack.pop())
                stack.append(token)
            elif token.is_open_paren():
                stack.append(token)
            elif token.is_close_paren():
                while stack and not stack[-1].is_open_paren():
                    output.append(stack.pop())
                if stack and stack[-1].is_open_paren():
                    stack.pop()
                    # 括号组紧跟在函数名后面时，即为该函数的参数
                    if stack and stack[-1].type == TokenType.FUNCTION:
                        output.append(stack.pop())

        while stack:
            output.append(stack.pop())

        logger.debug(f"RPN: {format_tokens(output)}")
        return output
