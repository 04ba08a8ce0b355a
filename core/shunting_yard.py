"""core/shunting_yard.py - 调度场算法：中缀Token序列 -> 后缀(RPN)Token序列"""
import logging

from core.errors import MismatchedParenthesesError
from core.token_system import TokenType, Associativity, format_tokens

logger = logging.getLogger(__name__)

_BRACKETS = (TokenType.BRACKET_LEFT, TokenType.BRACKET_RIGHT)


def _should_pop(top, token):
    """栈顶是否应在压入 token 之前弹出到输出"""
    if top.type == TokenType.FUNCTION:
        return True
    if top.type != TokenType.OPERATOR:
        return False
    if top.precedence > token.precedence:
        return True
    return top.precedence == token.precedence and top.associativity == Associativity.LEFT


def to_postfix(infix):
    """
    Args:
        infix: 中缀Token序列（按阅读顺序）
    Returns:
        后缀Token元组，顺序即求值顺序
    Raises:
        MismatchedParenthesesError: 括号不匹配
    """
    output = []
    op_stack = []

    for token in infix:
        if token.type in (TokenType.NUMBER, TokenType.VARIABLE):
            output.append(token)

        elif token.type in (TokenType.FUNCTION, TokenType.BRACKET_LEFT):
            op_stack.append(token)

        elif token.type == TokenType.OPERATOR:
            # 栈为空时直接压入（例如以运算符开头的表达式），由求值器报告操作数不足
            while op_stack and _should_pop(op_stack[-1], token):
                output.append(op_stack.pop())
            op_stack.append(token)

        elif token.type == TokenType.BRACKET_RIGHT:
            while op_stack and op_stack[-1].type != TokenType.BRACKET_LEFT:
                output.append(op_stack.pop())
            if not op_stack:
                logger.error("Mismatched parentheses: ')' without matching '('")
                raise MismatchedParenthesesError("Unmatched ')' in expression")
            op_stack.pop()  # 丢弃左括号

    while op_stack:
        top = op_stack.pop()
        if top.type in _BRACKETS:
            logger.error("Mismatched parentheses: '(' never closed")
            raise MismatchedParenthesesError("Unmatched '(' in expression")
        output.append(top)

    logger.debug(f"Shunted: {format_tokens(output)}")
    return tuple(output)
