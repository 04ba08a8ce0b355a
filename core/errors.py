"""core/errors.py - 表达式处理各阶段的异常"""


class ExpressionError(ValueError):
    """所有表达式相关错误的基类"""


class TokenizeError(ExpressionError):
    """分词阶段错误"""


class UnrecognizedCharacterError(TokenizeError):
    """输入中出现无法识别的字符"""

    def __init__(self, position, character):
        self.position = position
        self.character = character
        super().__init__(f"Unrecognized character {character!r} at position {position}")


class ParseError(ExpressionError):
    """中缀转后缀阶段错误"""


class MismatchedParenthesesError(ParseError):
    def __init__(self, message="Mismatched parentheses in expression"):
        super().__init__(message)


class EvaluationError(ExpressionError):
    """RPN求值阶段错误"""


class MalformedExpressionError(EvaluationError):
    """操作数不足，或求值结束时栈中不是恰好一个值"""


class IntegrationError(ExpressionError):
    """积分参数不合法"""
