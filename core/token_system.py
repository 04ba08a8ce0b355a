"""core/token_system.py"""
from collections import namedtuple
from enum import Enum

from core.errors import MalformedExpressionError


class TokenType(Enum):
    NUMBER = "number"
    VARIABLE = "variable"
    OPERATOR = "operator"
    FUNCTION = "function"
    BRACKET_LEFT = "bracket_left"
    BRACKET_RIGHT = "bracket_right"


class OperatorType(Enum):
    # 值与 Operators 中的方法名一致
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"


class FunctionType(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    LN = "ln"    # 自然对数
    EXP = "exp"  # e^x
    LOG = "log"  # 以10为底


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token(namedtuple('Token', ['type', 'kind', 'value', 'precedence', 'associativity'],
                       defaults=(None, None, None, None))):
    """
    不可变Token
    - NUMBER: value 为 float
    - OPERATOR: kind 为 OperatorType，附带 precedence / associativity
    - FUNCTION: kind 为 FunctionType
    - VARIABLE / 括号: 只有 type
    """
    __slots__ = ()

    @property
    def name(self):
        """操作符/函数返回 Operators 方法名，其余返回类型名"""
        if self.kind is not None:
            return self.kind.value
        return self.type.value

    @property
    def arity(self):
        return ARITY.get(self.type, 0)

    def __repr__(self):
        return f"Token({format_token(self)!r})"


# 操作符元数据：(优先级, 结合性)
OPERATOR_PROPERTIES = {
    OperatorType.POW: (4, Associativity.RIGHT),
    OperatorType.MUL: (3, Associativity.LEFT),
    OperatorType.DIV: (3, Associativity.LEFT),
    OperatorType.ADD: (2, Associativity.LEFT),
    OperatorType.SUB: (2, Associativity.LEFT),
}

ARITY = {
    TokenType.OPERATOR: 2,
    TokenType.FUNCTION: 1,
}

OPERATOR_SYMBOLS = {
    '^': OperatorType.POW,
    '*': OperatorType.MUL,
    '/': OperatorType.DIV,
    '+': OperatorType.ADD,
    '-': OperatorType.SUB,
}
SYMBOL_OF_OPERATOR = {op: sym for sym, op in OPERATOR_SYMBOLS.items()}

FUNCTION_NAMES = tuple(f.value for f in FunctionType)
VARIABLE_NAME = 'x'


def _operator_token(op_type):
    precedence, associativity = OPERATOR_PROPERTIES[op_type]
    return Token(TokenType.OPERATOR, kind=op_type,
                 precedence=precedence, associativity=associativity)


# 预设Token（数字以外的全部Token），模块加载时构造一次，只读
TOKEN_DEFINITIONS = {
    '(': Token(TokenType.BRACKET_LEFT),
    ')': Token(TokenType.BRACKET_RIGHT),
    VARIABLE_NAME: Token(TokenType.VARIABLE),
}
TOKEN_DEFINITIONS.update({sym: _operator_token(op) for sym, op in OPERATOR_SYMBOLS.items()})
TOKEN_DEFINITIONS.update({f.value: Token(TokenType.FUNCTION, kind=f) for f in FunctionType})

MULTIPLY_TOKEN = TOKEN_DEFINITIONS['*']


def make_number(value):
    return Token(TokenType.NUMBER, value=float(value))


def format_token(token):
    """单个Token的文本形式：数字保留两位小数，其余为符号或函数名"""
    if token.type == TokenType.NUMBER:
        return f"{token.value:.2f}"
    if token.type == TokenType.VARIABLE:
        return VARIABLE_NAME
    if token.type == TokenType.BRACKET_LEFT:
        return '('
    if token.type == TokenType.BRACKET_RIGHT:
        return ')'
    if token.type == TokenType.OPERATOR:
        return SYMBOL_OF_OPERATOR[token.kind]
    return token.kind.value


def format_tokens(token_sequence):
    """例如 ['(', 'x', '+', '1.00', ')']"""
    return '[' + ', '.join(f"'{format_token(t)}'" for t in token_sequence) + ']'


class RPNValidator:
    """不求值，只模拟后缀序列的栈深度"""

    @staticmethod
    def find_underflow(token_sequence):
        """返回第一个操作数不足的Token下标；没有则返回None"""
        stack_size = 0
        for i, token in enumerate(token_sequence):
            if token.type in (TokenType.NUMBER, TokenType.VARIABLE):
                stack_size += 1
            elif token.type in ARITY:
                if stack_size < token.arity:
                    return i
                stack_size = stack_size - token.arity + 1
            else:
                # 后缀序列中不应出现括号
                return i
        return None

    @staticmethod
    def calculate_stack_size(token_sequence):
        """计算整段序列求值后栈中的元素数量"""
        stack_size = 0
        for token in token_sequence:
            if token.type in (TokenType.NUMBER, TokenType.VARIABLE):
                stack_size += 1
            elif token.type in ARITY:
                stack_size = stack_size - token.arity + 1
        return stack_size

    @staticmethod
    def is_complete_expression(token_sequence):
        if RPNValidator.find_underflow(token_sequence) is not None:
            return False
        return RPNValidator.calculate_stack_size(token_sequence) == 1

    @staticmethod
    def validate(token_sequence):
        """不完整时抛出 MalformedExpressionError"""
        index = RPNValidator.find_underflow(token_sequence)
        if index is not None:
            token = token_sequence[index]
            if token.type not in ARITY:
                raise MalformedExpressionError(
                    f"Unexpected bracket at postfix position {index}")
            raise MalformedExpressionError(
                f"Insufficient operands for '{format_token(token)}' at postfix position {index}")
        stack_size = RPNValidator.calculate_stack_size(token_sequence)
        if stack_size != 1:
            raise MalformedExpressionError(
                f"Expression leaves {stack_size} values on the stack, expected 1")
