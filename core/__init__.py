"""核心模块 - Token系统、分词器、调度场转换、RPN求值器和操作符"""
from .errors import (
    ExpressionError, TokenizeError, UnrecognizedCharacterError, ParseError,
    MismatchedParenthesesError, EvaluationError, MalformedExpressionError,
    IntegrationError
)
from .token_system import (
    TokenType, OperatorType, FunctionType, Associativity, Token,
    TOKEN_DEFINITIONS, OPERATOR_PROPERTIES, make_number, format_token,
    format_tokens, RPNValidator
)
from .operators import Operators
from .tokenizer import Tokenizer, tokenize
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate

__all__ = [
    'ExpressionError', 'TokenizeError', 'UnrecognizedCharacterError', 'ParseError',
    'MismatchedParenthesesError', 'EvaluationError', 'MalformedExpressionError',
    'IntegrationError',
    'TokenType', 'OperatorType', 'FunctionType', 'Associativity', 'Token',
    'TOKEN_DEFINITIONS', 'OPERATOR_PROPERTIES', 'make_number', 'format_token',
    'format_tokens', 'RPNValidator',
    'Operators', 'Tokenizer', 'tokenize', 'to_postfix', 'RPNEvaluator', 'evaluate'
]
