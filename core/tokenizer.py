"""分词器 - 将表达式字符串转换为中缀Token序列（含隐式乘法）"""
import re
import logging

from config.config import TOKENIZER_CONFIG
from core.errors import UnrecognizedCharacterError
from core.token_system import (
    TokenType, TOKEN_DEFINITIONS, FUNCTION_NAMES, VARIABLE_NAME, MULTIPLY_TOKEN,
    make_number, format_tokens
)

logger = logging.getLogger(__name__)

# 单字符结构Token，遇到即消费
STRUCTURAL_SYMBOLS = '()^*/+-'

# 一位或多位数字，可选小数点加一位或多位数字
NUMBER_PATTERN = re.compile(r'[0-9]+(?:\.[0-9]+)?')
FUNCTION_PATTERN = re.compile('|'.join(FUNCTION_NAMES), re.IGNORECASE)

# 前一个Token为这些类型时，在 '(' / x / 函数之前插入乘号
_IMPLICIT_MULTIPLY_AFTER = (TokenType.NUMBER, TokenType.BRACKET_RIGHT)


class Tokenizer:
    """
    从左到右扫描，每个位置按以下顺序尝试匹配：
    1. 单字符结构Token: ( ) ^ * / + -
    2. 变量 x
    3. 数字字面量
    4. 函数名（不区分大小写）
    空白字符跳过。无法识别的字符默认跳过并记录警告（strict=True 时抛出异常）。
    """

    def __init__(self, strict=None):
        self.strict = TOKENIZER_CONFIG['strict'] if strict is None else strict
        # 最近一次 tokenize 跳过的字符，元素为 UnrecognizedCharacterError
        self.warnings = []

    def tokenize(self, expression):
        """
        Args:
            expression: 表达式字符串，例如 "4sin(x)^2"
        Returns:
            按输入顺序排列的Token元组
        """
        self.warnings = []
        tokens = []
        pos = 0
        length = len(expression)

        while pos < length:
            ch = expression[pos]

            if ch.isspace():
                pos += 1
                continue

            if ch in STRUCTURAL_SYMBOLS:
                token = TOKEN_DEFINITIONS[ch]
                if token.type == TokenType.BRACKET_LEFT:
                    self._insert_implicit_multiply(tokens)
                tokens.append(token)
                pos += 1
                continue

            if ch.lower() == VARIABLE_NAME:
                self._insert_implicit_multiply(tokens)
                tokens.append(TOKEN_DEFINITIONS[VARIABLE_NAME])
                pos += 1
                continue

            match = NUMBER_PATTERN.match(expression, pos)
            if match:
                tokens.append(make_number(match.group()))
                pos = match.end()
                continue

            match = FUNCTION_PATTERN.match(expression, pos)
            if match:
                self._insert_implicit_multiply(tokens)
                tokens.append(TOKEN_DEFINITIONS[match.group().lower()])
                pos = match.end()
                continue

            self._unrecognized(pos, ch)
            pos += 1

        logger.debug(f"Tokenized {expression!r} -> {format_tokens(tokens)}")
        return tuple(tokens)

    @staticmethod
    def _insert_implicit_multiply(tokens):
        # 4x, 4(x+1), 4sin(x), )(, )sin(x)
        if tokens and tokens[-1].type in _IMPLICIT_MULTIPLY_AFTER:
            tokens.append(MULTIPLY_TOKEN)

    def _unrecognized(self, pos, ch):
        error = UnrecognizedCharacterError(pos, ch)
        if self.strict:
            logger.error(str(error))
            raise error
        logger.warning(f"Unrecognized token found in input expression: {ch!r} "
                       f"(position {pos}), skipped")
        self.warnings.append(error)


def tokenize(expression, strict=None):
    return Tokenizer(strict=strict).tokenize(expression)
