"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import pandas as pd
import logging

from core.errors import MalformedExpressionError
from core.token_system import TokenType, format_tokens
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, x):
        """
        在单个点上求值
        Args:
            token_sequence: 后缀Token序列
            x: 变量 x 的取值
        Returns:
            float，可能为 inf / nan
        Raises:
            MalformedExpressionError: 操作数不足或结束时栈中不止一个值
        """
        return float(RPNEvaluator._run(token_sequence, np.float64(x)))

    @staticmethod
    def evaluate_many(token_sequence, xs):
        """
        向量化求值，返回以 x 为索引的 Series
        不含 x 的表达式结果扩展为整列常数
        """
        xs = np.asarray(xs, dtype=float)
        result = RPNEvaluator._run(token_sequence, xs)
        values = np.array(np.broadcast_to(result, xs.shape), dtype=float)
        return pd.Series(values, index=pd.Index(xs, name='x'), name='f(x)')

    @staticmethod
    def _run(token_sequence, x):
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(np.float64(token.value))

            elif token.type == TokenType.VARIABLE:
                stack.append(x)

            # ================== 二元操作符处理 ==================
            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.error(f"Insufficient operands for {token.name}")
                    raise MalformedExpressionError(f"Insufficient operands for operator '{token.name}'")
                rhs = stack.pop()  # 靠近栈顶的是右操作数
                lhs = stack.pop()
                stack.append(getattr(Operators, token.name)(lhs, rhs))

            # ================== 函数处理 ==================
            elif token.type == TokenType.FUNCTION:
                if not stack:
                    logger.error(f"Insufficient operands for {token.name}")
                    raise MalformedExpressionError(f"Missing argument for function '{token.name}'")
                operand = stack.pop()
                stack.append(getattr(Operators, token.name)(operand))

            else:
                logger.error(f"Unexpected token in RPN expression: {token.type.value}")
                raise MalformedExpressionError("Brackets cannot appear in a postfix expression")

        if len(stack) != 1:
            logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.error(f"RPN expression: {format_tokens(token_sequence)}")
            raise MalformedExpressionError(
                f"Expression leaves {len(stack)} values on the stack, expected 1")
        return stack[0]


def evaluate(token_sequence, x):
    return RPNEvaluator.evaluate(token_sequence, x)
