"""core/operators.py"""
import numpy as np


def _as_float(operand):
    """标量转为 np.float64，数组/Series 保持不变，保证按 IEEE 754 语义运算"""
    if isinstance(operand, (int, float)):
        return np.float64(operand)
    return operand


class Operators:
    """
    所有操作符的静态方法集合，方法名与 OperatorType / FunctionType 的值一致。

    除零、非正数取对数等不抛异常：结果按 IEEE 754 为 inf / -inf / nan，
    并一直传递到积分结果中。操作数既可以是标量，也可以是 numpy 数组。
    """

    # 二元操作符========================================
    @staticmethod
    def add(lhs, rhs):
        with np.errstate(all='ignore'):
            return np.add(_as_float(lhs), _as_float(rhs))

    @staticmethod
    def sub(lhs, rhs):
        with np.errstate(all='ignore'):
            return np.subtract(_as_float(lhs), _as_float(rhs))

    @staticmethod
    def mul(lhs, rhs):
        with np.errstate(all='ignore'):
            return np.multiply(_as_float(lhs), _as_float(rhs))

    @staticmethod
    def div(lhs, rhs):
        """1/0 -> inf, 0/0 -> nan"""
        with np.errstate(all='ignore'):
            return np.divide(_as_float(lhs), _as_float(rhs))

    @staticmethod
    def pow(lhs, rhs):
        """负数的非整数次幂 -> nan；0的负数次幂 -> inf"""
        with np.errstate(all='ignore'):
            return np.power(_as_float(lhs), _as_float(rhs))

    # 一元函数==========================================
    @staticmethod
    def sin(operand):
        with np.errstate(all='ignore'):
            return np.sin(_as_float(operand))

    @staticmethod
    def cos(operand):
        with np.errstate(all='ignore'):
            return np.cos(_as_float(operand))

    @staticmethod
    def tan(operand):
        with np.errstate(all='ignore'):
            return np.tan(_as_float(operand))

    @staticmethod
    def ln(operand):
        """ln(0) -> -inf，ln(负数) -> nan"""
        with np.errstate(all='ignore'):
            return np.log(_as_float(operand))

    @staticmethod
    def exp(operand):
        with np.errstate(all='ignore'):
            return np.exp(_as_float(operand))

    @staticmethod
    def log(operand):
        """以10为底"""
        with np.errstate(all='ignore'):
            return np.log10(_as_float(operand))
