"""积分模块"""
from .integrator import (
    QuadratureRule, compile_expression, trapezoidal_rule, simpson_rule,
    integrate, integrate_expression
)

__all__ = [
    'QuadratureRule', 'compile_expression', 'trapezoidal_rule', 'simpson_rule',
    'integrate', 'integrate_expression'
]
