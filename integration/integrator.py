"""数值积分模块 integration/integrator.py"""
import math
import logging
import numbers
from enum import Enum

from config.config import INTEGRATION_CONFIG
from core import (
    Tokenizer, to_postfix, RPNEvaluator, RPNValidator, IntegrationError, format_tokens
)

logger = logging.getLogger(__name__)


class QuadratureRule(Enum):
    SIMPSON = "simpson"
    TRAPEZOIDAL = "trapezoidal"

    @classmethod
    def parse(cls, rule):
        """接受枚举成员或名称（不区分大小写），'trapezium' 等同 'trapezoidal'"""
        if isinstance(rule, cls):
            return rule
        name = str(rule).strip().lower()
        name = _RULE_ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise IntegrationError(f"Unknown quadrature rule: {rule!r}") from None


_RULE_ALIASES = {
    'trapezium': 'trapezoidal',
    'trapezoid': 'trapezoidal',
    'simpsons': 'simpson',
}


def compile_expression(expression, strict=None):
    """分词 + 转后缀，每个表达式只做一次"""
    infix = Tokenizer(strict=strict).tokenize(expression)
    postfix = to_postfix(infix)
    logger.debug(f"Compiled {expression!r}: infix={format_tokens(infix)} postfix={format_tokens(postfix)}")
    return postfix


def trapezoidal_rule(f, lower, upper, strips):
    """(h/2) * (f(a) + f(b) + 2 * Σ f(内部点))"""
    h = (upper - lower) / strips
    total = f(lower) + f(upper)
    for i in range(1, strips):
        total += 2 * f(lower + i * h)
    return (h / 2) * total


def simpson_rule(f, lower, upper, strips):
    """
    (h/3) * (f(a) + f(b) + Σ w_i * f(x_i))，内部点下标 i 为奇数时 w_i=4，偶数时 w_i=2

    只有 strips 为偶数时才是严格的复合Simpson公式；奇数 strips 时最后一段的
    权重不对称，结果仅为近似值（调用方负责是否允许）。
    """
    h = (upper - lower) / strips
    total = f(lower) + f(upper)
    for i in range(1, strips):
        weight = 4 if i % 2 == 1 else 2
        total += weight * f(lower + i * h)
    return (h / 3) * total


RULES = {
    QuadratureRule.SIMPSON: simpson_rule,
    QuadratureRule.TRAPEZOIDAL: trapezoidal_rule,
}


def _check_strips(strips):
    if isinstance(strips, bool) or not isinstance(strips, numbers.Integral):
        raise IntegrationError(f"strips must be an integer, got {strips!r}")
    strips = int(strips)
    if strips < 1:
        raise IntegrationError(f"strips must be >= 1, got {strips}")
    if strips > INTEGRATION_CONFIG['max_strips']:
        raise IntegrationError(
            f"strips={strips} exceeds the configured maximum of {INTEGRATION_CONFIG['max_strips']}")
    return strips


def integrate(postfix, lower, upper, rule=None, strips=None):
    """
    对后缀表达式在 [lower, upper] 上做数值积分

    Args:
        postfix: 后缀Token序列（所有采样点共用同一份）
        lower, upper: 积分上下限；lower > upper 时交换，不改变符号
        rule: QuadratureRule 或其名称，默认取配置
        strips: 分段数，>= 1
    Returns:
        float，可能为 inf / nan
    Raises:
        IntegrationError: 参数不合法
        MalformedExpressionError: 表达式不完整（在采样前即报告）
    """
    rule = QuadratureRule.parse(INTEGRATION_CONFIG['default_rule'] if rule is None else rule)
    strips = _check_strips(INTEGRATION_CONFIG['default_strips'] if strips is None else strips)

    lower, upper = float(lower), float(upper)
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise IntegrationError(f"Integration bounds must be finite, got [{lower}, {upper}]")

    if lower > upper:
        # 已知的简化：反向区间按正向区间计算，结果不取负
        logger.warning(f"Lower bound {lower} > upper bound {upper}; integrating over "
                       f"[{upper}, {lower}] without changing sign")
        lower, upper = upper, lower

    if abs(upper - lower) < INTEGRATION_CONFIG['zero_width_tolerance']:
        logger.debug("Zero-width integration range, returning 0.0")
        return 0.0

    if rule == QuadratureRule.SIMPSON and strips % 2 == 1:
        if INTEGRATION_CONFIG['require_even_simpson_strips']:
            raise IntegrationError(f"Simpson's rule requires an even number of strips, got {strips}")
        logger.warning(f"Simpson's rule with odd strips={strips}: result is only approximate")

    # 采样前检查一次，避免在网格中途才发现表达式不完整
    RPNValidator.validate(postfix)

    def f(x):
        return RPNEvaluator.evaluate(postfix, x)

    result = RULES[rule](f, lower, upper, strips)

    if not math.isfinite(result):
        logger.warning(f"Integration result is not finite: {result}")
    logger.debug(f"{rule.value} rule on [{lower}, {upper}] with {strips} strips -> {result}")
    return result


def integrate_expression(expression, lower, upper, rule=None, strips=None, strict=None):
    """从表达式字符串直接积分"""
    postfix = compile_expression(expression, strict=strict)
    return integrate(postfix, lower, upper, rule=rule, strips=strips)
