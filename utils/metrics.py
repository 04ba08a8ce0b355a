"""utils/metrics.py"""
import numpy as np
import pandas as pd
import logging
import warnings
from scipy import integrate as scint
from scipy.integrate import IntegrationWarning

from config.config import METRICS_CONFIG
from core import RPNEvaluator
from integration.integrator import integrate

logger = logging.getLogger(__name__)


def reference_integral(postfix, lower, upper, limit=None):
    """
    用 scipy.integrate.quad（自适应）计算参考值
    与 integrate 一致：lower > upper 时按正向区间计算
    Returns:
        (value, abserr)
    """
    lower, upper = sorted((float(lower), float(upper)))
    limit = METRICS_CONFIG['quad_limit'] if limit is None else limit

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", category=IntegrationWarning)
        value, abserr = scint.quad(lambda x: RPNEvaluator.evaluate(postfix, x), lower, upper, limit=limit)
    return float(value), float(abserr)


def absolute_error(estimate, reference):
    return float(abs(estimate - reference))


def relative_error(estimate, reference):
    """参考值为0时退化为绝对误差"""
    if reference == 0:
        return absolute_error(estimate, reference)
    return float(abs(estimate - reference) / abs(reference))


def sample_table(postfix, lower, upper, strips):
    """积分网格上的采样值，以 x 为索引"""
    lower, upper = sorted((float(lower), float(upper)))
    xs = np.linspace(lower, upper, strips + 1)
    return RPNEvaluator.evaluate_many(postfix, xs)


def convergence_table(postfix, lower, upper, rule, strips_list=None):
    """
    不同 strips 下的积分估计及其相对参考值的误差
    Returns:
        DataFrame，列为 strips / estimate / abs_error / rel_error
    """
    strips_list = METRICS_CONFIG['convergence_strips'] if strips_list is None else strips_list
    reference, _ = reference_integral(postfix, lower, upper)

    rows = []
    for strips in strips_list:
        estimate = integrate(postfix, lower, upper, rule=rule, strips=strips)
        rows.append({
            'strips': strips,
            'estimate': estimate,
            'abs_error': absolute_error(estimate, reference),
            'rel_error': relative_error(estimate, reference),
        })
        logger.debug(f"strips={strips}: estimate={estimate:.10g}")

    return pd.DataFrame(rows, columns=['strips', 'estimate', 'abs_error', 'rel_error'])
