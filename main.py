"""主程序入口 - 表达式求值与数值积分"""
import argparse
import logging

from config.config import *
from core import ExpressionError, Tokenizer, to_postfix, RPNEvaluator, format_tokens
from integration import QuadratureRule, integrate
from utils.metrics import (
    reference_integral, absolute_error, relative_error, sample_table, convergence_table
)

logger = logging.getLogger(__name__)


def _setup_logging(level):
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run(args):
    """
    执行一次完整流程：分词 -> 转后缀 -> （可选）单点求值 -> 积分
    Returns:
        dict，包含 postfix / value / integral / reference 等结果
    """
    results = {'expression': args.expression}

    # 第1部分：编译表达式（每个表达式只做一次）
    tokenizer = Tokenizer(strict=args.strict)
    infix = tokenizer.tokenize(args.expression)
    for warning in tokenizer.warnings:
        logger.warning(f"Skipped: {warning}")
    postfix = to_postfix(infix)
    results['postfix'] = format_tokens(postfix)

    if args.show_tokens:
        logger.info(f"Tokenized: {format_tokens(infix)}")
        logger.info(f"Shunted:   {format_tokens(postfix)}")

    # 第2部分：单点求值
    if args.x is not None:
        value = RPNEvaluator.evaluate(postfix, args.x)
        results['value'] = value
        logger.info(f"Given f(x) = {args.expression}, and x = {args.x:f}")
        logger.info(f"f(x) = {value:f}")

    # 第3部分：数值积分
    rule = QuadratureRule.parse(args.rule)
    integral = integrate(postfix, args.lower, args.upper, rule=rule, strips=args.strips)
    results['integral'] = integral
    logger.info(f"=== {rule.value.capitalize()} rule, {args.strips} strips ===")
    logger.info(f"Integral of {args.expression} over [{args.lower}, {args.upper}] ~= {integral:.10g}")

    if args.table:
        table = sample_table(postfix, args.lower, args.upper, CLI_CONFIG['table_strips'])
        logger.info("\nSample values:\n" + table.to_string())

    if args.compare:
        reference, abserr = reference_integral(postfix, args.lower, args.upper)
        results['reference'] = reference
        logger.info(f"Reference (scipy quad): {reference:.10g} (+/- {abserr:.2e})")
        logger.info(f"Absolute error: {absolute_error(integral, reference):.3e}")
        logger.info(f"Relative error: {relative_error(integral, reference):.3e}")

    if args.convergence:
        table = convergence_table(postfix, args.lower, args.upper, rule)
        logger.info("\nConvergence:\n" + table.to_string(index=False))

    return results


def save_results(results, path):
    logger.info(f"Saving results to {path}")
    with open(path, 'w', encoding='utf-8') as f:
        f.write("=== Integration Result ===\n")
        for key, value in results.items():
            f.write(f"{key}: {value}\n")


def main(args):
    _setup_logging(args.log_level)
    validate_config()

    try:
        results = run(args)
    except ExpressionError as e:
        logger.error(f"{type(e).__name__}: {e}")
        raise

    if args.save_results:
        save_results(results, args.results_path)
    return results


def build_parser():
    parser = argparse.ArgumentParser(description="Single-variable expression evaluator and numerical integrator")

    parser.add_argument(
        "--expression",
        type=str,
        required=True,
        help="Expression in x, e.g. \"4sin(x)^2 + ln(x+1)\""
    )
    parser.add_argument(
        "--lower",
        type=float,
        required=True,
        help="Lower bound of integration"
    )
    parser.add_argument(
        "--upper",
        type=float,
        required=True,
        help="Upper bound of integration"
    )
    parser.add_argument(
        "--rule",
        type=str,
        default=INTEGRATION_CONFIG['default_rule'],
        choices=[r.value for r in QuadratureRule] + ['trapezium'],
        help="Quadrature rule"
    )
    parser.add_argument(
        "--strips",
        type=int,
        default=INTEGRATION_CONFIG['default_strips'],
        help="Number of strips (sub-intervals)"
    )
    parser.add_argument(
        "--x",
        type=float,
        default=None,
        help="Also evaluate the expression at this point"
    )
    parser.add_argument(
        "--show_tokens",
        action="store_true",
        help="Log the infix and postfix token sequences"
    )
    parser.add_argument(
        "--table",
        action="store_true",
        help="Log sampled function values over the range"
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Compare the estimate with scipy's adaptive quadrature"
    )
    parser.add_argument(
        "--convergence",
        action="store_true",
        help="Log the estimate and error for increasing strip counts"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on unrecognized characters instead of skipping them"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the results to a file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=CLI_CONFIG['results_path'],
        help="Path to save the results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=CLI_CONFIG['log_level'],
        help="Logging level (DEBUG, INFO, WARNING, ...)"
    )
    return parser


if __name__ == "__main__":
    main(build_parser().parse_args())
