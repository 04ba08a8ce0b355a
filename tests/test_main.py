import pytest

from config.config import validate_config
from core import MismatchedParenthesesError, UnrecognizedCharacterError
from main import build_parser, main


def run_cli(*argv):
    return main(build_parser().parse_args(list(argv)))


def test_config_is_valid():
    validate_config()


def test_integrates_expression():
    results = run_cli("--expression", "x^2", "--lower", "0", "--upper", "1",
                      "--rule", "simpson", "--strips", "2")
    assert results['integral'] == pytest.approx(1 / 3)
    assert results['postfix'] == "['x', '2.00', '^']"


def test_evaluates_single_point():
    results = run_cli("--expression", "4sin(x)^2", "--lower", "0", "--upper", "1",
                      "--x", "0", "--show_tokens")
    assert results['value'] == 0.0


def test_trapezium_alias():
    results = run_cli("--expression", "2x+1", "--lower", "0", "--upper", "3",
                      "--rule", "trapezium", "--strips", "3")
    assert results['integral'] == pytest.approx(12.0)


def test_compare_table_and_convergence():
    results = run_cli("--expression", "exp(x)", "--lower", "0", "--upper", "1",
                      "--strips", "10", "--compare", "--table", "--convergence")
    assert results['reference'] == pytest.approx(results['integral'], rel=1e-5)


def test_parse_errors_are_raised():
    with pytest.raises(MismatchedParenthesesError):
        run_cli("--expression", "(x+1", "--lower", "0", "--upper", "1")


def test_strict_flag():
    with pytest.raises(UnrecognizedCharacterError):
        run_cli("--expression", "x+$", "--lower", "0", "--upper", "1", "--strict")


def test_save_results(tmp_path):
    path = tmp_path / "results.txt"
    run_cli("--expression", "x", "--lower", "0", "--upper", "2", "--rule", "trapezoidal",
            "--strips", "4", "--save_results", "--results_path", str(path))
    text = path.read_text(encoding='utf-8')
    assert "=== Integration Result ===" in text
    assert "expression: x" in text
    assert "integral: 2.0" in text
