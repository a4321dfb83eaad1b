import math

import pytest

from areasolver.expression import compile_expression
from areasolver.result import (
    build_area_result, build_steps, derive_bounds, format_number, format_roots,
    order_bounds, to_latex,
)


# ── Limits ──────────────────────────────────────────────────────────────

def test_derive_bounds_without_roots() -> None:
    assert derive_bounds([]) == {"limit_from": None, "limit_to": None, "no_intersection": True}


def test_derive_bounds_single_root_is_degenerate() -> None:
    bounds = derive_bounds([2.5])
    assert bounds["limit_from"] == bounds["limit_to"] == 2.5
    assert bounds["no_intersection"] is False


def test_derive_bounds_uses_two_smallest_roots() -> None:
    bounds = derive_bounds([-1.0, 3.0, 7.0])
    assert (bounds["limit_from"], bounds["limit_to"]) == (-1.0, 3.0)


@pytest.mark.parametrize(
    "given,expected",
    [
        ((5.0, 2.0), (2.0, 5.0)),
        ((2.0, 5.0), (2.0, 5.0)),
        ((3.0, 3.0), (3.0, 3.0)),
        ((None, 3.0), (None, 3.0)),
        ((4.0, None), (4.0, None)),
    ],
)
def test_order_bounds(given, expected) -> None:
    assert order_bounds(*given) == expected


# ── Narrative ───────────────────────────────────────────────────────────

def test_steps_with_roots() -> None:
    steps = build_steps("x^2-2*x", "6*x-x^2", [0.0, 4.0])
    assert steps == [
        {"title": "1) Set the functions equal", "content": "x^2-2*x = 6*x-x^2"},
        {"title": "2) Solve", "content": "Roots: x = 0.000000, 4.000000"},
    ]


def test_steps_without_roots() -> None:
    steps = build_steps("x", "x", [])
    assert len(steps) == 2
    assert steps[0]["content"] == "x = x"
    assert steps[1]["content"] == "No intersection points were found."


def test_format_roots_uses_six_decimals() -> None:
    assert format_roots([-1.5, math.sqrt(2)]) == "-1.500000, 1.414214"


# ── Area ────────────────────────────────────────────────────────────────

def test_area_result_without_limits() -> None:
    f = compile_expression("x")
    result = build_area_result(None, None, f, f)
    assert math.isnan(result["area"])
    assert result["detail"] == "No integration limits"


def test_area_result_single_point() -> None:
    f = compile_expression("x")
    g = compile_expression("2*x")
    result = build_area_result(1.0, 1.0, f, g)
    assert result["area"] == 0
    assert "single point" in result["detail"]


def test_area_result_between_parabolas() -> None:
    f = compile_expression("x^2-2*x")
    g = compile_expression("6*x-x^2")
    result = build_area_result(0.0, 4.0, f, g)
    assert result["area"] == pytest.approx(64 / 3, rel=1e-3)
    assert "[0, 4]" in result["detail"]
    assert "n = 2000" in result["detail"]


def test_area_result_with_undefined_integrand() -> None:
    f = compile_expression("sqrt(x)")
    g = compile_expression("0")
    result = build_area_result(-1.0, 1.0, f, g)
    assert math.isnan(result["area"])
    assert "undefined" in result["detail"]


# ── Formatting ──────────────────────────────────────────────────────────

def test_format_number() -> None:
    assert format_number(4.0) == "4"
    assert format_number(2.5) == "2.5"
    assert format_number(1.0 / 3.0) == "0.333333"
    assert format_number(None) == "undefined"
    assert format_number(math.nan) == "undefined"


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("x^2-2*x", "x^{ 2 }-2x"),
        ("x*3", "3x"),
        ("sqrt(x)", r"\sqrt{x}"),
        ("2*sin(x)", r"2 \cdot \sin(x)"),
        ("2*pi", r"2 \cdot \pi"),
    ],
)
def test_to_latex(expr: str, expected: str) -> None:
    assert to_latex(expr) == expected
