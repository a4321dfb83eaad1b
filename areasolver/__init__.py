"""AreaSolver — intersections and enclosed area of two functions of x."""

from areasolver.expression import compile_expression, evaluate_table
from areasolver.integrate import integrate, integrate_abs_difference
from areasolver.normalize import normalize_expression
from areasolver.result import build_area_result, build_steps, derive_bounds, order_bounds
from areasolver.roots import find_roots
from areasolver.session import Session

__all__ = [
    "Session",
    "build_area_result",
    "build_steps",
    "compile_expression",
    "derive_bounds",
    "evaluate_table",
    "find_roots",
    "integrate",
    "integrate_abs_difference",
    "normalize_expression",
    "order_bounds",
]
