"""
Result assembly: integration limits from the roots, the step-by-step
narrative, the area summary and small formatting helpers.
"""

import math
import re
from typing import Optional

from areasolver import config
from areasolver.integrate import integrate_abs_difference


# ── Numeric formatting helpers ──────────────────────────────────────────

def format_number(value: Optional[float], max_decimals: int = 6) -> str:
    """Format a float into a clean decimal string.

    - Returns integers without a decimal point (``4`` not ``4.0``).
    - Strips trailing zeros after the decimal point.
    - Renders ``None`` and non-finite values as ``"undefined"``.
    """
    if value is None or not math.isfinite(value):
        return "undefined"
    if abs(value - round(value)) < 1e-12:
        return str(int(round(value)))
    return f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")


def format_roots(roots) -> str:
    return ", ".join(f"{r:.6f}" for r in roots)


# ── Integration limits ──────────────────────────────────────────────────

def derive_bounds(roots) -> dict:
    """Pick integration limits from the ascending *roots*.

    No roots leaves both limits unset and raises the no-intersection flag;
    one root gives a degenerate ``[r, r]``; otherwise the two smallest roots.
    """
    if not roots:
        return {"limit_from": None, "limit_to": None, "no_intersection": True}
    return {
        "limit_from": roots[0],
        "limit_to": roots[1] if len(roots) > 1 else roots[0],
        "no_intersection": False,
    }


def order_bounds(limit_from: Optional[float], limit_to: Optional[float]) -> tuple:
    """Swap user-edited limits so that ``from <= to``."""
    if limit_from is not None and limit_to is not None and limit_from > limit_to:
        return limit_to, limit_from
    return limit_from, limit_to


# ── Narrative ───────────────────────────────────────────────────────────

def build_steps(f_expr: str, g_expr: str, roots) -> list[dict]:
    steps = [{
        "title": "1) Set the functions equal",
        "content": f"{f_expr} = {g_expr}",
    }]
    if not roots:
        steps.append({
            "title": "2) Solve",
            "content": "No intersection points were found.",
        })
    else:
        steps.append({
            "title": "2) Solve",
            "content": f"Roots: x = {format_roots(roots)}",
        })
    return steps


def build_area_result(limit_from: Optional[float], limit_to: Optional[float],
                      f, g, n: int = config.AREA_N) -> dict:
    """Compute the enclosed area and a one-line explanation of it."""
    if limit_from is None or limit_to is None:
        return {"area": math.nan, "detail": "No integration limits"}

    area = integrate_abs_difference(limit_from, limit_to, f, g, n)
    interval = f"[{format_number(limit_from)}, {format_number(limit_to)}]"
    if limit_from == limit_to:
        detail = f"The interval {interval} is a single point, so the area is 0."
    elif not math.isfinite(area):
        detail = f"|f(x) - g(x)| is undefined somewhere on {interval}."
    else:
        detail = (
            f"Integral of |f(x) - g(x)| over {interval} "
            f"by Simpson's rule with n = {n + n % 2} subintervals."
        )
    return {"area": area, "detail": detail}


# ── LaTeX rendering ─────────────────────────────────────────────────────

_LATEX_FUNCTIONS = ("sin", "cos", "tan", "log", "exp")


def to_latex(expr: str) -> str:
    """Render a normalized expression for typesetting (``2*x^2`` → ``2x^{ 2 }``)."""
    s = re.sub(r"\s+", "", expr or "")

    s = re.sub(r"(\d+)\*x", r"\1x", s)
    s = re.sub(r"x\*(\d+)", r"\1x", s)
    s = re.sub(r"([a-zA-Z])\*([a-zA-Z])", r"\1\2", s)
    s = re.sub(r"([a-zA-Z])\^(\d+)", r"\1^{ \2 }", s)
    s = re.sub(r"([0-9])\^(\d+)", r"\1^{ \2 }", s)

    s = re.sub(r"sqrt\(([^()]*)\)", r"\\sqrt{\1}", s)
    s = re.sub(r"(?<!\\)(" + "|".join(_LATEX_FUNCTIONS) + r")(?=\()", r"\\\1", s)
    s = re.sub(r"(?<![a-zA-Z\\])pi(?![a-zA-Z])", r"\\pi", s)
    return s.replace("*", r" \cdot ")
