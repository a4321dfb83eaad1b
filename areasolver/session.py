"""
Interactive session state: the two expressions, the sample table, the
intersections and the integration limits.

Each refresh recompiles both expressions from the current normalized text;
nothing compiled is kept between operations.
"""

import logging
import math
from typing import Optional

from areasolver import config
from areasolver.expression import compile_expression, evaluate_table
from areasolver.graph import plot_data
from areasolver.normalize import normalize_expression
from areasolver.result import (
    build_area_result, build_steps, derive_bounds, order_bounds, to_latex,
)
from areasolver.roots import find_roots

logger = logging.getLogger(__name__)


def _finite_or_none(value):
    if value is None or not math.isfinite(value):
        return None
    return value


class Session:
    """State behind one f(x) / g(x) comparison."""

    def __init__(self, f_raw: Optional[str] = None, g_raw: Optional[str] = None,
                 xs=None, settings: Optional[dict] = None):
        self.settings = config.merge_settings(settings or {})

        self.f_raw = self.settings["f"] if f_raw is None else f_raw
        self.g_raw = self.settings["g"] if g_raw is None else g_raw
        self.f_expr = normalize_expression(self.f_raw)
        self.g_expr = normalize_expression(self.g_raw)
        self.xs = [float(v) for v in (self.settings["xs"] if xs is None else xs)]

        self.ys_f: list = []
        self.ys_g: list = []
        self.intersections: list = []
        self.limit_from: Optional[float] = None
        self.limit_to: Optional[float] = None
        self.no_intersection = False
        self.steps: list = []

        self.refresh_table()
        self.find_intersections()

    # ── Compilation ─────────────────────────────────────────────────────

    def functions(self) -> tuple:
        """Compile ``(f, g)`` from the current normalized text."""
        return compile_expression(self.f_expr), compile_expression(self.g_expr)

    def _scan_options(self) -> dict:
        s = self.settings
        return {
            "scan_min": float(s["scan_min"]),
            "scan_max": float(s["scan_max"]),
            "steps": int(s["scan_steps"]),
            "iterations": int(s["bisect_iterations"]),
            "tol": float(s["bisect_tol"]),
            "dedup_tol": float(s["dedup_tol"]),
        }

    # ── Table ───────────────────────────────────────────────────────────

    def refresh_table(self) -> None:
        f, g = self.functions()
        table = evaluate_table(self.xs, f, g)
        self.ys_f = table["f"]
        self.ys_g = table["g"]

    def add_column(self, x: float = 0.0) -> None:
        self.xs.append(float(x))
        self.refresh_table()

    def set_x(self, index: int, value: float) -> None:
        """Edit one sample x in place (raises IndexError for a bad index)."""
        self.xs[index] = float(value)
        self.refresh_table()

    # ── Expressions ─────────────────────────────────────────────────────

    def set_f(self, raw: str) -> None:
        self.f_raw = raw
        self.f_expr = normalize_expression(raw)
        self.refresh_table()
        self.find_intersections()

    def set_g(self, raw: str) -> None:
        self.g_raw = raw
        self.g_expr = normalize_expression(raw)
        self.refresh_table()
        self.find_intersections()

    # ── Intersections & limits ──────────────────────────────────────────

    def find_intersections(self) -> list:
        """Rebuild roots, limits and the narrative from scratch."""
        f, g = self.functions()
        found = find_roots(f, g, **self._scan_options())
        self.intersections = found["roots"]

        bounds = derive_bounds(self.intersections)
        self.limit_from = bounds["limit_from"]
        self.limit_to = bounds["limit_to"]
        self.no_intersection = bounds["no_intersection"]

        self.steps = build_steps(self.f_expr, self.g_expr, self.intersections)
        logger.debug("%s = %s: %d intersection(s)",
                     self.f_expr, self.g_expr, len(self.intersections))
        return self.intersections

    def set_limits(self, limit_from: Optional[float], limit_to: Optional[float]) -> None:
        """Apply user-edited limits, swapped if given in descending order."""
        self.limit_from, self.limit_to = order_bounds(limit_from, limit_to)

    # ── Results ─────────────────────────────────────────────────────────

    def area_result(self) -> dict:
        f, g = self.functions()
        return build_area_result(self.limit_from, self.limit_to, f, g,
                                 int(self.settings["area_n"]))

    def plot_data(self) -> dict:
        f, g = self.functions()
        return plot_data(
            f, g, self.xs, self.limit_from, self.limit_to,
            samples=int(self.settings["plot_samples"]),
            shade_samples=int(self.settings["shade_samples"]),
        )

    def to_dict(self) -> dict:
        """JSON-friendly snapshot; non-finite numbers become None."""
        area = self.area_result()
        return {
            "f": self.f_raw,
            "g": self.g_raw,
            "f_normalized": self.f_expr,
            "g_normalized": self.g_expr,
            "f_latex": to_latex(self.f_expr),
            "g_latex": to_latex(self.g_expr),
            "xs": list(self.xs),
            "f_values": list(self.ys_f),
            "g_values": list(self.ys_g),
            "intersections": list(self.intersections),
            "no_intersection": self.no_intersection,
            "limit_from": self.limit_from,
            "limit_to": self.limit_to,
            "steps": [dict(step) for step in self.steps],
            "area": _finite_or_none(area["area"]),
            "area_detail": area["detail"],
        }
