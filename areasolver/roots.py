"""
Intersection finder: bracket sign changes of ``f - g`` on a fixed grid and
refine each bracket by bisection.
"""

import logging
import math

from areasolver import config

logger = logging.getLogger(__name__)


def bisect(h, a: float, b: float, *,
           iterations: int = config.BISECT_ITERATIONS,
           tol: float = config.BISECT_TOL) -> float:
    """Refine a root of *h* inside ``[a, b]`` where ``h(a)`` and ``h(b)``
    have opposite signs.

    Stops after *iterations* halvings, or as soon as the midpoint value is
    smaller than *tol* in magnitude.
    """
    ha = h(a)
    for _ in range(iterations):
        m = 0.5 * (a + b)
        hm = h(m)
        if abs(hm) < tol:
            return m
        if ha * hm < 0:
            b = m
        else:
            a, ha = m, hm
    return 0.5 * (a + b)


def _append_unique(roots: list, candidate: float, tol: float) -> bool:
    """Append *candidate* unless it is within *tol* of a recorded root."""
    if any(abs(r - candidate) < tol for r in roots):
        return False
    roots.append(candidate)
    return True


def scan_roots(h, *,
               scan_min: float = config.SCAN_MIN,
               scan_max: float = config.SCAN_MAX,
               steps: int = config.SCAN_STEPS,
               iterations: int = config.BISECT_ITERATIONS,
               tol: float = config.BISECT_TOL,
               dedup_tol: float = config.DEDUP_TOL) -> list:
    """Return the sorted, deduplicated roots of *h* on ``[scan_min, scan_max]``.

    The interval is split into *steps* equal subintervals. A pair of samples
    is only examined when both values are finite. A sample that is exactly
    zero counts as a root when the next sample is non-zero, so ``h ≡ 0``
    (identical curves) produces no roots.
    """
    if steps < 1:
        raise ValueError("steps must be at least 1")
    dx = (scan_max - scan_min) / steps

    roots = []
    x0 = scan_min
    h0 = h(x0)
    for i in range(1, steps + 1):
        x1 = scan_min + i * dx
        h1 = h(x1)
        if math.isfinite(h0) and math.isfinite(h1):
            if h0 == 0:
                if h1 != 0:
                    _append_unique(roots, x0, dedup_tol)
            elif h0 * h1 < 0:
                r = bisect(h, x0, x1, iterations=iterations, tol=tol)
                _append_unique(roots, r, dedup_tol)
        x0, h0 = x1, h1

    roots.sort()
    return roots


def find_roots(f, g, **scan_options) -> dict:
    """Find the x-values where ``f(x) = g(x)``.

    Returns ``{"roots": [...], "no_intersection": bool}``; an empty root list
    is a normal outcome, not an error. *scan_options* are forwarded to
    ``scan_roots``.
    """
    def h(x):
        return f(x) - g(x)

    roots = scan_roots(h, **scan_options)
    logger.debug("Found %d intersection(s): %s", len(roots), roots)
    return {"roots": roots, "no_intersection": len(roots) == 0}
