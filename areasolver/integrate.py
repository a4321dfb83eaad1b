"""Composite Simpson quadrature and the area between two curves."""

import math
from typing import Optional

from areasolver import config


def integrate(a: float, b: float, fn, n: int = config.SIMPSON_N) -> float:
    """Approximate the integral of *fn* over ``[a, b]`` with Simpson's rule.

    An odd *n* is bumped to the next even number. ``a == b`` gives exactly
    ``0``. Non-finite samples are not trapped: they make the result
    non-finite.
    """
    if a == b:
        return 0.0
    if n < 1:
        raise ValueError("n must be a positive number of subintervals")
    if n % 2 == 1:
        n += 1

    step = (b - a) / n
    total = fn(a) + fn(b)
    for i in range(1, n):
        x = a + i * step
        total += (4 if i % 2 == 1 else 2) * fn(x)
    return total * step / 3


def integrate_abs_difference(limit_from: Optional[float], limit_to: Optional[float],
                             f, g, n: int = config.AREA_N) -> float:
    """Area enclosed by *f* and *g* between the limits.

    Returns ``nan`` when either limit is unset.
    """
    if limit_from is None or limit_to is None:
        return math.nan
    return integrate(limit_from, limit_to, lambda x: abs(f(x) - g(x)), n)
