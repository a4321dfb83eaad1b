"""
Compile normalized expression text into a real function of ``x``.

Malformed text never raises: it compiles to a function that always returns
``nan``. Domain errors at a single point (``log(-1)``, ``1/0``) give ``nan``
for that point only.
"""

import logging
import math
import re

import sympy
from sympy import Symbol, lambdify
from sympy.parsing.sympy_parser import (
    parse_expr, standard_transformations, convert_xor,
)

logger = logging.getLogger(__name__)

# Implicit multiplication is the normalizer's job, not the parser's.
TRANSFORMATIONS = standard_transformations + (convert_xor,)

X = Symbol("x")

_LOCALS = {"x": X, "e": sympy.E, "pi": sympy.pi}

_VOCABULARY = set(_LOCALS) | {"sin", "cos", "tan", "log", "sqrt", "exp"}

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# ``sqrt`` parses to a Pow, so it needs no entry here.
_ALLOWED_FUNCTIONS = (sympy.sin, sympy.cos, sympy.tan, sympy.log, sympy.exp)

_NON_FINITE = (sympy.zoo, sympy.nan, sympy.oo, -sympy.oo)


def undefined(x: float) -> float:
    """The compiled form of an expression that could not be parsed."""
    return math.nan


def _local_dict(s: str) -> dict:
    # Names outside the vocabulary (E, I, oo, N, ...) shadow SymPy's and
    # become plain symbols, which the free-symbol check then rejects.
    local = {name: Symbol(name) for name in _IDENTIFIER.findall(s)
             if name not in _VOCABULARY}
    local.update(_LOCALS)
    return local


def parse_expression(expr_str: str):
    """Parse *expr_str* into an unevaluated SymPy expression in ``x``.

    Nothing is simplified or computed while parsing, so ``9^9^9`` costs no
    more than ``x^2``. Raises ValueError when the text is not in the
    supported grammar.
    """
    s = (expr_str or "").strip()
    if not s:
        raise ValueError("Expression is empty.")
    try:
        expr = parse_expr(s, local_dict=_local_dict(s),
                          transformations=TRANSFORMATIONS, evaluate=False)
    except Exception as e:
        raise ValueError(f"Could not parse expression: '{expr_str}'. Error: {e}")

    if not isinstance(expr, sympy.Expr):
        raise ValueError(f"'{expr_str}' is not an expression.")
    extra = expr.free_symbols - {X}
    if extra:
        names = ", ".join(sorted(str(sym) for sym in extra))
        raise ValueError(f"Unknown symbol(s) {names}; only x is allowed.")
    for call in expr.atoms(sympy.Function):
        if not isinstance(call, _ALLOWED_FUNCTIONS):
            raise ValueError(f"Unsupported function '{call.func}'.")
    if expr.has(*_NON_FINITE):
        raise ValueError(f"'{expr_str}' is undefined everywhere.")
    return expr


def to_float_literals(expr):
    """Replace every exact number in *expr* by a Float, without evaluating.

    The compiled code then does IEEE arithmetic, where an overflow is an
    ``OverflowError`` at call time instead of an exact big-integer power.
    """
    numbers = {n: sympy.Float(n) for n in expr.atoms(sympy.Rational)}
    with sympy.evaluate(False):
        return expr.xreplace(numbers)


def compile_expression(expr_str: str):
    """Return a callable ``x -> float`` for *expr_str*.

    Unparseable text yields ``undefined``. Every call evaluates with the
    ``math`` module; any failure at a point is reported as ``nan``.
    """
    try:
        expr = to_float_literals(parse_expression(expr_str))
        fn = lambdify(X, expr, modules="math")
    except Exception as e:
        logger.debug("Compile failed for %r: %s", expr_str, e)
        return undefined

    def evaluate(x: float) -> float:
        try:
            return float(fn(x))
        except (ArithmeticError, ValueError, TypeError):
            # TypeError: float() of a complex result, e.g. (-8)**(1/3)
            return math.nan

    return evaluate


def is_defined(value) -> bool:
    return value is not None and math.isfinite(value)


def evaluate_table(xs, f, g) -> dict:
    """Evaluate *f* and *g* at every x in *xs*.

    Returns ``{"f": [...], "g": [...]}``; undefined points are ``None``.
    """
    ys_f = []
    ys_g = []
    for xv in xs:
        y1 = f(float(xv))
        y2 = g(float(xv))
        ys_f.append(y1 if is_defined(y1) else None)
        ys_g.append(y2 if is_defined(y2) else None)
    return {"f": ys_f, "g": ys_g}
