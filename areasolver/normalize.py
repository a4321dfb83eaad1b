"""Rewrite shorthand algebra (``2x``, ``3(x+1)``, ``sinx``) into parseable text."""

import re

FUNCTION_NAMES = ("sin", "cos", "tan", "log", "sqrt", "exp")

_NAMES = "|".join(FUNCTION_NAMES)

# Implicit multiplication, one left-to-right pass per rule.
_PRODUCT_RULES = (
    (re.compile(r"(?<=\d)(?=x)"), "*"),                  # 2x    → 2*x
    (re.compile(r"(?<=\d)(?=\()"), "*"),                 # 3(    → 3*(
    (re.compile(r"(?<=\))(?=x)"), "*"),                  # )x    → )*x
    (re.compile(r"(?<=\))(?=\()"), "*"),                 # )(    → )*(
    (re.compile(r"(?<=\))(?=\d)"), "*"),                 # )2    → )*2
    (re.compile(r"(?<=x)(?=\()"), "*"),                  # x(    → x*(
    (re.compile(rf"(?<=[\dx)])(?={_NAMES}|pi)"), "*"),   # 2sin  → 2*sin
)

# A signed decimal literal or the variable.
_ARG = r"-?\d*\.?\d+|x"

# ``sin(x)`` / ``sinx`` / ``sin2.5`` / ``sin(-1)``; partial groups like
# ``sin(x+1)`` do not match.
_FUNCTION_CALL = re.compile(rf"({_NAMES})(?:\(\s*({_ARG})\s*\)|({_ARG}))")


def _insert_products(s: str) -> str:
    for pattern, repl in _PRODUCT_RULES:
        s = pattern.sub(repl, s)
    return s


def _canonical_call(match) -> str:
    name = match.group(1)
    arg = match.group(2) if match.group(2) is not None else match.group(3)
    return f"{name}({arg})"


def normalize_expression(raw: str) -> str:
    """Return *raw* with whitespace removed and implicit syntax made explicit.

    Total and idempotent: anything no rule recognises passes through
    unchanged and is left for the evaluator to reject.
    """
    s = re.sub(r"\s+", "", "" if raw is None else str(raw))
    s = _insert_products(s)
    s = _FUNCTION_CALL.sub(_canonical_call, s)
    # The call rewrite can create new adjacencies (``sinx2`` → ``sin(x)2``).
    return _insert_products(s)
