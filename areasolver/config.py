"""
AreaSolver — Engine defaults and JSON settings.

Overrides are read from ``<project>/data/areasolver.json`` (or the file named
by ``AREASOLVER_SETTINGS``) and merged over ``DEFAULT_SETTINGS``.
"""

import json
import logging
import math
import os
from typing import Optional

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "areasolver.json")

SETTINGS_ENV = "AREASOLVER_SETTINGS"

# ── Root scan ───────────────────────────────────────────────────────────
SCAN_MIN = -100.0
SCAN_MAX = 100.0
SCAN_STEPS = 2000
BISECT_ITERATIONS = 60
BISECT_TOL = 1e-12
DEDUP_TOL = 1e-6

# ── Quadrature ──────────────────────────────────────────────────────────
SIMPSON_N = 1000
AREA_N = 2000

# ── Plot sampling ───────────────────────────────────────────────────────
PLOT_SAMPLES = 500
SHADE_SAMPLES = 200

# ── Session defaults ────────────────────────────────────────────────────
DEFAULT_F = "x^2 - 2x"
DEFAULT_G = "6x - x^2"
DEFAULT_XS = [-2.0, 0.0, 1.0, 2.0, 4.0]

DEFAULT_SETTINGS = {
    "scan_min": SCAN_MIN,
    "scan_max": SCAN_MAX,
    "scan_steps": SCAN_STEPS,
    "bisect_iterations": BISECT_ITERATIONS,
    "bisect_tol": BISECT_TOL,
    "dedup_tol": DEDUP_TOL,
    "area_n": AREA_N,
    "plot_samples": PLOT_SAMPLES,
    "shade_samples": SHADE_SAMPLES,
    "f": DEFAULT_F,
    "g": DEFAULT_G,
    "xs": DEFAULT_XS,
}


def _settings_path(path: Optional[str] = None) -> str:
    if path:
        return path
    return os.environ.get(SETTINGS_ENV) or _DATA_FILE


def default_settings() -> dict:
    """Return a fresh copy of the defaults (lists are not shared)."""
    settings = dict(DEFAULT_SETTINGS)
    settings["xs"] = list(DEFAULT_XS)
    return settings


# Counts that must be at least 1; bisect_iterations may be 0.
_POSITIVE_COUNTS = {"scan_steps", "area_n", "plot_samples", "shade_samples"}


def _is_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _coerce(key: str, value):
    """Return *value* converted to the type of ``DEFAULT_SETTINGS[key]``.

    Raises ValueError when it cannot be.
    """
    default = DEFAULT_SETTINGS[key]
    if isinstance(default, str):
        if isinstance(value, str):
            return value
    elif isinstance(default, list):
        if isinstance(value, list) and all(_is_number(v) for v in value):
            return [float(v) for v in value]
    elif isinstance(default, int):
        if _is_number(value) and float(value).is_integer():
            count = int(value)
            if count >= (1 if key in _POSITIVE_COUNTS else 0):
                return count
    elif _is_number(value):
        return float(value)
    raise ValueError(f"invalid value {value!r} for '{key}'")


def merge_settings(stored: dict, settings: Optional[dict] = None) -> dict:
    """Merge *stored* over *settings* (defaults when omitted).

    Unknown keys are ignored. A value that does not fit the default's type
    is logged and the previous value is kept.
    """
    merged = default_settings() if settings is None else dict(settings)
    for key, value in stored.items():
        if key not in DEFAULT_SETTINGS:
            continue
        try:
            merged[key] = _coerce(key, value)
        except ValueError as e:
            logger.warning("Ignoring setting: %s", e)
    return merged


def load_settings(path: Optional[str] = None) -> dict:
    """Return defaults merged with the JSON file at *path*, if readable.

    A missing file, an unreadable file or invalid JSON falls back to the
    defaults; see ``merge_settings`` for how individual values are checked.
    """
    settings = default_settings()
    target = _settings_path(path)
    if not os.path.exists(target):
        return settings
    try:
        with open(target, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except (ValueError, OSError) as e:  # JSONDecodeError, UnicodeDecodeError
        logger.warning("Ignoring settings file %s: %s", target, e)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", target)
        return settings
    return merge_settings(stored, settings)


def save_settings(settings: dict, path: Optional[str] = None) -> str:
    """Persist *settings* as JSON and return the path written."""
    target = _settings_path(path)
    os.makedirs(os.path.dirname(os.path.abspath(target)), exist_ok=True)
    with open(target, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2, ensure_ascii=False)
    return target
