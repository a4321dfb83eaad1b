"""
Graph builder for AreaSolver.

``plot_data`` samples both curves (and the region between the integration
limits) with NumPy; ``build_figure`` draws them on a dark-themed matplotlib
Figure.
"""

import numpy as np

from areasolver import config

# ── palette ────────────────────────────────────────────────────────────────
C_BG       = "#0f0f0f"
C_AX       = "#181818"
C_GRID     = "#252525"
C_TICK     = "#666666"
C_SPINE    = "#333333"
C_LINE1    = "#1a8cff"   # f(x)
C_LINE2    = "#ff8c42"   # g(x)
C_FILL     = "#0064c8"   # enclosed area
C_DOT      = "#4caf50"   # intersection dot
C_TEXT     = "#cccccc"


def _sample(fn, xs) -> np.ndarray:
    return np.array([fn(float(x)) for x in xs], dtype=float)


def plot_range(xs, limit_from=None, limit_to=None) -> tuple:
    """Return ``(xmin, xmax)`` covering the sample xs and the limits, padded by 1."""
    xs = list(xs)
    first = xs[0] if xs else 0.0
    lo = limit_from if limit_from is not None else first
    hi = limit_to if limit_to is not None else first
    return min(xs + [lo]) - 1, max(xs + [hi]) + 1


def plot_data(f, g, xs, limit_from=None, limit_to=None, *,
              samples: int = config.PLOT_SAMPLES,
              shade_samples: int = config.SHADE_SAMPLES) -> dict:
    """
    Sample *f* and *g* for charting.

    Returned dict keys:
      x, f, g : curve samples (undefined points are ``nan``)
      shade   : ``{"x": [...], "y": [...]}`` closed polygon between the upper
                and lower curve over the limits, or None when a limit is unset
    """
    xmin, xmax = plot_range(xs, limit_from, limit_to)
    x_plot = np.linspace(xmin, xmax, samples)
    data = {
        "x": x_plot,
        "f": _sample(f, x_plot),
        "g": _sample(g, x_plot),
        "shade": None,
    }

    if limit_from is not None and limit_to is not None:
        mid = (limit_from + limit_to) / 2
        top_is_f = f(mid) >= g(mid)
        x_shade = np.linspace(limit_from, limit_to, shade_samples)
        y_f = _sample(f, x_shade)
        y_g = _sample(g, x_shade)
        top, bottom = (y_f, y_g) if top_is_f else (y_g, y_f)
        data["shade"] = {
            "x": np.concatenate([x_shade, x_shade[::-1]]),
            "y": np.concatenate([top, bottom[::-1]]),
        }
    return data


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def build_figure(data: dict, f_label: str = "f(x)", g_label: str = "g(x)",
                 intersections=None):
    """Build and return a dark-themed matplotlib Figure for *data*."""
    from matplotlib.figure import Figure

    fig = Figure(figsize=(7, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(data["x"], data["f"], color=C_LINE1, linewidth=2, label=f"f(x) = {f_label}")
    ax.plot(data["x"], data["g"], color=C_LINE2, linewidth=2, label=f"g(x) = {g_label}")

    shade = data.get("shade")
    if shade is not None:
        ax.fill(shade["x"], shade["y"], color=C_FILL, alpha=0.2, linewidth=0)

    if intersections:
        # Only mark what falls inside the visible range.
        xmin, xmax = data["x"][0], data["x"][-1]
        shown = [r for r in intersections if xmin <= r <= xmax]
        if shown:
            ys = np.interp(shown, data["x"], data["f"])
            ax.scatter(shown, ys, color=C_DOT, s=50, zorder=5, label="Intersections")

    ax.set_title("Graph of f(x) and g(x)", color=C_TEXT, fontsize=10)
    ax.set_xlabel("x", color=C_TEXT)
    ax.set_ylabel("y", color=C_TEXT)
    ax.legend(fontsize=8, facecolor="#1e1e1e", edgecolor=C_SPINE, labelcolor=C_TEXT)
    fig.tight_layout(pad=1.2)
    return fig
