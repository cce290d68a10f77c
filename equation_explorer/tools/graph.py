"""Graph rendering helpers."""
from __future__ import annotations

import logging
import os
import tempfile
import warnings
from pathlib import Path

from ..constants import LEFT_COLOR, RIGHT_COLOR
from ..model import Coefficients, format_side, intersection
from .graph_analysis import sample_arrays

__all__ = ["render_lines"]

logger = logging.getLogger(__name__)


def _load_pyplot():
    # Lazy import so the package works without matplotlib unless a graph is requested
    try:
        import matplotlib  # type: ignore
        import matplotlib.pyplot as plt  # type: ignore
    except Exception as exc:  # pragma: no cover - environment-dependent
        raise RuntimeError(
            "matplotlib is required to render graphs. Install it or run without --graph."
        ) from exc

    # Select a usable backend on demand
    try:
        backend = matplotlib.get_backend().lower()
    except Exception:
        backend = ""
    if backend not in {"agg", "tkagg"}:
        env_backend = os.environ.get("MPLBACKEND", "").lower()
        prefer_tk = bool(os.environ.get("DISPLAY")) or env_backend == "tkagg"
        if prefer_tk:
            try:
                matplotlib.use("TkAgg")
            except Exception as exc:  # pragma: no cover - depends on system backend
                warnings.warn(
                    f"Preferred GUI backend 'TkAgg' unavailable; falling back to 'Agg': {exc}",
                    RuntimeWarning,
                )
                matplotlib.use("Agg")
        else:
            matplotlib.use("Agg")
    return plt


def render_lines(
    coeffs: Coefficients,
    half_range: int,
    *,
    title: str | None = None,
    path: str | Path | None = None,
) -> str:
    """Render both lines to a **PNG file** and return the file path (string).

    The left line ``y = a*x + b`` is drawn red and the right line
    ``y = c*x + d`` blue. Both axes are fixed to ``[-half_range, half_range]``
    and the crossing point, when there is one, is marked.
    """
    plt = _load_pyplot()
    xs, y1s, y2s = sample_arrays(coeffs.a, coeffs.b, coeffs.c, coeffs.d, half_range)

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.plot(xs, y1s, color=LEFT_COLOR, linewidth=3, label=f"y = {format_side(coeffs.a, coeffs.b)}")
    ax.plot(xs, y2s, color=RIGHT_COLOR, linewidth=3, label=f"y = {format_side(coeffs.c, coeffs.d)}")

    point = intersection(*coeffs.as_tuple())
    if point is not None and abs(point.x) <= half_range and abs(point.y) <= half_range:
        ax.scatter([point.x], [point.y], color="black", zorder=3)
        ax.annotate(f"({point.x:g}, {point.y:g})", (point.x, point.y), textcoords="offset points", xytext=(6, 6))

    if title:
        ax.set_title(str(title))

    ax.grid(True, linestyle="--", color="#e5e7eb")
    ax.set_xlim(-half_range, half_range)
    ax.set_ylim(-half_range, half_range)
    ax.set_aspect("equal", adjustable="box")
    ax.legend(loc="upper left")

    # --- move the axes spines to x=0, y=0 and hide the others ---
    ax.spines["left"].set_position(("data", 0))
    ax.spines["bottom"].set_position(("data", 0))
    ax.spines["right"].set_color("none")
    ax.spines["top"].set_color("none")

    # ticks now belong on the visible spines
    ax.xaxis.set_ticks_position("bottom")
    ax.yaxis.set_ticks_position("left")
    ax.tick_params(direction="out")

    if path is None:
        fd, tmp = tempfile.mkstemp(suffix=".png")
        os.close(fd)
        png_path = Path(tmp)
    else:
        png_path = Path(path)
    fig.savefig(png_path, format="png")
    plt.close(fig)
    logger.debug("Rendered %s to %s", coeffs, png_path)
    return str(png_path)
