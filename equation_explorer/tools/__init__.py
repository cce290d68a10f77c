"""Graph and solver helpers for the explorer."""

from .graph import render_lines
from .graph_analysis import SamplePoint, clamp_half_range, sample_arrays, sample_points
from .symbolic_solve import format_exact, symbolic_solve

__all__ = [
    "render_lines",
    "SamplePoint",
    "sample_points",
    "sample_arrays",
    "clamp_half_range",
    "symbolic_solve",
    "format_exact",
]
