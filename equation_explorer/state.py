from __future__ import annotations

from dataclasses import dataclass, field

from . import constants as C
from .model import Coefficients, IntersectionPoint, classify, describe, format_equation, intersection
from .tools.graph_analysis import SamplePoint, clamp_half_range, sample_points


@dataclass
class ExplorerState:
    """Typed container for the explore view (coefficients + axis range)."""

    coefficients: Coefficients = field(
        default_factory=lambda: Coefficients(**C.DEFAULT_COEFFICIENTS)
    )
    half_range: int = C.DEFAULT_HALF_RANGE

    def set_half_range(self, value: int) -> int:
        self.half_range = clamp_half_range(value)
        return self.half_range

    def snapshot(self, *, with_samples: bool = False) -> "ExploreReport":
        a, b, c, d = self.coefficients.as_tuple()
        solution_type = classify(a, b, c, d)
        return ExploreReport(
            equation=format_equation(self.coefficients),
            coefficients=self.coefficients,
            half_range=self.half_range,
            solution_type=solution_type.label,
            description=describe(solution_type),
            intersection=intersection(a, b, c, d),
            samples=sample_points(a, b, c, d, self.half_range) if with_samples else None,
        )


@dataclass
class ExploreReport:
    """Everything a renderer needs for one explore frame; recomputed on demand."""

    equation: str
    coefficients: Coefficients
    half_range: int
    solution_type: str
    description: str
    intersection: IntersectionPoint | None = None
    samples: list[SamplePoint] | None = None
    exact: str | None = None
    graph_path: str | None = None
