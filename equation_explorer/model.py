"""Equation model for ``a*x + b = c*x + d``.

The left side is read as the line ``y = a*x + b`` and the right side as
``y = c*x + d``. Whether the equation has one, no, or infinitely many
solutions is the same question as whether the two lines cross once, run
parallel, or coincide.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

__all__ = [
    "COEFFICIENT_NAMES",
    "SolutionType",
    "Coefficients",
    "IntersectionPoint",
    "classify",
    "intersection",
    "format_side",
    "format_equation",
    "describe",
]

COEFFICIENT_NAMES = ("a", "b", "c", "d")


class SolutionType(Enum):
    ONE = "One Solution"
    NONE = "No Solution"
    INFINITE = "Infinite Solutions"

    @property
    def label(self) -> str:
        return self.value


_DESCRIPTIONS = {
    SolutionType.ONE: "Lines cross once.",
    SolutionType.NONE: "Parallel lines.",
    SolutionType.INFINITE: "Same line.",
}


@dataclass(frozen=True)
class Coefficients:
    """Slope/intercept pairs of the left (a, b) and right (c, d) lines."""

    a: int = 0
    b: int = 0
    c: int = 0
    d: int = 0

    def with_value(self, name: str, value: int) -> "Coefficients":
        if name not in COEFFICIENT_NAMES:
            raise ValueError(f"Unknown coefficient {name!r}; expected one of {COEFFICIENT_NAMES}")
        return replace(self, **{name: value})

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)


@dataclass(frozen=True)
class IntersectionPoint:
    x: float
    y: float


def classify(a: int, b: int, c: int, d: int) -> SolutionType:
    if a == c:
        return SolutionType.INFINITE if b == d else SolutionType.NONE
    return SolutionType.ONE


def _round2(value: float) -> float:
    """Round to 2 decimals with ties away from zero; never returns ``-0.0``."""
    rounded = float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
    return rounded + 0.0


def intersection(a: int, b: int, c: int, d: int) -> IntersectionPoint | None:
    """Return the crossing point rounded to 2 decimals, or ``None`` for parallel/identical lines."""
    if a == c:
        return None
    x = (d - b) / (a - c)
    y = a * x + b
    return IntersectionPoint(x=_round2(x), y=_round2(y))


def format_side(m: int, k: int) -> str:
    """Render one side of the equation, e.g. ``2x + 1``, ``-x -3`` or ``0``."""
    if m == 0 and k == 0:
        return "0"
    if m == 0:
        m_str = ""
    elif m == 1:
        m_str = "x"
    elif m == -1:
        m_str = "-x"
    else:
        m_str = f"{m}x"

    if k == 0 and m != 0:
        k_str = ""
    elif k > 0 and m != 0:
        k_str = f"+ {k}"
    else:
        k_str = str(k)
    return f"{m_str} {k_str}".strip()


def format_equation(coeffs: Coefficients) -> str:
    return f"{format_side(coeffs.a, coeffs.b)} = {format_side(coeffs.c, coeffs.d)}"


def describe(solution_type: SolutionType) -> str:
    return _DESCRIPTIONS[solution_type]
