"""Exact solver for ``a*x + b = c*x + d``."""
from __future__ import annotations

from typing import Any

from ..model import Coefficients

__all__ = ["symbolic_solve", "format_exact"]


def symbolic_solve(coeffs: Coefficients) -> list[Any] | None:
    """Return exact solution(s) of the equation.

    Returns
    -------
    list | None
        ``[x]`` (a SymPy ``Rational``) when the lines cross once, ``[]`` when
        they are parallel, and ``None`` when every real ``x`` is a solution.
    """
    import sympy as sp

    x = sp.Symbol("x")
    a, b, c, d = (sp.Integer(v) for v in coeffs.as_tuple())
    eq = sp.Eq(a * x + b, c * x + d)
    if eq is sp.true:
        return None
    if eq is sp.false:
        return []
    return list(sp.solve(eq, x))


def format_exact(coeffs: Coefficients) -> str:
    """Human-readable exact answer, e.g. ``x = 3/2``."""
    solutions = symbolic_solve(coeffs)
    if solutions is None:
        return "every x"
    if not solutions:
        return "no x"
    return f"x = {solutions[0]}"
