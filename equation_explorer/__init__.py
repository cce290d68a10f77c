"""Public package interface for the Equation Explorer.

Classify ``a*x + b = c*x + d`` as having one, no, or infinitely many
solutions, sample both lines for graphing, and generate quiz and
"fix the equation" challenge problems.

Typical usage
-------------
>>> from equation_explorer import classify, intersection
>>> classify(2, 1, -1, 4)
<SolutionType.ONE: 'One Solution'>
>>> intersection(2, 1, -1, 4)
IntersectionPoint(x=1.0, y=3.0)
"""
from importlib.metadata import version as _version  # type: ignore

from .model import (
    Coefficients,
    IntersectionPoint,
    SolutionType,
    classify,
    format_equation,
    intersection,
)
from .tools.graph_analysis import SamplePoint, sample_points
from .quiz import PresentationStyle, QuizProblem, QuizSession, check_answer, generate_quiz_problem
from .challenge import (
    Challenge,
    ChallengeSession,
    EditMode,
    generate_challenge,
    submit_challenge,
)

__all__ = [
    "Coefficients",
    "IntersectionPoint",
    "SolutionType",
    "classify",
    "intersection",
    "format_equation",
    "SamplePoint",
    "sample_points",
    "PresentationStyle",
    "QuizProblem",
    "QuizSession",
    "generate_quiz_problem",
    "check_answer",
    "Challenge",
    "ChallengeSession",
    "EditMode",
    "generate_challenge",
    "submit_challenge",
    "__version__",
]

try:
    __version__ = _version("equation-explorer")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
