"""Multiple-choice quiz on solution types."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from . import constants as C
from .model import Coefficients, SolutionType, classify

__all__ = [
    "PresentationStyle",
    "QuizProblem",
    "QuizFeedback",
    "QuizSession",
    "generate_quiz_problem",
    "draw_different",
    "answer_options",
    "check_answer",
]

logger = logging.getLogger(__name__)


class PresentationStyle(Enum):
    SYMBOLIC = "equation"
    GRAPHICAL = "graph"


@dataclass(frozen=True)
class QuizProblem:
    a: int
    b: int
    c: int
    d: int
    target: SolutionType
    style: PresentationStyle

    @property
    def coefficients(self) -> Coefficients:
        return Coefficients(self.a, self.b, self.c, self.d)


@dataclass(frozen=True)
class QuizFeedback:
    correct: bool
    message: str


_GRAPH_OPTIONS = {
    SolutionType.ONE: "One Solution: Lines Intersect",
    SolutionType.NONE: "No Solution: Lines are Parallel",
    SolutionType.INFINITE: "Infinite Solutions: Lines are Identical",
}


def draw_different(rng: Any, low: int, high: int, avoid: int, *, max_redraws: int = C.MAX_REDRAWS) -> int:
    """Draw from ``[low, high]`` until the value differs from ``avoid``.

    A range holding at least two integers always contains a value other than
    ``avoid``, so the loop ends almost surely; ``max_redraws`` bounds it anyway.
    """
    if high - low < 1:
        raise ValueError(f"Range [{low}, {high}] must hold at least two integers")
    for _ in range(max_redraws):
        value = rng.randint(low, high)
        if value != avoid:
            return value
    raise RuntimeError(f"No value different from {avoid} drawn in {max_redraws} attempts")


def generate_quiz_problem(rng: Any = None) -> QuizProblem:
    """Return a random problem whose classification equals its target type.

    ``rng`` may be any object with ``randint``/``choice`` (a seeded
    :class:`random.Random` in tests); defaults to the module-level source.
    """
    rng = rng or random
    target = rng.choice(list(SolutionType))
    style = rng.choice(list(PresentationStyle))

    a = rng.randint(*C.QUIZ_SLOPE_RANGE)
    b = rng.randint(*C.QUIZ_INTERCEPT_RANGE)
    if target is SolutionType.ONE:
        c = a + rng.randint(*C.QUIZ_SLOPE_GAP_RANGE) * rng.choice((1, -1))
        d = rng.randint(*C.QUIZ_INTERCEPT_RANGE)
    elif target is SolutionType.NONE:
        c = a
        d = draw_different(rng, *C.QUIZ_INTERCEPT_RANGE, avoid=b)
    else:
        c = a
        d = b

    problem = QuizProblem(a=a, b=b, c=c, d=d, target=target, style=style)
    logger.debug("Generated quiz problem %s", problem)
    return problem


def answer_options(style: PresentationStyle) -> list[str]:
    if style is PresentationStyle.GRAPHICAL:
        return [_GRAPH_OPTIONS[t] for t in SolutionType]
    return [t.label for t in SolutionType]


def check_answer(problem: QuizProblem, selected: str) -> QuizFeedback:
    """Grade ``selected``; the hint on a miss depends on how the problem was shown."""
    if selected.startswith(problem.target.label):
        return QuizFeedback(True, C.CORRECT_MESSAGE)
    if problem.style is PresentationStyle.GRAPHICAL:
        return QuizFeedback(False, C.GRAPH_HINT)
    return QuizFeedback(False, C.SYMBOLIC_HINT.format(a=problem.a, c=problem.c))


@dataclass
class QuizSession:
    """Ten-question quiz with a running score."""

    rng: Any = None
    total: int = C.TOTAL_QUESTIONS
    score: int = 0
    answered: int = 0
    problem: QuizProblem | None = None
    feedback: QuizFeedback | None = None
    finished: bool = False
    history: list[tuple[QuizProblem, QuizFeedback]] = field(default_factory=list)

    @property
    def question_number(self) -> int:
        return self.answered + 1

    def start(self) -> QuizProblem:
        self.score = 0
        self.answered = 0
        self.finished = False
        self.history.clear()
        return self._new_problem()

    def _new_problem(self) -> QuizProblem:
        self.problem = generate_quiz_problem(self.rng)
        self.feedback = None
        return self.problem

    def answer(self, selected: str) -> QuizFeedback:
        if self.problem is None:
            raise ValueError("No active question; call start() first")
        if self.feedback is not None:
            raise ValueError("Question already answered; call next_question()")
        self.feedback = check_answer(self.problem, selected)
        if self.feedback.correct:
            self.score += 1
        self.history.append((self.problem, self.feedback))
        logger.info("Question %d answered %s", self.question_number, "correctly" if self.feedback.correct else "incorrectly")
        return self.feedback

    def next_question(self) -> QuizProblem | None:
        if self.feedback is None:
            raise ValueError("Answer the current question first")
        self.answered += 1
        if self.answered >= self.total:
            self.finished = True
            self.problem = None
            self.feedback = None
            return None
        return self._new_problem()

    def summary(self) -> str:
        if self.score == self.total:
            return C.SCORE_MESSAGES["perfect"]
        if self.score >= C.GREAT_SCORE:
            return C.SCORE_MESSAGES["great"]
        return C.SCORE_MESSAGES["keep"]
