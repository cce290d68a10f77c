""""Fix the equation" challenge.

A challenge names a goal solution type and locks one side of the equation
(or neither). The player edits the unlocked coefficients until the goal
predicate holds.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from . import constants as C
from .model import COEFFICIENT_NAMES, Coefficients, SolutionType

__all__ = [
    "EditMode",
    "ChallengeStatus",
    "Challenge",
    "ChallengeSession",
    "editable_coefficients",
    "goal_reached",
    "generate_challenge",
    "submit_challenge",
]

logger = logging.getLogger(__name__)


class EditMode(Enum):
    EDIT_RIGHT = "right"
    EDIT_LEFT = "left"
    EDIT_BOTH = "both"


class ChallengeStatus(Enum):
    NO_CHALLENGE = "no_challenge"
    ACTIVE = "active"
    SOLVED = "solved"


_EDITABLE = {
    EditMode.EDIT_RIGHT: frozenset({"c", "d"}),
    EditMode.EDIT_LEFT: frozenset({"a", "b"}),
    EditMode.EDIT_BOTH: frozenset(COEFFICIENT_NAMES),
}


def editable_coefficients(mode: EditMode) -> frozenset[str]:
    return _EDITABLE[mode]


def goal_reached(goal: SolutionType, a: int, b: int, c: int, d: int) -> bool:
    if goal is SolutionType.NONE:
        return a == c and b != d
    if goal is SolutionType.INFINITE:
        return a == c and b == d
    return a != c


@dataclass(frozen=True)
class Challenge:
    goal: SolutionType
    edit_mode: EditMode
    start: Coefficients

    @property
    def locked(self) -> frozenset[str]:
        return frozenset(COEFFICIENT_NAMES) - editable_coefficients(self.edit_mode)

    @property
    def editable(self) -> frozenset[str]:
        return editable_coefficients(self.edit_mode)

    def is_solved(self, coeffs: Coefficients) -> bool:
        return goal_reached(self.goal, *coeffs.as_tuple())


def generate_challenge(rng: Any = None) -> Challenge:
    """Pick a goal and edit mode; zero the editable side(s) of a random start.

    The start is not checked against the goal, so a challenge may begin
    already solved (e.g. a one-solution goal with ``a != c``).
    """
    rng = rng or random
    goal = rng.choice([SolutionType.NONE, SolutionType.INFINITE, SolutionType.ONE])
    mode = rng.choice(list(EditMode))

    values = {
        "a": rng.randint(*C.CHALLENGE_SLOPE_RANGE),
        "b": rng.randint(*C.CHALLENGE_INTERCEPT_RANGE),
        "c": rng.randint(*C.CHALLENGE_SLOPE_RANGE),
        "d": rng.randint(*C.CHALLENGE_INTERCEPT_RANGE),
    }
    for name in editable_coefficients(mode):
        values[name] = 0

    challenge = Challenge(goal=goal, edit_mode=mode, start=Coefficients(**values))
    logger.debug("Generated challenge goal=%s mode=%s start=%s", goal.label, mode.value, challenge.start)
    return challenge


def submit_challenge(challenge: Challenge, a: int, b: int, c: int, d: int) -> bool:
    return goal_reached(challenge.goal, a, b, c, d)


@dataclass
class ChallengeSession:
    """Challenge mode state: NO_CHALLENGE → ACTIVE ⇄ SOLVED → ACTIVE (next level)."""

    rng: Any = None
    challenge: Challenge | None = None
    coefficients: Coefficients = field(default_factory=Coefficients)
    status: ChallengeStatus = ChallengeStatus.NO_CHALLENGE
    feedback: str | None = None
    level: int = 0

    def start(self) -> Challenge:
        self.challenge = generate_challenge(self.rng)
        self.coefficients = self.challenge.start
        self.status = ChallengeStatus.ACTIVE
        self.feedback = None
        self.level += 1
        return self.challenge

    next_level = start

    def set_coefficient(self, name: str, value: int) -> Coefficients:
        if self.challenge is None:
            raise ValueError("No active challenge; call start() first")
        if name in self.challenge.locked:
            raise ValueError(f"Coefficient {name!r} is locked for this challenge")
        self.coefficients = self.coefficients.with_value(name, value)
        return self.coefficients

    def submit(self) -> bool:
        if self.challenge is None:
            return False
        solved = self.challenge.is_solved(self.coefficients)
        self.status = ChallengeStatus.SOLVED if solved else ChallengeStatus.ACTIVE
        self.feedback = "success" if solved else "error"
        logger.info("Level %d submit %s -> %s", self.level, self.coefficients, self.feedback)
        return solved
