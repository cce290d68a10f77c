"""Command‑line front end: explore, quiz and challenge modes."""
from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from dataclasses import asdict
from typing import Any

from . import constants as C
from .challenge import ChallengeSession
from .inputs import CoefficientField
from .model import Coefficients, format_equation
from .quiz import PresentationStyle, QuizProblem, QuizSession, answer_options
from .state import ExplorerState
from .tools.graph import render_lines
from .tools.graph_analysis import sample_points
from .tools.symbolic_solve import format_exact

__all__ = ["main"]


def _preview_graph(path: str) -> None:
    """Display the generated graph PNG in a Matplotlib window (best‑effort)."""
    try:
        import numpy as np  # type: ignore
        from PIL import Image  # type: ignore
        import matplotlib.pyplot as plt  # imported lazily to avoid GUI deps
    except ImportError as exc:
        print(
            f"⚠️ Could not preview graph image; missing dependency: {exc}",
            file=sys.stderr,
        )
        return

    try:
        img = Image.open(path).convert("RGBA")
        arr = np.array(img)
        fig, ax = plt.subplots()
        ax.imshow(arr)
        ax.axis("off")
        plt.show()
    except Exception as exc:
        print(f"⚠️ Could not preview graph image: {exc}", file=sys.stderr)


def _read(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


# ---------------------------------------------------------------------------
# Explore
# ---------------------------------------------------------------------------


def _run_explore(ns: argparse.Namespace) -> int:
    state = ExplorerState(coefficients=Coefficients(ns.a, ns.b, ns.c, ns.d))
    state.set_half_range(ns.range)
    report = state.snapshot(with_samples=ns.samples)
    report.exact = format_exact(state.coefficients)

    if ns.graph or ns.preview:
        report.graph_path = render_lines(state.coefficients, state.half_range, title=report.equation, path=ns.graph)

    if ns.json:
        print(json.dumps(asdict(report), ensure_ascii=False, separators=(",", ":")))
    else:
        print(report.equation)
        print(f"{report.solution_type}: {report.description}")
        if report.intersection is not None:
            print(f"Intersection: ({report.intersection.x:g}, {report.intersection.y:g})  [{report.exact}]")
        print(f"Axis range: -{report.half_range}..{report.half_range}")
        if report.samples:
            for pt in report.samples:
                print(f"  x={pt.x:>4}  y1={pt.y1:>6}  y2={pt.y2:>6}")
        if report.graph_path:
            print(f"✔ Graph written to {report.graph_path}")

    if ns.preview and report.graph_path:
        _preview_graph(report.graph_path)
    return 0


# ---------------------------------------------------------------------------
# Quiz
# ---------------------------------------------------------------------------


def _show_problem(problem: QuizProblem, ns: argparse.Namespace) -> None:
    if problem.style is PresentationStyle.SYMBOLIC:
        print("Predict the solution type")
        print(f"    {format_equation(problem.coefficients)}")
        return
    print("Analyze the graph & Explain Why")
    if ns.graphs:
        path = render_lines(problem.coefficients, C.DEFAULT_HALF_RANGE)
        print(f"    graph: {path}")
    else:
        for pt in sample_points(problem.a, problem.b, problem.c, problem.d, C.DEFAULT_HALF_RANGE)[2:-2:5]:
            print(f"    x={pt.x:>4}  red={pt.y1:>4}  blue={pt.y2:>4}")


def _choose(options: list[str]) -> str | None:
    for i, opt in enumerate(options, 1):
        print(f"  {i}. {opt}")
    while True:
        raw = _read("Your answer (1-3): ")
        if raw is None:
            return None
        raw = raw.strip()
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        print("Please enter 1, 2 or 3.")


def _run_quiz(ns: argparse.Namespace, rng: Any) -> int:
    session = QuizSession(rng=rng)
    problem: QuizProblem | None = session.start()
    while problem is not None:
        print(f"\nQuestion {session.question_number} of {session.total}   🏆 {session.score}")
        _show_problem(problem, ns)
        selected = _choose(answer_options(problem.style))
        if selected is None:
            print("\nQuiz abandoned.")
            return 1
        feedback = session.answer(selected)
        print("✔ Great Job!" if feedback.correct else "✘ Oops!")
        print(feedback.message)
        problem = session.next_question()

    print(f"\nQuiz Complete! {session.score}/{session.total}")
    print(session.summary())
    return 0


# ---------------------------------------------------------------------------
# Challenge
# ---------------------------------------------------------------------------


def _show_challenge(session: ChallengeSession) -> None:
    assert session.challenge is not None
    print(f"\nLevel {session.level} - Make this equation have: {session.challenge.goal.label.upper()}")
    editable = ", ".join(f"{n} ({C.COEFFICIENT_LABELS[n]})" for n in sorted(session.challenge.editable))
    print(f"You may edit: {editable}")
    print(f"    {format_equation(session.coefficients)}")


def _apply_edit(session: ChallengeSession, fields: dict[str, CoefficientField], command: str) -> None:
    name, _, text = command.partition("=")
    name = name.strip()
    if name not in fields:
        print(f"Unknown coefficient {name!r}; use a, b, c or d.")
        return
    if session.challenge is not None and name in session.challenge.locked:
        print(f"{name} is locked for this level.")
        return
    fld = fields[name]
    fld.edit(text.strip())
    fld.blur()
    print(f"    {format_equation(session.coefficients)}")


def _run_challenge(ns: argparse.Namespace, rng: Any) -> int:
    session = ChallengeSession(rng=rng)
    fields = {
        name: CoefficientField(name, on_commit=session.set_coefficient)
        for name in ("a", "b", "c", "d")
    }

    def _new_level() -> None:
        session.next_level()
        for name, fld in fields.items():
            fld.sync(getattr(session.coefficients, name))
        _show_challenge(session)

    print("Fix the Equation: type name=value (e.g. c=3), 'submit', 'next' or 'quit'.")
    _new_level()
    while True:
        raw = _read("> ")
        if raw is None:
            return 0
        command = raw.strip().lower()
        if command in ("quit", "q", "exit"):
            return 0
        if command == "next":
            _new_level()
        elif command == "submit":
            if session.submit():
                print("🏆 SUCCESS! Type 'next' for the next level.")
            else:
                print("✘ Not quite right. Try again!")
        elif "=" in command:
            _apply_edit(session, fields, command)
        elif command:
            print("Commands: name=value, submit, next, quit")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(description="Explore one, no, and infinite solutions of ax + b = cx + d")
    parser.add_argument("--seed", type=int, help="Seed for reproducible quiz/challenge draws")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for equation_explorer",
    )
    sub = parser.add_subparsers(dest="mode", required=True)

    explore = sub.add_parser("explore", help="Classify and graph an equation")
    for name in ("a", "b", "c", "d"):
        explore.add_argument(f"--{name}", type=int, default=C.DEFAULT_COEFFICIENTS[name])
    explore.add_argument("--range", type=int, default=C.DEFAULT_HALF_RANGE, help="Graph axis half-range (5-50)")
    explore.add_argument("--samples", action="store_true", help="Include the sampled points")
    explore.add_argument("--graph", help="Write the graph PNG to this path")
    explore.add_argument("--preview", action="store_true", help="Preview graph PNG")
    explore.add_argument("--json", action="store_true", help="Print JSON instead of text")

    quiz = sub.add_parser("quiz", help="Ten-question solution type quiz")
    quiz.add_argument("--graphs", action="store_true", help="Render PNG graphs for graph questions")

    sub.add_parser("challenge", help="Fix the equation to reach a goal")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:  # noqa: D401 – imperative mood
    ns = _parse_cli(argv)

    logging.basicConfig(level=logging.WARNING)
    level = getattr(logging, ns.log_level)
    pkg_logger = logging.getLogger("equation_explorer")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)

    rng = random.Random(ns.seed) if ns.seed is not None else None

    try:
        if ns.mode == "explore":
            return _run_explore(ns)
        if ns.mode == "quiz":
            return _run_quiz(ns, rng)
    except RuntimeError as exc:
        sys.exit(f"Error: {exc}")
    return _run_challenge(ns, rng)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
