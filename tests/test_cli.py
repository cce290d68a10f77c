from __future__ import annotations

import io
import json
import random
from pathlib import Path

import pytest

from equation_explorer import cli
from equation_explorer.challenge import Challenge, ChallengeSession, ChallengeStatus, EditMode
from equation_explorer.model import Coefficients, SolutionType
from equation_explorer.quiz import generate_quiz_problem


def test_explore_text_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["explore"]) == 0
    out = capsys.readouterr().out
    assert "2x + 1 = -x + 4" in out
    assert "One Solution: Lines cross once." in out
    assert "Intersection: (1, 3)" in out
    assert "x = 1" in out


def test_explore_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["explore", "--a", "3", "--b", "5", "--c", "3", "--d", "-2", "--range", "12", "--samples", "--json"]
    assert cli.main(argv) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["solution_type"] == "No Solution"
    assert data["intersection"] is None
    assert data["half_range"] == 10
    assert len(data["samples"]) == 2 * (10 + 2) + 1
    assert data["exact"] == "no x"


def test_explore_graph(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "g.png"
    assert cli.main(["explore", "--graph", str(target)]) == 0
    assert target.is_file()
    assert str(target) in capsys.readouterr().out


def test_quiz_perfect_run(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    # Replay the same draws to know every target up front
    rng = random.Random(21)
    answers = []
    for _ in range(10):
        target = generate_quiz_problem(rng).target
        answers.append(str(list(SolutionType).index(target) + 1))
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(answers) + "\n"))

    assert cli.main(["--seed", "21", "quiz"]) == 0
    out = capsys.readouterr().out
    assert "Quiz Complete! 10/10" in out
    assert "Perfect Score!" in out


def test_quiz_rejects_bad_choice_then_abandons(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert cli.main(["--seed", "1", "quiz"]) == 1
    out = capsys.readouterr().out
    assert "Please enter 1, 2 or 3." in out
    assert "Quiz abandoned." in out


def test_challenge_session_flow(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    fixed = Challenge(SolutionType.INFINITE, EditMode.EDIT_RIGHT, Coefficients(2, -3, 0, 0))

    def fake_start(self: ChallengeSession) -> Challenge:
        self.challenge = fixed
        self.coefficients = fixed.start
        self.status = ChallengeStatus.ACTIVE
        self.feedback = None
        self.level += 1
        return fixed

    monkeypatch.setattr(ChallengeSession, "next_level", fake_start)
    commands = "a=5\nc=2\nsubmit\nd=-\nd=-3\nsubmit\nquit\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(commands))

    assert cli.main(["challenge"]) == 0
    out = capsys.readouterr().out
    assert "INFINITE SOLUTIONS" in out
    assert "a is locked for this level." in out
    assert "Not quite right. Try again!" in out
    assert "2x -3 = 2x -3" in out
    assert "SUCCESS!" in out


def test_quiz_graph_render_failure_exits_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_matplotlib(*args, **kwargs):
        raise RuntimeError("matplotlib is required to render graphs.")

    monkeypatch.setattr(cli, "render_lines", no_matplotlib)
    monkeypatch.setattr(cli, "_show_problem", lambda problem, ns: cli.render_lines(problem.coefficients, 10))
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    with pytest.raises(SystemExit, match="Error: matplotlib is required"):
        cli.main(["--seed", "3", "quiz", "--graphs"])


def test_explore_prints_unsigned_zero(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["explore", "--a", "1", "--b", "0", "--c", "2", "--d", "0"]) == 0
    out = capsys.readouterr().out
    assert "Intersection: (0, 0)" in out
    assert "-0" not in out
