from pathlib import Path
from typing import Any

import pytest

from equation_explorer.model import Coefficients
from equation_explorer.tools import graph


def test_render_lines_headless_uses_agg(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("MPLBACKEND", raising=False)

    path = graph.render_lines(Coefficients(2, 1, -1, 4), 10)
    try:
        assert Path(path).is_file()
        assert Path(path).suffix == ".png"
        import matplotlib
        assert matplotlib.get_backend().lower() == "agg"
    finally:
        Path(path).unlink(missing_ok=True)


def test_render_lines_writes_requested_path(tmp_path: Path) -> None:
    target = tmp_path / "lines.png"
    out = graph.render_lines(Coefficients(3, 5, 3, -2), 5, title="parallel", path=target)
    assert out == str(target)
    assert target.stat().st_size > 0


def test_render_lines_identical_lines(tmp_path: Path) -> None:
    out = graph.render_lines(Coefficients(-2, 7, -2, 7), 50, path=tmp_path / "same.png")
    assert Path(out).is_file()


def test_render_lines_rejects_bad_range(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="positive integer"):
        graph.render_lines(Coefficients(1, 0, 2, 0), 0, path=tmp_path / "bad.png")


def test_missing_gui_backend_warns(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MPLBACKEND", "tkagg")
    monkeypatch.delenv("DISPLAY", raising=False)

    import matplotlib
    original_use = matplotlib.use

    def fail_use(backend: str, *args: Any, **kwargs: Any) -> Any:
        if backend == "TkAgg":
            raise ImportError("TkAgg not available")
        return original_use(backend, *args, **kwargs)

    original_use("pdf")
    monkeypatch.setattr(matplotlib, "use", fail_use)
    with pytest.warns(RuntimeWarning):
        graph.render_lines(Coefficients(1, 1, 2, 2), 10, path=tmp_path / "warn.png")

    assert matplotlib.get_backend().lower() == "agg"
