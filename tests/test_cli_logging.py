import logging
from typing import Any

from equation_explorer import cli


def test_log_level_is_isolated(monkeypatch: Any, capsys: Any) -> None:
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    for h in old_handlers:
        root.removeHandler(h)

    pkg_logger = logging.getLogger("equation_explorer")
    pkg_old_handlers = pkg_logger.handlers[:]
    pkg_old_level = pkg_logger.level
    for h in pkg_old_handlers:
        pkg_logger.removeHandler(h)

    def fake_explore(ns):
        logging.getLogger().debug("root debug")
        logging.getLogger("equation_explorer").debug("pkg debug")
        return 0

    monkeypatch.setattr(cli, "_run_explore", fake_explore)
    try:
        assert cli.main(["--log-level", "DEBUG", "explore"]) == 0
        err = capsys.readouterr().err
        assert "pkg debug" in err
        assert "root debug" not in err
    finally:
        for h in old_handlers:
            root.addHandler(h)
        root.setLevel(old_level)
        for h in pkg_logger.handlers[len(pkg_old_handlers):]:
            pkg_logger.removeHandler(h)
        for h in pkg_old_handlers:
            pkg_logger.addHandler(h)
        pkg_logger.setLevel(pkg_old_level)
        pkg_logger.propagate = True
