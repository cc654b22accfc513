from __future__ import annotations

import io
import logging

import pytest

from timeclock import main as entry
from timeclock.config import get_settings_module


class TtyStdin(io.StringIO):
    def isatty(self) -> bool:
        return True


class FailingApp:
    return_code = None

    def run(self):
        raise RuntimeError("boom")


class CleanApp:
    return_code = 0

    def run(self):
        return None


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_exits_with_error_when_stdin_is_not_a_terminal(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert entry.main() == 1
    assert "not a terminal" in capsys.readouterr().err


def test_reports_event_loop_failure(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", TtyStdin(""))
    monkeypatch.setattr(entry, "build_app", lambda: FailingApp())

    assert entry.main() == 1
    assert "error running program: boom" in capsys.readouterr().err


def test_reports_startup_failure(monkeypatch, capsys):
    def broken_build():
        raise PermissionError("cannot open log file")

    monkeypatch.setattr("sys.stdin", TtyStdin(""))
    monkeypatch.setattr(entry, "build_app", broken_build)

    assert entry.main() == 1
    assert "error running program: cannot open log file" in capsys.readouterr().err


def test_clean_exit(monkeypatch):
    monkeypatch.setattr("sys.stdin", TtyStdin(""))
    monkeypatch.setattr(entry, "build_app", lambda: CleanApp())

    assert entry.main() == 0


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "timeclock.config.production"),
        ("prod", "timeclock.config.production"),
        ("TESTING", "timeclock.config.testing"),
        ("anything", "timeclock.config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_configure_logging_uses_file_when_configured(tmp_path, restore_root_logging):
    class Settings:
        LOG_LEVEL = "info"
        LOG_FILE = str(tmp_path / "timeclock.log")

    entry.configure_logging(Settings)
    logging.getLogger("timeclock.test").info("hello")

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    for h in root.handlers:
        h.flush()
    assert "hello" in (tmp_path / "timeclock.log").read_text()


def test_build_app_wires_machine(monkeypatch, restore_root_logging):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("LOG_FILE", "")

    app = entry.build_app()

    assert app.machine.mode.value == "list"
    assert len(app.machine.roster) == 0
