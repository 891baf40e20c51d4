"""Tests for main.py - argument handling and startup/shutdown wiring."""

import builtins
import sys
import threading
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import main
import settings as settings_module


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore any developer .env file and REMINDERS_* variables."""
    monkeypatch.setattr(settings_module, "ENV_FILE", tmp_path / ".env")
    for key in ("REMINDERS_WATCH_INTERVAL", "REMINDERS_DUE_SOON_MINUTES",
                "REMINDERS_LOG_LEVEL", "REMINDERS_PROMPT"):
        monkeypatch.delenv(key, raising=False)


class TestBuildSettings:
    """Tests for flag-over-environment precedence."""

    def test_defaults(self) -> None:
        settings = main.build_settings(main.parse_args([]))

        assert settings.watch_interval == 300.0
        assert settings.due_soon_minutes == 60

    def test_flags_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REMINDERS_WATCH_INTERVAL", "30")

        settings = main.build_settings(
            main.parse_args(["--interval", "2", "--due-soon-minutes", "15", "--log-level", "info"])
        )

        assert settings.watch_interval == 2.0
        assert settings.due_soon_minutes == 15
        assert settings.log_level == "INFO"

    def test_invalid_flag_value(self) -> None:
        with pytest.raises(ValueError):
            main.build_settings(main.parse_args(["--interval", "-1"]))

    def test_unknown_log_level_flag(self) -> None:
        with pytest.raises(ValueError, match="unknown log level"):
            main.build_settings(main.parse_args(["--log-level", "verbose"]))


class TestMain:
    """Tests for the full startup and shutdown path."""

    def test_unknown_log_level_is_a_usage_error(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main.main(["--log-level", "verbose"])

        assert exc_info.value.code == 2
        err = capsys.readouterr().err
        assert "usage:" in err
        assert "unknown log level 'VERBOSE'" in err

    def test_bad_environment_number_is_a_usage_error(self, monkeypatch: pytest.MonkeyPatch,
                                                     capsys: pytest.CaptureFixture) -> None:
        monkeypatch.setenv("REMINDERS_WATCH_INTERVAL", "often")

        with pytest.raises(SystemExit) as exc_info:
            main.main([])

        assert exc_info.value.code == 2
        assert "REMINDERS_WATCH_INTERVAL must be a number" in capsys.readouterr().err

    def test_environment_log_level_checked(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REMINDERS_LOG_LEVEL", "loud")

        with pytest.raises(SystemExit):
            main.main([])

    def test_exit_stops_watcher(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        lines = iter(["add bob 2000-01-01", "list", "exit"])
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(lines))

        main.main(["--interval", "60"])

        out = capsys.readouterr().out
        assert "bob" in out and "OVERDUE" in out
        assert out.rstrip().endswith("Exiting program...")
        assert not any(t.name == "due-watcher" and t.is_alive() for t in threading.enumerate())
