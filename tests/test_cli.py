"""Tests for the command-line entry point."""

import logging
from unittest.mock import MagicMock, Mock, patch

import pytest

from totepad.__main__ import build_parser, configure_logging, main, resolve_settings, run_keyboard_test
from totepad.constants import TotepadConstants
from totepad.terminal import TerminalUnavailableError

from fakes import FakeTerminal


def fake_persistence(stored=None, save_ok=True):
    persistence = Mock()
    persistence.load_settings.return_value = dict(stored or {"notes_dir": "Notes", "show_splash": True})
    persistence.save_settings.return_value = save_ok
    persistence.settings_file = "/config/settings.json"
    return persistence


def test_version_flag(capsys):
    with patch("totepad.__main__.get_version_string", return_value="totepad 1.0.0 (abc1234 2024-01-01)"):
        assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == "totepad 1.0.0 (abc1234 2024-01-01)"


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.notes_dir is None
    assert not args.no_splash
    assert not args.remember
    assert not args.keytest


def test_resolve_settings_uses_stored_values():
    args = build_parser().parse_args([])
    persistence = fake_persistence({"notes_dir": "/stored", "show_splash": False})
    assert resolve_settings(args, persistence) == {"notes_dir": "/stored", "show_splash": False}
    persistence.save_settings.assert_not_called()


def test_resolve_settings_overrides():
    args = build_parser().parse_args(["--notes-dir", "/elsewhere", "--no-splash"])
    settings = resolve_settings(args, fake_persistence())
    assert settings == {"notes_dir": "/elsewhere", "show_splash": False}


def test_remember_saves_overrides():
    args = build_parser().parse_args(["--notes-dir", "/elsewhere", "--remember"])
    persistence = fake_persistence()
    resolve_settings(args, persistence)
    persistence.save_settings.assert_called_once_with({"notes_dir": "/elsewhere", "show_splash": True})


def test_remember_failure_warns(capsys):
    args = build_parser().parse_args(["--no-splash", "--remember"])
    resolve_settings(args, fake_persistence(save_ok=False))
    assert "could not save settings to /config/settings.json" in capsys.readouterr().err


def test_configure_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "totepad.log"
    logger = logging.getLogger("totepad")
    before = list(logger.handlers)
    try:
        configure_logging(str(log_file))
        logging.getLogger("totepad.store").warning("disk trouble")
        for handler in logger.handlers:
            handler.flush()
        assert "WARNING totepad.store: disk trouble" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)


def test_configure_logging_without_file_adds_nothing():
    logger = logging.getLogger("totepad")
    before = list(logger.handlers)
    configure_logging(None)
    assert logger.handlers == before


@pytest.fixture
def patched_runtime():
    terminal = MagicMock()
    with patch("totepad.terminal.TerminalInterface", return_value=terminal), \
            patch("totepad.config.get_persistence", return_value=fake_persistence()), \
            patch("totepad.app.TotepadApp") as app_cls:
        yield terminal, app_cls


def test_main_runs_app_with_settings(patched_runtime):
    terminal, app_cls = patched_runtime
    assert main(["--notes-dir", "/n", "--no-splash"]) == 0
    app_cls.assert_called_once_with(terminal, notes_dir="/n", show_splash=False)
    app_cls.return_value.run.assert_called_once_with()
    terminal.setup.assert_called_once_with()
    terminal.cleanup.assert_called()


def test_main_reports_missing_terminal(patched_runtime, capsys):
    terminal, app_cls = patched_runtime
    terminal.setup.side_effect = TerminalUnavailableError("not a tty")

    assert main([]) == 1

    err = capsys.readouterr().err
    assert TotepadConstants.TERMINAL_UNAVAILABLE_MESSAGE in err
    assert "not a tty" in err
    app_cls.assert_not_called()
    terminal.cleanup.assert_called()


def test_main_restores_terminal_on_interrupt(patched_runtime):
    terminal, app_cls = patched_runtime
    app_cls.return_value.run.side_effect = KeyboardInterrupt
    assert main([]) == 0
    terminal.cleanup.assert_called()


def test_main_restores_terminal_on_crash(patched_runtime):
    terminal, app_cls = patched_runtime
    app_cls.return_value.run.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        main([])
    terminal.cleanup.assert_called()


def test_keyboard_test_lists_events_until_escape():
    terminal = FakeTerminal()
    terminal.get_key = Mock(side_effect=["a", None, "<UP>", "<Ctrl-s>", "<ESC>", "never read"])

    run_keyboard_test(terminal)

    lines = terminal.text().splitlines()
    assert "type=regular value=a raw='a'" in lines
    assert "type=special value=up raw='<UP>' flags=seq" in lines
    assert "type=ctrl value=s raw='<Ctrl-s>' flags=ctrl" in lines
    assert terminal.get_key.call_count == 5
