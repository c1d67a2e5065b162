"""Totepad CLI entry point.

Allows running via `python -m totepad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .version import get_version_string

logger = logging.getLogger("totepad")


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="totepad", description="Terminal note pad.")
    parser.add_argument("--version", "-V", action="store_true", help="print version and exit")
    parser.add_argument("--keytest", "--keyboard-test", action="store_true",
                        help="show parsed key events until ESC")
    parser.add_argument("--notes-dir", metavar="DIR", help="folder holding the note files")
    parser.add_argument("--no-splash", action="store_true", help="skip the welcome screen")
    parser.add_argument("--remember", action="store_true",
                        help="store --notes-dir/--no-splash as the new defaults")
    parser.add_argument("--log-file", metavar="PATH", help="write debug log to PATH")
    return parser


def configure_logging(log_file: Optional[str]) -> None:
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def resolve_settings(args: argparse.Namespace, persistence) -> dict:
    """Stored settings with command-line overrides applied."""
    settings = persistence.load_settings()
    if args.notes_dir:
        settings["notes_dir"] = args.notes_dir
    if args.no_splash:
        settings["show_splash"] = False
    if args.remember and not persistence.save_settings(settings):
        print(f"Warning: could not save settings to {persistence.settings_file}", file=sys.stderr)
    return settings


def run_keyboard_test(terminal) -> None:
    """Print parsed key events until ESC is pressed."""
    from .keyboard import KeyboardHandler

    kb = KeyboardHandler(terminal)
    terminal.write_line("Keyboard test mode - press keys to see parsed events.")
    terminal.write_line("Quit with ESC.")
    while True:
        ev = kb.get_key_event()
        if not ev:
            continue
        if ev.is_special('escape'):
            break
        parts = [f"type={ev.key_type.value}", f"value={ev.value}", f"raw='{_escape_bytes(ev.raw)}'"]
        flags = [name for name, on in (('alt', ev.is_alt), ('ctrl', ev.is_ctrl), ('seq', ev.is_sequence)) if on]
        if flags:
            parts.append(f"flags={'+'.join(flags)}")
        if terminal.row >= terminal.height - 1:
            terminal.clear_screen()
        terminal.write_line(' '.join(parts))


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.version:
        print(get_version_string())
        return 0

    configure_logging(args.log_file)

    # Lazy imports to avoid loading terminal deps for --version
    from .app import TotepadApp
    from .config import get_persistence
    from .constants import TotepadConstants
    from .terminal import TerminalInterface, TerminalUnavailableError

    settings = resolve_settings(args, get_persistence())
    terminal = TerminalInterface()
    try:
        terminal.setup()
        if args.keytest:
            run_keyboard_test(terminal)
        else:
            app = TotepadApp(terminal, notes_dir=settings["notes_dir"],
                             show_splash=settings["show_splash"])
            app.run()
    except TerminalUnavailableError as e:
        terminal.cleanup()
        print(f"{TotepadConstants.TERMINAL_UNAVAILABLE_MESSAGE} ({e})", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        terminal.cleanup()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
