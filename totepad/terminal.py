"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import select
import sys
from typing import Optional

import blessed

logger = logging.getLogger(__name__)


class TerminalUnavailableError(RuntimeError):
    """Raised when raw keyboard input cannot be set up (e.g. stdin is not a tty)."""


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Output is line oriented: ``row`` is the row the next ``write_line`` lands
    on, which lets the editor capture where its region starts. The editor
    itself only uses ``write_at``, ``set_cursor`` and ``clear_region``.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self.row = 0
        self._col = 0
        self._curtsies_input: Optional[object] = None

    def setup(self):
        """Enter fullscreen mode and raw keyboard input."""
        print(self.term.enter_fullscreen, end='')
        print(self.term.home + self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        self.row = 0
        self._col = 0
        if self._curtsies_input is None:
            from curtsies import Input
            try:
                self._curtsies_input = Input(keynames='curtsies')
                self._curtsies_input.__enter__()
            except (OSError, ValueError) as e:
                # termios.error is an OSError subclass; ValueError on closed stdin
                logger.error(f"Could not enter raw input mode: {e}")
                self._curtsies_input = None
                raise TerminalUnavailableError(str(e)) from e

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except OSError as e:
                # Teardown must not mask the exception that got us here
                logger.warning(f"Could not leave raw input mode: {e}")
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False

    def clear_screen(self):
        """Clear the entire screen and restart output at the top row."""
        print(self.term.home + self.term.clear, end='', flush=True)
        self.row = 0
        self._col = 0

    def colored(self, text: str, color: Optional[str]) -> str:
        if not color or not text:
            return text
        return getattr(self.term, color)(text)

    def write(self, text: str, color: Optional[str] = None):
        """Write text at the tracked position without ending the line."""
        for i, part in enumerate(text.split('\n')):
            if i:
                self.row += 1
                self._col = 0
            if part:
                print(self.term.move_yx(self.row, self._col) + self.colored(part, color), end='')
                self._col += len(part)
        print('', end='', flush=True)

    def move_to(self, row: int, col: int = 0):
        """Set where the next write lands."""
        self.row = row
        self._col = col

    def write_line(self, text: str = "", color: Optional[str] = None):
        """Write text and move the tracked position to the next row."""
        self.write(text, color)
        self.row += 1
        self._col = 0

    # --- Output capability used by the editor ---
    def write_at(self, row: int, col: int, text: str):
        """Write text starting at (row, col)."""
        print(self.term.move_yx(row, col) + text, end='', flush=True)

    def set_cursor(self, row: int, col: int):
        """Move the visible cursor without drawing anything."""
        print(self.term.move_yx(row, col) + self.term.normal_cursor, end='', flush=True)

    def clear_region(self, start_row: int, row_count: int):
        """Blank ``row_count`` full rows starting at ``start_row``."""
        out = []
        for row in range(start_row, start_row + row_count):
            out.append(self.term.move_yx(row, 0) + self.term.clear_eol)
        print(''.join(out), end='', flush=True)

    def show_cursor(self):
        print(self.term.normal_cursor, end='', flush=True)

    def hide_cursor(self):
        print(self.term.hide_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key token as a string, or None on timeout.
        """
        if self._curtsies_input is None:
            return None
        if timeout is None:
            return str(next(self._curtsies_input))  # blocks
        ready, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not ready:
            return None
        return str(next(self._curtsies_input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height
