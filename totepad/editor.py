"""In-place note editor drawn below whatever the caller printed last."""

import logging
from typing import Optional

from .buffer import TextBuffer
from .commands import CommandRegistry
from .keyboard import KeyboardHandler, KeyEvent
from .region import RenderRegion

logger = logging.getLogger(__name__)


class NoteEditor:
    """Line-oriented text editor for note content.

    Each call to ``edit_content`` is one session: the region starts at the
    terminal's current output row, keys are applied to a fresh TextBuffer
    until TAB, and the resulting text is returned. Edits redraw the whole
    region; cursor movement only repositions the terminal cursor.
    """

    def __init__(self, terminal, keyboard: Optional[KeyboardHandler] = None):
        """Initialize the editor.

        Args:
            terminal: Output capability with write_at/set_cursor/clear_region,
                show_cursor, move_to and a ``row`` attribute (TerminalInterface)
            keyboard: Source of KeyEvents; defaults to reading from terminal
        """
        self.terminal = terminal
        self.keyboard = keyboard or KeyboardHandler(terminal)
        self.command_registry = CommandRegistry()
        self.buffer: Optional[TextBuffer] = None
        self.region: Optional[RenderRegion] = None
        self._drawn_rows = 0

    def edit_content(self, seed_text: str, prompt_mode: bool) -> str:
        """Run an edit session and return the finished text.

        Args:
            seed_text: Initial content; the cursor starts at its end
            prompt_mode: Draw the "> " marker before every line

        Returns:
            The buffer content with line separators preserved
        """
        self.begin(seed_text, prompt_mode)
        while True:
            key_event = self.keyboard.get_key_event()
            if key_event is None:
                continue
            if not self.handle_key_event(key_event):
                break
        return self.finish()

    def begin(self, seed_text: str, prompt_mode: bool):
        """Start a session at the terminal's current row and draw the seed."""
        self.buffer = TextBuffer(seed_text)
        self.region = RenderRegion.for_mode(self.terminal.row, prompt_mode)
        self._drawn_rows = 0
        logger.debug(f"Edit session at row {self.region.origin_row}, {len(self.buffer)} chars")
        self.terminal.show_cursor()
        self.render()

    def handle_key_event(self, key_event: KeyEvent) -> bool:
        """Apply one key to the buffer.

        Returns:
            False when the key ends the session, True otherwise
        """
        command = self.command_registry.get_command(key_event)
        if command is None:
            return True
        if command.finishes_editing:
            return False
        if command.execute(self.buffer, key_event):
            self.render()
        else:
            self.update_cursor()
        return True

    def finish(self) -> str:
        """End the session, leaving terminal output below the drawn text."""
        text = self.buffer.text
        self.terminal.move_to(self.region.origin_row + self._drawn_rows)
        self.buffer = None
        return text

    def render(self):
        """Clear the region and redraw every line of the buffer."""
        origin = self.region.origin_row
        self.terminal.clear_region(origin, self.region.rows_to_clear(self._drawn_rows))
        lines = self.region.display_lines(self.buffer.text)
        for i, line in enumerate(lines):
            self.terminal.write_at(origin + i, 0, line)
        self._drawn_rows = len(lines)
        self.update_cursor()

    def update_cursor(self):
        row, col = self.region.cursor_cell(self.buffer.text, self.buffer.cursor)
        self.terminal.set_cursor(row, col)
