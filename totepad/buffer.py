"""Mutable text buffer with an insertion cursor."""

from typing import Iterable, Optional
import unicodedata

LINE_SEPARATOR = "\n"


def is_printable(char: str) -> bool:
    """Return True unless ``char`` is a control character (category Cc)."""
    return len(char) == 1 and unicodedata.category(char) != "Cc"


class TextBuffer:
    """Characters of a note plus the cursor offset into them.

    The content is kept as a list of single characters so insertions and
    deletions happen in place. ``cursor`` is the insertion point and always
    satisfies ``0 <= cursor <= len(content)``; every operation below keeps
    that true, and requests that would break it are ignored.
    """

    content: list[str]
    cursor: int

    def __init__(self, text: str = "", cursor: Optional[int] = None):
        self.content = list(text)
        if cursor is None:
            cursor = len(self.content)
        self.cursor = max(0, min(cursor, len(self.content)))

    def __len__(self) -> int:
        return len(self.content)

    @property
    def text(self) -> str:
        return "".join(self.content)

    # --- Line geometry ---
    def line_start(self, index: Optional[int] = None) -> int:
        """Start offset of the line holding ``index`` (defaults to the cursor).

        Scans backward from ``index - 1`` for the nearest separator.
        """
        if index is None:
            index = self.cursor
        i = index - 1
        while i >= 0:
            if self.content[i] == LINE_SEPARATOR:
                return i + 1
            i -= 1
        return 0

    def line_end(self, index: Optional[int] = None) -> int:
        """Offset of the separator ending the line at ``index``, or the buffer end."""
        if index is None:
            index = self.cursor
        for i in range(index, len(self.content)):
            if self.content[i] == LINE_SEPARATOR:
                return i
        return len(self.content)

    # --- Navigation ---
    def left_char(self):
        if self.cursor > 0:
            self.cursor -= 1

    def right_char(self):
        if self.cursor < len(self.content):
            self.cursor += 1

    def up_line(self):
        """Move to the same column on the previous line, clamped to its length."""
        current_start = self.line_start()
        if current_start == 0:
            # Already on the first line
            return
        previous_start = self.line_start(current_start - 1)
        column = self.cursor - current_start
        previous_length = (current_start - 1) - previous_start
        self.cursor = previous_start + min(column, previous_length)

    def down_line(self):
        """Move to the same column on the next line, clamped to its length."""
        current_start = self.line_start()
        current_end = self.line_end()
        if current_end == len(self.content):
            # Already on the last line
            return
        next_start = current_end + 1
        next_length = self.line_end(next_start) - next_start
        column = self.cursor - current_start
        self.cursor = next_start + min(column, next_length)

    def move_beginning_of_line(self):
        self.cursor = self.line_start()

    def move_end_of_line(self):
        self.cursor = self.line_end()

    # --- Editing ---
    def insert_text(self, text: Iterable[str]) -> bool:
        """Insert characters at the cursor and advance past them.

        Returns:
            True if the content changed
        """
        chars = list(text)
        if not chars:
            return False
        self.content[self.cursor:self.cursor] = chars
        self.cursor += len(chars)
        return True

    def insert_char(self, char: str) -> bool:
        """Insert a single printable character; control characters are ignored."""
        if not is_printable(char):
            return False
        return self.insert_text(char)

    def insert_newline(self) -> bool:
        return self.insert_text(LINE_SEPARATOR)

    def backspace(self) -> bool:
        """Remove the character before the cursor."""
        if self.cursor == 0:
            return False
        del self.content[self.cursor - 1]
        self.cursor -= 1
        return True

    def delete_char(self) -> bool:
        """Remove the character under the cursor; the cursor stays put."""
        if self.cursor >= len(self.content):
            return False
        del self.content[self.cursor]
        return True
