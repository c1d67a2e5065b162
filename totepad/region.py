"""Mapping between a text buffer and the screen rows it is drawn on."""

from dataclasses import dataclass

from .buffer import LINE_SEPARATOR
from .constants import TotepadConstants


@dataclass
class RenderRegion:
    """Screen area owned by one edit session.

    ``origin_row`` is captured once when the session starts; nothing is ever
    drawn above it. ``prompt_width`` is the width of the prompt marker, which
    shifts the cursor column on the first line only.
    """

    origin_row: int
    prompt_width: int = 0

    @classmethod
    def for_mode(cls, origin_row: int, prompt_mode: bool) -> "RenderRegion":
        width = len(TotepadConstants.PROMPT_MARKER) if prompt_mode else 0
        return cls(origin_row=origin_row, prompt_width=width)

    @property
    def prompt(self) -> str:
        return TotepadConstants.PROMPT_MARKER if self.prompt_width else ""

    def cursor_cell(self, text: str, cursor: int) -> tuple[int, int]:
        """Return the (row, column) where the cursor belongs on screen."""
        before = text[:cursor]
        line_index = before.count(LINE_SEPARATOR)
        last_separator = before.rfind(LINE_SEPARATOR)
        column = cursor - (last_separator + 1)
        if self.prompt_width and line_index == 0:
            column += self.prompt_width
        return self.origin_row + line_index, column

    def display_lines(self, text: str) -> list[str]:
        """Lines as drawn, each prefixed with the prompt marker in prompt mode."""
        return [self.prompt + line for line in text.split(LINE_SEPARATOR)]

    def rows_to_clear(self, drawn_rows: int = 0) -> int:
        """Number of rows wiped before a redraw.

        Always the fixed editor height, or more when a previous draw spilled
        past it.
        """
        return max(TotepadConstants.EDITOR_CLEAR_ROWS, drawn_rows)
