"""Menus, headers and prompts drawn by the application shell."""

import time
from typing import Optional, Sequence

from .constants import TotepadConstants
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .terminal import TerminalInterface


class MenuRenderer:
    """Draws the shell's screens and collects choices from the keyboard.

    All output goes through the TerminalInterface's line tracker, so a menu
    is drawn directly below whatever was written before it.
    """

    def __init__(self, terminal: TerminalInterface, keyboard: Optional[KeyboardHandler] = None):
        self.terminal = terminal
        self.keyboard = keyboard or KeyboardHandler(terminal)

    def _next_key(self) -> KeyEvent:
        while True:
            key_event = self.keyboard.get_key_event()
            if key_event is not None:
                return key_event

    def draw_header(self, title: str):
        """Clear the screen and draw a banner with the title centred."""
        self.terminal.clear_screen()
        width = TotepadConstants.HEADER_BOX_WIDTH
        left = max(0, (width - len(title)) // 2)
        right = max(0, width - len(title) - left)
        border = "=" * (width + 4)
        blank = "=" + " " * (width + 2) + "="
        color = TotepadConstants.PRIMARY_COLOR
        for line in (border, blank, f"= {' ' * left}{title}{' ' * right} =", blank, border, ""):
            self.terminal.write_line(line, color)

    def instruction_header(self, message: str):
        self.terminal.write_line(f"~ {message} ~", TotepadConstants.PRIMARY_COLOR)
        self.terminal.write_line()

    def show_error_message(self, message: str):
        """Show an error in red and pause so it can be read."""
        self.terminal.write_line()
        self.terminal.write_line(f"[ERROR] {message}", TotepadConstants.ERROR_COLOR)
        time.sleep(TotepadConstants.ERROR_DISPLAY_SECONDS)

    def show_message(self, message: str, color: Optional[str] = None):
        self.terminal.write_line(message, color)

    def wait_for_key(self) -> KeyEvent:
        """Block until any key is pressed."""
        return self._next_key()

    def show_arrow_menu(self, options: Sequence[str]) -> int:
        """Let the user pick an option with Up/Down (wrapping) and Enter.

        Returns:
            Index of the chosen option
        """
        if not options:
            raise ValueError("show_arrow_menu needs at least one option")
        start_row = self.terminal.row
        if start_row + len(options) >= self.terminal.height:
            # Not enough room below; start again under a fresh header
            self.draw_header(TotepadConstants.OVERFLOW_HEADER)
            start_row = self.terminal.row

        selected = 0
        self.terminal.hide_cursor()
        while True:
            self.terminal.move_to(start_row)
            for i, option in enumerate(options):
                if i == selected:
                    self.terminal.write_line(f"> [ {option} ]  ", TotepadConstants.HIGHLIGHT_COLOR)
                else:
                    self.terminal.write_line(f"    {option}      ", TotepadConstants.TEXT_COLOR)

            key_event = self._next_key()
            if key_event.is_special('up'):
                selected = (selected - 1) % len(options)
            elif key_event.is_special('down'):
                selected = (selected + 1) % len(options)
            elif key_event.is_special('enter'):
                return selected

    def show_decision_menu(self, prompt: str, left_option: str, right_option: str) -> bool:
        """Two-button choice on one line.

        The left button (cancel/no) is selected first and drawn red when
        selected; the right one (save/yes) green.

        Returns:
            True only if the right option was chosen
        """
        self.terminal.write_line()
        self.terminal.write_line(prompt)
        menu_row = self.terminal.row
        selected = 0
        self.terminal.hide_cursor()
        while True:
            self.terminal.clear_region(menu_row, 1)
            self.terminal.move_to(menu_row)
            for i, option in enumerate((left_option, right_option)):
                if i == selected:
                    color = TotepadConstants.ERROR_COLOR if i == 0 else TotepadConstants.HIGHLIGHT_COLOR
                    self.terminal.write(f"[ {option} ]     ", color)
                else:
                    self.terminal.write(f"  {option}       ", TotepadConstants.TEXT_COLOR)

            key_event = self._next_key()
            if key_event.is_special('left'):
                selected = 0
            elif key_event.is_special('right'):
                selected = 1
            elif key_event.is_special('enter'):
                self.terminal.write_line()
                self.terminal.show_cursor()
                return selected == 1

    def prompt_line(self, label: str) -> str:
        """Read one line of text after a label.

        Enter accepts, Backspace deletes, ESC cancels with an empty result.

        Returns:
            The entered text, stripped of surrounding whitespace
        """
        row, col = self.terminal.row, len(label)
        text = ""
        self.terminal.show_cursor()
        while True:
            self.terminal.clear_region(row, 1)
            self.terminal.write_at(row, 0, self.terminal.colored(label, TotepadConstants.INPUT_COLOR) + text)
            self.terminal.set_cursor(row, col + len(text))

            key_event = self._next_key()
            if key_event.is_special('enter'):
                break
            if key_event.is_special('escape'):
                text = ""
                break
            if key_event.is_special('backspace'):
                text = text[:-1]
            elif key_event.key_type == KeyType.REGULAR and key_event.value.isprintable():
                text += key_event.value

        self.terminal.move_to(row + 1)
        return text.strip()
