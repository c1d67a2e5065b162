"""Tests for menus, prompts and headers."""

from unittest.mock import patch

import pytest

from totepad.constants import TotepadConstants
from totepad.menus import MenuRenderer

from fakes import FakeTerminal, ScriptedKeyboard, ENTER, UP, DOWN, LEFT, RIGHT, BACKSPACE, ESC


def make_menus(keys=(), height=40):
    terminal = FakeTerminal(height=height)
    keyboard = ScriptedKeyboard(keys)
    return MenuRenderer(terminal, keyboard), terminal


def test_draw_header_centres_title():
    menus, terminal = make_menus()
    menus.draw_header("NOTES LIST")
    width = TotepadConstants.HEADER_BOX_WIDTH + 4
    assert terminal.screen[0] == "=" * width
    assert terminal.screen[2].startswith("=") and terminal.screen[2].endswith("=")
    assert len(terminal.screen[2]) == width
    assert "NOTES LIST" in terminal.screen[2]
    assert terminal.row == 6


def test_draw_header_clears_screen_first():
    menus, terminal = make_menus()
    terminal.write_line("stale")
    menus.draw_header("X")
    assert "stale" not in terminal.text()


def test_instruction_header():
    menus, terminal = make_menus()
    menus.instruction_header("Press TAB when done")
    assert terminal.screen[0] == "~ Press TAB when done ~"
    assert terminal.row == 2


def test_arrow_menu_enter_picks_first_by_default():
    menus, _ = make_menus([ENTER])
    assert menus.show_arrow_menu(["a", "b", "c"]) == 0


def test_arrow_menu_moves_down():
    menus, _ = make_menus([DOWN, DOWN, ENTER])
    assert menus.show_arrow_menu(["a", "b", "c"]) == 2


def test_arrow_menu_wraps_both_ways():
    menus, _ = make_menus([UP, ENTER])
    assert menus.show_arrow_menu(["a", "b", "c"]) == 2

    menus, _ = make_menus([DOWN, DOWN, DOWN, ENTER])
    assert menus.show_arrow_menu(["a", "b", "c"]) == 0


def test_arrow_menu_ignores_other_keys():
    menus, _ = make_menus(["x", LEFT, DOWN, "<TAB>", ENTER])
    assert menus.show_arrow_menu(["a", "b"]) == 1


def test_arrow_menu_highlights_selection():
    menus, terminal = make_menus([DOWN, ENTER])
    terminal.move_to(3)
    menus.show_arrow_menu(["Notes", "Exit"])
    assert terminal.screen[3].strip() == "Notes"
    assert terminal.screen[4].startswith("> [ Exit ]")


def test_arrow_menu_redraws_header_when_out_of_room():
    menus, terminal = make_menus([ENTER], height=10)
    terminal.move_to(8)
    menus.show_arrow_menu(["a", "b", "c"])
    assert TotepadConstants.OVERFLOW_HEADER.strip() in terminal.screen[2]
    assert terminal.screen[6].startswith("> [ a ]")


def test_arrow_menu_rejects_empty_options():
    menus, _ = make_menus()
    with pytest.raises(ValueError):
        menus.show_arrow_menu([])


def test_decision_menu_defaults_to_left():
    menus, _ = make_menus([ENTER])
    assert menus.show_decision_menu("Save this note?", "Cancel", "Save") is False


def test_decision_menu_right_confirms():
    menus, terminal = make_menus([RIGHT, ENTER])
    assert menus.show_decision_menu("Save this note?", "Cancel", "Save") is True
    assert "Save this note?" in terminal.text()
    assert "[ Save ]" in terminal.text()


def test_decision_menu_left_after_right_cancels():
    menus, _ = make_menus([RIGHT, LEFT, ENTER])
    assert menus.show_decision_menu("Delete?", "Cancel", "Delete") is False


def test_decision_menu_ignores_up_down():
    menus, _ = make_menus([RIGHT, UP, DOWN, ENTER])
    assert menus.show_decision_menu("Delete?", "Cancel", "Delete") is True


def test_prompt_line_reads_text():
    menus, terminal = make_menus(list("  my note ") + [ENTER])
    terminal.move_to(4)
    assert menus.prompt_line("Title: ") == "my note"
    assert terminal.screen[4] == "Title:   my note "
    assert terminal.row == 5


def test_prompt_line_backspace():
    menus, _ = make_menus(list("abc") + [BACKSPACE, BACKSPACE, "z", ENTER])
    assert menus.prompt_line("Title: ") == "az"


def test_prompt_line_escape_cancels():
    menus, _ = make_menus(list("abc") + [ESC])
    assert menus.prompt_line("Title: ") == ""


def test_prompt_line_ignores_control_keys():
    menus, _ = make_menus(["a", "<Ctrl-s>", "<TAB>", "b", ENTER])
    assert menus.prompt_line("Title: ") == "ab"


def test_show_error_message_pauses():
    menus, terminal = make_menus()
    with patch("totepad.menus.time.sleep") as sleep:
        menus.show_error_message("Title empty or already exists!")
    sleep.assert_called_once_with(TotepadConstants.ERROR_DISPLAY_SECONDS)
    assert "[ERROR] Title empty or already exists!" in terminal.text()


def test_wait_for_key_returns_event():
    menus, _ = make_menus(["q"])
    assert menus.wait_for_key().value == "q"
