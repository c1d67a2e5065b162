"""Main application controller: menus wired to the editor and the note store."""

import logging
from typing import Optional

from .constants import TotepadConstants
from .editor import NoteEditor
from .keyboard import KeyboardHandler
from .menus import MenuRenderer
from .model import Note, title_taken
from .store import NoteStore
from .terminal import TerminalInterface

logger = logging.getLogger(__name__)


class TotepadApp:
    """Owns the note collection and runs the top-level menu loop."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 notes_dir: str = TotepadConstants.NOTES_FOLDER,
                 show_splash: bool = True,
                 keyboard: Optional[KeyboardHandler] = None):
        """Initialize the application components."""
        self.terminal = terminal or TerminalInterface()
        self.keyboard = keyboard or KeyboardHandler(self.terminal)
        self.menus = MenuRenderer(self.terminal, self.keyboard)
        self.editor = NoteEditor(self.terminal, self.keyboard)
        self.store = NoteStore(notes_dir, error_reporter=self.menus.show_error_message)
        self.show_splash = show_splash
        self.notes: list[Note] = []
        self.running = False

    def run(self):
        """Run the application until Exit is chosen.

        The caller is responsible for terminal setup and cleanup.
        """
        if self.show_splash:
            self.startup_sequence()
        self.store.ensure_directory_exists()
        self.notes = self.store.load_all_notes()

        self.running = True
        while self.running:
            self.menus.draw_header("TOTEPAD MAIN MENU")
            choice = self.menus.show_arrow_menu(["Notes", "Calendar", "Exit"])
            if choice == 0:
                self.notes_menu()
            elif choice == 1:
                self.show_calendar()
            else:
                self.running = False
        logger.info("Exiting")

    def startup_sequence(self):
        """Welcome banner shown once at launch."""
        self.terminal.clear_screen()
        color = TotepadConstants.PRIMARY_COLOR
        self.menus.show_message("=" * 46, color)
        self.menus.show_message("=" + " " * 44 + "=", color)
        self.menus.show_message("=" + "WELCOME TO".center(44) + "=", color)
        self.menus.show_message("=" + "TOTEPAD".center(44) + "=", color)
        self.menus.show_message("=" + " " * 44 + "=", color)
        self.menus.show_message("=" * 46, color)
        self.menus.show_message("\n" * 6)
        self.menus.show_message("Press any key to continue...", TotepadConstants.TEXT_COLOR)
        self.menus.wait_for_key()

    def notes_menu(self):
        while True:
            self.menus.draw_header("NOTES LIST")
            if not self.notes:
                self.menus.show_message("(No notes found)\n")
            else:
                for note in self.notes:
                    self.menus.show_message(f"- {note.title}")

            self.menus.show_message("\n--- Actions ---")
            action = self.menus.show_arrow_menu(["Create", "View", "Modify", "Delete", "Back"])
            if action == 0:
                self.create_note()
            elif action == 1:
                self.view_note()
            elif action == 2:
                self.modify_note()
            elif action == 3:
                self.delete_note()
            else:
                break

    def _select_note(self, title: str, instruction: str) -> int:
        self.menus.draw_header(title)
        self.menus.instruction_header(instruction)
        return self.menus.show_arrow_menu([note.title for note in self.notes])

    def create_note(self):
        self.menus.draw_header("CREATE NEW NOTE")
        self.menus.instruction_header("Type your note content. Press TAB when done")
        title = self.menus.prompt_line("Title: ")

        if not title or title_taken(self.notes, title):
            self.menus.show_error_message(TotepadConstants.TITLE_INVALID_MESSAGE)
            return

        content = self.editor.edit_content("", True)
        if self.menus.show_decision_menu("Save this note?", "Cancel", "Save"):
            note = Note(title, content)
            if self.store.save_note(note):
                self.notes.append(note)

    def view_note(self):
        if not self.notes:
            return
        index = self._select_note("VIEW NOTE", "Use arrow keys to select a note. Press Enter to view")
        note = self.notes[index]

        self.menus.draw_header(note.title)
        self.menus.show_message(note.content)
        self.menus.show_message("\n\n(Press any key to return)")
        self.menus.wait_for_key()

    def modify_note(self):
        if not self.notes:
            return
        index = self._select_note("SELECT NOTE TO MODIFY", "Use arrow keys to select a note. Press Enter to edit")
        note = self.notes[index]

        # The selection list can run off the screen; edit on a fresh one
        self.draw_editing_header(note.title)
        new_content = self.editor.edit_content(note.content, False)
        if self.menus.show_decision_menu("Save changes?", "Cancel", "Save"):
            updated = note.with_content(new_content)
            if self.store.save_note(updated):
                self.notes[index] = updated

    def draw_editing_header(self, title: str):
        """Clear the screen and show the note's title above the key help."""
        self.terminal.clear_screen()
        self.menus.show_message(f"Editing: {title}", TotepadConstants.PRIMARY_COLOR)
        self.menus.show_message("")
        for line in TotepadConstants.EDITOR_HELP_BANNER:
            self.menus.show_message(line, TotepadConstants.TEXT_COLOR)
        self.menus.show_message("")

    def delete_note(self):
        if not self.notes:
            return
        index = self._select_note("SELECT NOTE TO DELETE", "Use arrow keys to select a note. Press Enter to delete")

        title = self.notes[index].title
        if self.menus.show_decision_menu(f"Delete '{title}'?", "Cancel", "Delete"):
            if self.store.delete_note(title):
                del self.notes[index]

    def show_calendar(self):
        self.menus.draw_header("CALENDAR")
        self.menus.instruction_header(" Press any key to return.")
        self.menus.show_message("(Under construction)")
        self.menus.wait_for_key()
