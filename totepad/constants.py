"""Constants and configuration for the totepad application."""

class TotepadConstants:
    """Central configuration constants for the application."""

    # Note storage
    NOTES_FOLDER = "Notes"  # Relative to the working directory unless configured
    NOTE_EXTENSION = ".txt"
    INVALID_FILENAME_CHARS = '<>:"/\\|?*'  # Plus ASCII control characters
    FILENAME_REPLACEMENT = "_"

    # Colors (blessed formatter names)
    PRIMARY_COLOR = "yellow"
    HIGHLIGHT_COLOR = "green"
    ERROR_COLOR = "red"
    INPUT_COLOR = "cyan"
    TEXT_COLOR = "white"

    # Editor
    FINISH_KEY = "tab"
    PROMPT_MARKER = "> "
    EDITOR_CLEAR_ROWS = 15  # Rows wiped below the editor origin on every redraw
    EDITOR_HELP_BANNER = (
        "=" * 64,
        "= Arrow Keys: Move | Home/End | Backspace/Delete | TAB: Finish =",
        "=" * 64,
    )

    # Menus
    HEADER_BOX_WIDTH = 42  # Inner width of the banner drawn by draw_header
    OVERFLOW_HEADER = " NOTES MENU "

    # Timing
    ERROR_DISPLAY_SECONDS = 2.0  # Pause after showing an error message

    # File operations
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files

    # Messages
    TITLE_INVALID_MESSAGE = "Title empty or already exists!"
    TERMINAL_UNAVAILABLE_MESSAGE = "totepad needs an interactive terminal."
