"""Note value type and filename helpers."""

from dataclasses import dataclass, replace

from .constants import TotepadConstants


@dataclass(frozen=True)
class Note:
    """A note: its title doubles as the file name on disk."""
    title: str
    content: str = ""

    def with_content(self, content: str) -> "Note":
        return replace(self, content=content)


def sanitize_filename(title: str) -> str:
    """Replace characters that are not allowed in file names with '_'.

    Uses the union of what common platforms reject so a notes folder can be
    copied between systems.
    """
    invalid = TotepadConstants.INVALID_FILENAME_CHARS
    return ''.join(
        TotepadConstants.FILENAME_REPLACEMENT if (ch in invalid or ord(ch) < 32) else ch
        for ch in title
    )


def title_taken(notes, title: str) -> bool:
    """True if the title would land on an existing note's file.

    Compared after filename sanitising and ignoring case, so "a/b" collides
    with "A_B".
    """
    folded = sanitize_filename(title).casefold()
    return any(sanitize_filename(note.title).casefold() == folded for note in notes)
