"""Note persistence: one UTF-8 text file per note."""

from __future__ import annotations

import errno
import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Optional

from .constants import TotepadConstants
from .model import Note, sanitize_filename

logger = logging.getLogger(__name__)


def _describe(e: OSError) -> str:
    if e.errno == errno.ENOSPC:
        return "No space left on device"
    if isinstance(e, PermissionError):
        return "Permission denied"
    return e.strerror or str(e)


class NoteStore:
    """Loads, saves and deletes notes in a folder.

    Failures never propagate: they are logged, passed to ``error_reporter``
    (if any) as a user-facing message, and signalled through the return value.
    """

    def __init__(self, folder: str | os.PathLike = TotepadConstants.NOTES_FOLDER,
                 error_reporter: Optional[Callable[[str], None]] = None):
        self.folder = Path(folder)
        self.error_reporter = error_reporter

    def _report(self, message: str) -> None:
        logger.warning(message)
        if self.error_reporter is not None:
            self.error_reporter(message)

    def path_for(self, title: str) -> Path:
        return self.folder / (sanitize_filename(title) + TotepadConstants.NOTE_EXTENSION)

    def ensure_directory_exists(self) -> bool:
        """Create the notes folder if it is missing."""
        try:
            self.folder.mkdir(parents=True, exist_ok=True)
            return True
        except OSError as e:
            self._report(f"Critical Error: Could not create directory. {_describe(e)}")
            return False

    def load_all_notes(self) -> list[Note]:
        """Read every note in the folder, sorted by title.

        Files that cannot be read are skipped; the rest are still returned.
        """
        notes: list[Note] = []
        try:
            paths = sorted(self.folder.glob(f"*{TotepadConstants.NOTE_EXTENSION}"))
        except OSError as e:
            self._report(f"Error loading notes: {_describe(e)}")
            return notes

        for path in paths:
            if not path.is_file():
                continue
            try:
                content = path.read_text(encoding='utf-8')
            except UnicodeDecodeError as e:
                self._report(f"Error loading notes: {path.name} is not valid UTF-8 ({e.reason})")
                continue
            except OSError as e:
                self._report(f"Error loading notes: {path.name}: {_describe(e)}")
                continue
            notes.append(Note(title=path.stem, content=content))

        logger.info(f"Loaded {len(notes)} notes from {self.folder}")
        return notes

    def save_note(self, note: Note) -> bool:
        """Write a note to disk atomically.

        Returns:
            True if save succeeded, False otherwise
        """
        target = self.path_for(note.title)
        temp_filename = None
        try:
            # Temp file in the same directory so the rename stays on one filesystem
            with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8',
                                             dir=self.folder,
                                             prefix='.',
                                             suffix=TotepadConstants.ATOMIC_SAVE_SUFFIX,
                                             delete=False) as temp_file:
                temp_filename = temp_file.name
                temp_file.write(note.content)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_filename, target)
            logger.info(f"Saved note {note.title!r} to {target}")
            return True
        except OSError as e:
            if temp_filename is not None and os.path.exists(temp_filename):
                try:
                    os.remove(temp_filename)
                except OSError:
                    logger.debug(f"Could not remove temp file {temp_filename}")
            self._report(f"Failed to save: {_describe(e)}")
            return False

    def delete_note(self, title: str) -> bool:
        """Remove a note's file; a missing file counts as deleted."""
        path = self.path_for(title)
        try:
            path.unlink()
            logger.info(f"Deleted note {title!r}")
        except FileNotFoundError:
            logger.debug(f"Note file {path} already gone")
        except OSError as e:
            self._report(f"Delete failed: {_describe(e)}")
            return False
        return True
