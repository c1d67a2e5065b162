"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType
from .constants import TotepadConstants

if TYPE_CHECKING:
    from .buffer import TextBuffer
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    finishes_editing = False

    @abstractmethod
    def execute(self, buffer: 'TextBuffer', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            buffer: Buffer of the active edit session
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the buffer content
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, buffer: 'TextBuffer', key_event: 'KeyEvent') -> bool:
        """Movement commands never modify the content."""
        self._move(buffer)
        return False

    @abstractmethod
    def _move(self, buffer: 'TextBuffer'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, buffer):
        buffer.left_char()


class RightCharCommand(MovementCommand):
    def _move(self, buffer):
        buffer.right_char()


class UpLineCommand(MovementCommand):
    def _move(self, buffer):
        buffer.up_line()


class DownLineCommand(MovementCommand):
    def _move(self, buffer):
        buffer.down_line()


class BeginningOfLineCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_beginning_of_line()


class EndOfLineCommand(MovementCommand):
    def _move(self, buffer):
        buffer.move_end_of_line()


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, buffer: 'TextBuffer', key_event: 'KeyEvent') -> bool:
        return self._edit(buffer, key_event)

    @abstractmethod
    def _edit(self, buffer: 'TextBuffer', key_event: 'KeyEvent') -> bool:
        """Perform the edit and report whether anything changed."""
        pass


class BackspaceCommand(EditCommand):
    def _edit(self, buffer, key_event):
        return buffer.backspace()


class DeleteCharCommand(EditCommand):
    def _edit(self, buffer, key_event):
        return buffer.delete_char()


class InsertNewlineCommand(EditCommand):
    def _edit(self, buffer, key_event):
        return buffer.insert_newline()


class InsertTextCommand(EditCommand):
    def _edit(self, buffer, key_event):
        # Control characters are rejected by the buffer
        return buffer.insert_char(key_event.value)


class FinishCommand(EditorCommand):
    """Ends the edit session; the buffer is left untouched."""

    finishes_editing = True

    def execute(self, buffer: 'TextBuffer', key_event: 'KeyEvent') -> bool:
        return False


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())
        self.register((KeyType.SPECIAL, 'home'), BeginningOfLineCommand())
        self.register((KeyType.SPECIAL, 'end'), EndOfLineCommand())

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteCharCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        self.register((KeyType.SPECIAL, TotepadConstants.FINISH_KEY), FinishCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_event: 'KeyEvent') -> Optional[EditorCommand]:
        """Get the command for a key event, or None if the key is ignored."""
        command = self._commands.get((key_event.key_type, key_event.value))
        if command is None and key_event.key_type == KeyType.REGULAR:
            return self._insert_text
        return command
