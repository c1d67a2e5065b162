"""Totepad - a terminal note pad."""

import logging

from .buffer import TextBuffer
from .region import RenderRegion
from .editor import NoteEditor
from .model import Note
from .store import NoteStore

# Keep library log records off the full-screen UI unless a handler is configured
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'TextBuffer',
    'RenderRegion',
    'NoteEditor',
    'Note',
    'NoteStore',
]
