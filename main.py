#!/usr/bin/env python3
"""Totepad - a terminal note pad.

Usage:
    python main.py [--notes-dir DIR] [--no-splash] [--remember] [--log-file PATH]

Controls:
    Up/Down + Enter: Choose menu entries
    Left/Right + Enter: Answer Save/Cancel prompts
    In the note editor:
        Arrow keys, Home, End: Move the cursor (Up/Down keep the column)
        Backspace/Delete: Delete character
        Enter: New line
        TAB: Finish editing
"""

import sys
from totepad.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
