"""
Text surfaces: where the rendered frame ends up.
"""

import sys
from typing import List, Optional, TextIO

# Move the cursor home and clear the screen
CLEAR_SCREEN = "\x1b[H\x1b[2J"


class TextSurface:
    """Base class/interface for a fixed-width text display."""

    def set_data(self, text: str) -> None:
        raise NotImplementedError


class BufferSurface(TextSurface):
    """Keeps every frame it is given; used by headless runs and tests."""

    def __init__(self, keep: Optional[int] = None):
        self.frames: List[str] = []
        self.keep = keep

    @property
    def data(self) -> str:
        return self.frames[-1] if self.frames else ""

    def set_data(self, text: str) -> None:
        self.frames.append(text)
        if self.keep is not None and len(self.frames) > self.keep:
            del self.frames[: len(self.frames) - self.keep]


class StdoutSurface(TextSurface):
    """Redraws the frame on a plain ANSI terminal, skipping unchanged frames."""

    def __init__(self, stream: TextIO = sys.stdout, clear: bool = True):
        self.stream = stream
        self.clear = clear
        self.last: Optional[str] = None

    def set_data(self, text: str) -> None:
        if text == self.last:
            return
        self.last = text
        if self.clear:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(text + "\n")
        self.stream.flush()


class CursesSurface(TextSurface):
    """Draws the frame into a curses window."""

    def __init__(self, window):
        self.window = window
        self.last: Optional[str] = None

    def set_data(self, text: str) -> None:
        if text == self.last:
            return
        self.last = text
        self.window.erase()
        for row, line in enumerate(text.split("\n")):
            self.window.addstr(row, 0, line)
        self.window.refresh()
