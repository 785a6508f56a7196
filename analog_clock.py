#!/usr/bin/env python3
"""
Terminal Analog Clock
A real-time analog clock face drawn with characters, sweeping hands included.

Usage: python analog_clock.py [--color]

Controls:
- q: Quit
"""

import argparse
import os
import select
import sys
import time
from datetime import datetime
from itertools import groupby
from typing import List, Optional

from rich.console import Console
from rich.live import Live
from rich.markup import escape
from rich.text import Text

from clock_face import draw_clock

if os.name != 'nt':
    import termios
    import tty

    TERMINAL_ERRORS = (termios.error, OSError)
else:
    TERMINAL_ERRORS = (OSError,)

QUIT_KEY = 'q'
# One frame at roughly 60Hz
POLL_INTERVAL = 0.016


class KeyReader:
    """Non-blocking single key input, restoring the terminal on exit."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.old_settings = None

    def __enter__(self):
        if os.name != 'nt':  # Unix/Linux/macOS
            fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.old_settings:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

    def poll(self, timeout: float) -> Optional[str]:
        """Wait up to `timeout` seconds for a key; None if nothing was pressed."""
        if os.name == 'nt':  # Windows
            import msvcrt
            if msvcrt.kbhit():
                return msvcrt.getwch()
            time.sleep(timeout)
            return None

        if select.select([self.stream], [], [], timeout)[0]:
            data = os.read(self.stream.fileno(), 1)
            return data.decode('utf-8', errors='ignore') or None
        return None


class LiveDisplay:
    """Full-screen frame surface on the alternate screen."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.live = Live(console=self.console, screen=True, auto_refresh=False)

    def __enter__(self):
        self.live.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.live.stop()

    @property
    def size(self):
        width, height = self.console.size
        return width, height

    def show(self, renderable):
        self.live.update(renderable, refresh=True)


def frame_text(rows: List[list]) -> Text:
    """Join styled rows into a single Text, one line per row."""
    text = Text(no_wrap=True, overflow="crop", end="")
    for i, row in enumerate(rows):
        if i:
            text.append("\n")
        for color, cells in groupby(row, key=lambda cell: cell[1]):
            text.append("".join(ch for ch, _ in cells), style=color)
    return text


def run(display, keys, use_color: bool, clock=datetime.now, poll_interval: float = POLL_INTERVAL):
    """Draw frames until the quit key is pressed."""
    while True:
        width, height = display.size
        display.show(frame_text(draw_clock(width, height, clock(), use_color)))

        if keys.poll(poll_interval) == QUIT_KEY:
            break


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Terminal analog clock")
    parser.add_argument("--color", action="store_true", help="Draw the face and hands in color")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    error_console = Console(stderr=True)

    try:
        with KeyReader() as keys, LiveDisplay() as display:
            run(display, keys, args.color)
    except KeyboardInterrupt:
        pass
    except TERMINAL_ERRORS as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
