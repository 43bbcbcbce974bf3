"""Cross-platform single-keypress reader for the terminal frontend.

Handles arrow keys, WASD, and special keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    ch = msvcrt.getch()
    # Arrow keys arrive as a 0xE0 / 0x00 prefix followed by a scan code.
    if ch in (b"\xe0", b"\x00"):
        return _WIN_ARROWS.get(msvcrt.getch(), "")
    return ch.decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "\r": "enter",
    "\n": "enter",
    " ": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_WIN_ARROWS: dict[bytes, str] = {
    b"H": "up",
    b"P": "down",
    b"M": "right",
    b"K": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  focus movement
        "enter"                        Enter, Return or Space
        "quit"                         q, Ctrl-C or Escape
        ""                             unrecognised key
    """
    ch = _getch()
    if len(ch) > 1:  # arrow key already decoded by the Windows reader
        return ch

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve(ch)
