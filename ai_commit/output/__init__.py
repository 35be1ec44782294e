"""Terminal Output Formatting Package

Everything here writes to stderr. stdout carries only the commit message.
"""

import os
import sys
import threading
import unicodedata


class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = '\033[0m'
    DIM = '\033[2m'
    RED = '\033[31m'


def _supports_color() -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stderr, 'isatty') or not sys.stderr.isatty():
        return False
    if sys.platform == 'win32':
        try:
            import ctypes
            kernel32 = ctypes.windll.kernel32
            kernel32.SetConsoleMode(kernel32.GetStdHandle(-12), 7)
            return True
        except (AttributeError, OSError):
            return False
    return True


def _supports_unicode() -> bool:
    if sys.platform == 'win32':
        try:
            '✗'.encode(sys.stderr.encoding or 'utf-8')
            return True
        except (UnicodeEncodeError, LookupError):
            return False
    return True


COLORS_ENABLED = _supports_color()
UNICODE_ENABLED = _supports_unicode()

CROSS = '✗' if UNICODE_ENABLED else '[X]'


def _colorize(text: str, *codes: str) -> str:
    if not COLORS_ENABLED:
        return text
    return f"{''.join(codes)}{text}{Colors.RESET}"


def error(text: str) -> str:
    return _colorize(text, Colors.RED)


def dim(text: str) -> str:
    return _colorize(text, Colors.DIM)


def print_error(message: str) -> None:
    print(f"{error(CROSS)} {error(message)}", file=sys.stderr)


def display_width(text: str) -> int:
    """Terminal columns taken by text. Wide glyphs (emoji, CJK) take two."""
    width = 0
    for char in text:
        if unicodedata.combining(char) or char == '\ufe0f':
            continue
        width += 2 if unicodedata.east_asian_width(char) in ('W', 'F') else 1
    return width


class Spinner:
    """Animated spinner for the blocking Gemini call. Use as context manager.

    Draws "<message> <frame>" on one line of the stream and redraws it every
    ``interval`` seconds from a background thread. Leaving the context stops
    the thread, waits for it, then blanks the line, so anything printed
    afterwards starts on a clean line.
    """
    FRAMES = ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
    INTERVAL = 0.1

    def __init__(self, message: str, stream=None, interval: float | None = None):
        self.message = message
        self.stream = stream if stream is not None else sys.stderr
        self.interval = interval or self.INTERVAL
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _spin(self):
        idx = 0
        self._write(f"{self.message} {self.FRAMES[idx]}")
        while not self._stop_event.wait(self.interval):
            idx = (idx + 1) % len(self.FRAMES)
            self._write(f"\r{self.message} {self.FRAMES[idx]}")

    def _clear(self) -> None:
        width = display_width(self.message) + 2
        self._write(f"\r{' ' * width}\r")

    def __enter__(self):
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()
        return self

    def __exit__(self, *args):
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
            self._clear()


__all__ = [
    "Colors", "COLORS_ENABLED", "UNICODE_ENABLED", "CROSS",
    "error", "dim", "print_error",
    "display_width", "Spinner",
]
