"""
Tests for stderr output: the spinner and the error/status helpers.

Run with:
    pytest tests/test_display.py -v
"""

import io
import re
import time

import pytest

from ai_commit.output import Spinner, display_width, print_error, CROSS

ANSI_RE = re.compile(r'\033\[[0-9;]*m')
MESSAGE = "🤖 gemini-2.5-flash"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


# ---------------------------------------------------------------------------
# Spinner
# ---------------------------------------------------------------------------

class TestSpinner:
    """Spinner drawing, stopping and erasing."""

    def test_first_frame_drawn_with_message(self, stream):
        with Spinner(MESSAGE, stream=stream, interval=0.01):
            pass
        assert stream.getvalue().startswith(f"{MESSAGE} {Spinner.FRAMES[0]}")

    def test_frames_advance_in_order(self, stream):
        with Spinner(MESSAGE, stream=stream, interval=0.005):
            time.sleep(0.2)
        drawn = [seg[-1] for seg in stream.getvalue().split('\r') if seg.startswith(MESSAGE)]
        assert len(drawn) >= 3
        for prev, cur in zip(drawn, drawn[1:]):
            expected = Spinner.FRAMES[(Spinner.FRAMES.index(prev) + 1) % len(Spinner.FRAMES)]
            assert cur == expected

    def test_stop_leaves_no_glyphs(self, stream):
        with Spinner(MESSAGE, stream=stream, interval=0.01):
            time.sleep(0.05)
        out = stream.getvalue()
        before, erase, after = out.rsplit('\r', 2)
        assert after == ""
        assert erase.strip(' ') == ""
        assert not any(frame in erase + after for frame in Spinner.FRAMES)

    def test_erase_covers_whole_line(self, stream):
        with Spinner(MESSAGE, stream=stream, interval=0.01):
            pass
        erase = stream.getvalue().rsplit('\r', 2)[1]
        # Robot emoji is two columns wide
        assert len(erase) == display_width(MESSAGE) + 2
        assert len(erase) == len(MESSAGE) + 3

    def test_output_after_stop_is_clean(self, stream):
        with Spinner(MESSAGE, stream=stream, interval=0.01):
            time.sleep(0.03)
        mark = len(stream.getvalue())
        stream.write("error: boom\n")
        assert stream.getvalue()[mark:] == "error: boom\n"

    def test_thread_joined_on_exit(self, stream):
        spinner = Spinner(MESSAGE, stream=stream, interval=0.01)
        with spinner:
            thread = spinner._thread
            assert thread.is_alive()
        assert not thread.is_alive()

    def test_exception_propagates_and_line_is_erased(self, stream):
        with pytest.raises(RuntimeError, match="network down"):
            with Spinner(MESSAGE, stream=stream, interval=0.01):
                raise RuntimeError("network down")
        assert stream.getvalue().endswith('\r')
        assert stream.getvalue().rsplit('\r', 2)[1].strip(' ') == ""

    def test_defaults_to_stderr(self, capsys):
        with Spinner(MESSAGE, interval=0.01):
            pass
        captured = capsys.readouterr()
        assert captured.out == ""
        assert MESSAGE in captured.err

    def test_ten_frames_at_100ms(self):
        assert Spinner.FRAMES == ['⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏']
        assert Spinner.INTERVAL == 0.1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestDisplayWidth:

    @pytest.mark.parametrize("text, expected", [
        ("", 0),
        ("abc", 3),
        ("🤖", 2),
        ("🤖 gemini", 9),
        ("⠋", 1),
        ("⚙️", 1),
    ])
    def test_widths(self, text, expected):
        assert display_width(text) == expected


class TestPrintError:

    def test_goes_to_stderr(self, capsys, strip_ansi):
        print_error("GEMINI_API_KEY environment variable is not set.")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert strip_ansi(captured.err) == f"{CROSS} GEMINI_API_KEY environment variable is not set.\n"
