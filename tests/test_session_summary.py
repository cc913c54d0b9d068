from datetime import timedelta

from app.calculation import score
from ui.session_summary import report, summary_lines


def test_win_lines():
    res = score("Lorem ipsum dolor.", "Lorem ipsum dolor.", timedelta(milliseconds=500))
    assert summary_lines(res) == ["GG! You win in 500ms", "Character/sec: 36.0"]


def test_loss_lines_have_no_throughput():
    res = score("Lorem ipsum dolr.", "Lorem ipsum dolor.", timedelta(milliseconds=1234))
    assert summary_lines(res) == ["You lost in 1234ms"]


def test_throughput_one_decimal():
    res = score("abc", "abc", timedelta(seconds=7))
    assert summary_lines(res)[1] == "Character/sec: 0.4"


def test_report_writes_to_console(console_display):
    res = score("abc", "abc", timedelta(seconds=1))
    report(console_display, res)
    out = console_display.console.file.getvalue()
    assert out == "\n\nGG! You win in 1000ms\nCharacter/sec: 3.0\n"
