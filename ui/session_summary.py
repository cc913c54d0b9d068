# ui/session_summary.py
from app.calculation import RoundResult
from app.config import LOSS_MESSAGE, THROUGHPUT_MESSAGE, WIN_MESSAGE
from ui.display import Display


def summary_lines(result: RoundResult) -> list:
    if result.matched:
        return [
            WIN_MESSAGE.format(ms=result.elapsed_ms),
            THROUGHPUT_MESSAGE.format(cps=result.throughput),
        ]
    return [LOSS_MESSAGE.format(ms=result.elapsed_ms)]


def report(display: Display, result: RoundResult):
    display.line()
    display.line()
    style = "bold green" if result.matched else "bold red"
    for text in summary_lines(result):
        display.line(text, style=style)
