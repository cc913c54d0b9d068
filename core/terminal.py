# core/terminal.py
from __future__ import annotations
import io
import logging
import sys
import termios
from typing import Optional

from prompt_toolkit.input import Input, create_input

from app.errors import TerminalModeError
from core.keyboard import KeyReader

log = logging.getLogger(__name__)


class TerminalSession:
    """
    Raw mode for the lifetime of the ``with`` block.
    Restores the original terminal mode on every way out, SystemExit included.
    """

    def __init__(self, inp: Optional[Input] = None):
        self.input = inp
        self.reader: Optional[KeyReader] = None
        self._raw = None

    def __enter__(self) -> "TerminalSession":
        if self.input is None:
            if not sys.stdin.isatty():
                raise TerminalModeError("stdin is not an interactive terminal")
            try:
                self.input = create_input(sys.stdin)
            except (OSError, io.UnsupportedOperation) as e:
                raise TerminalModeError(f"cannot open terminal input: {e}") from e

        raw = self.input.raw_mode()
        try:
            raw.__enter__()
        except (OSError, termios.error) as e:
            raise TerminalModeError(f"cannot enter raw mode: {e}") from e
        self._raw = raw
        log.info("Raw mode enabled")

        self.reader = KeyReader(self.input)
        return self

    def __exit__(self, exc_type, exc, tb):
        raw, self._raw = self._raw, None
        if raw is None:
            return False
        try:
            raw.__exit__(exc_type, exc, tb)
        except (OSError, termios.error) as e:
            raise TerminalModeError(f"cannot leave raw mode: {e}") from e
        log.info("Raw mode disabled")
        return False
