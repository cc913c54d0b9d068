class KeyfastError(Exception):
    pass


class TerminalModeError(KeyfastError):
    """Raised when the terminal cannot be put into (or taken out of) raw mode."""
