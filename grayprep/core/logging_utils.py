"""Status messages for the file-level workflow and CLIs.

The core transforms (rescaler, gray range, LUT) never log; only the I/O,
workflow and command-line layers report through this module.
"""

import logging
import sys
from typing import Optional


class StatusLogger:
    """Prefix-formatted status output on top of the ``logging`` module.

    Messages carry ``[OK]``, ``[ERROR]`` or ``[WARNING]`` prefixes so batch
    output can be grepped. Info messages are dropped when not verbose.
    """

    def __init__(self, name: str = "grayprep", verbose: bool = True):
        """
        Args:
            name: Logger name in the ``logging`` hierarchy
            verbose: If False, suppresses info messages
        """
        self.verbose = verbose
        self._logger = logging.getLogger(name)

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter('%(message)s'))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)

    def _emit(self, level: int, text: str, indent: int) -> None:
        self._logger.log(level, f"{' ' * indent}{text}")

    def success(self, message: str, indent: int = 0) -> None:
        self._emit(logging.INFO, f"[OK] {message}", indent)

    def error(self, message: str, indent: int = 0) -> None:
        self._emit(logging.ERROR, f"[ERROR] {message}", indent)

    def warning(self, message: str, indent: int = 0) -> None:
        self._emit(logging.WARNING, f"[WARNING] {message}", indent)

    def info(self, message: str, indent: int = 0) -> None:
        """Log a plain message; suppressed unless verbose."""
        if self.verbose:
            self._emit(logging.INFO, message, indent)

    def set_verbose(self, verbose: bool) -> None:
        self.verbose = verbose


_default_logger: Optional[StatusLogger] = None


def get_logger(verbose: Optional[bool] = None) -> StatusLogger:
    """
    Get the shared status logger.

    Args:
        verbose: If given, updates the verbose flag of the shared logger

    Returns:
        StatusLogger instance
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = StatusLogger(verbose=True if verbose is None else verbose)
    elif verbose is not None:
        _default_logger.set_verbose(verbose)
    return _default_logger
