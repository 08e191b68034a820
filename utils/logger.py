# utils/logger.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Logging utility for formula parsing and evaluation with configurable levels

import logging
import sys
from enum import Enum
from typing import Iterable, Optional


class LogLevel(Enum):
    """Log levels for truth-table generation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class FormulaLogger:
    """Centralized logger for parsing and evaluation diagnostics.

    Diagnostics go to stderr so that stdout carries only the truth table.
    """

    def __init__(self, name: str = "truthtable", level: LogLevel = LogLevel.INFO):
        """Initialize the formula logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(FormulaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula processing events
    def formula_loaded(self, text: str, source: str):
        """Log where the formula came from."""
        self.info(f"📋 Formula loaded from {source}: {text}")

    def tree_parsed(self, tree: str, atoms: Iterable[str]):
        """Log the parsed tree and its atoms."""
        self.info(f"🌳 Parsed tree: {tree}")
        self.info(f"🔤 Atoms: {', '.join(atoms) or '(none)'}")

    def table_complete(self, rows: int):
        """Log truth-table completion."""
        self.info(f"✅ Truth table complete: {rows} row(s)")


class FormulaFormatter(logging.Formatter):
    """Custom formatter for clean diagnostic output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[FormulaLogger] = None


def get_logger(name: str = "truthtable") -> FormulaLogger:
    """Get or create the global formula logger instance.

    Args:
        name: Logger name (default: "truthtable")

    Returns:
        FormulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = FormulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
