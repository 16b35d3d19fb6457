"""
System Reporter - context-tagged logging for test runs and tooling.

Logs to stdout, plus a per-name log file when a log directory is given.
"""

import logging
import os
import sys
from typing import Optional


class SystemReporter:
    """
    Logger with verbose filtering.

    Verbose Levels:
        0 = Critical only (always visible)
        1 = Important messages (default)
        2 = Detailed information
        3 = Debug/verbose
    """

    def __init__(
        self,
        name: str = "system",
        log_dir: Optional[str] = None,
        level: int = logging.INFO,
        verbose: int = 1,
    ) -> None:
        """
        Initialize SystemReporter.

        Args:
            name: Logger name (used for filename if log_dir provided)
            log_dir: Directory for log files. If None, logs to stdout only.
            level: Python logging level
            verbose: Verbosity filter (0-3)
        """
        self.name = name
        self.verbose = verbose
        self.log_file: Optional[str] = None

        self.logger = logging.getLogger(f"reporter.{name}")
        self.logger.setLevel(level)
        self.logger.propagate = False
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            self.log_file = os.path.join(log_dir, f"{name}.log")
            # One log file per run
            file_handler = logging.FileHandler(
                self.log_file, mode="w", encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def close(self) -> None:
        """Detach and close handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def set_verbose(self, level: int) -> None:
        """Update verbosity level."""
        self.verbose = max(0, min(3, level))

    def _should_log(self, verbose_level: int) -> bool:
        return self.verbose >= verbose_level

    def debug(self, msg: str, context: str = "system", verbose_level: int = 3) -> None:
        if self._should_log(verbose_level):
            self.logger.debug(f"[{context}] {msg}")

    def info(self, msg: str, context: str = "system", verbose_level: int = 1) -> None:
        if self._should_log(verbose_level):
            self.logger.info(f"[{context}] {msg}")

    def warning(
        self, msg: str, context: str = "system", verbose_level: int = 1
    ) -> None:
        if self._should_log(verbose_level):
            self.logger.warning(f"[{context}] {msg}")

    def error(self, msg: str, context: str = "system", verbose_level: int = 0) -> None:
        if self._should_log(verbose_level):
            self.logger.error(f"[{context}] {msg}")

    def critical(
        self, msg: str, context: str = "system", verbose_level: int = 0
    ) -> None:
        if self._should_log(verbose_level):
            self.logger.critical(f"[{context}] {msg}")
