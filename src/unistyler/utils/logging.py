"""Logging utilities for Unistyler."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from unistyler.domain import ValidationIssue

_HANDLER_MARK = "_unistyler_handler"


@dataclass
class ValidationStats:
    """Statistics from a validation run."""

    checked_count: int = 0
    valid_count: int = 0
    error_count: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)

    @property
    def all_valid(self) -> bool:
        return self.checked_count > 0 and self.error_count == 0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARK, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("unistyler")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ValidationLogger:
    """Logger for tracking a validation run and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ValidationStats()

    def log_pack_valid(self, path: str, pack_id: str, style_count: int) -> None:
        """Log a pack that passed validation."""
        self._logger.info("Pack valid", path=path, pack=pack_id, styles=style_count)
        self._stats.checked_count += 1
        self._stats.valid_count += 1

    def log_pack_invalid(self, path: str, pack_id: str, issues: list[ValidationIssue]) -> None:
        """Log a pack that failed validation."""
        self._logger.warning(
            "Pack invalid",
            path=path,
            pack=pack_id,
            error_count=len(issues),
            errors=[f"[{issue.field}] {issue.message}" for issue in issues],
        )
        self._stats.checked_count += 1
        self._stats.error_count += len(issues)
        self._stats.failures.extend((path, issue.message) for issue in issues)

    def log_load_failed(self, path: str, error: Exception) -> None:
        """Log a pack file that could not be read."""
        self._logger.error(
            "Pack file unreadable",
            path=path,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.checked_count += 1
        self._stats.error_count += 1
        self._stats.failures.append((path, str(error)))

    @property
    def stats(self) -> ValidationStats:
        """Get current validation statistics."""
        return self._stats
