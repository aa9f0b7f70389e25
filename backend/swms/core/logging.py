import logging
import sys
from functools import lru_cache
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Log directory (backend/logs/)
_LOG_DIR = Path(__file__).parent.parent.parent / "logs"

# Symbols used to draw the pipeline flow
FLOW_SYMBOLS = {
    "start": "╔",
    "node": "║",
    "arrow": "→",
    "end": "╚",
    "route": "◆",
}


def _configure_root_logger(level: LogLevel) -> None:
    """Configure the root logger with console and file handlers."""
    root = logging.getLogger()
    if root.handlers:
        return

    # Quieten noisy third-party loggers
    noisy_loggers = [
        "watchfiles",
        "watchfiles.main",
        "httpx",
        "httpcore",
        "uvicorn.access",
        "urllib3",
    ]
    for logger_name in noisy_loggers:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    # Daily rotation, keeps 7 days
    try:
        _LOG_DIR.mkdir(exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            _LOG_DIR / "swms_engine.log",
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    except OSError:
        # Read-only deployments log to the console only
        pass

    root.setLevel(level)


@lru_cache(maxsize=128)
def get_logger(name: str) -> logging.Logger:
    """
    Return a configured logger for the given module.

    Usage:
        from swms.core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Message")
    """
    from swms.core.config import settings

    _configure_root_logger(settings.log_level)
    return logging.getLogger(name)


class PipelineLogger:
    """Tracing logger for the assessment review pipeline."""

    def __init__(self, pipeline_name: str):
        self._logger = get_logger(f"pipeline.{pipeline_name}")
        self.pipeline_name = pipeline_name

    def pipeline_start(self, record_count: int, trade_type: str) -> None:
        self._logger.info("=" * 70)
        self._logger.info(f"{FLOW_SYMBOLS['start']}══ REVIEW START ════════════════════════════════════════════════════")
        self._logger.info(f"{FLOW_SYMBOLS['node']} Records: {record_count} | Trade: {trade_type or 'general'}")
        self._logger.info(f"{FLOW_SYMBOLS['node']} Flow: START → validate_scores → check_compliance → END")
        self._logger.info("=" * 70)

    def pipeline_end(self, summary: dict) -> None:
        """Log the end of a review with its headline numbers."""
        self._logger.info("=" * 70)
        self._logger.info(f"{FLOW_SYMBOLS['end']}══ REVIEW COMPLETE ═════════════════════════════════════════════════")
        self._logger.info(f"   {FLOW_SYMBOLS['route']} Corrections: {summary.get('corrections', 0)}")
        self._logger.info(f"   {FLOW_SYMBOLS['route']} Warnings: {summary.get('warnings', 0)}")
        self._logger.info(f"   {FLOW_SYMBOLS['route']} Compliance Score: {summary.get('score', 0)}/100")
        self._logger.info(f"   {FLOW_SYMBOLS['route']} Can Finalize: {summary.get('can_finalize', False)}")
        self._logger.info("=" * 70)

    def stage_enter(self, stage: str, detail: str | None = None) -> None:
        self._logger.debug(f"{FLOW_SYMBOLS['node']} [{stage.upper()}] {FLOW_SYMBOLS['arrow']} Entering | {detail or ''}")

    def stage_exit(self, stage: str, result: str | None = None) -> None:
        self._logger.debug(f"{FLOW_SYMBOLS['node']} [{stage.upper()}] {FLOW_SYMBOLS['arrow']} Exiting | {result or 'OK'}")

    def error(self, stage: str, error: Exception) -> None:
        self._logger.error(f"{FLOW_SYMBOLS['node']} [{stage.upper()}] ERROR: {type(error).__name__}: {error}", exc_info=True)
