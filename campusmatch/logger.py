"""
Structured logging system for campusmatch.

Provides centralized logging with console and file outputs, log levels,
and counters describing the comparisons run by the command line tool.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks comparison metrics for a CLI session.
    """

    def __init__(
        self,
        name: str = "campusmatch",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        self.metrics = {
            "comparisons": 0,
            "empty_pairs": 0,
            "score_total": 0.0,
            "invalid_inputs": 0,
            "errors_by_reason": {},
        }

        if enable_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"campusmatch_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs):
        """Log critical message with optional context."""
        self._log(logging.CRITICAL, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, ensure_ascii=False)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_comparison(self, score: float):
        """Record one computed similarity score."""
        self.metrics["comparisons"] += 1
        self.metrics["score_total"] += score

    def record_empty_pair(self):
        """Record a comparison where both label sets were empty."""
        self.metrics["empty_pairs"] += 1

    def record_invalid_input(self, reason: str):
        """Record a rejected payload, grouped by reason."""
        self.metrics["invalid_inputs"] += 1
        if reason not in self.metrics["errors_by_reason"]:
            self.metrics["errors_by_reason"][reason] = 0
        self.metrics["errors_by_reason"][reason] += 1

    def get_metrics(self) -> dict:
        """Return a copy of current metrics with the mean score filled in."""
        metrics_copy = dict(self.metrics)
        metrics_copy["errors_by_reason"] = dict(self.metrics["errors_by_reason"])
        comparisons = metrics_copy["comparisons"]
        metrics_copy["mean_score"] = (
            round(metrics_copy["score_total"] / comparisons, 4) if comparisons else 0.0
        )
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Comparison Session Metrics ===")
        self.info(f"Comparisons: {metrics['comparisons']} (mean score {metrics['mean_score']:.4f})")
        self.info(f"Empty pairs: {metrics['empty_pairs']}")

        if metrics["errors_by_reason"]:
            self.info("Invalid inputs:")
            for reason, count in metrics["errors_by_reason"].items():
                self.info(f"  {reason}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None


def get_logger(
    name: str = "campusmatch",
    level: str = "INFO",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
