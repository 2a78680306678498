"""Centralized logging configuration."""
import logging

from arith.config import LOG_FORMAT, LOG_DATEFMT


def configure_logging(level: str = "INFO"):
    """Configure logging for the evaluator and its callers."""
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        force=True  # Override any existing configuration
    )

    # Tokenizer and parser only emit DEBUG records
    logging.getLogger("arith.parsing").setLevel(log_level)
    logging.getLogger("arith.tools").setLevel(log_level)
    logging.getLogger().setLevel(log_level)
