"""Pytest configuration for test logging."""
from arith.config import LOG_LEVEL
from arith.observability.logging_config import configure_logging

configure_logging(LOG_LEVEL)
