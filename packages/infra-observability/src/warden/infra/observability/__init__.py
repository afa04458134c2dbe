"""Warden Infra Observability -- structlog logging."""

from __future__ import annotations

from warden.infra.observability.logging import (
    LoggingSettings,
    configure_logging,
    get_logger,
)

__all__ = [
    "LoggingSettings",
    "configure_logging",
    "get_logger",
]
