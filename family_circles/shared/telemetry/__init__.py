"""Shared telemetry: logging setup."""

from family_circles.shared.telemetry.logging import (
    LOG_FORMAT,
    RequestIdFilter,
    setup_logging,
)

__all__ = ["LOG_FORMAT", "RequestIdFilter", "setup_logging"]
