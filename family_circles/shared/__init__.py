"""Shared utilities: request context and telemetry (logging). No business logic."""

from family_circles.shared.context import (
    Viewer,
    get_request_id,
    reset_request_id,
    set_request_id,
)

__all__ = ["Viewer", "get_request_id", "reset_request_id", "set_request_id"]
