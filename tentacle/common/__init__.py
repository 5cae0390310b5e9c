"""Shared helpers used across Tentacle packages."""

from __future__ import annotations

from .time import format_rfc3339, from_epoch_seconds

__all__ = ["format_rfc3339", "from_epoch_seconds"]
