"""Tentacle webhook receiver entrypoint.

This module exposes ``tentacle.runtime:create_app`` as a Granian factory
and a ``main()`` that serves it. Each verified delivery is logged; deploy a
custom handler by building your own app with
:func:`tentacle.webhooks.create_app`.

Configuration is driven by environment variables:

- ``TENTACLE_HOST``: Bind address (default ``0.0.0.0``)
- ``TENTACLE_PORT``: Listen port (default ``8080``)
- ``TENTACLE_LOG_LEVEL``: Log level (default ``INFO``)
- ``TENTACLE_WEBHOOK_SECRET``: Shared webhook secret (optional; unsigned
  deliveries are accepted when unset)

Run the receiver directly with ``python -m tentacle.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from tentacle.logging import (
    LOG_LEVEL_ENV_VAR,
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)
from tentacle.webhooks import WebhookConfig
from tentacle.webhooks import create_app as _create_webhook_app

if typ.TYPE_CHECKING:
    import falcon.asgi

    from tentacle.webhooks import WebhookDelivery

__all__ = ["create_app", "log_delivery", "main"]

logger = get_logger(__name__)

# TCP port number range limits
_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
        if not (_MIN_PORT <= port <= _MAX_PORT):
            msg = f"port {port} outside valid range {_MIN_PORT}-{_MAX_PORT}"
            raise ValueError(msg)  # noqa: TRY301 - unify conversion and range errors
    except ValueError as exc:
        log_error(
            logger,
            "Invalid TENTACLE_PORT value: %r (must be %d-%d): %s",
            port_str,
            _MIN_PORT,
            _MAX_PORT,
            exc,
        )
        raise SystemExit(1) from exc
    return port


async def log_delivery(delivery: WebhookDelivery) -> None:
    """Log a delivery's event name, action and sender."""
    action = getattr(delivery.event, "action", None)
    sender = delivery.event.sender.login if delivery.event.sender else None
    log_info(
        logger,
        "Received %s (action=%s, sender=%s, delivery=%s)",
        delivery.event_type,
        action or "-",
        sender or "-",
        delivery.delivery_id or "-",
    )


def create_app() -> falcon.asgi.App:
    """Create the webhook receiver configured from the environment."""
    config = WebhookConfig.from_env()
    if config.secret is None:
        log_warning(
            logger,
            "TENTACLE_WEBHOOK_SECRET is unset; unsigned deliveries are accepted",
        )
    return _create_webhook_app(log_delivery, secret=config.secret)


def main() -> None:
    """Start the Tentacle webhook receiver using Granian.

    Reads ``TENTACLE_HOST``, ``TENTACLE_PORT``, and ``TENTACLE_LOG_LEVEL``
    from the environment and starts the ASGI server.
    """
    from granian import Granian
    from granian.constants import Interfaces

    host = os.environ.get("TENTACLE_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("TENTACLE_PORT", "8080"))
    log_level_str = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid TENTACLE_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    log_info(
        logger,
        "Starting Tentacle webhook receiver on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "tentacle.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
