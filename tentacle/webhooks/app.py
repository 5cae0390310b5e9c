"""Falcon ASGI receiver for GitHub webhook deliveries.

Usage
-----
Build an app that forwards each verified event to a coroutine::

    from tentacle.webhooks import WebhookDelivery, create_app

    async def handle(delivery: WebhookDelivery) -> None:
        ...

    app = create_app(handle, secret="s3cret")

``POST /webhooks`` answers 202 once ``handle`` returns, 401 when the
signature does not verify and 400 for any other malformed delivery.
``GET /health`` is always available.

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from http import HTTPStatus

import falcon
import falcon.asgi

from tentacle.logging import get_logger, log_info, log_warning

from .errors import UnknownWebhookEventError, WebhookPayloadError, WebhookSignatureError
from .parse import parse_webhook
from .signature import (
    DELIVERY_ID_HEADER,
    EVENT_TYPE_HEADER,
    signature_from_headers,
    validate_payload_from_body,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from falcon.asgi import Request, Response

    from tentacle.models.events import WebhookEvent

__all__ = ["HealthResource", "WebhookDelivery", "WebhookResource", "create_app"]

logger = get_logger(__name__)


@dc.dataclass(frozen=True, slots=True)
class WebhookDelivery:
    """A verified and decoded webhook delivery.

    Attributes
    ----------
    event_type
        Value of the ``X-GitHub-Event`` header.
    delivery_id
        Value of the ``X-GitHub-Delivery`` header, when sent.
    event
        Decoded event payload.

    """

    event_type: str
    delivery_id: str | None
    event: WebhookEvent


type DeliveryHandler = cabc.Callable[[WebhookDelivery], cabc.Awaitable[None]]


class HealthResource:
    """Liveness probe resource returning ``{"status": "ok"}``."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET /health requests."""
        resp.media = {"status": "ok"}
        resp.status = HTTPStatus.OK


class WebhookResource:
    """Verify, decode and dispatch webhook deliveries."""

    def __init__(self, handler: DeliveryHandler, *, secret: str | None) -> None:
        """Store the delivery handler and the shared secret."""
        self._handler = handler
        self._secret = secret

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle POST /webhooks requests.

        Raises
        ------
        WebhookSignatureError
            If the body's signature does not verify.
        WebhookPayloadError
            If a required header is missing or the body cannot be decoded.
        UnknownWebhookEventError
            If the event name is not supported.

        """
        event_type = req.get_header(EVENT_TYPE_HEADER)
        if not event_type:
            raise WebhookPayloadError.missing_header(EVENT_TYPE_HEADER)
        delivery_id = req.get_header(DELIVERY_ID_HEADER)

        body = await req.stream.read()
        payload = validate_payload_from_body(
            req.content_type or "",
            body,
            signature_from_headers(req.get_header),
            self._secret,
        )
        event = parse_webhook(event_type, payload)

        log_info(logger, "Accepted %s delivery %s", event_type, delivery_id or "-")
        await self._handler(WebhookDelivery(event_type, delivery_id, event))

        resp.media = {"status": "accepted", "event": event_type}
        resp.status = HTTPStatus.ACCEPTED


async def handle_signature_error(
    req: Request,
    resp: Response,
    ex: WebhookSignatureError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``WebhookSignatureError`` to an HTTP 401 JSON response."""
    log_warning(
        logger,
        "Rejected delivery %s: %s",
        req.get_header(DELIVERY_ID_HEADER) or "-",
        ex,
    )
    resp.status = falcon.HTTP_401
    resp.media = {"title": "Invalid signature", "description": str(ex)}


async def handle_payload_error(
    req: Request,
    resp: Response,
    ex: WebhookPayloadError | UnknownWebhookEventError,
    _params: dict[str, typ.Any],
) -> None:
    """Map malformed or unsupported deliveries to an HTTP 400 JSON response."""
    log_warning(
        logger,
        "Rejected delivery %s: %s",
        req.get_header(DELIVERY_ID_HEADER) or "-",
        ex,
    )
    resp.status = falcon.HTTP_400
    resp.media = {"title": "Invalid delivery", "description": str(ex)}


def create_app(
    handler: DeliveryHandler, *, secret: str | None = None
) -> falcon.asgi.App:
    """Create the Falcon ASGI application receiving webhook deliveries.

    Parameters
    ----------
    handler
        Coroutine called with each verified :class:`WebhookDelivery`.
        Exceptions it raises propagate as HTTP 500 responses.
    secret
        Shared webhook secret. When ``None`` unsigned deliveries are
        accepted, but any signature that is sent is still checked.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    app = falcon.asgi.App()
    app.add_route("/health", HealthResource())
    app.add_route("/webhooks", WebhookResource(handler, secret=secret))

    app.add_error_handler(WebhookSignatureError, handle_signature_error)
    app.add_error_handler(WebhookPayloadError, handle_payload_error)
    app.add_error_handler(UnknownWebhookEventError, handle_payload_error)
    return app
