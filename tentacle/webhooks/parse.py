"""Decode webhook payloads into typed event structs."""

from __future__ import annotations

import msgspec

from tentacle.models.events import EVENT_TYPES, EventType, WebhookEvent

from .errors import UnknownWebhookEventError, WebhookPayloadError


def event_for_type(message_type: str) -> type[WebhookEvent] | None:
    """Return the event struct registered for ``message_type``, if any.

    Example:
    >>> event_for_type("ping").__name__
    'PingEvent'
    >>> event_for_type("nope") is None
    True

    """
    try:
        return EVENT_TYPES[EventType(message_type)]
    except ValueError:
        return None


def message_types() -> list[str]:
    """Return every supported ``X-GitHub-Event`` name in sorted order."""
    return sorted(event_type.value for event_type in EVENT_TYPES)


def parse_webhook(message_type: str, payload: bytes | str) -> WebhookEvent:
    """Decode ``payload`` into the event struct for ``message_type``.

    Parameters
    ----------
    message_type
        Value of the ``X-GitHub-Event`` header, e.g. ``"pull_request"``.
    payload
        JSON body returned by :func:`validate_payload_from_body`.

    Raises
    ------
    UnknownWebhookEventError
        If ``message_type`` has no registered event struct.
    WebhookPayloadError
        If ``payload`` is not valid JSON for that struct.

    """
    event_cls = event_for_type(message_type)
    if event_cls is None:
        raise UnknownWebhookEventError(message_type)
    try:
        return msgspec.json.decode(payload, type=event_cls)
    except msgspec.DecodeError as exc:
        raise WebhookPayloadError.undecodable(message_type, str(exc)) from exc
