"""Verify, decode and receive GitHub webhook deliveries."""

from __future__ import annotations

from .app import HealthResource, WebhookDelivery, WebhookResource, create_app
from .config import WebhookConfig
from .errors import (
    UnknownWebhookEventError,
    WebhookError,
    WebhookPayloadError,
    WebhookSignatureError,
)
from .parse import event_for_type, message_types, parse_webhook
from .signature import (
    DELIVERY_ID_HEADER,
    EVENT_TYPE_HEADER,
    SHA1_SIGNATURE_HEADER,
    SHA256_SIGNATURE_HEADER,
    compute_signature,
    signature_from_headers,
    validate_payload_from_body,
    validate_signature,
)

__all__ = [
    "DELIVERY_ID_HEADER",
    "EVENT_TYPE_HEADER",
    "SHA1_SIGNATURE_HEADER",
    "SHA256_SIGNATURE_HEADER",
    "HealthResource",
    "UnknownWebhookEventError",
    "WebhookConfig",
    "WebhookDelivery",
    "WebhookError",
    "WebhookPayloadError",
    "WebhookResource",
    "WebhookSignatureError",
    "compute_signature",
    "create_app",
    "event_for_type",
    "message_types",
    "parse_webhook",
    "signature_from_headers",
    "validate_payload_from_body",
    "validate_signature",
]
