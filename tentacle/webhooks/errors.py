"""Errors raised while validating and decoding webhook deliveries."""

from __future__ import annotations


class WebhookError(Exception):
    """Base exception for webhook delivery failures."""


class WebhookSignatureError(WebhookError):
    """Raised when a delivery's HMAC signature cannot be verified."""

    @classmethod
    def missing(cls) -> WebhookSignatureError:
        """Return an error for a delivery without a signature header."""
        return cls("missing signature")

    @classmethod
    def malformed(cls, signature: str) -> WebhookSignatureError:
        """Return an error for a signature not shaped ``<alg>=<hexdigest>``."""
        return cls(f"error parsing signature {signature!r}")

    @classmethod
    def unknown_algorithm(cls, prefix: str) -> WebhookSignatureError:
        """Return an error for an unsupported hash prefix."""
        return cls(f"unknown hash type prefix: {prefix!r}")

    @classmethod
    def mismatch(cls) -> WebhookSignatureError:
        """Return an error for a signature that does not match the body."""
        return cls("payload signature check failed")


class WebhookPayloadError(WebhookError):
    """Raised when a delivery body cannot be turned into an event."""

    @classmethod
    def unsupported_content_type(cls, content_type: str) -> WebhookPayloadError:
        """Return an error for a content type GitHub does not send."""
        return cls(f"webhook request has unsupported Content-Type {content_type!r}")

    @classmethod
    def missing_header(cls, header: str) -> WebhookPayloadError:
        """Return an error for a delivery without a required header."""
        return cls(f"missing {header} header")

    @classmethod
    def malformed_form(cls, detail: str) -> WebhookPayloadError:
        """Return an error for a form body that is not valid UTF-8."""
        return cls(f"malformed form-encoded payload: {detail}")

    @classmethod
    def undecodable(cls, message_type: str, detail: str) -> WebhookPayloadError:
        """Return an error for a payload that is not a valid event body."""
        return cls(f"invalid {message_type} payload: {detail}")


class UnknownWebhookEventError(WebhookError):
    """Raised for an ``X-GitHub-Event`` name with no registered event type."""

    def __init__(self, message_type: str) -> None:
        """Initialise with the unrecognised event name."""
        self.message_type = message_type
        super().__init__(f"unknown X-GitHub-Event in message: {message_type!r}")
