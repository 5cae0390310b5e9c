"""HMAC signature checks and payload extraction for webhook deliveries.

GitHub signs the raw request body with the webhook secret and sends the
hex digest as ``<alg>=<hexdigest>`` in ``X-Hub-Signature-256`` (SHA-256)
and, for older hooks, ``X-Hub-Signature`` (SHA-1).
"""

from __future__ import annotations

import hmac
import typing as typ
from urllib.parse import parse_qs

from .errors import WebhookPayloadError, WebhookSignatureError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

SHA1_SIGNATURE_HEADER = "X-Hub-Signature"
SHA256_SIGNATURE_HEADER = "X-Hub-Signature-256"
EVENT_TYPE_HEADER = "X-GitHub-Event"
DELIVERY_ID_HEADER = "X-GitHub-Delivery"

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
_PAYLOAD_FORM_FIELD = "payload"

_HASH_ALGORITHMS = frozenset({"sha1", "sha256", "sha512"})


def _secret_bytes(secret: str | bytes | None) -> bytes:
    if secret is None:
        return b""
    if isinstance(secret, str):
        return secret.encode()
    return secret


def _split_signature(signature: str) -> tuple[str, bytes]:
    if not signature:
        raise WebhookSignatureError.missing()
    prefix, sep, digest = signature.partition("=")
    if not sep:
        raise WebhookSignatureError.malformed(signature)
    if prefix not in _HASH_ALGORITHMS:
        raise WebhookSignatureError.unknown_algorithm(prefix)
    try:
        return prefix, bytes.fromhex(digest)
    except ValueError as exc:
        raise WebhookSignatureError.malformed(signature) from exc


def compute_signature(
    payload: bytes, secret: str | bytes, *, algorithm: str = "sha256"
) -> str:
    """Return the ``<alg>=<hexdigest>`` signature GitHub would send.

    Example:
    >>> compute_signature(b"{}", "s3cret", algorithm="sha1")[:5]
    'sha1='

    """
    digest = hmac.new(_secret_bytes(secret), payload, algorithm).hexdigest()
    return f"{algorithm}={digest}"


def validate_signature(
    signature: str, payload: bytes, secret: str | bytes | None
) -> None:
    """Verify that ``signature`` is the HMAC of ``payload`` under ``secret``.

    Parameters
    ----------
    signature
        Header value of the form ``sha256=<hexdigest>``. ``sha1`` and
        ``sha512`` prefixes are also accepted.
    payload
        Raw request body exactly as received.
    secret
        Webhook secret configured on GitHub.

    Raises
    ------
    WebhookSignatureError
        If the signature is missing, malformed, uses an unknown algorithm or
        does not match.

    """
    algorithm, expected = _split_signature(signature)
    actual = hmac.new(_secret_bytes(secret), payload, algorithm).digest()
    if not hmac.compare_digest(actual, expected):
        raise WebhookSignatureError.mismatch()


def _media_type(content_type: str) -> str:
    return content_type.split(";", 1)[0].strip().lower()


def validate_payload_from_body(
    content_type: str,
    body: bytes,
    signature: str | None,
    secret: str | bytes | None,
) -> bytes:
    """Return the JSON payload of a delivery after checking its signature.

    The signature is always computed over the raw body, so for form-encoded
    deliveries it covers the encoded form rather than the extracted JSON.
    Verification is skipped only when no secret is configured and no
    signature was sent.

    Raises
    ------
    WebhookPayloadError
        If ``content_type`` is neither JSON nor form-encoded, or a form body
        is not valid UTF-8.
    WebhookSignatureError
        If signature verification fails.

    """
    media_type = _media_type(content_type)
    if media_type == JSON_CONTENT_TYPE:
        payload = body
    elif media_type == FORM_CONTENT_TYPE:
        try:
            form = parse_qs(
                body.decode("utf-8"), keep_blank_values=True, errors="strict"
            )
        except UnicodeDecodeError as exc:
            raise WebhookPayloadError.malformed_form(str(exc)) from exc
        payload = form.get(_PAYLOAD_FORM_FIELD, [""])[0].encode()
    else:
        raise WebhookPayloadError.unsupported_content_type(content_type)

    if _secret_bytes(secret) or signature:
        validate_signature(signature or "", body, secret)
    return payload


def signature_from_headers(
    get_header: cabc.Callable[[str], str | None],
) -> str | None:
    """Return the strongest signature header present, if any.

    ``get_header`` looks a header up case-insensitively, e.g. Falcon's
    ``req.get_header`` or ``httpx.Headers.get``.
    """
    return get_header(SHA256_SIGNATURE_HEADER) or get_header(SHA1_SIGNATURE_HEADER)
