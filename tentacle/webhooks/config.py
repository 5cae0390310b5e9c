"""Environment configuration for the webhook receiver."""

from __future__ import annotations

import dataclasses as dc
import os

WEBHOOK_SECRET_ENV_VAR = "TENTACLE_WEBHOOK_SECRET"


@dc.dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Settings for :func:`tentacle.webhooks.create_app`.

    Attributes
    ----------
    secret
        Shared secret configured on the GitHub webhook. ``None`` accepts
        unsigned deliveries, which is only suitable for local development.

    """

    secret: str | None = None

    @classmethod
    def from_env(cls) -> WebhookConfig:
        """Build configuration from ``TENTACLE_WEBHOOK_SECRET``.

        A blank value is treated as unset.
        """
        secret = os.environ.get(WEBHOOK_SECRET_ENV_VAR, "").strip()
        return cls(secret=secret or None)
