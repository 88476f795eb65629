"""Base protocol for email adapters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Protocol

from mailer.types import EmailMessage, MailjetConfig, ProviderResponse


class EmailAdapter(Protocol):
    """Interface that all email adapters must implement."""

    # Whether attachment data can be handed to the adapter as-is.
    supports_attachments: ClassVar[bool]

    def handle_config(self, config: MailjetConfig | Mapping[str, Any]) -> MailjetConfig:
        """Validate the config, raising ``ConfigError`` when a required key is missing."""
        ...

    def deliver(self, message: EmailMessage, config: MailjetConfig | Mapping[str, Any]) -> ProviderResponse:
        """Send an email and return the provider response."""
        ...
