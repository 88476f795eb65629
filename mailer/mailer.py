"""Mailer — the main entry point for sending emails.

The mailer binds an adapter to its config and applies the checks that
don't belong to any single provider.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .errors import AttachmentsNotSupportedError

if TYPE_CHECKING:
    from .adapters.base import EmailAdapter
    from .types import EmailMessage, MailjetConfig, ProviderResponse

logger = logging.getLogger(__name__)


class Mailer:
    """Sends emails through one adapter with a validated config.

    Usage::

        from mailer import EmailMessage, MailjetAdapter, Mailer

        mailer = Mailer(MailjetAdapter(), {"api_key": "...", "api_private_key": "..."})
        response = mailer.deliver(EmailMessage(from_email="noreply@example.com", to=["user@example.com"]))
        print(response.status_code)
    """

    def __init__(self, adapter: EmailAdapter, config: MailjetConfig | Mapping[str, Any]) -> None:
        self.adapter = adapter
        # Fail at startup rather than on the first send.
        self.config = adapter.handle_config(config)

    def deliver(self, message: EmailMessage) -> ProviderResponse:
        """Send an email now, raising on any failure.

        Raises:
            AttachmentsNotSupportedError: The message has attachments and the
                adapter does not declare support for them.
            ApiError: The provider could not be reached or rejected the email.
        """
        if message.attachments and not self.adapter.supports_attachments:
            raise AttachmentsNotSupportedError(
                f"{type(self.adapter).__name__} does not support attachments, "
                f"but the email has {len(message.attachments)}"
            )
        logger.debug("Delivering email via %s", type(self.adapter).__name__)
        return self.adapter.deliver(message, self.config)

    async def deliver_async(self, message: EmailMessage) -> ProviderResponse:
        """Send an email asynchronously (runs sync deliver in a thread)."""
        return await asyncio.to_thread(self.deliver, message)
