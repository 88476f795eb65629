"""In-memory email adapter for testing.

Records every delivered message and returns a configurable response.
Useful for unit testing code that sends email without hitting Mailjet.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

from .adapters.mailjet import MailjetAdapter, build_body
from .types import EmailMessage, MailjetConfig, ProviderResponse


@dataclass
class SentEmail:
    """Record of an email delivered through the TestAdapter."""

    message: EmailMessage
    body: dict[str, Any]


class TestAdapter:
    """Adapter that records emails instead of sending them.

    Usage::

        adapter = TestAdapter()
        Mailer(adapter, {"api_key": "k", "api_private_key": "p"}).deliver(message)
        assert adapter.sent[0].body["Subject"] == "Welcome"

    Configure a failure::

        adapter = TestAdapter(error=ApiError.from_reason("econnrefused"))
    """

    __test__ = False  # not a pytest test class

    supports_attachments: ClassVar[bool] = True

    def __init__(
        self,
        *,
        response: ProviderResponse | None = None,
        error: Exception | None = None,
        builder: Callable[[EmailMessage], dict[str, Any]] = build_body,
    ) -> None:
        self.response = response or ProviderResponse(status_code=200, body="SENT")
        self.error = error
        self.builder = builder
        self.sent: list[SentEmail] = []

    def handle_config(self, config: MailjetConfig | Mapping[str, Any]) -> MailjetConfig:
        return MailjetAdapter().handle_config(config)

    def deliver(self, message: EmailMessage, config: MailjetConfig | Mapping[str, Any]) -> ProviderResponse:
        self.handle_config(config)
        if self.error is not None:
            raise self.error
        self.sent.append(SentEmail(message=message, body=self.builder(message)))
        return self.response

    def reset(self) -> None:
        """Clear all recorded emails."""
        self.sent.clear()
