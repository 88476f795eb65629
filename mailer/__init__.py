"""
mailjet-mailer — Send provider-agnostic emails through the Mailjet API.

Owns everything from "I have an email and Mailjet credentials" to "here is
what Mailjet answered." The consuming app retains orchestration (who to
email, retries, scheduling, logging of outcomes).

Quick start::

    from mailer import EmailMessage, MailjetAdapter, Mailer

    mailer = Mailer(MailjetAdapter(), {"api_key": "...", "api_private_key": "..."})
    response = mailer.deliver(EmailMessage(
        from_email=("My App", "noreply@example.com"),
        to=["user@example.com", ("Jane", "jane@example.com")],
        subject="Welcome",
        html_body="<h1>Hello!</h1>",
        text_body="Hello!",
    ))
    print(response.status_code)

Mailjet templates and callbacks::

    from mailer.mailjet_helpers import put_custom_id, put_var, template, template_language

    message = template(message, "4242")
    message = template_language(message, True)
    message = put_var(message, "name", "Arthur")
    message = put_custom_id(message, "order-1234")

Errors::

    from mailer import ApiError, ConfigError

    try:
        mailer.deliver(message)
    except ApiError as exc:
        print(exc.response)  # None for network failures, see exc.reason

For testing::

    from mailer import Mailer, TestAdapter

    adapter = TestAdapter()
    Mailer(adapter, {"api_key": "k", "api_private_key": "p"}).deliver(message)
    assert len(adapter.sent) == 1

Module overview
---------------
- ``types``            — Core dataclasses: EmailMessage, Attachment, MailjetConfig, ProviderResponse
- ``mailer``           — Mailer entry point (config validation, attachment capability check)
- ``adapters/``        — EmailAdapter protocol and MailjetAdapter (request builder + transport)
- ``mailjet_helpers``  — Setters for Mailjet extension fields
- ``errors``           — ConfigError, ApiError, AttachmentsNotSupportedError
- ``mock``             — TestAdapter

What this library does NOT own (stays in the consuming app):
- Retries, rate limiting and batching
- Template management
- Event callback (webhook) processing
"""

from .adapters import EmailAdapter, MailjetAdapter, build_body
from .errors import ApiError, AttachmentsNotSupportedError, ConfigError, MailerError
from .mailer import Mailer
from .mock import SentEmail, TestAdapter
from .types import Address, Attachment, EmailMessage, MailjetConfig, MailjetExtension, ProviderResponse

__all__ = [
    # Entry point
    "Mailer",
    # Adapters
    "EmailAdapter",
    "MailjetAdapter",
    "TestAdapter",
    "SentEmail",
    "build_body",
    # Types
    "Address",
    "Attachment",
    "EmailMessage",
    "MailjetConfig",
    "MailjetExtension",
    "ProviderResponse",
    # Errors
    "ApiError",
    "AttachmentsNotSupportedError",
    "ConfigError",
    "MailerError",
]
