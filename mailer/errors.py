"""Exceptions raised by mailer adapters."""

from __future__ import annotations

from typing import Any


class MailerError(Exception):
    """Base class for all mailer errors."""


class ConfigError(MailerError, ValueError):
    """Raised before any network call when a required config key is missing."""

    def __init__(self, key: str, config: Any) -> None:
        super().__init__(
            f"There was no {key} set for the Mailjet adapter.\n\n"
            f"Here are the config options that were passed in:\n\n{config!r}"
        )
        self.key = key
        self.config = config


class ApiError(MailerError, RuntimeError):
    """Raised when the provider cannot be reached or rejects the request.

    Built through one of two constructors:

    - ``from_reason`` for transport failures (connection refused, timeout, DNS)
    - ``from_response`` for HTTP responses with a status above 299, keeping the
      sent params and the full response for post-mortem inspection
    """

    def __init__(
        self,
        message: str,
        *,
        reason: str | None = None,
        params: str | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.params = params
        self.response = response

    @classmethod
    def from_reason(cls, reason: str) -> ApiError:
        return cls(reason, reason=reason)

    @classmethod
    def from_response(cls, params: str, response: Any) -> ApiError:
        message = (
            "There was a problem sending the email through the Mailjet API.\n\n"
            f"Here is the response:\n\n{response!r}\n\n"
            f"Here are the params we sent:\n\n{params}\n"
        )
        return cls(message, params=params, response=response)


class AttachmentsNotSupportedError(MailerError):
    """Raised when a message with attachments is given to an adapter that can't send them."""
