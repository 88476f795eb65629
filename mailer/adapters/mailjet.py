"""Mailjet email adapter (Send API v3.1)."""

from __future__ import annotations

import base64
import json
import logging
from collections.abc import Mapping
from typing import Any, ClassVar

import httpx

from mailer.errors import ApiError, ConfigError
from mailer.types import Address, Attachment, EmailMessage, MailjetConfig, ProviderResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URI = "https://api.mailjet.com/v3.1"
SEND_MESSAGE_PATH = "/send"

_REQUIRED_KEYS = ("api_key", "api_private_key")


class MailjetAdapter:
    """Sends emails through the Mailjet Send API.

    Usage::

        from mailer import EmailMessage, MailjetAdapter, MailjetConfig

        adapter = MailjetAdapter()
        response = adapter.deliver(
            EmailMessage(from_email=("My App", "noreply@example.com"), to=["user@example.com"], subject="Hi"),
            MailjetConfig(api_key="...", api_private_key="..."),
        )

    A caller-owned ``httpx.Client`` may be passed in to control timeouts,
    proxies or the transport. Without one, every call opens its own client.
    """

    supports_attachments: ClassVar[bool] = True

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    def handle_config(self, config: MailjetConfig | Mapping[str, Any]) -> MailjetConfig:
        """Validate credentials, raising ``ConfigError`` for the first missing one."""
        if isinstance(config, Mapping):
            config = MailjetConfig.from_mapping(config)
        for key in _REQUIRED_KEYS:
            if not getattr(config, key):
                raise ConfigError(key, config)
        return config

    def deliver(self, message: EmailMessage, config: MailjetConfig | Mapping[str, Any]) -> ProviderResponse:
        """Send one email. Raises ``ConfigError`` or ``ApiError`` on failure."""
        config = self.handle_config(config)
        params = json.dumps(build_body(message))
        url = _base_uri(config) + SEND_MESSAGE_PATH

        try:
            if self._client is not None:
                response = self._client.post(url, content=params, headers=_headers(config))
            else:
                with httpx.Client() as client:
                    response = client.post(url, content=params, headers=_headers(config))
        except httpx.RequestError as exc:
            logger.error("Mailjet request to %s failed: %s", url, exc)
            raise ApiError.from_reason(f"{type(exc).__name__}: {exc}") from exc

        result = ProviderResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
        )
        if response.status_code > 299:
            logger.error(
                "Mailjet send failed. Status: %s, Body: %s",
                response.status_code,
                response.text,
            )
            raise ApiError.from_response(params, result)

        logger.info(
            "Email sent via Mailjet to %d recipient(s), status %s",
            len(message.to) + len(message.cc) + len(message.bcc),
            response.status_code,
        )
        return result


# ── Request body ──────────────────────────────────────────────────────


def build_body(message: EmailMessage) -> dict[str, Any]:
    """Map a message onto a Mailjet request body.

    Optional fields are left out rather than sent as null.
    """
    body: dict[str, Any] = {}
    _put_from(body, message)
    _put_recipients(body, "To", message.to)
    _put_recipients(body, "Cc", message.cc)
    _put_recipients(body, "Bcc", message.bcc)
    _put_optional(body, "Subject", message.subject)
    _put_optional(body, "HTMLPart", message.html_body)
    _put_optional(body, "TextPart", message.text_body)

    ext = message.mailjet
    _put_optional(body, "TemplateID", ext.template_id)
    _put_optional(body, "TemplateLanguage", ext.template_language)
    if ext.variables is not None:
        body["Variables"] = dict(ext.variables)
    _put_optional(body, "CustomID", ext.custom_id)
    _put_optional(body, "EventPayload", ext.event_payload)
    _put_optional(body, "MonitoringCategory", ext.monitoring_category)

    _put_attachments(body, message.attachments)
    return body


def _put_from(body: dict[str, Any], message: EmailMessage) -> None:
    name, email = _split_address(message.from_email)
    if name:
        body["From"] = {"Name": name, "Email": email}
    else:
        body["From"] = {"Email": email}


def _put_recipients(body: dict[str, Any], key: str, addresses: tuple[Address, ...]) -> None:
    if not addresses:
        return
    body[key] = [_recipient(address) for address in addresses]


def _put_optional(body: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        body[key] = value


def _put_attachments(body: dict[str, Any], attachments: tuple[Attachment, ...]) -> None:
    if not attachments:
        return
    body["Attachments"] = [
        {
            "Filename": attachment.filename,
            "ContentType": attachment.content_type,
            "Base64Content": base64.b64encode(attachment.data).decode("ascii"),
        }
        for attachment in attachments
    ]


def _recipient(address: Address) -> dict[str, str | None]:
    name, email = _split_address(address)
    return {"Name": name or None, "Email": email}


def _split_address(address: Address) -> tuple[str | None, str]:
    if isinstance(address, str):
        return None, address
    name, email = address
    return name, email


# ── HTTP helpers ──────────────────────────────────────────────────────


def _base_uri(config: MailjetConfig) -> str:
    return (config.base_uri or DEFAULT_BASE_URI).rstrip("/")


def _headers(config: MailjetConfig) -> dict[str, str]:
    credentials = f"{config.api_key}:{config.api_private_key}".encode()
    return {
        "Content-Type": "application/json",
        "Authorization": "Basic " + base64.b64encode(credentials).decode("ascii"),
    }
