"""Core types for the mailer library."""

from __future__ import annotations

import mimetypes
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

# A bare address ("user@example.com") or a (name, address) pair.
Address = Union[str, tuple[Union[str, None], str]]


# ── Message types ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Attachment:
    """A file attached to an email."""

    filename: str
    content_type: str
    data: bytes

    @classmethod
    def from_path(cls, path: str | Path, content_type: str | None = None) -> Attachment:
        """Read an attachment from disk, guessing the content type from its name."""
        path = Path(path)
        if content_type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            content_type = guessed or "application/octet-stream"
        return cls(filename=path.name, content_type=content_type, data=path.read_bytes())


@dataclass(frozen=True, slots=True)
class MailjetExtension:
    """Mailjet-specific data carried alongside a message.

    Populated through the setters in ``mailer.mailjet_helpers``.
    """

    template_id: str | int | None = None
    template_language: bool | None = None
    variables: Mapping[str, Any] | None = None
    custom_id: str | None = None
    event_payload: str | None = None
    monitoring_category: str | None = None


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """A provider-agnostic email."""

    from_email: Address
    to: tuple[Address, ...] = ()
    cc: tuple[Address, ...] = ()
    bcc: tuple[Address, ...] = ()
    subject: str | None = None
    html_body: str | None = None
    text_body: str | None = None
    attachments: tuple[Attachment, ...] = ()
    headers: Mapping[str, str] = field(default_factory=dict)
    mailjet: MailjetExtension = field(default_factory=MailjetExtension)

    def __post_init__(self) -> None:
        # Accept lists (or one bare address string) from callers but store tuples.
        for name in ("to", "cc", "bcc"):
            value = getattr(self, name)
            if isinstance(value, str):
                value = (value,)
            object.__setattr__(self, name, tuple(value))
        object.__setattr__(self, "attachments", tuple(self.attachments))


# ── Provider configuration ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MailjetConfig:
    """Configuration for the Mailjet adapter."""

    api_key: str | None
    api_private_key: str | None = field(default=None, repr=False)
    base_uri: str | None = None  # Defaults to the public v3.1 endpoint

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> MailjetConfig:
        """Build a config from a plain mapping such as a settings dict."""
        return cls(
            api_key=config.get("api_key"),
            api_private_key=config.get("api_private_key"),
            base_uri=config.get("base_uri"),
        )


# ── Results ───────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ProviderResponse:
    """Raw response from the provider, returned verbatim on success."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status_code <= 299
