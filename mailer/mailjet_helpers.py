"""Setters for Mailjet-specific message features.

Every function returns a new ``EmailMessage``; the one passed in is left
untouched. Chain them before handing the message to ``MailjetAdapter``::

    message = put_var(template(message, "4242"), "name", "Arthur")
"""

from __future__ import annotations

import dataclasses
from typing import Any

from .types import EmailMessage


def template(message: EmailMessage, template_id: str | int) -> EmailMessage:
    """Set the template ID used for the email contents.

    This overrides any message body provided.
    """
    return _put(message, template_id=template_id)


def template_language(message: EmailMessage, active: bool) -> EmailMessage:
    """Turn interpretation of the Mailjet template language on or off."""
    return _put(message, template_language=active)


def put_var(message: EmailMessage, key: str, value: Any) -> EmailMessage:
    """Add a template variable. Repeated calls accumulate into one mapping."""
    variables = dict(message.mailjet.variables or {})
    variables[key] = value
    return _put(message, variables=variables)


def put_custom_id(message: EmailMessage, custom_id: str) -> EmailMessage:
    """Attach a custom ID, echoed back by Mailjet's event callbacks."""
    return _put(message, custom_id=custom_id)


def put_event_payload(message: EmailMessage, payload: str) -> EmailMessage:
    """Attach an event payload, echoed back by Mailjet's event callbacks."""
    return _put(message, event_payload=payload)


def put_monitoring_category(message: EmailMessage, category: str) -> EmailMessage:
    """Set the real-time monitoring category, used to alert on delivery failures."""
    return _put(message, monitoring_category=category)


def _put(message: EmailMessage, **changes: Any) -> EmailMessage:
    return dataclasses.replace(message, mailjet=dataclasses.replace(message.mailjet, **changes))
