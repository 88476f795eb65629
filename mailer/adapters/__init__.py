"""Email delivery adapters."""

from .base import EmailAdapter
from .mailjet import MailjetAdapter, build_body

__all__ = ["EmailAdapter", "MailjetAdapter", "build_body"]
