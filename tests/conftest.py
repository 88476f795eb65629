"""Shared test fixtures for the mailer library."""

import pytest

from mailer import EmailMessage, MailjetConfig, TestAdapter


@pytest.fixture
def mailjet_config() -> MailjetConfig:
    return MailjetConfig(
        api_key="123_abc",
        api_private_key="321_cba",
        base_uri="http://mailjet.test/v3.1",
    )


@pytest.fixture
def email() -> EmailMessage:
    return EmailMessage(
        from_email=("John", "me@example.com"),
        to=["user@example.com"],
        subject="Hi",
        html_body="<b>hi</b>",
    )


@pytest.fixture
def recording_adapter() -> TestAdapter:
    return TestAdapter()
