"""Tests for the new-project notification email."""

from unittest.mock import patch

import pytest

from src.portfolio.core.config import Settings
from src.portfolio.core.notifications import email
from src.portfolio.models import Lead

pytestmark = pytest.mark.unit


@pytest.fixture
def lead() -> Lead:
    return Lead(title="Hello <World>", description="Line one\nLine two", slug="hello-world")


@pytest.fixture
def resend_configured(monkeypatch: pytest.MonkeyPatch) -> Settings:
    settings = Settings(resend_api_key="re_test_key", email_from="noreply@example.com")
    monkeypatch.setattr(email, "get_settings", lambda: settings)
    return settings


def test_without_api_key_logs_and_reports_success(monkeypatch, lead):
    monkeypatch.setattr(email, "get_settings", lambda: Settings(resend_api_key=None))

    with patch.object(email.resend.Emails, "send") as mock_send:
        assert email.send_new_project_email("ops@example.com", lead) is True

    mock_send.assert_not_called()


def test_sends_through_resend(resend_configured, lead):
    with patch.object(email.resend.Emails, "send") as mock_send:
        assert email.send_new_project_email("ops@example.com", lead) is True

    payload = mock_send.call_args[0][0]
    assert payload["to"] == ["ops@example.com"]
    assert payload["from"] == "noreply@example.com"
    assert payload["subject"] == "New project: Hello <World>"
    assert "hello-world" in payload["html"]


def test_send_failure_reports_false(resend_configured, lead):
    with patch.object(email.resend.Emails, "send", side_effect=RuntimeError("API down")):
        assert email.send_new_project_email("ops@example.com", lead) is False


def test_html_escapes_lead_fields(lead):
    html = email._get_new_project_email_html(lead, "Portfolio Admin")

    assert "Hello &lt;World&gt;" in html
    assert "<World>" not in html
    assert "Line one<br>Line two" in html


def test_html_marks_missing_description():
    html = email._get_new_project_email_html(
        Lead(title="T", description="", slug="t"), "Portfolio Admin"
    )

    assert "No description" in html
