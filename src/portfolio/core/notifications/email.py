"""Email client using Resend API."""

import html
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

import resend

from src.portfolio.core.config import get_settings
from src.portfolio.core.logging import get_logger
from src.portfolio.models.lead import Lead

logger = get_logger(__name__)

# Thread pool for email sending with timeout support
_email_executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="email_sender")

# Shared email styles
_BODY_STYLE = (
    "font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; "
    "line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;"
)
_LABEL_STYLE = "color: #666; font-size: 14px; margin-bottom: 4px;"
_MUTED_STYLE = "color: #666; font-size: 14px;"


def send_new_project_email(to: str, lead: Lead) -> bool:
    """Notify the operator that a project was created.

    Args:
        to: Recipient email address (the configured operator inbox)
        lead: Summary of the new project

    Returns:
        True if email was sent (or logged in dev mode), False on error
    """
    settings = get_settings()

    if not settings.resend_api_key:
        # Dev mode: log email content instead of sending
        logger.warning(
            "RESEND_API_KEY not set - email not sent",
            to=to,
            email_type="new_project",
            slug=lead.slug,
        )
        return True

    resend.api_key = settings.resend_api_key

    def _send() -> None:
        resend.Emails.send(
            {
                "from": settings.email_from,
                "to": [to],
                "subject": f"New project: {lead.title}",
                "html": _get_new_project_email_html(lead, settings.app_name),
            }
        )

    try:
        # Use thread pool with timeout to prevent hanging on slow API responses
        future = _email_executor.submit(_send)
        future.result(timeout=settings.email_send_timeout_seconds)
        logger.info("New project email sent", to=to, slug=lead.slug)
        return True
    except FuturesTimeoutError:
        logger.error("Email send timed out", to=to, timeout=settings.email_send_timeout_seconds)
        return False
    except Exception as e:
        logger.error("Failed to send new project email", to=to, error=str(e))
        return False


def _get_new_project_email_html(lead: Lead, app_name: str) -> str:
    """Generate HTML content for the new project email."""
    safe_title = html.escape(lead.title)
    safe_slug = html.escape(lead.slug)
    safe_description = html.escape(lead.description or "").replace("\n", "<br>")
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="{_BODY_STYLE}">
    <h1 style="color: #2563eb; margin-bottom: 24px;">New project created</h1>
    <p style="{_LABEL_STYLE}">Title</p>
    <p><strong>{safe_title}</strong></p>
    <p style="{_LABEL_STYLE}">Slug</p>
    <p><code>{safe_slug}</code></p>
    <p style="{_LABEL_STYLE}">Description</p>
    <p>{safe_description or "<em>No description</em>"}</p>
    <p style="{_MUTED_STYLE} margin-top: 32px;">
        Sent by {html.escape(app_name)}.
    </p>
</body>
</html>"""
