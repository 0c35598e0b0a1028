"""Notification utilities - email."""

from src.portfolio.core.notifications.email import send_new_project_email

__all__ = ["send_new_project_email"]
