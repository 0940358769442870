"""
Email notification infrastructure.
Handles email templates and SMTP delivery.
"""

from .email_service import EmailMessage, EmailNotificationService
from .template_loader import EmailTemplateLoader

__all__ = [
    "EmailMessage",
    "EmailNotificationService",
    "EmailTemplateLoader",
]
