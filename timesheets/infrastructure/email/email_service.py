"""
Email notification service.
Sends timesheet notifications over SMTP, or logs them when SMTP is not configured.
"""

import asyncio
import logging
import smtplib
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from email.mime.text import MIMEText
from typing import Any, Dict, List, Optional

from timesheets.config import Settings
from timesheets.domain.models.employee import Employee
from timesheets.domain.models.value_objects import WeekRange
from timesheets.domain.services.notification_service import NotificationService
from .template_loader import EmailTemplateLoader


logger = logging.getLogger(__name__)


@dataclass
class EmailMessage:
    """Email message data."""
    to: str
    subject: str
    template: str
    context: Dict[str, Any]


class EmailNotificationService(NotificationService):
    """
    NotificationService backed by SMTP.
    Without SMTP settings, or with notifications disabled, messages are only logged.
    """

    def __init__(self, settings: Settings, template_loader: Optional[EmailTemplateLoader] = None):
        self.enabled = settings.notifications_enabled
        self.smtp_host = settings.smtp_host
        self.smtp_port = settings.smtp_port
        self.smtp_user = settings.smtp_user
        self.smtp_password = settings.smtp_password
        self.from_name = settings.email_from_name
        self.from_address = settings.email_from_address
        self.template_loader = template_loader or EmailTemplateLoader()
        self.sent_emails: List[Dict[str, Any]] = []  # For tracking in development

    async def notify_timesheet_submitted(
        self,
        employee: Employee,
        week: WeekRange,
        total_hours: Decimal
    ) -> bool:
        return await self.send_email(EmailMessage(
            to=employee.email,
            subject=f"Timesheet submitted for week of {week.first_day.isoformat()}",
            template="timesheet_submitted",
            context={
                "employee": employee,
                "week_start": week.first_day.isoformat(),
                "week_end": week.last_day.isoformat(),
                "total_hours": total_hours
            }
        ))

    async def notify_timesheet_reviewed(
        self,
        employee: Employee,
        week: WeekRange,
        status: str,
        reason: Optional[str] = None
    ) -> bool:
        return await self.send_email(EmailMessage(
            to=employee.email,
            subject=f"Timesheet {status} for week of {week.first_day.isoformat()}",
            template="timesheet_reviewed",
            context={
                "employee": employee,
                "week_start": week.first_day.isoformat(),
                "week_end": week.last_day.isoformat(),
                "status": status,
                "reason": reason
            }
        ))

    async def send_email(self, message: EmailMessage) -> bool:
        """
        Render and send an email message.
        Returns False instead of raising when delivery fails.
        """
        try:
            body = self.template_loader.render(message.template, message.context)

            if not self.enabled or not self._is_smtp_configured():
                logger.warning("SMTP not configured or notifications disabled, email will be logged instead")
                return self._log_email(message, body)

            mime_message = self._create_mime_message(message, body)
            loop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._send_via_smtp, mime_message, message.to)

            logger.info(f"Email sent successfully to {message.to}: {message.subject}")
            return True

        except Exception as e:
            logger.error(f"Failed to send email to {message.to}: {str(e)}")
            return False

    def _create_mime_message(self, message: EmailMessage, body: str) -> MIMEText:
        """Create MIME message from email data."""
        mime_msg = MIMEText(body, "plain", "utf-8")
        mime_msg["Subject"] = message.subject
        mime_msg["From"] = f"{self.from_name} <{self.from_address}>"
        mime_msg["To"] = message.to
        return mime_msg

    def _send_via_smtp(self, mime_message: MIMEText, recipient: str) -> None:
        """Blocking SMTP delivery; run in an executor."""
        with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
            server.starttls()
            if self.smtp_user and self.smtp_password:
                server.login(self.smtp_user, self.smtp_password)
            server.send_message(mime_message, to_addrs=[recipient])

    def _log_email(self, message: EmailMessage, body: str) -> bool:
        """Log email instead of sending (for development)."""
        self.sent_emails.append({
            "timestamp": datetime.now().isoformat(),
            "to": message.to,
            "subject": message.subject,
            "template": message.template,
            "body": body
        })
        logger.info(f"Email logged (not sent): {message.subject} to {message.to}")
        return True

    def _is_smtp_configured(self) -> bool:
        return bool(self.smtp_host)

    def get_sent_emails(self) -> List[Dict[str, Any]]:
        """Get list of logged emails (for development/testing)."""
        return self.sent_emails.copy()

