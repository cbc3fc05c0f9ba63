# core/emailer.py
import smtplib
from email.mime.text import MIMEText

from .config import Settings
from .errors import EmailSendError
from .logger import get_logger
from .report_html import EMAIL_SUBJECT

logger = get_logger(__name__)

SMTP_HOST = "smtp.gmail.com"
SMTP_PORT = 587


def build_message(settings: Settings, html_body: str, subject: str = EMAIL_SUBJECT) -> MIMEText:
    msg = MIMEText(html_body, "html", "utf-8")
    msg["From"] = settings.from_gmail
    msg["To"] = settings.recipient_email
    msg["Subject"] = subject
    return msg


def send_email(settings: Settings, html_body: str, subject: str = EMAIL_SUBJECT) -> None:
    """
    Send one HTML email to the configured recipient through the Gmail relay.
    Any SMTP or socket failure raises EmailSendError.
    """
    msg = build_message(settings, html_body, subject)
    recipients = [settings.recipient_email]

    try:
        with smtplib.SMTP(SMTP_HOST, SMTP_PORT) as server:
            server.starttls()
            server.login(settings.from_gmail, settings.from_gmail_app_password)
            server.sendmail(settings.from_gmail, recipients, msg.as_string())
    except (smtplib.SMTPException, OSError) as e:
        raise EmailSendError(f"smtp error: {e}") from e

    logger.info("Email sent to %s: %s", settings.recipient_email, subject)
