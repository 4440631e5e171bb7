"""AssetTrack — SMTP email client wrapper."""
import html
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from app.config import get_settings

logger = logging.getLogger(__name__)


def send_email(to_addresses: list[str], subject: str, body_html: str, body_text: str | None = None) -> bool:
    """Send an email via SMTP.

    Returns False when SMTP is not configured. Transport errors propagate so
    the calling task can retry.
    """
    settings = get_settings()
    if not settings.SMTP_HOST or not settings.SMTP_USER:
        logger.warning("SMTP not configured. Skipping email to %s", to_addresses)
        return False

    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = f"{settings.SMTP_FROM_NAME} <{settings.SMTP_USER}>"
    msg["To"] = ", ".join(to_addresses)
    if body_text:
        msg.attach(MIMEText(body_text, "plain"))
    msg.attach(MIMEText(body_html, "html"))

    with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT) as server:
        if settings.SMTP_USE_TLS:
            server.starttls()
        server.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
        server.sendmail(settings.SMTP_USER, to_addresses, msg.as_string())
    return True


def render_password_reset_email(full_name: str | None, reset_code: str, ttl_minutes: int) -> tuple[str, str]:
    """(html, text) bodies for the reset-code email."""
    name = html.escape(full_name or "there")
    code = html.escape(reset_code)
    body_html = f"""
    <html>
    <body style="font-family: Arial, sans-serif; margin: 0; padding: 20px; background: #f8fafc;">
      <div style="max-width: 560px; margin: auto; background: #ffffff; border-radius: 8px; padding: 24px;">
        <h2 style="color: #1e293b; margin-top: 0;">Password reset</h2>
        <p>Hello {name},</p>
        <p>Use the code below to reset your AssetTrack password:</p>
        <p style="font-size: 28px; letter-spacing: 6px; font-weight: bold; color: #2563eb;">{code}</p>
        <p>The code expires in {ttl_minutes} minutes. If you did not ask for a reset, ignore this email.</p>
      </div>
    </body>
    </html>
    """
    body_text = (
        f"Hello {full_name or 'there'},\n\n"
        f"Your AssetTrack password reset code is {reset_code}.\n"
        f"It expires in {ttl_minutes} minutes.\n"
    )
    return body_html, body_text
