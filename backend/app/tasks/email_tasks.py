"""AssetTrack — Email Celery tasks."""
import logging
import smtplib

from app.config import get_settings
from app.core.email import render_password_reset_email, send_email
from app.worker import celery_app

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, max_retries=3)
def send_password_reset_email(self, email: str, reset_code: str, full_name: str | None = None) -> bool:
    """Mail a password reset code. Retries with backoff on SMTP errors."""
    ttl = get_settings().PASSWORD_RESET_TOKEN_TTL_MINUTES
    body_html, body_text = render_password_reset_email(full_name, reset_code, ttl)
    try:
        sent = send_email([email], "AssetTrack password reset", body_html, body_text)
    except (smtplib.SMTPException, OSError) as exc:
        delay = (2 ** self.request.retries) * 5
        logger.warning("Reset email to %s failed, retrying in %ss: %s", email, delay, exc)
        raise self.retry(exc=exc, countdown=delay)
    if sent:
        logger.info("Password reset email sent to %s", email)
    return sent
