"""
Email Service using SMTP (when configured) or Resend (fallback)
Templates are MJML, compiled to HTML before sending
"""

import logging
import smtplib
import ssl
from datetime import datetime, timezone
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Union

import resend
from mjml import mjml_to_html

from .config import RESEND_API_KEY, SMTP_FROM, SMTP_HOST, SMTP_PASS, SMTP_PORT, SMTP_USER
from .email_templates import schedule_notification_template

logger = logging.getLogger(__name__)

resend.api_key = RESEND_API_KEY


def compile_mjml_to_html(mjml_content: str) -> str:
    """Compile MJML template to production-ready HTML"""
    try:
        result = mjml_to_html(mjml_content)
        # Recent versions return an object with .html/.errors, older ones a dict
        if isinstance(result, dict):
            if result.get("errors"):
                logger.warning(f"MJML compilation warnings: {result['errors']}")
            return result.get("html", "")
        if hasattr(result, "html"):
            if getattr(result, "errors", None):
                logger.warning(f"MJML compilation warnings: {result.errors}")
            return result.html
        return str(result)
    except Exception as e:
        logger.error(f"MJML compilation error: {e}")
        raise Exception(f"Failed to compile MJML template: {str(e)}") from e


def send_via_smtp(to: list[str], subject: str, html_content: str, from_address: str) -> dict:
    """Send email through the configured SMTP server"""
    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = from_address
    msg["To"] = ", ".join(to)
    msg.attach(MIMEText(html_content, "html"))

    if SMTP_PORT == 465:
        context = ssl.create_default_context()
        server = smtplib.SMTP_SSL(SMTP_HOST, SMTP_PORT, context=context, timeout=30)
    else:
        server = smtplib.SMTP(SMTP_HOST, SMTP_PORT, timeout=30)
        server.starttls(context=ssl.create_default_context())

    try:
        if SMTP_USER:
            server.login(SMTP_USER, SMTP_PASS or "")
        server.sendmail(from_address.split("<")[-1].rstrip(">"), to, msg.as_string())
    finally:
        server.quit()

    logger.info(f"✅ SMTP email sent successfully via {SMTP_HOST}")
    return {"id": f"smtp-{datetime.now(timezone.utc).timestamp()}", "success": True}


async def send_email(to: Union[str, list[str]], subject: str, mjml_content: str) -> dict:
    """
    Send an email using SMTP (if configured) or Resend (fallback)

    Args:
        to: Recipient email(s)
        subject: Email subject line
        mjml_content: MJML template content (will be compiled to HTML)

    Returns:
        Send response dict

    Raises:
        Exception: when no transport is configured or delivery fails, so the
        worker can retry the job
    """
    html_content = compile_mjml_to_html(mjml_content)
    recipients = [to] if isinstance(to, str) else to

    if SMTP_HOST:
        try:
            logger.info(f"📧 Sending email via SMTP: {SMTP_HOST}")
            return send_via_smtp(recipients, subject, html_content, SMTP_FROM)
        except Exception as e:
            if not RESEND_API_KEY:
                logger.error(f"❌ SMTP send error to {recipients}: {e}")
                raise Exception(f"Failed to send email: {str(e)}") from e
            logger.warning(f"⚠️ SMTP failed, falling back to Resend: {e}")

    if not RESEND_API_KEY:
        logger.error("❌ No email service configured - SMTP_HOST and RESEND_API_KEY missing")
        raise Exception("Email service not configured")

    try:
        logger.info(f"📧 Sending email via Resend to: {recipients}")
        response = resend.Emails.send(
            {
                "from": SMTP_FROM,
                "to": recipients,
                "subject": subject,
                "html": html_content,
            }
        )
        logger.info(f"✅ Email sent successfully via Resend: {response}")
        return response
    except Exception as e:
        logger.error(f"❌ Email send error to {recipients}: {e}")
        raise Exception(f"Failed to send email: {str(e)}") from e


async def send_schedule_notification(job) -> dict:
    """Render and deliver one appointment notification"""
    subject, mjml_content = schedule_notification_template(job)
    return await send_email(to=job.recipientEmail, subject=subject, mjml_content=mjml_content)
