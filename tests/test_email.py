"""Tests for notification templates and email transport selection"""

from datetime import datetime
from unittest.mock import MagicMock, patch

import pytest

from schedule_service import email_service
from schedule_service.domain.notifications.schemas import NotificationJob
from schedule_service.email_templates import (
    SUBJECT_CANCELLED,
    SUBJECT_CONFIRMED,
    format_appointment_time,
    schedule_notification_template,
)


def make_job(action, name="Ana Souza"):
    return NotificationJob(
        recipientName=name,
        recipientEmail="ana@example.com",
        counterpartName="Dr. Carlos Lima",
        scheduledAt=datetime(2031, 3, 4, 14, 30),
        objective="Annual checkup",
        action=action,
    )


class TestNotificationTemplates:
    def test_created_is_a_confirmation(self):
        subject, body = schedule_notification_template(make_job("created"))

        assert subject == SUBJECT_CONFIRMED == "Appointment Confirmed"
        assert "Dr. Carlos Lima" in body
        assert "Annual checkup" in body
        assert "confirmed" in body

    @pytest.mark.parametrize("action", ["cancelled", "deleted"])
    def test_cancellation_subject(self, action):
        subject, body = schedule_notification_template(make_job(action))

        assert subject == SUBJECT_CANCELLED == "Appointment Cancelled"
        assert "cancelled" in body

    def test_names_are_escaped(self):
        _, body = schedule_notification_template(make_job("created", name="<b>Ana</b>"))

        assert "&lt;b&gt;Ana&lt;/b&gt;" in body
        assert "<b>Ana</b>" not in body

    def test_time_format(self):
        assert format_appointment_time(datetime(2031, 3, 4, 14, 30)) == (
            "Tuesday, March 04, 2031 at 02:30 PM"
        )


class TestSendEmail:
    async def test_no_transport_configured_raises(self):
        with patch.object(email_service, "SMTP_HOST", None), patch.object(
            email_service, "RESEND_API_KEY", None
        ), patch.object(email_service, "compile_mjml_to_html", return_value="<html></html>"):
            with pytest.raises(Exception, match="not configured"):
                await email_service.send_email("ana@example.com", "Hi", "<mjml></mjml>")

    async def test_smtp_used_when_configured(self):
        with patch.object(email_service, "SMTP_HOST", "smtp.example.com"), patch.object(
            email_service, "compile_mjml_to_html", return_value="<html></html>"
        ), patch.object(
            email_service, "send_via_smtp", return_value={"success": True}
        ) as smtp:
            result = await email_service.send_email("ana@example.com", "Hi", "<mjml></mjml>")

        assert result == {"success": True}
        assert smtp.call_args.args[0] == ["ana@example.com"]

    async def test_resend_fallback_when_smtp_fails(self):
        resend_send = MagicMock(return_value={"id": "re_123"})

        with patch.object(email_service, "SMTP_HOST", "smtp.example.com"), patch.object(
            email_service, "RESEND_API_KEY", "re_test"
        ), patch.object(
            email_service, "compile_mjml_to_html", return_value="<html></html>"
        ), patch.object(
            email_service, "send_via_smtp", side_effect=OSError("connection refused")
        ), patch.object(email_service.resend.Emails, "send", resend_send):
            result = await email_service.send_email("ana@example.com", "Hi", "<mjml></mjml>")

        assert result == {"id": "re_123"}
        assert resend_send.call_args.args[0]["to"] == ["ana@example.com"]

    async def test_schedule_notification_uses_job_subject(self):
        with patch.object(email_service, "send_email", return_value={"id": "x"}) as send:
            await email_service.send_schedule_notification(make_job("cancelled"))

        assert send.call_args.kwargs["subject"] == SUBJECT_CANCELLED
        assert send.call_args.kwargs["to"] == "ana@example.com"
