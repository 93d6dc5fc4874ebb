"""
MJML Email Templates
Appointment notification templates, compiled to HTML by email_service
"""

from html import escape
from typing import Optional

# Healthcare green color scheme
THEME = {
    "primary": "#4CAF50",
    "background": "#f9f9f9",
    "card_bg": "#ffffff",
    "text_secondary": "#333333",
    "text_muted": "#777777",
    "border": "#dddddd",
    "danger": "#e53935",
}

SUBJECT_CONFIRMED = "Appointment Confirmed"
SUBJECT_CANCELLED = "Appointment Cancelled"


def get_base_template(
    title: str,
    preview_text: str,
    content_sections: str,
    accent_color: Optional[str] = None,
) -> str:
    """Base MJML template wrapper for all emails"""
    accent = accent_color or THEME["primary"]

    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="Arial, sans-serif" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['background']}">
        <!-- Header -->
        <mj-section background-color="{accent}" padding="20px" border-radius="5px 5px 0 0">
          <mj-column>
            <mj-text align="center" font-size="26px" font-weight="600" color="#ffffff">
              {title}
            </mj-text>
          </mj-column>
        </mj-section>

        <!-- Main Content -->
        <mj-section background-color="{THEME['card_bg']}" padding="30px" border="1px solid {THEME['border']}">
          <mj-column>
            {content_sections}
          </mj-column>
        </mj-section>

        <!-- Footer -->
        <mj-section padding="20px">
          <mj-column>
            <mj-text align="center" font-size="12px" color="{THEME['text_muted']}">
              This is an automated message. Please do not reply to this email.
            </mj-text>
            <mj-text align="center" font-size="12px" color="{THEME['text_muted']}" padding="0">
              © Healthcare Scheduling System. All rights reserved.
            </mj-text>
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def format_appointment_time(scheduled_at) -> str:
    """e.g. 'Tuesday, October 20, 2026 at 09:30 AM'"""
    return scheduled_at.strftime("%A, %B %d, %Y at %I:%M %p")


def appointment_details_section(doctor_name: str, objective: str, when: str, accent: str) -> str:
    return f"""
    <mj-text padding="15px" container-background-color="#ffffff" css-class="info-box">
      <div style="border-left: 4px solid {accent}; padding-left: 15px;">
        <h3 style="margin: 0 0 8px 0;">Appointment Details:</h3>
        <p style="margin: 4px 0;"><strong>Doctor:</strong> {doctor_name}</p>
        <p style="margin: 4px 0;"><strong>Purpose:</strong> {objective}</p>
        <p style="margin: 4px 0;"><strong>Date &amp; Time:</strong> {when}</p>
      </div>
    </mj-text>
    """


def schedule_confirmed_template(
    customer_name: str, doctor_name: str, objective: str, scheduled_at
) -> str:
    """Appointment booked - sent to the customer"""
    customer_name = escape(customer_name)
    when = format_appointment_time(scheduled_at)

    content = f"""
    <mj-text>Dear {customer_name},</mj-text>
    <mj-text>Your appointment has been <strong>confirmed</strong>.</mj-text>
    {appointment_details_section(escape(doctor_name), escape(objective), when, THEME['primary'])}
    <mj-text>Please arrive 10 minutes early to complete any necessary paperwork.</mj-text>
    <mj-text>
      If you need to reschedule or cancel, please contact us at least 24 hours in advance.
    </mj-text>
    """

    return get_base_template(
        title=SUBJECT_CONFIRMED,
        preview_text=f"Your appointment on {when} is confirmed",
        content_sections=content,
    )


def schedule_cancelled_template(
    customer_name: str, doctor_name: str, objective: str, scheduled_at
) -> str:
    """Appointment cancelled - sent to the customer"""
    customer_name = escape(customer_name)
    when = format_appointment_time(scheduled_at)

    content = f"""
    <mj-text>Dear {customer_name},</mj-text>
    <mj-text>Your appointment has been <strong>cancelled</strong>.</mj-text>
    {appointment_details_section(escape(doctor_name), escape(objective), when, THEME['danger'])}
    <mj-text>
      If this cancellation was made in error, please contact us immediately to reschedule.
    </mj-text>
    """

    return get_base_template(
        title=SUBJECT_CANCELLED,
        preview_text=f"Your appointment on {when} was cancelled",
        content_sections=content,
        accent_color=THEME["danger"],
    )


def schedule_notification_template(job) -> tuple[str, str]:
    """Pick subject and body from the job's action; returns (subject, mjml)"""
    if job.is_cancellation:
        return SUBJECT_CANCELLED, schedule_cancelled_template(
            job.recipientName, job.counterpartName, job.objective, job.scheduledAt
        )
    return SUBJECT_CONFIRMED, schedule_confirmed_template(
        job.recipientName, job.counterpartName, job.objective, job.scheduledAt
    )
