"""Shared validation utilities"""

import re
import uuid
from datetime import datetime, timezone
from typing import Optional


def validate_uuid(value: str) -> bool:
    """Validate UUID format"""
    try:
        uuid.UUID(value)
        return True
    except (ValueError, AttributeError, TypeError):
        return False


def validate_uuid_field(value: Optional[str], field_name: str) -> Optional[str]:
    """Pydantic-friendly wrapper: raise ValueError unless value is a UUID"""
    if value is None:
        return value
    if not validate_uuid(value):
        raise ValueError(f"{field_name} must be a UUID")
    return value


def validate_required_text(value: Optional[str], field_name: str) -> str:
    """Strip surrounding whitespace and reject empty strings"""
    if value is None or not value.strip():
        raise ValueError(f"{field_name} must not be empty")
    return value.strip()


def validate_email(email: Optional[str]) -> Optional[str]:
    """
    Validate email format.

    Args:
        email: Email address string

    Returns:
        Lowercase email address

    Raises:
        ValueError: If email format is invalid
    """
    if not email:
        return email

    email = email.strip().lower()

    # Basic email validation pattern
    email_pattern = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"

    if not re.match(email_pattern, email):
        raise ValueError("Invalid email format")

    return email


def to_naive_utc(value: datetime) -> datetime:
    """Convert aware datetimes to naive UTC; naive values are taken as UTC already"""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
