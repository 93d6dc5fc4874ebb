"""Customer domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_email, validate_required_text


class CustomerCreate(BaseModel):
    """Schema for registering a new customer"""

    name: str
    email: str
    phone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v, "name")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return validate_email(validate_required_text(v, "email"))


class CustomerUpdate(BaseModel):
    """Schema for updating contact fields of an existing customer

    Omitted fields are left untouched. Name and email may not be cleared;
    phone may be set to null.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v, "name")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return validate_email(validate_required_text(v, "email"))


class CustomerResponse(BaseModel):
    """Schema for customer response"""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_model(cls, customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            createdAt=customer.created_at,
            updatedAt=customer.updated_at,
        )


class PaginatedCustomers(BaseModel):
    items: list[CustomerResponse]
    total: int
    page: int
    limit: int
    totalPages: int
