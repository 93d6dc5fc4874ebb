"""Doctor domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_required_text


class DoctorCreate(BaseModel):
    """Schema for creating a new doctor"""

    name: str
    specialization: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v, "name")


class DoctorUpdate(BaseModel):
    """Schema for updating an existing doctor; omitted fields are left untouched"""

    name: Optional[str] = None
    specialization: Optional[str] = None

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return validate_required_text(v, "name")


class DoctorResponse(BaseModel):
    id: str
    name: str
    specialization: Optional[str] = None
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_model(cls, doctor) -> "DoctorResponse":
        return cls(
            id=doctor.id,
            name=doctor.name,
            specialization=doctor.specialization,
            createdAt=doctor.created_at,
            updatedAt=doctor.updated_at,
        )


class PaginatedDoctors(BaseModel):
    items: list[DoctorResponse]
    total: int
    page: int
    limit: int
    totalPages: int
