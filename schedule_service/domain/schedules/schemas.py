"""Schedule domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from ...shared.validators import validate_required_text, validate_uuid_field
from ..customers.schemas import CustomerResponse
from ..doctors.schemas import DoctorResponse


class ScheduleCreate(BaseModel):
    """Schema for booking an appointment"""

    objective: str
    customerId: str
    doctorId: str
    scheduledAt: datetime

    @field_validator("objective")
    @classmethod
    def check_objective(cls, v):
        return validate_required_text(v, "objective")

    @field_validator("customerId", "doctorId")
    @classmethod
    def check_ids(cls, v, info):
        return validate_uuid_field(v, info.field_name)


class SchedulesArgs(BaseModel):
    """Listing arguments; field order is part of the cache key format"""

    page: int = 1
    limit: int = 10
    customerId: Optional[str] = None
    doctorId: Optional[str] = None
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None

    @field_validator("customerId", "doctorId")
    @classmethod
    def check_ids(cls, v, info):
        return validate_uuid_field(v, info.field_name)


class ScheduleResponse(BaseModel):
    id: str
    objective: str
    customerId: str
    doctorId: str
    scheduledAt: datetime
    createdAt: datetime
    updatedAt: datetime
    customer: CustomerResponse
    doctor: DoctorResponse

    @classmethod
    def from_model(cls, schedule) -> "ScheduleResponse":
        return cls(
            id=schedule.id,
            objective=schedule.objective,
            customerId=schedule.customer_id,
            doctorId=schedule.doctor_id,
            scheduledAt=schedule.scheduled_at,
            createdAt=schedule.created_at,
            updatedAt=schedule.updated_at,
            customer=CustomerResponse.from_model(schedule.customer),
            doctor=DoctorResponse.from_model(schedule.doctor),
        )


class PaginatedSchedules(BaseModel):
    items: list[ScheduleResponse]
    total: int
    page: int
    limit: int
    totalPages: int
