import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from .database import Base


def generate_public_id():
    """Generate a unique public ID for every entity"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Current time as naive UTC, the form every timestamp is stored in"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=generate_public_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    schedules = relationship(
        "Schedule", back_populates="customer", cascade="all, delete-orphan"
    )


class Doctor(Base):
    __tablename__ = "doctors"

    id = Column(String(36), primary_key=True, default=generate_public_id)
    name = Column(String(255), nullable=False)
    specialization = Column(String(255), nullable=True)  # e.g. cardiology, general practice
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    schedules = relationship(
        "Schedule", back_populates="doctor", cascade="all, delete-orphan"
    )


class Schedule(Base):
    __tablename__ = "schedules"
    # The database is the only authority on double bookings
    __table_args__ = (
        UniqueConstraint("doctor_id", "scheduled_at", name="uq_schedules_doctor_scheduled_at"),
    )

    id = Column(String(36), primary_key=True, default=generate_public_id)
    objective = Column(Text, nullable=False)
    customer_id = Column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    doctor_id = Column(
        String(36), ForeignKey("doctors.id", ondelete="CASCADE"), nullable=False, index=True
    )
    scheduled_at = Column(DateTime, nullable=False, index=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    customer = relationship("Customer", back_populates="schedules")
    doctor = relationship("Doctor", back_populates="schedules")
