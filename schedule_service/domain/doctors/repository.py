"""Doctor repository - Database operations for doctors"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Doctor


class DoctorRepository:
    """Repository for doctor database operations"""

    @staticmethod
    def get_doctors(db: Session, skip: int, limit: int) -> list[Doctor]:
        """Get one page of doctors, newest first"""
        return (
            db.query(Doctor)
            .order_by(Doctor.created_at.desc(), Doctor.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    @staticmethod
    def count_doctors(db: Session) -> int:
        return db.query(func.count(Doctor.id)).scalar()

    @staticmethod
    def get_doctor_by_id(db: Session, doctor_id: str) -> Optional[Doctor]:
        return db.query(Doctor).filter(Doctor.id == doctor_id).first()

    @staticmethod
    def create_doctor(db: Session, **doctor_data) -> Doctor:
        doctor = Doctor(**doctor_data)
        db.add(doctor)
        db.commit()
        db.refresh(doctor)
        return doctor

    @staticmethod
    def update_doctor(db: Session, doctor: Doctor, **updates) -> Doctor:
        """Apply the given fields; a None value clears a nullable column"""
        for key, value in updates.items():
            if hasattr(doctor, key):
                setattr(doctor, key, value)

        db.commit()
        db.refresh(doctor)
        return doctor

    @staticmethod
    def delete_doctor(db: Session, doctor: Doctor) -> None:
        db.delete(doctor)
        db.commit()
