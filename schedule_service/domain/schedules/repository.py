"""Schedule repository - Database operations for schedules"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, joinedload

from ...models import Schedule


class ScheduleRepository:
    """Repository for schedule database operations"""

    @staticmethod
    def _filtered(
        query: Query,
        customer_id: Optional[str] = None,
        doctor_id: Optional[str] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> Query:
        if customer_id:
            query = query.filter(Schedule.customer_id == customer_id)

        if doctor_id:
            query = query.filter(Schedule.doctor_id == doctor_id)

        # Both bounds are inclusive
        if start_date:
            query = query.filter(Schedule.scheduled_at >= start_date)

        if end_date:
            query = query.filter(Schedule.scheduled_at <= end_date)

        return query

    @staticmethod
    def get_schedules(db: Session, skip: int, limit: int, **filters) -> list[Schedule]:
        """Get one page of schedules in chronological order"""
        query = db.query(Schedule).options(
            joinedload(Schedule.customer), joinedload(Schedule.doctor)
        )
        return (
            ScheduleRepository._filtered(query, **filters)
            .order_by(Schedule.scheduled_at.asc(), Schedule.id.asc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    @staticmethod
    def count_schedules(db: Session, **filters) -> int:
        query = db.query(func.count(Schedule.id))
        return ScheduleRepository._filtered(query, **filters).scalar()

    @staticmethod
    def get_schedule_by_id(db: Session, schedule_id: str) -> Optional[Schedule]:
        return (
            db.query(Schedule)
            .options(joinedload(Schedule.customer), joinedload(Schedule.doctor))
            .filter(Schedule.id == schedule_id)
            .first()
        )

    @staticmethod
    def get_schedule_by_doctor_and_time(
        db: Session, doctor_id: str, scheduled_at: datetime
    ) -> Optional[Schedule]:
        """Existing booking for a doctor at an exact instant, if any"""
        return (
            db.query(Schedule)
            .filter(Schedule.doctor_id == doctor_id, Schedule.scheduled_at == scheduled_at)
            .first()
        )

    @staticmethod
    def create_schedule(db: Session, **schedule_data) -> Schedule:
        schedule = Schedule(**schedule_data)
        db.add(schedule)
        db.commit()
        db.refresh(schedule)
        return schedule

    @staticmethod
    def delete_schedule(db: Session, schedule: Schedule) -> None:
        db.delete(schedule)
        db.commit()
