"""
Schedule service - booking rules and their side effects

Booking checks run in a fixed order: customer and doctor existence, then the
future-date rule, then an optimistic conflict pre-check. The pre-check only
fails fast; the unique (doctor_id, scheduled_at) constraint in the database is
what actually prevents double bookings, and a violation at persist time is
reported as the same ConflictError.

Side effects of a successful mutation are ordered: persist, invalidate the
schedule list caches, enqueue the notification.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...cache import SCHEDULES, Cache
from ...errors import ConflictError, NotFoundError, ValidationError
from ...models import Schedule, utcnow
from ...shared.validators import to_naive_utc
from ..customers.service import CustomerService
from ..doctors.service import DoctorService
from ..notifications.dispatcher import NotificationDispatcher
from ..notifications.schemas import NotificationJob
from ..pagination import build_args_key, page_offset, paginate, validate_page_args
from .repository import ScheduleRepository
from .schemas import PaginatedSchedules, ScheduleCreate, ScheduleResponse, SchedulesArgs

logger = logging.getLogger(__name__)

DOUBLE_BOOKED = "Doctor already has a schedule at this time"


def validate_future_date(scheduled_at: datetime, now: datetime) -> datetime:
    """Return scheduled_at as naive UTC, or raise unless it is strictly after now"""
    scheduled_at = to_naive_utc(scheduled_at)
    if scheduled_at <= to_naive_utc(now):
        raise ValidationError("Schedule must be in the future")
    return scheduled_at


class ScheduleService:
    """Service layer for booking and cancelling appointments"""

    def __init__(
        self,
        db: Session,
        cache: Cache,
        dispatcher: NotificationDispatcher,
        customers: Optional[CustomerService] = None,
        doctors: Optional[DoctorService] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.cache = cache
        self.dispatcher = dispatcher
        self.customers = customers or CustomerService(db, cache)
        self.doctors = doctors or DoctorService(db, cache)
        self.clock = clock
        self.repo = ScheduleRepository()

    async def create(self, data: ScheduleCreate) -> ScheduleResponse:
        """Book an appointment"""
        customer = self.customers.get_customer(data.customerId)
        doctor = self.doctors.get_doctor(data.doctorId)

        scheduled_at = validate_future_date(data.scheduledAt, self.clock())

        if self.repo.get_schedule_by_doctor_and_time(self.db, doctor.id, scheduled_at):
            raise ConflictError(DOUBLE_BOOKED)

        try:
            schedule = self.repo.create_schedule(
                self.db,
                objective=data.objective,
                customer_id=customer.id,
                doctor_id=doctor.id,
                scheduled_at=scheduled_at,
            )
        except IntegrityError as e:
            self.db.rollback()
            # A concurrent booking won the race between pre-check and insert
            if self.repo.get_schedule_by_doctor_and_time(self.db, doctor.id, scheduled_at):
                logger.info(f"⚔️ Lost booking race for doctor {doctor.id} at {scheduled_at}")
                raise ConflictError(DOUBLE_BOOKED) from e
            raise

        response = ScheduleResponse.from_model(schedule)
        logger.info(f"✅ Schedule created: {schedule.id} (doctor {doctor.id} at {scheduled_at})")

        self.cache.invalidate(SCHEDULES)

        # Rows fetched during validation; no second lookup
        await self.dispatcher.enqueue(
            NotificationJob(
                recipientName=customer.name,
                recipientEmail=customer.email,
                counterpartName=doctor.name,
                scheduledAt=schedule.scheduled_at,
                objective=schedule.objective,
                action="created",
            )
        )
        return response

    def find_all(self, args: SchedulesArgs) -> PaginatedSchedules:
        page, limit = validate_page_args(args.page, args.limit)
        cache_key = build_args_key(SCHEDULES, args.model_dump(mode="json"))

        cached = self.cache.get(cache_key)
        if cached is not None:
            return PaginatedSchedules.model_validate(cached)

        filters = {
            "customer_id": args.customerId,
            "doctor_id": args.doctorId,
            "start_date": to_naive_utc(args.startDate) if args.startDate else None,
            "end_date": to_naive_utc(args.endDate) if args.endDate else None,
        }
        schedules = self.repo.get_schedules(self.db, page_offset(page, limit), limit, **filters)
        total = self.repo.count_schedules(self.db, **filters)
        result = PaginatedSchedules.model_validate(
            paginate([ScheduleResponse.from_model(s) for s in schedules], total, page, limit)
        )

        self.cache.set(cache_key, result.model_dump(mode="json"))
        return result

    def get_schedule(self, schedule_id: str) -> Schedule:
        schedule = self.repo.get_schedule_by_id(self.db, schedule_id)
        if not schedule:
            raise NotFoundError("Schedule")
        return schedule

    def find_one(self, schedule_id: str) -> ScheduleResponse:
        """Single lookups always read the store"""
        return ScheduleResponse.from_model(self.get_schedule(schedule_id))

    async def remove(self, schedule_id: str) -> ScheduleResponse:
        """Cancel an appointment; the notification reflects it as it was booked"""
        schedule = self.get_schedule(schedule_id)
        snapshot = ScheduleResponse.from_model(schedule)

        self.repo.delete_schedule(self.db, schedule)
        logger.info(f"🗑️ Schedule cancelled: {schedule_id}")

        self.cache.invalidate(SCHEDULES)

        await self.dispatcher.enqueue(
            NotificationJob(
                recipientName=snapshot.customer.name,
                recipientEmail=snapshot.customer.email,
                counterpartName=snapshot.doctor.name,
                scheduledAt=snapshot.scheduledAt,
                objective=snapshot.objective,
                action="cancelled",
            )
        )
        return snapshot
