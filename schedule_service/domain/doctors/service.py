"""Doctor service - Business logic for doctor operations"""

import logging

from sqlalchemy.orm import Session

from ...cache import DOCTORS, SCHEDULES, Cache
from ...errors import NotFoundError
from ...models import Doctor
from ..pagination import build_page_key, page_offset, paginate, validate_page_args
from .repository import DoctorRepository
from .schemas import DoctorCreate, DoctorResponse, DoctorUpdate, PaginatedDoctors

logger = logging.getLogger(__name__)


class DoctorService:
    """Service layer for doctor business logic"""

    def __init__(self, db: Session, cache: Cache):
        self.db = db
        self.cache = cache
        self.repo = DoctorRepository()

    def create(self, data: DoctorCreate) -> DoctorResponse:
        doctor = self.repo.create_doctor(
            self.db, name=data.name, specialization=data.specialization
        )
        logger.info(f"✅ Doctor created: {doctor.id}")

        self.cache.invalidate(DOCTORS)
        return DoctorResponse.from_model(doctor)

    def find_all(self, page: int = 1, limit: int = 10) -> PaginatedDoctors:
        page, limit = validate_page_args(page, limit)
        cache_key = build_page_key(DOCTORS, page, limit)

        cached = self.cache.get(cache_key)
        if cached is not None:
            return PaginatedDoctors.model_validate(cached)

        doctors = self.repo.get_doctors(self.db, page_offset(page, limit), limit)
        total = self.repo.count_doctors(self.db)
        result = PaginatedDoctors.model_validate(
            paginate([DoctorResponse.from_model(d) for d in doctors], total, page, limit)
        )

        self.cache.set(cache_key, result.model_dump(mode="json"))
        return result

    def get_doctor(self, doctor_id: str) -> Doctor:
        """Load the ORM row or raise NotFoundError"""
        doctor = self.repo.get_doctor_by_id(self.db, doctor_id)
        if not doctor:
            raise NotFoundError("Doctor")
        return doctor

    def find_one(self, doctor_id: str) -> DoctorResponse:
        return DoctorResponse.from_model(self.get_doctor(doctor_id))

    def update(self, doctor_id: str, data: DoctorUpdate) -> DoctorResponse:
        doctor = self.get_doctor(doctor_id)
        doctor = self.repo.update_doctor(self.db, doctor, **data.model_dump(exclude_unset=True))

        # Schedule listings embed doctor snapshots
        self.cache.invalidate(DOCTORS, SCHEDULES)
        return DoctorResponse.from_model(doctor)

    def remove(self, doctor_id: str) -> DoctorResponse:
        doctor = self.get_doctor(doctor_id)
        snapshot = DoctorResponse.from_model(doctor)

        self.repo.delete_doctor(self.db, doctor)
        logger.info(f"🗑️ Doctor deleted: {doctor_id}")

        self.cache.invalidate(DOCTORS, SCHEDULES)
        return snapshot
