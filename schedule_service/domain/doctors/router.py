"""Doctor router - FastAPI endpoints for doctor operations"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from .schemas import DoctorCreate, DoctorResponse, DoctorUpdate, PaginatedDoctors
from .service import DoctorService

router = APIRouter(prefix="/doctors", tags=["Doctors"], dependencies=[Depends(get_current_user)])


def get_doctor_service(request: Request, db: Session = Depends(get_db)) -> DoctorService:
    """Dependency injection for DoctorService"""
    return DoctorService(db, request.app.state.cache)


@router.post("", response_model=DoctorResponse)
async def create_doctor(
    data: DoctorCreate,
    service: DoctorService = Depends(get_doctor_service),
):
    return service.create(data)


@router.get("", response_model=PaginatedDoctors)
async def get_doctors(
    page: int = Query(1),
    limit: int = Query(10),
    service: DoctorService = Depends(get_doctor_service),
):
    """List doctors, newest first"""
    return service.find_all(page, limit)


@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(
    doctor_id: str,
    service: DoctorService = Depends(get_doctor_service),
):
    return service.find_one(doctor_id)


@router.patch("/{doctor_id}", response_model=DoctorResponse)
async def update_doctor(
    doctor_id: str,
    data: DoctorUpdate,
    service: DoctorService = Depends(get_doctor_service),
):
    return service.update(doctor_id, data)


@router.delete("/{doctor_id}", response_model=DoctorResponse)
async def delete_doctor(
    doctor_id: str,
    service: DoctorService = Depends(get_doctor_service),
):
    """Delete a doctor together with their schedules"""
    return service.remove(doctor_id)
