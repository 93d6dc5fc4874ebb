"""Schedule router - FastAPI endpoints for booking operations"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from .schemas import PaginatedSchedules, ScheduleCreate, ScheduleResponse, SchedulesArgs
from .service import ScheduleService

router = APIRouter(
    prefix="/schedules", tags=["Schedules"], dependencies=[Depends(get_current_user)]
)


def get_schedule_service(request: Request, db: Session = Depends(get_db)) -> ScheduleService:
    """Dependency injection for ScheduleService"""
    return ScheduleService(db, request.app.state.cache, request.app.state.dispatcher)


@router.post("", response_model=ScheduleResponse)
async def create_schedule(
    data: ScheduleCreate,
    service: ScheduleService = Depends(get_schedule_service),
):
    """Book an appointment; the confirmation email is sent in the background"""
    return await service.create(data)


@router.get("", response_model=PaginatedSchedules)
async def get_schedules(
    page: int = Query(1),
    limit: int = Query(10),
    customerId: Optional[str] = Query(None),
    doctorId: Optional[str] = Query(None),
    startDate: Optional[datetime] = Query(None),
    endDate: Optional[datetime] = Query(None),
    service: ScheduleService = Depends(get_schedule_service),
):
    """List schedules in chronological order with optional filters"""
    args = SchedulesArgs(
        page=page,
        limit=limit,
        customerId=customerId,
        doctorId=doctorId,
        startDate=startDate,
        endDate=endDate,
    )
    return service.find_all(args)


@router.get("/{schedule_id}", response_model=ScheduleResponse)
async def get_schedule(
    schedule_id: str,
    service: ScheduleService = Depends(get_schedule_service),
):
    return service.find_one(schedule_id)


@router.delete("/{schedule_id}", response_model=ScheduleResponse)
async def cancel_schedule(
    schedule_id: str,
    service: ScheduleService = Depends(get_schedule_service),
):
    """Cancel an appointment and notify the customer"""
    return await service.remove(schedule_id)
