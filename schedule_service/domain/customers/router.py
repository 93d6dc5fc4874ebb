"""Customer router - FastAPI endpoints for customer operations"""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from ...auth import get_current_user
from ...database import get_db
from .schemas import CustomerCreate, CustomerResponse, CustomerUpdate, PaginatedCustomers
from .service import CustomerService

router = APIRouter(
    prefix="/customers", tags=["Customers"], dependencies=[Depends(get_current_user)]
)


def get_customer_service(request: Request, db: Session = Depends(get_db)) -> CustomerService:
    """Dependency injection for CustomerService"""
    return CustomerService(db, request.app.state.cache)


@router.post("", response_model=CustomerResponse)
async def create_customer(
    data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
):
    """Register a new customer"""
    return service.create(data)


@router.get("", response_model=PaginatedCustomers)
async def get_customers(
    page: int = Query(1),
    limit: int = Query(10),
    service: CustomerService = Depends(get_customer_service),
):
    """List customers, newest first"""
    return service.find_all(page, limit)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
):
    return service.find_one(customer_id)


@router.patch("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    return service.update(customer_id, data)


@router.delete("/{customer_id}", response_model=CustomerResponse)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
):
    """Delete a customer together with their schedules"""
    return service.remove(customer_id)
