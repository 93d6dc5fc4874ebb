"""Customer service - Business logic for customer operations"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...cache import CUSTOMERS, SCHEDULES, Cache
from ...errors import ConflictError, NotFoundError
from ...models import Customer
from ..pagination import build_page_key, page_offset, paginate, validate_page_args
from .repository import CustomerRepository
from .schemas import CustomerCreate, CustomerResponse, CustomerUpdate, PaginatedCustomers

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already exists"


class CustomerService:
    """Service layer for customer business logic"""

    def __init__(self, db: Session, cache: Cache):
        self.db = db
        self.cache = cache
        self.repo = CustomerRepository()

    def create(self, data: CustomerCreate) -> CustomerResponse:
        """Register a customer; emails are unique across customers"""
        if self.repo.get_customer_by_email(self.db, data.email):
            raise ConflictError(EMAIL_TAKEN)

        try:
            customer = self.repo.create_customer(
                self.db, name=data.name, email=data.email, phone=data.phone
            )
        except IntegrityError as e:
            # Another registration took the email after the pre-check
            self.db.rollback()
            raise ConflictError(EMAIL_TAKEN) from e

        logger.info(f"✅ Customer created: {customer.id}")
        self.cache.invalidate(CUSTOMERS)
        return CustomerResponse.from_model(customer)

    def find_all(self, page: int = 1, limit: int = 10) -> PaginatedCustomers:
        page, limit = validate_page_args(page, limit)
        cache_key = build_page_key(CUSTOMERS, page, limit)

        cached = self.cache.get(cache_key)
        if cached is not None:
            return PaginatedCustomers.model_validate(cached)

        customers = self.repo.get_customers(self.db, page_offset(page, limit), limit)
        total = self.repo.count_customers(self.db)
        result = PaginatedCustomers.model_validate(
            paginate([CustomerResponse.from_model(c) for c in customers], total, page, limit)
        )

        self.cache.set(cache_key, result.model_dump(mode="json"))
        return result

    def get_customer(self, customer_id: str) -> Customer:
        """Load the ORM row or raise NotFoundError"""
        customer = self.repo.get_customer_by_id(self.db, customer_id)
        if not customer:
            raise NotFoundError("Customer")
        return customer

    def find_one(self, customer_id: str) -> CustomerResponse:
        return CustomerResponse.from_model(self.get_customer(customer_id))

    def update(self, customer_id: str, data: CustomerUpdate) -> CustomerResponse:
        """Update contact fields; a new email must not belong to another customer"""
        customer = self.get_customer(customer_id)

        updates = data.model_dump(exclude_unset=True)

        if "email" in updates and self.repo.get_customer_by_email(
            self.db, updates["email"], exclude_id=customer_id
        ):
            raise ConflictError(EMAIL_TAKEN)

        try:
            customer = self.repo.update_customer(self.db, customer, **updates)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(EMAIL_TAKEN) from e

        # Schedule listings embed customer snapshots
        self.cache.invalidate(CUSTOMERS, SCHEDULES)
        return CustomerResponse.from_model(customer)

    def remove(self, customer_id: str) -> CustomerResponse:
        customer = self.get_customer(customer_id)
        snapshot = CustomerResponse.from_model(customer)

        self.repo.delete_customer(self.db, customer)
        logger.info(f"🗑️ Customer deleted: {customer_id}")

        self.cache.invalidate(CUSTOMERS, SCHEDULES)
        return snapshot
