"""Customer repository - Database operations for customers"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Customer


class CustomerRepository:
    """Repository for customer database operations"""

    @staticmethod
    def get_customers(db: Session, skip: int, limit: int) -> list[Customer]:
        """Get one page of customers, newest first"""
        return (
            db.query(Customer)
            .order_by(Customer.created_at.desc(), Customer.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    @staticmethod
    def count_customers(db: Session) -> int:
        return db.query(func.count(Customer.id)).scalar()

    @staticmethod
    def get_customer_by_id(db: Session, customer_id: str) -> Optional[Customer]:
        """Get a specific customer by ID"""
        return db.query(Customer).filter(Customer.id == customer_id).first()

    @staticmethod
    def get_customer_by_email(
        db: Session, email: str, exclude_id: Optional[str] = None
    ) -> Optional[Customer]:
        """Get the customer owning an email, optionally ignoring one customer"""
        query = db.query(Customer).filter(Customer.email == email)
        if exclude_id:
            query = query.filter(Customer.id != exclude_id)
        return query.first()

    @staticmethod
    def create_customer(db: Session, **customer_data) -> Customer:
        """Create a new customer"""
        customer = Customer(**customer_data)
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer

    @staticmethod
    def update_customer(db: Session, customer: Customer, **updates) -> Customer:
        """Apply the given fields; a None value clears a nullable column"""
        for key, value in updates.items():
            if hasattr(customer, key):
                setattr(customer, key, value)

        db.commit()
        db.refresh(customer)
        return customer

    @staticmethod
    def delete_customer(db: Session, customer: Customer) -> None:
        """Delete a customer; their schedules go with them"""
        db.delete(customer)
        db.commit()
