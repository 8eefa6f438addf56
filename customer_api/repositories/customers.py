# customer_api/repositories/customers.py
"""
Data access for the ``customers`` table.

Every method runs in its own transaction.  SQLAlchemy failures are
re-raised as ``StoreError`` so callers see a single error type for
"the store is broken" regardless of driver.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from customer_api.db.schema import customers
from customer_api.errors import StoreError
from customer_api.models.customers import Customer

logger = logging.getLogger(__name__)


def _row_to_customer(row) -> Customer:
    return Customer(
        customer_id=row["customer_id"],
        address=row["address"] or "",
        city=row["city"] or "",
        state=row["state"] or "",
        company_name=row["company_name"] or "",
        intro_date=row["intro_date"],
        credit_limit=row["credit_limit"],
    )


def _customer_values(customer: Customer) -> dict:
    return {
        "address": customer.address,
        "city": customer.city,
        "state": customer.state,
        "company_name": customer.company_name,
        "intro_date": customer.intro_date,
        "credit_limit": customer.credit_limit,
    }


class CustomerRepository:
    def __init__(self, engine: Engine):
        self.engine = engine

    def get_all(self) -> List[Customer]:
        stmt = select(customers).order_by(customers.c.customer_id)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

        return [_row_to_customer(row) for row in rows]

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        stmt = select(customers).where(customers.c.customer_id == customer_id)
        try:
            with self.engine.connect() as conn:
                row = conn.execute(stmt).mappings().first()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

        if row is None:
            return None
        return _row_to_customer(row)

    def add(self, customer: Customer) -> bool:
        """
        Insert a new row.  The store assigns the identifier, which is
        written back onto ``customer``.
        """
        stmt = insert(customers).values(**_customer_values(customer))
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

        if result.rowcount < 1:
            return False
        customer.customer_id = result.inserted_primary_key[0]
        logger.info("Added customer %s", customer.customer_id)
        return True

    def update(self, customer: Customer) -> bool:
        """
        Replace every column of the row matching ``customer.customer_id``.
        Zero affected rows (the id does not exist) returns False.
        """
        stmt = (
            update(customers)
            .where(customers.c.customer_id == customer.customer_id)
            .values(**_customer_values(customer))
        )
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

        if result.rowcount > 0:
            logger.info("Updated customer %s", customer.customer_id)
        return result.rowcount > 0

    def delete(self, customer_id: int) -> bool:
        if self.find_by_id(customer_id) is None:
            return False

        stmt = delete(customers).where(customers.c.customer_id == customer_id)
        try:
            with self.engine.begin() as conn:
                result = conn.execute(stmt)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

        if result.rowcount > 0:
            logger.info("Deleted customer %s", customer_id)
        return result.rowcount > 0
