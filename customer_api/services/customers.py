# customer_api/services/customers.py
"""
Customer service: converts between CustomerDTO and the Customer record
and delegates to the repository.  It holds no business rules of its own.
"""

from typing import List, Optional

from fastapi import Request

from customer_api.models.customers import CustomerDTO, customer_to_dto, dto_to_customer
from customer_api.repositories.customers import CustomerRepository


class CustomerService:
    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def get_all(self) -> List[CustomerDTO]:
        return [customer_to_dto(c) for c in self.repository.get_all()]

    def find_by_id(self, customer_id: int) -> Optional[CustomerDTO]:
        customer = self.repository.find_by_id(customer_id)
        if customer is None:
            return None
        return customer_to_dto(customer)

    def add(self, dto: CustomerDTO) -> bool:
        return self.repository.add(dto_to_customer(dto))

    def update(self, dto: CustomerDTO) -> bool:
        """``dto.customer_id`` must already identify the row to replace."""
        return self.repository.update(dto_to_customer(dto))

    def delete(self, customer_id: int) -> bool:
        return self.repository.delete(customer_id)


def get_customer_service(request: Request) -> CustomerService:
    """FastAPI dependency: a service bound to the app's engine."""
    return CustomerService(CustomerRepository(request.app.state.engine))
