# customer_api/models/customers.py
"""
Customer record (storage side) and CustomerDTO (wire side).

The two shapes carry the same fields; ``customer_to_dto`` and
``dto_to_customer`` copy them explicitly in each direction.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, Field, field_validator

CENTS = Decimal("0.01")
MAX_DIGITS = 18


@dataclass
class Customer:
    customer_id: int = 0
    address: str = ""
    city: str = ""
    state: str = ""
    company_name: str = ""
    intro_date: datetime = datetime.min
    credit_limit: Decimal = Decimal("0.00")


class CustomerDTO(BaseModel):
    customer_id: int = Field(0, alias="customerID")
    address: str = ""
    city: str = ""
    state: str = ""
    company_name: str = Field("", alias="companyName")
    intro_date: datetime = Field(..., alias="introDate")
    credit_limit: Decimal = Field(..., alias="creditLimit")

    class Config:
        populate_by_name = True
        from_attributes = True

    @field_validator("address", "city", "state", "company_name", mode="before")
    @classmethod
    def _null_text_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("intro_date")
    @classmethod
    def _to_naive_utc(cls, value: datetime) -> datetime:
        # stored as naive UTC
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @field_validator("credit_limit")
    @classmethod
    def _to_cents(cls, value: Decimal) -> Decimal:
        # must fit the NUMERIC(18, 2) column
        try:
            value = value.quantize(CENTS)
        except InvalidOperation:
            raise ValueError("creditLimit is out of range")
        if len(value.as_tuple().digits) > MAX_DIGITS:
            raise ValueError(f"creditLimit must have at most {MAX_DIGITS} digits")
        return value


def customer_to_dto(customer: Customer) -> CustomerDTO:
    return CustomerDTO(
        customer_id=customer.customer_id,
        address=customer.address,
        city=customer.city,
        state=customer.state,
        company_name=customer.company_name,
        intro_date=customer.intro_date,
        credit_limit=customer.credit_limit,
    )


def dto_to_customer(dto: CustomerDTO) -> Customer:
    return Customer(
        customer_id=dto.customer_id,
        address=dto.address,
        city=dto.city,
        state=dto.state,
        company_name=dto.company_name,
        intro_date=dto.intro_date,
        credit_limit=dto.credit_limit,
    )
