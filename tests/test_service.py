"""Tests for CustomerService, the DTO-facing layer over the repository."""
from datetime import datetime
from decimal import Decimal

from customer_api.models.customers import CustomerDTO
from customer_api.services.customers import CustomerService


def _dto(**overrides):
    fields = {
        "address": "1 Main St",
        "city": "Springfield",
        "state": "IL",
        "company_name": "Acme",
        "intro_date": datetime(2024, 1, 1),
        "credit_limit": Decimal("1000.00"),
    }
    fields.update(overrides)
    return CustomerDTO(**fields)


def test_get_all_preserves_repository_order(repository):
    service = CustomerService(repository)
    for name in ("Zeta", "Alpha"):
        assert service.add(_dto(company_name=name)) is True

    assert [d.company_name for d in service.get_all()] == ["Zeta", "Alpha"]


def test_find_by_id_absent_returns_none(repository):
    assert CustomerService(repository).find_by_id(42) is None


def test_update_uses_dto_id(repository):
    service = CustomerService(repository)
    service.add(_dto())
    existing = service.get_all()[0]

    changed = _dto(customer_id=existing.customer_id, city="Capital City")
    assert service.update(changed) is True
    assert service.find_by_id(existing.customer_id).city == "Capital City"

    assert service.update(_dto(customer_id=existing.customer_id + 100)) is False


def test_delete_delegates(repository):
    service = CustomerService(repository)
    service.add(_dto())
    customer_id = service.get_all()[0].customer_id

    assert service.delete(customer_id) is True
    assert service.delete(customer_id) is False
    assert service.get_all() == []
