from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from customer_api import create_app
from customer_api.core.config import Settings
from customer_api.db.engine import create_db_engine, init_db
from customer_api.models.customers import Customer
from customer_api.repositories.customers import CustomerRepository


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path/'test.sqlite'}"


@pytest.fixture()
def engine(db_url):
    engine = create_db_engine(db_url)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def repository(engine):
    return CustomerRepository(engine)


@pytest.fixture()
def app(db_url):
    app = create_app(Settings(database_url=db_url))
    yield app
    app.state.engine.dispose()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_customer():
    def _make(**overrides):
        fields = {
            "address": "1 Main St",
            "city": "Springfield",
            "state": "IL",
            "company_name": "Acme",
            "intro_date": datetime(2024, 1, 1),
            "credit_limit": Decimal("1000.00"),
        }
        fields.update(overrides)
        return Customer(**fields)

    return _make
