# customer_api/db/schema.py

from decimal import Decimal

from sqlalchemy import MetaData, Table, Column, Integer, String, Numeric, DateTime
from sqlalchemy.types import TypeDecorator


class ExactNumeric(TypeDecorator):
    """
    NUMERIC(precision, scale) that keeps every digit on SQLite.

    SQLite stores NUMERIC values as floats, so there the value is kept
    as decimal text instead.  Other dialects use their native NUMERIC.
    """

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int, scale: int):
        super().__init__(precision=precision, scale=scale, asdecimal=True)
        self.precision = precision
        self.scale = scale

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            # sign, digits and decimal point
            return dialect.type_descriptor(String(self.precision + 2))
        return dialect.type_descriptor(Numeric(self.precision, self.scale))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = Decimal(value)
        if dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(str(value))


metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("customer_id", Integer, primary_key=True, autoincrement=True),
    Column("address", String(200), nullable=False, default=""),
    Column("city", String(100), nullable=False, default=""),
    Column("state", String(100), nullable=False, default=""),
    Column("company_name", String(200), nullable=False, default=""),
    Column("intro_date", DateTime, nullable=False),
    Column("credit_limit", ExactNumeric(18, 2), nullable=False),
)
