# customer_api/db/engine.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from customer_api.db.schema import metadata

DEFAULT_DB_URL = "sqlite:///customers.sqlite"  # file in project root


def create_db_engine(db_url: str = DEFAULT_DB_URL, echo: bool = False) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    connect_args = {}
    if db_url.startswith("sqlite"):
        # FastAPI runs sync handlers in a threadpool
        connect_args["check_same_thread"] = False
    return create_engine(db_url, echo=echo, future=True, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """Create the customers table if it does not exist yet."""
    metadata.create_all(engine)
