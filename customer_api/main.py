# customer_api/main.py
"""
Application factory for the Customer API.

``create_app`` wires logging, the database engine, CORS and the
customer router together.  A module-level ``app`` built from the
environment is exported for ``uvicorn customer_api:app``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from customer_api.api.customers import router as customers_router
from customer_api.core.config import Settings, load_settings
from customer_api.core.logging_config import setup_logging
from customer_api.db.engine import create_db_engine, init_db

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        settings = load_settings()

    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.engine = create_db_engine(settings.database_url, echo=settings.db_echo)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # malformed requests are 400 here, not FastAPI's default 422
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Validation failed", "errors": jsonable_encoder(exc.errors())},
        )

    @app.on_event("startup")
    def create_tables() -> None:
        init_db(app.state.engine)
        logger.info("Database ready at %s", settings.database_url)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(customers_router)

    return app


app = create_app()
