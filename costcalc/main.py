import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .db.schema import init_db
from .core import errors
from .routers import health, periods, currencies, calc, ui


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., temp DB). Falls back to cached get_settings().
    """
    settings = settings_override or get_settings()
    if settings_override is not None:
        settings.init_post_load()
    init_logging(debug=settings.debug)

    # Preferences table must exist before the first toggle
    try:
        version = init_db(settings.db_path)  # type: ignore[arg-type]
    except Exception:
        logging.getLogger("costcalc").exception("failed to initialize database on startup")
        raise
    logging.getLogger("costcalc").info(
        "database ready",
        extra={"db_path": str(settings.db_path), "schema_version": version},
    )

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )
    app.state.settings = settings

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.CalculationError, errors.calculation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(periods.router)
    app.include_router(currencies.router)
    app.include_router(calc.router)
    app.include_router(ui.router)

    @app.get("/")
    async def root():
        return {"message": "Cost Period Calculator API", "version": settings.version}

    return app
