import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from inventory.config import Settings, settings as default_settings
from inventory.core.errors import ValidationError
from inventory.core.logging import configure_logging
from inventory.database import Database
from inventory.seed import seed_demo_data
from inventory.api.routes import products, categories, suppliers, health

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

INTERNAL_ERROR_MESSAGE = "Internal server error"
MISSING_FIELDS_MESSAGE = "All fields are required"
INVALID_INPUT_MESSAGE = "Invalid form data"


def bootstrap(database: Database, config: Settings):
    """
    Prepare the store before the server accepts requests
    1. Create missing tables
    2. Load the demo data (when enabled)
    """
    database.create_all()
    logger.info("Database tables created/verified")

    if config.SEED_DEMO_DATA:
        db = database.session()
        try:
            seed_demo_data(db)
        finally:
            db.close()


def create_app(config: Settings = None, database: Database = None) -> FastAPI:
    """
    Build the application

    The store connection is created here (unless one is given) and shared
    with the handlers through app.state.
    """
    config = config or default_settings
    database = database or Database(config.DATABASE_URL, echo=config.ENVIRONMENT == "development")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(config.LOG_LEVEL)
        logger.info("%s starting (environment: %s)", config.PROJECT_NAME, config.ENVIRONMENT)
        try:
            bootstrap(database, config)
        except Exception:
            logger.exception("Application startup failed")
            raise
        logger.info("Ready to accept requests")
        yield
        database.dispose()
        logger.info("Shutdown complete")

    app = FastAPI(title=config.PROJECT_NAME, lifespan=lifespan)
    app.state.database = database
    app.state.settings = config

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    app.include_router(health.router, tags=["health"])
    app.include_router(products.router, tags=["products"])
    app.include_router(categories.router, tags=["categories"])
    app.include_router(suppliers.router, tags=["suppliers"])

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        message = MISSING_FIELDS_MESSAGE if exc.is_missing_fields else INVALID_INPUT_MESSAGE
        return PlainTextResponse(message, status_code=400)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning("Rejected %s %s: %d invalid parameter(s)", request.method, request.url.path, len(exc.errors()))
        return PlainTextResponse(INVALID_INPUT_MESSAGE, status_code=400)

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Store error on %s %s", request.method, request.url.path, exc_info=exc)
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)

    return app


app = create_app()
