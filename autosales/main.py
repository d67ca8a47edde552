"""
Main FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from autosales.config import get_settings
from autosales.database import get_db, init_db
from autosales.outcome import DATABASE_ERRORS, OutcomeStatus
from autosales.responses import INVALID_REQUEST_MESSAGE, error_status
from autosales.routers import cars, customers, sales_orders

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan events for the application.
    Handles startup and shutdown events.
    """
    # Startup
    logger.info("🚀 Starting %s %s", settings.app_name, settings.app_version)
    if settings.create_tables:
        try:
            await init_db()
            logger.info("✅ Database initialized successfully")
        except DATABASE_ERRORS:
            # Requests will answer with the failure envelope until the database is back
            logger.exception("Could not initialize the database")
    logger.info("📖 Interactive docs: /docs")

    yield

    # Shutdown
    logger.info("👋 Shutting down %s", settings.app_name)


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    ## 🚗 Auto Sales API

    CRUD over the customers, cars and sales orders of a car dealership.

    ### Entities:
    * **Customers**: name, document and phone
    * **Cars**: brand, model, year and color
    * **Sales orders**: which car was sold to which customer, when and for how much

    Successful mutations answer `{"message": ...}`. Failures answer HTTP 400
    with a `{"message": ...}` envelope; with `DISTINCT_ERROR_STATUS=true` they
    answer 404 (not found), 422 (invalid) or 503 (database unavailable) instead.
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(customers.router, prefix=settings.api_prefix)
app.include_router(cars.router, prefix=settings.api_prefix)
app.include_router(sales_orders.router, prefix=settings.api_prefix)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and path ids share the failure envelope."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=error_status(OutcomeStatus.INVALID),
        content={
            "message": INVALID_REQUEST_MESSAGE,
            "detail": jsonable_encoder(exc.errors()),
        },
    )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    """
    Health check endpoint that verifies API and database status.
    """
    health_status = {
        "status": "healthy",
        "database": "online",
        "version": settings.app_version,
    }

    try:
        await db.execute(text("SELECT 1"))
    except DATABASE_ERRORS as e:
        logger.warning("Health check could not reach the database: %s", e)
        health_status["status"] = "unhealthy"
        health_status["database"] = "offline"

    return health_status


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "autosales.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
