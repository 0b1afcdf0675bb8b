import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reservation_engine.api.deps import get_engine
from reservation_engine.api.routers.availability import router as availability_router
from reservation_engine.api.routers.commissions import router as commissions_router
from reservation_engine.api.routers.health import router as health_router
from reservation_engine.api.routers.reservations import router as reservations_router
from reservation_engine.api.routers.worker import router as worker_router
from reservation_engine.config import get_settings
from reservation_engine.domain.errors import DomainError
from reservation_engine.infrastructure.db.engine import create_schema

# Configure structured logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB tables (for dev/demo purposes)
    engine = get_engine()
    await create_schema(engine)
    yield
    # Cleanup
    await engine.dispose()

app = FastAPI(
    title="Reservation Engine",
    version="0.1.0",
    lifespan=lifespan
)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Maps domain errors to their HTTP status with a stable error code."""
    if exc.status_code >= 500:
        logger.error(
            "Domain error surfaced to client",
            exc_info=exc,
            extra={"path": request.url.path, "code": exc.code},
        )
    else:
        logger.info(
            "Request rejected",
            extra={"path": request.url.path, "code": exc.code, "detail": exc.message},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code, **exc.extra()},
    )


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    # Log the full error with context for internal debugging
    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists."
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(reservations_router, prefix="/api/v1", tags=["Reservations"])
app.include_router(availability_router, prefix="/api/v1", tags=["Availability"])
app.include_router(commissions_router, prefix="/api/v1", tags=["Commissions"])
app.include_router(worker_router, prefix="/api/v1", tags=["Worker"])
