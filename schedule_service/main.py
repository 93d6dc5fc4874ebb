import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from . import models  # noqa: F401 - registers tables on Base.metadata
from .cache import Cache
from .database import Base, engine
from .domain.customers.router import router as customers_router
from .domain.doctors.router import router as doctors_router
from .domain.notifications.dispatcher import NotificationDispatcher
from .domain.schedules.router import router as schedules_router
from .errors import InternalError, ServiceError
from .redis_client import close_redis_client

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")

    # Shared collaborators, passed explicitly into every service
    app.state.cache = Cache()
    app.state.dispatcher = NotificationDispatcher()

    yield

    logger.info("Application shutting down...")
    await app.state.dispatcher.close()
    close_redis_client()


app = FastAPI(title="Schedule Service API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    if isinstance(exc, InternalError):
        logger.error(f"{request.method} {request.url.path} - Internal error: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} - {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Store failures are logged with detail but reported generically"""
    logger.error(f"{request.method} {request.url.path} - Database error: {exc}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


@app.exception_handler(PydanticValidationError)
async def model_validation_error_handler(request: Request, exc: PydanticValidationError):
    """Models built inside a route (e.g. listing arguments) failed validation"""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"detail": [error["msg"] for error in exc.errors()]},
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_errors(exc)})


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    """Error dicts may carry exception objects under 'ctx'; keep them serializable"""
    return [
        {"loc": error.get("loc"), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise
    duration_ms = (time.time() - start_time) * 1000
    logger.info(f"{request.method} {request.url.path} - {response.status_code} ({duration_ms:.0f}ms)")
    return response


# CORS Configuration
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(customers_router)
app.include_router(doctors_router)
app.include_router(schedules_router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
