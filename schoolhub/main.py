# /schoolhub/main.py

import logging

# --- Core FastAPI Imports ---
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError

# --- Application-specific Router Imports ---
from .routers import (
    admin_router,
    attendance_router,
    classrooms_router,
    dashboard_router,
    debug_router,
    messages_router,
    profile_router,
    reports_router,
    students_router,
)

from .core.config import settings
from .core.logging_config import configure_logging

logger = logging.getLogger(__name__)

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    configure_logging()
    logger.info("SchoolHub API starting (debug routes %s)", "on" if settings.ENABLE_DEBUG_ROUTES else "off")
    yield
    # This code runs ONCE when the application shuts down.

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="SchoolHub API",
    description="Classrooms, students, attendance and messaging for a small school, with role-scoped access.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Backend Failures ---
# A failed query anywhere below a route means the caller's scope could not be
# computed. The request is denied with a generic message; details stay in the log.
@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "The request could not be completed. Please try again later."},
    )

# --- API Router Inclusion ---
app.include_router(profile_router.router, prefix="/api/profile", tags=["Profile"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(classrooms_router.router, prefix="/api/classrooms", tags=["Classrooms"])
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(attendance_router.router, prefix="/api/attendance", tags=["Attendance"])
app.include_router(reports_router.router, prefix="/api/reports", tags=["Reports"])
app.include_router(messages_router.router, prefix="/api/messages", tags=["Messages"])
app.include_router(admin_router.router, prefix="/api/admin", tags=["Administration"])
app.include_router(debug_router.router, prefix="/api/debug", tags=["Debug"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "SchoolHub API is running!", "version": app.version}
