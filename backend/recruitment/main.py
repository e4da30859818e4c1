"""
Recruitment System - Main FastAPI application
"""
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from recruitment.core.config import settings
from recruitment.core.database import init_db
from recruitment.core.logging_config import configure_logging
from recruitment.core.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    ExceptionHandlerMiddleware,
    error_body,
)
from recruitment.core.exceptions import RecruitmentException
from recruitment.admin.router import router as admin_router
from recruitment.auth.router import router as auth_router
from recruitment.candidates.router import router as candidate_router
from recruitment.candidates.router import staff_router as candidates_router
from recruitment.dashboard.router import router as dashboard_router
from recruitment.interviews.router import router as interviews_router
from recruitment.jobs.router import router as jobs_router
from recruitment.notifications.router import router as notifications_router
from recruitment.offers.router import router as offers_router
from recruitment.reports.router import router as reports_router
from recruitment.skills.router import router as skills_router
from recruitment.users.router import router as users_router

# Configure logging
configure_logging()
logger = structlog.get_logger()

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Recruitment and applicant tracking API",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

# Add middleware (the last one added runs first)
app.add_middleware(ExceptionHandlerMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(RecruitmentException)
async def recruitment_exception_handler(request: Request, exc: RecruitmentException):
    """Handle application exceptions"""
    if exc.status_code >= 500:
        logger.error("request_error", path=request.url.path, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request fields are a 400"""
    logger.info("request_validation_failed", path=request.url.path, error_count=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid request data",
            "details": jsonable_encoder(exc.errors()),
        },
    )


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
    }


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/api/docs",
    }


# Include routers
app.include_router(auth_router)
app.include_router(admin_router)
app.include_router(users_router)
app.include_router(skills_router)
app.include_router(jobs_router)
app.include_router(candidate_router)
app.include_router(candidates_router)
app.include_router(interviews_router)
app.include_router(offers_router)
app.include_router(notifications_router)
app.include_router(dashboard_router)
app.include_router(reports_router)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("application_starting", version=settings.APP_VERSION, environment=settings.ENVIRONMENT)

    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)

    # Initialize database
    try:
        init_db()
    except Exception as e:
        logger.error("database_init_failed", error=str(e))


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("application_shutting_down")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "recruitment.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
