"""
Police Records Service - Main Application

FastAPI application for police case, occurrence book, evidence and fleet records.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from records_service.config.settings import settings
from records_service.api.routes.auth import router as auth_router
from records_service.api.routes.license_plates import router as license_plates_router
from records_service.api.routes.police_vehicles import router as police_vehicles_router
from records_service.api.routes.resources import (
    cases_router,
    evidence_router,
    geofiles_router,
    ob_entries_router,
    reports_router,
)
from records_service.api.routes.users import router as users_router
from records_service.core.errors import RecordsError
from records_service.core.seed import seed_defaults
from records_service.infrastructure.store import get_record_store
from records_service.models import HealthResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info(f"Starting {settings.service_name} ({settings.environment})")

    store = get_record_store()
    await store.initialize()
    logger.info(f"Record store: {store.name}")

    if settings.seed_defaults:
        await seed_defaults(store)

    yield

    # Shutdown
    logger.info("Shutting down Police Records Service")
    await store.close()


# Create FastAPI app
app = FastAPI(
    title="Police Records Service",
    description="Records management for cases, OB entries, license plates, evidence, "
                "geofiles, reports and police vehicles",
    version="0.1.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RecordsError)
async def records_error_handler(request: Request, exc: RecordsError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.debug(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Invalid input"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# Include routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(cases_router)
app.include_router(ob_entries_router)
app.include_router(license_plates_router)
app.include_router(evidence_router)
app.include_router(geofiles_router)
app.include_router(reports_router)
app.include_router(police_vehicles_router)


# Root endpoint
@app.get(
    "/",
    summary="Service Information",
    description="""
Returns basic information about the Police Records Service.

**Response Example**:
```json
{
  "service": "police-records-service",
  "version": "0.1.0",
  "status": "running",
  "environment": "production"
}
```

**Authorization**: None required (public endpoint)
    """,
    responses={
        200: {"description": "Service information returned successfully"}
    }
)
async def root():
    """Root endpoint"""
    return {
        "service": settings.service_name,
        "version": "0.1.0",
        "status": "running",
        "environment": settings.environment
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="""
Returns the health status of the service and its record store.

**Workflow**:
1. Pings the active record store (memory or SQL)
2. Reports `healthy` when the store answers, `degraded` otherwise

**Response Example**:
```json
{
  "status": "healthy",
  "service": "police-records-service",
  "timestamp": "2025-01-21T10:00:00Z",
  "store": "memory",
  "store_available": true
}
```

**Use Cases**:
- Container liveness/readiness probes
- Load balancer health checks

**Authorization**: None required (public endpoint)
    """,
    responses={
        200: {"description": "Health status returned"}
    }
)
async def health():
    """Health check"""
    store = get_record_store()
    available = await store.health_check()
    return HealthResponse(
        status="healthy" if available else "degraded",
        service=settings.service_name,
        store=store.name,
        store_available=available,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "records_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=True if settings.environment == "development" else False
    )
