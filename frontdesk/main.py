"""
Frontdesk - FastAPI application
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from frontdesk.config import settings
from frontdesk.errors import NotFound, TransportFailure, ValidationFailure
from frontdesk.logging_config import configure_logging
from frontdesk.services import Frontdesk
from frontdesk.storage import create_store
from frontdesk.api import dashboard, inventory, menu, orders, reservations

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting Frontdesk API", version="1.0.0", storage=settings.storage_backend)

    if getattr(app.state, "frontdesk", None) is None:
        if settings.storage_backend == "sql":
            from frontdesk.database import init_db
            await init_db()
        app.state.frontdesk = Frontdesk(create_store())

    yield

    await app.state.frontdesk.close()
    logger.info("Shutting down Frontdesk API")


# Create FastAPI application
app = FastAPI(
    title="Frontdesk",
    description="Front-of-house management for a single restaurant",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(ValidationFailure)
async def validation_failure_handler(request: Request, exc: ValidationFailure):
    return JSONResponse(
        status_code=422,
        content={
            "detail": exc.message,
            "errors": [error.model_dump() for error in exc.errors],
        },
    )


@app.exception_handler(TransportFailure)
async def transport_failure_handler(request: Request, exc: TransportFailure):
    logger.error("Storage unavailable", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=502, content={"detail": exc.message})


# Health check endpoints
@app.get("/health")
async def health():
    """Basic health check"""
    return {"status": "healthy", "service": "frontdesk", "version": "1.0.0"}


@app.get("/health/ready")
async def ready(request: Request):
    """Readiness check with storage verification"""
    checks = {}

    try:
        await request.app.state.frontdesk.store.fetch_all("menu_item", ["id"])
        checks["storage"] = "ok"
    except TransportFailure as e:
        checks["storage"] = f"failed: {e.message}"

    all_ok = all(v == "ok" for v in checks.values())

    return {
        "status": "ready" if all_ok else "not_ready",
        "checks": checks,
    }


# Include API routers
app.include_router(menu.router, prefix="/menu_items", tags=["Menu"])
app.include_router(inventory.router, prefix="/inventory", tags=["Inventory"])
app.include_router(orders.router, prefix="/orders", tags=["Orders"])
app.include_router(reservations.router, prefix="/reservations", tags=["Reservations"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "frontdesk.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
