"""
FastAPI application entry point.
Includes security middleware, global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from app.routers import vehicles, parts, maintenance, alerts, dashboard, chat, health
from app.database import create_tables, SessionLocal
from app.config import settings
from app.deps import get_memory_storage
from app.services.sample_data import seed_sample_data
from app.services.storage import ConstraintViolation, SqlStorage
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Fleet Manager API",
    description="Vehicles, spare parts, maintenance history, alerts and the fleet assistant.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (allow the dashboard to call the API) ──────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],   # Restrict to dashboard origin in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── API Key Middleware ───────────────────────────────────────────────────────
class APIKeyMiddleware(BaseHTTPMiddleware):
    """
    Optional lightweight API key auth.
    Health check and API docs stay open. Set API_KEY in .env; leave empty to disable.
    """
    async def dispatch(self, request: Request, call_next):
        open_paths = {f"{settings.API_PREFIX}/health", "/docs", "/redoc", "/openapi.json"}
        if request.url.path in open_paths or not settings.API_KEY:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if api_key != settings.API_KEY:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


if settings.API_KEY:
    app.add_middleware(APIKeyMiddleware)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Exception Handlers ───────────────────────────────────────────────────────
@app.exception_handler(ConstraintViolation)
async def constraint_violation_handler(request: Request, exc: ConstraintViolation):
    logger.warning(f"Constraint violation on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": f"Conflicts with an existing record: {exc}"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
app.include_router(vehicles.router,    prefix=settings.API_PREFIX, tags=["🚐 Vehicles"])
app.include_router(parts.router,       prefix=settings.API_PREFIX, tags=["🔩 Parts"])
app.include_router(maintenance.router, prefix=settings.API_PREFIX, tags=["🔧 Maintenance"])
app.include_router(alerts.router,      prefix=settings.API_PREFIX, tags=["🔔 Alerts"])
app.include_router(dashboard.router,   prefix=settings.API_PREFIX, tags=["📊 Dashboard"])
app.include_router(chat.router,        prefix=settings.API_PREFIX, tags=["💬 Assistant"])
app.include_router(health.router,      prefix=settings.API_PREFIX, tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
def _seed():
    if settings.STORAGE_BACKEND == "memory":
        seed_sample_data(get_memory_storage())
        return
    db = SessionLocal()
    try:
        seed_sample_data(SqlStorage(db))
    finally:
        db.close()


@app.on_event("startup")
async def startup():
    logger.info("🚀 Fleet Manager backend starting up...")
    if settings.STORAGE_BACKEND == "memory":
        logger.info("🧠 Using in-memory storage — data is lost on restart")
    else:
        create_tables()
        logger.info("✅ Database tables ready")
    if settings.SEED_SAMPLE_DATA:
        _seed()
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Fleet Manager backend shutting down...")
