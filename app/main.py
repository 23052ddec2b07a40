# app/main.py
"""
FastAPI application entry point.
Includes CORS, request timing, workflow/global error handlers, and all routers.
"""

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.orm import Session
from app.routers import auth, users, task_templates, tasks, training, documents, photos, dispo_forms, health
from app.database import SessionLocal, close_session, create_tables, get_db
from app.config import settings
from app.schemas.health import HealthOut
from app.services.errors import WorkflowError
from app.services.seed_service import seed_store
from app.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="Driver Hub API",
    description="Role-based compliance workflows for drivers, dispatchers and admins.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (web client runs on a different origin) ───────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request Timing Middleware ────────────────────────────────────────────────
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration = round((time.time() - start) * 1000, 2)
    logger.debug(f"{request.method} {request.url.path} → {response.status_code} ({duration}ms)")
    return response


# ── Workflow Error Handler ───────────────────────────────────────────────────
@app.exception_handler(WorkflowError)
async def workflow_error_handler(request: Request, exc: WorkflowError):
    logger.info(f"{request.method} {request.url.path} rejected: {type(exc).__name__} ({exc.detail})")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "error": type(exc).__name__},
    )


# ── Global Exception Handler ─────────────────────────────────────────────────
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers ──────────────────────────────────────────────────────────────────
# Mounted under API_PREFIX and, for the web client, at the root.
ROUTERS = [
    (auth.router, "🔑 Auth"),
    (users.router, "👥 Users"),
    (task_templates.router, "📋 Task Templates"),
    (tasks.router, "✅ Tasks"),
    (training.router, "🎓 Training"),
    (documents.router, "📄 Documents"),
    (photos.router, "📷 Photos"),
    (dispo_forms.router, "🚚 Dispo Forms"),
    (health.router, "💚 Health"),
]

for router, tag in ROUTERS:
    app.include_router(router, prefix=settings.API_PREFIX, tags=[tag])
    app.include_router(router, include_in_schema=False)


@app.get("/", response_model=HealthOut, include_in_schema=False)
def root_health(db: Session = Depends(get_db)):
    return health.health_check(db)


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 Driver Hub API starting up...")
    create_tables()
    logger.info("✅ Store tables ready")
    if settings.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_store(db)
        finally:
            close_session(db)
    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info(f"📖 API docs at /docs (routes under {settings.API_PREFIX} and /)")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 Driver Hub API shutting down...")
