"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import blocked_users, check_ins, courts, planned_visits, users
from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import WePickleError
from app.services.scheduler import expiry_janitor

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting WePickle API")
    logger.info(f"Debug mode: {settings.DEBUG}")

    await init_db()

    if settings.JANITOR_ENABLED:
        await expiry_janitor.start()

    yield

    # Shutdown
    logger.info("Shutting down WePickle API")
    await expiry_janitor.stop()


# Create FastAPI app
app = FastAPI(
    title="WePickle API",
    description="Court check-ins, planned visits and user blocking for pickleball players",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify exact origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WePickleError)
async def wepickle_exception_handler(request: Request, exc: WePickleError):
    """Turn business-rule violations into JSON error responses."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc.detail}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Include routers
app.include_router(users.router)
app.include_router(courts.router)
app.include_router(check_ins.router)
app.include_router(planned_visits.router)
app.include_router(blocked_users.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "janitor_running": expiry_janitor.running,
        "last_cleanup": expiry_janitor.last_result,
    }
