# Load environment variables FIRST, before any module imports that need them
from dotenv import load_dotenv
load_dotenv()

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware

from . import config, db
from .logging_config import setup_logging
from .routes import admin_menu_router, bills_router, generic_bills_router, limiter
from .seed_menu import seed_menu

# Configure logging at module load time
setup_logging()

logger = logging.getLogger(__name__)


# ---------- Startup ----------


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed the default menu into an empty database when enabled."""
    if config.SEED_MENU_ON_STARTUP:
        session = db.SessionLocal()
        try:
            seed_menu(session)
        finally:
            session.close()
    yield


app = FastAPI(
    title="Bill Bot API",
    description="Voice billing for Tamil hotels and shops",
    version="1.0.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Health", "description": "Health check endpoints"},
        {"name": "Bills", "description": "Bill generation from hotel order transcripts"},
        {"name": "Generic Bills", "description": "Bill generation for shops without a menu"},
        {"name": "Admin - Menu", "description": "Admin endpoints for menu management"},
    ],
)


# ---------- Request ID Middleware ----------
# Adds a unique request ID to each request for debugging and log correlation


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds a unique request ID to each request.
    The ID is available in request.state.request_id and returned in X-Request-ID header.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers["X-Request-ID"] = request_id
        return response


app.add_middleware(RequestIDMiddleware)

# Add rate limit exception handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS configuration
# In production, set CORS_ORIGINS to restrict allowed origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Health ----------


@app.get("/health", tags=["Health"])
def health() -> Dict[str, str]:
    """Health check endpoint. Returns ok if the service is running."""
    return {"status": "ok"}


# ---------- Routers ----------
# Versioned routes under /api/v1, and the same routes at the root for
# clients that predate versioning

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(bills_router)
api_v1_router.include_router(generic_bills_router)
api_v1_router.include_router(admin_menu_router)

app.include_router(api_v1_router)

app.include_router(bills_router)
app.include_router(generic_bills_router)
app.include_router(admin_menu_router)
