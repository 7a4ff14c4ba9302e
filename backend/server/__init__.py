"""Server — FastAPI app creation, middleware, startup."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from server.config import ALLOWED_ORIGINS, APP_VERSION, ENVIRONMENT, LOG_LEVEL
from server.logging_setup import setup_logging
from exam_profiles.routes import router as exam_profiles_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(LOG_LEVEL)
    logger.info(f"Allocation API {APP_VERSION} starting ({ENVIRONMENT})")
    yield
    # Shutdown
    logger.info("Allocation API shutting down")


app = FastAPI(title="Study Allocation API", version=APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ─── API routes ──────────────────────────────────────────────
app.include_router(exam_profiles_router, tags=["exam-profiles"])


@app.get("/health")
def health_check():
    return {"status": "ok", "version": APP_VERSION}
