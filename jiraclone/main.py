# jiraclone/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

# Config & Logger
from jiraclone.core.config import settings
from jiraclone.core.errors import register_exception_handlers
from jiraclone.core.logger import setup_logging
from jiraclone.db.session import init_db

from jiraclone.api.v1.api import api_router


# ==============================================================================
# 1. Lifespan
# ==============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    # [Startup]
    setup_logging()
    init_db()
    logger.info(f"Jira Clone API starting (env: {settings.APP_ENV})")

    yield

    # [Shutdown]
    logger.info("Jira Clone API shutting down")


# ==============================================================================
# 2. FastAPI app
# ==============================================================================
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

register_exception_handlers(app)

# ==============================================================================
# 3. Middleware (CORS)
# ==============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ==============================================================================
# 4. Routers
# ==============================================================================
app.include_router(api_router, prefix=settings.API_V1_STR)


@app.get("/", include_in_schema=False)
def root() -> Dict[str, Any]:
    return {
        "message": "Welcome to the Jira Clone API",
        "docs_url": "/docs",
        "redoc_url": "/redoc",
        "status": "running",
    }


@app.get("/health", include_in_schema=False)
def health_check():
    """Plain liveness probe for load balancers."""
    return {"status": "ok"}
