"""Strategy Grader FastAPI application."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.config import ALLOWED_ORIGINS, APP_NAME, APP_VERSION
from backend.routers import analyze, asset_classes, health
from grader.engine import StrategyGrader

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the shared grader on startup."""
    logger.info("Starting %s...", APP_NAME)
    app.state.grader = StrategyGrader()
    logger.info("%s ready (%d asset classes).", APP_NAME, len(app.state.grader.asset_classes))
    yield
    logger.info("%s stopped.", APP_NAME)


app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze.router)
app.include_router(asset_classes.router)
app.include_router(health.router)


def flatten_validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group error messages by request field (``loc`` minus the ``body`` prefix)."""
    details: dict[str, list[str]] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        details.setdefault(field, []).append(err.get("msg", "Invalid value"))
    return details


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Validation failed", "details": flatten_validation_errors(exc)},
    )


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint."""
    return {"name": APP_NAME, "version": APP_VERSION}
