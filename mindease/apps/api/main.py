"""FastAPI application entrypoint for MindEase insights."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from mindease.libs.logging_utils import configure_logging

configure_logging()

from fastapi import FastAPI
from starlette_exporter import PrometheusMiddleware, handle_metrics

from mindease.apps.api.routes.insights import router as insights_router
from mindease.apps.services.insight_service import InsightService
from mindease.libs.schemas.settings import get_settings

LOGGER = logging.getLogger(__name__)
SETTINGS = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    app.state.insight_service = InsightService.from_settings(settings)
    LOGGER.info(
        "Insight service configured",
        extra={
            "event": "insight_service_config",
            "environment": settings.environment,
            "pattern_window": settings.pattern_window,
            "lexicon_path": settings.lexicon_path or "builtin",
            "templates_path": settings.templates_path or "builtin",
        },
    )
    yield


app = FastAPI(title=f"{SETTINGS.app_name} API", version="0.1.0", lifespan=lifespan)
app.add_middleware(PrometheusMiddleware)
app.add_route("/metrics", handle_metrics)


@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Return a simple health payload."""

    return {"status": "ok"}


app.include_router(insights_router)
