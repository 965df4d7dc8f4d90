from __future__ import annotations

from fastapi import Request

from mindease.apps.services.insight_service import InsightService
from mindease.libs.schemas.settings import get_settings


def get_insight_service(request: Request) -> InsightService:
    service = getattr(request.app.state, "insight_service", None)
    if service is None:
        # Lifespan did not run (e.g. a bare ASGI transport); build on first use.
        service = InsightService.from_settings(get_settings())
        request.app.state.insight_service = service
    return service


__all__ = ["get_insight_service"]
