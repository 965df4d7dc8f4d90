from .insight_service import InsightService, build_insight_service

__all__ = ["InsightService", "build_insight_service"]
