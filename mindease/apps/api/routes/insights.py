from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, Field

from mindease.apps.api.deps import get_insight_service
from mindease.apps.services.insight_service import InsightService
from mindease.libs.schemas.mood import MoodRecord, Ok

router = APIRouter(prefix="/v1/insights", tags=["insights"])


class AnalyzeRequest(BaseModel):
    text: str = ""


class PatternRequest(BaseModel):
    history: List[MoodRecord] = Field(default_factory=list)
    window: Optional[int] = Field(default=None, ge=0)


class SuggestionRequest(BaseModel):
    history: List[MoodRecord] = Field(default_factory=list)
    text: str = Field(default="", validation_alias=AliasChoices("text", "goal"))


class MoodInsightRequest(BaseModel):
    history: List[MoodRecord] = Field(default_factory=list)
    mood: str = ""
    journal: str = ""


class GoalTagsRequest(BaseModel):
    goal: str = ""


def _envelope(result: Ok[Any], data: Any) -> Dict[str, Any]:
    return {"status": "ok", "fallback": result.fallback, "data": data}


@router.post("/analyze")
async def analyze(payload: AnalyzeRequest, service: InsightService = Depends(get_insight_service)):
    result = service.analyze_text(payload.text)
    return _envelope(result, result.value.model_dump())


@router.post("/pattern")
async def pattern(payload: PatternRequest, service: InsightService = Depends(get_insight_service)):
    result = service.derive_pattern(payload.history, payload.window)
    return _envelope(result, result.value.model_dump(by_alias=True))


@router.post("/suggestion")
async def suggestion(payload: SuggestionRequest, service: InsightService = Depends(get_insight_service)):
    result = service.generate_suggestion(payload.history, payload.text)
    return _envelope(result, result.value.model_dump(by_alias=True))


@router.post("/mood")
async def mood_insight(payload: MoodInsightRequest, service: InsightService = Depends(get_insight_service)):
    result = service.generate_insight(payload.history, payload.mood, payload.journal)
    profile = service.mood_profile(payload.mood).value
    return _envelope(result, {"insight": result.value, "mood": profile.model_dump()})


@router.post("/goal-tags")
async def goal_tags(payload: GoalTagsRequest, service: InsightService = Depends(get_insight_service)):
    result = service.extract_goal_tags(payload.goal)
    return _envelope(result, {"tags": result.value})


__all__ = ["router"]
