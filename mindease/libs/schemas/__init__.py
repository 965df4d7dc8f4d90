"""Pydantic models and schema utilities."""

from .mood import (
    CONCERNS,
    GENERAL_CONCERN,
    ConcernScore,
    MoodPattern,
    MoodProfile,
    MoodRecord,
    Ok,
    Recommendation,
)
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "CONCERNS",
    "ConcernScore",
    "GENERAL_CONCERN",
    "MoodPattern",
    "MoodProfile",
    "MoodRecord",
    "Ok",
    "Recommendation",
    "get_settings",
]
