"""Records exchanged between the host application and the insight engines."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Generic, Literal, Optional, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

# Declaration order doubles as the tie-break order when ranking concerns.
CONCERNS = ("stress", "sleep", "depression", "anxiety", "confidence")
GENERAL_CONCERN = "general"

Trend = Literal["declining", "stable", "improving"]
StressLevel = Literal["low", "moderate", "high"]
Valence = Literal["positive", "neutral", "negative"]

T = TypeVar("T")


class MoodRecord(BaseModel):
    """One logged mood entry as supplied by the host's storage layer."""

    model_config = ConfigDict(frozen=True)

    mood_symbol: str = Field(
        default="",
        validation_alias=AliasChoices("mood_symbol", "moodSymbol", "mood"),
    )
    journal_text: str = Field(
        default="",
        validation_alias=AliasChoices("journal_text", "journalText", "journal"),
    )
    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
    )

    @field_validator("mood_symbol", "journal_text", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("created_at", mode="wrap")
    @classmethod
    def _lenient_timestamp(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Optional[datetime]:
        # The engines never read timestamps; an unparseable one becomes None.
        try:
            return handler(value)
        except ValidationError:
            return None


class ConcernScore(BaseModel):
    """Keyword scores for the five concerns plus auxiliary counters."""

    stress: int = 0
    sleep: int = 0
    depression: int = 0
    anxiety: int = 0
    confidence: int = 0
    positive: int = 0
    negative: int = 0
    social: int = 0
    work: int = 0
    health: int = 0

    def concerns(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in CONCERNS}


class MoodPattern(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    trend: Trend = "stable"
    common_mood_counts: Dict[str, int] = Field(default_factory=dict)
    stress_level: StressLevel = "low"
    sleep_issues: bool = False


class MoodProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    energy: str
    valence: Valence


NEUTRAL_PROFILE = MoodProfile(category="neutral", energy="medium", valence="neutral")


class Recommendation(BaseModel):
    """Exercise / in-app action / message triple chosen for one request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    exercise: str
    app_action: str
    message: str
    primary_concern: str
    source_scores: ConcernScore = Field(default_factory=ConcernScore)
    source_pattern: MoodPattern = Field(default_factory=MoodPattern)


class Ok(BaseModel, Generic[T]):
    """Result envelope: public operations always produce a value.

    ``fallback`` marks the defined fallback output returned after an internal
    failure; ``error`` names the exception class that triggered it.
    """

    value: T
    fallback: bool = False
    error: Optional[str] = None


__all__ = [
    "CONCERNS",
    "ConcernScore",
    "GENERAL_CONCERN",
    "MoodPattern",
    "MoodProfile",
    "MoodRecord",
    "NEUTRAL_PROFILE",
    "Ok",
    "Recommendation",
    "StressLevel",
    "Trend",
    "Valence",
]
