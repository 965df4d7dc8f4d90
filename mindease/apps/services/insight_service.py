"""Stateless facade over the insight engines, built once and injected into handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from mindease.apps.engine.goal_tags.engine import extract_goal_tags
from mindease.apps.engine.insight.engine import generate_insight
from mindease.apps.engine.mood_pattern.engine import DEFAULT_WINDOW, derive_pattern, mood_profile
from mindease.apps.engine.suggestion.engine import select_suggestion
from mindease.apps.engine.text_analyzer.engine import analyze_text
from mindease.libs.lexicon import Lexicon, TemplateBank, load_lexicon, load_templates
from mindease.libs.schemas.mood import (
    ConcernScore,
    MoodPattern,
    MoodProfile,
    Ok,
    Recommendation,
)
from mindease.libs.schemas.settings import AppSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsightService:
    lexicon: Lexicon
    templates: TemplateBank
    window: int = DEFAULT_WINDOW

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "InsightService":
        return cls(
            lexicon=load_lexicon(settings.lexicon_path),
            templates=load_templates(settings.templates_path),
            window=settings.pattern_window,
        )

    def analyze_text(self, text: Optional[str]) -> Ok[ConcernScore]:
        try:
            return Ok(value=analyze_text(text, self.lexicon))
        except Exception as exc:
            logger.warning("text analysis failed: %s", exc, exc_info=True)
            return Ok(value=ConcernScore(), fallback=True, error=type(exc).__name__)

    def derive_pattern(self, history: Iterable[Any] | None, window: Optional[int] = None) -> Ok[MoodPattern]:
        size = self.window if window is None else window
        try:
            return Ok(value=derive_pattern(history, size, self.lexicon))
        except Exception as exc:
            logger.warning("pattern derivation failed: %s", exc, exc_info=True)
            return Ok(value=MoodPattern(), fallback=True, error=type(exc).__name__)

    def generate_suggestion(self, history: Iterable[Any] | None, free_text: Optional[str]) -> Ok[Recommendation]:
        return select_suggestion(
            history,
            free_text,
            window=self.window,
            lexicon=self.lexicon,
            bank=self.templates,
        )

    def generate_insight(
        self,
        history: Iterable[Any] | None,
        mood_symbol: Optional[str],
        journal_text: Optional[str],
    ) -> Ok[str]:
        return generate_insight(
            history,
            mood_symbol,
            journal_text,
            window=self.window,
            lexicon=self.lexicon,
            bank=self.templates,
        )

    def extract_goal_tags(self, text: Optional[str]) -> Ok[List[str]]:
        try:
            return Ok(value=extract_goal_tags(text, self.lexicon))
        except Exception as exc:
            logger.warning("goal tagging failed: %s", exc, exc_info=True)
            return Ok(value=[], fallback=True, error=type(exc).__name__)

    def mood_profile(self, symbol: Optional[str]) -> Ok[MoodProfile]:
        return Ok(value=mood_profile(symbol, self.lexicon))


def build_insight_service(settings: AppSettings | None = None) -> InsightService:
    return InsightService.from_settings(settings or AppSettings())


__all__ = ["InsightService", "build_insight_service"]
