from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Tuple

from mindease.apps.engine.mood_pattern.engine import DEFAULT_WINDOW, derive_pattern
from mindease.apps.engine.text_analyzer.engine import analyze_text
from mindease.libs.lexicon import Lexicon, TemplateBank, load_lexicon, load_templates
from mindease.libs.schemas.mood import ConcernScore, MoodPattern, Ok

logger = logging.getLogger(__name__)

DEFAULT_INSIGHT = "Keep logging to see trends!"

Rule = Tuple[str, Callable[[ConcernScore, MoodPattern], bool]]

# First match wins; order encodes priority between overlapping signals.
INSIGHT_RULES: Tuple[Rule, ...] = (
    ("stress", lambda s, p: s.stress > 1),
    ("sleep", lambda s, p: s.sleep > 1),
    ("depression", lambda s, p: s.depression > 1),
    ("anxiety", lambda s, p: s.anxiety > 1),
    ("positive", lambda s, p: s.positive > s.negative),
    ("declining", lambda s, p: p.trend == "declining"),
    ("improving", lambda s, p: p.trend == "improving"),
)


def match_insight_rule(scores: ConcernScore, pattern: MoodPattern) -> Optional[str]:
    for key, predicate in INSIGHT_RULES:
        if predicate(scores, pattern):
            return key
    return None


def generate_insight(
    history: Iterable[Any] | None,
    mood_symbol: Optional[str],
    journal_text: Optional[str],
    *,
    window: int = DEFAULT_WINDOW,
    lexicon: Lexicon | None = None,
    bank: TemplateBank | None = None,
) -> Ok[str]:
    """One sentence of feedback for a just-logged mood entry."""
    try:
        lexicon = lexicon or load_lexicon()
        bank = bank or load_templates()
        scores = analyze_text(journal_text, lexicon)
        pattern = derive_pattern(history, window, lexicon)
        key = match_insight_rule(scores, pattern)
        logger.debug("insight rule=%s mood=%s", key, mood_symbol)
        if key is None:
            return Ok(value=DEFAULT_INSIGHT)
        return Ok(value=getattr(bank.insights, key))
    except Exception as exc:
        logger.warning("insight generation failed, using default: %s", exc, exc_info=True)
        return Ok(value=DEFAULT_INSIGHT, fallback=True, error=type(exc).__name__)


__all__ = ["DEFAULT_INSIGHT", "INSIGHT_RULES", "generate_insight", "match_insight_rule"]
