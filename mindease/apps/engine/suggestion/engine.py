from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from mindease.apps.engine.mood_pattern.engine import DEFAULT_WINDOW, derive_pattern
from mindease.apps.engine.text_analyzer.engine import analyze_text
from mindease.libs.lexicon import GeneralTemplate, Lexicon, TemplateBank, load_lexicon, load_templates
from mindease.libs.schemas.mood import (
    CONCERNS,
    GENERAL_CONCERN,
    ConcernScore,
    MoodPattern,
    Ok,
    Recommendation,
)

logger = logging.getLogger(__name__)

# Returned whenever selection fails, including when the tables cannot be loaded.
DEFAULT_GENERAL = GeneralTemplate(
    exercise="Start with a simple 3-minute meditation: Sit comfortably and focus on your breath.",
    app_action="Log your mood daily to build awareness of your emotional patterns.",
    message="Every goal starts with a single step. You've got this!",
)


def rank_concerns(scores: ConcernScore) -> List[str]:
    """Concerns by descending score; sorted() is stable, so ties keep declaration order."""
    values = scores.concerns()
    return sorted(CONCERNS, key=lambda name: -values[name])


def _pick(options: List[str], index: int) -> str:
    return options[index % len(options)]


def general_recommendation(
    general: GeneralTemplate = DEFAULT_GENERAL,
    scores: ConcernScore | None = None,
    pattern: MoodPattern | None = None,
) -> Recommendation:
    return Recommendation(
        exercise=general.exercise,
        app_action=general.app_action,
        message=general.message,
        primary_concern=GENERAL_CONCERN,
        source_scores=scores or ConcernScore(),
        source_pattern=pattern or MoodPattern(),
    )


def select_suggestion(
    history: Iterable[Any] | None,
    free_text: Optional[str],
    *,
    window: int = DEFAULT_WINDOW,
    lexicon: Lexicon | None = None,
    bank: TemplateBank | None = None,
) -> Ok[Recommendation]:
    """
    Pick one exercise, app action and message for ``free_text``.

    The top-ranked concern chooses the template set even when its score is
    zero or negative. The mood pattern shifts list indices: a declining trend
    picks the more encouraging message, high stress the more intensive
    exercise, sleep issues the sleep-directed action.
    """
    scores: ConcernScore | None = None
    pattern: MoodPattern | None = None
    try:
        lexicon = lexicon or load_lexicon()
        bank = bank or load_templates()
        scores = analyze_text(free_text, lexicon)
        pattern = derive_pattern(history, window, lexicon)
        primary = rank_concerns(scores)[0]

        templates = bank.suggestions.get(primary)
        if templates is None:
            logger.info("no template set for concern=%s, using general suggestion", primary)
            return Ok(value=general_recommendation(bank.general, scores, pattern))

        exercise_index = 0
        app_action_index = 0
        message_index = 0
        if pattern.trend == "declining":
            message_index = 1
        elif pattern.trend == "improving":
            message_index = 0
        if pattern.stress_level == "high":
            exercise_index = 1
        if pattern.sleep_issues:
            app_action_index = 1

        recommendation = Recommendation(
            exercise=_pick(templates.exercise, exercise_index),
            app_action=_pick(templates.app_action, app_action_index),
            message=_pick(templates.message, message_index),
            primary_concern=primary,
            source_scores=scores,
            source_pattern=pattern,
        )
        return Ok(value=recommendation)
    except Exception as exc:
        logger.warning("suggestion selection failed, using general suggestion: %s", exc, exc_info=True)
        return Ok(
            value=general_recommendation(DEFAULT_GENERAL, scores, pattern),
            fallback=True,
            error=type(exc).__name__,
        )


__all__ = ["DEFAULT_GENERAL", "general_recommendation", "rank_concerns", "select_suggestion"]
