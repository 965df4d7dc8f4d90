from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from mindease.apps.engine.text_analyzer.engine import analyze_text
from mindease.libs.lexicon import Lexicon, load_lexicon
from mindease.libs.schemas.mood import NEUTRAL_PROFILE, MoodPattern, MoodProfile, MoodRecord

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 10

TREND_RATIO = 1.5
HIGH_STRESS_MEAN = 1.5
MODERATE_STRESS_MEAN = 0.5
SLEEP_ISSUE_MEAN = 1.0


def mood_profile(symbol: Optional[str], lexicon: Lexicon | None = None) -> MoodProfile:
    """Category, energy and valence of a mood symbol; unknown symbols are neutral."""
    lexicon = lexicon or load_lexicon()
    return lexicon.moods.get(symbol or "", NEUTRAL_PROFILE)


def _coerce_record(item: Any) -> MoodRecord | None:
    if isinstance(item, MoodRecord):
        return item
    if isinstance(item, Mapping):
        try:
            return MoodRecord.model_validate(dict(item))
        except ValidationError as exc:
            logger.debug("mood record skipped: error=%s", exc)
            return None
    logger.debug("mood record skipped: unsupported type=%s", type(item).__name__)
    return None


def recent_records(history: Iterable[Any] | None, window: int = DEFAULT_WINDOW) -> List[MoodRecord]:
    """First ``window`` usable records of a newest-first history."""
    window = max(int(window), 0)
    records: List[MoodRecord] = []
    for item in history or []:
        if len(records) >= window:
            break
        record = _coerce_record(item)
        if record is not None:
            records.append(record)
    return records


def _trend(positive: int, negative: int) -> str:
    if negative > positive * TREND_RATIO:
        return "declining"
    if positive > negative * TREND_RATIO:
        return "improving"
    return "stable"


def _stress_level(mean_stress: float) -> str:
    if mean_stress > HIGH_STRESS_MEAN:
        return "high"
    if mean_stress > MODERATE_STRESS_MEAN:
        return "moderate"
    return "low"


def derive_pattern(
    history: Iterable[Any] | None,
    window: int = DEFAULT_WINDOW,
    lexicon: Lexicon | None = None,
) -> MoodPattern:
    """
    Summarize the newest ``window`` mood records.

    Trend compares positive and negative valence counts with a 1.5x margin;
    stress level and sleep issues come from mean keyword scores of the
    journal texts.
    """
    lexicon = lexicon or load_lexicon()
    records = recent_records(history, window)
    if not records:
        return MoodPattern()

    valences = [mood_profile(record.mood_symbol, lexicon).valence for record in records]
    positive = valences.count("positive")
    negative = valences.count("negative")

    counts: Dict[str, int] = {}
    for record in records:
        counts[record.mood_symbol] = counts.get(record.mood_symbol, 0) + 1

    analyses = [analyze_text(record.journal_text, lexicon) for record in records]
    mean_stress = sum(a.stress for a in analyses) / len(analyses)
    mean_sleep = sum(a.sleep for a in analyses) / len(analyses)

    return MoodPattern(
        trend=_trend(positive, negative),
        common_mood_counts=counts,
        stress_level=_stress_level(mean_stress),
        sleep_issues=mean_sleep > SLEEP_ISSUE_MEAN,
    )


__all__ = ["DEFAULT_WINDOW", "derive_pattern", "mood_profile", "recent_records"]
