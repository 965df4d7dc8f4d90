from __future__ import annotations

import re
from typing import Dict, Iterable, Optional, Set

from mindease.libs.lexicon import KeywordRule, Lexicon, load_lexicon
from mindease.libs.schemas.mood import ConcernScore

_WORD_RE = re.compile(r"\w+", re.UNICODE)


def _fold(text: Optional[str]) -> str:
    return (text or "").casefold()


def _words(folded: str) -> Set[str]:
    return set(_WORD_RE.findall(folded))


def _rule_total(rules: Iterable[KeywordRule], folded: str) -> int:
    return sum(rule.weight for rule in rules if rule.matches(folded))


def _word_hits(vocabulary: Iterable[str], words: Set[str]) -> int:
    return sum(1 for word in vocabulary if word.casefold() in words)


def analyze_text(text: Optional[str], lexicon: Lexicon | None = None) -> ConcernScore:
    """
    Score free text against every concern and the auxiliary counters.

    Rules are additive: each matching rule contributes its weight once, and a
    text may score in several concerns at the same time.
    """
    lexicon = lexicon or load_lexicon()
    folded = _fold(text)
    if not folded:
        return ConcernScore()

    scores: Dict[str, int] = {}
    for name, rules in lexicon.concerns.items():
        scores[name] = _rule_total(rules, folded)
    for name, rules in lexicon.context.items():
        if name in ConcernScore.model_fields:
            scores[name] = _rule_total(rules, folded)

    words = _words(folded)
    scores["positive"] = _word_hits(lexicon.sentiment.positive, words)
    scores["negative"] = _word_hits(lexicon.sentiment.negative, words)
    return ConcernScore(**scores)


__all__ = ["analyze_text"]
