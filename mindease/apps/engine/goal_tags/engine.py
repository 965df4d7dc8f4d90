from __future__ import annotations

from typing import List, Optional

from mindease.libs.lexicon import Lexicon, load_lexicon


def extract_goal_tags(text: Optional[str], lexicon: Lexicon | None = None) -> List[str]:
    """Category tags for a goal statement, in lexicon order."""
    lexicon = lexicon or load_lexicon()
    folded = (text or "").casefold()
    if not folded:
        return []
    return [
        tag
        for tag, keywords in lexicon.goal_tags.items()
        if any(keyword.casefold() in folded for keyword in keywords)
    ]


__all__ = ["extract_goal_tags"]
