from typing import Any, Dict, List

import pytest

from mindease.libs.lexicon import TemplateBank, load_lexicon, load_templates


@pytest.fixture
def lexicon():
    return load_lexicon()


@pytest.fixture
def templates():
    return load_templates()


@pytest.fixture
def make_history():
    """Newest-first history from (mood, journal) pairs."""

    def _make(*entries: Any) -> List[Dict[str, str]]:
        return [{"mood": mood, "journal": journal} for mood, journal in entries]

    return _make


@pytest.fixture
def single_item_bank(templates) -> TemplateBank:
    def _one(name: str) -> Dict[str, List[str]]:
        return {
            "exercise": [f"{name} exercise"],
            "app_action": [f"{name} action"],
            "message": [f"{name} message"],
        }

    return TemplateBank.model_validate(
        {
            "suggestions": {name: _one(name) for name in ("stress", "sleep", "depression", "anxiety", "confidence")},
            "general": templates.general.model_dump(),
            "insights": templates.insights.model_dump(),
        }
    )
