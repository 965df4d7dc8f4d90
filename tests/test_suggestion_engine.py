import pytest

from mindease.apps.engine.suggestion import engine as suggestion_engine
from mindease.apps.engine.suggestion.engine import DEFAULT_GENERAL, rank_concerns, select_suggestion
from mindease.libs.lexicon import LexiconError, TemplateBank
from mindease.libs.schemas.mood import ConcernScore, MoodPattern


@pytest.mark.parametrize(
    "goal, concern",
    [
        ("I want to reduce my stress levels", "stress"),
        ("I need help with my sleep problems", "sleep"),
        ("I'm feeling depressed and need support", "depression"),
        ("I want to build my confidence", "stress"),  # "confidence" is not a lexicon keyword
        ("I want to feel confident and proud", "confidence"),
        ("I'm anxious about everything", "anxiety"),
    ],
)
def test_primary_concern(goal, concern):
    assert select_suggestion([], goal).value.primary_concern == concern


def test_default_indices_with_empty_history(templates):
    res = select_suggestion([], "I want to reduce my stress levels")
    rec = res.value
    assert res.fallback is False
    assert rec.exercise == templates.suggestions["stress"].exercise[0]
    assert rec.app_action == templates.suggestions["stress"].app_action[0]
    assert rec.message == templates.suggestions["stress"].message[0]
    assert rec.source_scores.stress == 2
    assert rec.source_pattern == MoodPattern()


def test_equal_scores_pick_stress():
    assert select_suggestion([], "").value.primary_concern == "stress"
    assert select_suggestion([], "sad and stressed").value.primary_concern == "stress"
    assert select_suggestion([], "nothing in particular").value.primary_concern == "stress"


def test_ties_follow_declaration_order():
    assert select_suggestion([], "tired and anxious").value.primary_concern == "sleep"
    assert rank_concerns(ConcernScore(anxiety=2, confidence=2)) == [
        "anxiety", "confidence", "stress", "sleep", "depression",
    ]


def test_negative_top_score_still_selected():
    # confidence is -1, every other concern 0: stress wins on order
    res = select_suggestion([], "I doubt it")
    assert res.value.primary_concern == "stress"
    assert res.value.source_scores.confidence == -1


def test_declining_trend_uses_encouraging_message(make_history, templates):
    history = make_history(("😔", ""), ("😣", ""), ("😊", ""), ("😔", ""))
    rec = select_suggestion(history, "I feel nervous").value
    assert rec.primary_concern == "anxiety"
    assert rec.message == templates.suggestions["anxiety"].message[1]
    assert rec.exercise == templates.suggestions["anxiety"].exercise[0]
    assert rec.source_pattern.trend == "declining"


def test_improving_trend_keeps_first_message(make_history, templates):
    history = make_history(("😊", ""), ("😊", ""))
    rec = select_suggestion(history, "I feel nervous").value
    assert rec.message == templates.suggestions["anxiety"].message[0]


def test_high_stress_and_sleep_issues_shift_exercise_and_action(make_history, templates):
    history = make_history(("😐", "so much stress, could not sleep"), ("😐", "stress and no sleep"))
    rec = select_suggestion(history, "I'm anxious").value
    assert rec.source_pattern.stress_level == "high"
    assert rec.source_pattern.sleep_issues is True
    assert rec.exercise == templates.suggestions["anxiety"].exercise[1]
    assert rec.app_action == templates.suggestions["anxiety"].app_action[1]
    assert rec.message == templates.suggestions["anxiety"].message[0]


def test_deterministic_output(make_history):
    history = make_history(("😔", "stress at work"), ("😊", "slept well"), ("😣", "panic"))
    first = select_suggestion(history, "I want to sleep better and stop worrying")
    second = select_suggestion(history, "I want to sleep better and stop worrying")
    assert first.model_dump_json() == second.model_dump_json()


def test_single_item_bank_wraps_indices(make_history, single_item_bank):
    history = make_history(
        ("😔", "stress, can't sleep"),
        ("😣", "overwhelmed and exhausted"),
        ("😔", "pressure, insomnia"),
    )
    rec = select_suggestion(history, "I'm anxious", bank=single_item_bank).value
    assert rec.source_pattern.trend == "declining"
    assert rec.source_pattern.stress_level == "high"
    assert rec.source_pattern.sleep_issues is True
    assert rec.exercise == "anxiety exercise"
    assert rec.app_action == "anxiety action"
    assert rec.message == "anxiety message"


def test_missing_template_set_falls_back_to_general(templates):
    bank = TemplateBank(suggestions={}, general=templates.general, insights=templates.insights)
    res = select_suggestion([], "stress", bank=bank)
    assert res.value.primary_concern == "general"
    assert res.value.exercise == templates.general.exercise
    assert res.value.app_action == templates.general.app_action
    assert res.value.message == templates.general.message
    assert res.value.source_scores.stress == 2


def test_internal_error_returns_general_recommendation(monkeypatch, templates):
    def boom(*args, **kwargs):
        raise RuntimeError("lexicon exploded")

    monkeypatch.setattr(suggestion_engine, "analyze_text", boom)
    res = select_suggestion([], "stress")
    assert res.fallback is True
    assert res.error == "RuntimeError"
    assert res.value.primary_concern == "general"
    assert res.value.message == templates.general.message
    assert res.value.source_scores == ConcernScore()
    assert res.value.source_pattern == MoodPattern()


def test_camel_case_serialization():
    dumped = select_suggestion([], "stress").value.model_dump(by_alias=True)
    assert {"exercise", "appAction", "message", "primaryConcern", "sourceScores", "sourcePattern"} <= set(dumped)
    assert "commonMoodCounts" in dumped["sourcePattern"]


def test_template_load_failure_returns_fixed_general(monkeypatch):
    def missing(*args, **kwargs):
        raise LexiconError("templates file not found")

    monkeypatch.setattr(suggestion_engine, "load_templates", missing)
    res = select_suggestion([], "stress")
    assert res.fallback is True
    assert res.error == "LexiconError"
    assert res.value.primary_concern == "general"
    assert res.value.exercise == DEFAULT_GENERAL.exercise
    assert res.value.message == DEFAULT_GENERAL.message


def test_builtin_general_matches_code_default(templates):
    assert templates.general == DEFAULT_GENERAL
