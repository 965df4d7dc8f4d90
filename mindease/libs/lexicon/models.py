from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mindease.libs.schemas.mood import CONCERNS, MoodProfile


class KeywordRule(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: List[str] = Field(min_length=1)
    weight: int

    def matches(self, folded_text: str) -> bool:
        return any(keyword.casefold() in folded_text for keyword in self.keywords)


class SentimentLexicon(BaseModel):
    model_config = ConfigDict(frozen=True)

    positive: List[str] = Field(default_factory=list)
    negative: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _disjoint(self) -> "SentimentLexicon":
        overlap = set(self.positive) & set(self.negative)
        if overlap:
            raise ValueError(f"sentiment words listed as both positive and negative: {sorted(overlap)}")
        return self


class Lexicon(BaseModel):
    """Keyword tables behind text analysis, mood valence and goal tags."""

    model_config = ConfigDict(frozen=True)

    concerns: Dict[str, List[KeywordRule]]
    context: Dict[str, List[KeywordRule]] = Field(default_factory=dict)
    sentiment: SentimentLexicon = Field(default_factory=SentimentLexicon)
    moods: Dict[str, MoodProfile] = Field(default_factory=dict)
    goal_tags: Dict[str, List[str]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_rules(self) -> "Lexicon":
        missing = [name for name in CONCERNS if name not in self.concerns]
        if missing:
            raise ValueError(f"lexicon is missing concerns: {missing}")
        unknown = sorted(set(self.concerns) - set(CONCERNS))
        if unknown:
            raise ValueError(f"lexicon defines unknown concerns: {unknown}")

        # Only the confidence doubt rule may subtract.
        negative = [
            name
            for name, rules in self.concerns.items()
            for rule in rules
            if rule.weight < 0
        ]
        if len(negative) > 1 or any(name != "confidence" for name in negative):
            raise ValueError("only a single confidence rule may carry a negative weight")
        if any(rule.weight < 0 for rules in self.context.values() for rule in rules):
            raise ValueError("context rules must not carry negative weights")
        return self


class TemplateSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise: List[str] = Field(min_length=1)
    app_action: List[str] = Field(min_length=1)
    message: List[str] = Field(min_length=1)


class GeneralTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise: str
    app_action: str
    message: str


class InsightTemplates(BaseModel):
    model_config = ConfigDict(frozen=True)

    stress: str
    sleep: str
    depression: str
    anxiety: str
    positive: str
    declining: str
    improving: str


class TemplateBank(BaseModel):
    """Per-concern suggestion lists plus the general and insight sentences."""

    model_config = ConfigDict(frozen=True)

    suggestions: Dict[str, TemplateSet]
    general: GeneralTemplate
    insights: InsightTemplates


__all__ = [
    "GeneralTemplate",
    "InsightTemplates",
    "KeywordRule",
    "Lexicon",
    "SentimentLexicon",
    "TemplateBank",
    "TemplateSet",
]
