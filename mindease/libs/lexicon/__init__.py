from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from mindease.libs.lexicon.models import (
    GeneralTemplate,
    InsightTemplates,
    KeywordRule,
    Lexicon,
    SentimentLexicon,
    TemplateBank,
    TemplateSet,
)

LEXICON_PATH = os.path.join(os.path.dirname(__file__), "lexicon.yaml")
TEMPLATES_PATH = os.path.join(os.path.dirname(__file__), "templates.yaml")


class LexiconError(ValueError):
    """A data table is missing or does not validate."""


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(os.path.abspath(path), "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except OSError as exc:
        raise LexiconError(f"cannot read table {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise LexiconError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise LexiconError(f"table {path} must be a YAML mapping")
    return data


def read_lexicon(path: str) -> Lexicon:
    try:
        return Lexicon.model_validate(_read_yaml(path))
    except ValidationError as exc:
        raise LexiconError(f"lexicon {path} failed validation: {exc}") from exc


def read_templates(path: str) -> TemplateBank:
    try:
        return TemplateBank.model_validate(_read_yaml(path))
    except ValidationError as exc:
        raise LexiconError(f"templates {path} failed validation: {exc}") from exc


@lru_cache(maxsize=4)
def load_lexicon(path: Optional[str] = None) -> Lexicon:
    return read_lexicon(path or LEXICON_PATH)


@lru_cache(maxsize=4)
def load_templates(path: Optional[str] = None) -> TemplateBank:
    return read_templates(path or TEMPLATES_PATH)


__all__ = [
    "GeneralTemplate",
    "InsightTemplates",
    "KeywordRule",
    "LEXICON_PATH",
    "Lexicon",
    "LexiconError",
    "SentimentLexicon",
    "TEMPLATES_PATH",
    "TemplateBank",
    "TemplateSet",
    "load_lexicon",
    "load_templates",
    "read_lexicon",
    "read_templates",
]
