"""Словари классификаторов D2 (YAML профили + Pydantic модель)."""

from .keyword_config import KeywordConfig, KeywordConfigLoader, load_keyword_config

__all__ = [
    "KeywordConfig",
    "KeywordConfigLoader",
    "load_keyword_config",
]
