"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from ragchat.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults_match_reference_chunking() -> None:
    settings = _settings()
    assert settings.chunk_size == 500
    assert settings.chunk_overlap == 100
    assert settings.retrieval_max_results == 3


def test_effective_min_score_is_max_of_both() -> None:
    assert _settings(vector_min_score=0.5, retrieval_min_score=0.7).effective_min_score == 0.7
    assert _settings(vector_min_score=0.8, retrieval_min_score=0.7).effective_min_score == 0.8


def test_overlap_must_be_smaller_than_chunk_size() -> None:
    with pytest.raises(PydanticValidationError):
        _settings(chunk_size=100, chunk_overlap=100)


def test_score_bounds() -> None:
    with pytest.raises(PydanticValidationError):
        _settings(retrieval_min_score=1.5)


def test_list_parsing() -> None:
    settings = _settings(allowed_extensions=" .MD, txt ,,", cors_origins="http://a, http://b")
    assert settings.allowed_extension_list == ("md", "txt")
    assert settings.cors_origin_list == ["http://a", "http://b"]


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv("VECTOR_INDEX_BACKEND", "memory")
    monkeypatch.setenv("CHUNK_SIZE", "800")
    settings = _settings()
    assert settings.vector_index_backend == "memory"
    assert settings.chunk_size == 800
