"""Settings tests"""
import pytest
from pydantic import ValidationError

from turkish_search.core.config import Settings


def test_defaults():
    s = Settings()
    assert s.search_min_score == 50
    assert s.search_multi_word_min_score == 40
    assert s.search_barcode_match_score == 85
    assert s.search_query_max_length == 100


def test_env_override(monkeypatch):
    monkeypatch.setenv("SEARCH_MIN_SCORE", "60")
    assert Settings().search_min_score == 60


@pytest.mark.parametrize(
    "field, value",
    [
        ("search_min_score", 101),
        ("search_multi_word_min_score", -1),
        ("search_barcode_match_score", 150),
        ("search_query_max_length", 0),
        ("log_level", "LOUD"),
    ],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(**{field: value})
