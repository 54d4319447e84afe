"""Edge case and input validation tests"""
import pytest

from turkish_search.core.exceptions import (
    InvalidQueryException,
    SearchServiceException,
    ValidationException,
)
from turkish_search.core.logging import sanitize_for_log
from turkish_search.core.security import SecurityValidator
from turkish_search.utils.text import sanitize_search_query


class TestSecurityValidation:
    """Query validation"""

    def test_valid_query(self):
        assert SecurityValidator.validate_query("Kişisel Bakım") is True

    def test_empty_query_allowed(self):
        assert SecurityValidator.validate_query("") is True

    def test_query_length_limit(self):
        with pytest.raises(InvalidQueryException):
            SecurityValidator.validate_query("a" * 101)

    def test_query_at_length_limit(self):
        assert SecurityValidator.validate_query("a" * 100) is True

    @pytest.mark.parametrize("query", ["süt\n", "süt\r", "s\0t"])
    def test_control_characters(self, query):
        with pytest.raises(ValidationException):
            SecurityValidator.validate_query(query)


class TestExceptions:
    def test_hierarchy(self):
        e = InvalidQueryException("too long")
        assert isinstance(e, ValidationException)
        assert isinstance(e, SearchServiceException)

    def test_error_code_and_details(self):
        e = InvalidQueryException("too long")
        assert e.error_code == "VALIDATION_ERROR"
        assert e.details == {"field": "query", "reason": "too long"}
        assert str(e) == "[VALIDATION_ERROR] Validation failed for 'query': too long"


class TestSanitizeSearchQuery:
    def test_trims(self):
        assert sanitize_search_query("  süt  ") == "süt"

    def test_escapes_like_wildcards(self):
        assert sanitize_search_query("%50_indirim") == "\\%50\\_indirim"

    def test_strips_angle_brackets(self):
        assert sanitize_search_query("<b>süt</b>") == "bsüt/b"

    def test_truncates(self):
        assert sanitize_search_query("a" * 150) == "a" * 100
        assert sanitize_search_query("abcdef", max_length=3) == "abc"

    @pytest.mark.parametrize("value", [None, "", 12, ["süt"]])
    def test_invalid_input(self, value):
        assert sanitize_search_query(value) == ""

    def test_turkish_untouched(self):
        assert sanitize_search_query("Çay Şeker") == "Çay Şeker"


class TestSanitizeForLog:
    def test_empty(self):
        assert sanitize_for_log("") == "[empty]"

    def test_single_line(self):
        assert sanitize_for_log("a\nb") == "a b"

    def test_truncated(self):
        assert sanitize_for_log("x" * 150) == "x" * 100 + "..."
