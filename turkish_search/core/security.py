"""Input validation for incoming search queries"""

from turkish_search.core.config import settings
from turkish_search.core.exceptions import InvalidQueryException
from turkish_search.core.logging import logger, sanitize_for_log


class SecurityValidator:
    """Query validation"""

    # NUL and line breaks have no place in a search box
    FORBIDDEN_CHARS = ['\0', '\n', '\r']

    @staticmethod
    def validate_query(query: str) -> bool:
        """Validate a search query

        Empty queries are allowed: they simply rank nothing.

        Raises:
            InvalidQueryException: query too long or contains control characters
        """
        if not query:
            return True

        max_length = settings.search_query_max_length
        if len(query) > max_length:
            raise InvalidQueryException(f"query must be at most {max_length} characters")

        for char in SecurityValidator.FORBIDDEN_CHARS:
            if char in query:
                logger.warning(
                    f"Control character in query: {sanitize_for_log(query)}"
                )
                raise InvalidQueryException("query contains forbidden characters")

        return True
