"""Settings - environment variable loading and validation"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings"""

    # Runtime
    environment: str = "development"

    # API
    api_title: str = "Turkish Search Service"
    api_version: str = "1.0.0"
    api_description: str = "Diacritic-insensitive search and ranking for categories and products."

    # Search thresholds
    # NOTE: category filters use the single-word ladder, product search uses
    # the multi-word ladder, so the two thresholds are tuned separately.
    search_min_score: int = 50
    search_multi_word_min_score: int = 40

    # Barcode substring hit during product search
    search_barcode_match_score: int = 85

    # Longer queries are truncated by sanitize_search_query and rejected by the API
    search_query_max_length: int = 100

    # Logging
    log_level: str = "INFO"

    @field_validator(
        "search_min_score",
        "search_multi_word_min_score",
        "search_barcode_match_score",
    )
    @classmethod
    def validate_score_range(cls, v: int) -> int:
        if v < 0 or v > 100:
            raise ValueError("search scores must be within 0..100")
        return v

    @field_validator("search_query_max_length")
    @classmethod
    def validate_query_max_length(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("search_query_max_length must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log_level: {v}")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
