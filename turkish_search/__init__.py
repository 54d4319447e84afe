"""Turkish diacritic-insensitive search ranking service."""

__version__ = "1.0.0"
