"""Test asset (data) layer

Rules:
- no logic (plain dict/list/primitive)
- no engine or network dependencies
"""

from .catalog import CATEGORIES, PRODUCTS
from .api_payloads import API_PAYLOADS

__all__ = [
    "CATEGORIES",
    "PRODUCTS",
    "API_PAYLOADS",
]
