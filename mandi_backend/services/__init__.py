"""
/**
 * @file mandi_backend/services/__init__.py
 * @description Service layer exports.
 */
"""

from .mymemory_client_service import MyMemoryClient
from .price_feed_service import get_prices
from .translation_service import translate

__all__ = [
    "MyMemoryClient",
    "get_prices",
    "translate",
]
