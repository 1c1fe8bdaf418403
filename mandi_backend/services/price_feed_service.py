"""
/**
 * @file mandi_backend/services/price_feed_service.py
 * @description APMC price feed simulation. Static records until a real feed (data.gov.in) is wired in.
 */
"""

from __future__ import annotations

from typing import List

from mandi_backend.models.price_record_model import PriceRecord


MOCK_PRICES = (
    {"item": "Wheat (Kanak)", "price": 2450, "change": "+20", "location": "Azadpur"},
    {"item": "Basmati Rice", "price": 4200, "change": "-15", "location": "Nagpur"},
    {"item": "Tomato", "price": 1800, "change": "+50", "location": "Nashik"},
    {"item": "Potato", "price": 1250, "change": "+5", "location": "Agra"},
)


def get_prices() -> List[PriceRecord]:
    return [PriceRecord(**row) for row in MOCK_PRICES]
