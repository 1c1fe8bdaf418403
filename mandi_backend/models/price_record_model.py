"""
/**
 * @file mandi_backend/models/price_record_model.py
 * @description Mandi price record model (Pydantic).
 */
"""

from __future__ import annotations

from pydantic import BaseModel


class PriceRecord(BaseModel):
    item: str
    price: int
    # signed display delta, e.g. "+20"
    change: str
    location: str
