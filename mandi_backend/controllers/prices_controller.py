"""
/**
 * @file mandi_backend/controllers/prices_controller.py
 * @description Mandi price feed controller.
 */
"""

from typing import List

from fastapi import APIRouter

from mandi_backend.models import PriceRecord
from mandi_backend.services import get_prices


router = APIRouter()


@router.get("/api/prices", response_model=List[PriceRecord])
def prices():
    return get_prices()
