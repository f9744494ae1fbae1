"""
API routes for the rent vs invest calculator.
"""

from fastapi import APIRouter

from rent_vs_invest.api import calculations

router = APIRouter()

router.include_router(calculations.router, prefix="/calculate", tags=["calculations"])
