"""
Pydantic schemas for stock endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StockRequest(BaseModel):
    # Missing fields decode to zero values; a client-sent stockid is ignored.
    name: str = ""
    price: float = Field(default=0.0, allow_inf_nan=False)
    company: str = ""


class StockResponse(BaseModel):
    stockid: int
    name: str
    price: float
    company: str
