"""
Stock CRUD API endpoints.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Path

from . import schemas, service

router = APIRouter()

# stockid is a BIGINT column; anything outside int64 is malformed input.
StockId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.post("/stock")
async def create_stock(request: schemas.StockRequest) -> dict:
    return await service.create_stock(request)


@router.get("/stock/{stock_id}")
async def get_stock(stock_id: StockId) -> schemas.StockResponse:
    return await service.get_stock(stock_id)


@router.get("/stock")
async def list_stocks() -> list[schemas.StockResponse]:
    return await service.list_stocks()


@router.put("/stock/{stock_id}")
async def update_stock(stock_id: StockId, request: schemas.StockRequest) -> dict:
    return await service.update_stock(stock_id, request)


@router.delete("/stock/{stock_id}")
async def delete_stock(stock_id: StockId) -> dict:
    return await service.delete_stock(stock_id)
