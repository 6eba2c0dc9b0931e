"""
Stock business logic.

Handlers stay thin: one repository call per request, then shape the result
into the JSON the clients expect.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Stock created successfully"
UPDATED_MESSAGE = "Stock updated successfully. Total rows/record affected {affected}"
DELETED_MESSAGE = "Stock deleted successfully. Total rows/record affected {affected}"


def _envelope(stock_id: int, message: str) -> dict[str, Any]:
    # Zero-valued fields are left out of the body.
    body: dict[str, Any] = {}
    if stock_id:
        body["id"] = stock_id
    if message:
        body["message"] = message
    return body


def _to_stock_response(row: dict) -> schemas.StockResponse:
    return schemas.StockResponse(
        stockid=int(row["stockid"]),
        name=str(row["name"] or ""),
        price=float(row["price"] or 0),
        company=str(row["company"] or ""),
    )


async def create_stock(payload: schemas.StockRequest) -> dict[str, Any]:
    stock_id = await repository.insert_stock(
        name=payload.name,
        price=payload.price,
        company=payload.company,
    )
    logger.info("stock_created stockid=%s", stock_id)
    return _envelope(stock_id, CREATED_MESSAGE)


async def get_stock(stock_id: int) -> schemas.StockResponse:
    row = await repository.get_stock(stock_id)
    if row is None:
        logger.info("stock_not_found stockid=%s", stock_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Stock not found.",
        )
    return _to_stock_response(row)


async def list_stocks() -> list[schemas.StockResponse]:
    rows = await repository.list_stocks()
    return [_to_stock_response(row) for row in rows]


async def update_stock(stock_id: int, payload: schemas.StockRequest) -> dict[str, Any]:
    affected = await repository.update_stock(
        stock_id,
        name=payload.name,
        price=payload.price,
        company=payload.company,
    )
    logger.info("stock_updated stockid=%s affected=%s", stock_id, affected)
    return _envelope(stock_id, UPDATED_MESSAGE.format(affected=affected))


async def delete_stock(stock_id: int) -> dict[str, Any]:
    affected = await repository.delete_stock(stock_id)
    logger.info("stock_deleted stockid=%s affected=%s", stock_id, affected)
    return _envelope(stock_id, DELETED_MESSAGE.format(affected=affected))
