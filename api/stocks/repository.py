"""
Stock persistence (raw SQL).

Every function runs exactly one statement on a pooled connection.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from core import db


def _price_arg(price: float) -> Decimal:
    # str() first so 12.5 is stored as 12.5, not its binary float expansion.
    return Decimal(str(price))


async def insert_stock(*, name: str, price: float, company: str) -> int:
    row = await db.fetch_one(
        """
        INSERT INTO stocks (name, price, company)
        VALUES ($1, $2, $3)
        RETURNING stockid
        """,
        name,
        _price_arg(price),
        company,
    )
    if row is None or "stockid" not in row:
        raise db.DatabaseError("Failed to insert stock.")
    return int(row["stockid"])


async def get_stock(stock_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT stockid, name, price, company
        FROM stocks
        WHERE stockid = $1
        """,
        stock_id,
    )


async def list_stocks() -> list[dict[str, Any]]:
    """
    All stocks, in whatever order the server returns them.
    """
    return await db.fetch_all(
        """
        SELECT stockid, name, price, company
        FROM stocks
        """
    )


async def update_stock(stock_id: int, *, name: str, price: float, company: str) -> int:
    """
    Overwrite all non-key fields. Returns the affected row count.
    """
    return await db.execute_count(
        """
        UPDATE stocks
        SET name = $2,
            price = $3,
            company = $4
        WHERE stockid = $1
        """,
        stock_id,
        name,
        _price_arg(price),
        company,
    )


async def delete_stock(stock_id: int) -> int:
    return await db.execute_count(
        """
        DELETE FROM stocks
        WHERE stockid = $1
        """,
        stock_id,
    )
