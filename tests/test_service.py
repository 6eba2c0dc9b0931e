from __future__ import annotations

import asyncio
from decimal import Decimal

import pytest
from fastapi import HTTPException

from stocks import schemas, service


def test_envelope_drops_zero_values() -> None:
    assert service._envelope(5, "ok") == {"id": 5, "message": "ok"}
    assert service._envelope(0, "ok") == {"message": "ok"}
    assert service._envelope(0, "") == {}


def test_stock_response_normalizes_numeric_and_null_columns() -> None:
    row = {"stockid": 3, "name": None, "price": Decimal("12.50"), "company": "Acme Corp"}

    stock = service._to_stock_response(row)

    assert stock == schemas.StockResponse(stockid=3, name="", price=12.5, company="Acme Corp")


def test_get_stock_raises_404_when_absent(fake_repo) -> None:
    with pytest.raises(HTTPException) as excinfo:
        asyncio.run(service.get_stock(1))

    assert excinfo.value.status_code == 404


def test_each_operation_makes_one_repository_call(fake_repo) -> None:
    payload = schemas.StockRequest(name="Acme", price=12.5, company="Acme Corp")

    result = asyncio.run(service.create_stock(payload))
    asyncio.run(service.update_stock(result["id"], payload))
    asyncio.run(service.delete_stock(result["id"]))

    assert fake_repo.calls == ["insert_stock", "update_stock", "delete_stock"]
