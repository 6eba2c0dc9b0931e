from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

import main
from stocks import repository


class FakeStockRepository:
    """In-memory stand-in for stocks.repository, keyed by stockid."""

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.next_id = 1
        self.calls: list[str] = []

    async def insert_stock(self, *, name: str, price: float, company: str) -> int:
        self.calls.append("insert_stock")
        stock_id = self.next_id
        self.next_id += 1
        self.rows[stock_id] = {"stockid": stock_id, "name": name, "price": price, "company": company}
        return stock_id

    async def get_stock(self, stock_id: int) -> dict[str, Any] | None:
        self.calls.append("get_stock")
        row = self.rows.get(stock_id)
        return dict(row) if row is not None else None

    async def list_stocks(self) -> list[dict[str, Any]]:
        self.calls.append("list_stocks")
        return [dict(row) for row in self.rows.values()]

    async def update_stock(self, stock_id: int, *, name: str, price: float, company: str) -> int:
        self.calls.append("update_stock")
        if stock_id not in self.rows:
            return 0
        self.rows[stock_id].update(name=name, price=price, company=company)
        return 1

    async def delete_stock(self, stock_id: int) -> int:
        self.calls.append("delete_stock")
        return 1 if self.rows.pop(stock_id, None) is not None else 0


@pytest.fixture
def fake_repo(monkeypatch: pytest.MonkeyPatch) -> FakeStockRepository:
    fake = FakeStockRepository()
    for name in ("insert_stock", "get_stock", "list_stocks", "update_stock", "delete_stock"):
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def client() -> TestClient:
    # Not used as a context manager, so the lifespan (and the DB pool) never starts.
    return TestClient(main.app)
