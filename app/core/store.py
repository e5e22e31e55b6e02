# app/core/store.py
"""
In-memory хранилище портала.

Данные живут только в процессе и приходят из админки через /api/sync.
Все чтения и записи идут под одним lock: sync заменяет коллекции атомарно
относительно логинов и чтений.
"""
from __future__ import annotations

import threading
import time
from datetime import datetime, timezone
from typing import Iterable

from app.schemas.customer import Customer, Order, XPRecord


class LoyaltyStore:
    def __init__(
        self,
        customers: Iterable[Customer] | None = None,
        customer_xp: dict[str, XPRecord] | None = None,
        orders: Iterable[Order] | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._customers: list[Customer] = list(customers or [])
        self._customer_xp: dict[str, XPRecord] = dict(customer_xp or {})
        self._orders: list[Order] = list(orders or [])

    # ── sync ──────────────────────────────────────────

    def replace(
        self,
        customers: list[Customer] | None = None,
        customer_xp: dict[str, XPRecord] | None = None,
        orders: list[Order] | None = None,
    ) -> None:
        with self._lock:
            if customers is not None:
                self._customers = list(customers)
            if customer_xp is not None:
                self._customer_xp = dict(customer_xp)
            if orders is not None:
                self._orders = list(orders)

    # ── customers ─────────────────────────────────────

    def find_by_phone(self, phone: str) -> Customer | None:
        with self._lock:
            return next((c for c in self._customers if c.phone == phone), None)

    def find_or_create(self, phone: str, name: str | None) -> tuple[Customer | None, bool]:
        """Returns (customer, created). Creates only when a name is given."""
        with self._lock:
            existing = self.find_by_phone(phone)
            if existing or not name:
                return existing, False

            customer = Customer(
                id=self._next_id(),
                name=name,
                phone=phone,
                email="",
                createdAt=datetime.now(timezone.utc).isoformat(),
            )
            self._customers.append(customer)
            self._customer_xp[customer.id] = XPRecord()
            return customer, True

    def _next_id(self) -> str:
        # id = timestamp в ms; при коллизии сдвигаем на 1
        candidate = int(time.time() * 1000)
        taken = {c.id for c in self._customers} | set(self._customer_xp)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    # ── xp / orders ───────────────────────────────────

    def xp_for(self, customer_id: str) -> XPRecord:
        with self._lock:
            return self._customer_xp.get(str(customer_id)) or XPRecord()

    def snapshot(self) -> tuple[list[Customer], dict[str, XPRecord], list[Order]]:
        with self._lock:
            return list(self._customers), dict(self._customer_xp), list(self._orders)

    def counts(self) -> dict[str, int]:
        with self._lock:
            return {
                "customers": len(self._customers),
                "customerXP": len(self._customer_xp),
                "orders": len(self._orders),
            }


_store = LoyaltyStore()


def get_store() -> LoyaltyStore:
    return _store
