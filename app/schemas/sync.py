from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.customer import Customer, Order, XPRecord


class SyncIn(BaseModel):
    """
    Полная выгрузка из админки.
    Каждая переданная коллекция заменяет текущую целиком, без merge.
    """
    model_config = ConfigDict(extra="ignore")

    customers: Optional[list[Customer]] = None
    customerXP: Optional[dict[str, XPRecord]] = None
    orders: Optional[list[Order]] = None


class SyncOut(BaseModel):
    success: bool = True
    message: str = "Data synced"
