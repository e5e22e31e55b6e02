from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def loose_str(v: Any) -> Any:
    """Числа -> строка; 1.0 == 1 == "1"."""
    if isinstance(v, bool):
        return v
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    if isinstance(v, (int, float)):
        return str(v)
    return v


class Customer(BaseModel):
    # sync может прислать дополнительные поля, сохраняем как есть
    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = ""
    phone: Optional[str] = ""
    email: Optional[str] = ""
    createdAt: Optional[str] = None

    @field_validator("id", "phone", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> Any:
        return loose_str(v)


class XPRecord(BaseModel):
    xp: float | int = 0
    totalXP: float | int = 0

    @field_validator("xp", "totalXP", mode="before")
    @classmethod
    def _none_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class Order(BaseModel):
    model_config = ConfigDict(extra="allow")

    customerId: Optional[str | int | float] = None

    def belongs_to(self, customer_id: str) -> bool:
        """Loose id match: 1, 1.0 and "1" are the same customer."""
        if self.customerId is None:
            return False
        return loose_str(self.customerId) == loose_str(customer_id)


class LoginIn(BaseModel):
    phone: str = Field(..., min_length=1)
    name: Optional[str] = None

    @field_validator("phone", mode="before")
    @classmethod
    def _stringify(cls, v: Any) -> Any:
        return loose_str(v)


class LoginOut(BaseModel):
    success: bool = True
    customer: Customer
    xp: XPRecord


class LeaderboardEntry(BaseModel):
    id: str
    name: Optional[str]
    xp: float | int
    level: str


class CustomerDetailOut(BaseModel):
    customer: Customer
    xp: XPRecord
    orders: list[Order]
    leaderboard: list[LeaderboardEntry]
