from app.schemas.customer import (
    Customer,
    XPRecord,
    Order,
    LoginIn,
    LoginOut,
    LeaderboardEntry,
    CustomerDetailOut,
)
from app.schemas.sync import SyncIn, SyncOut
from app.schemas.level import LevelOut, HealthOut

__all__ = [
    "Customer",
    "XPRecord",
    "Order",
    "LoginIn",
    "LoginOut",
    "LeaderboardEntry",
    "CustomerDetailOut",
    "SyncIn",
    "SyncOut",
    "LevelOut",
    "HealthOut",
]
