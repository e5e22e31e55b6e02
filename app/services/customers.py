from __future__ import annotations

import logging

from app.core.errors import CustomerNotFound
from app.core.store import LoyaltyStore
from app.schemas.customer import CustomerDetailOut, LoginIn, LoginOut, XPRecord
from app.schemas.sync import SyncIn
from app.services.leaderboard import build_leaderboard

logger = logging.getLogger(__name__)


def login(store: LoyaltyStore, payload: LoginIn) -> LoginOut:
    customer, created = store.find_or_create(payload.phone, payload.name)
    if customer is None:
        raise CustomerNotFound(payload.phone)
    if created:
        logger.info("New customer registered: id=%s", customer.id)
    return LoginOut(customer=customer, xp=store.xp_for(customer.id))


def customer_detail(store: LoyaltyStore, customer_id: str) -> CustomerDetailOut:
    customers, customer_xp, orders = store.snapshot()

    customer = next((c for c in customers if c.id == str(customer_id)), None)
    if customer is None:
        raise CustomerNotFound(customer_id)

    return CustomerDetailOut(
        customer=customer,
        xp=customer_xp.get(customer.id) or XPRecord(),
        orders=[o for o in orders if o.belongs_to(customer_id)],
        leaderboard=build_leaderboard(customers, customer_xp),
    )


def sync(store: LoyaltyStore, payload: SyncIn) -> None:
    store.replace(
        customers=payload.customers,
        customer_xp=payload.customerXP,
        orders=payload.orders,
    )
    logger.info("Data synced: %s", store.counts())
