from __future__ import annotations

from app.core.levels import level_name
from app.schemas.customer import Customer, LeaderboardEntry, XPRecord

LEADERBOARD_SIZE = 10


def display_name(customer: Customer | None, customer_id: str) -> str | None:
    if customer is not None:
        return customer.name
    return f"Klant {customer_id}"


def build_leaderboard(
    customers: list[Customer],
    customer_xp: dict[str, XPRecord],
    limit: int = LEADERBOARD_SIZE,
) -> list[LeaderboardEntry]:
    """
    Топ по totalXP. Уровень считается по xp, не по totalXP.
    При равенстве сохраняется порядок customer_xp (sorted стабилен).
    """
    by_id: dict[str, Customer] = {}
    for c in customers:
        by_id.setdefault(c.id, c)

    rows = [
        LeaderboardEntry(
            id=cid,
            name=display_name(by_id.get(cid), cid),
            xp=rec.totalXP or 0,
            level=level_name(rec.xp or 0),
        )
        for cid, rec in customer_xp.items()
    ]
    rows.sort(key=lambda r: r.xp, reverse=True)
    return rows[:limit]
