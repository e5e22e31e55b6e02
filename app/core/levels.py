from dataclasses import dataclass


@dataclass(frozen=True)
class Level:
    level: int
    name: str
    xpRequired: int
    reward: str


# Пороги по xp, строго по возрастанию
LEVELS: tuple[Level, ...] = (
    Level(1, "STARTER", 0, "Welkom bij Kenzie!"),
    Level(2, "BRONZE", 100, "-€5 korting!"),
    Level(3, "SILVER", 300, "-10% korting!"),
    Level(4, "GOLD", 600, "Gratis verzending!"),
    Level(5, "PLATINUM", 1000, "-15% korting!"),
    Level(6, "DIAMOND", 1500, "Gratis product!"),
)

FALLBACK_LEVEL_NAME = "Starter"


def level_name(xp: int) -> str:
    for lvl in reversed(LEVELS):
        if xp >= lvl.xpRequired:
            return lvl.name
    return FALLBACK_LEVEL_NAME