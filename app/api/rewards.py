from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.levels import LEVELS
from app.schemas.level import HealthOut, LevelOut

router = APIRouter(tags=["rewards"])


@router.get("/rewards", response_model=list[LevelOut])
def list_rewards() -> list[LevelOut]:
    return [LevelOut.model_validate(lvl) for lvl in LEVELS]


@router.get("/health", response_model=HealthOut)
def health() -> HealthOut:
    return HealthOut(status="ok", timestamp=datetime.now(timezone.utc))
