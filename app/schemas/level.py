from datetime import datetime

from pydantic import BaseModel, ConfigDict


class LevelOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: int
    name: str
    xpRequired: int
    reward: str


class HealthOut(BaseModel):
    status: str
    timestamp: datetime
