from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.core.security import require_admin
from app.core.store import LoyaltyStore, get_store
from app.schemas.sync import SyncIn, SyncOut
from app.services.customers import sync

router = APIRouter(tags=["admin"])


async def read_sync_payload(request: Request) -> SyncIn:
    # тело читаем только после проверки токена
    raw = await request.body()
    try:
        return SyncIn.model_validate_json(raw or b"{}")
    except ValidationError as exc:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err.get("loc", ()))} for err in exc.errors()]
        )


@router.post("/sync", response_model=SyncOut, dependencies=[Depends(require_admin)])
async def sync_data(request: Request, store: LoyaltyStore = Depends(get_store)) -> SyncOut:
    payload = await read_sync_payload(request)
    sync(store, payload)
    return SyncOut()
