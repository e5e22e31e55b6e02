# main.py
import logging
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.responses import FileResponse

from app.core.config import settings
from app.core.errors import register_error_handlers

from app.api.sync import router as sync_router
from app.api.customers import router as customers_router
from app.api.rewards import router as rewards_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("kenzie")

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = Path(settings.STATIC_DIR)
if not STATIC_DIR.is_absolute():
    STATIC_DIR = BASE_DIR / STATIC_DIR

app = FastAPI(title="Kenzie Customer Portal")

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------------
# Static
# -------------------------
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(sync_router, prefix="/api")
app.include_router(customers_router, prefix="/api")
app.include_router(rewards_router, prefix="/api")


@app.on_event("startup")
def announce():
    if not settings.ADMIN_TOKEN:
        logger.warning("ADMIN_TOKEN is not set: /api/sync will reject every request")
    logger.info("Kenzie Customer Portal running on port %s", settings.PORT)


@app.get("/", include_in_schema=False)
def portal():
    return FileResponse(STATIC_DIR / "index.html")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
