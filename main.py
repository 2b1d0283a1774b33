import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from core.config import settings
from core.errors import register_error_handlers
from core.logging import configure_logging
from routers import (
    auth as auth_router,
    dictionary as dictionary_router,
    user as user_router,
)
from routers.auth import security
from services.analysis_client import WordAnalysisClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set, word analysis requests will fail")
    client = WordAnalysisClient.from_settings(settings)
    app.state.analysis_client = client
    try:
        yield
    finally:
        await client.aclose()


app = FastAPI(title="LanguageApp Dictionary", lifespan=lifespan)
security.handle_errors(app)
register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(user_router.router)
app.include_router(dictionary_router.router)


@app.get("/status")
async def status():
    return {"status": "ok"}

if __name__ == "__main__":
    uvicorn.run("main:app", reload=True, host="127.0.0.1", port=8000)
