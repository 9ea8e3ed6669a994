import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.errors import handle_errors
from core.logging_config import configure_logging
from routers import (
    articles as articles_router,
    auth as auth_router,
    user as user_router,
    word_data as word_data_router,
)
from services import segmenter

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.PRELOAD_SEGMENTER:
        # build the segmenter models before the first article comes in
        await asyncio.to_thread(segmenter.warm_up)
    logger.info("LanguageReader started")
    yield


app = FastAPI(title="LanguageReader", lifespan=lifespan)
handle_errors(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router)
app.include_router(user_router.router)
app.include_router(articles_router.router)
app.include_router(word_data_router.router)


@app.get("/status")
async def status():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("main:app", reload=True, host="127.0.0.1", port=8000)
