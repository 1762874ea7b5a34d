# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: main.py
# -----------------------------------------------------------------------------
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

import settings
from api.AppContainer import get_app_container
from api.error_handlers import register_error_handlers
from api.routers import chat, embed, health

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build OpenAI + Chroma clients once, before the first request
    get_app_container()
    yield


app = FastAPI(title="GIXRAG API", lifespan=lifespan)
register_error_handlers(app)
app.include_router(embed.router)
app.include_router(chat.router)
app.include_router(health.router)


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    return "Hello, World!"


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
