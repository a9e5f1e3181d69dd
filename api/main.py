# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-14
# Description: main.py
# -----------------------------------------------------------------------------
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

import settings
from api.AppContainer import app_container
from api.routers import guidelines, health

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.WARM_ON_STARTUP:
        # A broken corpus or embedding pipeline stops start-up
        await app_container.status_service.initialize()
    yield


app = FastAPI(title="UDL Guidelines RAG API", lifespan=lifespan)
app.include_router(health.router)
app.include_router(guidelines.router)
