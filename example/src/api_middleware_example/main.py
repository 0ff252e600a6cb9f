import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .routers import api_router
from .routers.items_router import items

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info('Starting example API')

    yield

    items.clear()


api = FastAPI(lifespan=lifespan)

api.include_router(api_router)
