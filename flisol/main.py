from contextlib import asynccontextmanager

import logging

from fastapi import FastAPI

from flisol import config
from flisol.api import articles
from flisol.db import sa


logger = logging.getLogger("flisol")


@asynccontextmanager
async def lifespan(app: FastAPI):
    await sa.init_sa_engine()
    logger.info(
        "Serving /rest/articles",
        extra={"event": "startup", "public_files_path": config.PUBLIC_FILES_PATH},
    )
    try:
        yield
    finally:
        await sa.close_sa_engine()


app = FastAPI(title="flisol articles", lifespan=lifespan, root_path=config.ROOT_PATH)
app.include_router(articles.router)

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
