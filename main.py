import contextlib
import logging

import uvicorn
from fastapi import FastAPI

from affirmations.config import config
from affirmations.db import Base
from affirmations.db.session import engine
from affirmations.error_handlers import register_error_handlers
from affirmations.routers import register_routers
from affirmations.utils.observability import setup_logging

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(_app: FastAPI):
    setup_logging(config.LOG_LEVEL, config.LOG_FORMAT)

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)

    logger.info("Affirmations API started")
    yield
    await engine.dispose()
    logger.info("Affirmations API stopped")


app = FastAPI(title="Affirmations API", lifespan=lifespan)
register_routers(app)
register_error_handlers(app)


if __name__ == "__main__":
    uvicorn.run(app, host=config.FASTAPI_HOST, port=config.FASTAPI_PORT)
