import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog.infrastructure.config.settings import Settings
from movie_catalog.infrastructure.logging.logger import setup_logging
from movie_catalog.infrastructure.persistence.database import create_tables, dispose_engine, get_engine, set_engine
from movie_catalog.presentation.error_handlers import register_exception_handlers
from movie_catalog.presentation.routers import health, movies


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL, noisy_libs={"sqlalchemy.engine": logging.WARNING})

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = get_engine()
        set_engine(engine)
        if settings.CREATE_TABLES:
            await create_tables(engine)
        try:
            yield
        finally:
            await dispose_engine()

    app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(movies.router)

    return app


app = create_app()
