from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.applications.services.movie_service import MovieService
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort
from movie_catalog.infrastructure.adapters.repositories.sqlalchemy_movie_repository import (
    SQLAlchemyMovieRepository,
)
from movie_catalog.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movie_catalog.infrastructure.persistence.database import get_session


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("movie_catalog.movies")


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)


def get_movie_service(
    movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> MovieServicePort:
    return MovieService(movie_repository=movie_repository, logger=logger)
