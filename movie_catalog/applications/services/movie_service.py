from typing import List

from movie_catalog.applications.interfaces.dtos.movie import MovieRequest, MovieResponse
from movie_catalog.applications.services.movie_dto_mapper import MovieDtoMapper
from movie_catalog.domain.exceptions import MovieNotFoundError
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.domain.ports.services.logger import LoggerPort
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort


class MovieService(MovieServicePort):
    """Application service for the movie catalog. Holds no state between calls."""

    def __init__(self, movie_repository: MovieRepository, logger: LoggerPort):
        self.movie_repository = movie_repository
        self.logger = logger

    async def create_movie(self, movie_request: MovieRequest) -> MovieResponse:
        movie = MovieDtoMapper.request_to_domain(movie_request)
        created_movie = await self.movie_repository.create(movie)
        if created_movie.id is None:
            raise RuntimeError("Movie creation failed - no ID assigned")

        self.logger.info("Created movie %s '%s'", created_movie.id, created_movie.title)
        return MovieDtoMapper.to_response(created_movie)

    async def get_movie_by_id(self, movie_id: int) -> MovieResponse:
        movie = await self.movie_repository.get_by_id(movie_id)
        if movie is None:
            self.logger.warning("Movie %s not found", movie_id)
            raise MovieNotFoundError(movie_id)

        return MovieDtoMapper.to_response(movie)

    async def get_all_movies(self) -> List[MovieResponse]:
        movies = await self.movie_repository.get_all()
        return MovieDtoMapper.to_responses(movies)

    async def update_movie(self, movie_id: int, movie_request: MovieRequest) -> MovieResponse:
        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if existing_movie is None:
            self.logger.warning("Cannot update movie %s: not found", movie_id)
            raise MovieNotFoundError(movie_id)

        updated_movie = await self.movie_repository.update(
            MovieDtoMapper.request_to_domain(movie_request, movie_id=existing_movie.id)
        )

        self.logger.info("Updated movie %s", movie_id)
        return MovieDtoMapper.to_response(updated_movie)

    async def delete_movie(self, movie_id: int) -> None:
        if not await self.movie_repository.exists_by_id(movie_id):
            self.logger.warning("Cannot delete movie %s: not found", movie_id)
            raise MovieNotFoundError(movie_id)

        await self.movie_repository.delete(movie_id)
        self.logger.info("Deleted movie %s", movie_id)

    async def get_movies_by_genre(self, genre: str) -> List[MovieResponse]:
        # exact, case-sensitive match
        movies = await self.movie_repository.get_by_genre(genre)
        return MovieDtoMapper.to_responses(movies)

    async def get_movies_by_release_year(self, year: int) -> List[MovieResponse]:
        movies = await self.movie_repository.get_by_release_year(year)
        return MovieDtoMapper.to_responses(movies)

    async def get_distinct_genres(self) -> List[str]:
        return await self.movie_repository.get_distinct_genres()

    async def get_distinct_years(self) -> List[int]:
        return await self.movie_repository.get_distinct_release_years()
