from typing import List, Optional

from movie_catalog.applications.interfaces.dtos.movie import MovieRequest, MovieResponse
from movie_catalog.domain.models.movie import Movie


class MovieDtoMapper:
    """Maps between movie DTOs and the domain model"""

    @staticmethod
    def request_to_domain(movie_request: MovieRequest, movie_id: Optional[int] = None) -> Movie:
        return Movie(
            id=movie_id,
            title=movie_request.title,
            description=movie_request.description,
            release_date=movie_request.release_date,
            genre=movie_request.genre,
            rating=movie_request.rating,
        )

    @staticmethod
    def to_response(movie: Movie) -> MovieResponse:
        return MovieResponse(
            id=movie.id,
            title=movie.title,
            description=movie.description,
            release_date=movie.release_date,
            genre=movie.genre,
            rating=movie.rating,
        )

    @staticmethod
    def to_responses(movies: List[Movie]) -> List[MovieResponse]:
        return [MovieDtoMapper.to_response(movie) for movie in movies]
