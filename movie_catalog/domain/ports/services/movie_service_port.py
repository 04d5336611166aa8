from abc import ABC, abstractmethod
from typing import List

from movie_catalog.applications.interfaces.dtos.movie import MovieRequest, MovieResponse


class MovieServicePort(ABC):
    """Port for movie catalog operations"""

    @abstractmethod
    async def create_movie(self, movie_request: MovieRequest) -> MovieResponse:
        """Persist a new movie and return it with its assigned id"""
        pass

    @abstractmethod
    async def get_movie_by_id(self, movie_id: int) -> MovieResponse:
        pass

    @abstractmethod
    async def get_all_movies(self) -> List[MovieResponse]:
        pass

    @abstractmethod
    async def update_movie(self, movie_id: int, movie_request: MovieRequest) -> MovieResponse:
        """Overwrite every mutable field of an existing movie"""
        pass

    @abstractmethod
    async def delete_movie(self, movie_id: int) -> None:
        pass

    @abstractmethod
    async def get_movies_by_genre(self, genre: str) -> List[MovieResponse]:
        pass

    @abstractmethod
    async def get_movies_by_release_year(self, year: int) -> List[MovieResponse]:
        pass

    @abstractmethod
    async def get_distinct_genres(self) -> List[str]:
        pass

    @abstractmethod
    async def get_distinct_years(self) -> List[int]:
        """Distinct release years, ascending"""
        pass
