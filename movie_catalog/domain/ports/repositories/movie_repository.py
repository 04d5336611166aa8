from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from movie_catalog.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def exists_by_id(self, movie_id: int) -> bool:
        pass

    @abstractmethod
    async def get_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> bool:
        pass

    @abstractmethod
    async def get_by_genre(self, genre: str) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_release_date_between(self, start_date: date, end_date: date) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_release_year(self, year: int) -> List[Movie]:
        pass

    @abstractmethod
    async def get_distinct_genres(self) -> List[str]:
        pass

    @abstractmethod
    async def get_distinct_release_years(self) -> List[int]:
        pass
