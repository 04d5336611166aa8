from datetime import date
from typing import List, Optional

from sqlalchemy import exists, extract, select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_catalog.domain.exceptions import MovieNotFoundError
from movie_catalog.domain.models.movie import Movie as DomainMovie
from movie_catalog.domain.ports.repositories.movie_repository import MovieRepository
from movie_catalog.infrastructure.persistence.models import Movie as SQLMovie


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            title=sql_movie.title,
            description=sql_movie.description,
            release_date=sql_movie.release_date,
            genre=sql_movie.genre,
            rating=sql_movie.rating,
        )

    async def _find(self, movie_id: int) -> Optional[SQLMovie]:
        query = select(SQLMovie).where(SQLMovie.id == movie_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def _list(self, query) -> List[DomainMovie]:
        result = await self.session.execute(query)
        return [self._to_domain(movie) for movie in result.scalars().all()]

    async def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        movie = await self._find(movie_id)
        return self._to_domain(movie) if movie else None

    async def exists_by_id(self, movie_id: int) -> bool:
        query = select(exists().where(SQLMovie.id == movie_id))
        result = await self.session.execute(query)
        return bool(result.scalar())

    async def get_all(self) -> List[DomainMovie]:
        return await self._list(select(SQLMovie))

    async def create(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = SQLMovie(
            title=movie.title,
            release_date=movie.release_date,
            genre=movie.genre,
            rating=movie.rating,
            description=movie.description,
        )
        self.session.add(sql_movie)
        await self.session.commit()
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    async def update(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = await self._find(movie.id)
        if not sql_movie:
            raise MovieNotFoundError(movie.id)

        sql_movie.title = movie.title
        sql_movie.description = movie.description
        sql_movie.release_date = movie.release_date
        sql_movie.genre = movie.genre
        sql_movie.rating = movie.rating

        await self.session.commit()
        await self.session.refresh(sql_movie)
        return self._to_domain(sql_movie)

    async def delete(self, movie_id: int) -> bool:
        movie = await self._find(movie_id)
        if not movie:
            return False

        await self.session.delete(movie)
        await self.session.commit()
        return True

    async def get_by_genre(self, genre: str) -> List[DomainMovie]:
        return await self._list(select(SQLMovie).where(SQLMovie.genre == genre))

    async def get_by_release_date_between(self, start_date: date, end_date: date) -> List[DomainMovie]:
        return await self._list(select(SQLMovie).where(SQLMovie.release_date.between(start_date, end_date)))

    async def get_by_release_year(self, year: int) -> List[DomainMovie]:
        # no stored date can fall in a year outside the calendar range
        if not date.min.year <= year <= date.max.year:
            return []
        return await self.get_by_release_date_between(date(year, 1, 1), date(year, 12, 31))

    async def get_distinct_genres(self) -> List[str]:
        result = await self.session.execute(select(SQLMovie.genre).distinct())
        return list(result.scalars().all())

    async def get_distinct_release_years(self) -> List[int]:
        year = extract("year", SQLMovie.release_date).label("year")
        result = await self.session.execute(select(year).distinct().order_by(year))
        # PostgreSQL returns EXTRACT as numeric
        return [int(value) for value in result.scalars().all()]
