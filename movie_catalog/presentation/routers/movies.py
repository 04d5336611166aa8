from http import HTTPStatus
from typing import Annotated, List

from fastapi import APIRouter, Depends

from movie_catalog.applications.interfaces.dtos.movie import MovieRequest, MovieResponse
from movie_catalog.domain.ports.services.movie_service_port import MovieServicePort
from movie_catalog.infrastructure.config.dependencies import get_movie_service

router = APIRouter(prefix="/api/movies", tags=["movies"])

MovieServiceDep = Annotated[MovieServicePort, Depends(get_movie_service)]


@router.post("", status_code=HTTPStatus.CREATED, response_model=MovieResponse)
async def create_movie(movie: MovieRequest, movie_service: MovieServiceDep):
    return await movie_service.create_movie(movie)


@router.get("", response_model=List[MovieResponse])
async def read_movies(movie_service: MovieServiceDep):
    return await movie_service.get_all_movies()


# static paths must be registered before /{movie_id}
@router.get("/genres", response_model=List[str])
async def read_distinct_genres(movie_service: MovieServiceDep):
    return await movie_service.get_distinct_genres()


@router.get("/years", response_model=List[int])
async def read_distinct_years(movie_service: MovieServiceDep):
    return await movie_service.get_distinct_years()


@router.get("/genre/{genre}", response_model=List[MovieResponse])
async def read_movies_by_genre(genre: str, movie_service: MovieServiceDep):
    return await movie_service.get_movies_by_genre(genre)


@router.get("/year/{year}", response_model=List[MovieResponse])
async def read_movies_by_release_year(year: int, movie_service: MovieServiceDep):
    return await movie_service.get_movies_by_release_year(year)


@router.get("/{movie_id}", response_model=MovieResponse)
async def read_movie(movie_id: int, movie_service: MovieServiceDep):
    return await movie_service.get_movie_by_id(movie_id)


@router.put("/{movie_id}", response_model=MovieResponse)
async def update_movie(movie_id: int, movie: MovieRequest, movie_service: MovieServiceDep):
    return await movie_service.update_movie(movie_id, movie)


@router.delete("/{movie_id}", status_code=HTTPStatus.NO_CONTENT)
async def delete_movie(movie_id: int, movie_service: MovieServiceDep):
    await movie_service.delete_movie(movie_id)
