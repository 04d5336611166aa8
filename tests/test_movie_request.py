from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from movie_catalog.applications.interfaces.dtos.movie import MovieRequest, MovieResponse

from .factories import movie_factory


def _messages(exc_info) -> dict:
    return {error["loc"][0]: error["msg"] for error in exc_info.value.errors()}


class TestMovieRequestValidation:
    def test_valid_payload_passes_unchanged(self):
        request = MovieRequest(**movie_factory.create_movie_data())

        assert request.title == "Inception"
        assert request.description == "A dream within a dream."
        assert request.release_date == date(2010, 7, 16)
        assert request.genre == "Sci-Fi"
        assert request.rating == 8.8

    def test_description_is_optional(self):
        data = movie_factory.create_movie_data()
        del data["description"]

        assert MovieRequest(**data).description is None

    def test_accepts_snake_case_field_names(self):
        request = MovieRequest(title="Up", release_date=date(2009, 5, 29), genre="Animation", rating=8.3)

        assert request.release_date == date(2009, 5, 29)

    def test_release_date_today_is_allowed(self):
        request = MovieRequest(**movie_factory.create_movie_data(release_date=date.today().isoformat()))

        assert request.release_date == date.today()

    def test_zero_rating_is_allowed(self):
        assert MovieRequest(**movie_factory.create_movie_data(rating=0)).rating == 0

    @pytest.mark.parametrize("title", ["", "   ", None])
    def test_blank_title_rejected(self, title):
        with pytest.raises(ValidationError) as exc_info:
            MovieRequest(**movie_factory.create_movie_data(title=title))

        assert _messages(exc_info) == {"title": "Title is mandatory"}

    @pytest.mark.parametrize("genre", ["", " ", None])
    def test_blank_genre_rejected(self, genre):
        with pytest.raises(ValidationError) as exc_info:
            MovieRequest(**movie_factory.create_movie_data(genre=genre))

        assert _messages(exc_info) == {"genre": "Genre is mandatory"}

    def test_future_release_date_rejected(self):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()

        with pytest.raises(ValidationError) as exc_info:
            MovieRequest(**movie_factory.create_movie_data(release_date=tomorrow))

        assert _messages(exc_info) == {"releaseDate": "Release date cannot be in the future"}

    def test_missing_release_date_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            MovieRequest(**movie_factory.create_movie_data(release_date=None))

        assert _messages(exc_info) == {"releaseDate": "Release date is mandatory"}

    def test_negative_rating_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            MovieRequest(**movie_factory.create_movie_data(rating=-0.5))

        assert _messages(exc_info) == {"rating": "Rating must be positive or zero"}

    @pytest.mark.parametrize("rating", [float("inf"), float("-inf"), float("nan"), "NaN"])
    def test_non_finite_rating_rejected(self, rating):
        with pytest.raises(ValidationError) as exc_info:
            MovieRequest(**movie_factory.create_movie_data(rating=rating))

        assert _messages(exc_info) == {"rating": "Rating must be a finite number"}

    def test_missing_rating_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            MovieRequest(**movie_factory.create_movie_data(rating=None))

        assert _messages(exc_info) == {"rating": "Rating is mandatory"}

    def test_reports_one_message_per_offending_field(self):
        with pytest.raises(ValidationError) as exc_info:
            MovieRequest()

        assert _messages(exc_info) == {
            "title": "Title is mandatory",
            "releaseDate": "Release date is mandatory",
            "genre": "Genre is mandatory",
            "rating": "Rating is mandatory",
        }

    def test_combined_violations(self):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()

        with pytest.raises(ValidationError) as exc_info:
            MovieRequest(**movie_factory.create_movie_data(title=" ", release_date=tomorrow, rating=-1))

        assert _messages(exc_info) == {
            "title": "Title is mandatory",
            "releaseDate": "Release date cannot be in the future",
            "rating": "Rating must be positive or zero",
        }


class TestMovieResponse:
    def test_serializes_with_camel_case_keys(self):
        response = MovieResponse(
            id=1, title="Inception", release_date=date(2010, 7, 16), genre="Sci-Fi", rating=8.8
        )

        data = response.model_dump(mode="json", by_alias=True)

        assert data == {
            "id": 1,
            "title": "Inception",
            "description": None,
            "releaseDate": "2010-07-16",
            "genre": "Sci-Fi",
            "rating": 8.8,
        }
