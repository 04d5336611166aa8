import math
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


class MovieRequest(BaseModel):
    """Create/update payload. Each offending field reports exactly one message."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    release_date: Optional[date] = None
    genre: Optional[str] = None
    rating: Optional[float] = None

    @model_validator(mode="before")
    @classmethod
    def missing_fields_as_null(cls, data: Any) -> Any:
        # absent keys are checked like explicit nulls
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, field in cls.model_fields.items():
            if field.alias not in data and name not in data:
                data[field.alias] = None
        return data

    @field_validator("title")
    @classmethod
    def title_is_mandatory(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise PydanticCustomError("mandatory", "Title is mandatory")
        return value

    @field_validator("release_date")
    @classmethod
    def release_date_is_past_or_present(cls, value: Optional[date]) -> date:
        if value is None:
            raise PydanticCustomError("mandatory", "Release date is mandatory")
        if value > date.today():
            raise PydanticCustomError("past_or_present", "Release date cannot be in the future")
        return value

    @field_validator("genre")
    @classmethod
    def genre_is_mandatory(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            raise PydanticCustomError("mandatory", "Genre is mandatory")
        return value

    @field_validator("rating")
    @classmethod
    def rating_is_positive_or_zero(cls, value: Optional[float]) -> float:
        if value is None:
            raise PydanticCustomError("mandatory", "Rating is mandatory")
        if not math.isfinite(value):
            raise PydanticCustomError("finite", "Rating must be a finite number")
        if value < 0:
            raise PydanticCustomError("positive_or_zero", "Rating must be positive or zero")
        return value


class MovieResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    release_date: date
    genre: str
    rating: float
