from datetime import date
from typing import Optional

from pydantic import BaseModel


class Movie(BaseModel):
    id: Optional[int] = None
    title: str
    description: Optional[str] = None
    release_date: date
    genre: str
    rating: float
