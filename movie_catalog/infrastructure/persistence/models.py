from datetime import date
from typing import Optional

from sqlalchemy import CheckConstraint, Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"
    __table_args__ = (CheckConstraint("rating >= 0", name="ck_movies_rating_non_negative"),)

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    release_date: Mapped[date] = mapped_column(Date)
    genre: Mapped[str] = mapped_column(String(100))
    rating: Mapped[float]
    description: Mapped[Optional[str]] = mapped_column(Text, default=None)
