"""Core domain models and contracts for movie records.

These models describe a movie once it has passed shape validation:
- Genre enumeration (locked)
- Error codes reported by the validator
- Full record (create) and partial record (update)
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================


class Genre(str, Enum):
    """Allowed movie genres. Hard fail on anything else."""

    ACTION = "Action"
    ADVENTURE = "Adventure"
    CRIME = "Crime"
    COMEDY = "Comedy"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    THRILLER = "Thriller"
    SCI_FI = "Sci-Fi"


class ErrorCode(str, Enum):
    """Kinds of field-level violations."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_TYPE = "INVALID_TYPE"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_FORMAT = "INVALID_FORMAT"  # poster URL
    INVALID_ENUM = "INVALID_ENUM"  # genre members


# =============================================================================
# Movie Models
# =============================================================================


class Movie(BaseModel):
    """A complete movie record, as accepted on create."""

    title: str = Field(min_length=1)
    year: int
    director: str
    duration: int = Field(gt=0)
    rate: float = Field(ge=0.0, le=10.0)  # filled from Settings.rate_default when absent
    poster: str
    genre: list[Genre]


class MovieUpdate(BaseModel):
    """A partial movie record, as accepted on update.

    Only the fields that were sent are set; use ``model_dump(exclude_unset=True)``
    to get the changes back.
    """

    title: str | None = Field(default=None, min_length=1)
    year: int | None = None
    director: str | None = None
    duration: int | None = Field(default=None, gt=0)
    rate: float | None = Field(default=None, ge=0.0, le=10.0)
    poster: str | None = None
    genre: list[Genre] | None = None
