"""Movies - Shape validation for movie records."""

__version__ = "1.0.0"

from movies.config import Settings, get_settings
from movies.core.models import ErrorCode, Genre, Movie, MovieUpdate
from movies.core.validator import (
    MovieValidator,
    ValidationError,
    ValidationResult,
    validate_movie,
    validate_partial_movie,
)

__all__ = [
    "ErrorCode",
    "Genre",
    "Movie",
    "MovieUpdate",
    "MovieValidator",
    "Settings",
    "ValidationError",
    "ValidationResult",
    "__version__",
    "get_settings",
    "validate_movie",
    "validate_partial_movie",
]
