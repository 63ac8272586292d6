"""Validator - Schema, type and range enforcement for movie records."""

from movies.core.validator.result import ValidationError, ValidationResult
from movies.core.validator.schema import FieldRule, build_movie_schema, make_partial
from movies.core.validator.validator import (
    MovieValidator,
    get_validator,
    validate_movie,
    validate_partial_movie,
)

__all__ = [
    "FieldRule",
    "MovieValidator",
    "ValidationError",
    "ValidationResult",
    "build_movie_schema",
    "get_validator",
    "make_partial",
    "validate_movie",
    "validate_partial_movie",
]
