"""
Validator - Shape enforcement for movie records.

The validator checks an arbitrary input against the movie schema:
1. Presence - required fields (full mode only), defaults applied
2. Types - strings, integers, numbers, lists
3. Ranges and formats - year bounds, positive duration, rate, poster URL
4. Enumerations - every genre is a known Genre

Invalid input is never raised; it is always reported through the
failure branch of the ValidationResult.
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from movies.config import Settings, get_settings
from movies.core.models import ErrorCode, Movie, MovieUpdate
from movies.core.validator.result import ValidationError, ValidationResult
from movies.core.validator.schema import (
    FieldRule,
    build_movie_schema,
    make_partial,
    type_name,
)

logger = logging.getLogger(__name__)


class MovieValidator:
    """
    Validate movie records against the movie schema.

    Enforces:
    - Required fields on create, all fields optional on update
    - Default rate when omitted on create
    - Field types, ranges and formats
    - Genre membership
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.schema = build_movie_schema(self.settings)
        self.partial_schema = make_partial(self.schema)

    def validate_movie(self, data: Any) -> ValidationResult:
        """
        Validate a complete movie record.

        Args:
            data: Candidate record, normally a dict decoded from a request body

        Returns:
            ValidationResult with normalized data and a Movie if valid
        """
        return self._validate(data, self.schema, partial=False)

    def validate_partial_movie(self, data: Any) -> ValidationResult:
        """
        Validate a partial movie record, as sent for an update.

        Absent fields are fine and no defaults are filled in.
        """
        return self._validate(data, self.partial_schema, partial=True)

    def _validate(
        self, data: Any, schema: tuple[FieldRule, ...], partial: bool
    ) -> ValidationResult:
        errors: list[ValidationError] = []

        if not isinstance(data, Mapping):
            errors.append(
                ValidationError(
                    field="",
                    message=f"Expected object, received {type_name(data)}",
                    code=ErrorCode.INVALID_TYPE,
                )
            )
            self._log_failure(errors, partial)
            return ValidationResult(ok=False, errors=errors)

        # Unknown keys are dropped
        validated: dict[str, Any] = {}
        for rule in schema:
            if rule.name not in data:
                if rule.has_default:
                    validated[rule.name] = rule.default
                elif rule.required:
                    errors.append(
                        ValidationError(
                            field=rule.name,
                            message=rule.missing_message,
                            code=ErrorCode.MISSING_FIELD,
                        )
                    )
                continue

            validated[rule.name] = rule.check(data[rule.name], rule.name, errors)

        if errors:
            self._log_failure(errors, partial)
            return ValidationResult(ok=False, errors=errors)

        model = MovieUpdate if partial else Movie
        return ValidationResult(
            ok=True,
            data=validated,
            movie=model.model_validate(validated),
        )

    def _log_failure(self, errors: list[ValidationError], partial: bool) -> None:
        """Log which fields failed. Values are never logged."""
        mode = "partial" if partial else "full"
        fields = sorted({e.field or "<root>" for e in errors})
        level = logging.WARNING if self.settings.debug else logging.DEBUG
        logger.log(
            level,
            f"[{self.settings.app_name}] {mode} movie validation failed "
            f"with {len(errors)} error(s): {', '.join(fields)}",
        )


@lru_cache
def get_validator() -> MovieValidator:
    """
    Get the process-wide validator built from cached settings.

    The validator keeps the schema it was built with. Clearing the
    get_settings cache does not rebuild it; call get_validator.cache_clear()
    as well to pick up new settings.
    """
    return MovieValidator()


def validate_movie(data: Any) -> ValidationResult:
    """Validate a complete movie record with the default validator."""
    return get_validator().validate_movie(data)


def validate_partial_movie(data: Any) -> ValidationResult:
    """Validate a partial movie record with the default validator."""
    return get_validator().validate_partial_movie(data)
