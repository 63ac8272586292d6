"""
Movie schema - Declarative constraint table.

Each field of a movie record is described by a FieldRule: its name, whether
it must be present, an optional default and a check. Checks share one
signature, ``check(value, path, errors) -> normalized value``, and append a
ValidationError for every problem they find.

The table is built once per validator and never mutated. The partial schema
used for updates is derived from it by relaxing presence, not by
re-declaring fields.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from movies.config import Settings
from movies.core.models import ErrorCode, Genre
from movies.core.validator.result import ValidationError

Check = Callable[[Any, str, list[ValidationError]], Any]


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()

_URL_ADAPTER = TypeAdapter(AnyUrl)


@dataclass(frozen=True)
class FieldRule:
    """Constraints for one field of the record."""

    name: str
    check: Check
    required: bool = True
    default: Any = NO_DEFAULT
    missing_message: str = "Required"

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


def type_name(value: Any) -> str:
    """Name of a value's type as reported in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and math.isnan(value))


# =============================================================================
# Checks
# =============================================================================


def string_check(
    min_length: int | None = None,
    invalid_type_message: str | None = None,
    too_short_message: str | None = None,
) -> Check:
    """Build a check for a string field."""

    def check(value: Any, path: str, errors: list[ValidationError]) -> Any:
        if not isinstance(value, str):
            errors.append(
                ValidationError(
                    field=path,
                    message=invalid_type_message
                    or f"Expected string, received {type_name(value)}",
                    code=ErrorCode.INVALID_TYPE,
                )
            )
            return value

        if min_length is not None and len(value) < min_length:
            errors.append(
                ValidationError(
                    field=path,
                    message=too_short_message
                    or f"String must contain at least {min_length} character(s)",
                    code=ErrorCode.OUT_OF_RANGE,
                )
            )
        return value

    return check


def _range_errors(
    value: float,
    path: str,
    minimum: float | None,
    maximum: float | None,
    positive: bool,
) -> list[ValidationError]:
    errors: list[ValidationError] = []
    if positive and value <= 0:
        errors.append(
            ValidationError(
                field=path,
                message="Number must be greater than 0",
                code=ErrorCode.OUT_OF_RANGE,
            )
        )
    if minimum is not None and value < minimum:
        errors.append(
            ValidationError(
                field=path,
                message=f"Number must be greater than or equal to {minimum}",
                code=ErrorCode.OUT_OF_RANGE,
            )
        )
    if maximum is not None and value > maximum:
        errors.append(
            ValidationError(
                field=path,
                message=f"Number must be less than or equal to {maximum}",
                code=ErrorCode.OUT_OF_RANGE,
            )
        )
    return errors


def number_check(
    minimum: float | None = None,
    maximum: float | None = None,
    positive: bool = False,
) -> Check:
    """Build a check for a real-valued field."""

    def check(value: Any, path: str, errors: list[ValidationError]) -> Any:
        if not _is_number(value):
            errors.append(
                ValidationError(
                    field=path,
                    message=f"Expected number, received {type_name(value)}",
                    code=ErrorCode.INVALID_TYPE,
                )
            )
            return value

        errors.extend(_range_errors(value, path, minimum, maximum, positive))
        return value

    return check


def integer_check(
    minimum: int | None = None,
    maximum: int | None = None,
    positive: bool = False,
) -> Check:
    """Build a check for an integer field.

    Integral floats such as ``1999.0`` are accepted and normalized to ``int``.
    """

    def check(value: Any, path: str, errors: list[ValidationError]) -> Any:
        if not _is_number(value):
            errors.append(
                ValidationError(
                    field=path,
                    message=f"Expected number, received {type_name(value)}",
                    code=ErrorCode.INVALID_TYPE,
                )
            )
            return value

        if isinstance(value, float):
            if not value.is_integer():
                errors.append(
                    ValidationError(
                        field=path,
                        message="Expected integer, received float",
                        code=ErrorCode.INVALID_TYPE,
                    )
                )
                return value
            value = int(value)

        errors.extend(_range_errors(value, path, minimum, maximum, positive))
        return value

    return check


def url_check(invalid_message: str = "Invalid url") -> Check:
    """Build a check for an absolute URL given as a string.

    The string itself is kept; pydantic only decides whether it parses.
    """

    def check(value: Any, path: str, errors: list[ValidationError]) -> Any:
        if not isinstance(value, str):
            errors.append(
                ValidationError(
                    field=path,
                    message=f"Expected string, received {type_name(value)}",
                    code=ErrorCode.INVALID_TYPE,
                )
            )
            return value

        try:
            _URL_ADAPTER.validate_python(value)
        except PydanticValidationError:
            errors.append(
                ValidationError(
                    field=path,
                    message=invalid_message,
                    code=ErrorCode.INVALID_FORMAT,
                )
            )
        return value

    return check


def enum_list_check(
    enum: type[Enum],
    invalid_item_type_message: str | None = None,
) -> Check:
    """Build a check for an ordered list whose items are enum values."""
    allowed = [member.value for member in enum]
    expected = " | ".join(f"'{v}'" for v in allowed)

    def check(value: Any, path: str, errors: list[ValidationError]) -> Any:
        if not isinstance(value, (list, tuple)):
            errors.append(
                ValidationError(
                    field=path,
                    message=f"Expected array, received {type_name(value)}",
                    code=ErrorCode.INVALID_TYPE,
                )
            )
            return value

        for i, item in enumerate(value):
            item_path = f"{path}[{i}]"
            if not isinstance(item, str):
                errors.append(
                    ValidationError(
                        field=item_path,
                        message=invalid_item_type_message
                        or f"Expected string, received {type_name(item)}",
                        code=ErrorCode.INVALID_TYPE,
                    )
                )
            elif item not in allowed:
                errors.append(
                    ValidationError(
                        field=item_path,
                        message=f"Invalid enum value. Expected {expected}, received '{item}'",
                        code=ErrorCode.INVALID_ENUM,
                    )
                )
        return list(value)

    return check


# =============================================================================
# Schemas
# =============================================================================


def build_movie_schema(settings: Settings) -> tuple[FieldRule, ...]:
    """Build the full movie schema, in field declaration order."""
    year_max = settings.effective_year_max
    if settings.year_min > year_max:
        raise ValueError(
            f"year_min ({settings.year_min}) is greater than year max ({year_max})"
        )
    if not 0 <= settings.rate_default <= 10:
        raise ValueError(f"rate_default must be between 0 and 10, got: {settings.rate_default}")

    return (
        FieldRule(
            name="title",
            check=string_check(
                min_length=1,
                invalid_type_message="Movie title must be a string",
                too_short_message="Movie title must not be empty",
            ),
            missing_message="Movie title is required",
        ),
        FieldRule(
            name="year",
            check=integer_check(minimum=settings.year_min, maximum=year_max),
        ),
        FieldRule(name="director", check=string_check()),
        FieldRule(name="duration", check=integer_check(positive=True)),
        FieldRule(
            name="rate",
            check=number_check(minimum=0, maximum=10),
            required=False,
            default=settings.rate_default,
        ),
        FieldRule(
            name="poster",
            check=url_check("Poster must be a valid URL"),
        ),
        FieldRule(
            name="genre",
            check=enum_list_check(
                Genre,
                invalid_item_type_message="Movie genre must be an array of enum Genre",
            ),
        ),
    )


def make_partial(schema: tuple[FieldRule, ...]) -> tuple[FieldRule, ...]:
    """Derive the update schema: every field optional, no defaults."""
    return tuple(replace(rule, required=False, default=NO_DEFAULT) for rule in schema)
