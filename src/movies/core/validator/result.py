"""Validation outcome types shared by the schema checks and the validator."""

from dataclasses import dataclass, field
from typing import Any

from movies.core.models import ErrorCode, Movie, MovieUpdate


@dataclass
class ValidationError:
    """A single validation error."""

    field: str  # e.g., "title", "genre[1]"; "" for the whole input
    message: str
    code: ErrorCode

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code.value}


@dataclass
class ValidationResult:
    """Result of validation."""

    ok: bool
    data: dict[str, Any] | None = None
    errors: list[ValidationError] = field(default_factory=list)
    movie: Movie | MovieUpdate | None = None

    def to_dict(self) -> dict[str, Any]:
        """Tagged outcome, ready to hand to a caller such as an HTTP handler."""
        if self.ok:
            return {"ok": True, "data": dict(self.data or {})}
        return {"ok": False, "errors": [e.to_dict() for e in self.errors]}

    def error_fields(self) -> list[str]:
        """Distinct top-level fields with violations, in report order."""
        fields: list[str] = []
        for error in self.errors:
            name = error.field.split("[", 1)[0]
            if name not in fields:
                fields.append(name)
        return fields
