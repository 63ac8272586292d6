"""Movies Core - Domain enums and record contracts."""

from movies.core.models import ErrorCode, Genre, Movie, MovieUpdate

__all__ = ["ErrorCode", "Genre", "Movie", "MovieUpdate"]
