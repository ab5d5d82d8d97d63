from typing import Dict, Iterable, List


class CatalogError(Exception):
    """Base class for errors the API maps to a specific status code."""


class NotFoundError(CatalogError):
    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__("{} not found with ID: {}".format(entity, entity_id))


def _field_key(loc) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path", "header"):
        parts = parts[1:]
    return ".".join(parts) or "__root__"


class ValidationFailedError(CatalogError):
    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__("Validation failed")

    @classmethod
    def from_pydantic(cls, errors: Iterable[dict]) -> "ValidationFailedError":
        """Group pydantic/FastAPI error entries by field name."""
        grouped: Dict[str, List[str]] = {}
        for error in errors:
            key = _field_key(error.get("loc", ()))
            grouped.setdefault(key, []).append(error.get("msg", "Invalid value"))
        return cls(grouped)


class OperationFailedError(CatalogError):
    """A write failed for a reason other than missing or invalid input."""

    def __init__(self, message: str, cause: Exception):
        self.message = message
        self.cause = cause
        super().__init__(message)


__all__ = ["CatalogError", "NotFoundError", "OperationFailedError", "ValidationFailedError"]
