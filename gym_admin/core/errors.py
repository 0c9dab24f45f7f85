"""Domain errors raised by the services layer."""

from typing import Dict, Optional


class GymError(Exception):
    """Base class for errors the web and API layers translate into responses."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(GymError):
    """Referenced row does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(GymError):
    """Input rejected before it reached the database."""

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None) -> None:
        super().__init__(message or "Invalid input")
        self.errors = errors


class ReferentialIntegrityError(GymError):
    """The store refused a write because of a key or constraint violation."""
