"""Helpers shared by the entity services."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gym_admin.core.errors import ReferentialIntegrityError

logger = logging.getLogger(__name__)

NAME_MAX_LENGTH = 200
EMAIL_MAX_LENGTH = 200
PHONE_MAX_LENGTH = 50


def clean_required(
    value: Optional[str], field: str, errors: Dict[str, str], max_length: int = NAME_MAX_LENGTH
) -> str:
    """Strip a required text field, recording an error when it is empty or too long."""
    cleaned = (value or "").strip()
    if not cleaned:
        errors[field] = "This field is required."
    elif len(cleaned) > max_length:
        errors[field] = f"Must be at most {max_length} characters."
    return cleaned


def clean_email(value: Optional[str], errors: Dict[str, str], field: str = "email") -> str:
    cleaned = (value or "").strip()
    if cleaned and "@" not in cleaned:
        errors[field] = "Enter a valid email address."
    elif len(cleaned) > EMAIL_MAX_LENGTH:
        errors[field] = f"Must be at most {EMAIL_MAX_LENGTH} characters."
    return cleaned


def clean_phone(value: Optional[str], errors: Dict[str, str], field: str = "phone") -> str:
    cleaned = (value or "").strip()
    if len(cleaned) > PHONE_MAX_LENGTH:
        errors[field] = f"Must be at most {PHONE_MAX_LENGTH} characters."
    return cleaned


def search_pattern(search: Optional[str]) -> Optional[str]:
    """Build a LIKE pattern for a substring search, or None when there is nothing to search."""
    if search is None or not search.strip():
        return None
    escaped = (
        search.strip()
        .replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )
    return f"%{escaped}%"


@asynccontextmanager
async def write_transaction(db: AsyncSession, action: str) -> AsyncIterator[None]:
    """Run the body and commit it as one transaction.

    Any failure rolls the whole transaction back. Constraint failures
    surface as ``ReferentialIntegrityError``.
    """
    try:
        yield
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Integrity error during {action}: {e.orig}")
        raise ReferentialIntegrityError(
            f"Could not {action}: conflicting or missing related rows"
        ) from e
    except Exception:
        await db.rollback()
        raise
