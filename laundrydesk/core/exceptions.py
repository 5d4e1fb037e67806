"""
Domain Exceptions - raised by services, rendered into the JSON envelope by the app
"""
from contextlib import contextmanager
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class LaundryDeskError(Exception):
    """Base class for errors surfaced to API callers"""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidIdError(LaundryDeskError):
    """Malformed identifier in the request path"""
    status_code = 400

    def __init__(self, resource: str):
        super().__init__(f"Invalid {resource} ID")


class ValidationFailedError(LaundryDeskError):
    """Payload does not match the entity schema"""
    status_code = 400

    def __init__(self, details: List[Dict[str, Any]]):
        super().__init__("Validation failed", details=details)


class NotFoundError(LaundryDeskError):
    status_code = 404

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")


class ConflictError(LaundryDeskError):
    """Uniqueness violation"""
    status_code = 409


class DependencyConflictError(LaundryDeskError):
    """Delete blocked because dependent rows still exist"""
    status_code = 400


class InternalError(LaundryDeskError):
    """Unexpected store failure; the message names only the operation"""
    status_code = 500


# Largest value an INTEGER primary key holds on every supported store
MAX_ID = 2**31 - 1


def parse_id(raw_id: Any, resource: str) -> int:
    """
    Parse a path identifier into a positive integer.

    Only ASCII digits are accepted. Ids past MAX_ID cannot exist, so they are
    reported as not found rather than handed to the store.
    """
    value = str(raw_id).strip()
    if not (value.isascii() and value.isdigit()):
        raise InvalidIdError(resource)
    parsed = int(value)
    if parsed <= 0:
        raise InvalidIdError(resource)
    if parsed > MAX_ID:
        raise NotFoundError(resource.capitalize())
    return parsed


@contextmanager
def store_guard(db: Session, failure_message: str, conflict_message: Optional[str] = None):
    """
    Translate store failures raised inside the block.

    Domain errors pass through untouched. A unique-constraint failure becomes a
    ConflictError when conflict_message is given; anything else from the store is
    logged with its traceback and re-raised as a generic InternalError.
    """
    try:
        yield
    except LaundryDeskError:
        raise
    except IntegrityError as e:
        db.rollback()
        if conflict_message:
            logger.warning(f"Integrity error translated to conflict: {e.orig}")
            raise ConflictError(conflict_message) from e
        logger.exception(failure_message)
        raise InternalError(failure_message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception(failure_message)
        raise InternalError(failure_message) from e
