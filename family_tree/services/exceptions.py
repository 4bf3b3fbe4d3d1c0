"""
Custom exceptions for service layer
"""

import functools

import sqlalchemy.exc


class ServiceError(Exception):
    """Base exception for service layer errors"""
    pass

class ValidationError(ServiceError):
    """Raised when input validation fails"""
    pass

class ChronologyError(ValidationError):
    """Raised when birth/death date ordering is violated"""
    pass

class CrossTreeError(ValidationError):
    """Raised when a parent and a child belong to different trees"""
    pass

class AuthenticationError(ServiceError):
    """Raised when credentials or tokens are rejected"""
    pass

class NotFoundError(ServiceError):
    """Raised when a requested resource is not found"""
    pass

class PersonNotFoundError(NotFoundError):
    pass

class TreeNotFoundError(NotFoundError):
    pass

class RelationshipNotFoundError(NotFoundError):
    pass

class UserNotFoundError(NotFoundError):
    pass

class ConflictError(ServiceError):
    """Raised when an operation conflicts with current state"""
    pass

class TooManyParentsError(ConflictError):
    """Raised when a child already has two parents"""
    pass

class GenderConflictError(ConflictError):
    """Raised when a second parent has the same sex as the existing one"""
    pass

class DuplicateRelationshipError(ConflictError):
    """Raised when the parent -> child edge already exists"""
    pass

class EmailAlreadyRegisteredError(ConflictError):
    pass

class DatabaseError(ServiceError):
    """Raised when database operations fail"""
    pass


def handle_service_exceptions(logger=None):
    """Decorator to handle common service exceptions and convert them to service-specific exceptions"""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ServiceError:
                # Re-raise our own errors untouched
                raise
            except sqlalchemy.exc.OperationalError as e:
                if logger:
                    logger.error(f"Database operational error in {func.__name__}: {e}")
                raise DatabaseError(f"Database connection error: {e}") from e
            except sqlalchemy.exc.IntegrityError as e:
                if logger:
                    logger.error(f"Database integrity error in {func.__name__}: {e}")
                raise DatabaseError(f"Data integrity violation: {e}") from e
            except sqlalchemy.exc.SQLAlchemyError as e:
                if logger:
                    logger.error(f"Database error in {func.__name__}: {e}")
                raise DatabaseError(f"Database error: {e}") from e
            except ValueError as e:
                if logger:
                    logger.error(f"Validation error in {func.__name__}: {e}")
                raise ValidationError(f"Invalid input: {e}") from e
            except KeyError as e:
                if logger:
                    logger.error(f"Missing required data in {func.__name__}: {e}")
                raise ValidationError(f"Missing required field: {e}") from e
            except Exception as e:
                if logger:
                    logger.error(f"Unexpected error in {func.__name__}: {e}", exc_info=True)
                raise ServiceError(f"Unexpected service error: {e}") from e
        return wrapper
    return decorator
