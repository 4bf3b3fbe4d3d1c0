"""
Base repository classes to eliminate duplication and standardize patterns
"""

import uuid
from abc import ABC
from typing import Any, Callable, Generic, TypeVar, Union

from sqlalchemy.exc import SQLAlchemyError

from family_tree.database import db
from family_tree.shared.logging_config import get_project_logger

# Generic type for model classes
ModelType = TypeVar('ModelType')


def as_uuid(value: str | uuid.UUID) -> uuid.UUID:
    """Normalize an id coming from a URL or JSON body; raises ValueError when malformed"""
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))


class BaseRepository(ABC):
    """
    Base repository class providing common functionality for all repositories

    Features:
    - Standard error handling with rollback
    - Consistent logging setup
    - Transaction management (flush here, commit in the service layer)
    """

    def __init__(self, db_session=None):
        """Initialize base repository with database session and logger"""
        self.db_session = db_session or db.session
        self.logger = get_project_logger(self.__class__.__module__)

    def safe_operation(self, operation: Callable[[], Any], operation_name: str = "operation") -> Any:
        """
        Execute database write with standard error handling

        Args:
            operation: Function to execute (should return result)
            operation_name: Description for logging purposes

        Returns:
            Result of the operation

        Raises:
            Exception: Re-raises original exception after logging and rollback
        """
        try:
            result = operation()
            self.db_session.flush()  # Standard pattern: flush instead of commit
            self.logger.debug(f"Repository {operation_name} completed successfully")
            return result
        except SQLAlchemyError as e:
            self.db_session.rollback()
            self.logger.error(f"Database error in {operation_name}: {e}")
            raise
        except Exception as e:
            self.db_session.rollback()
            self.logger.error(f"Repository {operation_name} failed: {e}")
            raise

    def safe_query(self, query_func: Callable[[], Any], operation_name: str = "query") -> Any:
        """
        Execute read-only query with error handling (no flush needed)

        Args:
            query_func: Function to execute query
            operation_name: Description for logging purposes

        Returns:
            Query result
        """
        try:
            result = query_func()
            self.logger.debug(f"Repository {operation_name} completed successfully")
            return result
        except Exception as e:
            self.logger.error(f"Repository {operation_name} failed: {e}")
            raise


class ModelRepository(BaseRepository, Generic[ModelType]):
    """
    Generic repository for standard CRUD operations on model types
    """

    def __init__(self, model_class: type[ModelType], db_session=None):
        """
        Initialize model repository

        Args:
            model_class: SQLAlchemy model class this repository manages
            db_session: Database session (optional)
        """
        super().__init__(db_session)
        self.model_class = model_class

    def create(self, **kwargs) -> ModelType:
        """Create a new model instance"""
        def _create():
            instance = self.model_class(**kwargs)
            self.db_session.add(instance)
            return instance

        return self.safe_operation(_create, f"create {self.model_class.__name__}")

    def add(self, instance: ModelType) -> ModelType:
        """Persist an instance that was built (and validated) by the caller"""
        def _add():
            self.db_session.add(instance)
            return instance

        return self.safe_operation(_add, f"add {self.model_class.__name__}")

    def update(self, instance: ModelType, **kwargs) -> ModelType:
        """Update an existing model instance"""
        def _update():
            for key, value in kwargs.items():
                if hasattr(instance, key):
                    setattr(instance, key, value)
            return instance

        return self.safe_operation(_update, f"update {self.model_class.__name__}")

    def delete(self, instance: ModelType) -> None:
        """Delete an instance, following the model's ORM cascades"""
        def _delete():
            self.db_session.delete(instance)

        self.safe_operation(_delete, f"delete {self.model_class.__name__}")

    def get_by_id(self, id_value: Any) -> Union[ModelType, None]:
        """Get instance by ID with error handling"""
        def _get_by_id():
            return self.db_session.get(self.model_class, as_uuid(id_value))

        return self.safe_query(_get_by_id, f"get {self.model_class.__name__} by id")
