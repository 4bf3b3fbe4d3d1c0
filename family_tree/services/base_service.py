"""
Base service class providing common functionality for all services
"""
from contextlib import contextmanager

from family_tree.database import db
from family_tree.shared.logging_config import get_project_logger


class BaseService:
    """Base class for all services providing common functionality"""

    def __init__(self, db_session=None):
        self.logger = get_project_logger(self.__class__.__module__)
        self.db_session = db_session or db.session

    @contextmanager
    def unit_of_work(self, operation_name: str):
        """Commit everything flushed inside the block, or roll all of it back"""
        try:
            yield
            self.db_session.commit()
        except Exception:
            self.db_session.rollback()
            self.logger.debug(f"Rolled back {operation_name}")
            raise
