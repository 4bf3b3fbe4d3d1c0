"""
Error handlers mapping service errors and HTTP errors to JSON responses
"""

from flask import request
from werkzeug.exceptions import HTTPException

from family_tree.services.exceptions import (
    AuthenticationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from family_tree.shared.api_response_formatter import APIResponseFormatter
from family_tree.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)

# Most specific first; DatabaseError and bare ServiceError fall through to 500
STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (ConflictError, 409),
)


def status_for(error: ServiceError) -> int:
    for error_class, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_class):
            return status_code
    return 500


def register_error_handlers(app_or_blueprint):
    """Register error handlers for Flask app or blueprint"""

    @app_or_blueprint.errorhandler(ServiceError)
    def handle_service_error(error):
        """Handle typed service errors"""
        status_code = status_for(error)
        error_type = type(error).__name__

        if status_code >= 500:
            logger.error(f"{error_type} on {request.method} {request.path}: {error}")
            message = 'Database error' if isinstance(error, DatabaseError) else 'Internal server error'
            return APIResponseFormatter.error(message, status_code, error_type=error_type)

        logger.warning(f"{status_code} {error_type} on {request.method} {request.path}: {error}")
        return APIResponseFormatter.error(str(error), status_code, error_type=error_type)

    @app_or_blueprint.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors"""
        logger.warning(f"404 error: {request.url}")
        return APIResponseFormatter.error('Resource not found', 404)

    @app_or_blueprint.errorhandler(405)
    def method_not_allowed_error(error):
        """Handle 405 errors"""
        logger.warning(f"405 error: {request.method} {request.url}")
        return APIResponseFormatter.error('Method not allowed', 405)

    @app_or_blueprint.errorhandler(HTTPException)
    def http_error(error):
        logger.warning(f"{error.code} error: {request.method} {request.url}")
        return APIResponseFormatter.error(error.description or error.name, error.code)

    @app_or_blueprint.errorhandler(Exception)
    def handle_exception(error):
        """Handle all other exceptions"""
        logger.error(f"Unhandled exception: {request.url} - {str(error)}", exc_info=True)
        return APIResponseFormatter.error('An unexpected error occurred', 500)
