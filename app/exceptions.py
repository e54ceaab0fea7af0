"""
TaggedFS - Custom Exceptions and Exception Handlers
"""
import structlog
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = structlog.get_logger('exceptions')


class TaggedFSException(Exception):
    """Base exception for TaggedFS"""
    status_code = 400

    def __init__(self, message: str, code: str = "TAGGEDFS_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self):
        return {
            'code': self.code,
            'success': False,
            'message': self.message
        }


class NotFoundException(TaggedFSException):
    """A tag id, file id or file path does not exist"""
    status_code = 404

    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND")
        logger.warning(f"Not found: {message}")


class ValidationException(TaggedFSException):
    """Malformed input: bad color, empty edit request"""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")
        logger.warning(f"Validation error: {message}")


class ConflictException(TaggedFSException):
    """The request contradicts stored state: duplicate path, invalid hierarchy edge"""
    status_code = 409

    def __init__(self, message: str):
        super().__init__(message, code="CONFLICT")
        logger.warning(f"Conflict: {message}")


class CycleException(ConflictException):
    """A parent edge would make a tag its own ancestor"""


def register_exception_handlers(app):
    """Register exception handlers with Flask app"""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        """Handle HTTP exceptions"""
        return jsonify({
            'code': e.name.upper().replace(' ', '_'),
            'success': False,
            'message': e.description
        }), e.code

    @app.errorhandler(TaggedFSException)
    def handle_taggedfs_exception(e):
        """Handle TaggedFS custom exceptions"""
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        """Handle all other exceptions"""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify({
            'code': 'INTERNAL_ERROR',
            'success': False,
            'message': 'An unexpected error occurred'
        }), 500
