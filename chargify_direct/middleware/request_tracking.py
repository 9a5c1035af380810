"""
Request tracking middleware for diagnostics.
Adds X-Request-ID to all responses and logs request details.
"""
import uuid
import time
import logging
from flask import request, g
from werkzeug.exceptions import HTTPException

from chargify_direct.api.errors import error_response
from chargify_direct.payment.constants import APIErrorCode

logger = logging.getLogger(__name__)


def init_request_tracking(app):
    """Initialize request tracking middleware."""

    @app.before_request
    def before_request():
        """Generate request ID and track start time."""
        request_id = request.headers.get('X-Request-ID', str(uuid.uuid4()))
        g.request_id = request_id
        g.start_time = time.time()

        logger.info(
            f"[{request_id}] {request.method} {request.path}",
            extra={
                'request_id': request_id,
                'method': request.method,
                'path': request.path,
                'remote_addr': request.remote_addr
            }
        )

    @app.after_request
    def after_request(response):
        """Add request ID to response headers and log completion."""
        if hasattr(g, 'request_id'):
            response.headers['X-Request-ID'] = g.request_id

            duration = time.time() - g.start_time if hasattr(g, 'start_time') else 0

            logger.info(
                f"[{g.request_id}] {request.method} {request.path} -> {response.status_code} ({duration:.3f}s)",
                extra={
                    'request_id': g.request_id,
                    'method': request.method,
                    'path': request.path,
                    'status_code': response.status_code,
                    'duration_seconds': duration
                }
            )

        return response

    @app.errorhandler(404)
    def handle_404(error):
        """Handle 404 errors."""
        request_id = getattr(g, 'request_id', 'unknown')

        logger.warning(
            f"[{request_id}] 404 Not Found: {request.method} {request.path}",
            extra={
                'request_id': request_id,
                'method': request.method,
                'path': request.path
            }
        )

        return error_response(
            APIErrorCode.RESOURCE_NOT_FOUND,
            'The requested resource was not found',
            None,
            404
        )

    @app.errorhandler(Exception)
    def handle_exception(error):
        """Catch-all exception handler."""
        if isinstance(error, HTTPException):
            return error_response(
                error.name.lower().replace(' ', '_'),
                error.description,
                None,
                error.code
            )

        request_id = getattr(g, 'request_id', 'unknown')
        logger.exception(
            f"[{request_id}] Unhandled exception: {request.method} {request.path}",
            extra={
                'request_id': request_id,
                'method': request.method,
                'path': request.path,
                'error_type': type(error).__name__
            }
        )

        return error_response(
            APIErrorCode.INTERNAL_ERROR,
            'An unexpected error occurred',
            None,
            500
        )

    logger.info("Request tracking middleware initialized")
