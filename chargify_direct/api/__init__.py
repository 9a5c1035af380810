"""Web API helpers."""
from .errors import (
    error_response,
    invalid_request_error,
    nonce_mismatch_error,
    authentication_error,
    configuration_error
)

__all__ = [
    'error_response',
    'invalid_request_error',
    'nonce_mismatch_error',
    'authentication_error',
    'configuration_error'
]
