"""
Standardized error responses for the Direct web endpoints.
"""
from flask import g, jsonify
from chargify_direct.payment.constants import APIErrorCode


def error_response(code, message, details=None, status_code=400):
    """
    Generate standardized error response.

    Args:
        code (str): Error code from APIErrorCode
        message (str): Human-readable error message
        details (dict, optional): Additional error details
        status_code (int): HTTP status code

    Returns:
        tuple: (response, status_code)
    """
    response = {
        'error': {
            'code': code,
            'message': message,
            'request_id': getattr(g, 'request_id', 'unknown')
        }
    }

    if details:
        response['error']['details'] = details

    return jsonify(response), status_code


def invalid_request_error(message, details=None):
    """Invalid request error (400)."""
    return error_response(
        APIErrorCode.INVALID_REQUEST,
        message,
        details,
        400
    )


def nonce_mismatch_error(message='Callback nonce does not match the issued form'):
    """Replayed or foreign callback (400)."""
    return error_response(
        APIErrorCode.NONCE_MISMATCH,
        message,
        None,
        400
    )


def authentication_error(message='Signature verification failed'):
    """Authentication error (401)."""
    return error_response(
        APIErrorCode.AUTHENTICATION_FAILED,
        message,
        None,
        401
    )


def configuration_error(message='Chargify client is not configured'):
    """Missing credentials (500)."""
    return error_response(
        APIErrorCode.CONFIGURATION_ERROR,
        message,
        None,
        500
    )
