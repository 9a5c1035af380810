"""
Flow logging for Direct form signing and callback verification.
Secrets are never logged and signatures only as a short prefix.
"""
import logging
from flask import g, has_app_context

logger = logging.getLogger(__name__)


def _request_id():
    if has_app_context():
        return getattr(g, 'request_id', 'background')
    return 'background'


def _short(signature):
    return f'{signature[:8]}...' if signature else None


def log_secure_parameters_built(secure, **kwargs):
    """
    Log that a secure parameter set was prepared for a form.

    Args:
        secure: SecureParameters instance
        **kwargs: Additional context
    """
    request_id = _request_id()

    log_data = {
        'request_id': request_id,
        'event': 'direct.secure_parameters',
        'api_id': secure.api_id,
        'timestamp': secure.timestamp,
        'nonce': secure.nonce,
        'data_keys': list(secure.data.keys()),
    }
    log_data.update(kwargs)

    logger.info(
        f"[{request_id}] direct.secure_parameters: api_id={secure.api_id} "
        f"nonce={secure.nonce} fields={len(log_data['data_keys'])}",
        extra=log_data
    )


def log_response_verification(response, verified=None, **kwargs):
    """
    Log the outcome of a callback verification.

    Args:
        response: ResponseParameters instance
        verified (bool, optional): Result already computed by the caller
        **kwargs: Additional context
    """
    request_id = _request_id()
    if verified is None:
        verified = response.is_verified

    log_data = {
        'request_id': request_id,
        'event': 'direct.response_verification',
        'api_id': response.api_id,
        'call_id': response.call_id,
        'status_code': response.status_code,
        'result_code': response.result_code,
        'verified': verified,
        'signature': _short(response.signature),
    }
    log_data.update(kwargs)

    message = (
        f"[{request_id}] direct.response_verification: call_id={response.call_id} "
        f"status={response.status_code} result={response.result_code} verified={verified}"
    )
    if verified:
        logger.info(message, extra=log_data)
    else:
        logger.warning(message, extra=log_data)
