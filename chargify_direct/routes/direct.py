"""
Hosted signup form and redirect callback for Chargify Direct.
"""
import logging

from flask import Blueprint, current_app, jsonify, render_template, request, session, url_for

from chargify_direct.api.errors import (
    authentication_error,
    configuration_error,
    invalid_request_error,
    nonce_mismatch_error
)
from chargify_direct.client import Client
from chargify_direct.direct.signing import generate_nonce, generate_timestamp
from chargify_direct.payment.constants import RESERVED_DATA_KEYS
from chargify_direct.utils.flow_logging import log_response_verification

logger = logging.getLogger(__name__)

direct_bp = Blueprint('direct', __name__, url_prefix='/direct')

SESSION_NONCE_KEY = 'direct_nonce'


def _get_client():
    config = current_app.config
    return Client(
        api_key=config.get('CHARGIFY_API_KEY'),
        api_password=config.get('CHARGIFY_API_PASSWORD'),
        api_secret=config.get('CHARGIFY_API_SECRET'),
        proxy=config.get('CHARGIFY_PROXY')
    )


@direct_bp.route('/signup', methods=['GET'])
def signup():
    """
    Render a signup form that posts straight to Chargify.

    Query arguments become secure data (e.g. ``signup[product][handle]``);
    timestamp and nonce are always generated here.
    """
    client = _get_client()
    if not client.is_configured:
        logger.error("Direct signup requested but CHARGIFY_API_KEY/CHARGIFY_API_SECRET are not set")
        return configuration_error()

    params = {
        'timestamp': generate_timestamp(),
        'nonce': generate_nonce(),
    }
    for key, value in request.args.items():
        if key not in RESERVED_DATA_KEYS:
            params[key] = value
    params.setdefault('redirect_uri', url_for('direct.callback', _external=True))

    secure = client.direct.secure_parameters(params)
    session[SESSION_NONCE_KEY] = secure.nonce

    return render_template(
        'direct/signup.html',
        secure=secure,
        action_url=current_app.config['CHARGIFY_DIRECT_URL']
    )


@direct_bp.route('/callback', methods=['GET'])
def callback():
    """Verify the redirect Chargify sends after the hosted form is submitted."""
    client = _get_client()
    if not client.is_configured:
        logger.error("Direct callback received but CHARGIFY_API_KEY/CHARGIFY_API_SECRET are not set")
        return configuration_error()

    response = client.direct.response_parameters(request.args)

    if not response.signature:
        return invalid_request_error('Missing signature', {'missing_fields': ['signature']})

    verified = response.is_verified
    log_response_verification(response, verified=verified, remote_addr=request.remote_addr)

    if not verified:
        return authentication_error()

    # Nonce is single use and only consumed by a matching callback
    issued_nonce = session.get(SESSION_NONCE_KEY)
    if issued_nonce is None or issued_nonce != response.nonce:
        logger.warning(
            f"Direct callback nonce mismatch for call_id={response.call_id}",
            extra={'call_id': response.call_id, 'nonce_issued': issued_nonce is not None}
        )
        return nonce_mismatch_error()
    session.pop(SESSION_NONCE_KEY, None)

    return jsonify({
        'success': response.is_success,
        'verified': True,
        'call_id': response.call_id,
        'status_code': response.status_code,
        'result_code': response.result_code
    }), 200
