"""
HMAC signing utilities for Chargify Direct parameters.

Outbound forms are signed over ``api_id + timestamp + nonce + data`` and
redirect callbacks over ``api_id + timestamp + nonce + status_code +
result_code + call_id``, both concatenated without delimiters. ``data`` is the
form-urlencoded query string of every secure field except ``timestamp`` and
``nonce``, in the caller's insertion order.
"""
import hmac
import hashlib
import secrets
import time
from collections.abc import Mapping
from urllib.parse import urlencode

from chargify_direct.payment.constants import RESERVED_DATA_KEYS
from .errors import InvalidArgument


def coerce_value(value):
    """Render a scalar parameter the way it is sent over the wire."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode('utf-8')
    return str(value)


def _flatten(prefix, value):
    # Nested structures use bracket keys: signup[customer][email], tags[]
    if isinstance(value, Mapping):
        for key, nested in value.items():
            yield from _flatten(f'{prefix}[{key}]', nested)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _flatten(f'{prefix}[]', item)
    else:
        yield prefix, coerce_value(value)


def encode_data(params):
    """
    Serialize secure data into its canonical query-string form.

    Args:
        params (Mapping): Parameter map; ``timestamp`` and ``nonce`` are skipped

    Returns:
        str: ``key1=value1&key2=value2`` with keys and values form-urlencoded,
        or an empty string when nothing remains
    """
    if params is None:
        raise InvalidArgument("The 'data' provided must be a mapping", 'data')

    pairs = []
    for key, value in params.items():
        if key in RESERVED_DATA_KEYS:
            continue
        pairs.extend(_flatten(str(key), value))

    return urlencode(pairs)


def build_sign_message(api_id, timestamp, nonce, encoded_data):
    """Message signed for an outbound secure form."""
    return f'{api_id}{timestamp}{nonce}{encoded_data}'


def build_response_sign_message(api_id, timestamp, nonce, status_code, result_code, call_id):
    """Message signed by the counterparty for a redirect callback."""
    return f'{api_id}{timestamp}{nonce}{status_code}{result_code}{call_id}'


def sign(message, secret):
    """
    Generate the HMAC-SHA1 signature of a message.

    Args:
        message (str): Canonical message
        secret (str): Shared API secret

    Returns:
        str: Lowercase hex digest
    """
    if not secret:
        raise InvalidArgument('API secret is required for signing', 'secret')

    return hmac.new(
        secret.encode('utf-8'),
        message.encode('utf-8'),
        hashlib.sha1
    ).hexdigest()


def verify_signature(message, secret, provided_signature):
    """
    Verify a received signature against the expected message.

    Returns:
        bool: True if signature is valid
    """
    if not secret or not provided_signature:
        return False

    expected_signature = sign(message, secret)
    return hmac.compare_digest(
        expected_signature.encode('utf-8'),
        provided_signature.encode('utf-8')
    )


def generate_nonce():
    """Single-use token for a secure form (40 hex chars)."""
    return secrets.token_hex(20)


def generate_timestamp():
    """Current Unix time in seconds, as sent in ``secure[timestamp]``."""
    return str(int(time.time()))
