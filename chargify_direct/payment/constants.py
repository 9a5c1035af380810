"""
Chargify Direct constants and enums.
"""
from enum import Enum


BASE_URL = 'https://api.chargify.com/api/v2'
SIGNUPS_URL = f'{BASE_URL}/signups'

# Counterparty reports success with this literal status code only
SUCCESS_STATUS_CODE = '200'


class SecureField(Enum):
    """Hidden inputs carried by a Direct form, in rendering order."""
    API_ID = 'api_id'
    TIMESTAMP = 'timestamp'
    NONCE = 'nonce'
    DATA = 'data'
    SIGNATURE = 'signature'

    @property
    def input_name(self):
        return f'secure[{self.value}]'


class ResponseField(Enum):
    """Keys read from a Direct redirect callback."""
    STATUS_CODE = 'status_code'
    TIMESTAMP = 'timestamp'
    NONCE = 'nonce'
    RESULT_CODE = 'result_code'
    CALL_ID = 'call_id'
    SIGNATURE = 'signature'


# Signed separately from the encoded data blob
RESERVED_DATA_KEYS = (SecureField.TIMESTAMP.value, SecureField.NONCE.value)


class APIErrorCode:
    """Standardized error codes returned by the web layer."""
    INVALID_REQUEST = 'invalid_request'
    AUTHENTICATION_FAILED = 'authentication_failed'
    CONFIGURATION_ERROR = 'configuration_error'
    NONCE_MISMATCH = 'nonce_mismatch'
    RESOURCE_NOT_FOUND = 'not_found'
    INTERNAL_ERROR = 'internal_error'
