"""Direct protocol constants."""
from .constants import (
    BASE_URL,
    SIGNUPS_URL,
    SUCCESS_STATUS_CODE,
    RESERVED_DATA_KEYS,
    SecureField,
    ResponseField,
    APIErrorCode
)

__all__ = [
    'BASE_URL',
    'SIGNUPS_URL',
    'SUCCESS_STATUS_CODE',
    'RESERVED_DATA_KEYS',
    'SecureField',
    'ResponseField',
    'APIErrorCode'
]
