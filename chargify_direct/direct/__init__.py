"""Direct signing package."""
from .errors import DirectError, InvalidArgument
from .parameters import ResponseParameters, SecureParameters
from .service import Direct
from .signing import (
    build_response_sign_message,
    build_sign_message,
    encode_data,
    generate_nonce,
    generate_timestamp,
    sign,
    verify_signature
)

__all__ = [
    'Direct',
    'DirectError',
    'InvalidArgument',
    'SecureParameters',
    'ResponseParameters',
    'build_response_sign_message',
    'build_sign_message',
    'encode_data',
    'generate_nonce',
    'generate_timestamp',
    'sign',
    'verify_signature'
]
