"""
Secure (outbound) and response (inbound) parameter sets for Chargify Direct.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from markupsafe import Markup

from chargify_direct.payment.constants import (
    RESERVED_DATA_KEYS,
    SUCCESS_STATUS_CODE,
    ResponseField,
    SecureField
)
from .errors import InvalidArgument
from .signing import (
    build_response_sign_message,
    build_sign_message,
    coerce_value,
    encode_data,
    sign,
    verify_signature
)


def _is_blank(value):
    return value is None or not str(value).strip()


def _identity(client, owner):
    if client is None:
        raise InvalidArgument(f'{owner} requires connection to a Client - was one given?', 'client')
    return client.api_key, client.api_secret


@dataclass(frozen=True)
class SecureParameters:
    """Signed payload rendered as hidden inputs of a Direct form."""
    api_id: str
    timestamp: str
    nonce: str
    data: Optional[Dict[str, Any]]
    secret: str = field(repr=False)

    def __post_init__(self):
        if self.data is None:
            raise InvalidArgument("The 'data' provided must be a mapping", 'data')
        if _is_blank(self.api_id) or _is_blank(self.secret):
            raise InvalidArgument('SecureParameters requires connection to a Client - was one given?')

    def __hash__(self):
        # data is a dict; hash its canonical encoding so equal sets hash alike
        return hash((self.api_id, self.timestamp, self.nonce, self.encoded_data))

    @classmethod
    def from_params(cls, params, client):
        """
        Build secure parameters from a caller-supplied mapping.

        Args:
            params (Mapping): Form fields including ``timestamp`` and ``nonce``
            client (Client): Identity providing the api key and secret

        Returns:
            SecureParameters
        """
        api_id, secret = _identity(client, cls.__name__)
        if params is None:
            return cls(api_id, '', '', None, secret)

        data = {key: value for key, value in params.items() if key not in RESERVED_DATA_KEYS}
        return cls(
            api_id=api_id,
            timestamp=coerce_value(params.get(SecureField.TIMESTAMP.value)),
            nonce=coerce_value(params.get(SecureField.NONCE.value)),
            data=data,
            secret=secret
        )

    @property
    def encoded_data(self) -> str:
        return encode_data(self.data)

    @property
    def signature(self) -> str:
        # Recomputed on every access so it always reflects current data
        message = build_sign_message(self.api_id, self.timestamp, self.nonce, self.encoded_data)
        return sign(message, self.secret)

    def to_form_fields(self) -> List[Tuple[str, str]]:
        """Five (name, value) pairs in the order the hosted page expects."""
        return [
            (SecureField.API_ID.value, self.api_id),
            (SecureField.TIMESTAMP.value, self.timestamp),
            (SecureField.NONCE.value, self.nonce),
            (SecureField.DATA.value, self.encoded_data),
            (SecureField.SIGNATURE.value, self.signature),
        ]

    def to_form_inputs(self) -> Markup:
        """Hidden ``secure[...]`` inputs, attribute-escaped for templates."""
        inputs = [
            Markup('<input type="hidden" name="{0}" value="{1}"/>').format(
                SecureField(name).input_name, value
            )
            for name, value in self.to_form_fields()
        ]
        return Markup('\n').join(inputs)


@dataclass(frozen=True)
class ResponseParameters:
    """Redirect callback from the hosted page, verified against the secret."""
    api_id: str
    secret: str = field(repr=False)
    timestamp: str = ''
    nonce: str = ''
    status_code: str = ''
    result_code: str = ''
    call_id: str = ''
    signature: str = ''

    def __post_init__(self):
        if _is_blank(self.api_id) or _is_blank(self.secret):
            raise InvalidArgument('ResponseParameters requires connection to a Client - was one given?')

    @classmethod
    def from_params(cls, params, client):
        """Read callback fields; missing keys become empty strings."""
        api_id, secret = _identity(client, cls.__name__)
        params = params or {}

        def read(response_field):
            return coerce_value(params.get(response_field.value))

        return cls(
            api_id=api_id,
            secret=secret,
            timestamp=read(ResponseField.TIMESTAMP),
            nonce=read(ResponseField.NONCE),
            status_code=read(ResponseField.STATUS_CODE),
            result_code=read(ResponseField.RESULT_CODE),
            call_id=read(ResponseField.CALL_ID),
            signature=read(ResponseField.SIGNATURE)
        )

    @property
    def is_success(self) -> bool:
        return self.status_code == SUCCESS_STATUS_CODE

    @property
    def expected_signature(self) -> str:
        return sign(self.sign_message, self.secret)

    @property
    def sign_message(self) -> str:
        return build_response_sign_message(
            self.api_id,
            self.timestamp,
            self.nonce,
            self.status_code,
            self.result_code,
            self.call_id
        )

    @property
    def is_verified(self) -> bool:
        return verify_signature(self.sign_message, self.secret, self.signature)
