"""
Tests for canonical message building and HMAC signing.
"""
import hashlib
import hmac
from collections import OrderedDict

import pytest

from chargify_direct.direct.errors import InvalidArgument
from chargify_direct.direct.signing import (
    build_response_sign_message,
    build_sign_message,
    coerce_value,
    encode_data,
    generate_nonce,
    generate_timestamp,
    sign,
    verify_signature
)


@pytest.mark.unit
class TestEncodeData:
    """Test secure data query-string encoding."""

    def test_excludes_timestamp_and_nonce(self):
        params = {'timestamp': 'T1', 'nonce': 'N1', 'amount': '100'}
        assert encode_data(params) == 'amount=100'

    def test_keeps_insertion_order(self):
        params = OrderedDict([('zeta', '1'), ('alpha', '2'), ('mid', '3')])
        assert encode_data(params) == 'zeta=1&alpha=2&mid=3'

    def test_empty_after_removal_is_empty_string(self):
        assert encode_data({'timestamp': 'T1', 'nonce': 'N1'}) == ''
        assert encode_data({}) == ''

    def test_form_urlencodes_keys_and_values(self):
        params = {'redirect_uri': 'https://example.com/cb?a=1&b=2', 'note': 'hello world'}
        assert encode_data(params) == (
            'redirect_uri=https%3A%2F%2Fexample.com%2Fcb%3Fa%3D1%26b%3D2'
            '&note=hello+world'
        )

    def test_nested_mappings_use_bracket_keys(self):
        params = {'signup': {'product': {'handle': 'basic'}, 'customer': {'email': 'a@b.co'}}}
        assert encode_data(params) == (
            'signup%5Bproduct%5D%5Bhandle%5D=basic'
            '&signup%5Bcustomer%5D%5Bemail%5D=a%40b.co'
        )

    def test_lists_use_empty_brackets(self):
        assert encode_data({'tags': ['a', 'b']}) == 'tags%5B%5D=a&tags%5B%5D=b'

    def test_scalars_are_coerced(self):
        params = {'amount': 100, 'active': True, 'coupon': None}
        assert encode_data(params) == 'amount=100&active=true&coupon='

    def test_bytes_are_decoded(self):
        assert encode_data({'a': b'x y', 'b': bytearray(b'caf\xc3\xa9')}) == 'a=x+y&b=caf%C3%A9'

    def test_does_not_mutate_input(self):
        params = {'timestamp': 'T1', 'nonce': 'N1', 'amount': '100'}
        encode_data(params)
        assert params == {'timestamp': 'T1', 'nonce': 'N1', 'amount': '100'}

    def test_none_map_rejected(self):
        with pytest.raises(InvalidArgument) as exc_info:
            encode_data(None)
        assert exc_info.value.param_name == 'data'


@pytest.mark.unit
class TestSignMessages:
    """Test delimiter-free message concatenation."""

    def test_build_sign_message(self):
        assert build_sign_message('key1', 'T1', 'N1', 'amount=100') == 'key1T1N1amount=100'

    def test_build_sign_message_empty_data(self):
        assert build_sign_message('key1', 'T1', 'N1', '') == 'key1T1N1'

    def test_build_response_sign_message(self):
        message = build_response_sign_message('key1', 'T1', 'N1', '200', '0', 'C1')
        assert message == 'key1T1N12000C1'

    def test_coerce_value(self):
        assert coerce_value(None) == ''
        assert coerce_value(False) == 'false'
        assert coerce_value(12.5) == '12.5'


@pytest.mark.unit
class TestSign:
    """Test HMAC-SHA1 signature generation and verification."""

    def test_known_vector(self):
        assert sign('key1T1N1amount=100', 's3cr3t') == '4117597ece43a4b7e6a14c38f61adb393ec4a2d5'

    def test_matches_hmac_sha1_lowercase_hex(self):
        expected = hmac.new(b's3cr3t', b'message', hashlib.sha1).hexdigest()
        signature = sign('message', 's3cr3t')
        assert signature == expected
        assert len(signature) == 40
        assert signature == signature.lower()

    def test_deterministic(self):
        assert sign('message', 's3cr3t') == sign('message', 's3cr3t')

    def test_secret_changes_signature(self):
        assert sign('message', 's3cr3t') != sign('message', 'other')

    def test_empty_secret_rejected(self):
        with pytest.raises(InvalidArgument):
            sign('message', '')
        with pytest.raises(InvalidArgument):
            sign('message', None)

    def test_verify_signature(self):
        signature = sign('message', 's3cr3t')
        assert verify_signature('message', 's3cr3t', signature) is True
        assert verify_signature('message', 's3cr3t', signature[:-1] + 'x') is False
        assert verify_signature('message', 'wrong', signature) is False

    def test_verify_signature_missing_values(self):
        assert verify_signature('message', 's3cr3t', '') is False
        assert verify_signature('message', 's3cr3t', None) is False
        assert verify_signature('message', '', 'abc') is False

    def test_verify_signature_non_ascii_input(self):
        assert verify_signature('message', 's3cr3t', 'sïgnature') is False


@pytest.mark.unit
class TestGenerators:
    """Test nonce and timestamp helpers."""

    def test_nonce_is_unique_hex(self):
        first, second = generate_nonce(), generate_nonce()
        assert first != second
        assert len(first) == 40
        int(first, 16)

    def test_timestamp_is_unix_seconds(self):
        timestamp = generate_timestamp()
        assert timestamp.isdigit()
        assert len(timestamp) >= 10
