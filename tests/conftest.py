"""
Pytest configuration and fixtures.
"""
import pytest

from chargify_direct import create_app
from chargify_direct.client import Client
from chargify_direct.direct.signing import build_response_sign_message, sign


TEST_API_KEY = 'key1'
TEST_API_SECRET = 's3cr3t'


@pytest.fixture
def app():
    """Create application for testing with a configured identity."""
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret-key',
        'CHARGIFY_API_KEY': TEST_API_KEY,
        'CHARGIFY_API_PASSWORD': 'test_password',
        'CHARGIFY_API_SECRET': TEST_API_SECRET,
        'CHARGIFY_DIRECT_URL': 'https://api.chargify.com/api/v2/signups',
    })
    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def direct_client():
    """Chargify identity shared by unit tests."""
    return Client(
        api_key=TEST_API_KEY,
        api_password='test_password',
        api_secret=TEST_API_SECRET
    )


@pytest.fixture
def signed_callback():
    """Return a callback query dict carrying a correct signature."""
    def _build(**overrides):
        params = {
            'status_code': '200',
            'timestamp': 'T1',
            'nonce': 'N1',
            'result_code': '0',
            'call_id': 'C1',
        }
        params.update(overrides)
        message = build_response_sign_message(
            TEST_API_KEY,
            params['timestamp'],
            params['nonce'],
            params['status_code'],
            params['result_code'],
            params['call_id']
        )
        params['signature'] = sign(message, TEST_API_SECRET)
        return params
    return _build
