"""
Chargify client identity.

Usage:
    from chargify_direct import Client

    client = Client(
        api_key='your_api_id',
        api_password='your_api_password',
        api_secret='your_api_secret'
    )

    secure = client.direct.secure_parameters({
        'timestamp': generate_timestamp(),
        'nonce': generate_nonce(),
        'redirect_uri': 'https://example.com/direct/callback'
    })
"""
import os
from typing import Optional

from dotenv import load_dotenv

from chargify_direct.direct.service import Direct


class Client:
    """API credentials shared with Chargify"""

    def __init__(self,
                 api_key: str,
                 api_password: Optional[str] = None,
                 api_secret: Optional[str] = None,
                 proxy: Optional[str] = None):
        """
        Initialize client identity

        Args:
            api_key: Chargify v2 API id, sent as ``secure[api_id]``
            api_password: API password for basic auth
            api_secret: Shared secret used as the signing key
            proxy: Outbound proxy URL, if any
        """
        self._api_key = api_key
        self._api_password = api_password
        self._api_secret = api_secret
        self._proxy = proxy

    @classmethod
    def from_env(cls, prefix: str = 'CHARGIFY_') -> 'Client':
        """Build a client from ``<prefix>API_KEY`` style environment variables."""
        load_dotenv()
        return cls(
            api_key=os.getenv(f'{prefix}API_KEY'),
            api_password=os.getenv(f'{prefix}API_PASSWORD'),
            api_secret=os.getenv(f'{prefix}API_SECRET'),
            proxy=os.getenv(f'{prefix}PROXY') or None
        )

    @property
    def api_key(self):
        return self._api_key

    @property
    def api_password(self):
        return self._api_password

    @property
    def api_secret(self):
        return self._api_secret

    @property
    def proxy(self):
        return self._proxy

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key and self._api_secret)

    @property
    def direct(self) -> Direct:
        return Direct(self)

    def __repr__(self):
        password = '***' if self._api_password else None
        secret = '***' if self._api_secret else None
        return (
            f'Client(api_key={self._api_key!r}, api_password={password!r}, '
            f'api_secret={secret!r}, proxy={self._proxy!r})'
        )
