"""
Direct service layer: binds a client identity to parameter sets.
"""
from chargify_direct.utils.flow_logging import log_secure_parameters_built
from .errors import InvalidArgument
from .parameters import ResponseParameters, SecureParameters
from .signing import sign


class Direct:
    """Entry point for building secure forms and checking callbacks."""

    def __init__(self, client):
        if client is None:
            raise InvalidArgument('Direct requires a Client as an argument', 'client')
        self.client = client

    @staticmethod
    def signature(message, secret):
        return sign(message, secret)

    def secure_parameters(self, params):
        """
        Build signed parameters for a hosted form.

        Args:
            params (Mapping): Fields to submit, including ``timestamp`` and ``nonce``

        Returns:
            SecureParameters
        """
        secure = SecureParameters.from_params(params, self.client)
        log_secure_parameters_built(secure)
        return secure

    def response_parameters(self, params):
        """Wrap a redirect callback's query parameters for verification."""
        return ResponseParameters.from_params(params, self.client)
