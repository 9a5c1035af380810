from .flow_logging import log_response_verification, log_secure_parameters_built

__all__ = ['log_response_verification', 'log_secure_parameters_built']
