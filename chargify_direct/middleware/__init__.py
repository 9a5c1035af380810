"""
Middleware Package
"""

from .request_tracking import init_request_tracking

__all__ = [
    'init_request_tracking'
]
