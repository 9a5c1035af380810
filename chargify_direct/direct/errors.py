"""
Exceptions raised by the Direct signing layer.
"""


class DirectError(Exception):
    """Base exception for chargify_direct"""
    pass


class InvalidArgument(DirectError, ValueError):
    """Required identity fields or parameter map missing at construction time"""

    def __init__(self, message, param_name=None):
        super().__init__(message)
        self.param_name = param_name
