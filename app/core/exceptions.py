# /app/core/exceptions.py

"""
Service-level error taxonomy.

Services raise these; routers translate them into HTTP status codes. Only
`InvalidInputError` maps to 400. Any other `ValueError` escaping a service is
an internal fault and answers 500.
"""


class InvalidInputError(ValueError):
    """The caller's request is missing a field or has an unusable value (400)."""


class ConfigurationError(Exception):
    """A required provider credential is missing. Not user-actionable (500)."""


class UpstreamProviderError(Exception):
    """An external provider failed or returned unusable output (502)."""


class NotFoundError(Exception):
    """The requested record (or feed content) does not exist (404)."""


class OwnershipError(Exception):
    """The record exists but belongs to another user (403)."""
