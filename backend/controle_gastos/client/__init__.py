"""
Python client for the transactions API.
"""

from controle_gastos.client.session import SessionStore
from controle_gastos.client.api_client import (
    ApiClient,
    ApiError,
    NotAuthenticatedError,
    SessionExpiredError,
)
from controle_gastos.client.selection import SelectionSet
from controle_gastos.client.dashboard import Dashboard, NothingSelectedError

__all__ = [
    "SessionStore",
    "ApiClient",
    "ApiError",
    "NotAuthenticatedError",
    "SessionExpiredError",
    "SelectionSet",
    "Dashboard",
    "NothingSelectedError",
]
