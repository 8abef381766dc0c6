"""loriapi - async client for the Loritta public API."""

from loriapi.config import ClientConfig
from loriapi.core.client import ApiClient
from loriapi.exceptions import (
    ConfigurationError,
    LoriApiError,
    RemoteApiError,
    ValidationError,
)
from loriapi.models.metadata import ResponseMetadata
from loriapi.models.profile import UserField, UserProfile
from loriapi.models.result import UserDataResult
from loriapi.models.transaction import TransactionPage, TransactionQuery, TransactionType

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ApiClient",
    "ClientConfig",
    # Models
    "UserProfile",
    "UserField",
    "UserDataResult",
    "ResponseMetadata",
    "TransactionQuery",
    "TransactionPage",
    "TransactionType",
    # Errors
    "LoriApiError",
    "ConfigurationError",
    "ValidationError",
    "RemoteApiError",
    "__version__",
]
