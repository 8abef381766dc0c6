"""Pydantic models for loriapi."""

from loriapi.models.metadata import ResponseMetadata
from loriapi.models.profile import UserField, UserProfile
from loriapi.models.result import UserDataResult
from loriapi.models.transaction import TransactionPage, TransactionQuery, TransactionType

__all__ = [
    "ResponseMetadata",
    "UserField",
    "UserProfile",
    "UserDataResult",
    "TransactionPage",
    "TransactionQuery",
    "TransactionType",
]
