"""Transformation of API responses into typed results."""

from typing import Mapping

import httpx
from pydantic import ValidationError as PydanticValidationError

from loriapi.constants import HEADER_CLUSTER, HEADER_TOKEN_CREATOR, HEADER_TOKEN_USER
from loriapi.core.fetcher import FetchResult
from loriapi.exceptions import RemoteApiError
from loriapi.models.metadata import ResponseMetadata
from loriapi.models.profile import UserProfile
from loriapi.models.result import UserDataResult
from loriapi.models.transaction import TransactionPage


def to_metadata(headers: Mapping[str, str]) -> ResponseMetadata:
    """Pick the cluster and token headers, matching names case-insensitively."""
    headers = httpx.Headers(headers)
    return ResponseMetadata(
        cluster_id=headers.get(HEADER_CLUSTER),
        token_creator=headers.get(HEADER_TOKEN_CREATOR),
        token_user=headers.get(HEADER_TOKEN_USER),
    )


def _malformed(result: FetchResult, reason: str) -> RemoteApiError:
    return RemoteApiError(
        f"Malformed response from {result.endpoint}: {reason}",
        status_code=result.status_code,
        detail=result.data,
        endpoint=result.endpoint,
    )


def transform_user(result: FetchResult) -> UserDataResult:
    """
    Build a UserDataResult from a user endpoint response.

    Raises:
        RemoteApiError: If the body is not a profile object
    """
    if not isinstance(result.data, dict):
        raise _malformed(result, "expected a JSON object")

    try:
        profile = UserProfile.model_validate(result.data)
    except PydanticValidationError as e:
        raise _malformed(result, str(e)) from e

    return UserDataResult(profile=profile, metadata=to_metadata(result.headers))


def transform_transactions(result: FetchResult) -> TransactionPage:
    """
    Build a TransactionPage from a transactions endpoint response.

    Raises:
        RemoteApiError: If the body does not hold a transaction list
    """
    if not isinstance(result.data, dict):
        raise _malformed(result, "expected a JSON object")

    try:
        return TransactionPage(
            transactions=result.data.get("transactions") or [],
            paging=result.data.get("paging"),
            metadata=to_metadata(result.headers),
        )
    except PydanticValidationError as e:
        raise _malformed(result, str(e)) from e
