"""httpx-based fetcher for Loritta API endpoints."""

from dataclasses import dataclass
from typing import Any

import httpx

from loriapi.exceptions import RemoteApiError


@dataclass
class FetchResult:
    """Result of a successful API request."""

    endpoint: str
    status_code: int
    data: Any
    headers: httpx.Headers


def error_detail(response: httpx.Response) -> Any:
    """Provider error payload, parsed as JSON when possible."""
    try:
        return response.json()
    except ValueError:
        return response.text


async def fetch_json(
    http: httpx.AsyncClient,
    endpoint: str,
    params: dict[str, Any] | None = None,
) -> FetchResult:
    """
    Issue one GET request and decode its JSON body.

    Args:
        http: Client carrying base URL and authorization header
        endpoint: Path relative to the base URL
        params: Query string parameters

    Returns:
        FetchResult with decoded body and response headers

    Raises:
        RemoteApiError: On transport failure, non-2xx status or non-JSON body
    """
    try:
        response = await http.get(endpoint, params=params)
    except httpx.HTTPError as e:
        raise RemoteApiError(
            f"Request to {endpoint} failed: {e}",
            detail=str(e),
            endpoint=endpoint,
        ) from e

    if not response.is_success:
        raise RemoteApiError(
            f"Loritta API error {response.status_code} on {endpoint}",
            status_code=response.status_code,
            detail=error_detail(response),
            endpoint=endpoint,
        )

    try:
        data = response.json()
    except ValueError as e:
        raise RemoteApiError(
            f"Invalid JSON in response from {endpoint}",
            status_code=response.status_code,
            detail=response.text,
            endpoint=endpoint,
        ) from e

    return FetchResult(
        endpoint=endpoint,
        status_code=response.status_code,
        data=data,
        headers=response.headers,
    )
