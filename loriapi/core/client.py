"""Loritta API client - coordinates validation, fetching and transformation."""

from urllib.parse import quote

import httpx

from loriapi.config import ClientConfig
from loriapi.constants import API_KEY_PREFIX, TRANSACTIONS_ENDPOINT, USER_ENDPOINT
from loriapi.core.fetcher import FetchResult, fetch_json
from loriapi.core.query import build_transaction_params, validate_api_key, validate_user_id
from loriapi.core.transformer import transform_transactions, transform_user
from loriapi.exceptions import ConfigurationError, RemoteApiError, ValidationError
from loriapi.logging import configure_logging, get_logger
from loriapi.models.result import UserDataResult
from loriapi.models.transaction import TransactionPage, TransactionQuery


class ApiClient:
    """
    Async client for the Loritta public API.

    The API key is checked on construction; a malformed key raises
    ConfigurationError and no client is created.

    Example:
        async with ApiClient("lorixp_...") as client:
            result = await client.get_user_data("197501878399926272")
            print(result.profile.dreams)
    """

    def __init__(
        self,
        api_key: str,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Loritta API key (52 characters, ``lorixp_`` prefix)
            config: ClientConfig instance, uses defaults if None
            transport: Optional httpx transport, mainly for tests
        """
        self._api_key = validate_api_key(api_key)
        self.config = config or ClientConfig()
        configure_logging(self.config)
        self._log = get_logger("client")

        client_options = {
            "base_url": self.config.base_url,
            "headers": {
                "Authorization": self._api_key,
                "Accept": "application/json",
                "User-Agent": self.config.user_agent,
            },
            "transport": transport,
        }
        if self.config.timeout_seconds is not None:
            client_options["timeout"] = self.config.timeout_seconds
        self._http = httpx.AsyncClient(**client_options)

    @classmethod
    def from_config(
        cls,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ApiClient":
        """Create a client using the key from configuration (LORIAPI_API_KEY)."""
        config = config or ClientConfig()
        if config.api_key is None:
            raise ConfigurationError("No Loritta API key configured (set LORIAPI_API_KEY)")
        return cls(config.api_key.get_secret_value(), config, transport)

    def __repr__(self) -> str:
        return f"ApiClient(api_key='{API_KEY_PREFIX}***', base_url='{self.config.base_url}')"

    async def __aenter__(self) -> "ApiClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close the connection pool."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    async def _get(self, endpoint: str, user_id: str, params: dict | None = None) -> FetchResult:
        self._log.info("request_start", endpoint=endpoint, user_id=user_id)
        try:
            result = await fetch_json(self._http, endpoint, params)
        except RemoteApiError as e:
            self._log.error(
                "request_failed",
                endpoint=endpoint,
                user_id=user_id,
                status_code=e.status_code,
                error=str(e),
            )
            raise
        return result

    async def get_user_data(self, user_id: str) -> UserDataResult:
        """
        Fetch a user's profile.

        Args:
            user_id: Discord id of the user

        Returns:
            UserDataResult with profile and response metadata

        Raises:
            ValidationError: If user_id is empty
            RemoteApiError: On any provider or transport failure
        """
        user_id = validate_user_id(user_id)
        endpoint = USER_ENDPOINT.format(user_id=quote(user_id, safe=""))

        result = await self._get(endpoint, user_id)
        user = transform_user(result)

        self._log.info(
            "request_complete",
            endpoint=endpoint,
            user_id=user_id,
            status_code=result.status_code,
        )
        return user

    async def get_user_transactions(self, query: TransactionQuery) -> TransactionPage:
        """
        Fetch one page of a user's transactions.

        The query is validated before any request is sent.

        Args:
            query: User id plus optional type and date filters

        Returns:
            TransactionPage with transactions, paging and response metadata

        Raises:
            ValidationError: On unknown type tags, bad dates or empty user id
            RemoteApiError: On any provider or transport failure
        """
        user_id = validate_user_id(query.user_id)
        try:
            params = build_transaction_params(query)
        except ValidationError as e:
            self._log.warning(
                "transaction_query_rejected",
                user_id=user_id,
                invalid_tokens=e.invalid_tokens,
                error=str(e),
            )
            raise

        endpoint = TRANSACTIONS_ENDPOINT.format(user_id=quote(user_id, safe=""))
        result = await self._get(endpoint, user_id, params)
        page = transform_transactions(result)

        self._log.info(
            "request_complete",
            endpoint=endpoint,
            user_id=user_id,
            status_code=result.status_code,
            transactions_count=len(page.transactions),
        )
        return page
