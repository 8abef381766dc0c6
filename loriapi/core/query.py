"""Local validation and normalization of request inputs."""

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Iterable

from loriapi.constants import (
    API_KEY_LENGTH,
    API_KEY_PREFIX,
    DEFAULT_DATE,
    TRANSACTIONS_LIMIT,
    TRANSACTIONS_OFFSET,
    VALID_TRANSACTION_TYPES,
)
from loriapi.exceptions import ConfigurationError, ValidationError
from loriapi.models.transaction import TransactionQuery

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def validate_api_key(api_key: str) -> str:
    """
    Check the credential format.

    Raises:
        ConfigurationError: If the key is not a 52 character ``lorixp_`` string
    """
    if not isinstance(api_key, str):
        raise ConfigurationError("Invalid Loritta API key: expected a string")
    if len(api_key) != API_KEY_LENGTH or not api_key.startswith(API_KEY_PREFIX):
        raise ConfigurationError(
            f"Invalid Loritta API key: expected {API_KEY_LENGTH} characters "
            f"starting with '{API_KEY_PREFIX}'"
        )
    return api_key


def validate_user_id(user_id: str) -> str:
    """Reject blank user ids; the id is otherwise sent as given."""
    if not isinstance(user_id, str) or not user_id.strip():
        raise ValidationError("User id must be a non-empty string")
    return user_id


def normalize_transaction_types(types: Iterable[Any] | None) -> list[str]:
    """
    Flatten a type filter into trimmed, non-empty, unique tokens.

    Examples:
        [" PAYMENT ", "", "PAYMENT"] -> ["PAYMENT"]
        [TransactionType.RAFFLE] -> ["RAFFLE"]
        ["PAYMENT", 5] -> ["PAYMENT", "5"]
        None -> []
    """
    if not types:
        return []

    tokens: list[str] = []
    for item in types:
        token = item.value if isinstance(item, Enum) else str(item)
        token = token.strip()
        if token and token not in tokens:
            tokens.append(token)
    return tokens


def validate_transaction_types(tokens: list[str]) -> None:
    """
    Reject every token outside the valid enumeration in one pass.

    Raises:
        ValidationError: Listing all invalid tokens and the valid ones
    """
    invalid = [token for token in tokens if token not in VALID_TRANSACTION_TYPES]
    if invalid:
        raise ValidationError(
            f"Invalid transaction type(s): {', '.join(invalid)}. "
            f"Valid types: {', '.join(VALID_TRANSACTION_TYPES)}",
            invalid_tokens=invalid,
            valid_tokens=VALID_TRANSACTION_TYPES,
        )


def to_iso_timestamp(seconds: int) -> str:
    """
    Convert Unix epoch seconds to an ISO-8601 UTC string with milliseconds.

    Examples:
        1600000000 -> "2020-09-13T12:26:40.000Z"
    """
    try:
        moment = UNIX_EPOCH + timedelta(milliseconds=seconds * 1000)
    except OverflowError as e:
        raise ValidationError(f"Timestamp out of range: {seconds}") from e
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_date(value: Any) -> str:
    """
    Normalize a date filter; strings are passed through unchanged.

    Raises:
        ValidationError: For anything other than None, str or int epoch seconds
    """
    if value is None:
        return DEFAULT_DATE
    if isinstance(value, bool):
        raise ValidationError(f"Unsupported date value: {value!r}")
    if isinstance(value, int):
        return to_iso_timestamp(value)
    if isinstance(value, str):
        return value
    raise ValidationError(f"Unsupported date value: {value!r}")


def build_transaction_params(query: TransactionQuery) -> dict[str, str | int]:
    """
    Build the query string of a transaction listing.

    Without an explicit type filter the full enumeration is requested.

    Raises:
        ValidationError: On unknown type tags or unusable dates
    """
    tokens = normalize_transaction_types(query.transaction_types)
    validate_transaction_types(tokens)

    return {
        "limit": TRANSACTIONS_LIMIT,
        "offset": TRANSACTIONS_OFFSET,
        "transactionTypes": ",".join(tokens or VALID_TRANSACTION_TYPES),
        "beforeDate": normalize_date(query.before_date),
        "afterDate": normalize_date(query.after_date),
    }
