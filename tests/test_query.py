"""Unit tests for local query validation and normalization."""

import pytest

from loriapi.constants import (
    API_KEY_PREFIX,
    DEFAULT_DATE,
    TRANSACTIONS_LIMIT,
    TRANSACTIONS_OFFSET,
    VALID_TRANSACTION_TYPES,
)
from loriapi.core.query import (
    build_transaction_params,
    normalize_date,
    normalize_transaction_types,
    to_iso_timestamp,
    validate_api_key,
    validate_transaction_types,
    validate_user_id,
)
from loriapi.exceptions import ConfigurationError, ValidationError
from loriapi.models.transaction import TransactionQuery, TransactionType


class TestValidateApiKey:
    """Test credential format checks."""

    def test_valid_key(self):
        key = API_KEY_PREFIX + "x" * 45
        assert validate_api_key(key) == key

    @pytest.mark.parametrize("key", [
        "lorixp_" + "x" * 44,  # 51 chars
        "lorixp_" + "x" * 46,  # 53 chars
        "lorixp_",
        "",
        "loriXP_" + "x" * 45,
        "x" * 52,
    ])
    def test_invalid_keys(self, key: str):
        with pytest.raises(ConfigurationError):
            validate_api_key(key)

    def test_non_string_key(self):
        with pytest.raises(ConfigurationError):
            validate_api_key(None)

    def test_message_does_not_leak_key(self):
        key = "lorixp_" + "s" * 40
        with pytest.raises(ConfigurationError) as exc_info:
            validate_api_key(key)
        assert key not in str(exc_info.value)


class TestValidateUserId:
    """Test user id checks."""

    def test_keeps_id_as_given(self):
        assert validate_user_id(" 123 ") == " 123 "

    @pytest.mark.parametrize("user_id", ["", "   "])
    def test_empty_rejected(self, user_id: str):
        with pytest.raises(ValidationError):
            validate_user_id(user_id)


class TestNormalizeTransactionTypes:
    """Test type filter normalization."""

    def test_none_is_empty(self):
        assert normalize_transaction_types(None) == []

    def test_empty_list_is_empty(self):
        assert normalize_transaction_types([]) == []

    def test_trims_and_drops_blanks(self):
        assert normalize_transaction_types([" PAYMENT ", "", "  "]) == ["PAYMENT"]

    def test_drops_duplicates_keeps_order(self):
        tokens = normalize_transaction_types(["RAFFLE", "PAYMENT", "RAFFLE"])
        assert tokens == ["RAFFLE", "PAYMENT"]

    def test_enum_members(self):
        tokens = normalize_transaction_types([TransactionType.BOT_VOTE, "EVENTS"])
        assert tokens == ["BOT_VOTE", "EVENTS"]

    def test_commas_not_split(self):
        assert normalize_transaction_types(["PAYMENT,RAFFLE"]) == ["PAYMENT,RAFFLE"]

    def test_non_string_tokens_kept_for_validation(self):
        assert normalize_transaction_types(["PAYMENT", 5]) == ["PAYMENT", "5"]


class TestValidateTransactionTypes:
    """Test enumeration membership checks."""

    def test_all_valid(self):
        validate_transaction_types(list(VALID_TRANSACTION_TYPES))

    def test_reports_every_invalid_token(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_transaction_types(["PAYMENT", "BOGUS", "payment", "NOPE"])

        error = exc_info.value
        assert error.invalid_tokens == ["BOGUS", "payment", "NOPE"]
        assert error.valid_tokens == VALID_TRANSACTION_TYPES
        for token in ("BOGUS", "payment", "NOPE"):
            assert token in str(error)
        assert ", ".join(VALID_TRANSACTION_TYPES) in str(error)


class TestDateNormalization:
    """Test epoch and ISO date handling."""

    def test_epoch_seconds(self):
        assert to_iso_timestamp(1600000000) == "2020-09-13T12:26:40.000Z"

    def test_epoch_zero(self):
        assert to_iso_timestamp(0) == "1970-01-01T00:00:00.000Z"

    def test_epoch_out_of_range(self):
        with pytest.raises(ValidationError):
            to_iso_timestamp(10 ** 15)

    def test_none_defaults(self):
        assert normalize_date(None) == DEFAULT_DATE == "2020-08-11T00:00:00.000Z"

    def test_string_passthrough(self):
        assert normalize_date("not-even-a-date") == "not-even-a-date"

    def test_int_converted(self):
        assert normalize_date(1600000000) == "2020-09-13T12:26:40.000Z"

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            normalize_date(True)

    def test_float_rejected(self):
        with pytest.raises(ValidationError):
            normalize_date(1600000000.5)


class TestBuildTransactionParams:
    """Test full query string construction."""

    def test_defaults(self):
        params = build_transaction_params(TransactionQuery(user_id="1"))

        assert params == {
            "limit": TRANSACTIONS_LIMIT,
            "offset": TRANSACTIONS_OFFSET,
            "transactionTypes": ",".join(VALID_TRANSACTION_TYPES),
            "beforeDate": DEFAULT_DATE,
            "afterDate": DEFAULT_DATE,
        }

    def test_fixed_paging(self):
        params = build_transaction_params(TransactionQuery(user_id="1"))
        assert params["limit"] == 10
        assert params["offset"] == 0

    def test_explicit_filter(self):
        query = TransactionQuery(
            user_id="1",
            transaction_types=["PAYMENT", " GARTICOS "],
            before_date=1600000000,
            after_date="2021-01-01T00:00:00.000Z",
        )
        params = build_transaction_params(query)

        assert params["transactionTypes"] == "PAYMENT,GARTICOS"
        assert params["beforeDate"] == "2020-09-13T12:26:40.000Z"
        assert params["afterDate"] == "2021-01-01T00:00:00.000Z"

    def test_blank_filter_means_all_types(self):
        query = TransactionQuery(user_id="1", transaction_types=["", " "])
        params = build_transaction_params(query)
        assert params["transactionTypes"] == ",".join(VALID_TRANSACTION_TYPES)

    def test_invalid_filter_raises(self):
        query = TransactionQuery(user_id="1", transaction_types=["PAYMENT", "LOTTERY"])
        with pytest.raises(ValidationError, match="LOTTERY"):
            build_transaction_params(query)
