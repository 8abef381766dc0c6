"""Transaction query and page models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from loriapi.exceptions import ValidationError
from loriapi.models.metadata import ResponseMetadata


class TransactionType(str, Enum):
    """Transaction type tags accepted by the transactions endpoint."""
    PAYMENT = "PAYMENT"
    DAILY_REWARD = "DAILY_REWARD"
    COINFLIP_BET = "COINFLIP_BET"
    COINFLIP_BET_GLOBAL = "COINFLIP_BET_GLOBAL"
    EMOJI_FIGHT_BET = "EMOJI_FIGHT_BET"
    RAFFLE = "RAFFLE"
    HOME_BROKER = "HOME_BROKER"
    SHIP_EFFECT = "SHIP_EFFECT"
    SPARKLYPOWER_LSX = "SPARKLYPOWER_LSX"
    SONHOS_BUNDLE_PURCHASE = "SONHOS_BUNDLE_PURCHASE"
    INACTIVE_DAILY_TAX = "INACTIVE_DAILY_TAX"
    DIVINE_INTERVENTION = "DIVINE_INTERVENTION"
    BOT_VOTE = "BOT_VOTE"
    POWERSTREAM = "POWERSTREAM"
    EVENTS = "EVENTS"
    LORI_COOL_CARDS = "LORI_COOL_CARDS"
    LORITTA_ITEM_SHOP = "LORITTA_ITEM_SHOP"
    BOM_DIA_E_CIA = "BOM_DIA_E_CIA"
    GARTICOS = "GARTICOS"


class TransactionQuery(BaseModel):
    """
    Filters for a transaction listing.

    Dates are either ISO-8601 strings, passed through as-is, or Unix epoch
    seconds. Type tags and date values are checked by the client, not here,
    so that every unknown tag can be reported at once. Shape errors raise
    loriapi.ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    transaction_types: list[Any] | None = None
    before_date: Any = None
    after_date: Any = None

    @model_validator(mode="wrap")
    @classmethod
    def _reject_as_validation_error(cls, data, handler):
        try:
            return handler(data)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid transaction query: {e}") from e


class TransactionPage(BaseModel):
    """One page of a user's transaction history."""

    model_config = ConfigDict(frozen=True)

    transactions: list[Any] = []
    paging: dict[str, Any] | None = None
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)
