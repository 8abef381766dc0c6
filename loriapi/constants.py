"""Fixed values of the Loritta API contract."""

DEFAULT_BASE_URL = "https://api.loritta.website"
DEFAULT_USER_AGENT = "loriapi-python"

USER_ENDPOINT = "/v1/users/{user_id}"
TRANSACTIONS_ENDPOINT = "/v1/users/{user_id}/transactions"

# Credential format
API_KEY_PREFIX = "lorixp_"
API_KEY_LENGTH = 52

# Response headers surfaced as metadata
HEADER_CLUSTER = "loritta-cluster"
HEADER_TOKEN_CREATOR = "loritta-token-creator"
HEADER_TOKEN_USER = "loritta-token-user"

# Transaction listing
TRANSACTIONS_LIMIT = 10
TRANSACTIONS_OFFSET = 0

# Beginning of the provider's transaction history
DEFAULT_DATE = "2020-08-11T00:00:00.000Z"

VALID_TRANSACTION_TYPES: tuple[str, ...] = (
    "PAYMENT",
    "DAILY_REWARD",
    "COINFLIP_BET",
    "COINFLIP_BET_GLOBAL",
    "EMOJI_FIGHT_BET",
    "RAFFLE",
    "HOME_BROKER",
    "SHIP_EFFECT",
    "SPARKLYPOWER_LSX",
    "SONHOS_BUNDLE_PURCHASE",
    "INACTIVE_DAILY_TAX",
    "DIVINE_INTERVENTION",
    "BOT_VOTE",
    "POWERSTREAM",
    "EVENTS",
    "LORI_COOL_CARDS",
    "LORITTA_ITEM_SHOP",
    "BOM_DIA_E_CIA",
    "GARTICOS",
)
