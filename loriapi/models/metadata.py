"""Response header metadata model."""

from pydantic import BaseModel, ConfigDict


class ResponseMetadata(BaseModel):
    """Cluster and token headers attached to every successful response."""

    model_config = ConfigDict(frozen=True)

    cluster_id: str | None = None
    token_creator: str | None = None
    token_user: str | None = None
