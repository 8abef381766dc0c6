"""User fetch result wrapper model."""

from pydantic import BaseModel, ConfigDict

from loriapi.models.metadata import ResponseMetadata
from loriapi.models.profile import UserProfile


class UserDataResult(BaseModel):
    """A user profile together with the headers of the response it came from."""

    model_config = ConfigDict(frozen=True)

    profile: UserProfile
    metadata: ResponseMetadata
