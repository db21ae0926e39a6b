"""Input models for AWS client construction."""

from pydantic import BaseModel, ConfigDict, Field


class AWSClientInput(BaseModel):
    """Static credentials and region for an explicitly configured client.

    Attributes:
        access_key_id: AWS access key id
        secret_access_key: AWS secret access key
        session_token: Session token for temporary credentials, empty if none
        region: AWS region for all sub-clients
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    access_key_id: str = Field(default="", alias="AccessKeyID")
    secret_access_key: str = Field(default="", alias="SecretAccessKey", repr=False)
    session_token: str = Field(default="", alias="SessionToken", repr=False)
    region: str = Field(default="", alias="Region")
