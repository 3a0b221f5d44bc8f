from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class IceServer(BaseModel):
    model_config = ConfigDict(frozen=True)

    urls: str | list[str]
    username: str | None = None
    credential: str | None = Field(default=None, repr=False)

    @model_validator(mode="after")
    def _check_credential_pair(self) -> IceServer:
        if (self.username is None) != (self.credential is None):
            raise ValueError("username and credential must be set together")
        return self

    @property
    def has_credentials(self) -> bool:
        return self.username is not None

    def url_list(self) -> list[str]:
        return [self.urls] if isinstance(self.urls, str) else list(self.urls)


class IceServersResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ice_servers: list[IceServer] = Field(default_factory=list, alias="iceServers")


class IceServersValidateRequest(BaseModel):
    value: str = Field(..., min_length=1)
