from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = 'https://www.dwolla.com/oauth/rest'
DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = 'Dwolla Python Wrapper'


class Config(BaseSettings):
    """
    Connection settings shared by every request a client makes.

    Any field can be set from a ``DWOLLA_`` prefixed environment variable.
    api_key and api_secret are the application credentials, only needed
    for lookups that are not made on behalf of a user.
    """

    model_config = SettingsConfigDict(env_prefix="DWOLLA_")

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Root of the REST endpoints")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Request timeout (seconds)")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value")
    api_key: Optional[str] = Field(default=None, description="Application key (client_id)")
    api_secret: Optional[str] = Field(default=None, repr=False, description="Application secret (client_secret)")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/')

    @property
    def has_application_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)


settings = Config()
