from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from comment_analyzer.attribute_types import AttributeType
from comment_analyzer.models import DEFAULT_USER_AGENT, ClientConfig


class ClientSettings(BaseSettings):
    """
    Environment-driven settings for the analyzer client.
    """

    model_config = SettingsConfigDict(env_prefix="", env_file=".env", extra="ignore")

    api_key: str = Field(default="", alias="PERSPECTIVE_API_KEY")
    do_not_store: bool = Field(default=True, alias="PERSPECTIVE_DO_NOT_STORE")

    # Unset/empty -> no timeout
    timeout_sec: Optional[float] = Field(default=10.0, alias="PERSPECTIVE_TIMEOUT_SEC")

    # Comma-separated wire tokens, e.g. "TOXICITY,SPAM"
    requested_attributes: str = Field(default="TOXICITY", alias="PERSPECTIVE_REQUESTED_ATTRIBUTES")

    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="PERSPECTIVE_USER_AGENT")

    @field_validator("timeout_sec", mode="before")
    @classmethod
    def _empty_timeout_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def requested_attribute_types(self) -> frozenset[AttributeType]:
        """
        Raises:
            ValueError: if a token is not a known attribute type
        """
        tokens = [t.strip().upper() for t in self.requested_attributes.split(",") if t.strip()]
        return frozenset(AttributeType.from_wire_token(t) for t in tokens)

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            api_key=self.api_key,
            do_not_store=self.do_not_store,
            timeout_sec=self.timeout_sec,
            user_agent=self.user_agent,
        )


def load_settings() -> ClientSettings:
    return ClientSettings()
