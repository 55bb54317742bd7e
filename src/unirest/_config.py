import os
from typing import Any, Optional

import httpx
from pydantic import BaseModel, Field

from ._utils.constants import ENV_FOLLOW_REDIRECTS, ENV_TIMEOUT


class Config(BaseModel):
    """Transport settings used when a request is sent without a client."""

    timeout: float = Field(default=30.0, gt=0)
    follow_redirects: bool = True
    trust_env: bool = True

    @classmethod
    def from_env(cls, **overrides) -> "Config":
        """Build a config from ``UNIREST_*`` environment variables.

        Explicit keyword overrides win over the environment. Values are
        validated by pydantic, so ``UNIREST_TIMEOUT=abc`` raises a
        ``ValidationError``.
        """
        values: dict[str, Optional[str]] = {
            "timeout": os.getenv(ENV_TIMEOUT),
            "follow_redirects": os.getenv(ENV_FOLLOW_REDIRECTS),
        }
        data = {key: value for key, value in values.items() if value is not None}
        data.update(overrides)
        return cls.model_validate(data)

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for an ``httpx.Client`` or ``httpx.AsyncClient``."""
        return {
            "timeout": httpx.Timeout(self.timeout),
            "follow_redirects": self.follow_redirects,
            "trust_env": self.trust_env,
        }
