# Data Manager Client
# File: auth.py
# Version: v1

"""Platform credentials sent with each data-manager request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional
import base64

from .config import DataManagerConfig


@dataclass(frozen=True)
class PlatformCredentials:
    """User id / password pair presented to the platform via HTTP Basic.

    The metadata server performs its own authorization on the ``userId``
    path segment; these credentials only authenticate the HTTP caller.
    """

    user_id: str
    password: str

    @classmethod
    def from_config(cls, config: DataManagerConfig) -> Optional["PlatformCredentials"]:
        if not config.has_credentials:
            return None
        return cls(user_id=str(config.user_id), password=str(config.password))

    def auth_headers(self) -> Dict[str, str]:
        # base64(user_id:password)
        raw_credentials = f"{self.user_id}:{self.password}"
        basic_token = base64.b64encode(raw_credentials.encode("utf-8")).decode("ascii")
        return {"Authorization": f"Basic {basic_token}"}

    def __repr__(self) -> str:
        return f"PlatformCredentials(user_id={self.user_id!r}, password='***')"
