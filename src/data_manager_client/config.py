# Data Manager Client
# File: config.py
# Version: v1

"""Configuration for the Data Manager metadata client."""

from __future__ import annotations

from dataclasses import dataclass
import os


def _parse_bool_env(name: str, default: bool = False) -> bool:
    """Parse a boolean-like environment variable.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive).
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _parse_int_env(
    name: str,
    default: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """Parse an int environment variable with clamping and safe fallback."""
    raw = os.getenv(name)
    if raw is None or not str(raw).strip():
        value = int(default)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            value = int(default)

    if min_value is not None and value < min_value:
        value = min_value
    if max_value is not None and value > max_value:
        value = max_value

    return value


@dataclass(frozen=True)
class DataManagerConfig:
    """Values needed to reach a metadata server's data-manager service.

    A single struct with optional fields replaces the usual family of
    client constructors:

    - server_name / platform_url_root: where requests are routed
    - user_id / password: optional platform credentials (HTTP Basic)
    - max_page_size: 0 means the client imposes no upper bound
    - clamp_page_size: reduce oversized page requests instead of rejecting
    """

    server_name: str | None
    platform_url_root: str | None

    user_id: str | None = None
    password: str | None = None

    max_page_size: int = 0
    clamp_page_size: bool = False

    verify_tls: bool = True
    timeout_seconds: int = 30

    @property
    def has_credentials(self) -> bool:
        return bool(self.user_id and self.password)

    @classmethod
    def from_env(cls) -> "DataManagerConfig":
        """Create configuration from environment variables."""
        server_name = os.getenv("DATA_MANAGER_SERVER_NAME")
        platform_url_root = os.getenv("DATA_MANAGER_PLATFORM_URL")
        user_id = os.getenv("DATA_MANAGER_USER_ID")
        password = os.getenv("DATA_MANAGER_PASSWORD")

        max_page_size = _parse_int_env(
            "DATA_MANAGER_MAX_PAGE_SIZE", default=0, min_value=0, max_value=100000
        )
        clamp_page_size = _parse_bool_env("DATA_MANAGER_CLAMP_PAGE_SIZE", default=False)
        verify_tls = _parse_bool_env("DATA_MANAGER_VERIFY_TLS", default=True)
        timeout_seconds = _parse_int_env(
            "DATA_MANAGER_TIMEOUT_SECONDS", default=30, min_value=1, max_value=600
        )

        return cls(
            server_name=server_name,
            platform_url_root=platform_url_root,
            user_id=user_id,
            password=password,
            max_page_size=max_page_size,
            clamp_page_size=clamp_page_size,
            verify_tls=verify_tls,
            timeout_seconds=timeout_seconds,
        )


def caller_id_from_env(default: str = "mcp-user") -> str:
    """User id the MCP tools pass on each call (DATA_MANAGER_CALLER_ID)."""
    raw = os.getenv("DATA_MANAGER_CALLER_ID")
    if raw is None or not raw.strip():
        return default
    return raw.strip()
