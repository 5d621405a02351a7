# Data Manager Client
# File: __init__.py
# Version: v1

"""Client library for the data-manager metadata REST API."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .clients import (
    APIManagerClient,
    ConnectionManagerClient,
    DatabaseManagerClient,
    DisplayApplicationClient,
    ExternalReferenceClient,
    SchemaManagerClient,
)
from .config import DataManagerConfig
from .errors import (
    DataManagerError,
    InvalidParameterError,
    PropertyServerError,
    UserNotAuthorizedError,
)

__all__ = [
    "__version__",
    "APIManagerClient",
    "ConnectionManagerClient",
    "DatabaseManagerClient",
    "DisplayApplicationClient",
    "ExternalReferenceClient",
    "SchemaManagerClient",
    "DataManagerConfig",
    "DataManagerError",
    "InvalidParameterError",
    "PropertyServerError",
    "UserNotAuthorizedError",
]


def _resolve_version() -> str:
    """Resolve installed distribution version.

    Falls back to a fixed default when running from a source tree without
    installed package metadata.
    """
    try:
        return version("data-manager-client")
    except PackageNotFoundError:
        return "0.1.0"


__version__ = _resolve_version()
