# Data Manager Client
# File: clients/__init__.py
# Version: v1

"""Facade clients for the data-manager REST API."""

from .api_manager import APIManagerClient
from .base import DataManagerBaseClient
from .connection_manager import ConnectionManagerClient
from .database_manager import DatabaseManagerClient
from .display_application import DisplayApplicationClient
from .external_reference import ExternalReferenceClient
from .schema_manager import SchemaManagerClient

__all__ = [
    "DataManagerBaseClient",
    "APIManagerClient",
    "ConnectionManagerClient",
    "DatabaseManagerClient",
    "DisplayApplicationClient",
    "ExternalReferenceClient",
    "SchemaManagerClient",
]
