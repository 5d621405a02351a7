# Data Manager Client
# File: rest/__init__.py
# Version: v1

"""Request bodies and response envelopes for the data-manager REST API."""

from .requests import (
    EmbeddedConnectionRequestBody,
    ExternalSourceRequestBody,
    FormulaRequestBody,
    NameRequestBody,
    PropertiesRequestBody,
    RelationshipRequestBody,
    SchemaTypeChoiceRequestBody,
    SearchStringRequestBody,
    compose_request,
)
from .responses import (
    ElementResponse,
    ElementsResponse,
    ElementStubResponse,
    FFDCResponse,
    GUIDResponse,
    VoidResponse,
)

__all__ = [
    "EmbeddedConnectionRequestBody",
    "ExternalSourceRequestBody",
    "FormulaRequestBody",
    "NameRequestBody",
    "PropertiesRequestBody",
    "RelationshipRequestBody",
    "SchemaTypeChoiceRequestBody",
    "SearchStringRequestBody",
    "compose_request",
    "ElementResponse",
    "ElementsResponse",
    "ElementStubResponse",
    "FFDCResponse",
    "GUIDResponse",
    "VoidResponse",
]
