# Data Manager Client
# File: rest/requests.py
# Version: v1

"""Request bodies posted to the data-manager REST API.

Bodies are immutable; each facade call builds a fresh one.  Every body
serialises to a camelCase JSON object tagged with its ``"class"`` name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from ..models import ElementProperties

_SOURCE_GUID = "externalSourceGUID"
_SOURCE_NAME = "externalSourceName"


def _add_provenance(
    out: Dict[str, Any],
    external_source_guid: Optional[str],
    external_source_name: Optional[str],
) -> Dict[str, Any]:
    if external_source_guid is not None:
        out[_SOURCE_GUID] = external_source_guid
    if external_source_name is not None:
        out[_SOURCE_NAME] = external_source_name
    return out


def request_class_name(properties: ElementProperties) -> str:
    """``ConnectionProperties`` -> ``ConnectionRequestBody``."""
    name = type(properties).__name__
    if name.endswith("Properties"):
        name = name[: -len("Properties")]
    return f"{name}RequestBody"


@dataclass(frozen=True)
class ExternalSourceRequestBody:
    """Identifies the metadata source that owns the affected elements."""

    external_source_guid: Optional[str] = None
    external_source_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _add_provenance(
            {"class": "ExternalSourceRequestBody"},
            self.external_source_guid,
            self.external_source_name,
        )


@dataclass(frozen=True)
class PropertiesRequestBody:
    """Element properties flattened alongside the external source pair."""

    properties: ElementProperties
    external_source_guid: Optional[str] = None
    external_source_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out = self.properties.to_dict()
        out["class"] = request_class_name(self.properties)
        return _add_provenance(out, self.external_source_guid, self.external_source_name)

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        properties_class: Type[ElementProperties],
    ) -> "PropertiesRequestBody":
        payload = {k: v for k, v in data.items() if k not in {_SOURCE_GUID, _SOURCE_NAME, "class"}}
        payload["class"] = properties_class.__name__
        properties = properties_class.from_dict(payload)
        if properties is None:
            raise ValueError("request body does not carry element properties")
        return cls(
            properties=properties,
            external_source_guid=data.get(_SOURCE_GUID),
            external_source_name=data.get(_SOURCE_NAME),
        )


@dataclass(frozen=True)
class SchemaTypeChoiceRequestBody(PropertiesRequestBody):
    """A choice schema type plus the GUIDs of the schema types it chooses between."""

    schema_type_option_guids: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        if self.schema_type_option_guids is not None:
            out["schemaTypeOptionGUIDs"] = list(self.schema_type_option_guids)
        return out


@dataclass(frozen=True)
class RelationshipRequestBody:
    """Body for link requests; relationship properties nest under ``properties``."""

    properties: Optional[ElementProperties] = None
    external_source_guid: Optional[str] = None
    external_source_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"class": "RelationshipRequestBody"}
        _add_provenance(out, self.external_source_guid, self.external_source_name)
        if self.properties is not None:
            out["properties"] = self.properties.to_dict()
        return out


@dataclass(frozen=True)
class EmbeddedConnectionRequestBody:
    position: int = 0
    display_name: Optional[str] = None
    arguments: Optional[Dict[str, Any]] = None
    external_source_guid: Optional[str] = None
    external_source_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"class": "EmbeddedConnectionRequestBody", "position": self.position}
        if self.display_name is not None:
            out["displayName"] = self.display_name
        if self.arguments is not None:
            out["arguments"] = dict(self.arguments)
        return _add_provenance(out, self.external_source_guid, self.external_source_name)


@dataclass(frozen=True)
class FormulaRequestBody:
    formula: str
    external_source_guid: Optional[str] = None
    external_source_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"class": "FormulaRequestBody", "formula": self.formula}
        return _add_provenance(out, self.external_source_guid, self.external_source_name)


@dataclass(frozen=True)
class NameRequestBody:
    name: str
    name_property_name: str = "name"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class": "NameRequestBody",
            "name": self.name,
            "namePropertyName": self.name_property_name,
        }


@dataclass(frozen=True)
class SearchStringRequestBody:
    search_string: str
    search_string_parameter_name: str = "searchString"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class": "SearchStringRequestBody",
            "searchString": self.search_string,
            "searchStringParameterName": self.search_string_parameter_name,
        }


def compose_request(
    properties: ElementProperties,
    external_source_guid: Optional[str] = None,
    external_source_name: Optional[str] = None,
) -> PropertiesRequestBody:
    """Wrap element properties and their provenance in a request body."""
    return PropertiesRequestBody(
        properties=properties,
        external_source_guid=external_source_guid,
        external_source_name=external_source_name,
    )
