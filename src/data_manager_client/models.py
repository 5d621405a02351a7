# Data Manager Client
# File: models.py
# Version: v1

"""Typed property bags and element wrappers exchanged with the server.

Property bags serialise to camelCase JSON objects tagged with a ``"class"``
discriminator (``ConnectionProperties``, ``DatabaseColumnProperties``, ...).
Elements returned by retrieval calls pair an ``ElementHeader`` with the
properties of the matching type.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Type, TypeVar

P = TypeVar("P", bound="ElementProperties")
E = TypeVar("E", bound="MetadataElement")


def to_camel(name: str) -> str:
    """Snake-case field name to its wire name (``external_type_guid`` -> ``externalTypeGUID``)."""
    parts = [p for p in name.split("_") if p]
    if not parts:
        return name
    head, rest = parts[0], parts[1:]
    return head + "".join("GUID" if p == "guid" else p[:1].upper() + p[1:] for p in rest)


# ---------------------------------------------------------------------------
# Property bags
# ---------------------------------------------------------------------------

_PROPERTIES_REGISTRY: Dict[str, Type["ElementProperties"]] = {}


@dataclass
class ElementProperties:
    """Base for all property bags."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _PROPERTIES_REGISTRY[cls.__name__] = cls

    @classmethod
    def wire_names(cls) -> Dict[str, str]:
        """Map of wire name -> field name."""
        return {to_camel(f.name): f.name for f in fields(cls)}

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"class": type(self).__name__}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            out[to_camel(f.name)] = value
        return out

    @classmethod
    def from_dict(cls: Type[P], data: Optional[Dict[str, Any]]) -> Optional[P]:
        """Build properties from a wire object.

        When the object's ``class`` names a registered subclass of ``cls``
        that subclass is used, so a schema type comes back as e.g.
        ``PrimitiveSchemaTypeProperties``. Unknown keys are ignored.
        """
        if not isinstance(data, dict):
            return None

        target: Type[ElementProperties] = cls
        class_name = data.get("class")
        if isinstance(class_name, str):
            candidate = _PROPERTIES_REGISTRY.get(class_name)
            if candidate is not None and issubclass(candidate, cls):
                target = candidate

        names = target.wire_names()
        kwargs = {names[k]: v for k, v in data.items() if k in names}
        return target(**kwargs)  # type: ignore[return-value]


@dataclass
class ReferenceableProperties(ElementProperties):
    """Properties shared by every element with a unique qualified name."""

    qualified_name: Optional[str] = None
    additional_properties: Optional[Dict[str, str]] = None
    type_name: Optional[str] = None
    extended_properties: Optional[Dict[str, Any]] = None


@dataclass
class TemplateProperties(ElementProperties):
    """Overrides applied when copying an existing element as a template."""

    qualified_name: Optional[str] = None
    display_name: Optional[str] = None
    description: Optional[str] = None
    network_address: Optional[str] = None
    version_identifier: Optional[str] = None


# Connections -----------------------------------------------------------------


@dataclass
class ConnectionProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    user_id: Optional[str] = None
    encrypted_password: Optional[str] = None
    clear_password: Optional[str] = None
    secured_properties: Optional[Dict[str, str]] = None
    configuration_properties: Optional[Dict[str, Any]] = None


@dataclass
class EndpointProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    protocol: Optional[str] = None
    encryption_method: Optional[str] = None


@dataclass
class ConnectorTypeProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    supported_asset_type_name: Optional[str] = None
    expected_data_format: Optional[str] = None
    connector_provider_class_name: Optional[str] = None
    recognized_configuration_properties: Optional[List[str]] = None


# External references -----------------------------------------------------------


@dataclass
class ExternalReferenceProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    reference_version: Optional[str] = None
    organization: Optional[str] = None
    resource_id: Optional[str] = None


@dataclass
class ExternalReferenceLinkProperties(ElementProperties):
    """Properties on the link between an element and an external reference."""

    link_id: Optional[str] = None
    link_description: Optional[str] = None
    pages: Optional[str] = None


# Databases ---------------------------------------------------------------------


@dataclass
class DatabaseProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    database_type: Optional[str] = None
    database_version: Optional[str] = None
    database_instance: Optional[str] = None
    database_imported_from: Optional[str] = None


@dataclass
class DatabaseSchemaProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[str] = None


@dataclass
class DatabaseTableProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    is_deprecated: Optional[bool] = None
    aliases: Optional[List[str]] = None
    formula: Optional[str] = None


@dataclass
class DatabaseViewProperties(DatabaseTableProperties):
    """A table whose rows are derived; the defining query travels in ``formula``."""


@dataclass
class DatabaseColumnProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    data_type: Optional[str] = None
    default_value: Optional[str] = None
    is_nullable: Optional[bool] = None
    length: Optional[int] = None
    position: Optional[int] = None
    formula: Optional[str] = None
    external_type_guid: Optional[str] = None


@dataclass
class DatabasePrimaryKeyProperties(ElementProperties):
    name: Optional[str] = None
    key_pattern: Optional[str] = None


@dataclass
class DatabaseForeignKeyProperties(ElementProperties):
    name: Optional[str] = None
    description: Optional[str] = None
    confidence: Optional[int] = None
    steward: Optional[str] = None
    source: Optional[str] = None


# Schemas -----------------------------------------------------------------------


@dataclass
class SchemaTypeProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    is_deprecated: Optional[bool] = None
    version_number: Optional[str] = None
    author: Optional[str] = None
    usage: Optional[str] = None
    encoding_standard: Optional[str] = None
    namespace: Optional[str] = None
    formula: Optional[str] = None


@dataclass
class PrimitiveSchemaTypeProperties(SchemaTypeProperties):
    data_type: Optional[str] = None
    default_value: Optional[str] = None


@dataclass
class LiteralSchemaTypeProperties(SchemaTypeProperties):
    data_type: Optional[str] = None
    fixed_value: Optional[str] = None


@dataclass
class EnumSchemaTypeProperties(SchemaTypeProperties):
    data_type: Optional[str] = None
    default_value: Optional[str] = None


@dataclass
class StructSchemaTypeProperties(SchemaTypeProperties):
    pass


@dataclass
class SchemaTypeChoiceProperties(SchemaTypeProperties):
    pass


@dataclass
class MapSchemaTypeProperties(SchemaTypeProperties):
    pass


@dataclass
class SchemaAttributeProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    element_position: Optional[int] = None
    min_cardinality: Optional[int] = None
    max_cardinality: Optional[int] = None
    allows_duplicate_values: Optional[bool] = None
    ordered_values: Optional[bool] = None
    default_value_override: Optional[str] = None
    minimum_length: Optional[int] = None
    length: Optional[int] = None
    is_nullable: Optional[bool] = None
    aliases: Optional[List[str]] = None
    is_deprecated: Optional[bool] = None


@dataclass
class DerivedSchemaTypeQueryTargetProperties(ElementProperties):
    query_id: Optional[str] = None
    query: Optional[str] = None
    query_type: Optional[str] = None


@dataclass
class ValidValueSetProperties(ReferenceableProperties):
    display_name: Optional[str] = None
    description: Optional[str] = None
    usage: Optional[str] = None
    scope: Optional[str] = None
    is_deprecated: Optional[bool] = None


# APIs and display applications ------------------------------------------------


@dataclass
class DataAssetProperties(ReferenceableProperties):
    """Common properties of the assets an API manager or application hosts."""

    display_name: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[str] = None


@dataclass
class APIProperties(DataAssetProperties):
    pass


@dataclass
class APIOperationProperties(SchemaTypeProperties):
    path: Optional[str] = None
    command: Optional[str] = None


@dataclass
class FormProperties(DataAssetProperties):
    pass


@dataclass
class ReportProperties(DataAssetProperties):
    id: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    created_time: Optional[str] = None
    last_modified_time: Optional[str] = None
    last_modified_by: Optional[str] = None


@dataclass
class QueryProperties(DataAssetProperties):
    pass


@dataclass
class DataContainerProperties(SchemaAttributeProperties):
    """A grouping of data fields within a form, report or query."""


@dataclass
class QueryDataFieldProperties(SchemaAttributeProperties):
    """A single field displayed by a form, report or query."""


# ---------------------------------------------------------------------------
# Element headers and wrappers
# ---------------------------------------------------------------------------


def _type_name(data: Dict[str, Any]) -> Optional[str]:
    type_info = data.get("type")
    if isinstance(type_info, dict) and type_info.get("typeName"):
        return type_info.get("typeName")
    return data.get("typeName")


@dataclass
class ElementHeader:
    guid: Optional[str]
    type_name: Optional[str] = None
    status: Optional[str] = None
    origin_category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["ElementHeader"]:
        if not isinstance(data, dict):
            return None
        origin = data.get("origin") if isinstance(data.get("origin"), dict) else {}
        return cls(
            guid=data.get("guid"),
            type_name=_type_name(data),
            status=data.get("status"),
            origin_category=origin.get("originCategory") or data.get("originCategory"),
        )


@dataclass
class ElementStub:
    """Lightweight reference to a related element."""

    guid: Optional[str]
    type_name: Optional[str] = None
    unique_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["ElementStub"]:
        if not isinstance(data, dict):
            return None
        return cls(
            guid=data.get("guid"),
            type_name=_type_name(data),
            unique_name=data.get("uniqueName"),
        )


@dataclass
class MetadataElement:
    """An element returned by the server: header, typed properties, raw payload."""

    properties_key: ClassVar[str] = "properties"
    properties_class: ClassVar[Type[ElementProperties]] = ReferenceableProperties

    element_header: Optional[ElementHeader] = None
    properties: Optional[ElementProperties] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def guid(self) -> Optional[str]:
        return self.element_header.guid if self.element_header else None

    @classmethod
    def _properties_payload(cls, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        payload = data.get(cls.properties_key)
        if payload is None:
            payload = data.get("properties")
        return payload if isinstance(payload, dict) else None

    @classmethod
    def from_dict(cls: Type[E], data: Optional[Dict[str, Any]]) -> Optional[E]:
        if not isinstance(data, dict):
            return None
        return cls(
            element_header=ElementHeader.from_dict(data.get("elementHeader")),
            properties=cls.properties_class.from_dict(cls._properties_payload(data)),
            raw=data,
        )


@dataclass
class ConnectionElement(MetadataElement):
    properties_key: ClassVar[str] = "connectionProperties"
    properties_class: ClassVar[Type[ElementProperties]] = ConnectionProperties

    connector_type: Optional[ElementStub] = None
    endpoint: Optional[ElementStub] = None
    embedded_connections: List[ElementStub] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["ConnectionElement"]:
        element = super().from_dict(data)
        if element is None:
            return None

        element.connector_type = ElementStub.from_dict(data.get("connectorType"))
        element.endpoint = ElementStub.from_dict(data.get("endpoint"))

        embedded: List[ElementStub] = []
        for item in data.get("embeddedConnections") or []:
            if not isinstance(item, dict):
                continue
            # Either a bare stub or a relationship wrapper around one.
            stub = ElementStub.from_dict(item.get("embeddedElement", item))
            if stub is not None:
                embedded.append(stub)
        element.embedded_connections = embedded
        return element


@dataclass
class EndpointElement(MetadataElement):
    properties_key: ClassVar[str] = "endpointProperties"
    properties_class: ClassVar[Type[ElementProperties]] = EndpointProperties


@dataclass
class ConnectorTypeElement(MetadataElement):
    properties_key: ClassVar[str] = "connectorTypeProperties"
    properties_class: ClassVar[Type[ElementProperties]] = ConnectorTypeProperties


@dataclass
class ExternalReferenceElement(MetadataElement):
    properties_key: ClassVar[str] = "externalReferenceProperties"
    properties_class: ClassVar[Type[ElementProperties]] = ExternalReferenceProperties


@dataclass
class DatabaseElement(MetadataElement):
    properties_key: ClassVar[str] = "databaseProperties"
    properties_class: ClassVar[Type[ElementProperties]] = DatabaseProperties


@dataclass
class DatabaseSchemaElement(MetadataElement):
    properties_key: ClassVar[str] = "databaseSchemaProperties"
    properties_class: ClassVar[Type[ElementProperties]] = DatabaseSchemaProperties


@dataclass
class DatabaseTableElement(MetadataElement):
    properties_key: ClassVar[str] = "databaseTableProperties"
    properties_class: ClassVar[Type[ElementProperties]] = DatabaseTableProperties


@dataclass
class DatabaseColumnElement(MetadataElement):
    properties_key: ClassVar[str] = "databaseColumnProperties"
    properties_class: ClassVar[Type[ElementProperties]] = DatabaseColumnProperties


@dataclass
class SchemaTypeElement(MetadataElement):
    properties_key: ClassVar[str] = "schemaTypeProperties"
    properties_class: ClassVar[Type[ElementProperties]] = SchemaTypeProperties


@dataclass
class SchemaAttributeElement(MetadataElement):
    properties_key: ClassVar[str] = "schemaAttributeProperties"
    properties_class: ClassVar[Type[ElementProperties]] = SchemaAttributeProperties


@dataclass
class ValidValueSetElement(MetadataElement):
    properties_key: ClassVar[str] = "validValueSetProperties"
    properties_class: ClassVar[Type[ElementProperties]] = ValidValueSetProperties


@dataclass
class ExternalReferenceLinkElement(MetadataElement):
    """An external reference as seen from an element it is linked to."""

    properties_class: ClassVar[Type[ElementProperties]] = ExternalReferenceProperties

    link: Optional[ExternalReferenceLinkProperties] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["ExternalReferenceLinkElement"]:
        element = super().from_dict(data)
        if element is None:
            return None
        element.link = ExternalReferenceLinkProperties.from_dict(data.get("link"))
        return element


@dataclass
class DatabaseViewElement(MetadataElement):
    properties_key: ClassVar[str] = "databaseViewProperties"
    properties_class: ClassVar[Type[ElementProperties]] = DatabaseViewProperties


@dataclass
class APIElement(MetadataElement):
    properties_key: ClassVar[str] = "apiProperties"
    properties_class: ClassVar[Type[ElementProperties]] = APIProperties


@dataclass
class APIOperationElement(MetadataElement):
    properties_key: ClassVar[str] = "apiOperationProperties"
    properties_class: ClassVar[Type[ElementProperties]] = APIOperationProperties


@dataclass
class FormElement(MetadataElement):
    properties_key: ClassVar[str] = "formProperties"
    properties_class: ClassVar[Type[ElementProperties]] = FormProperties


@dataclass
class ReportElement(MetadataElement):
    properties_key: ClassVar[str] = "reportProperties"
    properties_class: ClassVar[Type[ElementProperties]] = ReportProperties


@dataclass
class QueryElement(MetadataElement):
    properties_key: ClassVar[str] = "queryProperties"
    properties_class: ClassVar[Type[ElementProperties]] = QueryProperties


@dataclass
class DataContainerElement(MetadataElement):
    properties_key: ClassVar[str] = "dataContainerProperties"
    properties_class: ClassVar[Type[ElementProperties]] = DataContainerProperties
