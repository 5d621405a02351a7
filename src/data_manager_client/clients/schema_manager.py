# Data Manager Client
# File: clients/schema_manager.py
# Version: v1

"""Schema types, schema attributes and the relationships between them.

Schema types describe the shape of data; schema attributes are the named
fields nested inside them.  Searches are scoped by a type name that
defaults to the most general type (``SchemaType``, ``SchemaAttribute``,
``Referenceable``).
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from ..models import (
    DerivedSchemaTypeQueryTargetProperties,
    ElementStub,
    EnumSchemaTypeProperties,
    LiteralSchemaTypeProperties,
    MapSchemaTypeProperties,
    PrimitiveSchemaTypeProperties,
    SchemaAttributeElement,
    SchemaAttributeProperties,
    SchemaTypeChoiceProperties,
    SchemaTypeElement,
    SchemaTypeProperties,
    StructSchemaTypeProperties,
    TemplateProperties,
    ValidValueSetElement,
)
from ..rest.requests import (
    ExternalSourceRequestBody,
    FormulaRequestBody,
    NameRequestBody,
    PropertiesRequestBody,
    SchemaTypeChoiceRequestBody,
    SearchStringRequestBody,
    compose_request,
)
from .base import (
    DEFAULT_NAME_PARAMETER,
    DEFAULT_SEARCH_STRING_PARAMETER,
    SERVICE_PATH,
    DataManagerBaseClient,
)

SCHEMA_TYPES = SERVICE_PATH + "/schema-types"
SCHEMA_ATTRIBUTES = SERVICE_PATH + "/schema-attributes"
SCHEMA_ELEMENTS = SERVICE_PATH + "/schema-elements"
VALID_VALUE_SETS = SERVICE_PATH + "/valid-value-sets"

DEFAULT_SCHEMA_TYPE_NAME = "SchemaType"
DEFAULT_SCHEMA_ATTRIBUTE_TYPE_NAME = "SchemaAttribute"
DEFAULT_PARENT_TYPE_NAME = "Referenceable"


class SchemaManagerClient(DataManagerBaseClient):
    """Maintains and retrieves schema types and schema attributes."""

    # Type name given to new schema attributes and used to scope attribute searches.
    default_schema_attribute_type_name = DEFAULT_SCHEMA_ATTRIBUTE_TYPE_NAME

    # ------------------------------------------------------------------
    # Schema types: create
    # ------------------------------------------------------------------

    def _create_schema_type(
        self,
        method_name: str,
        user_id: str,
        schema_type_properties: Optional[SchemaTypeProperties],
        url_template: str,
        body: Optional[PropertiesRequestBody],
        *guids: str,
    ) -> Optional[str]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_object(schema_type_properties, "schemaTypeProperties", method_name)
        self._validate_qualified_name(schema_type_properties, method_name)

        response = self.rest_client.call_guid_post(
            method_name, url_template, body, self.server_name, user_id, *guids
        )
        return response.guid

    def create_primitive_schema_type(
        self,
        user_id: str,
        schema_type_properties: PrimitiveSchemaTypeProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Create a schema type for a single primitive value (string, int, ...)."""
        return self._create_schema_type(
            "create_primitive_schema_type",
            user_id,
            schema_type_properties,
            SCHEMA_TYPES + "/primitives",
            self._body(schema_type_properties, external_source_guid, external_source_name),
        )

    def create_literal_schema_type(
        self,
        user_id: str,
        schema_type_properties: LiteralSchemaTypeProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Create a schema type for a fixed literal value."""
        return self._create_schema_type(
            "create_literal_schema_type",
            user_id,
            schema_type_properties,
            SCHEMA_TYPES + "/literals",
            self._body(schema_type_properties, external_source_guid, external_source_name),
        )

    def create_enum_schema_type(
        self,
        user_id: str,
        schema_type_properties: EnumSchemaTypeProperties,
        valid_values_set_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Create a schema type whose values come from a valid-value set."""
        method_name = "create_enum_schema_type"
        self.invalid_parameter_handler.validate_guid(valid_values_set_guid, "validValuesSetGUID", method_name)
        return self._create_schema_type(
            method_name,
            user_id,
            schema_type_properties,
            SCHEMA_TYPES + "/enums/valid-values/{2}",
            self._body(schema_type_properties, external_source_guid, external_source_name),
            valid_values_set_guid,
        )

    def create_struct_schema_type(
        self,
        user_id: str,
        schema_type_properties: StructSchemaTypeProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        return self._create_schema_type(
            "create_struct_schema_type",
            user_id,
            schema_type_properties,
            SCHEMA_TYPES + "/structs",
            self._body(schema_type_properties, external_source_guid, external_source_name),
        )

    def create_schema_type_choice(
        self,
        user_id: str,
        schema_type_properties: SchemaTypeChoiceProperties,
        schema_type_option_guids: List[str],
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Create a schema type that is one of several alternative schema types."""
        method_name = "create_schema_type_choice"
        self.invalid_parameter_handler.validate_object(
            schema_type_option_guids, "schemaTypeOptionGUIDs", method_name
        )
        body = None
        if schema_type_properties is not None:
            body = SchemaTypeChoiceRequestBody(
                properties=schema_type_properties,
                external_source_guid=external_source_guid,
                external_source_name=external_source_name,
                schema_type_option_guids=schema_type_option_guids,
            )
        return self._create_schema_type(
            method_name,
            user_id,
            schema_type_properties,
            SCHEMA_TYPES + "/choices",
            body,
        )

    def create_map_schema_type(
        self,
        user_id: str,
        schema_type_properties: MapSchemaTypeProperties,
        map_from_schema_type_guid: str,
        map_to_schema_type_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Create a map schema type from one schema type to another."""
        method_name = "create_map_schema_type"
        handler = self.invalid_parameter_handler
        handler.validate_guid(map_from_schema_type_guid, "mapFromSchemaTypeGUID", method_name)
        handler.validate_guid(map_to_schema_type_guid, "mapToSchemaTypeGUID", method_name)
        return self._create_schema_type(
            method_name,
            user_id,
            schema_type_properties,
            SCHEMA_TYPES + "/maps/from/{2}/to/{3}",
            self._body(schema_type_properties, external_source_guid, external_source_name),
            map_from_schema_type_guid,
            map_to_schema_type_guid,
        )

    def create_schema_type_from_template(
        self,
        user_id: str,
        template_guid: str,
        template_properties: TemplateProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        method_name = "create_schema_type_from_template"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(template_guid, "templateGUID", method_name)
        handler.validate_object(template_properties, "templateProperties", method_name)
        self._validate_qualified_name(template_properties, method_name)

        response = self.rest_client.call_guid_post(
            method_name,
            SCHEMA_TYPES + "/from-template/{2}",
            compose_request(template_properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            template_guid,
        )
        return response.guid

    @staticmethod
    def _body(properties, external_source_guid, external_source_name) -> Optional[PropertiesRequestBody]:
        # Null properties are rejected by validation before the body is sent.
        if properties is None:
            return None
        return compose_request(properties, external_source_guid, external_source_name)

    # ------------------------------------------------------------------
    # Schema types: maintain
    # ------------------------------------------------------------------

    def update_schema_type(
        self,
        user_id: str,
        schema_type_guid: str,
        is_merge_update: bool,
        schema_type_properties: SchemaTypeProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "update_schema_type"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_type_guid, "schemaTypeGUID", method_name)
        handler.validate_object(schema_type_properties, "schemaTypeProperties", method_name)
        if not is_merge_update:
            self._validate_qualified_name(schema_type_properties, method_name)

        self.rest_client.call_void_post(
            method_name,
            SCHEMA_TYPES + "/{2}?isMergeUpdate={3}",
            compose_request(schema_type_properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_type_guid,
            is_merge_update,
        )

    def remove_schema_type(
        self,
        user_id: str,
        schema_type_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "remove_schema_type"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_type_guid, "schemaTypeGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            SCHEMA_TYPES + "/{2}/delete",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_type_guid,
        )

    # ------------------------------------------------------------------
    # Schema types: retrieve
    # ------------------------------------------------------------------

    def find_schema_type(
        self,
        user_id: str,
        search_string: str,
        type_name: Optional[str] = None,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[SchemaTypeElement]:
        """Search schema types of ``type_name`` (default ``SchemaType``) by regex."""
        method_name = "find_schema_type"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_search_string(search_string, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            SchemaTypeElement,
            SCHEMA_TYPES + "/types/{2}/by-search-string?startFrom={3}&pageSize={4}",
            SearchStringRequestBody(search_string, DEFAULT_SEARCH_STRING_PARAMETER),
            self.server_name,
            user_id,
            type_name or DEFAULT_SCHEMA_TYPE_NAME,
            start_from,
            valid_page_size,
        )

    def get_schema_type_for_element(
        self,
        user_id: str,
        parent_element_guid: str,
        parent_element_type_name: Optional[str] = None,
    ) -> Optional[SchemaTypeElement]:
        """Return the schema type attached to an element (an asset, a port, ...)."""
        method_name = "get_schema_type_for_element"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(parent_element_guid, "parentElementGUID", method_name)

        return self.rest_client.call_element_get(
            method_name,
            SchemaTypeElement,
            SCHEMA_TYPES + "/types/{2}/by-parent-element/{3}",
            self.server_name,
            user_id,
            parent_element_type_name or DEFAULT_PARENT_TYPE_NAME,
            parent_element_guid,
        )

    def get_schema_type_by_name(
        self,
        user_id: str,
        name: str,
        type_name: Optional[str] = None,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[SchemaTypeElement]:
        method_name = "get_schema_type_by_name"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(name, DEFAULT_NAME_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            SchemaTypeElement,
            SCHEMA_TYPES + "/types/{2}/by-name?startFrom={3}&pageSize={4}",
            NameRequestBody(name, DEFAULT_NAME_PARAMETER),
            self.server_name,
            user_id,
            type_name or DEFAULT_SCHEMA_TYPE_NAME,
            start_from,
            valid_page_size,
        )

    def get_schema_type_by_guid(self, user_id: str, schema_type_guid: str) -> Optional[SchemaTypeElement]:
        method_name = "get_schema_type_by_guid"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_type_guid, "schemaTypeGUID", method_name)

        return self.rest_client.call_element_get(
            method_name,
            SchemaTypeElement,
            SCHEMA_TYPES + "/{2}",
            self.server_name,
            user_id,
            schema_type_guid,
        )

    def get_schema_type_parent(self, user_id: str, schema_type_guid: str) -> Optional[ElementStub]:
        """Return a stub for the element the schema type is attached to."""
        method_name = "get_schema_type_parent"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_type_guid, "schemaTypeGUID", method_name)

        return self.rest_client.call_element_stub_get(
            method_name,
            SCHEMA_TYPES + "/{2}/parent",
            self.server_name,
            user_id,
            schema_type_guid,
        )

    # ------------------------------------------------------------------
    # Valid value sets
    # ------------------------------------------------------------------

    def get_valid_value_set_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ValidValueSetElement]:
        method_name = "get_valid_value_set_by_name"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(name, DEFAULT_NAME_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ValidValueSetElement,
            VALID_VALUE_SETS + "/by-name?startFrom={2}&pageSize={3}",
            NameRequestBody(name, DEFAULT_NAME_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def find_valid_value_set(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ValidValueSetElement]:
        method_name = "find_valid_value_set"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_search_string(search_string, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ValidValueSetElement,
            VALID_VALUE_SETS + "/by-search-string?startFrom={2}&pageSize={3}",
            SearchStringRequestBody(search_string, DEFAULT_SEARCH_STRING_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    # ------------------------------------------------------------------
    # Schema attributes
    # ------------------------------------------------------------------

    def create_schema_attribute(
        self,
        user_id: str,
        schema_element_guid: str,
        schema_attribute_properties: SchemaAttributeProperties,
        schema_attribute_type_name: Optional[str] = None,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Create a schema attribute nested in a schema element.

        The attribute's type name is the one already in the properties when
        set, else ``schema_attribute_type_name``, else the client's default.
        """
        method_name = "create_schema_attribute"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_object(schema_attribute_properties, "schemaAttributeProperties", method_name)
        handler.validate_guid(schema_element_guid, "schemaElementGUID", method_name)
        self._validate_qualified_name(schema_attribute_properties, method_name)

        type_name = (
            schema_attribute_properties.type_name
            or schema_attribute_type_name
            or self.default_schema_attribute_type_name
        )
        properties = replace(schema_attribute_properties, type_name=type_name)

        response = self.rest_client.call_guid_post(
            method_name,
            SCHEMA_ATTRIBUTES + "/attached-to/{2}",
            compose_request(properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_element_guid,
        )
        return response.guid

    def create_schema_attribute_from_template(
        self,
        user_id: str,
        schema_element_guid: str,
        template_guid: str,
        template_properties: TemplateProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        method_name = "create_schema_attribute_from_template"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(template_guid, "templateGUID", method_name)
        handler.validate_guid(schema_element_guid, "schemaElementGUID", method_name)
        handler.validate_object(template_properties, "templateProperties", method_name)
        self._validate_qualified_name(template_properties, method_name)

        response = self.rest_client.call_guid_post(
            method_name,
            SCHEMA_ATTRIBUTES + "/from-template/{2}/attached-to/{3}",
            compose_request(template_properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            template_guid,
            schema_element_guid,
        )
        return response.guid

    def setup_schema_type(
        self,
        user_id: str,
        relationship_type_name: str,
        schema_attribute_guid: str,
        schema_type_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Link a schema attribute to its schema type with the named relationship."""
        method_name = "setup_schema_type"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_attribute_guid, "schemaAttributeGUID", method_name)
        handler.validate_guid(schema_type_guid, "schemaTypeGUID", method_name)
        handler.validate_name(relationship_type_name, "relationshipTypeName", method_name)

        self.rest_client.call_void_post(
            method_name,
            SCHEMA_ATTRIBUTES + "/{2}/schema-types/{3}/relationship-type-name/{4}",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_attribute_guid,
            schema_type_guid,
            relationship_type_name,
        )

    def clear_schema_types(
        self,
        user_id: str,
        schema_attribute_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Remove every schema type link from a schema attribute."""
        method_name = "clear_schema_types"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_attribute_guid, "schemaAttributeGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            SCHEMA_ATTRIBUTES + "/{2}/schema-types/delete",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_attribute_guid,
        )

    def update_schema_attribute(
        self,
        user_id: str,
        schema_attribute_guid: str,
        is_merge_update: bool,
        schema_attribute_properties: SchemaAttributeProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "update_schema_attribute"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_attribute_guid, "schemaAttributeGUID", method_name)
        handler.validate_object(schema_attribute_properties, "schemaAttributeProperties", method_name)
        if not is_merge_update:
            self._validate_qualified_name(schema_attribute_properties, method_name)

        self.rest_client.call_void_post(
            method_name,
            SCHEMA_ATTRIBUTES + "/{2}?isMergeUpdate={3}",
            compose_request(schema_attribute_properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_attribute_guid,
            is_merge_update,
        )

    def remove_schema_attribute(
        self,
        user_id: str,
        schema_attribute_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "remove_schema_attribute"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_attribute_guid, "schemaAttributeGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            SCHEMA_ATTRIBUTES + "/{2}/delete",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_attribute_guid,
        )

    def find_schema_attributes(
        self,
        user_id: str,
        search_string: str,
        type_name: Optional[str] = None,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[SchemaAttributeElement]:
        method_name = "find_schema_attributes"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_search_string(search_string, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            SchemaAttributeElement,
            SCHEMA_ATTRIBUTES + "/types/{2}/by-search-string?startFrom={3}&pageSize={4}",
            SearchStringRequestBody(search_string, DEFAULT_SEARCH_STRING_PARAMETER),
            self.server_name,
            user_id,
            type_name or self.default_schema_attribute_type_name,
            start_from,
            valid_page_size,
        )

    def get_nested_attributes(
        self,
        user_id: str,
        parent_schema_element_guid: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[SchemaAttributeElement]:
        """List the schema attributes nested inside a schema type or attribute."""
        method_name = "get_nested_attributes"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(parent_schema_element_guid, "parentSchemaElementGUID", method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_get(
            method_name,
            SchemaAttributeElement,
            SCHEMA_ELEMENTS + "/{2}/nested-attributes?startFrom={3}&pageSize={4}",
            self.server_name,
            user_id,
            parent_schema_element_guid,
            start_from,
            valid_page_size,
        )

    def get_schema_attributes_by_name(
        self,
        user_id: str,
        name: str,
        type_name: Optional[str] = None,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[SchemaAttributeElement]:
        method_name = "get_schema_attributes_by_name"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(name, DEFAULT_NAME_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            SchemaAttributeElement,
            SCHEMA_ATTRIBUTES + "/types/{2}/by-name?startFrom={3}&pageSize={4}",
            NameRequestBody(name, DEFAULT_NAME_PARAMETER),
            self.server_name,
            user_id,
            type_name or self.default_schema_attribute_type_name,
            start_from,
            valid_page_size,
        )

    def get_schema_attribute_by_guid(
        self,
        user_id: str,
        schema_attribute_guid: str,
    ) -> Optional[SchemaAttributeElement]:
        method_name = "get_schema_attribute_by_guid"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_attribute_guid, "schemaAttributeGUID", method_name)

        return self.rest_client.call_element_get(
            method_name,
            SchemaAttributeElement,
            SCHEMA_ATTRIBUTES + "/{2}",
            self.server_name,
            user_id,
            schema_attribute_guid,
        )

    # ------------------------------------------------------------------
    # Calculated values and query targets
    # ------------------------------------------------------------------

    def setup_calculated_value(
        self,
        user_id: str,
        schema_element_guid: str,
        formula: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Mark a schema element as derived, recording the formula that computes it."""
        method_name = "setup_calculated_value"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_element_guid, "schemaElementGUID", method_name)
        handler.validate_name(formula, "formula", method_name)

        self.rest_client.call_void_post(
            method_name,
            SCHEMA_ELEMENTS + "/{2}/calculated-value",
            FormulaRequestBody(formula, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_element_guid,
        )

    def clear_calculated_value(
        self,
        user_id: str,
        schema_element_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "clear_calculated_value"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(schema_element_guid, "schemaElementGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            SCHEMA_ELEMENTS + "/{2}/calculated-value/delete",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            schema_element_guid,
        )

    def _query_target_call(
        self,
        method_name: str,
        user_id: str,
        derived_element_guid: str,
        query_target_guid: str,
        url_template: str,
        body: object,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(derived_element_guid, "derivedElementGUID", method_name)
        handler.validate_guid(query_target_guid, "queryTargetGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            url_template,
            body,
            self.server_name,
            user_id,
            derived_element_guid,
            query_target_guid,
        )

    def setup_query_target_relationship(
        self,
        user_id: str,
        derived_element_guid: str,
        query_target_guid: str,
        query_target_properties: Optional[DerivedSchemaTypeQueryTargetProperties] = None,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Link a derived schema element to an element its formula queries."""
        self._query_target_call(
            "setup_query_target_relationship",
            user_id,
            derived_element_guid,
            query_target_guid,
            SCHEMA_ELEMENTS + "/{2}/query-targets/{3}",
            compose_request(
                query_target_properties or DerivedSchemaTypeQueryTargetProperties(),
                external_source_guid,
                external_source_name,
            ),
        )

    def update_query_target_relationship(
        self,
        user_id: str,
        derived_element_guid: str,
        query_target_guid: str,
        query_target_properties: Optional[DerivedSchemaTypeQueryTargetProperties] = None,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        self._query_target_call(
            "update_query_target_relationship",
            user_id,
            derived_element_guid,
            query_target_guid,
            SCHEMA_ELEMENTS + "/{2}/query-targets/{3}/update",
            compose_request(
                query_target_properties or DerivedSchemaTypeQueryTargetProperties(),
                external_source_guid,
                external_source_name,
            ),
        )

    def clear_query_target_relationship(
        self,
        user_id: str,
        derived_element_guid: str,
        query_target_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        self._query_target_call(
            "clear_query_target_relationship",
            user_id,
            derived_element_guid,
            query_target_guid,
            SCHEMA_ELEMENTS + "/{2}/query-targets/{3}/delete",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
        )
