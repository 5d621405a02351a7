# Data Manager Client
# File: clients/connection_manager.py
# Version: v1

"""Connections, endpoints and connector types.

A connection describes how a connector reaches a resource.  It links to the
connector type that implements access, the endpoint (network address) it
uses, and optionally to embedded connections for virtual connectors.
"""

from __future__ import annotations

from typing import List, Optional

from ..models import (
    ConnectionElement,
    ConnectionProperties,
    ConnectorTypeElement,
    EndpointElement,
    EndpointProperties,
    TemplateProperties,
)
from ..rest.requests import (
    EmbeddedConnectionRequestBody,
    ExternalSourceRequestBody,
    NameRequestBody,
    SearchStringRequestBody,
    compose_request,
)
from .base import (
    DEFAULT_NAME_PARAMETER,
    DEFAULT_SEARCH_STRING_PARAMETER,
    SERVICE_PATH,
    DataManagerBaseClient,
)

CONNECTIONS = SERVICE_PATH + "/connections"
ENDPOINTS = SERVICE_PATH + "/endpoints"
CONNECTOR_TYPES = SERVICE_PATH + "/connector-types"
ASSETS = SERVICE_PATH + "/assets"


class ConnectionManagerClient(DataManagerBaseClient):
    """Maintains connections and endpoints, and looks up connector types."""

    # ------------------------------------------------------------------
    # Connections: create / update / remove
    # ------------------------------------------------------------------

    def create_connection(
        self,
        user_id: str,
        connection_properties: ConnectionProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Create a connection and return its unique identifier."""
        method_name = "create_connection"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_object(connection_properties, "connectionProperties", method_name)
        self._validate_qualified_name(connection_properties, method_name)

        body = compose_request(connection_properties, external_source_guid, external_source_name)
        response = self.rest_client.call_guid_post(
            method_name, CONNECTIONS, body, self.server_name, user_id
        )
        return response.guid

    def create_connection_from_template(
        self,
        user_id: str,
        template_guid: str,
        template_properties: TemplateProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Copy an existing connection, overriding the supplied template properties."""
        method_name = "create_connection_from_template"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(template_guid, "templateGUID", method_name)
        handler.validate_object(template_properties, "templateProperties", method_name)
        self._validate_qualified_name(template_properties, method_name)

        body = compose_request(template_properties, external_source_guid, external_source_name)
        response = self.rest_client.call_guid_post(
            method_name,
            CONNECTIONS + "/from-template/{2}",
            body,
            self.server_name,
            user_id,
            template_guid,
        )
        return response.guid

    def update_connection(
        self,
        user_id: str,
        connection_guid: str,
        is_merge_update: bool,
        connection_properties: ConnectionProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Update a connection.

        With ``is_merge_update`` the supplied properties are merged into the
        stored ones; otherwise they replace them and must include a
        qualified name.
        """
        method_name = "update_connection"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(connection_guid, "connectionGUID", method_name)
        handler.validate_object(connection_properties, "connectionProperties", method_name)
        if not is_merge_update:
            self._validate_qualified_name(connection_properties, method_name)

        body = compose_request(connection_properties, external_source_guid, external_source_name)
        self.rest_client.call_void_post(
            method_name,
            CONNECTIONS + "/{2}?isMergeUpdate={3}",
            body,
            self.server_name,
            user_id,
            connection_guid,
            is_merge_update,
        )

    def remove_connection(
        self,
        user_id: str,
        connection_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "remove_connection"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(connection_guid, "connectionGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            CONNECTIONS + "/{2}/delete",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            connection_guid,
        )

    # ------------------------------------------------------------------
    # Connections: relationships
    # ------------------------------------------------------------------

    def setup_connector_type(
        self,
        user_id: str,
        connection_guid: str,
        connector_type_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Link a connection to the connector type that implements it."""
        self._link(
            "setup_connector_type",
            user_id,
            CONNECTIONS + "/{2}/connector-types/{3}",
            connection_guid,
            "connectionGUID",
            connector_type_guid,
            "connectorTypeGUID",
            external_source_guid,
            external_source_name,
        )

    def clear_connector_type(
        self,
        user_id: str,
        connection_guid: str,
        connector_type_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        self._link(
            "clear_connector_type",
            user_id,
            CONNECTIONS + "/{2}/connector-types/{3}/delete",
            connection_guid,
            "connectionGUID",
            connector_type_guid,
            "connectorTypeGUID",
            external_source_guid,
            external_source_name,
        )

    def setup_endpoint(
        self,
        user_id: str,
        connection_guid: str,
        endpoint_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Link a connection to the endpoint it uses."""
        self._link(
            "setup_endpoint",
            user_id,
            CONNECTIONS + "/{2}/endpoints/{3}",
            connection_guid,
            "connectionGUID",
            endpoint_guid,
            "endpointGUID",
            external_source_guid,
            external_source_name,
        )

    def clear_endpoint(
        self,
        user_id: str,
        connection_guid: str,
        endpoint_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        self._link(
            "clear_endpoint",
            user_id,
            CONNECTIONS + "/{2}/endpoints/{3}/delete",
            connection_guid,
            "connectionGUID",
            endpoint_guid,
            "endpointGUID",
            external_source_guid,
            external_source_name,
        )

    def setup_embedded_connection(
        self,
        user_id: str,
        connection_guid: str,
        embedded_connection_guid: str,
        position: int = 0,
        display_name: Optional[str] = None,
        arguments: Optional[dict] = None,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Add a connection to a virtual connection's list of embedded connections."""
        method_name = "setup_embedded_connection"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(connection_guid, "connectionGUID", method_name)
        handler.validate_guid(embedded_connection_guid, "embeddedConnectionGUID", method_name)

        body = EmbeddedConnectionRequestBody(
            position=position,
            display_name=display_name,
            arguments=arguments,
            external_source_guid=external_source_guid,
            external_source_name=external_source_name,
        )
        self.rest_client.call_void_post(
            method_name,
            CONNECTIONS + "/{2}/embedded-connections/{3}",
            body,
            self.server_name,
            user_id,
            connection_guid,
            embedded_connection_guid,
        )

    def clear_embedded_connection(
        self,
        user_id: str,
        connection_guid: str,
        embedded_connection_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        self._link(
            "clear_embedded_connection",
            user_id,
            CONNECTIONS + "/{2}/embedded-connections/{3}/delete",
            connection_guid,
            "connectionGUID",
            embedded_connection_guid,
            "embeddedConnectionGUID",
            external_source_guid,
            external_source_name,
        )

    def setup_asset_connection(
        self,
        user_id: str,
        asset_guid: str,
        connection_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        """Record that a connection is used to access an asset."""
        self._link(
            "setup_asset_connection",
            user_id,
            ASSETS + "/{2}/connections/{3}",
            asset_guid,
            "assetGUID",
            connection_guid,
            "connectionGUID",
            external_source_guid,
            external_source_name,
        )

    def clear_asset_connection(
        self,
        user_id: str,
        asset_guid: str,
        connection_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        self._link(
            "clear_asset_connection",
            user_id,
            ASSETS + "/{2}/connections/{3}/delete",
            asset_guid,
            "assetGUID",
            connection_guid,
            "connectionGUID",
            external_source_guid,
            external_source_name,
        )

    # ------------------------------------------------------------------
    # Connections: retrieval
    # ------------------------------------------------------------------

    def find_connections(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ConnectionElement]:
        """Return connections whose properties match the search regex."""
        method_name = "find_connections"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_search_string(search_string, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ConnectionElement,
            CONNECTIONS + "/by-search-string?startFrom={2}&pageSize={3}",
            SearchStringRequestBody(search_string, DEFAULT_SEARCH_STRING_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def get_connections_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ConnectionElement]:
        method_name = "get_connections_by_name"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(name, DEFAULT_NAME_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ConnectionElement,
            CONNECTIONS + "/by-name?startFrom={2}&pageSize={3}",
            NameRequestBody(name, DEFAULT_NAME_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def get_connection_by_guid(self, user_id: str, connection_guid: str) -> Optional[ConnectionElement]:
        method_name = "get_connection_by_guid"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(connection_guid, "connectionGUID", method_name)

        return self.rest_client.call_element_get(
            method_name,
            ConnectionElement,
            CONNECTIONS + "/{2}",
            self.server_name,
            user_id,
            connection_guid,
        )

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def create_endpoint(
        self,
        user_id: str,
        endpoint_properties: EndpointProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        method_name = "create_endpoint"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_object(endpoint_properties, "endpointProperties", method_name)
        self._validate_qualified_name(endpoint_properties, method_name)

        body = compose_request(endpoint_properties, external_source_guid, external_source_name)
        response = self.rest_client.call_guid_post(
            method_name, ENDPOINTS, body, self.server_name, user_id
        )
        return response.guid

    def create_endpoint_from_template(
        self,
        user_id: str,
        network_address: str,
        template_guid: str,
        template_properties: TemplateProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> Optional[str]:
        """Copy an endpoint, pointing the copy at ``network_address``."""
        method_name = "create_endpoint_from_template"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(network_address, "networkAddress", method_name)
        handler.validate_guid(template_guid, "templateGUID", method_name)
        handler.validate_object(template_properties, "templateProperties", method_name)
        self._validate_qualified_name(template_properties, method_name)

        body = compose_request(template_properties, external_source_guid, external_source_name)
        response = self.rest_client.call_guid_post(
            method_name,
            ENDPOINTS + "/network-address/{2}/from-template/{3}",
            body,
            self.server_name,
            user_id,
            network_address,
            template_guid,
        )
        return response.guid

    def update_endpoint(
        self,
        user_id: str,
        endpoint_guid: str,
        is_merge_update: bool,
        endpoint_properties: EndpointProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "update_endpoint"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(endpoint_guid, "endpointGUID", method_name)
        handler.validate_object(endpoint_properties, "endpointProperties", method_name)
        if not is_merge_update:
            self._validate_qualified_name(endpoint_properties, method_name)

        body = compose_request(endpoint_properties, external_source_guid, external_source_name)
        self.rest_client.call_void_post(
            method_name,
            ENDPOINTS + "/{2}?isMergeUpdate={3}",
            body,
            self.server_name,
            user_id,
            endpoint_guid,
            is_merge_update,
        )

    def remove_endpoint(
        self,
        user_id: str,
        endpoint_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "remove_endpoint"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(endpoint_guid, "endpointGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            ENDPOINTS + "/{2}/delete",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            endpoint_guid,
        )

    def find_endpoints(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[EndpointElement]:
        method_name = "find_endpoints"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_search_string(search_string, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            EndpointElement,
            ENDPOINTS + "/by-search-string?startFrom={2}&pageSize={3}",
            SearchStringRequestBody(search_string, DEFAULT_SEARCH_STRING_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def get_endpoints_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[EndpointElement]:
        method_name = "get_endpoints_by_name"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(name, DEFAULT_NAME_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            EndpointElement,
            ENDPOINTS + "/by-name?startFrom={2}&pageSize={3}",
            NameRequestBody(name, DEFAULT_NAME_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def get_endpoint_by_guid(self, user_id: str, endpoint_guid: str) -> Optional[EndpointElement]:
        method_name = "get_endpoint_by_guid"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(endpoint_guid, "endpointGUID", method_name)

        return self.rest_client.call_element_get(
            method_name,
            EndpointElement,
            ENDPOINTS + "/{2}",
            self.server_name,
            user_id,
            endpoint_guid,
        )

    # ------------------------------------------------------------------
    # Connector types (read only)
    # ------------------------------------------------------------------

    def find_connector_types(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ConnectorTypeElement]:
        method_name = "find_connector_types"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_search_string(search_string, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ConnectorTypeElement,
            CONNECTOR_TYPES + "/by-search-string?startFrom={2}&pageSize={3}",
            SearchStringRequestBody(search_string, DEFAULT_SEARCH_STRING_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def get_connector_types_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ConnectorTypeElement]:
        method_name = "get_connector_types_by_name"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(name, DEFAULT_NAME_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ConnectorTypeElement,
            CONNECTOR_TYPES + "/by-name?startFrom={2}&pageSize={3}",
            NameRequestBody(name, DEFAULT_NAME_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def get_connector_type_by_guid(
        self,
        user_id: str,
        connector_type_guid: str,
    ) -> Optional[ConnectorTypeElement]:
        method_name = "get_connector_type_by_guid"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(connector_type_guid, "connectorTypeGUID", method_name)

        return self.rest_client.call_element_get(
            method_name,
            ConnectorTypeElement,
            CONNECTOR_TYPES + "/{2}",
            self.server_name,
            user_id,
            connector_type_guid,
        )
