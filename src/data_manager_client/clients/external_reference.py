# Data Manager Client
# File: clients/external_reference.py
# Version: v1

"""External references: links from catalogued elements to outside resources.

A reference is created once and then linked to any number of elements.
Each link is a relationship with its own GUID, so link updates and
removals address the link rather than the two ends.
"""

from __future__ import annotations

from typing import List, Optional

from ..models import (
    ExternalReferenceElement,
    ExternalReferenceLinkElement,
    ExternalReferenceLinkProperties,
    ExternalReferenceProperties,
)
from ..rest.requests import (
    ExternalSourceRequestBody,
    NameRequestBody,
    RelationshipRequestBody,
    SearchStringRequestBody,
    compose_request,
)
from .base import (
    DEFAULT_NAME_PARAMETER,
    DEFAULT_SEARCH_STRING_PARAMETER,
    SERVICE_PATH,
    DataManagerBaseClient,
)

EXTERNAL_REFERENCES = SERVICE_PATH + "/external-references"


class ExternalReferenceClient(DataManagerBaseClient):
    """Maintains external references and their links to elements."""

    def create_external_reference(
        self,
        user_id: str,
        external_reference_properties: ExternalReferenceProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
        external_source_is_home: bool = True,
    ) -> Optional[str]:
        """Create an external reference.

        ``external_source_is_home`` marks the reference as owned by the
        external source so that other callers can not change it.
        """
        method_name = "create_external_reference"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_object(external_reference_properties, "externalReferenceProperties", method_name)
        self._validate_qualified_name(external_reference_properties, method_name)

        response = self.rest_client.call_guid_post(
            method_name,
            EXTERNAL_REFERENCES + "?assetManagerIsHome={2}",
            compose_request(external_reference_properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            external_source_is_home,
        )
        return response.guid

    def update_external_reference(
        self,
        user_id: str,
        external_reference_guid: str,
        is_merge_update: bool,
        external_reference_properties: ExternalReferenceProperties,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "update_external_reference"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(external_reference_guid, "externalReferenceGUID", method_name)
        handler.validate_object(external_reference_properties, "externalReferenceProperties", method_name)
        if not is_merge_update:
            self._validate_qualified_name(external_reference_properties, method_name)

        self.rest_client.call_void_post(
            method_name,
            EXTERNAL_REFERENCES + "/{2}?isMergeUpdate={3}",
            compose_request(external_reference_properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            external_reference_guid,
            is_merge_update,
        )

    def remove_external_reference(
        self,
        user_id: str,
        external_reference_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "remove_external_reference"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(external_reference_guid, "externalReferenceGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            EXTERNAL_REFERENCES + "/{2}/remove",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            external_reference_guid,
        )

    # ------------------------------------------------------------------
    # Links to elements
    # ------------------------------------------------------------------

    def link_external_reference_to_element(
        self,
        user_id: str,
        attached_to_guid: str,
        external_reference_guid: str,
        link_properties: Optional[ExternalReferenceLinkProperties] = None,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
        external_source_is_home: bool = True,
    ) -> Optional[str]:
        """Attach an external reference to an element; returns the GUID of the link."""
        method_name = "link_external_reference_to_element"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(attached_to_guid, "attachedToGUID", method_name)
        handler.validate_guid(external_reference_guid, "externalReferenceGUID", method_name)

        response = self.rest_client.call_guid_post(
            method_name,
            EXTERNAL_REFERENCES + "/{2}/links/{3}?assetManagerIsHome={4}",
            RelationshipRequestBody(link_properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            external_reference_guid,
            attached_to_guid,
            external_source_is_home,
        )
        return response.guid

    def update_external_reference_to_element_link(
        self,
        user_id: str,
        external_reference_link_guid: str,
        link_properties: Optional[ExternalReferenceLinkProperties] = None,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "update_external_reference_to_element_link"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(external_reference_link_guid, "externalReferenceLinkGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            EXTERNAL_REFERENCES + "/links/{2}/update",
            RelationshipRequestBody(link_properties, external_source_guid, external_source_name),
            self.server_name,
            user_id,
            external_reference_link_guid,
        )

    def unlink_external_reference_from_element(
        self,
        user_id: str,
        external_reference_link_guid: str,
        external_source_guid: Optional[str] = None,
        external_source_name: Optional[str] = None,
    ) -> None:
        method_name = "unlink_external_reference_from_element"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(external_reference_link_guid, "externalReferenceLinkGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            EXTERNAL_REFERENCES + "/links/{2}/remove",
            ExternalSourceRequestBody(external_source_guid, external_source_name),
            self.server_name,
            user_id,
            external_reference_link_guid,
        )

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def _find_by_value(
        self,
        method_name: str,
        user_id: str,
        url_suffix: str,
        value: str,
        value_parameter: str,
        start_from: int,
        page_size: int,
    ) -> List[ExternalReferenceElement]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_name(value, value_parameter, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ExternalReferenceElement,
            EXTERNAL_REFERENCES + url_suffix + "?startFrom={2}&pageSize={3}",
            NameRequestBody(value, value_parameter),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def find_external_references(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ExternalReferenceElement]:
        method_name = "find_external_references"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_search_string(search_string, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ExternalReferenceElement,
            EXTERNAL_REFERENCES + "/by-search-string?startFrom={2}&pageSize={3}",
            SearchStringRequestBody(search_string, DEFAULT_SEARCH_STRING_PARAMETER),
            self.server_name,
            user_id,
            start_from,
            valid_page_size,
        )

    def get_external_references_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ExternalReferenceElement]:
        return self._find_by_value(
            "get_external_references_by_name", user_id, "/by-name", name, DEFAULT_NAME_PARAMETER,
            start_from, page_size,
        )

    def get_external_references_by_url(
        self,
        user_id: str,
        url: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ExternalReferenceElement]:
        return self._find_by_value(
            "get_external_references_by_url", user_id, "/by-url", url, "url", start_from, page_size,
        )

    def get_external_references_by_resource_id(
        self,
        user_id: str,
        resource_id: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ExternalReferenceElement]:
        return self._find_by_value(
            "get_external_references_by_resource_id", user_id, "/by-resource-id", resource_id, "resourceId",
            start_from, page_size,
        )

    def retrieve_attached_external_references(
        self,
        user_id: str,
        attached_to_guid: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ExternalReferenceLinkElement]:
        """List the references linked to an element, each with its link properties."""
        method_name = "retrieve_attached_external_references"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(attached_to_guid, "attachedToGUID", method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            ExternalReferenceLinkElement,
            EXTERNAL_REFERENCES + "/attached-to/{2}?startFrom={3}&pageSize={4}",
            None,
            self.server_name,
            user_id,
            attached_to_guid,
            start_from,
            valid_page_size,
        )

    def get_external_reference_by_guid(
        self,
        user_id: str,
        external_reference_guid: str,
    ) -> Optional[ExternalReferenceElement]:
        method_name = "get_external_reference_by_guid"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(external_reference_guid, "externalReferenceGUID", method_name)

        return self.rest_client.call_element_post(
            method_name,
            ExternalReferenceElement,
            EXTERNAL_REFERENCES + "/{2}/by-guid",
            None,
            self.server_name,
            user_id,
            external_reference_guid,
        )
