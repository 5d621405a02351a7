# Data Manager Client
# File: clients/hosted_assets.py
# Version: v1

"""Shared steps for assets catalogued on behalf of a hosting technology.

APIs are hosted by an API manager; forms, reports and queries by a display
application.  The host's GUID and qualified name travel in the request body
as the external source, and a query flag says whether the host is the home
of a new element.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Type, TypeVar

from ..models import ElementProperties, MetadataElement
from ..rest.requests import (
    ExternalSourceRequestBody,
    NameRequestBody,
    SearchStringRequestBody,
    compose_request,
)
from .base import DEFAULT_NAME_PARAMETER, DEFAULT_SEARCH_STRING_PARAMETER, QUALIFIED_NAME_PARAMETER
from .schema_manager import SchemaManagerClient

E = TypeVar("E", bound=MetadataElement)


class HostedAssetClient(SchemaManagerClient):
    """Base for clients whose elements belong to a hosting metadata source."""

    # Prefix of the host's GUID and name parameter names, e.g. "application".
    source_parameter_prefix = "externalSource"

    def _validate_source(self, source_guid: str, source_name: str, method_name: str) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_guid(source_guid, self.source_parameter_prefix + "GUID", method_name)
        handler.validate_name(source_name, self.source_parameter_prefix + "Name", method_name)

    def _create_asset(
        self,
        method_name: str,
        user_id: str,
        url_template: str,
        properties: Optional[ElementProperties],
        properties_parameter: str,
        source_guid: Optional[str],
        source_name: Optional[str],
        params: Sequence[Any],
        guids: Sequence[Tuple[Optional[str], str]] = (),
        require_qualified_name: bool = True,
    ) -> Optional[str]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        for guid, guid_parameter in guids:
            handler.validate_guid(guid, guid_parameter, method_name)
        handler.validate_object(properties, properties_parameter, method_name)
        if require_qualified_name:
            self._validate_qualified_name(properties, method_name)

        response = self.rest_client.call_guid_post(
            method_name,
            url_template,
            compose_request(properties, source_guid, source_name),
            self.server_name,
            user_id,
            *params,
        )
        return response.guid

    def _update_asset(
        self,
        method_name: str,
        user_id: str,
        url_template: str,
        element_guid: str,
        element_parameter: str,
        is_merge_update: bool,
        properties: Optional[ElementProperties],
        properties_parameter: str,
        source_guid: Optional[str],
        source_name: Optional[str],
        require_qualified_name: bool,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_parameter, method_name)
        handler.validate_object(properties, properties_parameter, method_name)
        if require_qualified_name:
            self._validate_qualified_name(properties, method_name)

        self.rest_client.call_void_post(
            method_name,
            url_template,
            compose_request(properties, source_guid, source_name),
            self.server_name,
            user_id,
            element_guid,
            is_merge_update,
        )

    def _change_visibility(
        self,
        method_name: str,
        user_id: str,
        url_template: str,
        element_guid: str,
        element_parameter: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_parameter, method_name)

        self.rest_client.call_void_post(method_name, url_template, None, self.server_name, user_id, element_guid)

    def _remove_asset(
        self,
        method_name: str,
        user_id: str,
        url_template: str,
        element_guid: str,
        element_parameter: str,
        source_guid: Optional[str],
        source_name: Optional[str],
        qualified_name: Optional[str] = None,
        with_qualified_name: bool = False,
        validate_source: bool = False,
    ) -> None:
        """Delete an element; with ``with_qualified_name`` its qualified name follows the GUID in the URL."""
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        if validate_source:
            self._validate_source(source_guid, source_name, method_name)
        handler.validate_guid(element_guid, element_parameter, method_name)
        params: List[Any] = [element_guid]
        if with_qualified_name:
            handler.validate_name(qualified_name, QUALIFIED_NAME_PARAMETER, method_name)
            params.append(qualified_name)

        self.rest_client.call_void_post(
            method_name,
            url_template,
            ExternalSourceRequestBody(source_guid, source_name),
            self.server_name,
            user_id,
            *params,
        )

    def _find_by_path(
        self,
        method_name: str,
        element_class: Type[E],
        user_id: str,
        url_template: str,
        value: str,
        start_from: int,
        page_size: int,
        by_name: bool = False,
    ) -> List[E]:
        """Search with the value in the URL: ``{2}`` value, ``{3}`` start, ``{4}`` page size."""
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        if by_name:
            handler.validate_name(value, DEFAULT_NAME_PARAMETER, method_name)
        else:
            handler.validate_search_string(value, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_get(
            method_name,
            element_class,
            url_template,
            self.server_name,
            user_id,
            value,
            start_from,
            valid_page_size,
        )

    def _find_by_body(
        self,
        method_name: str,
        element_class: Type[E],
        user_id: str,
        url_template: str,
        value: str,
        start_from: int,
        page_size: int,
        *params: Any,
        by_name: bool = False,
    ) -> List[E]:
        """Search with the value in the body; ``params`` precede the paging values."""
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        if by_name:
            handler.validate_name(value, DEFAULT_NAME_PARAMETER, method_name)
            body: Any = NameRequestBody(value, DEFAULT_NAME_PARAMETER)
        else:
            handler.validate_search_string(value, DEFAULT_SEARCH_STRING_PARAMETER, method_name)
            body = SearchStringRequestBody(value, DEFAULT_SEARCH_STRING_PARAMETER)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_post(
            method_name,
            element_class,
            url_template,
            body,
            self.server_name,
            user_id,
            *params,
            start_from,
            valid_page_size,
        )

    def _list_for_source(
        self,
        method_name: str,
        element_class: Type[E],
        user_id: str,
        url_template: str,
        source_guid: str,
        source_name: str,
        start_from: int,
        page_size: int,
    ) -> List[E]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        self._validate_source(source_guid, source_name, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_get(
            method_name,
            element_class,
            url_template,
            self.server_name,
            user_id,
            source_guid,
            source_name,
            start_from,
            valid_page_size,
        )

    def _list_for_parent(
        self,
        method_name: str,
        element_class: Type[E],
        user_id: str,
        url_template: str,
        parent_guid: str,
        parent_parameter: str,
        start_from: int,
        page_size: int,
    ) -> List[E]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(parent_guid, parent_parameter, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_get(
            method_name,
            element_class,
            url_template,
            self.server_name,
            user_id,
            parent_guid,
            start_from,
            valid_page_size,
        )

    def _get(
        self,
        method_name: str,
        element_class: Type[E],
        user_id: str,
        url_template: str,
        guid: str,
        guid_parameter: str,
    ) -> Optional[E]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(guid, guid_parameter, method_name)

        return self.rest_client.call_element_get(
            method_name,
            element_class,
            url_template,
            self.server_name,
            user_id,
            guid,
        )
