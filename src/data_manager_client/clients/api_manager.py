# Data Manager Client
# File: clients/api_manager.py
# Version: v1

"""APIs and their operations, catalogued on behalf of an API manager."""

from __future__ import annotations

from typing import List, Optional

from ..models import (
    APIElement,
    APIOperationElement,
    APIOperationProperties,
    APIProperties,
    TemplateProperties,
)
from .base import SERVICE_PATH
from .hosted_assets import HostedAssetClient

APIS = SERVICE_PATH + "/apis"
API_OPERATIONS = APIS + "/api-operations"


class APIManagerClient(HostedAssetClient):
    """Maintains the APIs hosted by an API manager."""

    source_parameter_prefix = "apiManager"
    default_schema_attribute_type_name = "APIParameter"

    # ------------------------------------------------------------------
    # APIs
    # ------------------------------------------------------------------

    def create_api(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        api_manager_is_home: bool,
        api_properties: APIProperties,
    ) -> Optional[str]:
        return self._create_asset(
            "create_api",
            user_id,
            APIS + "?apiManagerIsHome={2}",
            api_properties,
            "apiProperties",
            api_manager_guid,
            api_manager_name,
            (api_manager_is_home,),
        )

    def create_api_from_template(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        api_manager_is_home: bool,
        template_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_asset(
            "create_api_from_template",
            user_id,
            APIS + "/from-template/{2}?apiManagerIsHome={3}",
            template_properties,
            "templateProperties",
            api_manager_guid,
            api_manager_name,
            (template_guid, api_manager_is_home),
            guids=((template_guid, "templateGUID"),),
        )

    def update_api(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        api_guid: str,
        is_merge_update: bool,
        api_properties: APIProperties,
    ) -> None:
        """Update an API; the qualified name is required even for a merge."""
        self._update_asset(
            "update_api",
            user_id,
            APIS + "/{2}?isMergeUpdate={3}",
            api_guid,
            "apiGUID",
            is_merge_update,
            api_properties,
            "apiProperties",
            api_manager_guid,
            api_manager_name,
            require_qualified_name=True,
        )

    def publish_api(self, user_id: str, api_guid: str) -> None:
        self._change_visibility("publish_api", user_id, APIS + "/{2}/publish", api_guid, "apiGUID")

    def withdraw_api(self, user_id: str, api_guid: str) -> None:
        self._change_visibility("withdraw_api", user_id, APIS + "/{2}/withdraw", api_guid, "apiGUID")

    def remove_api(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        api_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove_asset(
            "remove_api",
            user_id,
            APIS + "/{2}/{3}/delete",
            api_guid,
            "apiGUID",
            api_manager_guid,
            api_manager_name,
            qualified_name,
            with_qualified_name=True,
            validate_source=True,
        )

    def find_apis(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[APIElement]:
        return self._find_by_path(
            "find_apis", APIElement, user_id,
            APIS + "/by-search-string/{2}?startFrom={3}&pageSize={4}",
            search_string, start_from, page_size,
        )

    def get_apis_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[APIElement]:
        return self._find_by_path(
            "get_apis_by_name", APIElement, user_id,
            APIS + "/by-name/{2}?startFrom={3}&pageSize={4}",
            name, start_from, page_size, by_name=True,
        )

    def get_apis_for_api_manager(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[APIElement]:
        return self._list_for_source(
            "get_apis_for_api_manager", APIElement, user_id,
            APIS + "/api-managers/{2}/{3}?startFrom={4}&pageSize={5}",
            api_manager_guid, api_manager_name, start_from, page_size,
        )

    def get_api_by_guid(self, user_id: str, api_guid: str) -> Optional[APIElement]:
        return self._get("get_api_by_guid", APIElement, user_id, APIS + "/{2}", api_guid, "apiGUID")

    # ------------------------------------------------------------------
    # API operations
    # ------------------------------------------------------------------

    def create_api_operation(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        api_manager_is_home: bool,
        api_guid: str,
        api_operation_properties: APIOperationProperties,
    ) -> Optional[str]:
        """Add an operation to an API; the server derives a missing qualified name."""
        return self._create_asset(
            "create_api_operation",
            user_id,
            APIS + "/{2}/api-operations?apiManagerIsHome={3}",
            api_operation_properties,
            "apiOperationProperties",
            api_manager_guid,
            api_manager_name,
            (api_guid, api_manager_is_home),
            guids=((api_guid, "apiGUID"),),
            require_qualified_name=False,
        )

    def create_api_operation_from_template(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        api_manager_is_home: bool,
        template_guid: str,
        api_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_asset(
            "create_api_operation_from_template",
            user_id,
            APIS + "/{2}/api-operations/from-template/{3}?apiManagerIsHome={4}",
            template_properties,
            "templateProperties",
            api_manager_guid,
            api_manager_name,
            (api_guid, template_guid, api_manager_is_home),
            guids=((template_guid, "templateGUID"), (api_guid, "apiGUID")),
        )

    def update_api_operation(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        api_operation_guid: str,
        is_merge_update: bool,
        api_operation_properties: APIOperationProperties,
    ) -> None:
        self._update_asset(
            "update_api_operation",
            user_id,
            API_OPERATIONS + "/{2}?isMergeUpdate={3}",
            api_operation_guid,
            "apiOperationGUID",
            is_merge_update,
            api_operation_properties,
            "apiOperationProperties",
            api_manager_guid,
            api_manager_name,
            require_qualified_name=False,
        )

    def remove_api_operation(
        self,
        user_id: str,
        api_manager_guid: str,
        api_manager_name: str,
        api_operation_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove_asset(
            "remove_api_operation",
            user_id,
            API_OPERATIONS + "/{2}/{3}/delete",
            api_operation_guid,
            "apiOperationGUID",
            api_manager_guid,
            api_manager_name,
            qualified_name,
            with_qualified_name=True,
        )

    def find_api_operations(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[APIOperationElement]:
        return self._find_by_path(
            "find_api_operations", APIOperationElement, user_id,
            API_OPERATIONS + "/by-search-string/{2}?startFrom={3}&pageSize={4}",
            search_string, start_from, page_size,
        )

    def get_operations_for_api(
        self,
        user_id: str,
        api_guid: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[APIOperationElement]:
        return self._list_for_parent(
            "get_operations_for_api", APIOperationElement, user_id,
            APIS + "/{2}/api-operations?startFrom={3}&pageSize={4}",
            api_guid, "apiGUID", start_from, page_size,
        )

    def get_api_operations_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[APIOperationElement]:
        return self._find_by_path(
            "get_api_operations_by_name", APIOperationElement, user_id,
            API_OPERATIONS + "/by-name/{2}?startFrom={3}&pageSize={4}",
            name, start_from, page_size, by_name=True,
        )

    def get_api_operation_by_guid(self, user_id: str, api_operation_guid: str) -> Optional[APIOperationElement]:
        return self._get(
            "get_api_operation_by_guid", APIOperationElement, user_id,
            API_OPERATIONS + "/{2}", api_operation_guid, "apiOperationGUID",
        )
