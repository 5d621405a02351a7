# Data Manager Client
# File: clients/display_application.py
# Version: v1

"""Forms, reports and queries owned by a display application.

The three asset kinds share one set of operations under their own URL
prefix.  Their structure is described by data containers and data fields;
data fields are schema attributes and use the schema attribute calls.
"""

from __future__ import annotations

from typing import List, Optional, Type

from ..models import (
    DataContainerElement,
    DataContainerProperties,
    ElementStub,
    FormElement,
    FormProperties,
    QueryDataFieldProperties,
    QueryElement,
    QueryProperties,
    ReportElement,
    ReportProperties,
    SchemaAttributeElement,
    TemplateProperties,
)
from .base import SERVICE_PATH
from .hosted_assets import E, HostedAssetClient

FORMS = SERVICE_PATH + "/forms"
REPORTS = SERVICE_PATH + "/reports"
QUERIES = SERVICE_PATH + "/queries"
DATA_CONTAINERS = SERVICE_PATH + "/schemas/data-containers"
SCHEMA_ELEMENTS_PREFIX = SERVICE_PATH + "/schemas/elements"

DEFAULT_DATA_CONTAINER_TYPE_NAME = "DataContainer"


class DisplayApplicationClient(HostedAssetClient):
    """Maintains the forms, reports and queries of a display application."""

    source_parameter_prefix = "application"
    default_schema_attribute_type_name = "DisplayDataField"

    # ------------------------------------------------------------------
    # Operations shared by forms, reports and queries
    # ------------------------------------------------------------------

    def _create_display_asset(self, method_name, user_id, prefix, application_guid, application_name,
                              application_is_home, properties, properties_parameter):
        return self._create_asset(
            method_name,
            user_id,
            prefix + "?applicationIsHome={2}",
            properties,
            properties_parameter,
            application_guid,
            application_name,
            (application_is_home,),
        )

    def _create_display_asset_from_template(self, method_name, user_id, prefix, application_guid,
                                            application_name, application_is_home, template_guid,
                                            template_properties):
        return self._create_asset(
            method_name,
            user_id,
            prefix + "/from-template/{2}?applicationIsHome={3}",
            template_properties,
            "templateProperties",
            application_guid,
            application_name,
            (template_guid, application_is_home),
            guids=((template_guid, "templateGUID"),),
        )

    def _update_display_asset(self, method_name, user_id, prefix, application_guid, application_name,
                              element_guid, element_parameter, is_merge_update, properties,
                              properties_parameter):
        self._update_asset(
            method_name,
            user_id,
            prefix + "/{2}?isMergeUpdate={3}",
            element_guid,
            element_parameter,
            is_merge_update,
            properties,
            properties_parameter,
            application_guid,
            application_name,
            require_qualified_name=not is_merge_update,
        )

    def _remove_display_asset(self, method_name, user_id, prefix, application_guid, application_name,
                              element_guid, element_parameter, qualified_name):
        self._remove_asset(
            method_name,
            user_id,
            prefix + "/{2}/{3}/delete",
            element_guid,
            element_parameter,
            application_guid,
            application_name,
            qualified_name,
            with_qualified_name=True,
        )

    def _find_display_assets(self, method_name: str, element_class: Type[E], user_id: str, prefix: str,
                             value: str, start_from: int, page_size: int, by_name: bool = False) -> List[E]:
        suffix = "/by-name" if by_name else "/by-search-string"
        return self._find_by_body(
            method_name, element_class, user_id,
            prefix + suffix + "?startFrom={2}&pageSize={3}",
            value, start_from, page_size, by_name=by_name,
        )

    def _display_assets_for_application(self, method_name: str, element_class: Type[E], user_id: str,
                                        prefix: str, application_guid: str, application_name: str,
                                        start_from: int, page_size: int) -> List[E]:
        return self._list_for_source(
            method_name, element_class, user_id,
            prefix + "/applications/{2}/{3}?startFrom={4}&pageSize={5}",
            application_guid, application_name, start_from, page_size,
        )

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def create_form(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        form_properties: FormProperties,
    ) -> Optional[str]:
        return self._create_display_asset(
            "create_form", user_id, FORMS, application_guid, application_name,
            application_is_home, form_properties, "formProperties",
        )

    def create_form_from_template(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        template_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_display_asset_from_template(
            "create_form_from_template", user_id, FORMS, application_guid, application_name,
            application_is_home, template_guid, template_properties,
        )

    def update_form(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        form_guid: str,
        is_merge_update: bool,
        form_properties: FormProperties,
    ) -> None:
        self._update_display_asset(
            "update_form", user_id, FORMS, application_guid, application_name,
            form_guid, "formGUID", is_merge_update, form_properties, "formProperties",
        )

    def publish_form(self, user_id: str, form_guid: str) -> None:
        self._change_visibility("publish_form", user_id, FORMS + "/{2}/publish", form_guid, "formGUID")

    def withdraw_form(self, user_id: str, form_guid: str) -> None:
        self._change_visibility("withdraw_form", user_id, FORMS + "/{2}/withdraw", form_guid, "formGUID")

    def remove_form(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        form_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove_display_asset(
            "remove_form", user_id, FORMS, application_guid, application_name,
            form_guid, "formGUID", qualified_name,
        )

    def find_forms(self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0) -> List[FormElement]:
        return self._find_display_assets("find_forms", FormElement, user_id, FORMS, search_string, start_from, page_size)

    def get_forms_by_name(self, user_id: str, name: str, start_from: int = 0, page_size: int = 0) -> List[FormElement]:
        return self._find_display_assets(
            "get_forms_by_name", FormElement, user_id, FORMS, name, start_from, page_size, by_name=True,
        )

    def get_forms_for_application(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[FormElement]:
        return self._display_assets_for_application(
            "get_forms_for_application", FormElement, user_id, FORMS,
            application_guid, application_name, start_from, page_size,
        )

    def get_form_by_guid(self, user_id: str, form_guid: str) -> Optional[FormElement]:
        return self._get("get_form_by_guid", FormElement, user_id, FORMS + "/{2}", form_guid, "formGUID")

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def create_report(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        report_properties: ReportProperties,
    ) -> Optional[str]:
        return self._create_display_asset(
            "create_report", user_id, REPORTS, application_guid, application_name,
            application_is_home, report_properties, "reportProperties",
        )

    def create_report_from_template(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        template_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_display_asset_from_template(
            "create_report_from_template", user_id, REPORTS, application_guid, application_name,
            application_is_home, template_guid, template_properties,
        )

    def update_report(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        report_guid: str,
        is_merge_update: bool,
        report_properties: ReportProperties,
    ) -> None:
        self._update_display_asset(
            "update_report", user_id, REPORTS, application_guid, application_name,
            report_guid, "reportGUID", is_merge_update, report_properties, "reportProperties",
        )

    def publish_report(self, user_id: str, report_guid: str) -> None:
        self._change_visibility("publish_report", user_id, REPORTS + "/{2}/publish", report_guid, "reportGUID")

    def withdraw_report(self, user_id: str, report_guid: str) -> None:
        self._change_visibility("withdraw_report", user_id, REPORTS + "/{2}/withdraw", report_guid, "reportGUID")

    def remove_report(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        report_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove_display_asset(
            "remove_report", user_id, REPORTS, application_guid, application_name,
            report_guid, "reportGUID", qualified_name,
        )

    def find_reports(
        self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0
    ) -> List[ReportElement]:
        return self._find_display_assets(
            "find_reports", ReportElement, user_id, REPORTS, search_string, start_from, page_size,
        )

    def get_reports_by_name(self, user_id: str, name: str, start_from: int = 0, page_size: int = 0) -> List[ReportElement]:
        return self._find_display_assets(
            "get_reports_by_name", ReportElement, user_id, REPORTS, name, start_from, page_size, by_name=True,
        )

    def get_reports_for_application(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[ReportElement]:
        return self._display_assets_for_application(
            "get_reports_for_application", ReportElement, user_id, REPORTS,
            application_guid, application_name, start_from, page_size,
        )

    def get_report_by_guid(self, user_id: str, report_guid: str) -> Optional[ReportElement]:
        return self._get("get_report_by_guid", ReportElement, user_id, REPORTS + "/{2}", report_guid, "reportGUID")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def create_query(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        query_properties: QueryProperties,
    ) -> Optional[str]:
        return self._create_display_asset(
            "create_query", user_id, QUERIES, application_guid, application_name,
            application_is_home, query_properties, "queryProperties",
        )

    def create_query_from_template(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        template_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_display_asset_from_template(
            "create_query_from_template", user_id, QUERIES, application_guid, application_name,
            application_is_home, template_guid, template_properties,
        )

    def update_query(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        query_guid: str,
        is_merge_update: bool,
        query_properties: QueryProperties,
    ) -> None:
        self._update_display_asset(
            "update_query", user_id, QUERIES, application_guid, application_name,
            query_guid, "queryGUID", is_merge_update, query_properties, "queryProperties",
        )

    def publish_query(self, user_id: str, query_guid: str) -> None:
        self._change_visibility("publish_query", user_id, QUERIES + "/{2}/publish", query_guid, "queryGUID")

    def withdraw_query(self, user_id: str, query_guid: str) -> None:
        self._change_visibility("withdraw_query", user_id, QUERIES + "/{2}/withdraw", query_guid, "queryGUID")

    def remove_query(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        query_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove_display_asset(
            "remove_query", user_id, QUERIES, application_guid, application_name,
            query_guid, "queryGUID", qualified_name,
        )

    def find_queries(self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0) -> List[QueryElement]:
        return self._find_display_assets(
            "find_queries", QueryElement, user_id, QUERIES, search_string, start_from, page_size,
        )

    def get_queries_by_name(self, user_id: str, name: str, start_from: int = 0, page_size: int = 0) -> List[QueryElement]:
        return self._find_display_assets(
            "get_queries_by_name", QueryElement, user_id, QUERIES, name, start_from, page_size, by_name=True,
        )

    def get_queries_for_application(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[QueryElement]:
        return self._display_assets_for_application(
            "get_queries_for_application", QueryElement, user_id, QUERIES,
            application_guid, application_name, start_from, page_size,
        )

    def get_query_by_guid(self, user_id: str, query_guid: str) -> Optional[QueryElement]:
        return self._get("get_query_by_guid", QueryElement, user_id, QUERIES + "/{2}", query_guid, "queryGUID")

    # ------------------------------------------------------------------
    # Data containers
    # ------------------------------------------------------------------

    def create_data_container(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        parent_element_guid: str,
        data_container_properties: DataContainerProperties,
    ) -> Optional[str]:
        """Create a data container nested under a form, report, query or another container."""
        return self._create_asset(
            "create_data_container",
            user_id,
            SCHEMA_ELEMENTS_PREFIX + "/{2}/data-containers?applicationIsHome={3}",
            data_container_properties,
            "dataContainerProperties",
            application_guid,
            application_name,
            (parent_element_guid, application_is_home),
            guids=((parent_element_guid, "parentElementGUID"),),
        )

    def create_data_container_from_template(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        template_guid: str,
        parent_element_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_asset(
            "create_data_container_from_template",
            user_id,
            SCHEMA_ELEMENTS_PREFIX + "/{2}/data-containers/from-template/{3}?applicationIsHome={4}",
            template_properties,
            "templateProperties",
            application_guid,
            application_name,
            (parent_element_guid, template_guid, application_is_home),
            guids=((template_guid, "templateGUID"), (parent_element_guid, "parentElementGUID")),
        )

    def update_data_container(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        data_container_guid: str,
        is_merge_update: bool,
        data_container_properties: DataContainerProperties,
    ) -> None:
        self._update_asset(
            "update_data_container",
            user_id,
            DATA_CONTAINERS + "/{2}?isMergeUpdate={3}",
            data_container_guid,
            "dataContainerGUID",
            is_merge_update,
            data_container_properties,
            "dataContainerProperties",
            application_guid,
            application_name,
            require_qualified_name=not is_merge_update,
        )

    def remove_data_container(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        data_container_guid: str,
    ) -> None:
        self._remove_asset(
            "remove_data_container",
            user_id,
            DATA_CONTAINERS + "/{2}/delete",
            data_container_guid,
            "dataContainerGUID",
            application_guid,
            application_name,
        )

    def find_data_containers(
        self,
        user_id: str,
        search_string: str,
        type_name: Optional[str] = None,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DataContainerElement]:
        return self._find_by_body(
            "find_data_containers", DataContainerElement, user_id,
            DATA_CONTAINERS + "/types/{2}/by-search-string?startFrom={3}&pageSize={4}",
            search_string, start_from, page_size,
            type_name or DEFAULT_DATA_CONTAINER_TYPE_NAME,
        )

    def get_data_containers_for_element(
        self,
        user_id: str,
        parent_element_guid: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DataContainerElement]:
        return self._list_for_parent(
            "get_data_containers_for_element", DataContainerElement, user_id,
            DATA_CONTAINERS + "/by-parent-element/{2}?startFrom={3}&pageSize={4}",
            parent_element_guid, "parentElementGUID", start_from, page_size,
        )

    def get_data_containers_by_name(
        self,
        user_id: str,
        name: str,
        type_name: Optional[str] = None,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DataContainerElement]:
        return self._find_by_body(
            "get_data_containers_by_name", DataContainerElement, user_id,
            DATA_CONTAINERS + "/types/{2}/by-name?startFrom={3}&pageSize={4}",
            name, start_from, page_size,
            type_name or DEFAULT_DATA_CONTAINER_TYPE_NAME,
            by_name=True,
        )

    def get_data_container_by_guid(self, user_id: str, data_container_guid: str) -> Optional[DataContainerElement]:
        return self._get(
            "get_data_container_by_guid", DataContainerElement, user_id,
            DATA_CONTAINERS + "/{2}", data_container_guid, "dataContainerGUID",
        )

    def get_data_container_parent(self, user_id: str, data_container_guid: str) -> Optional[ElementStub]:
        method_name = "get_data_container_parent"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(data_container_guid, "dataContainerGUID", method_name)

        return self.rest_client.call_element_stub_get(
            method_name,
            DATA_CONTAINERS + "/{2}/parent",
            self.server_name,
            user_id,
            data_container_guid,
        )

    # ------------------------------------------------------------------
    # Data fields
    # ------------------------------------------------------------------

    @staticmethod
    def _field_source(application_guid, application_name, application_is_home):
        # A data field is only anchored to the application when it is the home.
        if application_is_home:
            return application_guid, application_name
        return None, None

    def create_data_field(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        parent_element_guid: str,
        data_field_properties: QueryDataFieldProperties,
    ) -> Optional[str]:
        """Create a data field under a data container; typed ``DisplayDataField`` unless set."""
        method_name = "create_data_field"
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(parent_element_guid, "parentElementGUID", method_name)
        handler.validate_object(data_field_properties, "dataFieldProperties", method_name)
        self._validate_qualified_name(data_field_properties, method_name)

        source_guid, source_name = self._field_source(application_guid, application_name, application_is_home)
        return self.create_schema_attribute(
            user_id,
            parent_element_guid,
            data_field_properties,
            None,
            source_guid,
            source_name,
        )

    def create_data_field_from_template(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        application_is_home: bool,
        template_guid: str,
        parent_element_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        source_guid, source_name = self._field_source(application_guid, application_name, application_is_home)
        return self.create_schema_attribute_from_template(
            user_id,
            parent_element_guid,
            template_guid,
            template_properties,
            source_guid,
            source_name,
        )

    def update_data_field(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        data_field_guid: str,
        is_merge_update: bool,
        data_field_properties: QueryDataFieldProperties,
    ) -> None:
        self.update_schema_attribute(
            user_id,
            data_field_guid,
            is_merge_update,
            data_field_properties,
            application_guid,
            application_name,
        )

    def remove_data_field(
        self,
        user_id: str,
        application_guid: str,
        application_name: str,
        data_field_guid: str,
    ) -> None:
        self.remove_schema_attribute(user_id, data_field_guid, application_guid, application_name)

    def find_data_fields(
        self, user_id: str, search_string: str, start_from: int = 0, page_size: int = 0
    ) -> List[SchemaAttributeElement]:
        return self.find_schema_attributes(user_id, search_string, None, start_from, page_size)

    def get_child_data_fields(
        self, user_id: str, parent_element_guid: str, start_from: int = 0, page_size: int = 0
    ) -> List[SchemaAttributeElement]:
        return self.get_nested_attributes(user_id, parent_element_guid, start_from, page_size)

    def get_data_fields_by_name(
        self, user_id: str, name: str, start_from: int = 0, page_size: int = 0
    ) -> List[SchemaAttributeElement]:
        return self.get_schema_attributes_by_name(user_id, name, None, start_from, page_size)

    def get_data_field_by_guid(self, user_id: str, data_field_guid: str) -> Optional[SchemaAttributeElement]:
        return self.get_schema_attribute_by_guid(user_id, data_field_guid)
