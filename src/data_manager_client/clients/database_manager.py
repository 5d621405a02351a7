# Data Manager Client
# File: clients/database_manager.py
# Version: v1

"""Databases, database schemas, tables, views, columns and keys.

Maintenance calls are issued on behalf of a database manager: its GUID and
qualified name travel in the URL and identify the metadata source that
owns the elements.  The properties are posted directly as the request body.
Retrieval calls are independent of the database manager.

Only databases must carry a qualified name on create and update; schemas,
tables, views and columns may leave it to the server.
"""

from __future__ import annotations

from typing import List, Optional, Type, TypeVar

from ..models import (
    DatabaseColumnElement,
    DatabaseColumnProperties,
    DatabaseElement,
    DatabaseForeignKeyProperties,
    DatabasePrimaryKeyProperties,
    DatabaseProperties,
    DatabaseSchemaElement,
    DatabaseSchemaProperties,
    DatabaseTableElement,
    DatabaseTableProperties,
    DatabaseViewElement,
    DatabaseViewProperties,
    ElementProperties,
    MetadataElement,
    TemplateProperties,
)
from .base import QUALIFIED_NAME_PARAMETER, SERVICE_PATH, DataManagerBaseClient

E = TypeVar("E", bound=MetadataElement)

# {2} database manager GUID, {3} database manager qualified name
EDIT_PREFIX = SERVICE_PATH + "/database-managers/{2}/{3}/databases"
RETRIEVE_PREFIX = SERVICE_PATH + "/databases"

_SEARCH_STRING_PARAMETER = "searchString"
_NAME_PARAMETER = "name"


class DatabaseManagerClient(DataManagerBaseClient):
    """Catalogues the structure of the databases hosted by a database manager."""

    # ------------------------------------------------------------------
    # Shared pipeline steps
    # ------------------------------------------------------------------

    def _validate_manager(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        method_name: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(database_manager_guid, "databaseManagerGUID", method_name)
        handler.validate_name(database_manager_name, "databaseManagerName", method_name)

    def _create(
        self,
        method_name: str,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        url_suffix: str,
        properties: Optional[ElementProperties],
        properties_parameter: str,
        parent_guid: Optional[str] = None,
        parent_parameter: Optional[str] = None,
        require_qualified_name: bool = False,
    ) -> Optional[str]:
        handler = self.invalid_parameter_handler
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        if parent_parameter is not None:
            handler.validate_guid(parent_guid, parent_parameter, method_name)
        handler.validate_object(properties, properties_parameter, method_name)
        if require_qualified_name:
            self._validate_qualified_name(properties, method_name)

        params = [database_manager_guid, database_manager_name]
        if parent_parameter is not None:
            params.append(parent_guid)

        response = self.rest_client.call_guid_post(
            method_name,
            EDIT_PREFIX + url_suffix,
            properties,
            self.server_name,
            user_id,
            *params,
        )
        return response.guid

    def _create_from_template(
        self,
        method_name: str,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        url_suffix: str,
        template_guid: str,
        template_properties: Optional[TemplateProperties],
        parent_guid: Optional[str] = None,
        parent_parameter: Optional[str] = None,
        require_qualified_name: bool = False,
    ) -> Optional[str]:
        handler = self.invalid_parameter_handler
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        handler.validate_guid(template_guid, "templateGUID", method_name)
        if parent_parameter is not None:
            handler.validate_guid(parent_guid, parent_parameter, method_name)
        handler.validate_object(template_properties, "templateProperties", method_name)
        if require_qualified_name:
            self._validate_qualified_name(template_properties, method_name)

        # The parent GUID, when there is one, comes before the template GUID.
        params = [database_manager_guid, database_manager_name]
        if parent_parameter is not None:
            params.append(parent_guid)
        params.append(template_guid)

        response = self.rest_client.call_guid_post(
            method_name,
            EDIT_PREFIX + url_suffix,
            template_properties,
            self.server_name,
            user_id,
            *params,
        )
        return response.guid

    def _update(
        self,
        method_name: str,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        url_suffix: str,
        element_guid: str,
        element_parameter: str,
        properties: Optional[ElementProperties],
        properties_parameter: str,
        require_qualified_name: bool = False,
    ) -> None:
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        self.invalid_parameter_handler.validate_guid(element_guid, element_parameter, method_name)
        self.invalid_parameter_handler.validate_object(properties, properties_parameter, method_name)
        if require_qualified_name:
            self._validate_qualified_name(properties, method_name)

        self.rest_client.call_void_post(
            method_name,
            EDIT_PREFIX + url_suffix,
            properties,
            self.server_name,
            user_id,
            database_manager_guid,
            database_manager_name,
            element_guid,
        )

    def _remove(
        self,
        method_name: str,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        url_suffix: str,
        element_guid: str,
        element_parameter: str,
        qualified_name: str,
    ) -> None:
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        self.invalid_parameter_handler.validate_guid(element_guid, element_parameter, method_name)
        self.invalid_parameter_handler.validate_name(qualified_name, QUALIFIED_NAME_PARAMETER, method_name)

        self.rest_client.call_void_post(
            method_name,
            EDIT_PREFIX + url_suffix,
            None,
            self.server_name,
            user_id,
            database_manager_guid,
            database_manager_name,
            element_guid,
            qualified_name,
        )

    def _change_visibility(
        self,
        method_name: str,
        user_id: str,
        url_suffix: str,
        element_guid: str,
        element_parameter: str,
    ) -> None:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(element_guid, element_parameter, method_name)

        self.rest_client.call_void_post(
            method_name,
            RETRIEVE_PREFIX + url_suffix,
            None,
            self.server_name,
            user_id,
            element_guid,
        )

    def _find(
        self,
        method_name: str,
        element_class: Type[E],
        user_id: str,
        url_suffix: str,
        value: str,
        start_from: int,
        page_size: int,
        by_name: bool = False,
    ) -> List[E]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        if by_name:
            handler.validate_name(value, _NAME_PARAMETER, method_name)
        else:
            handler.validate_search_string(value, _SEARCH_STRING_PARAMETER, method_name)
        valid_page_size = handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_get(
            method_name,
            element_class,
            RETRIEVE_PREFIX + url_suffix + "?startFrom={3}&pageSize={4}",
            self.server_name,
            user_id,
            value,
            start_from,
            valid_page_size,
        )

    def _list_for_parent(
        self,
        method_name: str,
        element_class: Type[E],
        user_id: str,
        url_suffix: str,
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
            RETRIEVE_PREFIX + url_suffix + "?startFrom={3}&pageSize={4}",
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
        url_suffix: str,
        guid: str,
        guid_parameter: str,
    ) -> Optional[E]:
        handler = self.invalid_parameter_handler
        handler.validate_user_id(user_id, method_name)
        handler.validate_guid(guid, guid_parameter, method_name)

        return self.rest_client.call_element_get(
            method_name,
            element_class,
            RETRIEVE_PREFIX + url_suffix,
            self.server_name,
            user_id,
            guid,
        )

    # ------------------------------------------------------------------
    # Databases
    # ------------------------------------------------------------------

    def create_database(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_properties: DatabaseProperties,
    ) -> Optional[str]:
        """Create a database owned by the database manager; returns its GUID."""
        return self._create(
            "create_database",
            user_id,
            database_manager_guid,
            database_manager_name,
            "",
            database_properties,
            "databaseProperties",
            require_qualified_name=True,
        )

    def create_database_from_template(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        template_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_from_template(
            "create_database_from_template",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/from-template/{4}",
            template_guid,
            template_properties,
            require_qualified_name=True,
        )

    def update_database(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_guid: str,
        database_properties: DatabaseProperties,
    ) -> None:
        """Replace the properties of a database."""
        self._update(
            "update_database",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/{4}",
            database_guid,
            "databaseGUID",
            database_properties,
            "databaseProperties",
            require_qualified_name=True,
        )

    def publish_database(self, user_id: str, database_guid: str) -> None:
        """Make a database (and everything anchored to it) visible to consumers."""
        self._change_visibility("publish_database", user_id, "/{2}/publish", database_guid, "databaseGUID")

    def withdraw_database(self, user_id: str, database_guid: str) -> None:
        """Hide a database from consumers again."""
        self._change_visibility("withdraw_database", user_id, "/{2}/withdraw", database_guid, "databaseGUID")

    def remove_database(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove(
            "remove_database",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/{4}/{5}/delete",
            database_guid,
            "databaseGUID",
            qualified_name,
        )

    def find_databases(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseElement]:
        return self._find(
            "find_databases", DatabaseElement, user_id, "/by-search-string/{2}",
            search_string, start_from, page_size,
        )

    def get_databases_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseElement]:
        return self._find(
            "get_databases_by_name", DatabaseElement, user_id, "/by-name/{2}",
            name, start_from, page_size, by_name=True,
        )

    def get_databases_for_database_manager(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseElement]:
        method_name = "get_databases_for_database_manager"
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        valid_page_size = self.invalid_parameter_handler.validate_paging(start_from, page_size, method_name)

        return self.rest_client.call_elements_get(
            method_name,
            DatabaseElement,
            EDIT_PREFIX + "?startFrom={4}&pageSize={5}",
            self.server_name,
            user_id,
            database_manager_guid,
            database_manager_name,
            start_from,
            valid_page_size,
        )

    def get_database_by_guid(self, user_id: str, database_guid: str) -> Optional[DatabaseElement]:
        return self._get("get_database_by_guid", DatabaseElement, user_id, "/{2}", database_guid, "databaseGUID")

    # ------------------------------------------------------------------
    # Database schemas
    # ------------------------------------------------------------------

    def create_database_schema(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_guid: str,
        database_schema_properties: DatabaseSchemaProperties,
    ) -> Optional[str]:
        return self._create(
            "create_database_schema",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/{4}/schemas",
            database_schema_properties,
            "databaseSchemaProperties",
            database_guid,
            "databaseGUID",
        )

    def create_database_schema_from_template(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        template_guid: str,
        database_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_from_template(
            "create_database_schema_from_template",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/{4}/schemas/from-template/{5}",
            template_guid,
            template_properties,
            database_guid,
            "databaseGUID",
        )

    def update_database_schema(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_schema_guid: str,
        database_schema_properties: DatabaseSchemaProperties,
    ) -> None:
        self._update(
            "update_database_schema",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/{4}",
            database_schema_guid,
            "databaseSchemaGUID",
            database_schema_properties,
            "databaseSchemaProperties",
        )

    def publish_database_schema(self, user_id: str, database_schema_guid: str) -> None:
        """Make a database schema visible to consumers."""
        self._change_visibility(
            "publish_database_schema", user_id, "/schemas/{2}/publish", database_schema_guid, "databaseSchemaGUID"
        )

    def withdraw_database_schema(self, user_id: str, database_schema_guid: str) -> None:
        self._change_visibility(
            "withdraw_database_schema", user_id, "/schemas/{2}/withdraw", database_schema_guid, "databaseSchemaGUID"
        )

    def remove_database_schema(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_schema_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove(
            "remove_database_schema",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/{4}/{5}/delete",
            database_schema_guid,
            "databaseSchemaGUID",
            qualified_name,
        )

    def find_database_schemas(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseSchemaElement]:
        return self._find(
            "find_database_schemas", DatabaseSchemaElement, user_id, "/schemas/by-search-string/{2}",
            search_string, start_from, page_size,
        )

    def get_schemas_for_database(
        self,
        user_id: str,
        database_guid: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseSchemaElement]:
        return self._list_for_parent(
            "get_schemas_for_database", DatabaseSchemaElement, user_id, "/{2}/schemas",
            database_guid, "databaseGUID", start_from, page_size,
        )

    def get_database_schemas_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseSchemaElement]:
        return self._find(
            "get_database_schemas_by_name", DatabaseSchemaElement, user_id, "/schemas/by-name/{2}",
            name, start_from, page_size, by_name=True,
        )

    def get_database_schema_by_guid(
        self,
        user_id: str,
        database_schema_guid: str,
    ) -> Optional[DatabaseSchemaElement]:
        return self._get(
            "get_database_schema_by_guid", DatabaseSchemaElement, user_id, "/schemas/{2}",
            database_schema_guid, "databaseSchemaGUID",
        )

    # ------------------------------------------------------------------
    # Database tables
    # ------------------------------------------------------------------

    def create_database_table(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_schema_guid: str,
        database_table_properties: DatabaseTableProperties,
    ) -> Optional[str]:
        return self._create(
            "create_database_table",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/{4}/tables",
            database_table_properties,
            "databaseTableProperties",
            database_schema_guid,
            "databaseSchemaGUID",
        )

    def create_database_table_from_template(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        template_guid: str,
        database_schema_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_from_template(
            "create_database_table_from_template",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/{4}/tables/from-template/{5}",
            template_guid,
            template_properties,
            database_schema_guid,
            "databaseSchemaGUID",
        )

    def update_database_table(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_table_guid: str,
        database_table_properties: DatabaseTableProperties,
    ) -> None:
        self._update(
            "update_database_table",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/tables/{4}",
            database_table_guid,
            "databaseTableGUID",
            database_table_properties,
            "databaseTableProperties",
        )

    def remove_database_table(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_table_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove(
            "remove_database_table",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/tables/{4}/{5}/delete",
            database_table_guid,
            "databaseTableGUID",
            qualified_name,
        )

    def find_database_tables(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseTableElement]:
        return self._find(
            "find_database_tables", DatabaseTableElement, user_id, "/schemas/tables/by-search-string/{2}",
            search_string, start_from, page_size,
        )

    def get_tables_for_database_schema(
        self,
        user_id: str,
        database_schema_guid: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseTableElement]:
        return self._list_for_parent(
            "get_tables_for_database_schema", DatabaseTableElement, user_id, "/schemas/{2}/tables",
            database_schema_guid, "databaseSchemaGUID", start_from, page_size,
        )

    def get_database_tables_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseTableElement]:
        return self._find(
            "get_database_tables_by_name", DatabaseTableElement, user_id, "/schemas/tables/by-name/{2}",
            name, start_from, page_size, by_name=True,
        )

    def get_database_table_by_guid(
        self,
        user_id: str,
        database_table_guid: str,
    ) -> Optional[DatabaseTableElement]:
        return self._get(
            "get_database_table_by_guid", DatabaseTableElement, user_id, "/schemas/tables/{2}",
            database_table_guid, "databaseTableGUID",
        )

    # ------------------------------------------------------------------
    # Database views
    # ------------------------------------------------------------------

    def create_database_view(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_schema_guid: str,
        database_view_properties: DatabaseViewProperties,
    ) -> Optional[str]:
        """Create a view in a database schema; views are tables with a defining expression."""
        return self._create(
            "create_database_view",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/{4}/tables/views",
            database_view_properties,
            "databaseViewProperties",
            database_schema_guid,
            "databaseSchemaGUID",
        )

    def create_database_view_from_template(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        template_guid: str,
        database_schema_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_from_template(
            "create_database_view_from_template",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/{4}/tables/views/from-template/{5}",
            template_guid,
            template_properties,
            database_schema_guid,
            "databaseSchemaGUID",
        )

    def update_database_view(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_view_guid: str,
        database_view_properties: DatabaseViewProperties,
    ) -> None:
        self._update(
            "update_database_view",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/tables/views/{4}",
            database_view_guid,
            "databaseViewGUID",
            database_view_properties,
            "databaseViewProperties",
        )

    def remove_database_view(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_view_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove(
            "remove_database_view",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/tables/views/{4}/{5}/delete",
            database_view_guid,
            "databaseViewGUID",
            qualified_name,
        )

    def find_database_views(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseViewElement]:
        return self._find(
            "find_database_views", DatabaseViewElement, user_id, "/schemas/tables/views/by-search-string/{2}",
            search_string, start_from, page_size,
        )

    def get_views_for_database_schema(
        self,
        user_id: str,
        database_schema_guid: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseViewElement]:
        return self._list_for_parent(
            "get_views_for_database_schema", DatabaseViewElement, user_id, "/schemas/{2}/tables/views",
            database_schema_guid, "databaseSchemaGUID", start_from, page_size,
        )

    def get_database_views_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseViewElement]:
        return self._find(
            "get_database_views_by_name", DatabaseViewElement, user_id, "/schemas/tables/views/by-name/{2}",
            name, start_from, page_size, by_name=True,
        )

    def get_database_view_by_guid(
        self,
        user_id: str,
        database_view_guid: str,
    ) -> Optional[DatabaseViewElement]:
        return self._get(
            "get_database_view_by_guid", DatabaseViewElement, user_id, "/schemas/tables/views/{2}",
            database_view_guid, "databaseViewGUID",
        )

    # ------------------------------------------------------------------
    # Database columns
    # ------------------------------------------------------------------

    def create_database_column(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_table_guid: str,
        database_column_properties: DatabaseColumnProperties,
    ) -> Optional[str]:
        """Create a column in a table.

        Columns need a data type unless they point at an external schema
        type through ``external_type_guid``.
        """
        method_name = "create_database_column"
        handler = self.invalid_parameter_handler
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        handler.validate_guid(database_table_guid, "databaseTableGUID", method_name)
        handler.validate_object(database_column_properties, "databaseColumnProperties", method_name)
        if database_column_properties.external_type_guid is None:
            handler.validate_name(database_column_properties.data_type, "dataType", method_name)

        response = self.rest_client.call_guid_post(
            method_name,
            EDIT_PREFIX + "/schemas/tables/{4}/columns",
            database_column_properties,
            self.server_name,
            user_id,
            database_manager_guid,
            database_manager_name,
            database_table_guid,
        )
        return response.guid

    def create_database_column_from_template(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        template_guid: str,
        database_table_guid: str,
        template_properties: TemplateProperties,
    ) -> Optional[str]:
        return self._create_from_template(
            "create_database_column_from_template",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/tables/{4}/columns/from-template/{5}",
            template_guid,
            template_properties,
            database_table_guid,
            "databaseTableGUID",
        )

    def update_database_column(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_column_guid: str,
        database_column_properties: DatabaseColumnProperties,
    ) -> None:
        self._update(
            "update_database_column",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/tables/columns/{4}",
            database_column_guid,
            "databaseColumnGUID",
            database_column_properties,
            "databaseColumnProperties",
        )

    def remove_database_column(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_column_guid: str,
        qualified_name: str,
    ) -> None:
        self._remove(
            "remove_database_column",
            user_id,
            database_manager_guid,
            database_manager_name,
            "/schemas/tables/columns/{4}/{5}/delete",
            database_column_guid,
            "databaseColumnGUID",
            qualified_name,
        )

    def find_database_columns(
        self,
        user_id: str,
        search_string: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseColumnElement]:
        return self._find(
            "find_database_columns", DatabaseColumnElement, user_id,
            "/schemas/tables/columns/by-search-string/{2}",
            search_string, start_from, page_size,
        )

    def get_columns_for_database_table(
        self,
        user_id: str,
        database_table_guid: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseColumnElement]:
        return self._list_for_parent(
            "get_columns_for_database_table", DatabaseColumnElement, user_id, "/schemas/tables/{2}/columns",
            database_table_guid, "databaseTableGUID", start_from, page_size,
        )

    def get_database_columns_by_name(
        self,
        user_id: str,
        name: str,
        start_from: int = 0,
        page_size: int = 0,
    ) -> List[DatabaseColumnElement]:
        return self._find(
            "get_database_columns_by_name", DatabaseColumnElement, user_id,
            "/schemas/tables/columns/by-name/{2}",
            name, start_from, page_size, by_name=True,
        )

    def get_database_column_by_guid(
        self,
        user_id: str,
        database_column_guid: str,
    ) -> Optional[DatabaseColumnElement]:
        return self._get(
            "get_database_column_by_guid", DatabaseColumnElement, user_id, "/schemas/tables/columns/{2}",
            database_column_guid, "databaseColumnGUID",
        )

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------

    def set_primary_key_on_column(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_column_guid: str,
        primary_key_properties: DatabasePrimaryKeyProperties,
    ) -> None:
        method_name = "set_primary_key_on_column"
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        self.invalid_parameter_handler.validate_guid(database_column_guid, "databaseColumnGUID", method_name)
        self.invalid_parameter_handler.validate_object(primary_key_properties, "primaryKeyProperties", method_name)

        self.rest_client.call_void_post(
            method_name,
            EDIT_PREFIX + "/schemas/tables/columns/{4}/primary-key",
            primary_key_properties,
            self.server_name,
            user_id,
            database_manager_guid,
            database_manager_name,
            database_column_guid,
        )

    def remove_primary_key_from_column(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        database_column_guid: str,
    ) -> None:
        method_name = "remove_primary_key_from_column"
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        self.invalid_parameter_handler.validate_guid(database_column_guid, "databaseColumnGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            EDIT_PREFIX + "/schemas/tables/columns/{4}/primary-key/delete",
            None,
            self.server_name,
            user_id,
            database_manager_guid,
            database_manager_name,
            database_column_guid,
        )

    def add_foreign_key_relationship(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        primary_key_column_guid: str,
        foreign_key_column_guid: str,
        foreign_key_properties: DatabaseForeignKeyProperties,
    ) -> None:
        """Record that ``foreign_key_column_guid`` references ``primary_key_column_guid``."""
        method_name = "add_foreign_key_relationship"
        handler = self.invalid_parameter_handler
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        handler.validate_guid(primary_key_column_guid, "primaryKeyColumnGUID", method_name)
        handler.validate_guid(foreign_key_column_guid, "foreignKeyColumnGUID", method_name)
        handler.validate_object(foreign_key_properties, "foreignKeyProperties", method_name)

        self.rest_client.call_void_post(
            method_name,
            EDIT_PREFIX + "/schemas/tables/columns/{4}/foreign-key/{5}",
            foreign_key_properties,
            self.server_name,
            user_id,
            database_manager_guid,
            database_manager_name,
            foreign_key_column_guid,
            primary_key_column_guid,
        )

    def remove_foreign_key_relationship(
        self,
        user_id: str,
        database_manager_guid: str,
        database_manager_name: str,
        primary_key_column_guid: str,
        foreign_key_column_guid: str,
    ) -> None:
        method_name = "remove_foreign_key_relationship"
        handler = self.invalid_parameter_handler
        self._validate_manager(user_id, database_manager_guid, database_manager_name, method_name)
        handler.validate_guid(primary_key_column_guid, "primaryKeyColumnGUID", method_name)
        handler.validate_guid(foreign_key_column_guid, "foreignKeyColumnGUID", method_name)

        self.rest_client.call_void_post(
            method_name,
            EDIT_PREFIX + "/schemas/tables/columns/{4}/foreign-key/{5}/delete",
            None,
            self.server_name,
            user_id,
            database_manager_guid,
            database_manager_name,
            foreign_key_column_guid,
            primary_key_column_guid,
        )
