# Data Manager Client
# File: tests/test_database_manager.py
# Version: v1

import pytest

from conftest import PREFIX
from data_manager_client.clients import DatabaseManagerClient
from data_manager_client.errors import InvalidParameterError
from data_manager_client.models import (
    DatabaseColumnProperties,
    DatabaseForeignKeyProperties,
    DatabasePrimaryKeyProperties,
    DatabaseProperties,
    DatabaseSchemaProperties,
    DatabaseTableProperties,
    DatabaseViewProperties,
    TemplateProperties,
)

DM_GUID = "dm-guid"
DM_NAME = "CocoPharma.DB2"
EDIT = f"{PREFIX}/erinoverview/database-managers/{DM_GUID}/{DM_NAME}/databases"
RETRIEVE = f"{PREFIX}/erinoverview/databases"


@pytest.fixture
def client(config, server) -> DatabaseManagerClient:
    return DatabaseManagerClient(config, transport=server.transport)


def test_create_database_posts_properties_directly(client, server) -> None:
    server.reply({"guid": "db-guid"})

    guid = client.create_database(
        "erinoverview", DM_GUID, DM_NAME, DatabaseProperties(qualified_name="Database:Clinical", database_type="DB2")
    )

    assert guid == "db-guid"
    assert server.last.url.path == EDIT
    assert server.last_body() == {
        "class": "DatabaseProperties",
        "qualifiedName": "Database:Clinical",
        "databaseType": "DB2",
    }


def test_database_manager_name_is_required(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_database("erinoverview", DM_GUID, "", DatabaseProperties(qualified_name="Database:x"))

    assert excinfo.value.parameter_name == "databaseManagerName"
    assert server.requests == []


def test_schema_from_template_puts_template_guid_last(client, server) -> None:
    client.create_database_schema_from_template(
        "erinoverview", DM_GUID, DM_NAME, "tmpl-guid", "db-guid", TemplateProperties(qualified_name="Schema:copy")
    )

    assert server.last.url.path == f"{EDIT}/db-guid/schemas/from-template/tmpl-guid"


def test_create_schema_under_database(client, server) -> None:
    client.create_database_schema(
        "erinoverview", DM_GUID, DM_NAME, "db-guid", DatabaseSchemaProperties(qualified_name="Schema:main")
    )
    assert server.last.url.path == f"{EDIT}/db-guid/schemas"


def test_publish_and_withdraw(client, server) -> None:
    client.publish_database("erinoverview", "db-guid")
    assert server.last.url.path == f"{RETRIEVE}/db-guid/publish"

    client.withdraw_database("erinoverview", "db-guid")
    assert server.last.url.path == f"{RETRIEVE}/db-guid/withdraw"
    assert server.last.method == "POST"


def test_remove_database_carries_qualified_name(client, server) -> None:
    client.remove_database("erinoverview", DM_GUID, DM_NAME, "db-guid", "Database:Clinical")

    assert server.last.url.path == f"{EDIT}/db-guid/Database:Clinical/delete"
    assert server.last_body() is None

    with pytest.raises(InvalidParameterError) as excinfo:
        client.remove_database("erinoverview", DM_GUID, DM_NAME, "db-guid", "")
    assert excinfo.value.parameter_name == "qualifiedName"


def test_column_needs_data_type_unless_external_type(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_database_column(
            "erinoverview", DM_GUID, DM_NAME, "table-guid", DatabaseColumnProperties(qualified_name="col")
        )
    assert excinfo.value.parameter_name == "dataType"
    assert server.requests == []

    client.create_database_column(
        "erinoverview",
        DM_GUID,
        DM_NAME,
        "table-guid",
        DatabaseColumnProperties(qualified_name="col", external_type_guid="type-guid"),
    )
    assert server.last.url.path == f"{EDIT}/schemas/tables/table-guid/columns"
    assert server.last_body()["externalTypeGUID"] == "type-guid"


def test_primary_key(client, server) -> None:
    client.set_primary_key_on_column(
        "erinoverview", DM_GUID, DM_NAME, "col-guid", DatabasePrimaryKeyProperties(name="pk_patient")
    )
    assert server.last.url.path == f"{EDIT}/schemas/tables/columns/col-guid/primary-key"
    assert server.last_body() == {"class": "DatabasePrimaryKeyProperties", "name": "pk_patient"}

    client.remove_primary_key_from_column("erinoverview", DM_GUID, DM_NAME, "col-guid")
    assert server.last.url.path == f"{EDIT}/schemas/tables/columns/col-guid/primary-key/delete"


def test_foreign_key_url_names_foreign_column_first(client, server) -> None:
    client.add_foreign_key_relationship(
        "erinoverview",
        DM_GUID,
        DM_NAME,
        primary_key_column_guid="pk-col",
        foreign_key_column_guid="fk-col",
        foreign_key_properties=DatabaseForeignKeyProperties(name="fk_patient", confidence=100),
    )
    assert server.last.url.path == f"{EDIT}/schemas/tables/columns/fk-col/foreign-key/pk-col"
    assert server.last_body()["confidence"] == 100

    client.remove_foreign_key_relationship("erinoverview", DM_GUID, DM_NAME, "pk-col", "fk-col")
    assert server.last.url.path == f"{EDIT}/schemas/tables/columns/fk-col/foreign-key/pk-col/delete"


def test_find_databases_is_a_get_with_search_string_in_path(client, server) -> None:
    server.reply(
        {
            "elementList": [
                {"elementHeader": {"guid": "db-1"}, "databaseProperties": {"qualifiedName": "Database:Clinical"}}
            ]
        }
    )

    found = client.find_databases("erinoverview", "Clinical", start_from=0, page_size=10)

    assert server.last.method == "GET"
    assert server.last.url.path == f"{RETRIEVE}/by-search-string/Clinical"
    assert server.last.url.params["pageSize"] == "10"
    assert found[0].properties.qualified_name == "Database:Clinical"


def test_databases_for_manager(client, server) -> None:
    client.get_databases_for_database_manager("erinoverview", DM_GUID, DM_NAME, start_from=5, page_size=5)

    assert server.last.url.path == EDIT
    assert server.last.url.params["startFrom"] == "5"


def test_tables_for_schema_and_column_lookup(client, server) -> None:
    client.get_tables_for_database_schema("erinoverview", "schema-guid")
    assert server.last.url.path == f"{RETRIEVE}/schemas/schema-guid/tables"

    server.reply({"element": {"elementHeader": {"guid": "col-guid"}, "databaseColumnProperties": {"dataType": "INT"}}})
    column = client.get_database_column_by_guid("erinoverview", "col-guid")
    assert server.last.url.path == f"{RETRIEVE}/schemas/tables/columns/col-guid"
    assert column.properties.data_type == "INT"


def test_database_create_and_update_need_qualified_name(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_database("erinoverview", DM_GUID, DM_NAME, DatabaseProperties(database_type="DB2"))
    assert excinfo.value.parameter_name == "qualifiedName"

    with pytest.raises(InvalidParameterError):
        client.update_database("erinoverview", DM_GUID, DM_NAME, "db-guid", DatabaseProperties(display_name="x"))
    assert server.requests == []


def test_schema_table_and_column_may_leave_qualified_name_to_server(client, server) -> None:
    server.reply({"guid": "schema-guid"})
    guid = client.create_database_schema(
        "erinoverview", DM_GUID, DM_NAME, "db-guid", DatabaseSchemaProperties(display_name="main")
    )
    assert guid == "schema-guid"
    assert server.last.url.path == f"{EDIT}/db-guid/schemas"

    client.create_database_table(
        "erinoverview", DM_GUID, DM_NAME, "schema-guid", DatabaseTableProperties(display_name="patients")
    )
    assert server.last.url.path == f"{EDIT}/schemas/schema-guid/tables"

    client.create_database_column(
        "erinoverview", DM_GUID, DM_NAME, "tbl-guid", DatabaseColumnProperties(data_type="INT")
    )
    assert server.last.url.path == f"{EDIT}/schemas/tables/tbl-guid/columns"
    assert server.last_body() == {"class": "DatabaseColumnProperties", "dataType": "INT"}
    assert len(server.requests) == 3


def test_updates_below_database_do_not_need_qualified_name(client, server) -> None:
    client.update_database_schema(
        "erinoverview", DM_GUID, DM_NAME, "schema-guid", DatabaseSchemaProperties(description="renamed")
    )
    assert server.last.url.path == f"{EDIT}/schemas/schema-guid"

    client.update_database_table(
        "erinoverview", DM_GUID, DM_NAME, "tbl-guid", DatabaseTableProperties(description="renamed")
    )
    assert server.last.url.path == f"{EDIT}/schemas/tables/tbl-guid"

    client.update_database_column(
        "erinoverview", DM_GUID, DM_NAME, "col-guid", DatabaseColumnProperties(is_nullable=False)
    )
    assert server.last.url.path == f"{EDIT}/schemas/tables/columns/col-guid"
    assert server.last_body() == {"class": "DatabaseColumnProperties", "isNullable": False}


def test_column_create_reports_user_before_table(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_database_column("", DM_GUID, DM_NAME, None, DatabaseColumnProperties(data_type="INT"))
    assert excinfo.value.parameter_name == "userId"

    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_database_column(
            "erinoverview", DM_GUID, DM_NAME, None, DatabaseColumnProperties(data_type="INT")
        )
    assert excinfo.value.parameter_name == "databaseTableGUID"
    assert server.requests == []


def test_schema_publish_and_withdraw(client, server) -> None:
    client.publish_database_schema("erinoverview", "schema-guid")
    assert server.last.url.path == f"{RETRIEVE}/schemas/schema-guid/publish"
    assert server.last_body() is None

    client.withdraw_database_schema("erinoverview", "schema-guid")
    assert server.last.url.path == f"{RETRIEVE}/schemas/schema-guid/withdraw"


def test_database_views(client, server) -> None:
    server.reply({"guid": "view-guid"})
    guid = client.create_database_view(
        "erinoverview",
        DM_GUID,
        DM_NAME,
        "schema-guid",
        DatabaseViewProperties(display_name="recent_patients", formula="SELECT * FROM patients"),
    )
    assert guid == "view-guid"
    assert server.last.url.path == f"{EDIT}/schemas/schema-guid/tables/views"
    assert server.last_body()["formula"] == "SELECT * FROM patients"

    client.create_database_view_from_template(
        "erinoverview", DM_GUID, DM_NAME, "tmpl-guid", "schema-guid", TemplateProperties(qualified_name="View:copy")
    )
    assert server.last.url.path == f"{EDIT}/schemas/schema-guid/tables/views/from-template/tmpl-guid"

    client.update_database_view(
        "erinoverview", DM_GUID, DM_NAME, "view-guid", DatabaseViewProperties(description="last 30 days")
    )
    assert server.last.url.path == f"{EDIT}/schemas/tables/views/view-guid"

    client.remove_database_view("erinoverview", DM_GUID, DM_NAME, "view-guid", "View:recent")
    assert server.last.url.path == f"{EDIT}/schemas/tables/views/view-guid/View:recent/delete"


def test_view_retrieval(client, server) -> None:
    client.find_database_views("erinoverview", "recent")
    assert server.last.method == "GET"
    assert server.last.url.path == f"{RETRIEVE}/schemas/tables/views/by-search-string/recent"

    client.get_views_for_database_schema("erinoverview", "schema-guid")
    assert server.last.url.path == f"{RETRIEVE}/schemas/schema-guid/tables/views"

    client.get_database_views_by_name("erinoverview", "View:recent")
    assert server.last.url.path == f"{RETRIEVE}/schemas/tables/views/by-name/View:recent"

    server.reply(
        {
            "element": {
                "elementHeader": {"guid": "view-guid"},
                "databaseViewProperties": {"qualifiedName": "View:recent", "formula": "SELECT 1"},
            }
        }
    )
    view = client.get_database_view_by_guid("erinoverview", "view-guid")
    assert server.last.url.path == f"{RETRIEVE}/schemas/tables/views/view-guid"
    assert view.guid == "view-guid"
    assert view.properties.formula == "SELECT 1"
