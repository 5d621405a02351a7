# Data Manager Client
# File: tests/test_display_application.py
# Version: v1

import pytest

from conftest import PREFIX
from data_manager_client.clients import DisplayApplicationClient
from data_manager_client.errors import InvalidParameterError
from data_manager_client.models import (
    DataContainerProperties,
    FormProperties,
    QueryDataFieldProperties,
    QueryProperties,
    ReportProperties,
    TemplateProperties,
)

APP_GUID = "app-guid"
APP_NAME = "CocoPharma.Dashboards"
BASE = f"{PREFIX}/erinoverview"


@pytest.fixture
def client(config, server) -> DisplayApplicationClient:
    return DisplayApplicationClient(config, transport=server.transport)


def test_create_report(client, server) -> None:
    server.reply({"guid": "report-guid"})

    guid = client.create_report(
        "erinoverview",
        APP_GUID,
        APP_NAME,
        True,
        ReportProperties(qualified_name="Report:weekly", author="tanyatidie", url="https://bi/weekly"),
    )

    assert guid == "report-guid"
    assert server.last.url.path == f"{BASE}/reports"
    assert server.last.url.params["applicationIsHome"] == "true"
    assert server.last_body() == {
        "class": "ReportRequestBody",
        "qualifiedName": "Report:weekly",
        "author": "tanyatidie",
        "url": "https://bi/weekly",
        "externalSourceGUID": APP_GUID,
        "externalSourceName": APP_NAME,
    }


def test_create_form_requires_qualified_name(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_form("erinoverview", APP_GUID, APP_NAME, True, FormProperties(display_name="Intake"))

    assert excinfo.value.parameter_name == "qualifiedName"
    assert server.requests == []


def test_merge_update_skips_qualified_name(client, server) -> None:
    client.update_form("erinoverview", APP_GUID, APP_NAME, "form-guid", True, FormProperties(description="v2"))
    assert server.last.url.path == f"{BASE}/forms/form-guid"
    assert server.last.url.params["isMergeUpdate"] == "true"

    with pytest.raises(InvalidParameterError):
        client.update_form("erinoverview", APP_GUID, APP_NAME, "form-guid", False, FormProperties(description="v2"))
    assert len(server.requests) == 1


def test_query_lifecycle_paths(client, server) -> None:
    client.create_query_from_template(
        "erinoverview", APP_GUID, APP_NAME, False, "tmpl-guid", TemplateProperties(qualified_name="Query:copy")
    )
    assert server.last.url.path == f"{BASE}/queries/from-template/tmpl-guid"
    assert server.last.url.params["applicationIsHome"] == "false"

    client.publish_query("erinoverview", "query-guid")
    assert server.last.url.path == f"{BASE}/queries/query-guid/publish"

    client.withdraw_query("erinoverview", "query-guid")
    assert server.last.url.path == f"{BASE}/queries/query-guid/withdraw"

    client.remove_query("erinoverview", APP_GUID, APP_NAME, "query-guid", "Query:recent")
    assert server.last.url.path == f"{BASE}/queries/query-guid/Query:recent/delete"
    assert server.last_body()["externalSourceName"] == APP_NAME


def test_searches_post_their_value(client, server) -> None:
    server.reply(
        {"elementList": [{"elementHeader": {"guid": "q-1"}, "queryProperties": {"qualifiedName": "Query:recent"}}]}
    )
    found = client.find_queries("erinoverview", "recent", page_size=20)
    assert server.last.method == "POST"
    assert server.last.url.path == f"{BASE}/queries/by-search-string"
    assert server.last_body()["searchString"] == "recent"
    assert isinstance(found[0].properties, QueryProperties)

    client.get_forms_by_name("erinoverview", "Form:intake")
    assert server.last.url.path == f"{BASE}/forms/by-name"
    assert server.last_body() == {"class": "NameRequestBody", "name": "Form:intake", "namePropertyName": "name"}


def test_assets_for_application(client, server) -> None:
    client.get_reports_for_application("erinoverview", APP_GUID, APP_NAME, start_from=0, page_size=5)

    assert server.last.method == "GET"
    assert server.last.url.path == f"{BASE}/reports/applications/{APP_GUID}/{APP_NAME}"
    assert server.last.url.params["pageSize"] == "5"

    with pytest.raises(InvalidParameterError) as excinfo:
        client.get_forms_for_application("erinoverview", "", APP_NAME)
    assert excinfo.value.parameter_name == "applicationGUID"


def test_data_containers(client, server) -> None:
    client.create_data_container(
        "erinoverview", APP_GUID, APP_NAME, True, "report-guid", DataContainerProperties(qualified_name="Report:grid")
    )
    assert server.last.url.path == f"{BASE}/schemas/elements/report-guid/data-containers"

    client.create_data_container_from_template(
        "erinoverview", APP_GUID, APP_NAME, True, "tmpl-guid", "report-guid", TemplateProperties(qualified_name="c")
    )
    assert server.last.url.path == f"{BASE}/schemas/elements/report-guid/data-containers/from-template/tmpl-guid"

    client.update_data_container(
        "erinoverview", APP_GUID, APP_NAME, "dc-guid", True, DataContainerProperties(display_name="Grid")
    )
    assert server.last.url.path == f"{BASE}/schemas/data-containers/dc-guid"

    client.remove_data_container("erinoverview", APP_GUID, APP_NAME, "dc-guid")
    assert server.last.url.path == f"{BASE}/schemas/data-containers/dc-guid/delete"


def test_data_container_retrieval(client, server) -> None:
    client.find_data_containers("erinoverview", "grid")
    assert server.last.url.path == f"{BASE}/schemas/data-containers/types/DataContainer/by-search-string"

    client.get_data_containers_by_name("erinoverview", "Report:grid", type_name="TabularDataContainer")
    assert server.last.url.path == f"{BASE}/schemas/data-containers/types/TabularDataContainer/by-name"

    client.get_data_containers_for_element("erinoverview", "report-guid", start_from=3, page_size=7)
    assert server.last.url.path == f"{BASE}/schemas/data-containers/by-parent-element/report-guid"
    assert server.last.url.params["startFrom"] == "3"
    assert server.last.url.params["pageSize"] == "7"

    client.get_data_container_by_guid("erinoverview", "dc-guid")
    assert server.last.url.path == f"{BASE}/schemas/data-containers/dc-guid"

    server.reply({"element": {"guid": "report-guid"}})
    parent = client.get_data_container_parent("erinoverview", "dc-guid")
    assert server.last.url.path == f"{BASE}/schemas/data-containers/dc-guid/parent"
    assert parent.guid == "report-guid"


def test_data_field_is_a_display_data_field(client, server) -> None:
    client.create_data_field(
        "erinoverview", APP_GUID, APP_NAME, True, "dc-guid", QueryDataFieldProperties(qualified_name="Report:grid.total")
    )

    assert server.last.url.path == f"{BASE}/schema-attributes/attached-to/dc-guid"
    body = server.last_body()
    assert body["class"] == "QueryDataFieldRequestBody"
    assert body["typeName"] == "DisplayDataField"
    assert body["externalSourceGUID"] == APP_GUID


def test_data_field_not_anchored_when_application_is_not_home(client, server) -> None:
    client.create_data_field(
        "erinoverview", APP_GUID, APP_NAME, False, "dc-guid", QueryDataFieldProperties(qualified_name="f")
    )

    body = server.last_body()
    assert "externalSourceGUID" not in body
    assert "externalSourceName" not in body


def test_data_field_checks_parent_before_properties(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_data_field("erinoverview", APP_GUID, APP_NAME, True, "", None)

    assert excinfo.value.parameter_name == "parentElementGUID"
    assert server.requests == []


def test_data_field_lookups_use_schema_attribute_paths(client, server) -> None:
    client.find_data_fields("erinoverview", "total")
    assert server.last.url.path == f"{BASE}/schema-attributes/types/DisplayDataField/by-search-string"

    client.get_child_data_fields("erinoverview", "dc-guid")
    assert server.last.url.path == f"{BASE}/schema-elements/dc-guid/nested-attributes"

    client.get_data_field_by_guid("erinoverview", "field-guid")
    assert server.last.url.path == f"{BASE}/schema-attributes/field-guid"

    client.remove_data_field("erinoverview", APP_GUID, APP_NAME, "field-guid")
    assert server.last.url.path == f"{BASE}/schema-attributes/field-guid/delete"
