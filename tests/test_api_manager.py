# Data Manager Client
# File: tests/test_api_manager.py
# Version: v1

import pytest

from conftest import PREFIX
from data_manager_client.clients import APIManagerClient
from data_manager_client.errors import InvalidParameterError
from data_manager_client.models import APIOperationProperties, APIProperties, TemplateProperties

MGR_GUID = "apimgr-guid"
MGR_NAME = "CocoPharma.Gateway"
APIS = f"{PREFIX}/erinoverview/apis"


@pytest.fixture
def client(config, server) -> APIManagerClient:
    return APIManagerClient(config, transport=server.transport)


def test_create_api_carries_api_manager_as_source(client, server) -> None:
    server.reply({"guid": "api-guid"})

    guid = client.create_api(
        "erinoverview", MGR_GUID, MGR_NAME, True, APIProperties(qualified_name="API:patients", owner="tanyatidie")
    )

    assert guid == "api-guid"
    assert server.last.url.path == APIS
    assert server.last.url.params["apiManagerIsHome"] == "true"
    assert server.last_body() == {
        "class": "APIRequestBody",
        "qualifiedName": "API:patients",
        "owner": "tanyatidie",
        "externalSourceGUID": MGR_GUID,
        "externalSourceName": MGR_NAME,
    }


def test_api_from_template(client, server) -> None:
    client.create_api_from_template(
        "erinoverview", MGR_GUID, MGR_NAME, False, "tmpl-guid", TemplateProperties(qualified_name="API:copy")
    )

    assert server.last.url.path == f"{APIS}/from-template/tmpl-guid"
    assert server.last.url.params["apiManagerIsHome"] == "false"


def test_api_update_needs_qualified_name_even_when_merging(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.update_api("erinoverview", MGR_GUID, MGR_NAME, "api-guid", True, APIProperties(description="v2"))

    assert excinfo.value.parameter_name == "qualifiedName"
    assert server.requests == []

    client.update_api(
        "erinoverview", MGR_GUID, MGR_NAME, "api-guid", True, APIProperties(qualified_name="API:patients")
    )
    assert server.last.url.path == f"{APIS}/api-guid"
    assert server.last.url.params["isMergeUpdate"] == "true"


def test_publish_withdraw_and_remove(client, server) -> None:
    client.publish_api("erinoverview", "api-guid")
    assert server.last.url.path == f"{APIS}/api-guid/publish"

    client.withdraw_api("erinoverview", "api-guid")
    assert server.last.url.path == f"{APIS}/api-guid/withdraw"

    client.remove_api("erinoverview", MGR_GUID, MGR_NAME, "api-guid", "API:patients")
    assert server.last.url.path == f"{APIS}/api-guid/API:patients/delete"
    assert server.last_body() == {
        "class": "ExternalSourceRequestBody",
        "externalSourceGUID": MGR_GUID,
        "externalSourceName": MGR_NAME,
    }


def test_remove_api_checks_api_manager(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.remove_api("erinoverview", MGR_GUID, "", "api-guid", "API:patients")

    assert excinfo.value.parameter_name == "apiManagerName"
    assert server.requests == []


def test_api_retrieval(client, server) -> None:
    server.reply(
        {"elementList": [{"elementHeader": {"guid": "api-1"}, "apiProperties": {"qualifiedName": "API:patients"}}]}
    )
    found = client.find_apis("erinoverview", "patients", page_size=10)
    assert server.last.method == "GET"
    assert server.last.url.path == f"{APIS}/by-search-string/patients"
    assert found[0].properties.qualified_name == "API:patients"

    client.get_apis_by_name("erinoverview", "API:patients")
    assert server.last.url.path == f"{APIS}/by-name/API:patients"

    client.get_apis_for_api_manager("erinoverview", MGR_GUID, MGR_NAME, start_from=10, page_size=10)
    assert server.last.url.path == f"{APIS}/api-managers/{MGR_GUID}/{MGR_NAME}"
    assert server.last.url.params["startFrom"] == "10"

    client.get_api_by_guid("erinoverview", "api-guid")
    assert server.last.url.path == f"{APIS}/api-guid"


def test_api_operation_does_not_need_qualified_name(client, server) -> None:
    server.reply({"guid": "op-guid"})

    guid = client.create_api_operation(
        "erinoverview", MGR_GUID, MGR_NAME, True, "api-guid", APIOperationProperties(path="/patients", command="GET")
    )

    assert guid == "op-guid"
    assert server.last.url.path == f"{APIS}/api-guid/api-operations"
    body = server.last_body()
    assert body["class"] == "APIOperationRequestBody"
    assert body["command"] == "GET"


def test_api_operation_from_template_orders_api_before_template(client, server) -> None:
    client.create_api_operation_from_template(
        "erinoverview", MGR_GUID, MGR_NAME, True, "tmpl-guid", "api-guid", TemplateProperties(qualified_name="Op:copy")
    )

    assert server.last.url.path == f"{APIS}/api-guid/api-operations/from-template/tmpl-guid"


def test_api_operation_maintenance_and_lookup(client, server) -> None:
    client.update_api_operation(
        "erinoverview", MGR_GUID, MGR_NAME, "op-guid", False, APIOperationProperties(command="POST")
    )
    assert server.last.url.path == f"{APIS}/api-operations/op-guid"
    assert server.last.url.params["isMergeUpdate"] == "false"

    client.remove_api_operation("erinoverview", MGR_GUID, MGR_NAME, "op-guid", "Op:list")
    assert server.last.url.path == f"{APIS}/api-operations/op-guid/Op:list/delete"

    client.find_api_operations("erinoverview", "list")
    assert server.last.url.path == f"{APIS}/api-operations/by-search-string/list"

    client.get_operations_for_api("erinoverview", "api-guid")
    assert server.last.url.path == f"{APIS}/api-guid/api-operations"

    client.get_api_operations_by_name("erinoverview", "Op:list")
    assert server.last.url.path == f"{APIS}/api-operations/by-name/Op:list"

    server.reply({"element": {"elementHeader": {"guid": "op-guid"}, "apiOperationProperties": {"path": "/p"}}})
    operation = client.get_api_operation_by_guid("erinoverview", "op-guid")
    assert server.last.url.path == f"{APIS}/api-operations/op-guid"
    assert operation.properties.path == "/p"


def test_parameters_default_to_api_parameter_type(client, server) -> None:
    client.find_schema_attributes("erinoverview", "patientId")

    assert server.last.url.path == f"{PREFIX}/erinoverview/schema-attributes/types/APIParameter/by-search-string"
