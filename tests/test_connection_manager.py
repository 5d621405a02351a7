# Data Manager Client
# File: tests/test_connection_manager.py
# Version: v1

import dataclasses

import pytest

from conftest import PREFIX
from data_manager_client.clients import ConnectionManagerClient
from data_manager_client.errors import InvalidParameterError
from data_manager_client.models import ConnectionProperties, EndpointProperties, TemplateProperties


@pytest.fixture
def client(config, server) -> ConnectionManagerClient:
    return ConnectionManagerClient(config, transport=server.transport)


def test_constructor_requires_server_name(config) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        ConnectionManagerClient(dataclasses.replace(config, server_name=""))
    assert excinfo.value.parameter_name == "serverName"
    assert excinfo.value.reporting_method == "Client Constructor"


def test_create_connection_posts_properties_with_provenance(client, server) -> None:
    server.reply({"relatedHTTPCode": 200, "guid": "conn-guid"})

    guid = client.create_connection(
        "garygeeke",
        ConnectionProperties(qualified_name="Conn:orders", display_name="Orders"),
        external_source_guid="dm-guid",
        external_source_name="OrdersDB",
    )

    assert guid == "conn-guid"
    assert server.last.method == "POST"
    assert server.last.url.path == f"{PREFIX}/garygeeke/connections"
    assert server.last_body() == {
        "class": "ConnectionRequestBody",
        "qualifiedName": "Conn:orders",
        "displayName": "Orders",
        "externalSourceGUID": "dm-guid",
        "externalSourceName": "OrdersDB",
    }


def test_create_connection_requires_qualified_name(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_connection("garygeeke", ConnectionProperties(display_name="Orders"))

    assert excinfo.value.parameter_name == "qualifiedName"
    assert server.requests == []


def test_template_copy_without_template_guid_sends_nothing(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_connection_from_template(
            "garygeeke", None, TemplateProperties(qualified_name="Conn:copy")
        )

    assert excinfo.value.report_error_code == "OMAG-COMMON-400-002"
    assert excinfo.value.parameter_name == "templateGUID"
    assert server.requests == []


def test_create_connection_from_template_path(client, server) -> None:
    server.reply({"guid": "copy-guid"})

    guid = client.create_connection_from_template(
        "garygeeke", "tmpl-guid", TemplateProperties(qualified_name="Conn:copy")
    )

    assert guid == "copy-guid"
    assert server.last.url.path == f"{PREFIX}/garygeeke/connections/from-template/tmpl-guid"
    assert server.last_body()["class"] == "TemplateRequestBody"


def test_merge_update_does_not_need_qualified_name(client, server) -> None:
    client.update_connection("garygeeke", "conn-guid", True, ConnectionProperties(description="new"))

    assert server.last.url.path == f"{PREFIX}/garygeeke/connections/conn-guid"
    assert server.last.url.params["isMergeUpdate"] == "true"

    with pytest.raises(InvalidParameterError):
        client.update_connection("garygeeke", "conn-guid", False, ConnectionProperties(description="new"))
    assert len(server.requests) == 1


def test_find_connections_sends_search_body_and_paging(client, server) -> None:
    server.reply(
        {
            "elements": [
                {
                    "elementHeader": {"guid": "c1"},
                    "connectionProperties": {"qualifiedName": "Conn:orders"},
                }
            ]
        }
    )

    found = client.find_connections("garygeeke", ".*orders.*", start_from=10, page_size=25)

    assert [c.properties.qualified_name for c in found] == ["Conn:orders"]
    assert server.last.url.path == f"{PREFIX}/garygeeke/connections/by-search-string"
    assert server.last.url.params["startFrom"] == "10"
    assert server.last.url.params["pageSize"] == "25"
    assert server.last_body() == {
        "class": "SearchStringRequestBody",
        "searchString": ".*orders.*",
        "searchStringParameterName": "searchString",
    }


def test_find_connections_uses_configured_maximum_for_default_page(config, server) -> None:
    client = ConnectionManagerClient(dataclasses.replace(config, max_page_size=50), transport=server.transport)

    client.find_connections("garygeeke", ".*")
    assert server.last.url.params["pageSize"] == "50"

    with pytest.raises(InvalidParameterError):
        client.find_connections("garygeeke", ".*", page_size=51)


def test_embedded_connection_body_and_removal_path(client, server) -> None:
    client.setup_embedded_connection(
        "garygeeke", "virt-guid", "emb-guid", position=2, display_name="Primary", arguments={"a": 1}
    )
    assert server.last.url.path == f"{PREFIX}/garygeeke/connections/virt-guid/embedded-connections/emb-guid"
    assert server.last_body() == {
        "class": "EmbeddedConnectionRequestBody",
        "position": 2,
        "displayName": "Primary",
        "arguments": {"a": 1},
    }

    client.clear_embedded_connection("garygeeke", "virt-guid", "emb-guid")
    assert server.last.url.path == (
        f"{PREFIX}/garygeeke/connections/virt-guid/embedded-connections/emb-guid/delete"
    )
    assert server.last_body() == {"class": "RelationshipRequestBody"}


def test_asset_connection_link(client, server) -> None:
    client.setup_asset_connection("garygeeke", "asset-guid", "conn-guid", external_source_guid="src")

    assert server.last.url.path == f"{PREFIX}/garygeeke/assets/asset-guid/connections/conn-guid"
    assert server.last_body()["externalSourceGUID"] == "src"


def test_get_connection_by_guid(client, server) -> None:
    server.reply(
        {
            "element": {
                "elementHeader": {"guid": "conn-guid", "type": {"typeName": "Connection"}},
                "connectionProperties": {"qualifiedName": "Conn:orders"},
                "endpoint": {"guid": "ep-guid"},
            }
        }
    )

    element = client.get_connection_by_guid("garygeeke", "conn-guid")

    assert server.last.method == "GET"
    assert server.last.url.path == f"{PREFIX}/garygeeke/connections/conn-guid"
    assert element.guid == "conn-guid"
    assert element.endpoint.guid == "ep-guid"


def test_endpoint_from_template_carries_network_address(client, server) -> None:
    client.create_endpoint_from_template(
        "garygeeke", "db.example.com:5432", "tmpl-guid", TemplateProperties(qualified_name="Endpoint:copy")
    )

    assert server.last.url.path == (
        f"{PREFIX}/garygeeke/endpoints/network-address/db.example.com:5432/from-template/tmpl-guid"
    )


def test_create_endpoint_rejects_missing_properties(client) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_endpoint("garygeeke", None)
    assert excinfo.value.report_error_code == "OMAG-COMMON-400-007"

    with pytest.raises(InvalidParameterError):
        client.create_endpoint("", EndpointProperties(qualified_name="Endpoint:x"))
