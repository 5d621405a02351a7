# Data Manager Client
# File: tests/test_rest_client.py
# Version: v1

"""REST invoker behaviour against a scripted server."""

import base64

import httpx
import pytest

from data_manager_client.auth import PlatformCredentials
from data_manager_client.errors import (
    InvalidParameterError,
    PropertyServerError,
    UserNotAuthorizedError,
)
from data_manager_client.models import EndpointElement
from data_manager_client.rest.requests import NameRequestBody
from data_manager_client.rest_client import DataManagerRESTClient

from conftest import PLATFORM, SERVER


def _client(server, credentials=None) -> DataManagerRESTClient:
    return DataManagerRESTClient(
        server_name=SERVER,
        platform_url_root=PLATFORM + "/",
        credentials=credentials,
        transport=server.transport,
    )


def test_build_url_encodes_parameters(server) -> None:
    client = _client(server)

    url = client.build_url("/servers/{0}/items/{1}?flag={2}&size={3}", SERVER, "a b/c", True, 25)

    assert url == f"{PLATFORM}/servers/{SERVER}/items/a%20b%2Fc?flag=true&size=25"


def test_guid_post_sends_body_and_basic_auth(server) -> None:
    server.reply({"relatedHTTPCode": 200, "guid": "new-guid"})
    client = _client(server, PlatformCredentials(user_id="garygeeke", password="secret"))

    response = client.call_guid_post("create", "/servers/{0}/things", NameRequestBody("x"), SERVER)

    assert response.guid == "new-guid"
    assert server.last.method == "POST"
    assert server.last_body() == {"class": "NameRequestBody", "name": "x", "namePropertyName": "name"}
    expected = base64.b64encode(b"garygeeke:secret").decode("ascii")
    assert server.last.headers["Authorization"] == f"Basic {expected}"


def test_no_authorization_header_without_credentials(server) -> None:
    client = _client(server)
    client.call_get("get", "/servers/{0}/things", SERVER)
    assert "Authorization" not in server.last.headers


def test_http_403_maps_to_user_not_authorized(server) -> None:
    server.reply({}, status=403)
    client = _client(server)

    with pytest.raises(UserNotAuthorizedError) as excinfo:
        client.call_get("get_thing", "/servers/{0}/things", SERVER)
    assert excinfo.value.http_code == 403
    assert excinfo.value.reporting_method == "get_thing"


def test_http_500_maps_to_property_server_error(server) -> None:
    server.reply_raw(b"Internal Server Error", status=500)
    client = _client(server)

    with pytest.raises(PropertyServerError) as excinfo:
        client.call_void_post("remove", "/servers/{0}/things/delete", None, SERVER)
    assert excinfo.value.http_code == 500


def test_exception_envelope_maps_by_class_name(server) -> None:
    server.reply(
        {
            "relatedHTTPCode": 400,
            "exceptionClassName": "org.odpi.openmetadata.frameworks.connectors.ffdc.InvalidParameterException",
            "exceptionErrorMessage": "OMAG-REPOSITORY-HANDLER-400-001 The qualified name is already in use",
            "exceptionErrorMessageId": "OMAG-REPOSITORY-HANDLER-400-001",
            "exceptionUserAction": "Choose a different name",
            "exceptionProperties": {"parameterName": "qualifiedName"},
        }
    )
    client = _client(server)

    with pytest.raises(InvalidParameterError) as excinfo:
        client.call_guid_post("create", "/servers/{0}/things", None, SERVER)

    err = excinfo.value
    assert err.report_error_code == "OMAG-REPOSITORY-HANDLER-400-001"
    assert err.parameter_name == "qualifiedName"
    assert err.user_action == "Choose a different name"


def test_related_http_code_is_checked_on_200(server) -> None:
    server.reply({"relatedHTTPCode": 401, "exceptionProperties": {"userId": "erinoverview"}})
    client = _client(server)

    with pytest.raises(UserNotAuthorizedError) as excinfo:
        client.call_get("get_thing", "/servers/{0}/things", SERVER)
    assert excinfo.value.user_id == "erinoverview"


def test_server_exception_class_wins_over_status(server) -> None:
    server.reply(
        {
            "relatedHTTPCode": 500,
            "exceptionClassName": "UserNotAuthorizedException",
            "exceptionErrorMessage": "no",
        }
    )
    with pytest.raises(UserNotAuthorizedError):
        _client(server).call_get("get_thing", "/servers/{0}/things", SERVER)


def test_transport_failure_maps_to_property_server_error() -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = DataManagerRESTClient(SERVER, PLATFORM, transport=httpx.MockTransport(refuse))

    with pytest.raises(PropertyServerError) as excinfo:
        client.call_get("get_thing", "/servers/{0}/things", SERVER)

    assert excinfo.value.report_error_code == "OMAG-COMMON-503-001"
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_http_errors_outside_the_transport_family_are_mapped() -> None:
    def gateway(request: httpx.Request) -> httpx.Response:
        raise httpx.HTTPStatusError("bad gateway", request=request, response=httpx.Response(502, request=request))

    client = DataManagerRESTClient(SERVER, PLATFORM, transport=httpx.MockTransport(gateway))

    with pytest.raises(PropertyServerError) as excinfo:
        client.call_get("get_thing", "/servers/{0}/things", SERVER)

    assert excinfo.value.report_error_code == "OMAG-COMMON-503-001"
    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


def test_invalid_url_maps_to_property_server_error() -> None:
    def reject(request: httpx.Request) -> httpx.Response:
        raise httpx.InvalidURL("Invalid port: '99999'")

    client = DataManagerRESTClient(SERVER, PLATFORM, transport=httpx.MockTransport(reject))

    with pytest.raises(PropertyServerError) as excinfo:
        client.call_void_post("remove_thing", "/servers/{0}/things/delete", None, SERVER)

    assert isinstance(excinfo.value.__cause__, httpx.InvalidURL)


def test_non_json_success_is_a_property_server_error(server) -> None:
    server.reply_raw(b"<html>proxy login</html>")
    with pytest.raises(PropertyServerError):
        _client(server).call_get("get_thing", "/servers/{0}/things", SERVER)


def test_empty_success_body_is_treated_as_void(server) -> None:
    server.reply_raw(b"")
    response = _client(server).call_void_post("remove", "/servers/{0}/things/delete", None, SERVER)
    assert response.related_http_code == 200


def test_element_lists_accept_either_key(server) -> None:
    server.reply({"elementList": [{"elementHeader": {"guid": "ep-1"}}]})
    server.reply({"elements": [{"elementHeader": {"guid": "ep-2"}}, None]})
    server.reply({"relatedHTTPCode": 200})
    client = _client(server)

    first = client.call_elements_get("find", EndpointElement, "/servers/{0}/endpoints", SERVER)
    second = client.call_elements_get("find", EndpointElement, "/servers/{0}/endpoints", SERVER)
    third = client.call_elements_get("find", EndpointElement, "/servers/{0}/endpoints", SERVER)

    assert [e.guid for e in first] == ["ep-1"]
    assert [e.guid for e in second] == ["ep-2"]
    assert third == []


def test_missing_element_is_none(server) -> None:
    server.reply({"relatedHTTPCode": 200})
    assert _client(server).call_element_get("get", EndpointElement, "/servers/{0}/endpoints/x", SERVER) is None
