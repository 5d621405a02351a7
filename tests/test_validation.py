# Data Manager Client
# File: tests/test_validation.py
# Version: v1

import pytest

from data_manager_client.errors import InvalidParameterError
from data_manager_client.validation import InvalidParameterHandler


def test_blank_user_id_is_rejected() -> None:
    handler = InvalidParameterHandler()

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_user_id("  ", "create_connection")

    err = excinfo.value
    assert err.report_error_code == "OMAG-COMMON-400-001"
    assert err.parameter_name == "userId"
    assert err.reporting_method == "create_connection"
    assert err.http_code == 400


@pytest.mark.parametrize("guid", [None, ""])
def test_missing_guid_names_the_parameter(guid) -> None:
    handler = InvalidParameterHandler()

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_guid(guid, "templateGUID", "create_connection_from_template")

    assert excinfo.value.parameter_name == "templateGUID"
    assert "templateGUID" in excinfo.value.error_message


def test_search_string_must_be_a_regex() -> None:
    handler = InvalidParameterHandler()
    handler.validate_search_string(".*sales.*", "searchString", "find_connections")

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_search_string("[unclosed", "searchString", "find_connections")
    assert excinfo.value.report_error_code == "OMAG-COMMON-400-006"

    with pytest.raises(InvalidParameterError):
        handler.validate_search_string(None, "searchString", "find_connections")


def test_null_object_is_rejected() -> None:
    handler = InvalidParameterHandler()
    handler.validate_object({}, "connectionProperties", "create_connection")

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_object(None, "connectionProperties", "create_connection")
    assert excinfo.value.report_error_code == "OMAG-COMMON-400-007"


def test_platform_location_requires_url_and_server() -> None:
    handler = InvalidParameterHandler()
    handler.validate_platform_url("https://localhost:9443", "cocoMDS1", "Client Constructor")

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_platform_url(None, "cocoMDS1", "Client Constructor")
    assert excinfo.value.parameter_name == "platformURLRoot"

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_platform_url("https://localhost:9443", "", "Client Constructor")
    assert excinfo.value.parameter_name == "serverName"


def test_paging_rejects_negative_values() -> None:
    handler = InvalidParameterHandler()

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_paging(-1, 10, "find_connections")
    assert excinfo.value.report_error_code == "OMAG-COMMON-400-013"

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_paging(0, -5, "find_connections")
    assert excinfo.value.report_error_code == "OMAG-COMMON-400-011"


def test_paging_without_maximum_passes_page_size_through() -> None:
    handler = InvalidParameterHandler()
    assert handler.validate_paging(0, 0, "find_connections") == 0
    assert handler.validate_paging(20, 5000, "find_connections") == 5000


def test_paging_with_maximum() -> None:
    handler = InvalidParameterHandler(max_page_size=100)

    assert handler.validate_paging(0, 0, "find_connections") == 100
    assert handler.validate_paging(0, 40, "find_connections") == 40
    assert handler.validate_paging(0, 100, "find_connections") == 100

    with pytest.raises(InvalidParameterError) as excinfo:
        handler.validate_paging(0, 101, "find_connections")
    assert excinfo.value.report_error_code == "OMAG-COMMON-400-012"
    assert "101" in excinfo.value.error_message


def test_paging_clamps_when_configured() -> None:
    handler = InvalidParameterHandler(max_page_size=100, clamp_page_size=True)
    assert handler.validate_paging(0, 500, "find_connections") == 100
