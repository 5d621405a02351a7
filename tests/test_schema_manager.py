# Data Manager Client
# File: tests/test_schema_manager.py
# Version: v1

import pytest

from conftest import PREFIX
from data_manager_client.clients import SchemaManagerClient
from data_manager_client.errors import InvalidParameterError
from data_manager_client.models import (
    DerivedSchemaTypeQueryTargetProperties,
    MapSchemaTypeProperties,
    PrimitiveSchemaTypeProperties,
    SchemaAttributeProperties,
    SchemaTypeChoiceProperties,
)

BASE = f"{PREFIX}/peterprofile"


@pytest.fixture
def client(config, server) -> SchemaManagerClient:
    return SchemaManagerClient(config, transport=server.transport)


def test_primitive_schema_type(client, server) -> None:
    server.reply({"guid": "st-guid"})

    guid = client.create_primitive_schema_type(
        "peterprofile", PrimitiveSchemaTypeProperties(qualified_name="PatientId", data_type="string")
    )

    assert guid == "st-guid"
    assert server.last.url.path == f"{BASE}/schema-types/primitives"
    assert server.last_body() == {
        "class": "PrimitiveSchemaTypeRequestBody",
        "qualifiedName": "PatientId",
        "dataType": "string",
    }


def test_choice_body_carries_option_guids(client, server) -> None:
    client.create_schema_type_choice(
        "peterprofile", SchemaTypeChoiceProperties(qualified_name="IdOrName"), ["st-1", "st-2"]
    )

    assert server.last.url.path == f"{BASE}/schema-types/choices"
    body = server.last_body()
    assert body["class"] == "SchemaTypeChoiceRequestBody"
    assert body["schemaTypeOptionGUIDs"] == ["st-1", "st-2"]


def test_choice_without_options_is_rejected(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.create_schema_type_choice("peterprofile", SchemaTypeChoiceProperties(qualified_name="x"), None)
    assert excinfo.value.parameter_name == "schemaTypeOptionGUIDs"
    assert server.requests == []


def test_map_schema_type_path(client, server) -> None:
    client.create_map_schema_type(
        "peterprofile", MapSchemaTypeProperties(qualified_name="Lookup"), "from-guid", "to-guid"
    )
    assert server.last.url.path == f"{BASE}/schema-types/maps/from/from-guid/to/to-guid"


def test_find_schema_type_defaults_type_name(client, server) -> None:
    client.find_schema_type("peterprofile", ".*Patient.*")
    assert server.last.url.path == f"{BASE}/schema-types/types/SchemaType/by-search-string"

    client.find_schema_type("peterprofile", ".*Patient.*", type_name="StructSchemaType")
    assert server.last.url.path == f"{BASE}/schema-types/types/StructSchemaType/by-search-string"


def test_schema_type_for_element_defaults_parent_type(client, server) -> None:
    client.get_schema_type_for_element("peterprofile", "asset-guid")
    assert server.last.method == "GET"
    assert server.last.url.path == f"{BASE}/schema-types/types/Referenceable/by-parent-element/asset-guid"


def test_schema_type_parent_is_a_stub(client, server) -> None:
    server.reply({"element": {"guid": "asset-guid", "type": {"typeName": "DataFile"}, "uniqueName": "file:x"}})

    stub = client.get_schema_type_parent("peterprofile", "st-guid")

    assert server.last.url.path == f"{BASE}/schema-types/st-guid/parent"
    assert stub.guid == "asset-guid"
    assert stub.type_name == "DataFile"


def test_schema_attribute_type_name_defaults_without_touching_caller(client, server) -> None:
    props = SchemaAttributeProperties(qualified_name="Patient.id", element_position=0)

    client.create_schema_attribute("peterprofile", "parent-guid", props)

    assert server.last.url.path == f"{BASE}/schema-attributes/attached-to/parent-guid"
    body = server.last_body()
    assert body["typeName"] == "SchemaAttribute"
    assert body["elementPosition"] == 0
    assert props.type_name is None

    client.create_schema_attribute("peterprofile", "parent-guid", props, schema_attribute_type_name="TabularColumn")
    assert server.last_body()["typeName"] == "TabularColumn"


def test_type_name_in_properties_wins_over_argument(client, server) -> None:
    props = SchemaAttributeProperties(qualified_name="Patient.id", type_name="TabularColumn")

    client.create_schema_attribute("peterprofile", "parent-guid", props, schema_attribute_type_name="SchemaAttribute")

    assert server.last_body()["typeName"] == "TabularColumn"


def test_setup_schema_type_path(client, server) -> None:
    client.setup_schema_type("peterprofile", "SchemaAttributeType", "attr-guid", "st-guid")
    assert server.last.url.path == (
        f"{BASE}/schema-attributes/attr-guid/schema-types/st-guid/relationship-type-name/SchemaAttributeType"
    )


def test_calculated_value_needs_formula(client, server) -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        client.setup_calculated_value("peterprofile", "attr-guid", "  ")
    assert excinfo.value.parameter_name == "formula"
    assert server.requests == []

    client.setup_calculated_value("peterprofile", "attr-guid", "a + b", external_source_guid="src")
    assert server.last.url.path == f"{BASE}/schema-elements/attr-guid/calculated-value"
    assert server.last_body() == {
        "class": "FormulaRequestBody",
        "formula": "a + b",
        "externalSourceGUID": "src",
    }


def test_query_target_lifecycle(client, server) -> None:
    client.setup_query_target_relationship(
        "peterprofile", "derived-guid", "target-guid", DerivedSchemaTypeQueryTargetProperties(query_id="q1")
    )
    assert server.last.url.path == f"{BASE}/schema-elements/derived-guid/query-targets/target-guid"
    assert server.last_body()["queryId"] == "q1"

    client.update_query_target_relationship("peterprofile", "derived-guid", "target-guid")
    assert server.last.url.path.endswith("/query-targets/target-guid/update")

    client.clear_query_target_relationship("peterprofile", "derived-guid", "target-guid")
    assert server.last.url.path.endswith("/query-targets/target-guid/delete")


def test_nested_attributes(client, server) -> None:
    server.reply(
        {
            "elementList": [
                {"elementHeader": {"guid": "a1"}, "schemaAttributeProperties": {"qualifiedName": "Patient.id"}}
            ]
        }
    )

    attrs = client.get_nested_attributes("peterprofile", "struct-guid", page_size=20)

    assert server.last.url.path == f"{BASE}/schema-elements/struct-guid/nested-attributes"
    assert [a.properties.qualified_name for a in attrs] == ["Patient.id"]
