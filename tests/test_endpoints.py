import logging

import pytest

from core.endpoints import Endpoint, camelize
from core.errors import ToolInputError


@pytest.mark.parametrize(
    "wire, external",
    [
        ("id", "id"),
        ("body-format", "bodyFormat"),
        ("attachment-id", "attachmentId"),
        ("include-favorited-by-current-user-status", "includeFavoritedByCurrentUserStatus"),
        ("mediaType", "mediaType"),
        ("propertyKey", "propertyKey"),
    ],
)
def test_camelize(wire, external):
    assert camelize(wire) == external


def test_path_params_and_rename_table():
    ep = Endpoint("get-attachment-version-details", "GET", "/attachments/{attachment-id}/versions/{version-number}",
                  "Get version details for attachment version")
    assert ep.path_params == ("attachment-id", "version-number")
    assert ep.rename_table == {"attachmentId": "attachment-id", "versionNumber": "version-number"}
    assert ep.required_names == ["attachmentId", "versionNumber"]


def test_method_is_normalised_and_validated():
    assert Endpoint("x", "get", "/x", "X").method == "GET"
    with pytest.raises(ValueError):
        Endpoint("x", "PATCH", "/x", "X")


def test_duplicate_parameter_declaration_rejected():
    with pytest.raises(ValueError):
        Endpoint("x", "GET", "/x/{id}", "X", params=("id",))


def test_input_schema_for_query_tool():
    ep = Endpoint("get-custom-content-by-type", "GET", "/custom-content", "Get custom content by type",
                  required=("type",), params=("space-id", "body-format"))
    schema = ep.input_schema()
    assert schema["type"] == "object"
    assert schema["required"] == ["type"]
    assert schema["additionalProperties"] is True
    assert set(schema["properties"]) == {"type", "spaceId", "bodyFormat"}
    assert all(p["type"] == "string" for p in schema["properties"].values())
    assert "`space-id`" in schema["properties"]["spaceId"]["description"]


def test_input_schema_for_body_tool_allows_extra_fields():
    ep = Endpoint("create-page", "POST", "/pages", "Create page", params=("embedded", "private", "root-level"))
    schema = ep.input_schema()
    assert schema["additionalProperties"] is True
    assert "required" not in schema
    assert "rootLevel" in schema["properties"]


def test_bind_get_substitutes_path_and_renames_query():
    ep = Endpoint("get-page-by-id", "GET", "/pages/{id}", "Get page by id", params=("body-format", "get-draft"))
    bound = ep.bind({"id": "123", "bodyFormat": "atlas_doc_format"})
    assert bound.method == "GET"
    assert bound.path == "/pages/123"
    assert bound.params == {"body-format": "atlas_doc_format"}
    assert bound.json is None


def test_bind_quotes_path_values():
    ep = Endpoint("delete-forge-app-property", "DELETE", "/app/properties/{propertyKey}", "Deletes a Forge app property.")
    assert ep.bind({"propertyKey": "a/b c"}).path == "/app/properties/a%2Fb%20c"


def test_bind_body_tool_keeps_opaque_fields_and_renames_declared_ones():
    ep = Endpoint("create-page", "POST", "/pages", "Create page", params=("embedded", "private", "root-level"))
    bound = ep.bind({"spaceId": "9", "title": "X", "rootLevel": "true"})
    assert bound.params is None
    assert bound.json == {"spaceId": "9", "title": "X", "root-level": "true"}


def test_bind_body_tool_without_arguments_sends_empty_object():
    ep = Endpoint("enable-admin-key", "POST", "/admin-key", "Enable Admin Key")
    assert ep.bind(None).json == {}


def test_bind_drops_none_values():
    ep = Endpoint("get-pages", "GET", "/pages", "Get pages", params=("limit", "cursor"))
    assert ep.bind({"limit": "5", "cursor": None}).params == {"limit": "5"}


def test_bind_missing_required_parameter():
    ep = Endpoint("get-page-by-id", "GET", "/pages/{id}", "Get page by id")
    with pytest.raises(ToolInputError, match="id"):
        ep.bind({})


def test_bind_rejects_non_string_value():
    ep = Endpoint("get-pages", "GET", "/pages", "Get pages", params=("limit",))
    with pytest.raises(ToolInputError, match="limit must be a string"):
        ep.bind({"limit": 25})


def test_bind_drops_undeclared_query_parameter(caplog):
    ep = Endpoint("get-pages", "GET", "/pages", "Get pages", params=("limit",))
    with caplog.at_level(logging.DEBUG, logger="core.endpoints"):
        bound = ep.bind({"limit": "5", "bodyFormat": "storage"})
    assert bound.params == {"limit": "5"}
    assert "bodyFormat" in caplog.text


def test_bind_rejects_empty_path_value():
    ep = Endpoint("delete-page", "DELETE", "/pages/{id}", "Delete page")
    with pytest.raises(ToolInputError, match="must not be empty"):
        ep.bind({"id": ""})
