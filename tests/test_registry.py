import json

import httpx
import pytest

from core.endpoints import camelize
from core.errors import DuplicateToolError, UnknownToolError
from core.http_client import ConfluenceClient
from core.registry import ToolRegistry, bearer_from_header, discover_endpoints
from tests.conftest import BASE_URL, FakeConfluence

ALL_ENDPOINTS = discover_endpoints()
API_PATH = "/wiki/api/v2"


def required_arguments(endpoint) -> dict[str, str]:
    return {name: f"v{i}" for i, name in enumerate(endpoint.required_names, start=1)}


def text_of(result) -> str:
    assert len(result.content) == 1
    return result.content[0].text


# --- discovery ---------------------------------------------------------------


def test_discovers_every_endpoint_module():
    assert len(ALL_ENDPOINTS) == 206
    for name in ("get-admin-key", "get-page-by-id", "create-page", "delete-attachment-property-by-id",
                 "put-forge-app-property", "invite-by-email", "get-data-policy-spaces"):
        assert name in ALL_ENDPOINTS


def test_tool_names_are_kebab_case():
    for name in ALL_ENDPOINTS:
        assert name == name.lower()
        assert " " not in name and "_" not in name


def test_duplicate_tool_names_rejected():
    ep = ALL_ENDPOINTS["get-pages"]
    with pytest.raises(DuplicateToolError):
        ToolRegistry([ep, ep], client=None)


async def test_list_tools(registry):
    tools = {t.name: t for t in registry.list_tools()}
    assert len(tools) == 206

    page = tools["get-page-by-id"]
    assert page.title == "Get page by id"
    assert "GET /pages/{id}" in page.description
    assert page.inputSchema["required"] == ["id"]
    assert "bodyFormat" in page.inputSchema["properties"]
    assert page.annotations.readOnlyHint is True
    assert page.annotations.destructiveHint is False

    delete = tools["delete-page"]
    assert delete.annotations.destructiveHint is True
    assert delete.annotations.readOnlyHint is False


async def test_get_unknown_tool(registry):
    with pytest.raises(UnknownToolError):
        registry.get("get-everything")


async def test_registry_names_follow_declaration_order(registry):
    assert registry.names == list(ALL_ENDPOINTS)


# --- every tool ----------------------------------------------------------------


@pytest.mark.parametrize(
    "name", [n for n, ep in ALL_ENDPOINTS.items() if ep.required_names]
)
async def test_missing_required_parameter_makes_no_call(registry, fake, name):
    endpoint = registry.get(name)
    arguments = required_arguments(endpoint)
    arguments.pop(endpoint.required_names[0])

    result = await registry.call(name, arguments)

    assert result.isError is True
    assert text_of(result).startswith("Error: ")
    assert endpoint.required_names[0] in text_of(result)
    assert fake.requests == []


@pytest.mark.parametrize("name", list(ALL_ENDPOINTS))
async def test_path_parameters_are_substituted_and_not_forwarded(registry, fake, name):
    endpoint = registry.get(name)
    arguments = required_arguments(endpoint)

    result = await registry.call(name, arguments)

    assert result.isError is False
    request = fake.last
    assert request.method == endpoint.method
    expected_path = endpoint.path
    for wire in endpoint.path_params:
        expected_path = expected_path.replace("{" + wire + "}", arguments[camelize(wire)])
    assert request.url.path == API_PATH + expected_path

    path_keys = {camelize(w) for w in endpoint.path_params} | set(endpoint.path_params)
    sent_keys = set(request.url.params.keys())
    if endpoint.accepts_body:
        sent_keys |= set(json.loads(request.content))
    assert not sent_keys & path_keys


@pytest.mark.parametrize(
    "name",
    [n for n, ep in ALL_ENDPOINTS.items() if any(ext != wire for ext, wire in ep.rename_table.items()
                                                  if wire not in ep.path_params)],
)
async def test_renamed_parameters_use_wire_names(registry, fake, name):
    endpoint = registry.get(name)
    arguments = required_arguments(endpoint)
    renamed = {ext: wire for ext, wire in endpoint.rename_table.items()
               if ext != wire and wire not in endpoint.path_params}
    for ext in renamed:
        arguments.setdefault(ext, f"value-of-{ext}")

    result = await registry.call(name, arguments)

    assert result.isError is False
    request = fake.last
    sent = json.loads(request.content) if endpoint.accepts_body else dict(request.url.params)
    for ext, wire in renamed.items():
        assert sent[wire] == arguments[ext]
        assert ext not in sent


# --- example scenarios --------------------------------------------------------


async def test_get_page_by_id_with_body_format(registry, fake):
    result = await registry.call("get-page-by-id", {"id": "123", "bodyFormat": "atlas_doc_format"})

    assert result.isError is False
    assert fake.last.method == "GET"
    assert str(fake.last.url) == f"{BASE_URL}/pages/123?body-format=atlas_doc_format"


async def test_create_page_posts_opaque_body(registry, fake):
    result = await registry.call("create-page", {"spaceId": "9", "title": "X"})

    assert result.isError is False
    assert fake.last.method == "POST"
    assert fake.last.url.path == f"{API_PATH}/pages"
    assert fake.last.url.query == b""
    assert fake.last_json() == {"spaceId": "9", "title": "X"}
    assert fake.last.headers["content-type"] == "application/json"


async def test_create_page_renames_declared_fields(registry, fake):
    await registry.call("create-page", {"spaceId": "9", "title": "X", "rootLevel": "true"})

    assert fake.last_json() == {"spaceId": "9", "title": "X", "root-level": "true"}


async def test_delete_attachment_with_purge(registry, fake):
    result = await registry.call("delete-attachment", {"id": "7", "purge": "true"})

    assert result.isError is False
    assert fake.last.method == "DELETE"
    assert str(fake.last.url) == f"{BASE_URL}/attachments/7?purge=true"


async def test_undeclared_query_parameter_is_dropped(registry, fake):
    result = await registry.call("get-page-by-id", {"id": "1", "includeFoo": "true"})

    assert result.isError is False
    assert len(fake.requests) == 1
    assert str(fake.last.url) == f"{BASE_URL}/pages/1"


# --- headers -----------------------------------------------------------------


async def test_every_request_accepts_json(registry, fake):
    await registry.call("get-spaces", {})
    assert fake.last.headers["accept"] == "application/json"


async def test_bearer_token_is_forwarded(registry, fake):
    await registry.call("get-spaces", {}, bearer="tok-123")
    assert fake.last.headers["authorization"] == "Bearer tok-123"


async def test_no_authorization_header_without_token(registry, fake):
    await registry.call("get-spaces", {})
    assert "authorization" not in fake.last.headers


@pytest.mark.parametrize(
    "header, token",
    [
        ("Bearer abc.def", "abc.def"),
        ("abc.def", "abc.def"),
        ("Bearer ", None),
        ("", None),
        (None, None),
    ],
)
def test_bearer_from_header(header, token):
    assert bearer_from_header(header) == token


# --- results and errors ------------------------------------------------------


@pytest.mark.parametrize(
    "body",
    [
        {"results": [{"id": "1", "title": "Ünïcode"}], "_links": {"next": "/wiki/api/v2/pages?cursor=x"}},
        [1, 2, 3],
        {"nested": {"empty": {}, "none": None, "flag": False}},
    ],
)
async def test_success_is_pretty_printed_json(body):
    result = await _call_against(FakeConfluence(body=body), "get-pages", {})

    assert result.isError is False
    text = text_of(result)
    assert json.loads(text) == body
    assert text == json.dumps(body, indent=2, ensure_ascii=False)


async def _call_against(handler, name: str, arguments: dict):
    c = ConfluenceClient(BASE_URL, transport=httpx.MockTransport(handler))
    try:
        return await ToolRegistry(ALL_ENDPOINTS.values(), c).call(name, arguments)
    finally:
        await c.aclose()


async def test_no_content_response_is_empty_string():
    result = await _call_against(FakeConfluence(status_code=204, content=b""), "delete-page", {"id": "5"})
    assert result.isError is False
    assert text_of(result) == '""'


async def test_remote_error_message_is_surfaced():
    fake = FakeConfluence(status_code=404, body={"statusCode": 404, "message": "Page not found"})
    result = await _call_against(fake, "get-page-by-id", {"id": "404"})
    assert result.isError is True
    assert text_of(result) == "API Error: Page not found"


async def test_remote_error_without_message_falls_back_to_transport_description():
    fake = FakeConfluence(status_code=500, body={"errors": [{"title": "boom"}]})
    result = await _call_against(fake, "get-page-by-id", {"id": "1"})
    assert result.isError is True
    text = text_of(result)
    assert text.startswith("API Error: ")
    assert "500" in text


async def test_connection_failure_is_an_api_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await _call_against(refuse, "get-spaces", {})
    assert result.isError is True
    assert text_of(result) == "API Error: connection refused"


async def test_unknown_tool_is_an_error_result(registry, fake):
    result = await registry.call("no-such-tool", {})
    assert result.isError is True
    assert text_of(result) == "Error: Unknown tool: no-such-tool"
    assert fake.requests == []


async def test_failure_does_not_affect_next_call(registry, fake):
    bad = await registry.call("get-page-by-id", {})
    good = await registry.call("get-page-by-id", {"id": "1"})
    assert bad.isError is True
    assert good.isError is False
    assert len(fake.requests) == 1
