from types import SimpleNamespace
from unittest.mock import MagicMock

from route_doc.config import DocConfig
from route_doc.engine.assembler import (
    build_api,
    build_index,
    build_resource,
    is_documentation_group,
    nickname,
    parse_http_codes,
    render_notes,
    resolve_base_path,
)
from route_doc.engine.grouper import group_routes
from route_doc.parser.base import RouteDescriptor

REQUEST = SimpleNamespace(base_url="http://testserver/")


def _route(**fields) -> RouteDescriptor:
    values = {"method": "GET", "path": "/users/:id(.:format)"}
    values.update(fields)
    return RouteDescriptor.model_validate(values)


class TestNickname:
    def test_separators_collapsed(self):
        assert nickname("GET", "/users/:id(.:format)") == "GET-users-id-format"

    def test_plain_path(self):
        assert nickname("POST", "/users") == "POST-users"


class TestHttpCodes:
    def test_ordered_pairs(self):
        assert parse_http_codes({404: "Not found", 401: "Unauthorized"}) == [
            {"code": 404, "reason": "Not found"},
            {"code": 401, "reason": "Unauthorized"},
        ]

    def test_none(self):
        assert parse_http_codes(None) == []


class TestRenderNotes:
    def test_markdown_disabled_passes_through(self):
        assert render_notes("**bold**", DocConfig()) == "**bold**"

    def test_missing_notes_stay_none(self):
        assert render_notes(None, DocConfig(markdown=True)) is None

    def test_empty_notes_not_rendered(self):
        renderer = MagicMock()
        assert render_notes("", DocConfig(markdown=True), renderer) == ""
        renderer.render.assert_not_called()

    def test_markdown_enabled_uses_renderer(self):
        renderer = MagicMock()
        renderer.render.return_value = "<p>html</p>"
        assert render_notes("text", DocConfig(markdown=True), renderer) == "<p>html</p>"
        renderer.render.assert_called_once_with("text")


class TestBasePath:
    def test_literal(self):
        assert resolve_base_path("https://api.example.com", REQUEST) == "https://api.example.com"

    def test_callable_receives_request(self):
        assert resolve_base_path(lambda req: req.base_url + "v1", REQUEST) == "http://testserver/v1"

    def test_falls_back_to_request_base_url(self):
        assert resolve_base_path(None, REQUEST) == "http://testserver"

    def test_callable_returning_none_falls_back(self):
        assert resolve_base_path(lambda req: None, REQUEST) == "http://testserver"

    def test_empty_literal_kept(self):
        assert resolve_base_path("", REQUEST) == ""


class TestBuildApi:
    def test_path_and_operation(self):
        api = build_api(_route(description="Get a user"), DocConfig(api_version="1.0"))
        assert api["path"] == "/users/{id}{format}"
        op = api["operations"][0]
        assert op["summary"] == "Get a user"
        assert op["httpMethod"] == "GET"
        assert op["nickname"] == "GET-users-id-format"
        assert "group" not in op

    def test_group_field(self):
        op = build_api(_route(), DocConfig(), group="users")["operations"][0]
        assert op["group"] == "users"

    def test_missing_description_is_empty_summary(self):
        assert build_api(_route(), DocConfig())["operations"][0]["summary"] == ""

    def test_no_http_codes_omits_error_responses(self):
        op = build_api(_route(), DocConfig())["operations"][0]
        assert "errorResponses" not in op

    def test_http_codes_become_error_responses(self):
        op = build_api(_route(http_codes={404: "Not found"}), DocConfig())["operations"][0]
        assert op["errorResponses"] == [{"code": 404, "reason": "Not found"}]

    def test_headers_listed_before_params(self):
        route = _route(params={"id": {"type": "Integer"}}, headers={"X-Token": {}})
        params = build_api(route, DocConfig())["operations"][0]["parameters"]
        assert [p["paramType"] for p in params] == ["header", "path"]

    def test_hide_format(self):
        assert build_api(_route(), DocConfig(hide_format=True))["path"] == "/users/{id}"


class TestBuildIndex:
    def test_top_level_shape(self):
        config = DocConfig(api_version="2.0", base_path="https://api.example.com")
        doc = build_index(group_routes([_route()]), config, REQUEST)
        assert doc["apiVersion"] == "2.0"
        assert doc["swaggerVersion"] == "1.1"
        assert doc["basePath"] == "https://api.example.com"
        assert doc["operations"] == []
        assert "resourcePath" not in doc
        assert len(doc["apis"]) == 1

    def test_one_node_per_route_in_group_order(self):
        routes = [
            _route(path="/users"),
            _route(path="/pets"),
            _route(method="POST", path="/users"),
        ]
        doc = build_index(group_routes(routes), DocConfig(), REQUEST)
        assert [(a["path"], a["operations"][0]["group"]) for a in doc["apis"]] == [
            ("/users", "users"),
            ("/users", "users"),
            ("/pets", "pets"),
        ]

    def test_documentation_group_hidden(self):
        routes = [_route(path="/3scale_doc"), _route(path="/users")]
        config = DocConfig(hide_documentation_path=True)
        doc = build_index(group_routes(routes), config, REQUEST)
        assert [a["path"] for a in doc["apis"]] == ["/users"]

    def test_documentation_group_shown_by_default(self):
        routes = [_route(path="/3scale_doc"), _route(path="/users")]
        doc = build_index(group_routes(routes), DocConfig(), REQUEST)
        assert len(doc["apis"]) == 2

    def test_is_documentation_group(self):
        config = DocConfig(mount_path="/api_docs")
        assert is_documentation_group("api_docs", config) is True
        assert is_documentation_group("users", config) is False


class TestBuildResource:
    def test_top_level_shape(self):
        doc = build_resource([_route()], DocConfig(), REQUEST)
        assert doc["resourcePath"] == ""
        assert "operations" not in doc
        assert doc["basePath"] == "http://testserver"
        assert "group" not in doc["apis"][0]["operations"][0]
