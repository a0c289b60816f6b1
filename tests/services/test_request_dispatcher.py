import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from reqlayer.core.enums import HttpMethod
from reqlayer.core.exceptions import UnsupportedMethodError
from reqlayer.models.envelope import ResponseEnvelope
from reqlayer.models.options import MessageOverride, RequestOptions
from reqlayer.services.dispatch.dispatcher import RequestDispatcher, build_request_kwargs
from reqlayer.services.messages.catalog import MessageCatalog
from reqlayer.services.messages.status import CONNECTION_FAILED_MESSAGE
from tests.fakes.fake_notifier import FakeNotifier, json_handler


class TestBuildRequestKwargs:
    def test_get_data_goes_to_params(self) -> None:
        assert build_request_kwargs(HttpMethod.GET, {"page": 1}) == {"params": {"page": 1}}

    def test_post_mapping_goes_to_form_data(self) -> None:
        assert build_request_kwargs(HttpMethod.POST, {"a": 1}) == {"data": {"a": 1}}

    def test_raw_body_goes_to_content(self) -> None:
        assert build_request_kwargs(HttpMethod.PUT, "a=1") == {"content": "a=1"}

    def test_config_overrides(self) -> None:
        kwargs = build_request_kwargs(
            HttpMethod.POST, {"a": 1}, {"timeout": 3, "headers": {"X-Trace": "1"}}
        )
        assert kwargs == {"data": {"a": 1}, "timeout": 3, "headers": {"X-Trace": "1"}}

    def test_none_data_is_omitted(self) -> None:
        assert build_request_kwargs(HttpMethod.DELETE) == {}

    @pytest.mark.parametrize("body", [[{"id": 1}, {"id": 2}], 5, True])
    def test_non_mapping_body_is_json(self, body) -> None:
        assert build_request_kwargs(HttpMethod.POST, body) == {
            "json": body,
            "headers": {"Content-Type": "application/json"},
        }

    def test_json_body_keeps_config_headers(self) -> None:
        kwargs = build_request_kwargs(
            HttpMethod.DELETE, [1, 2], {"headers": {"X-Trace": "1"}, "timeout": 3}
        )
        assert kwargs == {
            "json": [1, 2],
            "headers": {"Content-Type": "application/json", "X-Trace": "1"},
            "timeout": 3,
        }


@pytest.mark.asyncio
async def test_get_sends_query_string(make_dispatcher) -> None:
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["query"] = request.url.query.decode()
        return httpx.Response(200, json={"code": 200, "data": []})

    dispatcher = make_dispatcher(handler)
    await dispatcher.get("/users", {"page": 2, "size": 10})

    assert seen == {"method": "GET", "query": "page=2&size=10"}


@pytest.mark.asyncio
async def test_post_sends_form_body(make_dispatcher) -> None:
    seen: dict[str, bytes] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = request.content
        return httpx.Response(200, json={"code": 200})

    dispatcher = make_dispatcher(handler)
    await dispatcher.post("/users", {"name": "tom"})

    assert seen["body"] == b"name=tom"


@pytest.mark.asyncio
@pytest.mark.parametrize("verb", ["get", "post", "put", "delete"])
async def test_default_verbs_silent_on_success(
    make_dispatcher, notifier: FakeNotifier, verb: str
) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 200, "message": "ok", "data": {"id": 1}}))

    envelope = await getattr(dispatcher, verb)("/items", {"id": 1})

    assert envelope.data == {"id": 1}
    assert notifier.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("verb", "expected"),
    [("get", "查询失败"), ("post", "查询失败"), ("put", "查询失败"), ("delete", "删除失败")],
)
async def test_default_verbs_notify_business_failure(
    make_dispatcher, notifier: FakeNotifier, verb: str, expected: str
) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 500, "data": {"partial": True}}))

    envelope = await getattr(dispatcher, verb)("/items")

    assert envelope.code == 500
    assert envelope.data is None
    assert notifier.calls == [("error", expected)]


@pytest.mark.asyncio
async def test_login_failure_example(make_dispatcher, notifier: FakeNotifier) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 401, "data": {"token": "half"}}))

    envelope = await dispatcher.post("/login", {"u": "admin", "p": "secret"}, {}, msg_type="login")

    assert envelope.code == 401
    assert envelope.data is None
    assert notifier.calls == [("error", "登录失败")]


@pytest.mark.asyncio
async def test_response_message_preferred_over_template(
    make_dispatcher, notifier: FakeNotifier
) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 500, "message": "用户名已存在"}))

    await dispatcher.post("/users", {"name": "tom"}, msg_type="add")

    assert notifier.calls == [("error", "用户名已存在")]


@pytest.mark.asyncio
async def test_explicit_error_message_overrides_catalog(
    make_dispatcher, notifier: FakeNotifier
) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 500}))

    await dispatcher.delete("/users/1", message={"errorMessage": "该用户仍有关联数据"})

    assert notifier.calls == [("error", "该用户仍有关联数据")]


@pytest.mark.asyncio
@pytest.mark.parametrize("code", [200, 500])
async def test_request_without_need_msg_never_notifies(
    make_dispatcher, notifier: FakeNotifier, code: int
) -> None:
    dispatcher = make_dispatcher(json_handler({"code": code}))

    options = RequestOptions(need_msg=False, msg_back_type="all")
    await dispatcher.request("post", "/x", {"a": 1}, None, options)

    assert notifier.calls == []


@pytest.mark.asyncio
async def test_request_without_need_msg_skips_catalog() -> None:
    transport = MagicMock()
    transport.send = AsyncMock(return_value=ResponseEnvelope(code=200))
    catalog = MagicMock(spec=MessageCatalog)
    dispatcher = RequestDispatcher(transport, FakeNotifier(), catalog)

    await dispatcher.request("get", "/x")

    catalog.merge.assert_not_called()
    catalog.resolve.assert_not_called()


@pytest.mark.asyncio
async def test_msg_back_type_all_shows_success(make_dispatcher, notifier: FakeNotifier) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 200}))

    envelope = await dispatcher.put("/profile", {"a": 1}, msg_type="save", msg_back_type="all")

    assert envelope.is_success
    assert notifier.calls == [("success", "保存成功")]


@pytest.mark.asyncio
async def test_msg_back_type_success_hides_errors(make_dispatcher, notifier: FakeNotifier) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 500}))

    await dispatcher.request(
        "put",
        "/profile",
        options=RequestOptions(need_msg=True, msg_back_type="success", msg_type="save"),
    )

    assert notifier.calls == []


@pytest.mark.asyncio
async def test_success_envelope_is_returned_unmodified(make_dispatcher) -> None:
    body = {"code": 200, "message": "ok", "data": {"rows": [1, 2]}, "total": 2}
    dispatcher = make_dispatcher(json_handler(body))

    envelope = await dispatcher.get("/rows")

    assert envelope.model_dump() == body


@pytest.mark.asyncio
async def test_transport_failure_propagates(make_dispatcher, notifier: FakeNotifier) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    dispatcher = make_dispatcher(handler)

    with pytest.raises(httpx.ConnectError):
        await dispatcher.get("/x")

    # 只有传输层的一次提示，分发器不再提示
    assert notifier.calls == [("error", CONNECTION_FAILED_MESSAGE)]


def test_handler_lookup(make_dispatcher) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 200}))

    assert dispatcher.handler("DELETE") == dispatcher.delete
    with pytest.raises(UnsupportedMethodError):
        dispatcher.handler("patch")


@pytest.mark.asyncio
async def test_override_object_accepted(make_dispatcher, notifier: FakeNotifier) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 200}))

    await dispatcher.get(
        "/report",
        msg_back_type="success",
        message=MessageOverride(success_message="报表已生成"),
    )

    assert notifier.calls == [("success", "报表已生成")]


@pytest.mark.asyncio
async def test_post_list_body_sent_as_json(make_dispatcher, notifier: FakeNotifier) -> None:
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["content_type"] = request.headers.get("Content-Type")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"code": 200, "data": {"deleted": 2}})

    dispatcher = make_dispatcher(handler)
    envelope = await dispatcher.post("/users/batch-delete", [{"id": 1}, {"id": 2}])

    assert seen == {"content_type": "application/json", "body": [{"id": 1}, {"id": 2}]}
    assert envelope.data == {"deleted": 2}
    assert notifier.calls == []


@pytest.mark.asyncio
async def test_put_scalar_body_sent_as_json(make_dispatcher) -> None:
    seen: dict[str, bytes] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["body"] = request.content
        return httpx.Response(200, json={"code": 200})

    dispatcher = make_dispatcher(handler)
    envelope = await dispatcher.put("/quota", 5)

    assert seen["body"] == b"5"
    assert envelope.is_success


@pytest.mark.asyncio
async def test_fractional_code_is_business_failure(
    make_dispatcher, notifier: FakeNotifier
) -> None:
    dispatcher = make_dispatcher(json_handler({"code": 200.5, "data": {"secret": 1}}))

    envelope = await dispatcher.get("/rows")

    assert not envelope.is_success
    assert envelope.data is None
    assert notifier.calls == [("error", "查询失败")]
