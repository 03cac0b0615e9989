import asyncio

import aiohttp
import pytest
from aioresponses import aioresponses

from vision_lab.errors import RemoteRequestError
from vision_lab.rest import RestClient, _service_message

ENDPOINT = "https://vision.example.test/"


def make_client() -> RestClient:
    return RestClient(ENDPOINT, "Training-Key", "secret", timeout=5)


async def test_get_json_returns_parsed_body():
    with aioresponses() as m:
        m.get("https://vision.example.test/things", payload={"things": []})

        async with make_client() as client:
            data = await client.get_json("/things")

    assert data == {"things": []}


async def test_session_carries_key_header():
    async with make_client() as client:
        assert client._session.headers["Training-Key"] == "secret"


def test_url_joins_endpoint_without_double_slash():
    assert make_client().url("/things") == "https://vision.example.test/things"


async def test_post_json_sends_octet_stream():
    with aioresponses() as m:
        m.post("https://vision.example.test/upload?tagIds=t1", payload={"ok": True})

        async with make_client() as client:
            data = await client.post_json("/upload", data=b"bytes", params={"tagIds": "t1"})

        request = next(iter(m.requests.values()))[0]

    assert data == {"ok": True}
    assert request.kwargs["data"] == b"bytes"
    assert request.kwargs["headers"]["Content-Type"] == "application/octet-stream"


async def test_empty_body_returns_empty_dict():
    with aioresponses() as m:
        m.post("https://vision.example.test/train", body="", status=200)

        async with make_client() as client:
            data = await client.post_json("/train")

    assert data == {}


async def test_http_error_maps_to_remote_request_error():
    with aioresponses() as m:
        m.get(
            "https://vision.example.test/projects/x",
            status=404,
            payload={"code": "BadRequestProjectNotFound", "message": "Project not found"},
        )

        async with make_client() as client:
            with pytest.raises(RemoteRequestError) as excinfo:
                await client.get_json("/projects/x")

    assert excinfo.value.status == 404
    assert "Project not found" in str(excinfo.value)


async def test_auth_failure_maps_to_remote_request_error():
    with aioresponses() as m:
        m.get(
            "https://vision.example.test/things",
            status=401,
            payload={"error": {"code": "401", "message": "Access denied due to invalid subscription key."}},
        )

        async with make_client() as client:
            with pytest.raises(RemoteRequestError) as excinfo:
                await client.get_json("/things")

    assert excinfo.value.status == 401
    assert "invalid subscription key" in excinfo.value.message


async def test_non_json_body_maps_to_remote_request_error():
    with aioresponses() as m:
        m.get("https://vision.example.test/things", body="<html>oops</html>", status=200)

        async with make_client() as client:
            with pytest.raises(RemoteRequestError, match="non-JSON"):
                await client.get_json("/things")


async def test_undecodable_error_body_maps_to_remote_request_error():
    with aioresponses() as m:
        m.get("https://vision.example.test/things", body=b"\xff\xfe\xfa", status=500)

        async with make_client() as client:
            with pytest.raises(RemoteRequestError) as excinfo:
                await client.get_json("/things")

    assert excinfo.value.status == 500


async def test_undecodable_success_body_maps_to_remote_request_error():
    with aioresponses() as m:
        m.get("https://vision.example.test/things", body=b"\xff\xfe\xfa", status=200)

        async with make_client() as client:
            with pytest.raises(RemoteRequestError, match="non-JSON"):
                await client.get_json("/things")


async def test_timeout_maps_to_remote_request_error():
    with aioresponses() as m:
        m.get("https://vision.example.test/slow", exception=asyncio.TimeoutError())

        async with make_client() as client:
            with pytest.raises(RemoteRequestError, match="timed out"):
                await client.get_json("/slow")


async def test_connection_error_maps_to_remote_request_error():
    with aioresponses() as m:
        m.get("https://vision.example.test/down", exception=aiohttp.ClientConnectionError("refused"))

        async with make_client() as client:
            with pytest.raises(RemoteRequestError, match="refused"):
                await client.get_json("/down")


async def test_request_outside_context_manager_fails():
    client = make_client()

    with pytest.raises(RuntimeError):
        await client.get_json("/things")


def test_service_message_shapes():
    assert _service_message('{"message": "a"}') == "a"
    assert _service_message('{"error": {"message": "b"}}') == "b"
    assert _service_message("not json") is None
    assert _service_message("[]") is None
