import json

import httpx
import pytest

from cornerstones.core.errors import ConfigurationError, UpstreamServiceError, ValidationError
from cornerstones.main import app
from cornerstones.services.transform import ContentTransformClient, get_transform_client


def _client(handler, api_key=None):
    return ContentTransformClient(
        "http://transform.test/",
        timeout_ms=500,
        api_key=api_key,
        transport=httpx.MockTransport(handler),
    )


def test_transform_posts_display_name_and_returns_content():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        seen["key"] = request.headers.get("X-API-Key")
        return httpx.Response(200, json={"content": "Try building a model cell."})

    result = _client(handler, api_key="k-123").transform("Cells have parts.", "kinesthetic", "Biology")
    assert result == "Try building a model cell."
    assert seen["url"] == "http://transform.test/api/transform"
    assert seen["body"] == {"text": "Cells have parts.", "style": "Kinesthetic", "subject": "Biology"}
    assert seen["key"] == "k-123"


def test_transform_uses_default_subject():
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"content": "ok"})

    _client(handler).transform("x", "reading_writing")
    assert bodies[0]["subject"] == "Course Material"
    assert bodies[0]["style"] == "Reading/Writing"


def test_upstream_error_status_maps_to_502():
    client = _client(lambda request: httpx.Response(500, json={"error": "boom"}))
    with pytest.raises(UpstreamServiceError) as excinfo:
        client.transform("x", "visual")
    assert excinfo.value.status_code == 502


def test_malformed_payload_maps_to_502():
    with pytest.raises(UpstreamServiceError):
        _client(lambda request: httpx.Response(200, json={"text": "nope"})).transform("x", "visual")
    with pytest.raises(UpstreamServiceError):
        _client(lambda request: httpx.Response(200, content=b"not json")).transform("x", "visual")


def test_timeout_is_retried_then_reported():
    calls = []

    def handler(request):
        calls.append(request)
        raise httpx.ReadTimeout("slow", request=request)

    with pytest.raises(UpstreamServiceError, match="timed out"):
        _client(handler).transform("x", "auditory")
    assert len(calls) == 2


def test_disabled_client_and_unknown_style():
    with pytest.raises(ConfigurationError) as excinfo:
        ContentTransformClient(None).transform("x", "visual")
    assert excinfo.value.status_code == 503
    with pytest.raises(ValidationError):
        _client(lambda request: httpx.Response(200, json={"content": "y"})).transform("x", "smell")


def test_transform_endpoint(client, teacher):
    app.dependency_overrides[get_transform_client] = lambda: _client(
        lambda request: httpx.Response(200, json={"content": "Picture a flowchart."})
    )
    r = client.post("/transform", json={"text": "Steps", "style": "visual"}, headers=teacher.headers)
    assert r.status_code == 200, r.text
    assert r.json() == {"style": "visual", "content": "Picture a flowchart."}


def test_transform_endpoint_unconfigured(client, student):
    r = client.post("/transform", json={"text": "Steps", "style": "visual"}, headers=student.headers)
    assert r.status_code == 503
    assert r.json()["error"] == "configuration_error"
