import httpx
import pytest

from gocardless_resources.clients.real_http.fetcher import HttpResourceFetcher
from gocardless_resources.contracts.links import Link, resolve_async
from gocardless_resources.errors import ResourceNotFound
from gocardless_resources.resources.redirect_flows import RedirectFlow
from gocardless_resources.utils.config_loader import ClientConfig


def _fetcher(handler, **config):
    config.setdefault("access_token", "sandbox_token")
    return HttpResourceFetcher(ClientConfig(**config), transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_decodes_known_families(completed_flow_payload):
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["headers"] = request.headers
        return httpx.Response(200, json={"redirect_flows": completed_flow_payload})

    flow = await _fetcher(handler).fetch("redirect_flows", "RE123")

    assert isinstance(flow, RedirectFlow)
    assert flow.id == "RE123"
    assert seen["url"] == "https://api-sandbox.gocardless.com/redirect_flows/RE123"
    assert seen["headers"]["Authorization"] == "Bearer sandbox_token"
    assert seen["headers"]["GoCardless-Version"] == "2015-07-06"


@pytest.mark.asyncio
async def test_fetch_returns_other_families_unwrapped():
    def handler(request):
        return httpx.Response(200, json={"mandates": {"id": "MD123", "status": "active"}})

    fetcher = _fetcher(handler, environment="live")
    mandate = await resolve_async(Link("MD123", "mandates"), fetcher)
    assert mandate == {"id": "MD123", "status": "active"}


@pytest.mark.asyncio
async def test_fetch_not_found():
    def handler(request):
        return httpx.Response(404, json={"error": {"type": "invalid_api_usage"}})

    with pytest.raises(ResourceNotFound):
        await _fetcher(handler).fetch("mandates", "MD999")


@pytest.mark.asyncio
async def test_fetch_other_http_errors_propagate():
    def handler(request):
        return httpx.Response(500, json={"error": {"type": "gocardless"}})

    with pytest.raises(httpx.HTTPStatusError):
        await _fetcher(handler).fetch("mandates", "MD123")


@pytest.mark.asyncio
async def test_base_url_override():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        return httpx.Response(200, json={"events": {"id": "EV1"}})

    await _fetcher(handler, base_url="http://localhost:8080/").fetch("events", "EV1")
    assert seen["url"] == "http://localhost:8080/events/EV1"


@pytest.mark.asyncio
async def test_identity_is_quoted_as_one_path_segment():
    seen = {}

    def handler(request):
        seen["path"] = request.url.raw_path
        return httpx.Response(200, json={"mandates": {"id": "MD1/../x"}})

    await _fetcher(handler, base_url="http://localhost:8080").fetch("mandates", "MD1/../x?a=1")
    assert seen["path"] == b"/mandates/MD1%2F..%2Fx%3Fa%3D1"
