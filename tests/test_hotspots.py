import httpx
import pytest
import respx

from heliumapi import hotspots
from heliumapi.client import Client
from heliumapi.errors import RequestError, UnexpectedValueError
from heliumapi.models import HotspotStakingMode
from heliumapi.values import Dbi

BASE = "https://api.test/v1"
ADDRESS = "112exampleHotspotAddress0001"


def hotspot(address, mode="full"):
    return {
        "address": address,
        "owner": "13exampleOwner",
        "name": "made-up-name",
        "added_height": 10,
        "lat": 1.5,
        "lng": 2.5,
        "location": "8c2836152804dff",
        "mode": mode,
        "elevation": 4,
        "gain": 12,
        "geocode": {"short_city": "Town"},
        "nonce": 1,
    }


async def take(stream, count):
    items = []
    async for item in stream:
        items.append(item)
        if len(items) == count:
            break
    await stream.aclose()
    return items


@pytest.mark.asyncio
async def test_all_takes_ten():
    pages = {
        None: {"data": [hotspot(f"h{i}") for i in range(4)], "cursor": "c1"},
        "c1": {"data": [hotspot(f"h{i}") for i in range(4, 8)], "cursor": "c2"},
        "c2": {"data": [hotspot(f"h{i}") for i in range(8, 14)]},
    }

    def handler(request):
        return httpx.Response(200, json=pages[request.url.params.get("cursor")])

    with respx.mock(base_url=BASE) as mock:
        mock.get("/hotspots").mock(side_effect=handler)
        async with Client(BASE) as client:
            items = await take(hotspots.all_hotspots(client), 10)
    assert [item.address for item in items] == [f"h{i}" for i in range(10)]


@pytest.mark.asyncio
async def test_get_returns_hotspot():
    with respx.mock(base_url=BASE) as mock:
        mock.get(f"/hotspots/{ADDRESS}").respond(json={"data": hotspot(ADDRESS, "DataOnly")})
        async with Client(BASE) as client:
            result = await hotspots.get(client, ADDRESS)
    assert result.address == ADDRESS
    assert result.mode is HotspotStakingMode.DATA_ONLY
    assert result.gain == Dbi.from_units(12)
    assert result.geocode.short_city == "Town"


@pytest.mark.asyncio
async def test_get_bad_mode():
    with respx.mock(base_url=BASE) as mock:
        mock.get(f"/hotspots/{ADDRESS}").respond(json={"data": hotspot(ADDRESS, "heavy")})
        async with Client(BASE) as client:
            with pytest.raises(UnexpectedValueError):
                await hotspots.get(client, ADDRESS)


@pytest.mark.asyncio
async def test_get_not_found():
    with respx.mock(base_url=BASE) as mock:
        mock.get(f"/hotspots/{ADDRESS}").respond(status_code=404)
        async with Client(BASE) as client:
            with pytest.raises(RequestError):
                await hotspots.get(client, ADDRESS)