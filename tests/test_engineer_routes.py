import pytest


@pytest.mark.anyio
@pytest.mark.parametrize("path", ["/engineers/api/main", "/api/main"])
async def test_engineer_listing(client, path):
    resp = await client.get(path)

    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body, list)
    assert {"id", "name", "specialization", "experience", "img"} <= set(body[0])
    assert any(item["id"] == "eng-7" for item in body)


@pytest.mark.anyio
async def test_engineer_page_renders_profile(client):
    resp = await client.get("/engineers/eng-7")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "R. Rao" in resp.text
    assert "Geotechnical Engineering" in resp.text


@pytest.mark.anyio
async def test_unknown_engineer_is_plain_text_404(client):
    resp = await client.get("/engineers/eng-404")

    assert resp.status_code == 404
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "Engineer with ID eng-404 not found."


@pytest.mark.anyio
async def test_repeat_page_views_are_served_from_cache(client, fetcher):
    await client.get("/engineers/eng-7")
    await client.get("/engineers/eng-7")

    assert fetcher.calls == ["eng-7"]

