import pytest


@pytest.mark.anyio
async def test_health(client):
    resp = await client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "hanuram-site", "version": "1.0.0"}


@pytest.mark.anyio
async def test_metrics_endpoint_is_off_when_disabled(client):
    resp = await client.get("/metrics")

    assert resp.status_code == 404
    assert resp.json() == {"status": "error", "message": "Metrics disabled", "code": 404}


@pytest.mark.anyio
async def test_malformed_body_uses_the_error_envelope(client):
    resp = await client.post(
        "/forgot-password/send-email",
        content="not json",
        headers={"Content-Type": "application/json"},
    )

    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "error"
    assert body["code"] == 400


@pytest.mark.anyio
async def test_unknown_route_is_404_envelope(client):
    resp = await client.get("/no-such-page")

    assert resp.status_code == 404
    assert resp.json()["code"] == 404
