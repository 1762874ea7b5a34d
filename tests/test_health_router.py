# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-14
# Description: test_health_router.py
# -----------------------------------------------------------------------------


def test_root_greeting(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.text == "Hello, World!"
    assert resp.headers["content-type"].startswith("text/plain")


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_deep_health_reports_failures(client, store):
    store.healthy = False

    resp = client.get("/health/deep", params={"run_openai": True})

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "error"
    assert data["results"] == {"chroma": False, "openai_embed": True, "openai_chat": True}
    assert data["summary"] == {"total": 3, "passed": 2, "failed": 1}


def test_deep_health_reports_embedding_failure(client, embedder):
    embedder.fail_on = "ping"

    data = client.get("/health/deep", params={"run_openai": True}).json()

    assert data["status"] == "error"
    assert data["results"]["openai_embed"] is False
    assert data["results"]["chroma"] is True


def test_deep_health_skips_openai_by_default(client, embedder):
    data = client.get("/health/deep").json()

    assert data["status"] == "ok"
    assert data["results"] == {"chroma": True}
    assert embedder.calls == []


def test_health_handlers_are_async():
    import inspect

    from api.routers import health

    assert inspect.iscoroutinefunction(health.health_check)
    assert inspect.iscoroutinefunction(health.deep_health_check)
