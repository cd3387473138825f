import uvicorn

from formsmith.main import app, run


def test_run_serves_the_app_with_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    run()

    assert calls == [(("formsmith.main:app",), {"host": "0.0.0.0", "port": 8000})]


def test_api_routes_are_mounted_under_api_prefix():
    paths = {route.path for route in app.routes}

    assert {"/api/forms", "/api/forms/{form_id}", "/api/ai", "/api/generate", "/api/auth/login"} <= paths
