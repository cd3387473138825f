from formsmith.core.config import settings
from formsmith.core.security import verify_credentials


def test_verify_credentials_matches_configured_admin():
    assert verify_credentials(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD)
    assert not verify_credentials(settings.ADMIN_USERNAME, "nope")
    assert not verify_credentials("someone", settings.ADMIN_PASSWORD)


def test_login_sets_http_only_strict_cookie(client):
    response = client.post(
        "/api/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Login successful"}
    set_cookie = response.headers["set-cookie"]
    assert f"{settings.SESSION_COOKIE_NAME}=authenticated" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "SameSite=strict" in set_cookie
    assert f"Max-Age={24 * 60 * 60}" in set_cookie


def test_wrong_password_twice_is_rejected_without_cookie(client):
    for _ in range(2):
        response = client.post(
            "/api/auth/login",
            json={"username": settings.ADMIN_USERNAME, "password": "wrong"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"
        assert "set-cookie" not in response.headers

    assert client.cookies.get(settings.SESSION_COOKIE_NAME) is None
    assert client.get("/api/auth/check").json() == {"authenticated": False}


def test_check_reflects_session(admin_client):
    assert admin_client.get("/api/auth/check").json() == {"authenticated": True}


def test_logout_clears_session(admin_client):
    response = admin_client.post("/api/auth/logout")

    assert response.status_code == 200
    assert admin_client.get("/api/auth/check").json() == {"authenticated": False}


def test_forged_cookie_value_is_not_a_session(client):
    headers = {"Cookie": f"{settings.SESSION_COOKIE_NAME}=admin"}

    assert client.get("/api/auth/check", headers=headers).json() == {"authenticated": False}
    response = client.post("/api/forms", json={"title": "x", "sections": []}, headers=headers)
    assert response.status_code == 401
