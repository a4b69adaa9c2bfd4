from hidecart.auth import create_access_token
from hidecart.selector_set import BUILTIN_DEFAULTS


def test_settings_require_token(client):
    assert client.get("/api/admin/settings").status_code == 401
    bad = {"Authorization": "Bearer not-a-jwt"}
    assert client.get("/api/admin/settings", headers=bad).status_code == 401


def test_settings_reject_non_admin(client):
    token = create_access_token({"sub": "shopper"})
    r = client.get("/api/admin/settings", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 403


def test_settings_round_trip(client, admin_headers):
    try:
        r = client.put(
            "/api/admin/settings",
            json={"selectors": " .foo , ,<b>.bar</b>"},
            headers=admin_headers,
        )
        assert r.status_code == 200
        assert r.json()["selectors"] == ".foo, .bar"
        assert r.json()["effective"] == [".foo", ".bar", *BUILTIN_DEFAULTS]

        r = client.get("/api/admin/settings", headers=admin_headers)
        assert r.json()["selectors"] == ".foo, .bar"
        assert r.json()["variant"] == "enhanced"

        page = client.get("/shop")
        assert ".foo,.bar,.show-cart-btn" in page.text
    finally:
        client.put("/api/admin/settings", json={"selectors": ""}, headers=admin_headers)


def test_cleared_settings_fall_back_to_defaults(client, admin_headers):
    r = client.put("/api/admin/settings", json={"selectors": ""}, headers=admin_headers)
    assert r.status_code == 200
    assert r.json()["effective"] == list(BUILTIN_DEFAULTS)
