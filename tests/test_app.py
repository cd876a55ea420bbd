import pytest

from material_palette.app import create_app


@pytest.fixture
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


def test_index_renders_slots(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert 'id="colorPick"' in body
    assert 'value="#2196f3"' in body
    for w in (50, 500, 900):
        assert f'id="c_{w}"' in body
    assert "&nbsp;&nbsp;" in body
    assert "palette.js" in body


def test_palette_json(client):
    resp = client.get("/palette", query_string={"seed": "ff0000"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["seed"] == "#ff0000"
    assert [s["weight"] for s in data["shades"]] == [
        50, 100, 200, 300, 400, 500, 600, 700, 800, 900,
    ]
    assert data["shades"][-1]["hex"] == "#652020"
    assert data["shades"][-1]["css"] == "hsl(0, 52%, 26%)"
    assert data["shades"][-1]["text"] == "light"
    assert data["contrastDefaultColor"] == "dark"
    assert data["contrastLightColors"] == [600, 700, 800, 900]
    assert "'900': '652020'" in data["snippet"]
    assert "&nbsp;" in data["snippet_html"]


def test_palette_accepts_hash_prefix(client):
    data = client.get("/palette?seed=%23000000").get_json()
    assert data["seed"] == "#000000"
    assert data["contrastDarkColors"] == [50, 100, 200, 300, 400]


def test_invalid_seed(client):
    resp = client.get("/palette", query_string={"seed": "nothex"})
    assert resp.status_code == 400
    assert "invalid color" in resp.get_json()["error"]


def test_default_seed_from_config():
    app = create_app({"TESTING": True, "DEFAULT_SEED": "#4caf50"})
    data = app.test_client().get("/palette").get_json()
    assert data["seed"] == "#4caf50"


def test_default_seed_from_env(monkeypatch):
    monkeypatch.setenv("MATERIAL_PALETTE_DEFAULT_SEED", "#9c27b0")
    data = create_app({"TESTING": True}).test_client().get("/palette").get_json()
    assert data["seed"] == "#9c27b0"


def test_palette_name():
    app = create_app({"TESTING": True, "PALETTE_NAME": "brand"})
    data = app.test_client().get("/palette?seed=ff0000").get_json()
    assert data["snippet"].startswith("$mdThemingProvider.definePalette('brand', {")


def test_numeric_env_seed(monkeypatch):
    monkeypatch.setenv("MATERIAL_PALETTE_DEFAULT_SEED", "123456")
    app = create_app({"TESTING": True})
    assert app.config["DEFAULT_SEED"] == "#123456"
    client = app.test_client()
    assert client.get("/").status_code == 200
    assert client.get("/palette").get_json()["seed"] == "#123456"


def test_invalid_configured_seed_fails_at_startup():
    with pytest.raises(ValueError):
        create_app({"TESTING": True, "DEFAULT_SEED": "nothex"})


def test_stable_contrast_list_key(client):
    red = client.get("/palette?seed=ff0000").get_json()
    assert red["contrastList"] == red["contrastLightColors"] == [600, 700, 800, 900]
    black = client.get("/palette?seed=000000").get_json()
    assert black["contrastList"] == black["contrastDarkColors"] == [50, 100, 200, 300, 400]
