import pytest

from web_app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_naming(client):
    response = client.get("/api/naming", query_string={"text": "user_name"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["detected"] == "snakeCase"
    assert data["conversions"][0] == {
        "convention": "camelCase",
        "label": "Lower camel case (camelCase)",
        "value": "userName",
    }


def test_naming_without_text(client):
    data = client.get("/api/naming").get_json()
    assert data["detected"] == "unknown"
    assert data["conversions"] == []


def test_timestamp(client):
    response = client.get("/api/timestamp", query_string={"value": "0", "unit": "s"})

    assert response.status_code == 200
    data = response.get_json()
    assert data["unit"] == "s"
    assert len(data["converted"]) == len("1970-01-01 00:00:00")


def test_timestamp_invalid_value(client):
    response = client.get("/api/timestamp", query_string={"value": "abc"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid timestamp format"}


def test_timestamp_out_of_range(client):
    response = client.get("/api/timestamp", query_string={"value": "-5", "unit": "s"})
    assert response.status_code == 400
    assert response.get_json() == {"error": "Timestamp out of range"}


def test_timestamp_invalid_unit(client):
    response = client.get("/api/timestamp", query_string={"value": "0", "unit": "minutes"})
    assert response.status_code == 400


def test_timestamp_now(client):
    data = client.get("/api/timestamp/now").get_json()
    assert set(data) == {"date", "timestamp"}
    assert data["timestamp"].isdigit()


def test_qr_png(client):
    response = client.get("/qr.png", query_string={"data": "hello", "size": "100"})
    assert response.status_code == 200
    assert response.mimetype == "image/png"
    assert response.data.startswith(b"\x89PNG")


@pytest.mark.parametrize("query", [
    {},
    {"data": "hello", "size": "abc"},
    {"data": "hello", "size": "5000"},
    {"data": "hello", "size": "0"},
])
def test_qr_png_bad_request(client, query):
    response = client.get("/qr.png", query_string=query)
    assert response.status_code == 400
    assert "error" in response.get_json()
