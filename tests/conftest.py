import pytest

from calorie_tracker import create_app
from calorie_tracker.extensions import db


@pytest.fixture()
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


def signup(client, email="user@example.com", password="secret123", name="User Demo"):
    r = client.post("/api/auth", json={
        "action": "signup", "email": email, "password": password, "name": name,
    })
    assert r.status_code == 201, r.data
    return r.get_json()["data"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def headers(client):
    return bearer(signup(client)["token"])


@pytest.fixture()
def other_headers(client):
    return bearer(signup(client, email="other@example.com", name="Other")["token"])
