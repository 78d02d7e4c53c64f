import pytest
from sqlalchemy.exc import IntegrityError

from calorie_tracker.extensions import db
from calorie_tracker.models import CustomFood, User
from calorie_tracker.services import custom_food_service
from calorie_tracker.utils.errors import ValidationError


def upsert(client, headers, **body):
    return client.post("/api/custom-foods", json=body, headers=headers)


def test_upsert_is_case_insensitive(client, headers):
    r = upsert(client, headers, food_name="Greek Yogurt", calories_per_100g=59, protein_per_100g=10)
    assert r.status_code == 201
    created = r.get_json()["data"]

    r = upsert(client, headers, food_name="greek yogurt", calories_per_100g=97)
    assert r.status_code == 200
    updated = r.get_json()["data"]
    assert updated["id"] == created["id"]
    assert updated["food_name"] == "Greek Yogurt"
    assert updated["calories_per_100g"] == 97

    foods = client.get("/api/custom-foods", headers=headers).get_json()["data"]
    assert len(foods) == 1


def test_search_by_name(client, headers):
    upsert(client, headers, food_name="Brown rice", calories_per_100g=111)
    upsert(client, headers, food_name="White Rice", calories_per_100g=130)
    upsert(client, headers, food_name="Lentils", calories_per_100g=116)

    foods = client.get("/api/custom-foods?search=RICE", headers=headers).get_json()["data"]
    assert [f["food_name"] for f in foods] == ["Brown rice", "White Rice"]

    assert client.get("/api/custom-foods?search=100%25", headers=headers).get_json()["data"] == []


def test_update_and_delete(client, headers):
    a = upsert(client, headers, food_name="Tofu", calories_per_100g=76).get_json()["data"]
    upsert(client, headers, food_name="Tempeh", calories_per_100g=192)

    r = client.put("/api/custom-foods", json={"id": a["id"], "brand": "Acme", "calories_per_100g": 80}, headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"]["brand"] == "Acme"
    assert r.get_json()["data"]["calories_per_100g"] == 80

    r = client.put("/api/custom-foods", json={"id": a["id"], "food_name": "TEMPEH"}, headers=headers)
    assert r.status_code == 400

    assert client.delete(f"/api/custom-foods?id={a['id']}", headers=headers).status_code == 200
    assert client.delete(f"/api/custom-foods?id={a['id']}", headers=headers).status_code == 404


def test_custom_foods_are_isolated_per_user(client, headers, other_headers):
    a = upsert(client, headers, food_name="Tofu", calories_per_100g=76).get_json()["data"]

    assert client.get("/api/custom-foods", headers=other_headers).get_json()["data"] == []
    assert client.delete(f"/api/custom-foods?id={a['id']}", headers=other_headers).status_code == 404

    # Same name for another user is a separate record
    r = upsert(client, other_headers, food_name="tofu", calories_per_100g=70)
    assert r.status_code == 201


def test_custom_food_validation(client, headers):
    r = upsert(client, headers, food_name="Water")
    assert r.status_code == 400
    assert r.get_json()["error"] == "calories_per_100g: Missing data for required field."

    r = upsert(client, headers, food_name="Bad", calories_per_100g=-5)
    assert r.status_code == 400


def test_out_of_range_ids(client, headers):
    huge = 10**30
    assert client.delete(f"/api/custom-foods?id={huge}", headers=headers).status_code == 404
    assert client.put("/api/custom-foods", json={"id": huge, "brand": "x"}, headers=headers).status_code == 400


def _user(email="cook@example.com"):
    user = User(email=email, password="x")
    db.session.add(user)
    db.session.commit()
    return user


def test_store_rejects_duplicate_name_ignoring_case(app):
    user = _user()
    db.session.add(CustomFood(user_id=user.id, food_name="Oats", calories_per_100g=380))
    db.session.commit()

    db.session.add(CustomFood(user_id=user.id, food_name="oats", calories_per_100g=370))
    with pytest.raises(IntegrityError):
        db.session.commit()
    db.session.rollback()

    # Other users keep their own namespace
    other = _user("other-cook@example.com")
    db.session.add(CustomFood(user_id=other.id, food_name="OATS", calories_per_100g=370))
    db.session.commit()


def test_concurrent_upsert_updates_winner(app, monkeypatch):
    user = _user()
    winner = CustomFood(user_id=user.id, food_name="Oats", calories_per_100g=380)
    db.session.add(winner)
    db.session.commit()
    winner_id = winner.id

    real_find = custom_food_service.find_by_name
    calls = []

    def find_after_race(user_id, food_name):
        calls.append(food_name)
        if len(calls) == 1:
            return None
        return real_find(user_id, food_name)

    monkeypatch.setattr(custom_food_service, "find_by_name", find_after_race)

    food, created = custom_food_service.upsert_custom_food(user.id, {
        "food_name": "OATS", "calories_per_100g": 389, "protein_per_100g": 17,
    })
    assert created is False
    assert food.id == winner_id
    assert food.calories_per_100g == 389
    assert food.protein_per_100g == 17
    assert CustomFood.query.filter_by(user_id=user.id).count() == 1


def test_rename_race_reports_clash(app, monkeypatch):
    user = _user()
    db.session.add(CustomFood(user_id=user.id, food_name="Tempeh", calories_per_100g=192))
    tofu = CustomFood(user_id=user.id, food_name="Tofu", calories_per_100g=76)
    db.session.add(tofu)
    db.session.commit()

    # The clash check misses a name committed concurrently
    monkeypatch.setattr(custom_food_service, "find_by_name", lambda user_id, food_name: None)

    with pytest.raises(ValidationError):
        custom_food_service.update_custom_food(user.id, tofu.id, {"food_name": "tempeh"})
    assert db.session.get(CustomFood, tofu.id).food_name == "Tofu"
