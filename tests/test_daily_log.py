from datetime import date

from calorie_tracker.extensions import db
from calorie_tracker.models import DailyLog, User
from calorie_tracker.services import daily_log_service

DAY = "2026-10-07"


def add_food(client, headers, calories=None, date=DAY, **extra):
    body = {"action": "addFood", "date": date, "food_name": "Rice", "quantity_grams": 100, **extra}
    if calories is not None:
        body["calories"] = calories
    r = client.post("/api/daily-log", json=body, headers=headers)
    assert r.status_code == 201, r.data
    return r.get_json()["data"]


def test_health_and_index(client):
    assert client.get("/").status_code == 200
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json()["database"] == "healthy"


def test_day_without_log_is_empty(client, headers):
    r = client.get(f"/api/daily-log?date={DAY}", headers=headers)
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["log"] is None
    assert data["entries"] == []
    assert data["totals"]["calories"] == 0


def test_create_daily_log_is_idempotent(client, headers):
    body = {"action": "create", "date": DAY}
    first = client.post("/api/daily-log", json=body, headers=headers).get_json()["data"]
    second = client.post("/api/daily-log", json=body, headers=headers).get_json()["data"]
    assert first["id"] == second["id"]
    assert first["log_date"] == DAY


def test_totals_sum_entries(client, headers):
    add_food(client, headers, calories=300, protein=10)
    add_food(client, headers, calories=200, protein=5)

    data = client.get(f"/api/daily-log?date={DAY}", headers=headers).get_json()["data"]
    assert len(data["entries"]) == 2
    assert data["totals"]["calories"] == 500
    assert data["totals"]["protein"] == 15
    # No meal plans means a zero target
    assert data["target"] == 0
    assert data["remaining"] == -500
    assert data["status"] == "danger"


def test_add_food_from_per_100g_values(client, headers):
    entry = add_food(client, headers, quantity_grams=250, calories_per_100g=130, carbs_per_100g=28)
    assert entry["calories"] == 325
    assert entry["carbs"] == 70


def test_add_food_from_custom_food(client, headers):
    r = client.post("/api/custom-foods", json={
        "food_name": "Oats", "calories_per_100g": 380, "protein_per_100g": 13,
    }, headers=headers)
    food_id = r.get_json()["data"]["id"]

    entry = add_food(client, headers, quantity_grams=50, custom_food_id=food_id)
    assert entry["calories"] == 190
    assert entry["protein"] == 6.5


def test_add_food_validation(client, headers):
    r = client.post("/api/daily-log", json={"action": "addFood", "quantity_grams": 100, "calories": 50}, headers=headers)
    assert r.status_code == 400
    assert r.get_json()["error"] == "food_name: Missing data for required field."

    r = client.post("/api/daily-log", json={"action": "addFood", "food_name": "Tea", "quantity_grams": 100}, headers=headers)
    assert r.status_code == 400
    assert r.get_json()["error"].startswith("calories:")

    r = client.post("/api/daily-log", json={"action": "eat"}, headers=headers)
    assert r.status_code == 400

    r = client.post("/api/daily-log", json={
        "action": "addFood", "food_name": "Tea", "quantity_grams": 100, "calories": 5, "meal_plan_id": 999,
    }, headers=headers)
    assert r.status_code == 404


def test_bad_query_parameters(client, headers):
    assert client.get("/api/daily-log?date=yesterday", headers=headers).status_code == 400
    assert client.get("/api/daily-log?action=export", headers=headers).status_code == 400


def test_update_weight_and_notes(client, headers):
    r = client.put("/api/daily-log", json={"date": DAY, "weight": 71.5, "notes": "rest day"}, headers=headers)
    assert r.status_code == 200
    data = r.get_json()["data"]
    assert data["weight"] == 71.5
    assert data["notes"] == "rest day"


def test_delete_food_entry(client, headers, other_headers):
    entry = add_food(client, headers, calories=300)

    r = client.delete(f"/api/daily-log?foodEntryId={entry['id']}", headers=other_headers)
    assert r.status_code == 403

    assert client.delete("/api/daily-log?foodEntryId=999", headers=headers).status_code == 404
    assert client.delete("/api/daily-log", headers=headers).status_code == 400

    r = client.delete(f"/api/daily-log/entries/{entry['id']}", headers=headers)
    assert r.status_code == 200
    assert r.get_json() == {"data": {"success": True}}

    data = client.get(f"/api/daily-log?date={DAY}", headers=headers).get_json()["data"]
    assert data["entries"] == []


def test_entries_grouped_by_meal(client, headers):
    plans = client.post("/api/meal-plans", json={"action": "createDefaults"}, headers=headers).get_json()["data"]
    breakfast = plans[0]
    add_food(client, headers, calories=300, meal_plan_id=breakfast["id"])
    add_food(client, headers, calories=50)

    data = client.get(f"/api/daily-log?date={DAY}", headers=headers).get_json()["data"]
    assert data["target"] == 1700
    assert data["remaining"] == 1350
    assert data["status"] == "on track"

    meals = data["meals"]
    assert [m["name"] for m in meals] == ["Breakfast", "Lunch", "Snack", "Dinner", None]
    assert meals[0]["totals"]["calories"] == 300
    assert meals[0]["remaining"] == 100
    assert meals[1]["totals"]["calories"] == 0
    assert meals[-1]["totals"]["calories"] == 50


def test_logs_are_isolated_per_user(client, headers, other_headers):
    add_food(client, headers, calories=300)
    data = client.get(f"/api/daily-log?date={DAY}", headers=other_headers).get_json()["data"]
    assert data["log"] is None
    assert data["totals"]["calories"] == 0


def _log_week(client, headers):
    values = [500, 600, None, 400, 300, 700, 200]
    for day, calories in enumerate(values, start=1):
        if calories is not None:
            add_food(client, headers, calories=calories, date=f"2026-10-{day:02d}")


def test_history_newest_first(client, headers):
    _log_week(client, headers)

    r = client.get(f"/api/daily-log?action=history&date={DAY}&days=7", headers=headers)
    assert r.status_code == 200
    days = r.get_json()["data"]
    assert len(days) == 6
    assert days[0]["date"] == DAY
    assert days[0]["total_calories"] == 200
    assert days[-1]["date"] == "2026-10-01"
    assert "2026-10-03" not in [d["date"] for d in days]

    days = client.get(f"/api/daily-log?action=history&date={DAY}&days=2", headers=headers).get_json()["data"]
    assert [d["date"] for d in days] == ["2026-10-07", "2026-10-06"]


def test_stats_with_explicit_target(client, headers):
    _log_week(client, headers)

    r = client.get(f"/api/daily-log?action=stats&date={DAY}&days=7&target=600", headers=headers)
    assert r.status_code == 200, r.data
    data = r.get_json()["data"]
    assert data["start"] == "2026-10-01"
    assert data["end"] == DAY
    assert len(data["days"]) == 7
    assert data["days"][2]["has_data"] is False

    stats = data["stats"]
    assert stats["total_deficit"] == 900
    assert stats["days_on_track"] == 5
    assert stats["current_streak"] == 1
    assert stats["best_streak"] == 2
    assert stats["estimated_fat_direction"] == "lost"


def test_stats_target_from_meal_plans(client, headers):
    client.post("/api/meal-plans", json={"action": "createDefaults"}, headers=headers)
    add_food(client, headers, calories=1500)

    data = client.get(f"/api/daily-log?action=stats&period=week&date={DAY}", headers=headers).get_json()["data"]
    assert data["daily_target"] == 1700
    assert data["start"] == "2026-10-04"
    assert data["end"] == "2026-10-10"
    assert data["stats"]["total_deficit"] == 200

    # Defaults have no planned foods
    data = client.get(
        f"/api/daily-log?action=stats&date={DAY}&target_source=planned_foods", headers=headers,
    ).get_json()["data"]
    assert data["daily_target"] == 0

    r = client.get("/api/daily-log?action=stats&period=year", headers=headers)
    assert r.status_code == 400


def test_out_of_range_ids(client, headers):
    huge = 10**30
    assert client.delete(f"/api/daily-log?foodEntryId={huge}", headers=headers).status_code == 404
    assert client.delete(f"/api/daily-log/entries/{huge}", headers=headers).status_code == 404

    r = client.post("/api/daily-log", json={
        "action": "addFood", "food_name": "Tea", "quantity_grams": 100, "calories": 5, "meal_plan_id": huge,
    }, headers=headers)
    assert r.status_code == 400
    assert r.get_json()["error"].startswith("meal_plan_id:")

    r = client.post("/api/daily-log", json={
        "action": "addFood", "food_name": "Tea", "quantity_grams": 100, "custom_food_id": huge,
    }, headers=headers)
    assert r.status_code == 400


def test_concurrent_log_creation_returns_existing_row(app, monkeypatch):
    user = User(email="race@example.com", password="x")
    db.session.add(user)
    db.session.commit()

    # Another request commits the same day after this one looked it up
    winner = DailyLog(user_id=user.id, log_date=date(2026, 10, 7))
    db.session.add(winner)
    db.session.commit()
    winner_id = winner.id

    real_find = daily_log_service.find_daily_log
    calls = []

    def find_after_race(user_id, log_date):
        calls.append(log_date)
        if len(calls) == 1:
            return None
        return real_find(user_id, log_date)

    monkeypatch.setattr(daily_log_service, "find_daily_log", find_after_race)

    log = daily_log_service.get_or_create_daily_log(user.id, date(2026, 10, 7))
    assert log.id == winner_id
    assert len(calls) == 2
    assert DailyLog.query.filter_by(user_id=user.id).count() == 1
