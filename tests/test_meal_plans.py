def create_plan(client, headers, name="Lunch", target=600):
    r = client.post("/api/meal-plans", json={"action": "create", "name": name, "target_calories": target}, headers=headers)
    assert r.status_code == 201, r.data
    return r.get_json()["data"]


def add_planned(client, headers, plan_id, calories, name="Food"):
    r = client.post("/api/planned-foods", json={
        "meal_plan_id": plan_id, "food_name": name, "quantity_grams": 100, "calories": calories,
    }, headers=headers)
    assert r.status_code == 201, r.data
    return r.get_json()["data"]


def plan_target(client, headers, plan_id):
    plans = client.get("/api/meal-plans", headers=headers).get_json()["data"]
    return next(p["target_calories"] for p in plans if p["id"] == plan_id)


def test_create_default_meal_plans(client, headers):
    r = client.post("/api/meal-plans", json={"action": "createDefaults"}, headers=headers)
    assert r.status_code == 201
    plans = r.get_json()["data"]
    assert [p["name"] for p in plans] == ["Breakfast", "Lunch", "Snack", "Dinner"]
    assert [p["target_calories"] for p in plans] == [400, 600, 200, 500]
    assert all(p["is_default"] for p in plans)

    again = client.post("/api/meal-plans", json={"action": "createDefaults"}, headers=headers).get_json()["data"]
    assert [p["id"] for p in again] == [p["id"] for p in plans]

    plan = create_plan(client, headers, name="Late snack", target=150)
    assert plan["meal_order"] == 5
    assert plan["is_default"] is False


def test_target_follows_planned_foods(client, headers):
    plan = create_plan(client, headers)
    assert plan["target_calories"] == 600

    a = add_planned(client, headers, plan["id"], 100)
    assert plan_target(client, headers, plan["id"]) == 100
    b = add_planned(client, headers, plan["id"], 200)
    assert plan_target(client, headers, plan["id"]) == 300
    c = add_planned(client, headers, plan["id"], 50)
    assert plan_target(client, headers, plan["id"]) == 350

    r = client.put("/api/planned-foods", json={"id": b["id"], "calories": 250}, headers=headers)
    assert r.status_code == 200
    assert plan_target(client, headers, plan["id"]) == 400

    client.delete(f"/api/planned-foods?id={a['id']}", headers=headers)
    assert plan_target(client, headers, plan["id"]) == 300
    client.delete(f"/api/planned-foods?id={b['id']}", headers=headers)
    assert plan_target(client, headers, plan["id"]) == 50

    # Removing the last planned food keeps the last sum
    client.delete(f"/api/planned-foods?id={c['id']}", headers=headers)
    assert plan_target(client, headers, plan["id"]) == 50


def test_manual_target_only_without_planned_foods(client, headers):
    plan = create_plan(client, headers)

    r = client.put("/api/meal-plans", json={"id": plan["id"], "target_calories": 700, "name": "Big lunch"}, headers=headers)
    assert r.status_code == 200
    assert r.get_json()["data"]["target_calories"] == 700
    assert r.get_json()["data"]["name"] == "Big lunch"

    add_planned(client, headers, plan["id"], 450)
    r = client.put("/api/meal-plans", json={"id": plan["id"], "target_calories": 999}, headers=headers)
    assert r.get_json()["data"]["target_calories"] == 450


def test_food_entries_do_not_change_target(client, headers):
    plan = create_plan(client, headers)
    r = client.post("/api/daily-log", json={
        "action": "addFood", "food_name": "Soup", "quantity_grams": 300, "calories": 900, "meal_plan_id": plan["id"],
    }, headers=headers)
    assert r.status_code == 201
    assert plan_target(client, headers, plan["id"]) == 600


def test_delete_meal_plan_cascades(client, headers):
    plan = create_plan(client, headers)
    add_planned(client, headers, plan["id"], 100)
    r = client.post("/api/daily-log", json={
        "action": "addFood", "date": "2026-10-07", "food_name": "Soup", "quantity_grams": 300,
        "calories": 200, "meal_plan_id": plan["id"],
    }, headers=headers)
    entry_id = r.get_json()["data"]["id"]

    r = client.delete(f"/api/meal-plans?id={plan['id']}", headers=headers)
    assert r.status_code == 200

    assert client.get("/api/meal-plans", headers=headers).get_json()["data"] == []
    assert client.get("/api/planned-foods", headers=headers).get_json()["data"] == []

    entries = client.get("/api/daily-log?date=2026-10-07", headers=headers).get_json()["data"]["entries"]
    assert [e["id"] for e in entries] == [entry_id]
    assert entries[0]["meal_plan_id"] is None


def test_plans_are_isolated_per_user(client, headers, other_headers):
    plan = create_plan(client, headers)
    food = add_planned(client, headers, plan["id"], 100)

    assert client.get("/api/meal-plans", headers=other_headers).get_json()["data"] == []
    assert client.put("/api/meal-plans", json={"id": plan["id"], "name": "Mine"}, headers=other_headers).status_code == 404
    assert client.delete(f"/api/meal-plans?id={plan['id']}", headers=other_headers).status_code == 404

    r = client.post("/api/planned-foods", json={
        "meal_plan_id": plan["id"], "food_name": "Intruder", "quantity_grams": 1, "calories": 5000,
    }, headers=other_headers)
    assert r.status_code == 404
    assert client.delete(f"/api/planned-foods?id={food['id']}", headers=other_headers).status_code == 404
    assert plan_target(client, headers, plan["id"]) == 100


def test_planned_foods_filtered_by_plan(client, headers):
    lunch = create_plan(client, headers)
    dinner = create_plan(client, headers, name="Dinner", target=500)
    add_planned(client, headers, lunch["id"], 100, name="Salad")
    add_planned(client, headers, dinner["id"], 300, name="Pasta")

    foods = client.get(f"/api/planned-foods?meal_plan_id={dinner['id']}", headers=headers).get_json()["data"]
    assert [f["food_name"] for f in foods] == ["Pasta"]


def test_meal_plan_validation(client, headers):
    r = client.post("/api/meal-plans", json={"action": "create"}, headers=headers)
    assert r.status_code == 400
    assert r.get_json()["error"] == "name: Missing data for required field."

    assert client.put("/api/meal-plans", json={"name": "x"}, headers=headers).status_code == 400
    assert client.delete("/api/meal-plans", headers=headers).status_code == 400


def test_out_of_range_ids(client, headers):
    huge = 10**30
    assert client.delete(f"/api/meal-plans?id={huge}", headers=headers).status_code == 404
    assert client.delete("/api/meal-plans?id=-3", headers=headers).status_code == 404
    assert client.put("/api/meal-plans", json={"id": huge, "name": "x"}, headers=headers).status_code == 400

    plan = create_plan(client, headers)
    r = client.put("/api/meal-plans", json={"id": plan["id"], "meal_order": huge}, headers=headers)
    assert r.status_code == 400

    assert client.delete(f"/api/planned-foods?id={huge}", headers=headers).status_code == 404
    assert client.get(f"/api/planned-foods?meal_plan_id={huge}", headers=headers).get_json()["data"] == []
    r = client.post("/api/planned-foods", json={
        "meal_plan_id": huge, "food_name": "Rice", "quantity_grams": 100, "calories": 130,
    }, headers=headers)
    assert r.status_code == 400
    assert client.put("/api/planned-foods", json={"id": huge, "calories": 1}, headers=headers).status_code == 400
