import pytest

from nutribase import create_app
from nutribase.extensions import db
from nutribase.models.ingredient import Ingredient
from nutribase.models.meal import Meal
from nutribase.models.nutrient import Nutrient, NutrientValue


@pytest.fixture()
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


EGG = {
    "name": "Egg",
    "serving_size_in_grams": 50,
    "nutrients": [{"name": "Protein", "amount": 6}],
}


def create_ingredient(client, body):
    r = client.post("/api/ingredients", json=body)
    assert r.status_code == 201, r.data
    return r.get_json()["ingredient_id"]


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"status": "online", "database": "healthy"}


def test_create_and_read_ingredient(client):
    ingredient_id = create_ingredient(client, EGG)

    r = client.get(f"/api/ingredients/{ingredient_id}")
    assert r.status_code == 200
    assert r.get_json() == {
        "ingredient_id": ingredient_id,
        "name": "Egg",
        "nutrients": [{"name": "Protein", "amount_per_100g": 12.0}],
    }


def test_ingredient_without_nutrients(client):
    ingredient_id = create_ingredient(client, {"name": "Salt", "serving_size_in_grams": 1, "nutrients": []})

    r = client.get(f"/api/ingredients/{ingredient_id}")
    assert r.status_code == 200
    assert r.get_json()["nutrients"] == []


def test_duplicate_ingredient_returns_conflict(client, app):
    ingredient_id = create_ingredient(client, EGG)

    r = client.post("/api/ingredients", json={
        "name": "Egg",
        "serving_size_in_grams": 100,
        "nutrients": [{"name": "Protein", "amount": 99}, {"name": "Fat", "amount": 11}],
    })
    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "DUPLICATE_ENTRY"

    r = client.get(f"/api/ingredients/{ingredient_id}")
    assert r.get_json()["nutrients"] == [{"name": "Protein", "amount_per_100g": 12.0}]
    with app.app_context():
        assert Nutrient.query.count() == 1


def test_shared_nutrient_is_created_once(client, app):
    create_ingredient(client, EGG)
    create_ingredient(client, {
        "name": "Tofu",
        "serving_size_in_grams": 200,
        "nutrients": [{"name": "Protein", "amount": 16}, {"name": "Calcium", "amount": 0.7}],
    })

    with app.app_context():
        assert Nutrient.query.filter_by(name="Protein").count() == 1
        assert Nutrient.query.count() == 2
        assert NutrientValue.query.count() == 3


def test_nutrient_names_are_trimmed_before_matching(client, app):
    egg_id = create_ingredient(client, {
        "name": "Egg",
        "serving_size_in_grams": 50,
        "nutrients": [{"name": " Protein ", "amount": 6}],
    })
    create_ingredient(client, {
        "name": "Tofu",
        "serving_size_in_grams": 200,
        "nutrients": [{"name": "Protein", "amount": 16}],
    })

    with app.app_context():
        assert [n.name for n in Nutrient.query.all()] == ["Protein"]
        assert NutrientValue.query.count() == 2

    r = client.get(f"/api/ingredients/{egg_id}")
    assert r.get_json()["nutrients"] == [{"name": "Protein", "amount_per_100g": 12.0}]


def test_ingredient_name_is_trimmed_before_conflict_check(client, app):
    create_ingredient(client, EGG)

    r = client.post("/api/ingredients", json={**EGG, "name": "Egg "})
    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "DUPLICATE_ENTRY"
    with app.app_context():
        assert [i.name for i in Ingredient.query.all()] == ["Egg"]


@pytest.mark.parametrize("body", [
    {},
    {"name": "Rice", "nutrients": []},
    {"name": "Rice", "serving_size_in_grams": 0, "nutrients": []},
    {"name": "Rice", "serving_size_in_grams": -5, "nutrients": []},
    {"name": "   ", "serving_size_in_grams": 100, "nutrients": []},
    {"name": "Rice", "serving_size_in_grams": 100},
    {"name": "Rice", "serving_size_in_grams": 100, "nutrients": [{"name": "Carbohydrate"}]},
    {"name": "Rice", "serving_size_in_grams": 100, "nutrients": [
        {"name": "Carbohydrate", "amount": 28}, {"name": "Carbohydrate", "amount": 30},
    ]},
    {"name": "Rice", "serving_size_in_grams": 100, "nutrients": [{"name": "   ", "amount": 5}]},
    {"name": "Rice", "serving_size_in_grams": 100, "nutrients": [
        {"name": "Protein", "amount": 2}, {"name": " Protein", "amount": 3},
    ]},
])
def test_invalid_ingredient_body_rejected(client, app, body):
    r = client.post("/api/ingredients", json=body)
    assert r.status_code == 400, r.data
    assert r.get_json()["error"]["code"] == "VALIDATION_ERROR"
    with app.app_context():
        assert Ingredient.query.count() == 0


def test_malformed_json_rejected(client):
    r = client.post("/api/ingredients", data="{not json", content_type="application/json")
    assert r.status_code == 400


def test_get_missing_ingredient(client):
    r = client.get("/api/ingredients/999")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"


def test_delete_ingredient(client, app):
    ingredient_id = create_ingredient(client, EGG)

    r = client.delete(f"/api/ingredients/{ingredient_id}")
    assert r.status_code == 200
    assert r.get_json() == {"ingredient_id": ingredient_id, "name": "Egg"}

    assert client.get(f"/api/ingredients/{ingredient_id}").status_code == 404
    assert client.delete(f"/api/ingredients/{ingredient_id}").status_code == 404
    with app.app_context():
        assert NutrientValue.query.count() == 0


def test_create_and_read_meal(client):
    egg_id = create_ingredient(client, EGG)

    r = client.post("/api/meals", json={
        "name": "Breakfast",
        "date_time": "2024-01-01T08:00:00Z",
        "ingredients": [{"ingredient_id": egg_id, "amount_in_grams": 100}],
    })
    assert r.status_code == 201, r.data
    meal_id = r.get_json()["meal_id"]

    r = client.get(f"/api/meals/{meal_id}")
    assert r.status_code == 200
    assert r.get_json() == {
        "meal_id": meal_id,
        "name": "Breakfast",
        "date": "2024-01-01",
        "time": "08:00:00",
        "ingredients": [{"ingredient_id": egg_id, "amount_in_grams": 100.0, "name": "Egg"}],
    }


def test_meal_without_ingredients(client):
    r = client.post("/api/meals", json={"name": "Fast", "date_time": "2024-03-05T20:15:00"})
    assert r.status_code == 201
    meal_id = r.get_json()["meal_id"]

    data = client.get(f"/api/meals/{meal_id}").get_json()
    assert data["ingredients"] == []
    assert data["time"] == "20:15:00"


def test_meal_with_unknown_ingredient_is_rolled_back(client, app):
    egg_id = create_ingredient(client, EGG)

    r = client.post("/api/meals", json={
        "name": "Lunch",
        "date_time": "2024-01-01T12:00:00Z",
        "ingredients": [
            {"ingredient_id": egg_id, "amount_in_grams": 50},
            {"ingredient_id": 4242, "amount_in_grams": 75},
        ],
    })
    assert r.status_code == 500
    assert r.get_json()["error"]["code"] == "INTEGRITY_ERROR"
    with app.app_context():
        assert Meal.query.count() == 0


@pytest.mark.parametrize("body", [
    {"date_time": "2024-01-01T12:00:00Z"},
    {"name": "Lunch"},
    {"name": "Lunch", "date_time": "yesterday"},
    {"name": "Lunch", "date_time": "2024-01-01T12:00:00Z", "ingredients": [{"ingredient_id": "one", "amount_in_grams": 1}]},
    {"name": "Lunch", "date_time": "2024-01-01T12:00:00Z", "ingredients": [
        {"ingredient_id": 1, "amount_in_grams": 10}, {"ingredient_id": 1, "amount_in_grams": 20},
    ]},
])
def test_invalid_meal_body_rejected(client, body):
    r = client.post("/api/meals", json=body)
    assert r.status_code == 400, r.data
    assert r.get_json()["error"]["code"] == "VALIDATION_ERROR"


def test_get_missing_meal(client):
    r = client.get("/api/meals/31337")
    assert r.status_code == 404


def test_add_ingredient_to_meal(client):
    egg_id = create_ingredient(client, EGG)
    meal_id = client.post("/api/meals", json={
        "name": "Snack", "date_time": "2024-01-02T16:00:00Z",
    }).get_json()["meal_id"]

    r = client.put(f"/api/meals/{meal_id}/ingredients", json={"ingredient_id": egg_id, "amount_in_grams": 60})
    assert r.status_code == 201
    assert r.get_json() == {"ingredient_id": egg_id, "meal_id": meal_id, "amount_in_grams": 60.0}

    r = client.put(f"/api/meals/{meal_id}/ingredients", json={"ingredient_id": egg_id, "amount_in_grams": 60})
    assert r.status_code == 409
    assert r.get_json()["error"]["code"] == "DUPLICATE_ENTRY"

    lines = client.get(f"/api/meals/{meal_id}").get_json()["ingredients"]
    assert lines == [{"ingredient_id": egg_id, "amount_in_grams": 60.0, "name": "Egg"}]


def test_add_unknown_ingredient_to_meal(client):
    meal_id = client.post("/api/meals", json={
        "name": "Snack", "date_time": "2024-01-02T16:00:00Z",
    }).get_json()["meal_id"]

    r = client.put(f"/api/meals/{meal_id}/ingredients", json={"ingredient_id": 5, "amount_in_grams": 60})
    assert r.status_code == 500
    assert r.get_json()["error"]["code"] == "INTEGRITY_ERROR"


def test_add_ingredient_requires_body(client):
    r = client.put("/api/meals/1/ingredients", json={"amount_in_grams": 60})
    assert r.status_code == 400


def test_delete_meal(client, app):
    egg_id = create_ingredient(client, EGG)
    meal_id = client.post("/api/meals", json={
        "name": "Dinner",
        "date_time": "2024-01-03T19:00:00Z",
        "ingredients": [{"ingredient_id": egg_id, "amount_in_grams": 120}],
    }).get_json()["meal_id"]

    r = client.delete(f"/api/meals/{meal_id}")
    assert r.status_code == 200
    assert r.get_json() == {"meal_id": meal_id, "name": "Dinner"}
    assert client.get(f"/api/meals/{meal_id}").status_code == 404
    assert client.get(f"/api/ingredients/{egg_id}").status_code == 200


def test_unknown_route_is_json(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"
