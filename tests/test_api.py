import pytest
from fastapi.testclient import TestClient

import api.index as api_module
from recipe_cart.exceptions import AuthenticationError, GenerationError, RateLimitError
from recipe_cart.schema import ProcessedRecipe


@pytest.fixture
def client():
    return TestClient(api_module.app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_map_ingredients_endpoint(client):
    response = client.post(
        "/ingredients/map",
        json={
            "ingredients": [
                {"name": "Salt", "quantity": {"value": "1", "unit": "tsp"}},
                {"name": "Pepper", "quantity": {"value": "2", "unit": "cup"}},
            ]
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["matchedItems"][0]["matchedProduct"]["name"] == "Tata Salt Iodized"
    assert body["matchedItems"][0]["calculatedQuantityNeeded"] == 1
    assert body["unavailableItems"][0]["originalIngredientName"] == "Pepper"


@pytest.mark.parametrize(
    "payload",
    [
        {"ingredients": {"name": "Salt"}},
        {"ingredients": [{"name": "Salt", "quantity": {"value": 1, "unit": "tsp"}}]},
        {"recipe": "Dal"},
        ["Salt"],
    ],
)
def test_map_ingredients_contract_violation(client, payload):
    response = client.post("/ingredients/map", json=payload)

    assert response.status_code == 422


def test_process_recipe_endpoint(client, mocker):
    processed = ProcessedRecipe(recipe_name="Dal Tadka", servings=2, recipe_steps=["Boil the dal."])
    process = mocker.patch.object(api_module, "process_recipe", return_value=processed)

    response = client.post("/recipes/process", json={"recipeName": "Dal Tadka", "servings": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["recipeName"] == "Dal Tadka"
    assert body["recipeSteps"] == ["Boil the dal."]
    assert body["matchedItems"] == []
    assert process.call_args.args == ("Dal Tadka", 2)


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (ValueError("Servings must be a positive number"), 400),
        (AuthenticationError("bad key"), 401),
        (RateLimitError("quota"), 429),
        (GenerationError("timeout"), 502),
        (RuntimeError("boom"), 500),
    ],
)
def test_process_recipe_error_mapping(client, mocker, error, status_code):
    mocker.patch.object(api_module, "process_recipe", side_effect=error)

    response = client.post("/recipes/process", json={"recipeName": "Dal Tadka", "servings": 2})

    assert response.status_code == status_code
