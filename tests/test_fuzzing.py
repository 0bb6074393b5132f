import json
import random
from collections import Counter

import requests
from faker import Faker

from src.recipe_hub.api_client import MealDBClient
from src.recipe_hub.config import FAVORITES_KEY
from src.recipe_hub.favorites import (
    _safe_json_loads,
    load_favorites,
    toggle_favorite,
)
from src.recipe_hub.models import MealDetail, MealSummary

fake = Faker()


# not tests
def generate_random_summary(ids=None):
    return MealSummary(
        id=random.choice(ids) if ids else str(fake.random_int(1, 99999)),
        title=fake.sentence(nb_words=3),
        thumbnail=fake.image_url(),
    )


def generate_random_lookup_record():
    return {
        "idMeal": str(fake.random_int(1, 99999)),
        "strMeal": fake.sentence(),
        "strCategory": fake.word(),
        "strArea": fake.country(),
        "strInstructions": fake.paragraph(),
        **{
            f"strIngredient{i}": random.choice([fake.word(), "", " ", None])
            for i in range(1, 21)
        },
        **{
            f"strMeasure{i}": random.choice([fake.word(), "", None])
            for i in range(1, 21)
        },
        "strYoutube": random.choice([fake.url(), "", None]),
    }


# api_client
def test_search_fuzzing(mocked_requests):
    client = MealDBClient()
    for _ in range(20):
        roll = random.random()
        mocked_requests.side_effect = None
        if roll > 0.6:
            mocked_requests.return_value.status_code = 200
            mocked_requests.return_value.json.return_value = {
                "meals": [
                    {"idMeal": str(i), "strMeal": fake.sentence()}
                    for i in range(random.randint(0, 5))
                ]
            }
        elif roll > 0.3:
            mocked_requests.return_value.status_code = random.choice(
                [400, 404, 500]
            )
            mocked_requests.return_value.json.return_value = {}
        else:
            mocked_requests.side_effect = requests.ConnectionError()

        result = client.search_by_ingredient(fake.word())
        assert isinstance(result, list)
        assert all(isinstance(m, MealSummary) for m in result)


def test_lookup_fuzzing(mocked_requests):
    client = MealDBClient()
    for _ in range(20):
        if random.random() > 0.3:
            mocked_requests.return_value.status_code = 200
            mocked_requests.return_value.json.return_value = {
                "meals": [generate_random_lookup_record()]
            }
        else:
            mocked_requests.return_value.status_code = random.choice(
                [400, 404, 500]
            )
            mocked_requests.return_value.json.return_value = {}

        result = client.lookup_by_id(str(fake.random_int(1, 99999)))
        assert result is None or isinstance(result, MealDetail)


# models
def test_detail_ingredients_fuzzing():
    for _ in range(50):
        raw = generate_random_lookup_record()
        detail = MealDetail.from_json(raw)
        assert len(detail.ingredients) <= 20
        assert all(name and name == name.strip() for name in detail.ingredients)
        assert detail.youtube is None or detail.youtube


# favorites
def test_toggle_sequence_keeps_ids_unique(local_storage):
    ids = [str(i) for i in range(5)]
    for _ in range(100):
        toggle_favorite(generate_random_summary(ids), local_storage)

        stored = json.loads(local_storage.getItem(FAVORITES_KEY))
        counts = Counter(item["id"] for item in stored)
        assert all(count == 1 for count in counts.values())


def test_double_toggle_restores_membership(local_storage):
    ids = [str(i) for i in range(5)]
    for _ in range(20):
        toggle_favorite(generate_random_summary(ids), local_storage)

    for _ in range(20):
        before = sorted(m.id for m in load_favorites(local_storage))
        item = generate_random_summary(ids)
        toggle_favorite(item, local_storage)
        toggle_favorite(item, local_storage)
        assert sorted(m.id for m in load_favorites(local_storage)) == before


def test_safe_json_loads_fuzzing():
    for _ in range(20):
        if random.random() > 0.3:
            test_data = json.dumps(
                [generate_random_summary().to_dict()
                 for _ in range(random.randint(0, 5))]
            )
        elif random.random() > 0.5:
            test_data = fake.text()
        else:
            test_data = None

        result = _safe_json_loads(test_data)
        assert isinstance(result, list)


def test_load_favorites_fuzzing(local_storage):
    for _ in range(20):
        local_storage.setItem(
            FAVORITES_KEY, random.choice([fake.text(), "[]", "{}", "[1, 2]"])
        )
        assert load_favorites(local_storage) == []
