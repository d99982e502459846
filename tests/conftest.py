import json

import pytest

MOUSSAKA = {
    "id": "52970",
    "strMeal": "Moussaka",
    "strCategory": "Beef",
    "strArea": "Greek",
    "strInstructions": "Slice the aubergines.\nFry the mince.\nLayer and bake for 45 minutes.",
    "strTags": "Casserole,Baked",
    "ingredients": [
        {"ingredient": "Aubergine", "measure": "2 large"},
        {"ingredient": "Beef mince", "measure": "500g"},
        {"ingredient": "Bechamel", "measure": "400ml"},
    ],
    "youtubeQuery": "traditional greek moussaka recipe",
}


@pytest.fixture
def moussaka_json() -> str:
    return json.dumps(MOUSSAKA)


@pytest.fixture
def moussaka() -> dict:
    return json.loads(json.dumps(MOUSSAKA))
