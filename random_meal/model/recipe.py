from dataclasses import dataclass, field

REQUIRED_KEYS = ["strMeal", "strCategory", "strArea", "strInstructions", "ingredients", "youtubeQuery"]


@dataclass
class Ingredient:
    ingredient: str = ""
    measure: str = ""


@dataclass
class Recipe:
    id: str | None = None
    name: str = ""
    category: str = ""
    area: str = ""
    instructions: str = ""
    tags: str = ""
    ingredients: list[Ingredient] = field(default_factory=list)
    youtube_query: str = ""
    thumbnail: str | None = None

    @classmethod
    def from_dict(cls, recipe_data: dict) -> "Recipe":
        """Build a recipe from the JSON returned by the recipe model.

        Raises ValueError when the data is not an object, a required key is missing or an ingredient is malformed.
        """
        if not isinstance(recipe_data, dict):
            raise ValueError("Recipe must be a JSON object")

        missing = [key for key in REQUIRED_KEYS if key not in recipe_data]
        if missing:
            raise ValueError(f"Recipe is missing required fields: {', '.join(missing)}")

        raw_ingredients = recipe_data["ingredients"]
        if not isinstance(raw_ingredients, list):
            raise ValueError("Recipe ingredients must be a list")

        ingredients = []
        for entry in raw_ingredients:
            if not isinstance(entry, dict) or "ingredient" not in entry or "measure" not in entry:
                raise ValueError(f"Malformed ingredient entry: {entry!r}")
            ingredients.append(Ingredient(ingredient=entry["ingredient"], measure=entry["measure"]))

        return Recipe(id=recipe_data.get("id"), name=recipe_data["strMeal"], category=recipe_data["strCategory"],
                      area=recipe_data["strArea"], instructions=recipe_data["strInstructions"],
                      tags=recipe_data.get("strTags") or "", ingredients=ingredients,
                      youtube_query=recipe_data["youtubeQuery"], thumbnail=recipe_data.get("strMealThumb"))
