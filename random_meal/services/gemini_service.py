import asyncio
import base64
import functools
import json
import logging
import os
from dataclasses import dataclass

from google import genai
from google.genai import types

from random_meal.media import is_youtube_url, placeholder_image_url
from random_meal.model.recipe import REQUIRED_KEYS, Recipe

API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
PROJECT_ID = os.getenv("PROJECT_ID")
LOCATION = os.getenv("LOCATION", "europe-north1")

RECIPE_MODEL = os.getenv("RECIPE_MODEL", "gemini-2.5-flash")
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "gemini-2.5-flash-image")
VIDEO_MODEL = os.getenv("VIDEO_MODEL", "gemini-2.5-flash")

RECIPE_PROMPT = (
    "Generate a random, delicious, and authentic recipe from any cuisine in the world. "
    "It should be a real, established dish. "
    "Provide the details in the specified JSON format."
)
RECIPE_SYSTEM_INSTRUCTION = "You are a culinary API that acts like TheMealDB. Return a single random recipe."
# High temperature so consecutive requests land on different dishes.
RECIPE_TEMPERATURE = 1.0

RECIPE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "strMeal": types.Schema(type=types.Type.STRING, description="Name of the meal"),
        "strCategory": types.Schema(type=types.Type.STRING,
                                    description="Category of the meal (e.g., Dessert, Beef, Chicken)"),
        "strArea": types.Schema(type=types.Type.STRING, description="Origin area of the meal (e.g., Canadian, Italian)"),
        "strInstructions": types.Schema(type=types.Type.STRING, description="Comprehensive cooking instructions"),
        "strTags": types.Schema(type=types.Type.STRING, description="Comma separated tags (e.g., Sweet, Snack)"),
        "ingredients": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "ingredient": types.Schema(type=types.Type.STRING),
                    "measure": types.Schema(type=types.Type.STRING),
                },
                required=["ingredient", "measure"],
            ),
            description="List of ingredients and their measurements",
        ),
        "youtubeQuery": types.Schema(type=types.Type.STRING,
                                     description="Search query string to find a video of this recipe on YouTube"),
    },
    required=REQUIRED_KEYS,
)

log = logging.getLogger(__name__)


class RecipeGenerationError(Exception):
    """The recipe model returned nothing usable."""


@dataclass
class RecipeAssets:
    image_url: str
    video_url: str | None = None


@functools.lru_cache(maxsize=1)
def get_client() -> genai.Client:
    if PROJECT_ID:
        log.debug(f"Using Vertex AI in project {PROJECT_ID} ({LOCATION})")
        return genai.Client(vertexai=True, project=PROJECT_ID, location=LOCATION)
    if not API_KEY:
        raise RuntimeError("GEMINI_API_KEY is not set. Export it, or set PROJECT_ID to use Vertex AI.")
    return genai.Client(api_key=API_KEY)


async def get_random_meal(client: genai.Client | None = None) -> Recipe:
    try:
        client = client or get_client()
        response = await client.aio.models.generate_content(
            model=RECIPE_MODEL,
            contents=RECIPE_PROMPT,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=RECIPE_SCHEMA,
                system_instruction=RECIPE_SYSTEM_INSTRUCTION,
                temperature=RECIPE_TEMPERATURE,
            ),
        )

        text = response.text
        if not text:
            raise RecipeGenerationError("No response from Gemini")

        try:
            recipe = Recipe.from_dict(json.loads(text))
        except (json.JSONDecodeError, ValueError) as e:
            raise RecipeGenerationError(f"Malformed recipe from Gemini: {e}") from e
    except Exception as e:
        log.error(f"Error generating recipe: {e}", exc_info=True)
        raise

    log.info(f"Generated recipe: {recipe.name} ({recipe.area}, {recipe.category})")
    return recipe


async def generate_dish_image(recipe_title: str, client: genai.Client | None = None) -> str | None:
    """Generate a photo of the dish and return it as a base64 data URL, or None."""
    prompt = (f"A professional, appetizing food photography shot of {recipe_title}. "
              f"High resolution, centered, culinary magazine style.")
    try:
        client = client or get_client()
        response = await client.aio.models.generate_content(model=IMAGE_MODEL, contents=prompt)
    except Exception as e:
        log.warning(f"Error generating image: {e}", exc_info=True)
        return None

    if not response.candidates or not response.candidates[0].content:
        return None
    for part in response.candidates[0].content.parts or []:
        if part.inline_data and part.inline_data.data:
            mime_type = part.inline_data.mime_type or "image/png"
            data = base64.b64encode(part.inline_data.data).decode("utf-8")
            return f"data:{mime_type};base64,{data}"
    return None


async def get_recipe_video(recipe_name: str, client: genai.Client | None = None) -> str | None:
    """Ask a search-grounded model for a YouTube tutorial and return its URL, or None."""
    try:
        client = client or get_client()
        response = await client.aio.models.generate_content(
            model=VIDEO_MODEL,
            contents=f"Find a YouTube video tutorial for making {recipe_name}.",
            config=types.GenerateContentConfig(tools=[types.Tool(google_search=types.GoogleSearch())]),
        )
    except Exception as e:
        log.warning(f"Error finding video: {e}", exc_info=True)
        return None

    if not response.candidates or not response.candidates[0].grounding_metadata:
        return None
    for chunk in response.candidates[0].grounding_metadata.grounding_chunks or []:
        if chunk.web and is_youtube_url(chunk.web.uri):
            return chunk.web.uri
    return None


async def load_recipe_assets(recipe_name: str, client: genai.Client | None = None) -> RecipeAssets:
    """Look up the dish image and tutorial video concurrently.

    A missing or failed image falls back to a placeholder, a missing video stays None.
    """
    placeholder = placeholder_image_url(recipe_name)
    image_url, video_url = await asyncio.gather(
        generate_dish_image(recipe_name, client=client),
        get_recipe_video(recipe_name, client=client),
        return_exceptions=True,
    )

    if isinstance(image_url, Exception):
        log.warning(f"Error loading image for {recipe_name}: {image_url}", exc_info=image_url)
        image_url = None
    if isinstance(video_url, Exception):
        log.warning(f"Error loading video for {recipe_name}: {video_url}", exc_info=video_url)
        video_url = None

    return RecipeAssets(image_url=image_url or placeholder, video_url=video_url)
