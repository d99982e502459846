# state.py
import logging

import reflex as rx

from random_meal.media import youtube_embed_url, youtube_id, youtube_search_url
from random_meal.model.recipe import Recipe
from random_meal.services.gemini_service import get_random_meal, load_recipe_assets

FETCH_ERROR_MESSAGE = "Oops! The chef dropped the plate. Please try again."

log = logging.getLogger(__name__)


async def fetch_recipe() -> tuple[Recipe | None, str]:
    """Generate a recipe, returning it with an empty error or None with the retry message."""
    try:
        return await get_random_meal(), ""
    except Exception as e:
        log.error(f"Error fetching recipe: {e}", exc_info=True)
        return None, FETCH_ERROR_MESSAGE


def card_shows(mounted: bool, current_meal: str, meal_name: str) -> bool:
    return mounted and current_meal == meal_name


class State(rx.State):
    # The recipe currently shown, if any.
    recipe: Recipe | None = None
    # True while a recipe is being generated.
    loading: bool = False
    # Message shown in the error banner, empty when there is none.
    error: str = ""

    @rx.var
    def recipe_name(self) -> str:
        return self.recipe.name if self.recipe else ""

    @rx.var
    def search_url(self) -> str:
        if self.recipe is None:
            return ""
        return youtube_search_url(self.recipe.youtube_query, self.recipe.name)

    @rx.event
    async def get_meal(self):
        self.error = ""
        self.loading = True
        self.recipe = None
        # Yield here so the spinner shows before the request goes out.
        yield

        try:
            self.recipe, self.error = await fetch_recipe()
        finally:
            self.loading = False


class RecipeCardState(rx.State):
    image_url: str = ""
    loading_image: bool = False
    video_url: str = ""
    loading_video: bool = False

    # Which recipe the card is showing and whether it is still on the page.
    meal: str = ""
    mounted: bool = False

    @rx.var
    def video_id(self) -> str:
        return youtube_id(self.video_url) or ""

    @rx.var
    def embed_url(self) -> str:
        return youtube_embed_url(self.video_id) if self.video_id else ""

    @rx.event(background=True)
    async def load_assets(self, meal_name: str):
        """Fetch the dish image and tutorial video for the recipe on the card."""
        async with self:
            self.meal = meal_name
            self.mounted = True
            self.image_url = ""
            self.video_url = ""
            self.loading_image = True
            self.loading_video = True

        assets = await load_recipe_assets(meal_name)

        async with self:
            if not card_shows(self.mounted, self.meal, meal_name):
                log.debug(f"Dropping assets for {meal_name}, card no longer shows it")
                return
            self.image_url = assets.image_url
            self.video_url = assets.video_url or ""
            self.loading_image = False
            self.loading_video = False

    @rx.event
    def unmount(self):
        self.mounted = False
