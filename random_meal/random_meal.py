"""Random meal generator: a Reflex page backed by Gemini."""
import logging
import os

import reflex as rx

from random_meal import style
from random_meal.media import PLACEHOLDER_IMAGE_URL
from random_meal.state import RecipeCardState, State

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

VIDEO_PLAYER_PERMISSIONS = ("accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; "
                            "picture-in-picture; web-share")


def loading_placeholder(message: str, aspect_ratio: str = "1", border_radius: str = "0") -> rx.Component:
    return rx.flex(
        rx.spinner(size="3"),
        rx.text(message, size="2", weight="medium"),
        direction="column",
        align="center",
        justify="center",
        spacing="2",
        aspect_ratio=aspect_ratio,
        border_radius=border_radius,
        style=style.placeholder_style,
    )


def get_meal_button() -> rx.Component:
    return rx.button(
        rx.cond(
            State.loading,
            rx.hstack(rx.spinner(size="3"), rx.text("Preparing..."), align="center"),
            rx.hstack(rx.icon("utensils_crossed", size=24), rx.text("Get Meal"), align="center"),
        ),
        on_click=State.get_meal,
        disabled=State.loading,
        size="4",
        style=style.button_style,
    )


def header() -> rx.Component:
    return rx.vstack(
        rx.heading("Are you feeling hungry?", as_="h1", style=style.title_style),
        rx.text("Get a random meal now by clicking the button below", style=style.subtitle_style),
        get_meal_button(),
        rx.cond(State.error, rx.box(State.error, style=style.error_style)),
        align="center",
        spacing="5",
        max_width="42em",
        margin_bottom="3em",
    )


def meal_spinner() -> rx.Component:
    return rx.vstack(
        rx.spinner(size="3"),
        rx.text("Finding a delicious meal for you...", color=rx.color("gray", 10), weight="medium"),
        align="center",
        padding_y="5em",
    )


def dish_image() -> rx.Component:
    return rx.box(
        rx.cond(
            RecipeCardState.loading_image,
            loading_placeholder("Cooking up the image..."),
            rx.image(
                src=rx.cond(RecipeCardState.image_url, RecipeCardState.image_url, PLACEHOLDER_IMAGE_URL),
                alt=State.recipe.name,
                width="100%",
                height="100%",
                object_fit="cover",
            ),
        ),
        style=style.card_style,
    )


def recipe_meta() -> rx.Component:
    return rx.vstack(
        rx.heading(State.recipe.name, as_="h2", style=style.meal_title_style),
        rx.hstack(
            rx.text(rx.text.span("Category: ", style=style.label_style), State.recipe.category,
                    style=style.detail_text_style),
            rx.text(rx.text.span("Area: ", style=style.label_style), State.recipe.area,
                    style=style.detail_text_style),
            spacing="4",
            wrap="wrap",
        ),
        rx.cond(
            State.recipe.tags,
            rx.text(rx.text.span("Tags: ", style=style.label_style), State.recipe.tags,
                    style=style.detail_text_style),
        ),
        spacing="2",
    )


def ingredients() -> rx.Component:
    return rx.box(
        rx.heading("Ingredients", as_="h3", style=style.section_heading_style),
        rx.grid(
            rx.foreach(
                State.recipe.ingredients,
                lambda item: rx.hstack(
                    rx.text(item.ingredient, weight="medium"),
                    rx.text(item.measure, style=style.detail_text_style),
                    justify="between",
                    style=style.ingredient_style,
                ),
            ),
            columns=rx.breakpoints(initial="1", sm="2"),
            spacing_x="6",
            spacing_y="3",
        ),
        style=style.card_style,
        padding="2em",
    )


def instructions() -> rx.Component:
    return rx.box(
        rx.heading("Instructions", as_="h3", style=style.section_heading_style),
        rx.box(rx.text(State.recipe.instructions), style=style.card_style | style.instructions_style),
        width="100%",
        margin_top="6em",
    )


def video_player() -> rx.Component:
    return rx.box(
        rx.el.iframe(
            src=RecipeCardState.embed_url,
            title="YouTube video player",
            allow=VIDEO_PLAYER_PERMISSIONS,
            custom_attrs={"allowFullScreen": True},
            position="absolute",
            top="0",
            left="0",
            width="100%",
            height="100%",
        ),
        position="relative",
        padding_bottom="56.25%",
        height="0",
        overflow="hidden",
        border_radius="0.75em",
        background_color="black",
    )


def youtube_link() -> rx.Component:
    return rx.vstack(
        rx.text("We couldn't embed the video directly, but you can still watch it on YouTube.",
                color=rx.color("gray", 10)),
        rx.link(
            rx.hstack(rx.icon("circle_play", size=28), rx.text("Watch on YouTube"), align="center"),
            href=State.search_url,
            is_external=True,
            style=style.youtube_button_style,
        ),
        align="center",
        spacing="4",
    )


def video_section() -> rx.Component:
    return rx.box(
        rx.center(rx.heading("Video Recipe", as_="h3", style=style.section_heading_style)),
        rx.box(
            rx.cond(
                RecipeCardState.loading_video,
                loading_placeholder("Finding the best video tutorial...", aspect_ratio="16 / 9",
                                    border_radius="0.75em"),
                rx.cond(RecipeCardState.video_id, video_player(), youtube_link()),
            ),
            width="100%",
            max_width="56em",
            margin_x="auto",
        ),
        width="100%",
        padding_top="2em",
        padding_bottom="3em",
    )


def recipe_card() -> rx.Component:
    return rx.box(
        rx.grid(
            rx.vstack(dish_image(), recipe_meta(), spacing="5"),
            ingredients(),
            columns=rx.breakpoints(initial="1", lg="2"),
            spacing="8",
            align_items="start",
        ),
        instructions(),
        video_section(),
        on_mount=RecipeCardState.load_assets(State.recipe_name),
        on_unmount=RecipeCardState.unmount,
        width="100%",
        max_width="64em",
        margin_x="auto",
        margin_top="3em",
    )


def index() -> rx.Component:
    return rx.box(
        rx.center(
            rx.vstack(
                header(),
                rx.cond(State.loading, meal_spinner(), rx.cond(State.recipe, recipe_card())),
                align="center",
                width="100%",
            )
        ),
        style=style.page_style,
    )


logging.basicConfig(level=LOG_LEVEL)

app = rx.App()
app.add_page(index, title="Random Meal")
