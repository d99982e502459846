# style.py
import reflex as rx

shadow = "rgba(0, 0, 0, 0.15) 0px 2px 8px"
brown = "#2d2013"

page_style = dict(
    min_height="100vh",
    background_color=rx.color("gray", 2),
    padding_y="4em",
    padding_x="1em",
)
title_style = dict(
    font_size=["2.25em", "3em"],
    font_weight="800",
    text_align="center",
)
subtitle_style = dict(
    font_size="1.25em",
    color=rx.color("gray", 11),
    text_align="center",
)
button_style = dict(
    background_color=brown,
    color="white",
    padding_x="2em",
    padding_y="1.5em",
    font_weight="bold",
    font_size="1.1em",
    text_transform="uppercase",
    letter_spacing="0.05em",
    box_shadow=shadow,
    _hover={"background_color": "#3e2f20"},
)
error_style = dict(
    margin_top="1em",
    padding="1em",
    background_color=rx.color("red", 3),
    color=rx.color("red", 11),
    border=f"1px solid {rx.color('red', 6)}",
    border_radius="0.5em",
)
card_style = dict(
    background_color="white",
    border=f"1px solid {rx.color('gray', 4)}",
    border_radius="1em",
    box_shadow=shadow,
    overflow="hidden",
    width="100%",
)
placeholder_style = dict(
    width="100%",
    background_color=rx.color("gray", 3),
    color=rx.color("gray", 9),
)
meal_title_style = dict(font_size="2em", font_weight="bold")
label_style = dict(font_weight="bold", color=rx.color("gray", 12))
detail_text_style = dict(font_size="0.9em", color=rx.color("gray", 11))
section_heading_style = dict(font_size="1.75em", font_weight="bold", margin_bottom="1em")
ingredient_style = dict(
    width="100%",
    border_bottom=f"1px dashed {rx.color('gray', 5)}",
    padding_bottom="0.25em",
)
instructions_style = dict(
    white_space="pre-wrap",
    line_height="2",
    font_size="1.1em",
    padding="2em",
)
youtube_button_style = dict(
    background_color="#dc2626",
    color="white",
    padding_x="2em",
    padding_y="1em",
    border_radius="9999px",
    font_weight="bold",
    font_size="1.1em",
    box_shadow=shadow,
    _hover={"background_color": "#b91c1c", "text_decoration": "none"},
)
