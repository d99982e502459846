import base64

import pytest

from random_meal.services import gemini_service
from random_meal.services.gemini_service import (
    RecipeAssets,
    RecipeGenerationError,
    generate_dish_image,
    get_client,
    get_random_meal,
    get_recipe_video,
    load_recipe_assets,
)
from tests.fakes import (
    FakeClient,
    grounding_response,
    image_response,
    inline_part,
    is_search_call,
    text_response,
)

YOUTUBE_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
PNG_BYTES = b"\x89PNG\r\n"


@pytest.fixture(autouse=True)
def clear_client_cache():
    get_client.cache_clear()
    yield
    get_client.cache_clear()


@pytest.mark.asyncio
async def test_get_random_meal(moussaka_json: str) -> None:
    client = FakeClient(lambda **kwargs: text_response(moussaka_json))

    recipe = await get_random_meal(client=client)

    assert recipe.name == "Moussaka"
    assert len(recipe.ingredients) == 3
    call = client.models.calls[0]
    assert call["model"] == gemini_service.RECIPE_MODEL
    assert call["config"].response_mime_type == "application/json"
    assert call["config"].temperature == 1.0
    assert "TheMealDB" in call["config"].system_instruction
    assert set(call["config"].response_schema.required) == {
        "strMeal", "strCategory", "strArea", "strInstructions", "ingredients", "youtubeQuery"
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ("", None))
async def test_get_random_meal_empty_response(text) -> None:
    client = FakeClient(lambda **kwargs: text_response(text))
    with pytest.raises(RecipeGenerationError, match="No response"):
        await get_random_meal(client=client)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "text",
    (
        "not json at all",
        '{"strMeal": "Moussaka"}',
        "null",
        "42",
        '"strMeal strCategory strArea strInstructions ingredients youtubeQuery"',
    ),
)
async def test_get_random_meal_malformed_response(text: str) -> None:
    client = FakeClient(lambda **kwargs: text_response(text))
    with pytest.raises(RecipeGenerationError, match="Malformed"):
        await get_random_meal(client=client)


@pytest.mark.asyncio
async def test_get_random_meal_propagates_api_errors() -> None:
    client = FakeClient(lambda **kwargs: ConnectionError("quota exceeded"))
    with pytest.raises(ConnectionError):
        await get_random_meal(client=client)


@pytest.mark.asyncio
async def test_get_random_meal_logs_missing_credentials(monkeypatch, caplog) -> None:
    monkeypatch.setattr(gemini_service, "API_KEY", None)
    monkeypatch.setattr(gemini_service, "PROJECT_ID", None)

    with pytest.raises(RuntimeError):
        await get_random_meal()

    assert "Error generating recipe" in caplog.text


@pytest.mark.asyncio
async def test_generate_dish_image_returns_data_url() -> None:
    client = FakeClient(lambda **kwargs: image_response(inline_part(None), inline_part(PNG_BYTES, "image/jpeg")))

    got = await generate_dish_image("Moussaka", client=client)

    assert got == "data:image/jpeg;base64," + base64.b64encode(PNG_BYTES).decode()
    call = client.models.calls[0]
    assert call["model"] == gemini_service.IMAGE_MODEL
    assert "Moussaka" in call["contents"]


@pytest.mark.asyncio
async def test_generate_dish_image_defaults_to_png() -> None:
    client = FakeClient(lambda **kwargs: image_response(inline_part(b"img")))
    got = await generate_dish_image("Moussaka", client=client)
    assert got.startswith("data:image/png;base64,")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    (
        image_response(),
        image_response(inline_part(None)),
        text_response("Here is a description instead of a picture."),
    ),
)
async def test_generate_dish_image_without_image(response) -> None:
    client = FakeClient(lambda **kwargs: response)
    assert await generate_dish_image("Moussaka", client=client) is None


@pytest.mark.asyncio
async def test_generate_dish_image_swallows_errors() -> None:
    client = FakeClient(lambda **kwargs: RuntimeError("model overloaded"))
    assert await generate_dish_image("Moussaka", client=client) is None


@pytest.mark.asyncio
async def test_get_recipe_video_picks_first_youtube_chunk() -> None:
    client = FakeClient(
        lambda **kwargs: grounding_response(
            "https://www.bbcgoodfood.com/recipes/moussaka", None, YOUTUBE_URL, "https://youtu.be/aaaaaaaaaaa"
        )
    )

    got = await get_recipe_video("Moussaka", client=client)

    assert got == YOUTUBE_URL
    call = client.models.calls[0]
    assert call["model"] == gemini_service.VIDEO_MODEL
    assert call["config"].tools[0].google_search is not None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    (
        grounding_response(),
        grounding_response("https://www.bbcgoodfood.com/recipes/moussaka"),
        text_response("No grounding here."),
    ),
)
async def test_get_recipe_video_without_youtube(response) -> None:
    client = FakeClient(lambda **kwargs: response)
    assert await get_recipe_video("Moussaka", client=client) is None


@pytest.mark.asyncio
async def test_get_recipe_video_swallows_errors() -> None:
    client = FakeClient(lambda **kwargs: TimeoutError())
    assert await get_recipe_video("Moussaka", client=client) is None


@pytest.mark.asyncio
async def test_load_recipe_assets() -> None:
    def respond(**kwargs):
        if is_search_call(kwargs):
            return grounding_response(YOUTUBE_URL)
        return image_response(inline_part(b"img", "image/png"))

    client = FakeClient(respond)

    got = await load_recipe_assets("Moussaka", client=client)

    assert got.image_url.startswith("data:image/png;base64,")
    assert got.video_url == YOUTUBE_URL
    assert len(client.models.calls) == 2


@pytest.mark.asyncio
async def test_load_recipe_assets_degrades_to_placeholder() -> None:
    client = FakeClient(lambda **kwargs: RuntimeError("service unavailable"))

    got = await load_recipe_assets("Beef Wellington", client=client)

    assert got == RecipeAssets(image_url="https://placehold.co/600x400?text=Beef%20Wellington", video_url=None)


@pytest.mark.asyncio
async def test_load_recipe_assets_survives_unexpected_errors(monkeypatch) -> None:
    async def broken(*args, **kwargs):
        raise KeyError("candidates")

    monkeypatch.setattr(gemini_service, "generate_dish_image", broken)
    monkeypatch.setattr(gemini_service, "get_recipe_video", broken)

    got = await load_recipe_assets("Moussaka", client=FakeClient(lambda **kwargs: None))

    assert got.image_url == "https://placehold.co/600x400?text=Moussaka"
    assert got.video_url is None


def test_get_client_with_api_key(monkeypatch) -> None:
    created = []
    monkeypatch.setattr(gemini_service, "API_KEY", "test-key")
    monkeypatch.setattr(gemini_service, "PROJECT_ID", None)
    monkeypatch.setattr(gemini_service.genai, "Client", lambda **kwargs: created.append(kwargs) or object())

    client = get_client()

    assert created == [{"api_key": "test-key"}]
    assert get_client() is client


def test_get_client_with_vertex_project(monkeypatch) -> None:
    created = []
    monkeypatch.setattr(gemini_service, "API_KEY", None)
    monkeypatch.setattr(gemini_service, "PROJECT_ID", "my-project")
    monkeypatch.setattr(gemini_service, "LOCATION", "europe-north1")
    monkeypatch.setattr(gemini_service.genai, "Client", lambda **kwargs: created.append(kwargs) or object())

    get_client()

    assert created == [{"vertexai": True, "project": "my-project", "location": "europe-north1"}]


def test_get_client_without_credentials(monkeypatch) -> None:
    monkeypatch.setattr(gemini_service, "API_KEY", None)
    monkeypatch.setattr(gemini_service, "PROJECT_ID", None)
    with pytest.raises(RuntimeError, match="GEMINI_API_KEY"):
        get_client()
