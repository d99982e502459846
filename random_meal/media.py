import re
from urllib.parse import quote

YOUTUBE_ID_PATTERN = re.compile(r"^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*")
YOUTUBE_ID_LENGTH = 11
PLACEHOLDER_IMAGE_URL = "https://placehold.co/600x400"

# Characters encodeURIComponent leaves alone, so links match what browsers produce.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def is_youtube_url(uri: str | None) -> bool:
    return bool(uri) and ("youtube.com" in uri or "youtu.be" in uri)


def youtube_id(url: str | None) -> str | None:
    """Extract the video id from a YouTube watch, short or embed URL."""
    if not url:
        return None
    match = YOUTUBE_ID_PATTERN.match(url)
    if match and len(match.group(2)) == YOUTUBE_ID_LENGTH:
        return match.group(2)
    return None


def youtube_embed_url(video_id: str) -> str:
    return f"https://www.youtube.com/embed/{video_id}"


def youtube_search_url(query: str | None, recipe_name: str) -> str:
    search = query or f"{recipe_name} recipe"
    return f"https://www.youtube.com/results?search_query={encode_uri_component(search)}"


def placeholder_image_url(recipe_name: str | None = None) -> str:
    if not recipe_name:
        return PLACEHOLDER_IMAGE_URL
    return f"{PLACEHOLDER_IMAGE_URL}?text={encode_uri_component(recipe_name)}"
