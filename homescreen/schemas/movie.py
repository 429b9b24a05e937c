"""Movie form schema."""

from __future__ import annotations

from homescreen.schemas.property import JsonSchema

movie_json_schema = JsonSchema.model_validate(
    {
        "type": "object",
        "properties": {
            "title": {
                "title": "Title",
                "description": "Movie title displayed in the UI",
                "type": "string",
            },
            "description": {
                "title": "Description",
                "description": "Brief synopsis of the movie",
                "type": "string",
            },
            "poster": {
                "title": "Poster URL",
                "description": "URL to the movie poster image",
                "type": "string",
            },
            "tags": {
                "title": "Tags",
                "description": "Categories or genres that the movie belongs to",
                "type": "array",
                "items": {"type": "string"},
            },
        },
        "required": ["title", "description", "poster"],
    }
)
