"""Screen configuration form schema."""

from __future__ import annotations

from homescreen.schemas.property import JsonSchema

screen_configuration_json_schema = JsonSchema.model_validate(
    {
        "type": "object",
        "properties": {
            "name": {
                "title": "Name",
                "description": "Configuration name displayed in the UI",
                "type": "string",
            },
            "description": {
                "title": "Description",
                "description": "Brief description of this screen configuration",
                "type": "string",
            },
            "sections": {
                "title": "Sections",
                "description": "Section IDs included in this configuration",
                "type": "array",
                "items": {"type": "string"},
            },
        },
        "required": ["name", "sections"],
    }
)
