"""Section form schema.

Only hero sliders pick their movies by hand, so ``items`` lives in the
HeroSlider branch of the ``type`` dependency.
"""

from __future__ import annotations

from homescreen.models.section import SectionType
from homescreen.schemas.property import JsonSchema

_AUTO_POPULATED = [t.value for t in SectionType if t is not SectionType.HERO_SLIDER]

section_json_schema = JsonSchema.model_validate(
    {
        "type": "object",
        "properties": {
            "title": {"title": "Title", "type": "string"},
            "description": {"title": "Description", "type": "string"},
            "design": {
                "title": "Design Image",
                "description": "This image should show how this section should look",
                "type": "string",
            },
            "type": {
                "title": "Section Type",
                "type": "string",
                "enum": [t.value for t in SectionType],
                "enumNames": [t.label for t in SectionType],
            },
        },
        "required": ["title", "type"],
        "dependencies": {
            "type": {
                "oneOf": [
                    {
                        "properties": {
                            "type": {"enum": [SectionType.HERO_SLIDER.value]},
                            "items": {
                                "title": "Movies",
                                "type": "array",
                                "items": {"type": "string"},
                                "uniqueItems": True,
                            },
                        },
                        "required": ["items"],
                    },
                    {
                        "properties": {
                            "type": {"enum": _AUTO_POPULATED},
                        },
                    },
                ]
            }
        },
    }
)
