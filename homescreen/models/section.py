"""Section models for home screen blocks."""

from __future__ import annotations

from enum import Enum


class SectionType(str, Enum):
    """Kinds of blocks a home screen can contain."""

    HERO_SLIDER = "HeroSlider"
    TOP_CHART = "TopChart"
    MOST_TRENDING = "MostTrending"
    CONTINUE_WATCHING = "ContinueWatching"
    MOST_POPULAR = "MostPopular"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    SectionType.HERO_SLIDER: "Hero Slider",
    SectionType.TOP_CHART: "Top Chart",
    SectionType.MOST_TRENDING: "Most Trending",
    SectionType.CONTINUE_WATCHING: "Continue Watching",
    SectionType.MOST_POPULAR: "Most Popular",
}

# Section types that keep an explicit list of movie items.
# Every other type is populated automatically, so stored items are always empty.
SECTIONS_WITH_MOVIES: frozenset[str] = frozenset({SectionType.HERO_SLIDER.value})


def keeps_movie_items(section_type: str | None) -> bool:
    """True if a section of this type stores its movie items."""
    return section_type in SECTIONS_WITH_MOVIES
