# Generated by lucide_icons.codegen from the SVG files in the icons directory.
# Do not edit by hand: rerun `python scripts/gen_icon_names.py` instead.
from __future__ import annotations

from enum import Enum
from typing import Iterator


class IconName(str, Enum):
    """
    All available Lucide icon names.

    Member values are the display names (the SVG file stems).
    """

    ArrowLeft = "arrow-left"
    ArrowRight = "arrow-right"
    Check = "check"
    ChevronRight = "chevron-right"
    Circle = "circle"
    Heart = "heart"
    Search = "search"
    Star = "star"
    X = "x"

    def path(self) -> str:
        """Return the asset path for this icon."""
        return _PATHS[self]

    def __str__(self) -> str:
        return self.value


_PATHS: dict[IconName, str] = {
    IconName.ArrowLeft: "icons/arrow-left.svg",
    IconName.ArrowRight: "icons/arrow-right.svg",
    IconName.Check: "icons/check.svg",
    IconName.ChevronRight: "icons/chevron-right.svg",
    IconName.Circle: "icons/circle.svg",
    IconName.Heart: "icons/heart.svg",
    IconName.Search: "icons/search.svg",
    IconName.Star: "icons/star.svg",
    IconName.X: "icons/x.svg",
}

_ALL: tuple[IconName, ...] = (
    IconName.ArrowLeft,
    IconName.ArrowRight,
    IconName.Check,
    IconName.ChevronRight,
    IconName.Circle,
    IconName.Heart,
    IconName.Search,
    IconName.Star,
    IconName.X,
)


def count() -> int:
    """Return the total number of available icons (9)."""
    return 9


def all() -> Iterator[IconName]:
    """Return an iterator over all icon names, in identifier order."""
    return iter(_ALL)


def name(icon: IconName) -> str:
    """Return the display name (kebab-case) for an icon."""
    return IconName(icon).value


def path(icon: IconName) -> str:
    """Return the asset path for an icon."""
    return _PATHS[IconName(icon)]
