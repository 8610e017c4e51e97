"""Lucide icons: generated IconName enum and an inline SVG icon component."""

from .icon import Icon, IconLoadError, IconNamed, IconSize, IconVisualConfig
from .icons_generated import IconName

__all__ = [
    "Icon",
    "IconLoadError",
    "IconName",
    "IconNamed",
    "IconSize",
    "IconVisualConfig",
]
