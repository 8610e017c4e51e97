"""Deterministic IconName code generation from a directory of SVG files."""

from .errors import IconGenerationError, IconNameCollisionError, InvalidIconNameError
from .generator import generate, is_up_to_date, render_module, scan_icons_dir
from .models import ICON_EXTENSION, IconAsset, IconEnumeration
from .naming import split_words, to_upper_camel_case, variant_name

__all__ = [
    "ICON_EXTENSION",
    "IconAsset",
    "IconEnumeration",
    "IconGenerationError",
    "IconNameCollisionError",
    "InvalidIconNameError",
    "generate",
    "is_up_to_date",
    "render_module",
    "scan_icons_dir",
    "split_words",
    "to_upper_camel_case",
    "variant_name",
]
