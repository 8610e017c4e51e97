"""Inline SVG icon component.

An `Icon` resolves an icon's asset path (any object with a ``path()`` method,
including the generated `IconName`), loads the SVG and returns it as an inline
``<svg>`` element sized and colored per its `IconVisualConfig`.

    Icon(IconName.Heart).color("#e11d48").with_size(IconSize.LARGE).render()
"""

from __future__ import annotations

import math
import re
from enum import Enum
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

from .config import get_assets_root


class IconLoadError(RuntimeError):
    """The icon's SVG asset could not be read or parsed."""


@runtime_checkable
class IconNamed(Protocol):
    def path(self) -> str: ...


class IconSize(Enum):
    XSMALL = "xsmall"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"

    def to_rems(self) -> float:
        return _SIZE_REMS[self]


_SIZE_REMS: dict[IconSize, float] = {
    IconSize.XSMALL: 0.75,
    IconSize.SMALL: 0.875,
    IconSize.MEDIUM: 1.0,
    IconSize.LARGE: 1.5,
    IconSize.XLARGE: 2.0,
}

# Icons with no explicit size follow the surrounding font size.
DEFAULT_CSS_SIZE = "1em"

_UNSAFE_CSS_RE = re.compile(r'["<>;{}\\]')
_CSS_LENGTH_RE = re.compile(r"^(\d+(\.\d+)?|\.\d+)(px|rem|em|%|pt|vw|vh)$")
_CSS_CLASS_RE = re.compile(r"^[A-Za-z0-9_\- ]*$")

_SVG_RE = re.compile(r"<svg\b([^>]*)>(.*)</svg>\s*$", re.S | re.I)
_ATTR_RE = re.compile(r"""([A-Za-z_:][\w:.-]*)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_REPLACED_ATTRS = {"width", "height", "class", "style"}


def _css_value(value: str | None, label: str) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError(f"{label} must not be empty")
    if _UNSAFE_CSS_RE.search(value):
        raise ValueError(f"{label} contains characters that are not allowed in an inline style")
    return value


class IconVisualConfig(BaseModel):
    """Size, color and transform applied when an icon is rendered."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    size: IconSize | None = None
    custom_size: str | None = None
    color: str | None = None
    rotation: float | None = None
    transform: str | None = None
    css_class: str = ""

    @field_validator("custom_size")
    @classmethod
    def validate_custom_size(cls, value: str | None) -> str | None:
        if value is not None and not _CSS_LENGTH_RE.match(value):
            raise ValueError("custom_size must be a CSS length such as '20px' or '1.25rem'")
        return value

    @field_validator("color")
    @classmethod
    def validate_color(cls, value: str | None) -> str | None:
        return _css_value(value, "color")

    @field_validator("transform")
    @classmethod
    def validate_transform(cls, value: str | None) -> str | None:
        return _css_value(value, "transform")

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, value: float | None) -> float | None:
        if value is not None and not math.isfinite(value):
            raise ValueError("rotation must be a finite number of radians")
        return value

    @field_validator("css_class")
    @classmethod
    def validate_css_class(cls, value: str) -> str:
        if not _CSS_CLASS_RE.match(value):
            raise ValueError("css_class may only contain letters, digits, '-', '_' and spaces")
        return value

    def css_size(self) -> str:
        if self.custom_size:
            return self.custom_size
        if self.size is not None:
            return f"{self.size.to_rems():g}rem"
        return DEFAULT_CSS_SIZE

    def css_style(self) -> str:
        parts: list[str] = ["flex-shrink:0"]
        if self.color:
            parts.append(f"color:{self.color}")
        transforms: list[str] = []
        if self.rotation is not None:
            transforms.append(f"rotate({self.rotation:g}rad)")
        if self.transform:
            transforms.append(self.transform)
        if transforms:
            parts.append(f"transform:{' '.join(transforms)}")
        return ";".join(parts)


class Icon:
    """
    Immutable icon builder; every setter returns a new `Icon`.

    `Icon` itself is not an `IconNamed`: its ``path(p)`` is a setter, so
    wrapping one icon in another is rejected.
    """

    def __init__(self, icon: IconNamed | None = None, *, config: IconVisualConfig | None = None) -> None:
        if isinstance(icon, Icon) or (icon is not None and not isinstance(icon, IconNamed)):
            raise TypeError(f"Icon expects an object with a path() method such as IconName, got {type(icon).__name__}")
        self._path = icon.path() if icon is not None else ""
        self.config = config or IconVisualConfig()

    @classmethod
    def from_path(cls, path: str) -> "Icon":
        return cls().path(path)

    @property
    def asset_path(self) -> str:
        return self._path

    def _with(self, **update: Any) -> "Icon":
        data = self.config.model_dump()
        data.update(update)
        out = Icon(config=IconVisualConfig.model_validate(data))
        out._path = self._path
        return out

    def path(self, path: str) -> "Icon":
        out = self._with()
        out._path = str(path)
        return out

    def color(self, color: str) -> "Icon":
        return self._with(color=color)

    def with_size(self, size: IconSize) -> "Icon":
        return self._with(size=size)

    def size(self, css_length: str) -> "Icon":
        return self._with(custom_size=css_length)

    def rotate(self, radians: float) -> "Icon":
        return self._with(rotation=radians)

    def transform(self, transform: str) -> "Icon":
        return self._with(transform=transform)

    def css_class(self, css_class: str) -> "Icon":
        return self._with(css_class=css_class)

    def load_svg(self, assets_root: Path | None = None) -> str:
        if not self._path:
            raise IconLoadError("Icon has no asset path")
        root = Path(assets_root) if assets_root is not None else get_assets_root()
        file_path = root / self._path
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IconLoadError(f"Failed to load icon asset {file_path}: {e}") from e

    def render(self, assets_root: Path | None = None) -> str:
        raw = self.load_svg(assets_root)
        m = _SVG_RE.search(raw)
        if not m:
            raise IconLoadError(f"Icon asset {self._path} is not an SVG document")

        attrs: list[tuple[str, str]] = []
        for k, double_quoted, single_quoted in _ATTR_RE.findall(m.group(1)):
            if k.lower() in _REPLACED_ATTRS:
                continue
            value = double_quoted or single_quoted
            attrs.append((k, value.replace('"', "&quot;")))
        size = self.config.css_size()
        attrs.append(("width", size))
        attrs.append(("height", size))
        if self.config.css_class:
            attrs.append(("class", self.config.css_class))
        attrs.append(("style", self.config.css_style()))

        # Lines are rejoined with a space: attributes of one element may span lines.
        body = " ".join(line.strip() for line in m.group(2).splitlines() if line.strip())
        attr_html = " ".join(f'{k}="{v}"' for k, v in attrs)
        return f"<svg {attr_html}>{body}</svg>"

    def __repr__(self) -> str:
        return f"Icon(path={self._path!r}, config={self.config!r})"
