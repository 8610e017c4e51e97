from __future__ import annotations

import keyword
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import IconNameCollisionError, InvalidIconNameError
from .naming import variant_name

ICON_EXTENSION = ".svg"


class IconAsset(BaseModel):
    """One SVG file discovered in the icons directory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    filename: str
    identifier: str
    path: str

    @field_validator("filename")
    @classmethod
    def validate_filename(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("filename must not contain a directory separator")
        if not value.endswith(ICON_EXTENSION) or value == ICON_EXTENSION:
            raise ValueError(f"filename must end with {ICON_EXTENSION}")
        return value

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        if not value.isidentifier() or keyword.iskeyword(value) or value.startswith("_"):
            raise ValueError(f"'{value}' is not a valid enum member name")
        return value

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        if not value:
            raise ValueError("path must not be empty")
        return value

    @property
    def display_name(self) -> str:
        return self.filename[: -len(ICON_EXTENSION)]

    @classmethod
    def from_filename(cls, filename: str, *, path_prefix: str = "icons") -> "IconAsset":
        stem = filename[: -len(ICON_EXTENSION)] if filename.endswith(ICON_EXTENSION) else filename
        try:
            identifier = variant_name(stem)
        except InvalidIconNameError as e:
            raise InvalidIconNameError(filename, e.reason) from e

        prefix = path_prefix.strip().strip("/")
        path = f"{prefix}/{filename}" if prefix else filename
        return cls(filename=filename, identifier=identifier, path=path)


@dataclass(frozen=True)
class IconEnumeration:
    """
    The closed set of icons a generation run produces.

    Assets are kept sorted by identifier; identifiers are unique.
    """

    assets: tuple[IconAsset, ...] = ()
    _by_identifier: dict[str, IconAsset] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, IconAsset] = {}
        for asset in self.assets:
            other = index.get(asset.identifier)
            if other is not None:
                raise IconNameCollisionError(asset.identifier, other.filename, asset.filename)
            index[asset.identifier] = asset
        identifiers = [a.identifier for a in self.assets]
        if identifiers != sorted(identifiers):
            raise ValueError("IconEnumeration assets must be sorted by identifier")
        object.__setattr__(self, "_by_identifier", index)

    @classmethod
    def from_assets(cls, assets: Iterable[IconAsset]) -> "IconEnumeration":
        # Collisions are checked in filename order so error messages are stable.
        by_filename = sorted(assets, key=lambda a: a.filename)
        seen: dict[str, IconAsset] = {}
        for asset in by_filename:
            other = seen.get(asset.identifier)
            if other is not None:
                raise IconNameCollisionError(asset.identifier, other.filename, asset.filename)
            seen[asset.identifier] = asset
        return cls(assets=tuple(sorted(by_filename, key=lambda a: a.identifier)))

    def count(self) -> int:
        return len(self.assets)

    def all(self) -> Iterator[str]:
        return iter([a.identifier for a in self.assets])

    def name(self, identifier: str) -> str:
        return self._by_identifier[identifier].display_name

    def path(self, identifier: str) -> str:
        return self._by_identifier[identifier].path
