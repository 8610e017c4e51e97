from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from .errors import IconGenerationError
from .models import ICON_EXTENSION, IconAsset, IconEnumeration


def _py_str(s: str) -> str:
    # JSON string literals are valid Python literals and always double-quoted.
    return json.dumps(s)


def scan_icons_dir(icons_dir: Path, *, path_prefix: str = "icons") -> IconEnumeration:
    icons_dir = Path(icons_dir)
    try:
        if not icons_dir.exists():
            raise IconGenerationError(f"Icons directory not found: {icons_dir}")
        if not icons_dir.is_dir():
            raise IconGenerationError(f"Icons path is not a directory: {icons_dir}")
        entries = sorted(p for p in icons_dir.iterdir() if p.suffix == ICON_EXTENSION and p.is_file())
    except OSError as e:
        raise IconGenerationError(f"Failed to read icons directory {icons_dir}: {e}") from e

    assets = [IconAsset.from_filename(p.name, path_prefix=path_prefix) for p in entries]
    return IconEnumeration.from_assets(assets)


def render_module(enumeration: IconEnumeration) -> str:
    n = enumeration.count()
    lines: list[str] = [
        "# Generated by lucide_icons.codegen from the SVG files in the icons directory.",
        "# Do not edit by hand: rerun `python scripts/gen_icon_names.py` instead.",
        "from __future__ import annotations",
        "",
        "from enum import Enum",
        "from typing import Iterator",
        "",
        "",
        "class IconName(str, Enum):",
        '    """',
        "    All available Lucide icon names.",
        "",
        "    Member values are the display names (the SVG file stems).",
        '    """',
        "",
    ]
    for asset in enumeration.assets:
        lines.append(f"    {asset.identifier} = {_py_str(asset.display_name)}")
    if n:
        lines.append("")
    lines.extend(
        [
            "    def path(self) -> str:",
            '        """Return the asset path for this icon."""',
            "        return _PATHS[self]",
            "",
            "    def __str__(self) -> str:",
            "        return self.value",
            "",
            "",
            "_PATHS: dict[IconName, str] = {",
        ]
    )
    for asset in enumeration.assets:
        lines.append(f"    IconName.{asset.identifier}: {_py_str(asset.path)},")
    lines.extend(["}", "", "_ALL: tuple[IconName, ...] = ("])
    for asset in enumeration.assets:
        lines.append(f"    IconName.{asset.identifier},")
    lines.extend(
        [
            ")",
            "",
            "",
            "def count() -> int:",
            f'    """Return the total number of available icons ({n})."""',
            f"    return {n}",
            "",
            "",
            "def all() -> Iterator[IconName]:",
            '    """Return an iterator over all icon names, in identifier order."""',
            "    return iter(_ALL)",
            "",
            "",
            "def name(icon: IconName) -> str:",
            '    """Return the display name (kebab-case) for an icon."""',
            "    return IconName(icon).value",
            "",
            "",
            "def path(icon: IconName) -> str:",
            '    """Return the asset path for an icon."""',
            "    return _PATHS[IconName(icon)]",
            "",
        ]
    )
    return "\n".join(lines)


def _write_atomic(out_path: Path, content: str) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{out_path.name}.", suffix=".tmp", dir=out_path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp, out_path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


def generate(icons_dir: Path, out_path: Path, *, path_prefix: str = "icons") -> IconEnumeration:
    """
    Run one generation: scan `icons_dir` and replace `out_path` with the rendered module.

    Any failure raises before the output file is touched.
    """
    enumeration = scan_icons_dir(icons_dir, path_prefix=path_prefix)
    content = render_module(enumeration)
    try:
        _write_atomic(Path(out_path), content)
    except OSError as e:
        raise IconGenerationError(f"Failed to write {out_path}: {e}") from e
    return enumeration


def is_up_to_date(icons_dir: Path, out_path: Path, *, path_prefix: str = "icons") -> bool:
    out_path = Path(out_path)
    expected = render_module(scan_icons_dir(icons_dir, path_prefix=path_prefix))
    try:
        current = out_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return False
    except (OSError, UnicodeDecodeError) as e:
        raise IconGenerationError(f"Failed to read generated module {out_path}: {e}") from e
    return current == expected
