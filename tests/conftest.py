from __future__ import annotations

import importlib.util
import itertools
from pathlib import Path
from types import ModuleType

import pytest

SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2"><path d="M5 12h14" /></svg>\n'
)

_module_ids = itertools.count()


@pytest.fixture
def make_icons_dir(tmp_path: Path):
    def _make(*names: str, extra: tuple[str, ...] = ()) -> Path:
        icons_dir = tmp_path / "icons"
        icons_dir.mkdir(exist_ok=True)
        for n in names:
            (icons_dir / n).write_text(SVG, encoding="utf-8")
        for n in extra:
            (icons_dir / n).write_text("not an icon", encoding="utf-8")
        return icons_dir

    return _make


@pytest.fixture
def load_generated():
    def _load(path: Path) -> ModuleType:
        name = f"_generated_icons_{next(_module_ids)}"
        spec = importlib.util.spec_from_file_location(name, path)
        assert spec is not None and spec.loader is not None
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load
